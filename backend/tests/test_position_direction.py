from __future__ import annotations

import sys
import unittest
from pathlib import Path


BACKEND_DIR = Path(__file__).resolve().parents[1]
if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))


from checkerboard.board import CheckerBoard  # noqa: E402
from checkerboard.direction import ALL_DIRECTIONS, Direction, getDirection  # noqa: E402
from checkerboard.position import Position  # noqa: E402


class PositionTests(unittest.TestCase):
    def test_equality_and_hashing_are_structural(self) -> None:
        self.assertEqual(Position(3, 4), Position(3, 4))
        self.assertNotEqual(Position(3, 4), Position(4, 3))
        self.assertEqual(len({Position(1, 1), Position(1, 1), Position(1, 3)}), 2)

    def test_immutable(self) -> None:
        pos = Position(2, 2)
        with self.assertRaises(AttributeError):
            pos.row = 5  # type: ignore[misc]

    def test_arithmetic(self) -> None:
        self.assertEqual(Position(2, 3) + Position(1, -1), Position(3, 2))
        self.assertEqual(Position(-1, 1).doubled(), Position(-2, 2))

    def test_bounds_and_tile_colour(self) -> None:
        self.assertTrue(Position(0, 0).is_valid(8, 8))
        self.assertTrue(Position(7, 7).is_valid(8, 8))
        self.assertFalse(Position(8, 0).is_valid(8, 8))
        self.assertFalse(Position(0, -1).is_valid(8, 8))
        self.assertTrue(Position(0, 0).is_playable)
        self.assertFalse(Position(0, 1).is_playable)

    def test_string_and_tuple_forms(self) -> None:
        self.assertEqual(str(Position(5, 1)), "5,1")
        self.assertEqual(Position.of((5, 1)), Position(5, 1))
        self.assertEqual(Position(5, 1).as_tuple(), (5, 1))


class DirectionTests(unittest.TestCase):
    def test_unit_offsets(self) -> None:
        self.assertEqual(getDirection(Direction.NE), Position(-1, 1))
        self.assertEqual(getDirection(Direction.NW), Position(-1, -1))
        self.assertEqual(getDirection(Direction.SE), Position(1, 1))
        self.assertEqual(getDirection(Direction.SW), Position(1, -1))

    def test_board_exposes_the_same_lookup(self) -> None:
        for direction in ALL_DIRECTIONS:
            self.assertEqual(CheckerBoard.getDirection(direction), direction.offset)

    def test_lookup_accepts_labels(self) -> None:
        self.assertEqual(getDirection("SW"), Position(1, -1))

    def test_opposites(self) -> None:
        self.assertIs(Direction.NE.opposite, Direction.SW)
        self.assertIs(Direction.SW.opposite, Direction.NE)
        self.assertIs(Direction.NW.opposite, Direction.SE)
        self.assertIs(Direction.SE.opposite, Direction.NW)
        for direction in ALL_DIRECTIONS:
            self.assertEqual(direction.offset + direction.opposite.offset, Position(0, 0))


if __name__ == "__main__":
    unittest.main()
