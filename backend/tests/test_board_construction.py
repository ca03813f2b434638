from __future__ import annotations

import sys
import unittest
from pathlib import Path


BACKEND_DIR = Path(__file__).resolve().parents[1]
if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))


from _support import grid_to_text  # noqa: E402
from checkerboard.board import CheckerBoard, Representation, newBoard  # noqa: E402
from checkerboard.config import GameConfig  # noqa: E402
from checkerboard.direction import Direction  # noqa: E402
from checkerboard.errors import InvalidDimension, InvalidPlayerSymbol  # noqa: E402
from checkerboard.position import Position  # noqa: E402
from checkerboard.symbols import EMPTY_POS, NON_PLAYABLE  # noqa: E402

STARTING_8X8 = [
    "x*x*x*x*",
    "*x*x*x*x",
    "x*x*x*x*",
    "* * * * ",
    " * * * *",
    "*o*o*o*o",
    "o*o*o*o*",
    "*o*o*o*o",
]


class BoardConstructionTests(unittest.TestCase):
    def test_every_valid_dimension_starts_with_full_sides(self) -> None:
        for representation in Representation:
            for dimension in (8, 10, 12, 14, 16):
                with self.subTest(representation=representation, dimension=dimension):
                    board = newBoard(dimension, representation=representation)
                    rows_per_side = (dimension - 2) // 2
                    expected = rows_per_side * (dimension // 2)

                    self.assertEqual(board.getRowCount(), dimension)
                    self.assertEqual(board.getColCount(), dimension)
                    self.assertEqual(board.getPieceCounts(), {"x": expected, "o": expected})

                    for row in range(dimension):
                        for col in range(dimension):
                            pos = Position(row, col)
                            symbol = board.whatsAtPos(pos)
                            if not pos.is_playable:
                                self.assertEqual(symbol, NON_PLAYABLE)
                            elif row < rows_per_side:
                                self.assertEqual(symbol, "x")
                            elif row < rows_per_side + 2:
                                self.assertEqual(symbol, EMPTY_POS)
                            else:
                                self.assertEqual(symbol, "o")

    def test_invalid_dimensions_are_rejected(self) -> None:
        for representation in Representation:
            for dimension in (0, 6, 7, 9, 15, 17, 18, -8):
                with self.subTest(representation=representation, dimension=dimension):
                    with self.assertRaises(InvalidDimension) as ctx:
                        newBoard(dimension, representation=representation)
                    self.assertEqual(str(ctx.exception), "Invalid board size.")
                    self.assertIsInstance(ctx.exception, ValueError)

    def test_starting_layout_8x8(self) -> None:
        for representation in Representation:
            with self.subTest(representation=representation):
                board = newBoard(8, representation=representation)
                self.assertEqual(str(board), grid_to_text(STARTING_8X8))
                self.assertEqual(board.whatsAtPos(Position(0, 0)), "x")
                self.assertEqual(board.whatsAtPos(Position(7, 7)), "o")
                self.assertEqual(board.whatsAtPos(Position(7, 0)), NON_PLAYABLE)
                self.assertEqual(board.whatsAtPos(Position(0, 7)), NON_PLAYABLE)
                self.assertEqual(board.whatsAtPos(Position(1, 6)), NON_PLAYABLE)

    def test_initial_viable_directions(self) -> None:
        expected = {
            EMPTY_POS: [Direction.SE, Direction.SW, Direction.NE, Direction.NW],
            "x": [Direction.SE, Direction.SW],
            "X": [Direction.SE, Direction.NW, Direction.SW, Direction.NE],
            "o": [Direction.NE, Direction.NW],
            "O": [Direction.NE, Direction.SW, Direction.NW, Direction.SE],
        }
        for representation in Representation:
            with self.subTest(representation=representation):
                board = newBoard(8, representation=representation)
                self.assertEqual(board.getViableDirections(), expected)

    def test_custom_player_symbols(self) -> None:
        board = newBoard(10, representation=Representation.SPARSE, player_one="r", player_two="b")
        self.assertEqual(board.whatsAtPos(Position(0, 0)), "r")
        self.assertEqual(board.whatsAtPos(Position(9, 9)), "b")
        self.assertEqual(board.getPieceCounts(), {"r": 20, "b": 20})
        self.assertEqual(board.getViableDirections()["R"], [Direction.SE, Direction.NW, Direction.SW, Direction.NE])

    def test_invalid_player_symbols_are_rejected(self) -> None:
        for one, two in (("x", "x"), ("X", "o"), ("*", "o"), ("x", " "), ("xy", "o"), ("1", "o")):
            with self.subTest(one=one, two=two):
                with self.assertRaises(InvalidPlayerSymbol):
                    GameConfig(8, one, two)

    def test_empty_board_has_no_pieces(self) -> None:
        board = CheckerBoard.empty(GameConfig(12), Representation.SPARSE)
        self.assertEqual(board.getPieceCounts(), {"x": 0, "o": 0})
        self.assertEqual(board.getRowCount(), 12)
        self.assertIn("x", board.getViableDirections())


class GameConfigTests(unittest.TestCase):
    def test_derived_values(self) -> None:
        config = GameConfig(12, "a", "b")
        self.assertEqual(config.rows_per_side, 5)
        self.assertEqual(config.pieces_per_row, 6)
        self.assertEqual(config.starting_count, 30)
        self.assertEqual(config.owner_of("A"), "a")
        self.assertIsNone(config.owner_of(EMPTY_POS))
        self.assertEqual(config.opponent_of("B"), "a")
        self.assertEqual(config.promotion_row("a"), 11)
        self.assertEqual(config.promotion_row("B"), 0)
        self.assertEqual(config.forward_directions("b"), (Direction.NE, Direction.NW))


if __name__ == "__main__":
    unittest.main()
