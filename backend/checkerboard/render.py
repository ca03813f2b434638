from __future__ import annotations

from typing import TYPE_CHECKING

from .position import Position

if TYPE_CHECKING:  # pragma: no cover
    from .board import CheckerBoard


def _label(index: int) -> str:
    # two characters wide: single digits get a pad
    return f" {index}" if index < 10 else str(index)


def render_board(board: "CheckerBoard") -> str:
    """Return the text dump of ``board``.

    The first line holds the column indices, each following line a row index
    and one ``|<symbol> `` cell per column. Only ``whatsAtPos`` is consulted,
    so both storage strategies print the same text for the same state.
    """
    lines: list[str] = []
    header = "|  " + "".join(f"|{_label(col)}" for col in range(board.getColCount())) + "|"
    lines.append(header)

    for row in range(board.getRowCount()):
        row_label = f"{row} " if row < 10 else str(row)
        cells = "".join(
            f"|{board.whatsAtPos(Position(row, col))} " for col in range(board.getColCount())
        )
        lines.append(f"|{row_label}{cells}|")
    return "\n".join(lines) + "\n"
