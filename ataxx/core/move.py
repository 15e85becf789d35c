"""Squares and moves, independent of any board.

Squares are named by a column char and a row char ('a'..'g', '1'..'7').
Each board is embedded in a grid with two extra layers of permanently
blocked squares on every edge, so columns run from 'a' - 2 to 'g' + 2 and
rows from '1' - 2 to '7' + 2.  The linearized index of a square is its
position in row-major order on that extended grid.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar, Optional

from .errors import MoveParseError

SIDE = 7
EXTENDED_SIDE = SIDE + 4

MIN_COL = chr(ord("a") - 2)
MAX_COL = chr(ord("a") + SIDE + 1)
MIN_ROW = chr(ord("1") - 2)
MAX_ROW = chr(ord("1") + SIDE + 1)

_MOVE_RE = re.compile(r"([a-g])([1-7])-([a-g])([1-7])")


def index(col: str, row: str) -> int:
    """Return the linearized index of square COL ROW."""
    return (ord(row) - ord("1") + 2) * EXTENDED_SIDE + (ord(col) - ord("a") + 2)


def neighbor(sq: int, dc: int, dr: int) -> int:
    """Return the index of the square DC columns and DR rows away from SQ."""
    return sq + dc + dr * EXTENDED_SIDE


def square_name(sq: int) -> str:
    """Return the 'c1'-style name of the square with index SQ."""
    row, col = divmod(sq, EXTENDED_SIDE)
    return chr(ord("a") + col - 2) + chr(ord("1") + row - 2)


def in_extended_range(col: str, row: str) -> bool:
    return MIN_COL <= col <= MAX_COL and MIN_ROW <= row <= MAX_ROW


@dataclass(frozen=True)
class Move:
    """A move C0R0-C1R1, or a pass when all fields are None.

    Whether a move is an extend or a jump follows from the coordinate delta.
    """

    col0: Optional[str] = None
    row0: Optional[str] = None
    col1: Optional[str] = None
    row1: Optional[str] = None

    PASS: ClassVar["Move"]

    @staticmethod
    def move(col0: str, row0: str, col1: str, row1: str) -> Optional["Move"]:
        """Return the move COL0 ROW0 - COL1 ROW1.

        Returns None (the null move) when a square is outside the extended
        board or the two squares are not one or two squares apart.
        """
        if not (in_extended_range(col0, row0) and in_extended_range(col1, row1)):
            return None
        dist = max(abs(ord(col1) - ord(col0)), abs(ord(row1) - ord(row0)))
        if dist == 0 or dist > 2:
            return None
        return Move(col0, row0, col1, row1)

    @staticmethod
    def pass_move() -> "Move":
        return Move.PASS

    @staticmethod
    def parse(text: str) -> "Move":
        """Parse '-' or 'c0r0-c1r1'; raise MoveParseError otherwise."""
        if text == "-":
            return Move.PASS
        match = _MOVE_RE.fullmatch(text)
        if match is None:
            raise MoveParseError(f"malformed move: {text!r}")
        return Move(*match.groups())

    @property
    def is_pass(self) -> bool:
        return self.col0 is None

    @property
    def distance(self) -> int:
        """Chebyshev distance between the two squares (0 for a pass)."""
        if self.is_pass:
            return 0
        return max(abs(ord(self.col1) - ord(self.col0)),
                   abs(ord(self.row1) - ord(self.row0)))

    @property
    def is_extend(self) -> bool:
        return self.distance == 1

    @property
    def is_jump(self) -> bool:
        return self.distance == 2

    @property
    def from_index(self) -> int:
        return index(self.col0, self.row0)

    @property
    def to_index(self) -> int:
        return index(self.col1, self.row1)

    def __str__(self) -> str:
        if self.is_pass:
            return "-"
        return f"{self.col0}{self.row0}-{self.col1}{self.row1}"


Move.PASS = Move()
