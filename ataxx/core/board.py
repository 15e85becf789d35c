"""Ataxx board: grid state, legality, move application and undo.

The 7x7 playing area sits inside an 11x11 grid whose two outer layers are
always BLOCKED, so every square within two rows and columns of a playing
square is addressable without bounds checks.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple, Union

from .errors import IllegalBlockError, IllegalMoveError
from .move import EXTENDED_SIDE, SIDE, Move, index, neighbor
from .piece import PieceColor

EMPTY = PieceColor.EMPTY
BLOCKED = PieceColor.BLOCKED
RED = PieceColor.RED
BLUE = PieceColor.BLUE

# Number of consecutive non-extending moves before the game ends.
JUMP_LIMIT = 25

ADJACENT = [(dc, dr) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dc, dr) != (0, 0)]
REACHABLE = [(dc, dr) for dr in range(-2, 3) for dc in range(-2, 3) if (dc, dr) != (0, 0)]

logger = logging.getLogger(__name__)

Notifier = Callable[["Board"], None]


def _nop(board: "Board") -> None:
    pass


@dataclass
class UndoFrame:
    """Everything needed to reverse one make_move."""

    jumps_before: int
    after_jump: bool
    changes: List[Tuple[int, PieceColor]] = field(default_factory=list)


class Board:
    """An Ataxx board.

    Squares are addressed either by column/row chars ('a'-'g', '1'-'7') or
    by linearized index on the extended grid.  Moves go through
    ``make_move`` and are reversed with ``undo``; blocks may only be placed
    before the first move.
    """

    def __init__(self) -> None:
        self._board: List[PieceColor] = [BLOCKED] * (EXTENDED_SIDE * EXTENDED_SIDE)
        self._num_pieces = {RED: 0, BLUE: 0}
        self._total_open = 0
        self._num_jumps = 0
        self._last_was_jump = False
        self._whose_move = RED
        self._winner: Optional[PieceColor] = None
        self._all_moves: List[Move] = []
        self._undo_stack: List[UndoFrame] = []
        self._notifier: Notifier = _nop
        self.clear()

    def copy(self) -> "Board":
        """Return a board with my contents, an empty history and no notifier."""
        other = Board.__new__(Board)
        other._board = self._board.copy()
        other._num_pieces = dict(self._num_pieces)
        other._total_open = self._total_open
        other._num_jumps = self._num_jumps
        other._last_was_jump = self._last_was_jump
        other._whose_move = self._whose_move
        other._winner = self._winner
        other._all_moves = []
        other._undo_stack = []
        other._notifier = _nop
        return other

    def clear(self) -> None:
        """Reset to the starting position with no blocks."""
        self._reset()
        self._announce()

    def _reset(self) -> None:
        self._winner = None
        self._num_jumps = 0
        self._last_was_jump = False
        self._whose_move = RED
        self._all_moves = []
        self._undo_stack = []
        for sq in range(EXTENDED_SIDE * EXTENDED_SIDE):
            row, col = divmod(sq, EXTENDED_SIDE)
            if 2 <= row < SIDE + 2 and 2 <= col < SIDE + 2:
                self._board[sq] = EMPTY
            else:
                self._board[sq] = BLOCKED
        self._board[index("a", "1")] = RED
        self._board[index("g", "7")] = RED
        self._board[index("a", "7")] = BLUE
        self._board[index("g", "1")] = BLUE
        self._num_pieces = {RED: 2, BLUE: 2}
        self._total_open = SIDE * SIDE - 4

    def set_position(self, picture: str, to_move: PieceColor = RED) -> None:
        """Load the position drawn in PICTURE, in the format of ``to_string()``.

        Row and column labels are ignored.  History is cleared, and the game
        is scored as over if one side has no pieces or neither side can move.
        """
        rows = []
        footer = [chr(ord("a") + c) for c in range(SIDE)]
        for line in picture.strip().splitlines():
            tokens = line.split()
            if tokens == footer:
                continue
            cells = [t for t in tokens if t in ("r", "b", "X", "-")]
            if cells:
                rows.append(cells)
        if len(rows) != SIDE or any(len(cells) != SIDE for cells in rows):
            raise ValueError(f"position must be {SIDE} rows of {SIDE} squares")
        self._reset()
        self._num_pieces = {RED: 0, BLUE: 0}
        self._total_open = 0
        for r, cells in enumerate(reversed(rows)):
            for c, symbol in enumerate(cells):
                sq = index(chr(ord("a") + c), chr(ord("1") + r))
                self._board[sq] = EMPTY
                self._total_open += 1
                self._put(sq, PieceColor(symbol))
        self._whose_move = to_move
        self._check_game_over()
        self._announce()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def winner(self) -> Optional[PieceColor]:
        """None while the game is on, the winning color, or EMPTY for a draw."""
        return self._winner

    def num_pieces(self, color: PieceColor) -> int:
        return self._num_pieces[color]

    def red_pieces(self) -> int:
        return self._num_pieces[RED]

    def blue_pieces(self) -> int:
        return self._num_pieces[BLUE]

    def get(self, col_or_sq: Union[str, int], row: Optional[str] = None) -> PieceColor:
        """Contents of square COL ROW, or of the square with linearized index SQ."""
        if row is None:
            return self._board[col_or_sq]
        return self._board[index(col_or_sq, row)]

    def whose_move(self) -> PieceColor:
        return self._whose_move

    def num_moves(self) -> int:
        """Moves and passes made since the last clear."""
        return len(self._all_moves)

    def num_jumps(self) -> int:
        """Consecutive jumps made since the last extend."""
        return self._num_jumps

    def total_open(self) -> int:
        """Playing squares that are neither occupied nor blocked."""
        return self._total_open

    def all_moves(self) -> List[Move]:
        return list(self._all_moves)

    # ------------------------------------------------------------------
    # Legality
    # ------------------------------------------------------------------

    def legal_move(self, move: Optional[Move]) -> bool:
        if move is None:
            return False
        if move.is_pass:
            return not self.can_move(self._whose_move)
        if not 1 <= move.distance <= 2:
            return False
        return (self._board[move.to_index] is EMPTY
                and self._board[move.from_index] is self._whose_move)

    def can_move(self, who: PieceColor) -> bool:
        """True iff WHO has an empty square within reach of one of its pieces.

        Ignores whose turn it is and whether the game is over.
        """
        if self._num_pieces.get(who, 0) == 0:
            return False
        board = self._board
        for sq, contents in enumerate(board):
            if contents is not who:
                continue
            for dc, dr in REACHABLE:
                if board[neighbor(sq, dc, dr)] is EMPTY:
                    return True
        return False

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def make_move(self, move: Union[Move, str]) -> None:
        """Make MOVE, given as a Move or in '-' / 'c0r0-c1r1' form."""
        if isinstance(move, str):
            move = Move.parse(move)
        if not self.legal_move(move):
            logger.debug("rejected %s for %s", move, self._whose_move)
            raise IllegalMoveError(f"Illegal move: {move}")
        self._all_moves.append(move)
        frame = UndoFrame(jumps_before=self._num_jumps, after_jump=self._last_was_jump)
        self._undo_stack.append(frame)

        if move.is_pass:
            self._last_was_jump = False
            self._check_game_over()
            self._whose_move = self._whose_move.opposite()
            self._announce()
            return

        mover = self._whose_move
        opponent = mover.opposite()
        dest = move.to_index
        self._set(dest, mover)
        if move.is_extend:
            self._num_jumps = 0
        else:
            self._set(move.from_index, EMPTY)
            self._num_jumps = self._num_jumps + 1 if frame.after_jump else 1
        self._last_was_jump = move.is_jump
        for dc, dr in ADJACENT:
            sq = neighbor(dest, dc, dr)
            if self._board[sq] is opponent:
                self._set(sq, mover)

        self._check_game_over()
        self._whose_move = opponent
        self._announce()

    def undo(self) -> None:
        """Undo the last move."""
        if not self._undo_stack:
            raise RuntimeError("no move to undo")
        frame = self._undo_stack.pop()
        for sq, prior in reversed(frame.changes):
            self._put(sq, prior)
        self._num_jumps = frame.jumps_before
        self._last_was_jump = frame.after_jump
        self._all_moves.pop()
        self._whose_move = self._whose_move.opposite()
        self._winner = None
        self._announce()

    def _set(self, sq: int, value: PieceColor) -> None:
        """Set square SQ to VALUE as part of the current move (undoable)."""
        self._undo_stack[-1].changes.append((sq, self._board[sq]))
        self._put(sq, value)

    def _put(self, sq: int, value: PieceColor) -> None:
        """Set square SQ to VALUE, keeping piece and open-square counts in step."""
        old = self._board[sq]
        if old.is_piece:
            self._num_pieces[old] -= 1
        elif old is EMPTY:
            self._total_open -= 1
        if value.is_piece:
            self._num_pieces[value] += 1
        elif value is EMPTY:
            self._total_open += 1
        self._board[sq] = value

    def _check_game_over(self) -> None:
        red, blue = self._num_pieces[RED], self._num_pieces[BLUE]
        if red == 0:
            self._winner = BLUE
        elif blue == 0:
            self._winner = RED
        elif (self._num_jumps >= JUMP_LIMIT
              or (not self.can_move(RED) and not self.can_move(BLUE))):
            if red > blue:
                self._winner = RED
            elif blue > red:
                self._winner = BLUE
            else:
                self._winner = EMPTY

    # ------------------------------------------------------------------
    # Blocks
    # ------------------------------------------------------------------

    def legal_block(self, col: str, row: Optional[str] = None) -> bool:
        """True iff a block may be placed at COL ROW (or at 'cr' given as COL).

        The square must be empty and none of its reflections may hold a piece.
        """
        if row is None:
            if len(col) != 2:
                return False
            col, row = col[0], col[1]
        if not ("a" <= col <= "g" and "1" <= row <= "7"):
            return False
        if self._all_moves or self._board[index(col, row)] is not EMPTY:
            return False
        return not any(self._board[sq].is_piece for sq in _reflections(col, row))

    def set_block(self, col: str, row: Optional[str] = None) -> None:
        """Block COL ROW and its reflections across the middle row and column."""
        if row is None:
            if len(col) != 2:
                raise IllegalBlockError(f"malformed square: {col!r}")
            col, row = col[0], col[1]
        if not self.legal_block(col, row):
            raise IllegalBlockError(f"illegal block placement: {col}{row}")
        for sq in _reflections(col, row):
            if self._board[sq] is not BLOCKED:
                self._put(sq, BLOCKED)
        if not self.can_move(RED) and not self.can_move(BLUE):
            self._winner = EMPTY
        self._announce()

    # ------------------------------------------------------------------
    # Notification and display
    # ------------------------------------------------------------------

    def set_notifier(self, notify: Notifier) -> None:
        """Replace my change callback with NOTIFY and fire it once."""
        self._notifier = notify
        self._announce()

    def _announce(self) -> None:
        self._notifier(self)

    def to_string(self, legend: bool = False) -> str:
        """Text picture of the board, top row first; LEGEND adds row and column labels."""
        lines = []
        for r in range(SIDE - 1, -1, -1):
            row = chr(ord("1") + r)
            cells = " ".join(self.get(chr(ord("a") + c), row).symbol for c in range(SIDE))
            lines.append(f"{row} {cells}" if legend else cells)
        if legend:
            lines.append("  " + " ".join(chr(ord("a") + c) for c in range(SIDE)))
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.to_string(False)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._board == other._board and self._whose_move is other._whose_move

    def __hash__(self) -> int:
        return hash((tuple(self._board), self._whose_move))


def _reflections(col: str, row: str) -> List[int]:
    """COL ROW and its mirror images across the middle column and row."""
    mirror_col = chr(2 * ord("d") - ord(col))
    mirror_row = chr(2 * ord("4") - ord(row))
    return [index(c, r) for c, r in
            ((col, row), (mirror_col, row), (col, mirror_row), (mirror_col, mirror_row))]
