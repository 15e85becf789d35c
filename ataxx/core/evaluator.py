"""Static evaluation of Ataxx positions.

Scores are from Red's point of view: positive favours Red, negative Blue.
"""

from .board import Board
from .piece import PieceColor

# Magnitude of a won position; the search adds the remaining depth so that
# quicker wins score higher.
WINNING_VALUE = 900_000


class Evaluator:
    def evaluate(self, board: Board, winning_value: int = WINNING_VALUE) -> int:
        """Return +-WINNING_VALUE for a decided game, 0 for a draw, else the piece difference."""
        winner = board.winner
        if winner is PieceColor.RED:
            return winning_value
        if winner is PieceColor.BLUE:
            return -winning_value
        if winner is PieceColor.EMPTY:
            return 0
        return board.red_pieces() - board.blue_pieces()
