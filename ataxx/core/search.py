import logging
import random
import time
from typing import List, Optional

from .board import Board
from .evaluator import WINNING_VALUE, Evaluator
from .move import EXTENDED_SIDE, Move, square_name
from .piece import PieceColor
from .utils import format_search_info

INF = 1_000_000
MAX_DEPTH = 4

logger = logging.getLogger(__name__)


def find_all_possible_moves(board: Board, side: PieceColor) -> List[Move]:
    """All legal non-pass moves for SIDE, in square order of its pieces."""
    moves = []
    for sq in range(EXTENDED_SIDE * EXTENDED_SIDE):
        if board.get(sq) is not side:
            continue
        name = square_name(sq)
        col0, row0 = name[0], name[1]
        for dc in range(-2, 3):
            for dr in range(-2, 3):
                move = Move.move(col0, row0, chr(ord(col0) + dc), chr(ord(row0) + dr))
                if board.legal_move(move):
                    moves.append(move)
    return moves


def side_for(sense: int) -> PieceColor:
    return PieceColor.RED if sense == 1 else PieceColor.BLUE


class SearchEngine:
    """Depth-limited minimax with alpha-beta pruning.

    Each node searches its own copy of the board.  Ties between equally
    scored moves are broken with a coin flip from ``rng``, so a fixed seed
    reproduces the same choices.
    """

    def __init__(self, evaluator: Optional[Evaluator] = None, depth: int = MAX_DEPTH,
                 seed: Optional[int] = None, rng: Optional[random.Random] = None):
        self.evaluator = evaluator or Evaluator()
        self.max_depth = depth
        self.rng = rng if rng is not None else random.Random(seed)
        self.nodes = 0
        self.last_found_move: Optional[Move] = None
        self.last_score = 0

    def search_best_move(self, board: Board, color: Optional[PieceColor] = None) -> Move:
        """Choose a move for COLOR (default: the side to move) on BOARD.

        BOARD itself is never modified.  COLOR must be the side to move.
        """
        color = color or board.whose_move()
        if color is not board.whose_move():
            raise ValueError(f"{color} is not to move")
        if not board.can_move(color):
            return Move.PASS
        search_board = board.copy()
        sense = 1 if color is PieceColor.RED else -1
        self.nodes = 0
        self.last_found_move = None
        start = time.time()
        self.last_score = self.minimax(search_board, self.max_depth, sense, -INF, INF,
                                       save_move=True)
        elapsed = time.time() - start
        logger.info(format_search_info(self.max_depth, self.last_score, self.nodes,
                                       elapsed, self.last_found_move, WINNING_VALUE))
        return self.last_found_move

    def minimax(self, board: Board, depth: int, sense: int, alpha: int, beta: int,
                save_move: bool = False) -> int:
        """Return the value of BOARD searched DEPTH plies deep.

        SENSE is 1 when Red (the maximizer) is to move and -1 for Blue.  With
        SAVE_MOVE the chosen move is left in ``last_found_move``.
        """
        self.nodes += 1
        # Wins found with more depth left are closer to the root.
        if depth == 0 or board.winner is not None:
            return self.evaluator.evaluate(board, WINNING_VALUE + depth)
        moves = find_all_possible_moves(board, side_for(sense))
        if not moves:
            return self.evaluator.evaluate(board, WINNING_VALUE + depth)

        best: Optional[Move] = None
        best_score = alpha if sense == 1 else beta
        for move in moves:
            child = board.copy()
            child.make_move(move)
            response = self.minimax(child, depth - 1, -sense, alpha, beta)
            better = response > best_score if sense == 1 else response < best_score
            tied = response == best_score
            if not better and not (tied and self.rng.random() < 0.5):
                continue
            best_score = response
            best = move
            if sense == 1:
                alpha = max(alpha, best_score)
            else:
                beta = min(beta, best_score)
            if alpha >= beta:
                break

        if save_move:
            self.last_found_move = best
        return best_score
