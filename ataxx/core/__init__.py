"""Core engine components: squares and moves, board rules, evaluation, and search."""

from .piece import PieceColor
from .errors import GameError, IllegalMoveError, IllegalBlockError, MoveParseError
from .move import Move, SIDE, EXTENDED_SIDE, index, neighbor
from .board import Board, JUMP_LIMIT
from .evaluator import Evaluator, WINNING_VALUE
from .search import SearchEngine, find_all_possible_moves, INF, MAX_DEPTH
