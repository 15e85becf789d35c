"""Ataxx rules engine and minimax player.

- core: squares and moves, the board, static evaluation and search
- player/game: AI and manual players and the text command loop
"""

from .core import Board, Move, PieceColor, SearchEngine, Evaluator, GameError
from .game import Game
from .player import AIPlayer, ManualPlayer, Player

__all__ = [
    "Board", "Move", "PieceColor", "SearchEngine", "Evaluator", "GameError",
    "Game", "Player", "AIPlayer", "ManualPlayer",
]
