"""Players that supply moves to a Game."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from ataxx.core.board import Board
from ataxx.core.evaluator import Evaluator
from ataxx.core.move import Move
from ataxx.core.piece import PieceColor
from ataxx.core.search import MAX_DEPTH, SearchEngine

if TYPE_CHECKING:
    from ataxx.game import Game


class Player:
    """A player of COLOR in GAME."""

    is_auto = False

    def __init__(self, game: "Game", color: PieceColor):
        self.game = game
        self.color = color

    @property
    def board(self) -> Board:
        return self.game.board

    def get_move(self) -> Optional[str]:
        """Return a move in '-' or 'c0r0-c1r1' form, or None if none is coming."""
        raise NotImplementedError


class ManualPlayer(Player):
    """Takes its moves from the game's command stream."""

    def get_move(self) -> Optional[str]:
        return self.game.next_move_text()


class AIPlayer(Player):
    """Chooses moves with a seeded minimax search."""

    is_auto = True

    def __init__(self, game: "Game", color: PieceColor, seed: Optional[int] = None,
                 depth: int = MAX_DEPTH):
        super().__init__(game, color)
        self.engine = SearchEngine(Evaluator(), depth=depth, seed=seed)

    def get_move(self) -> str:
        if not self.board.can_move(self.color):
            self.game.report_move(Move.PASS, self.color)
            return "-"
        move = self.engine.search_best_move(self.board, self.color)
        self.game.report_move(move, self.color)
        return str(move)
