"""Game control: the authoritative board, its players, and the text command loop."""

from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, Iterator, Optional

from ataxx.config import CONFIG, Config
from ataxx.core.board import Board
from ataxx.core.errors import GameError, MoveParseError
from ataxx.core.move import Move
from ataxx.core.piece import PieceColor
from ataxx.player import AIPlayer, ManualPlayer, Player

logger = logging.getLogger(__name__)

RED = PieceColor.RED
BLUE = PieceColor.BLUE

HELP_TEXT = """\
Commands:
  new              start over from the initial position
  start            begin play (AI players move when it is their turn)
  auto <color>     let the AI play red or blue
  manual <color>   take moves for red or blue from input
  block <sq>       block a square and its reflections (before the first move)
  seed <n>         seed the AI players' random number generators
  undo             take back moves until a manual player is to move
  dump             print the board
  help             print this message
  quit             leave the program
  c0r0-c1r1 | -    make a move or pass"""


class Game:
    """Runs one session of games over a stream of text commands.

    Output goes through OUTPUT, one message per call.
    """

    def __init__(self, config: Config = CONFIG, commands: Iterable[str] = (),
                 output: Callable[[str], None] = print):
        self.config = config
        self.board = Board()
        self._commands: Iterator[str] = iter(commands)
        self._output = output
        self._seed = config.search.seed
        self._kinds: Dict[PieceColor, str] = {
            RED: config.ui.red_player,
            BLUE: config.ui.blue_player,
        }
        self.players: Dict[PieceColor, Player] = {}
        self._started = False
        self._announced = False
        self._quit = False
        for color in (RED, BLUE):
            self._make_player(color)

    # ------------------------------------------------------------------
    # Main loop
    # ------------------------------------------------------------------

    def play(self) -> None:
        """Process commands and moves until 'quit' or the input runs out."""
        while not self._quit:
            if self._started and self.board.winner is None:
                player = self.players[self.board.whose_move()]
                text = player.get_move()
                if text is not None:
                    self._commit(text)
                continue
            line = self._next_line()
            if line is None:
                break
            self.execute(line)

    def next_move_text(self) -> Optional[str]:
        """Read the next input line for a manual player.

        Returns the line if it is a move; otherwise runs it as a command and
        returns None.
        """
        line = self._next_line()
        if line is None:
            return None
        if _is_move(line):
            return line
        self.execute(line)
        return None

    def report_move(self, move: Move, color: PieceColor) -> None:
        if move.is_pass:
            self._output(f"{color} passes.")
        else:
            self._output(f"{color} moves {move}.")

    def execute(self, line: str) -> None:
        """Run one command or move; rule violations are reported, not raised."""
        try:
            if _is_move(line):
                self._manual_move(line)
            else:
                self._command(line)
        except GameError as e:
            logger.debug("command %r failed: %s", line, e)
            self._output(f"Error: {e}")

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def _command(self, line: str) -> None:
        words = line.split()
        cmd, args = words[0].lower(), words[1:]
        if cmd == "new" and not args:
            self.new_game()
        elif cmd == "start" and not args:
            self._started = True
        elif cmd in ("auto", "manual") and len(args) == 1:
            color = PieceColor.parse(args[0])
            self._kinds[color] = cmd
            self._make_player(color)
        elif cmd == "block" and len(args) == 1:
            self.board.set_block(args[0])
        elif cmd == "seed" and len(args) == 1:
            try:
                self._seed = int(args[0])
            except ValueError:
                raise GameError(f"bad seed: {args[0]}") from None
            for color in (RED, BLUE):
                self._make_player(color)
        elif cmd == "undo" and not args:
            self.undo()
        elif cmd == "dump" and not args:
            self._output("===\n" + self.board.to_string(self.config.ui.legend) + "\n===")
        elif cmd == "help" and not args:
            self._output(HELP_TEXT)
        elif cmd == "quit" and not args:
            self._quit = True
        else:
            raise GameError(f"unknown command: {line}")

    def new_game(self) -> None:
        self.board.clear()
        self._started = False
        self._announced = False

    def undo(self) -> None:
        """Take back moves until a manual player is to move or none remain."""
        if self.board.num_moves() == 0:
            raise GameError("no moves to undo")
        self.board.undo()
        while self.board.num_moves() > 0 and self.players[self.board.whose_move()].is_auto:
            self.board.undo()
        self._announced = False

    def _manual_move(self, text: str) -> None:
        if self.board.winner is not None:
            raise GameError("game is over")
        if self.players[self.board.whose_move()].is_auto:
            raise GameError(f"{self.board.whose_move()} is not played manually")
        self._started = True
        self._commit(text)

    def _commit(self, text: str) -> None:
        if self.board.winner is not None:
            raise GameError("game is over")
        try:
            self.board.make_move(text)
        except GameError as e:
            self._output(f"Error: {e}")
            return
        self._announce_result()

    def _announce_result(self) -> None:
        winner = self.board.winner
        if winner is None or self._announced:
            return
        self._announced = True
        if winner is PieceColor.EMPTY:
            self._output("Draw.")
        else:
            self._output(f"{winner} wins.")

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _make_player(self, color: PieceColor) -> None:
        if self._kinds[color] == "auto":
            seed = None if self._seed is None else self._seed + (1 if color is BLUE else 0)
            self.players[color] = AIPlayer(self, color, seed=seed,
                                           depth=self.config.search.depth)
        else:
            self.players[color] = ManualPlayer(self, color)

    def _next_line(self) -> Optional[str]:
        for line in self._commands:
            line = line.strip()
            if line and not line.startswith("#"):
                return line
        self._quit = True
        return None


def _is_move(text: str) -> bool:
    try:
        Move.parse(text)
    except MoveParseError:
        return False
    return True
