"""Play Ataxx in the terminal.

    ataxx                      # you play red, the AI plays blue
    ataxx --red auto --seed 7  # watch two AIs play each other
"""

import argparse
import copy
import logging
import sys
from typing import List, Optional, TextIO

from ataxx.config import CONFIG
from ataxx.game import Game


def _prompted(stream: TextIO, interactive: bool):
    for line in stream:
        yield line
        if interactive:
            print("> ", end="", flush=True)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="ataxx", description="Ataxx with a minimax AI.")
    p.add_argument("--seed", type=int, default=CONFIG.search.seed,
                   help="seed for the AI players (default: unseeded)")
    p.add_argument("--depth", type=int, default=CONFIG.search.depth,
                   help="search depth in plies")
    p.add_argument("--red", choices=["auto", "manual"], default=CONFIG.ui.red_player)
    p.add_argument("--blue", choices=["auto", "manual"], default=CONFIG.ui.blue_player)
    p.add_argument("--log-level", default=CONFIG.log_level,
                   help="logging level, e.g. DEBUG or WARNING")
    return p


def main(argv: Optional[List[str]] = None, stdin: TextIO = sys.stdin) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    config = copy.deepcopy(CONFIG)
    config.search.seed = args.seed
    config.search.depth = args.depth
    config.ui.red_player = args.red
    config.ui.blue_player = args.blue

    interactive = stdin.isatty()
    if interactive:
        print(f"{config.ui.engine_name}: type 'help' for commands.")
        print("> ", end="", flush=True)
    game = Game(config, commands=_prompted(stdin, interactive))
    game.play()
    return 0


if __name__ == "__main__":
    sys.exit(main())
