from typing import Optional

from .move import Move


def format_search_info(depth: int, score: int, nodes: int, elapsed: float,
                       best: Optional[Move], winning_value: int) -> str:
    """One-line summary of a finished search, elapsed given in seconds."""
    nps = int(nodes / elapsed) if elapsed > 0 else 0
    if abs(score) > winning_value - 100:
        plies = winning_value + depth - abs(score)
        score_str = f"win {plies if score > 0 else -plies}"
    else:
        score_str = f"pieces {score}"
    best_str = str(best) if best is not None else "-"
    return (f"info depth {depth} score {score_str} nodes {nodes} nps {nps} "
            f"time {int(elapsed * 1000)} move {best_str}")
