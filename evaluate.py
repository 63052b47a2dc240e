# -*- coding: utf-8 -*-
"""
Evaluate a move policy by playing full games.
"""
import logging
from collections import Counter
from statistics import mean
from typing import Callable, Dict, Optional, Tuple

from tqdm import trange

from mergeboard import BoardEngine, EngineConfiguration, Move

logger = logging.getLogger(__name__)

POLICIES: Dict[str, Callable[[BoardEngine], Move]] = {
    "auto": BoardEngine.auto_move,
    "random": BoardEngine.random_move,
}


def play(engine: BoardEngine, policy: str, max_moves: Optional[int] = None) -> int:
    """
    Play one game until no move is possible.

    Parameters
    ----------
    engine : BoardEngine
        A freshly reset engine.
    policy : str
        Name of the policy in ``POLICIES``.
    max_moves : int, optional
        Stop after this many moves even if the game is not over.

    Returns
    -------
    int
        Number of moves played.
    """
    act = POLICIES[policy]
    moves = 0
    while engine.can_move() and (max_moves is None or moves < max_moves):
        act(engine)
        moves += 1
    return moves


def evaluate(policy: str, length: int = 10, seed: Optional[int] = None) -> Tuple[Dict[int, int], float]:
    """
    Evaluate a move policy.

    Parameters
    ----------
    policy : str
        The name of the policy to evaluate ("auto" or "random").
    length : int, optional
        The number of games to play (default is 10).
    seed : int, optional
        Seed of the engine's random number generator.

    Returns
    -------
    Tuple[Dict[int, int], float]
        Frequency of the largest tile on the final boards, and the mean final score.
    """
    if policy not in POLICIES:
        raise ValueError(f"Unknown policy {policy!r}, expected one of {sorted(POLICIES)}")

    engine = BoardEngine(EngineConfiguration(seed=seed))
    largest, scores = [], []

    with trange(length) as period:
        for num in period:
            engine.reset()
            moves = play(engine, policy)

            # ##: Log.
            period.set_description(f"Evaluation: {num + 1}")
            period.set_postfix(score=engine.score, max=int(engine.tiles.max()))
            logger.debug("Game %d finished after %d moves with score %d", num + 1, moves, engine.score)

            # ##: Save max cells.
            largest.append(int(engine.tiles.max()))
            scores.append(engine.score)

    # ##: Final log.
    return dict(Counter(largest)), mean(scores)


if __name__ == "__main__":
    from argparse import ArgumentParser

    parser = ArgumentParser()
    parser.add_argument("--policy", type=str, default="auto", choices=sorted(POLICIES))
    parser.add_argument("--games", type=int, default=10)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    frequency, score = evaluate(policy=args.policy, length=args.games, seed=args.seed)
    print(f"Evaluation of policy {args.policy}, max tiles: {frequency}, mean score: {score:.1f}")
