# -*- coding: utf-8 -*-
"""
Play many games with a random policy and count the maximum tile reached.
"""
import logging
from collections import Counter
from typing import Dict, Optional

from numpy.random import default_rng
from tqdm import trange

from slidemerge.config import GameConfig
from slidemerge.core import max_tile
from slidemerge.envs import SlideMerge


def evaluate(games: int = 10, size: int = 4, target: int = 2048, seed: Optional[int] = None) -> Dict[int, int]:
    """
    Play games choosing uniformly among the directions that change the board.

    Parameters
    ----------
    games : int, optional
        The number of games to play (default is 10).
    size : int, optional
        The board dimension (default is 4).
    target : int, optional
        The winning tile value (default is 2048).
    seed : int, optional
        Seed of both the policy and the tile spawns.

    Returns
    -------
    Dict[int, int]
        How many games ended with each maximum tile.
    """
    env = SlideMerge(GameConfig(size=size, target=target, seed=seed))
    policy = default_rng(seed)
    score = []

    with trange(games) as period:
        for num in period:
            env.reset()
            done = env.is_finished

            # ##: Play a game.
            while not done:
                direction = policy.choice(env.legal_directions)
                done = env.step(direction).over

                # ##: Log.
                period.set_description(f"Evaluation: {num + 1}")
                period.set_postfix(score=env.score, max=max_tile(env.board))

            # ##: Save max cells.
            score.append(max_tile(env.board))

    # ##: Final log.
    frequency = Counter(score)
    return dict(sorted(frequency.items()))


if __name__ == "__main__":
    from argparse import ArgumentParser

    parser = ArgumentParser()
    parser.add_argument("--games", type=int, default=10)
    parser.add_argument("--size", type=int, default=4)
    parser.add_argument("--target", type=int, default=2048)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args()

    logging.basicConfig(level=logging.WARNING)

    result = evaluate(games=args.games, size=args.size, target=args.target, seed=args.seed)
    print(f"Random policy on {args.size}x{args.size}, max tiles: {result}")
