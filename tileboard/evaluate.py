# -*- coding: utf-8 -*-
"""
Play headless games with random legal moves and report the reached tiles.
"""
from collections import Counter
from typing import Dict, Tuple

from numpy.random import Generator, default_rng
from tqdm import trange

from tileboard.game import GameConfig, GameManager
from tileboard.render import NullActuator


def play_random_game(manager: GameManager, rng: Generator) -> Tuple[int, int]:
    """
    Play a game until it is over or won, choosing uniformly among legal directions.

    Parameters
    ----------
    manager : GameManager
        A freshly set up game.
    rng : Generator
        Random generator choosing the directions.

    Returns
    -------
    Tuple[int, int]
        Final score and highest tile.
    """
    legal = manager.legal_directions()
    while legal:
        manager.move(int(rng.choice(legal)))
        legal = manager.legal_directions()
    return manager.score, int(manager.board.max())


def evaluate(length: int = 10, size: int = 4, seed: int | None = None) -> Dict[int, int]:
    """
    Evaluate random play.

    Parameters
    ----------
    length : int, optional
        The number of games to play (default is 10).
    size : int, optional
        Size of the grid (default is 4).
    seed : int, optional
        Seed for reproducible evaluations.

    Returns
    -------
    Dict[int, int]
        How many games ended with each highest tile.
    """
    rng = default_rng(seed)
    manager = GameManager(size, NullActuator(), config=GameConfig(size=size, seed=seed))
    score = []

    with trange(length) as period:
        for num in period:
            if num:
                manager.restart()

            # ##: Play a game.
            rewards, max_tile = play_random_game(manager, rng)

            # ##: Log.
            period.set_description(f"Evaluation: {num + 1}")
            period.set_postfix(score=rewards, max=max_tile)

            # ##: Save max cells.
            score.append(max_tile)

    # ##: Final log.
    frequency = Counter(score)
    return dict(frequency)


def main(argv=None):
    from argparse import ArgumentParser

    parser = ArgumentParser(description="Play random games and count the highest tiles.")
    parser.add_argument("--games", type=int, default=10)
    parser.add_argument("--size", type=int, default=4)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    result = evaluate(length=args.games, size=args.size, seed=args.seed)
    print(f"Random play on a {args.size}x{args.size} board, highest tiles: {dict(sorted(result.items()))}")
    return result


if __name__ == "__main__":
    main()
