from __future__ import annotations

import argparse
import logging

import gymnasium as gym

# Ensure envs are registered
import pearls.env  # noqa: F401
from pearls.game import DEFAULT_LEVEL, LEVELS, get_level, print_grid


def run_random(level: str = DEFAULT_LEVEL, episodes: int = 10, seed: int | None = None, verbose: bool = False) -> None:
    env = gym.make("Pearls-v0", level=get_level(level))
    env.action_space.seed(seed)
    wins = 0
    total_reward = 0.0
    obs, info = env.reset(seed=seed)
    for episode in range(episodes):
        while True:
            obs, reward, terminated, truncated, info = env.step(env.action_space.sample())
            total_reward += float(reward)
            if terminated or truncated:
                break
        wins += int(info["won"])
        if verbose:
            # Final board before the reset
            print(f"Episode {episode}: won={info['won']} moves={info['moves']}")
            print_grid(env.unwrapped.game.grid)
        obs, info = env.reset()
    env.close()
    print(f"Random agent on '{level}': {wins}/{episodes} wins, total reward {total_reward:.2f}")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser()
    p.add_argument("--level", choices=sorted(LEVELS), default=DEFAULT_LEVEL)
    p.add_argument("--episodes", type=int, default=10)
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--verbose", action="store_true")
    return p


def main() -> None:
    args = build_parser().parse_args()
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)
    run_random(args.level, args.episodes, args.seed, verbose=args.verbose)


if __name__ == "__main__":  # pragma: no cover
    main()
