from __future__ import annotations

from typing import Dict, List


LEVELS: Dict[str, List[str]] = {
    "first_steps": [
        "#######",
        "#p..@.#",
        "#.###.#",
        "#@...@#",
        "#######",
    ],
    "push": [
        "########",
        "#p.+..@#",
        "#.####.#",
        "#@.....#",
        "########",
    ],
    "portals": [
        "#########",
        "#p.1#2..#",
        "#.###.#@#",
        "#@..2.1.#",
        "#########",
    ],
    "spikes": [
        "#######",
        "#p..@<#",
        "#.#^#.#",
        "#@...@#",
        "#######",
    ],
    "wraparound": [
        "###.###",
        "..p.@#.",
        "#.###.#",
        "#@....#",
        "###.###",
    ],
}

DEFAULT_LEVEL = "first_steps"


def get_level(name: str) -> List[str]:
    if name not in LEVELS:
        available = ", ".join(LEVELS.keys())
        raise ValueError(f"Unknown level: {name}. Available: {available}")
    return list(LEVELS[name])
