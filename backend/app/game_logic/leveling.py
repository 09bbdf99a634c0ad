# backend/app/game_logic/leveling.py
"""
Experience-to-level progression.

Reaching level n+1 costs 50*(n+1)*(n+2) cumulative experience, so level n
starts at 50*n*(n+1). The closed-form inverse of that schedule is

    level = floor((sqrt(2500 + 200 * experience) - 50) / 100)

and the remaining cost to the next level is

    until_next_level = 50 * (level + 1) * (level + 2) - experience

Both are pure functions of their arguments; callers validate the experience
range before getting here.
"""
import math
from typing import Tuple

XP_COST_FACTOR = 50


def experience_for_level(level: int) -> int:
    """Cumulative experience at which `level` begins (level 0 begins at 0)."""
    if level < 0:
        raise ValueError(f"level must be non-negative, got {level}")
    return XP_COST_FACTOR * level * (level + 1)


def calculate_level(experience: int) -> int:
    """
    Level for a given cumulative experience.

    Uses the integer square root, which gives the same floor as the float
    formula but stays exact for arbitrarily large experience values.

    >>> calculate_level(0)
    0
    >>> calculate_level(100)
    1
    """
    if experience < 0:
        raise ValueError(f"experience must be non-negative, got {experience}")
    root = math.isqrt(2500 + 200 * experience)
    return (root - 50) // 100


def calculate_until_next_level(experience: int, level: int) -> int:
    """Experience still needed to reach level + 1."""
    return XP_COST_FACTOR * (level + 1) * (level + 2) - experience


def progression_for(experience: int) -> Tuple[int, int]:
    """Returns (level, until_next_level), both computed from the same experience."""
    level = calculate_level(experience)
    return level, calculate_until_next_level(experience, level)
