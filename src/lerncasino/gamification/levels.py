"""Level computation from total XP.

Shared by the backend and the client so both derive the same level.
"""

from __future__ import annotations

XP_PER_LEVEL = 100


def level_for_xp(total_xp: int) -> int:
    """Level 1 at 0 XP, one level per XP_PER_LEVEL."""
    return max(0, total_xp) // XP_PER_LEVEL + 1


def level_progress(total_xp: int) -> float:
    """Fraction of the current level already earned, in [0, 1)."""
    return min(1.0, (max(0, total_xp) % XP_PER_LEVEL) / XP_PER_LEVEL)
