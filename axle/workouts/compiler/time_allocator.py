"""Block Time Allocator - Math Core.

Splits the requested session length into warmup/main/cooldown budgets.
Time (seconds) is the planning currency.
"""

import math
from dataclasses import dataclass

from axle.workouts.invariants import (
    COOLDOWN_FLOOR_SEC,
    MAIN_FLOOR_SEC,
    MAIN_RATIO,
    WARMUP_FLOOR_SEC,
    WARMUP_RATIO,
)


@dataclass(frozen=True)
class BlockBudget:
    """Seconds allotted to each block of a session."""

    warmup_sec: int
    main_sec: int
    cooldown_sec: int

    @property
    def total_sec(self) -> int:
        return self.warmup_sec + self.main_sec + self.cooldown_sec


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return math.floor(value + 0.5)


def allocate_block_time(duration_min: int) -> BlockBudget:
    """Allocate block budgets deterministically.

    - Warmup gets 20% of the session, at least 300s
    - Main gets 70% of the session, at least 600s
    - Cooldown gets the remainder, at least 180s

    The floors can push the sum above duration_min * 60 for short sessions.
    That is accepted: callers report the actual sum, not the nominal length.

    Args:
        duration_min: Requested session length in minutes

    Returns:
        BlockBudget with the three allocations
    """
    total_sec = duration_min * 60
    warmup_sec = max(WARMUP_FLOOR_SEC, round_half_up(total_sec * WARMUP_RATIO))
    main_sec = max(MAIN_FLOOR_SEC, round_half_up(total_sec * MAIN_RATIO))
    cooldown_sec = max(COOLDOWN_FLOOR_SEC, total_sec - warmup_sec - main_sec)
    return BlockBudget(warmup_sec=warmup_sec, main_sec=main_sec, cooldown_sec=cooldown_sec)
