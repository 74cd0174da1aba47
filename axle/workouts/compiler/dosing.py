"""Dosing Calculator.

Maps a 1-10 intensity score to concrete prescriptions. The breakpoints are
coarse step functions and must stay exactly as defined here.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class StrengthDose:
    """Sets x reps with rest between sets.

    Attributes:
        sets: Number of working sets
        reps: Reps per set
        rest_sec: Rest between sets in seconds
        load: Display-only effort label
    """

    sets: int
    reps: int
    rest_sec: int
    load: str


@dataclass(frozen=True)
class ConditioningDose:
    """Work/rest intervals repeated for a number of rounds.

    Attributes:
        sets: Number of work/rest rounds
        seconds: Work interval in seconds
        rest_sec: Rest interval in seconds
    """

    sets: int
    seconds: int
    rest_sec: int


CONDITIONING_ROUNDS = 10


def dose_strength(intensity: int) -> StrengthDose:
    """Strength prescription for an intensity score."""
    if intensity >= 8:
        return StrengthDose(sets=5, reps=3, rest_sec=150, load="RPE 9")
    if intensity >= 6:
        return StrengthDose(sets=5, reps=5, rest_sec=120, load="RPE 8")
    if intensity >= 4:
        return StrengthDose(sets=4, reps=8, rest_sec=90, load="RPE 7")
    return StrengthDose(sets=3, reps=10, rest_sec=60, load="RPE 6")


def dose_conditioning(intensity: int) -> ConditioningDose:
    """Conditioning prescription for an intensity score.

    30-45s work, 15-30s rest, always ten rounds.
    """
    if intensity >= 8:
        work, rest = 45, 15
    elif intensity >= 6:
        work, rest = 40, 20
    else:
        work, rest = 30, 30
    return ConditioningDose(sets=CONDITIONING_ROUNDS, seconds=work, rest_sec=rest)
