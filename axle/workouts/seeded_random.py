"""Seeded Random Source.

Deterministic, non-cryptographic PRNG used by the workout generator.
The same seed always produces the same stream of floats in [0, 1).

- next_float() is mulberry32: the 32-bit state advances by a fixed odd
  increment and is mixed with xor/shift/multiply steps.
- str_seed() is 32-bit FNV-1a over the UTF-8 bytes of a seed string.

Each generation call owns its own SeededRandom; instances are never shared.
"""

import secrets
import time

_MASK_32 = 0xFFFFFFFF
_MULBERRY_INCREMENT = 0x6D2B79F5
_TWO_POW_32 = 4294967296

_FNV_OFFSET_BASIS = 2166136261
_FNV_PRIME = 16777619


def _imul(a: int, b: int) -> int:
    """Low 32 bits of a 32-bit integer product."""
    return (a * b) & _MASK_32


def str_seed(value: str) -> int:
    """Hash a free-text seed into an unsigned 32-bit integer (FNV-1a).

    Args:
        value: Seed string

    Returns:
        Unsigned 32-bit seed
    """
    h = _FNV_OFFSET_BASIS
    for byte in value.encode("utf-8"):
        h ^= byte
        h = _imul(h, _FNV_PRIME)
    return h


def generate_seed() -> str:
    """Generate a fresh seed string for callers that did not supply one."""
    return f"{int(time.time() * 1000):x}{secrets.token_hex(4)}"


class SeededRandom:
    """Mulberry32 generator holding a single 32-bit state word."""

    __slots__ = ("_state",)

    def __init__(self, seed: int):
        self._state = seed & _MASK_32

    @classmethod
    def from_seed(cls, seed: str | int) -> "SeededRandom":
        """Build a generator from a seed string or integer."""
        if isinstance(seed, int):
            return cls(seed)
        return cls(str_seed(seed))

    def next_float(self) -> float:
        """Return the next float in [0, 1)."""
        self._state = (self._state + _MULBERRY_INCREMENT) & _MASK_32
        t = self._state
        t = _imul(t ^ (t >> 15), t | 1)
        t ^= (t + _imul(t ^ (t >> 7), t | 61)) & _MASK_32
        return ((t ^ (t >> 14)) & _MASK_32) / _TWO_POW_32

    def next_int(self, low: int, high: int) -> int:
        """Return an integer in [low, high)."""
        return int(self.next_float() * (high - low)) + low

