"""Seeded pseudo-random generator.

Bit-compatible with the web client's generator so that a seed string
reproduces the same team on every device. All arithmetic is truncated to
32-bit words at each step; Python integers would otherwise grow without
bound and the sequences would diverge.
"""

from typing import Sequence, TypeVar

T = TypeVar("T")

_MASK32 = 0xFFFFFFFF
_INCREMENT = 0x6D2B79F5
_TWO_POW_32 = 4294967296


def _to_uint32(value: int) -> int:
    return value & _MASK32


def _to_int32(value: int) -> int:
    value &= _MASK32
    return value - 0x100000000 if value & 0x80000000 else value


def _imul(a: int, b: int) -> int:
    """32-bit signed multiply with wraparound."""
    return _to_int32(_to_uint32(a) * _to_uint32(b))


def hash_seed(seed: str) -> int:
    """Hash a seed string into the initial generator state.

    ``hash = hash * 31 + code`` with signed 32-bit wraparound after every
    character, then the absolute value. Characters are taken as UTF-16 code
    units so that astral characters hash the same as in the web client.
    """
    h = 0
    data = seed.encode("utf-16-le")
    for i in range(0, len(data), 2):
        code = data[i] | (data[i + 1] << 8)
        h = _to_int32((h << 5) - h + code)
    return abs(h)


class SeededRandom:
    """Deterministic generator driven by a string seed.

    Example:
        rng = SeededRandom("run-42|boss=3")
        rng.next_int(0, 10)
        rng.shuffle(["a", "b", "c"])
    """

    def __init__(self, seed: str):
        self._state = hash_seed(seed)

    @property
    def state(self) -> int:
        return self._state

    def next(self) -> float:
        """Advance the state and return a float in [0, 1)."""
        self._state = _to_int32(self._state + _INCREMENT)
        s = self._state
        t = _imul(s ^ (_to_uint32(s) >> 15), 1 | s)
        t = _to_int32(_to_int32(t + _imul(t ^ (_to_uint32(t) >> 7), 61 | t)) ^ t)
        return _to_uint32(t ^ (_to_uint32(t) >> 14)) / _TWO_POW_32

    def next_int(self, min_value: int, max_value: int) -> int:
        """Random integer in [min_value, max_value).

        Raises:
            ValueError: If ``max_value <= min_value``.
        """
        if max_value <= min_value:
            raise ValueError(
                f"next_int requires max > min, got min={min_value} max={max_value}"
            )
        return int(self.next() * (max_value - min_value)) + min_value

    def shuffle(self, items: Sequence[T]) -> list[T]:
        """Return a Fisher-Yates shuffled copy. Draws ``len(items) - 1`` times."""
        result = list(items)
        for i in range(len(result) - 1, 0, -1):
            j = self.next_int(0, i + 1)
            result[i], result[j] = result[j], result[i]
        return result

    def pick_one(self, items: Sequence[T]) -> T | None:
        """Pick one element, or None for an empty sequence (no draw consumed)."""
        if not items:
            return None
        return items[self.next_int(0, len(items))]
