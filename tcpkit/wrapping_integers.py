"""32-bit wrapping sequence numbers relative to an arbitrary zero point."""

from __future__ import annotations

from dataclasses import dataclass

_MODULUS = 1 << 32
_MASK = _MODULUS - 1


@dataclass(frozen=True)
class Wrap32:
    """A 32-bit unsigned integer that wraps back to zero after 2**32 - 1."""

    raw_value: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "raw_value", self.raw_value & _MASK)

    @classmethod
    def wrap(cls, n: int, zero_point: Wrap32) -> Wrap32:
        """Wrap the absolute sequence number ``n`` relative to ``zero_point``."""
        return cls(n + zero_point.raw_value)

    def unwrap(self, zero_point: Wrap32, checkpoint: int) -> int:
        """Return the absolute sequence number closest to ``checkpoint`` that wraps to this value."""
        offset = (self.raw_value - zero_point.raw_value) % _MODULUS
        lower = offset + (checkpoint // _MODULUS) * _MODULUS
        if lower > checkpoint:
            if lower < _MODULUS:
                return lower
            below = lower - _MODULUS
            return below if lower - checkpoint > checkpoint - below else lower
        above = lower + _MODULUS
        return above if checkpoint - lower > above - checkpoint else lower

    def __add__(self, n: int) -> Wrap32:
        if not isinstance(n, int):
            return NotImplemented
        return Wrap32(self.raw_value + n)

    def __str__(self) -> str:
        return f"Wrap32<{self.raw_value}>"