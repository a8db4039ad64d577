from dataclasses import dataclass
from enum import Enum
from typing import Union

# Results are machine integers, like a C long on a 64-bit platform.
LONG_BITS = 64
LONG_MIN = -(1 << (LONG_BITS - 1))
LONG_MAX = (1 << (LONG_BITS - 1)) - 1


class ErrorKind(Enum):
    DIVIDE_BY_ZERO = "Division By Zero!"
    UNKNOWN_OPERATOR = "Invalid Operator!"
    INVALID_NUMBER = "Invalid Number!"


@dataclass(frozen=True)
class Num:
    value: int

    def render(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Err:
    kind: ErrorKind

    def render(self) -> str:
        return f"Error: {self.kind.value}"


Result = Union[Num, Err]


def wrap(value: int) -> int:
    """Fold an unbounded int into the signed 64-bit range (two's complement)."""
    value &= (1 << LONG_BITS) - 1
    if value > LONG_MAX:
        value -= 1 << LONG_BITS
    return value


def in_range(value: int) -> bool:
    return LONG_MIN <= value <= LONG_MAX


def trunc_div(x: int, y: int) -> int:
    """Integer division rounding toward zero. ``y`` must be non-zero."""
    q = abs(x) // abs(y)
    if (x < 0) != (y < 0):
        q = -q
    return wrap(q)


def trunc_mod(x: int, y: int) -> int:
    """Remainder with the sign of the dividend, so ``x == trunc_div(x, y) * y + trunc_mod(x, y)``."""
    r = abs(x) % abs(y)
    return -r if x < 0 else r
