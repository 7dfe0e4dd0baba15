"""
Checked fixed-width integers: U64, I64, U128 and I128.

- Every value is a plain Python int held inside a frozen wrapper whose width
  and signedness bound it; construction outside the bounds raises MathError.
- Every arithmetic operation is checked: overflow, underflow and division by
  zero raise MathError instead of wrapping, clamping or truncating.
- Division truncates toward zero (fixed-width integer semantics). For the
  unsigned widths this is floor division.
- Operands must share a width. Mixing widths is a TypeError; convert
  explicitly with the helpers in `casting`.

Operators map onto the checked methods, so `a + b` and `a.checked_add(b)`
are the same operation and both may raise.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, TypeVar, Union

from .constants import U64_MAX, I64_MIN, I64_MAX, U128_MAX, I128_MIN, I128_MAX
from .exc import MathError

T = TypeVar("T", bound="CheckedInt")


# ----------------------------
# Integer helpers (centralised)
# ----------------------------

def _is_plain_int(x: object) -> bool:
    return isinstance(x, int) and not isinstance(x, bool)


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero; `b` must be non-zero."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def nth_root(value: int, n: int) -> int:
    """Return floor(value ** (1/n)) for a non-negative integer, without floats.

    Integer Newton iteration started from a power of two known to be at or
    above the root; the sequence then decreases monotonically to the floor.
    """
    if not _is_plain_int(value) or not _is_plain_int(n):
        raise TypeError("nth_root expects int arguments")
    if n < 1:
        raise MathError(f"nth_root: degree must be >= 1 (n={n})")
    if value < 0:
        raise MathError(f"nth_root: negative radicand {value}")
    if value < 2 or n == 1:
        return value

    x = 1 << -(-value.bit_length() // n)
    while True:
        y = ((n - 1) * x + value // x ** (n - 1)) // n
        if y >= x:
            return x
        x = y


# ----------------------------
# Checked integer base
# ----------------------------

@dataclass(frozen=True, order=True)
class CheckedInt:
    """Fixed-width integer whose every operation is overflow-checked.

    Subclasses set MIN and MAX. Instances are immutable and compare only with
    instances of the same width.
    """

    value: int

    MIN: ClassVar[int] = 0
    MAX: ClassVar[int] = 0

    def __post_init__(self):
        if not _is_plain_int(self.value):
            raise TypeError(f"{type(self).__name__} expects an int, got {type(self.value).__name__}")
        if self.value < self.MIN or self.value > self.MAX:
            raise MathError(
                f"{type(self).__name__} out of range: {self.value} not in [{self.MIN}, {self.MAX}]"
            )

    # ------------- constructors -------------

    @classmethod
    def zero(cls: type[T]) -> T:
        return cls(0)

    @classmethod
    def of(cls: type[T], x: Union[T, int]) -> T:
        """Accept either a same-width value or a plain int (range-checked)."""
        if isinstance(x, cls):
            return x
        if isinstance(x, CheckedInt):
            raise TypeError(f"expected {cls.__name__} or int, got {type(x).__name__}")
        return cls(x)

    def _new(self: T, v: int) -> T:
        if v < self.MIN or v > self.MAX:
            raise MathError(
                f"{type(self).__name__} overflow: {v} not in [{self.MIN}, {self.MAX}]"
            )
        return type(self)(v)

    def _operand(self: T, other: Union[T, int]) -> int:
        if isinstance(other, type(self)):
            return other.value
        if isinstance(other, CheckedInt) or not _is_plain_int(other):
            raise TypeError(
                f"{type(self).__name__} arithmetic requires {type(self).__name__} or int operands, "
                f"got {type(other).__name__}"
            )
        return type(self)(other).value

    # ------------- predicates -------------

    def is_zero(self) -> bool:
        return self.value == 0

    def is_negative(self) -> bool:
        return self.value < 0

    # ------------- checked arithmetic -------------

    def checked_add(self: T, other: Union[T, int]) -> T:
        return self._new(self.value + self._operand(other))

    def checked_sub(self: T, other: Union[T, int]) -> T:
        return self._new(self.value - self._operand(other))

    def checked_mul(self: T, other: Union[T, int]) -> T:
        return self._new(self.value * self._operand(other))

    def checked_div(self: T, other: Union[T, int]) -> T:
        d = self._operand(other)
        if d == 0:
            raise MathError(f"{type(self).__name__} division by zero")
        # I*_MIN / -1 overflows; _new catches it.
        return self._new(_trunc_div(self.value, d))

    def checked_nth_root(self: T, n: int) -> T:
        return self._new(nth_root(self.value, n))

    def min(self: T, other: T) -> T:
        self._operand(other)
        return self if self <= other else other

    def max(self: T, other: T) -> T:
        self._operand(other)
        return self if self >= other else other

    # ------------- operators (all checked) -------------

    def __add__(self: T, other: Union[T, int]) -> T:
        return self.checked_add(other)

    def __sub__(self: T, other: Union[T, int]) -> T:
        return self.checked_sub(other)

    def __mul__(self: T, other: Union[T, int]) -> T:
        return self.checked_mul(other)

    def __floordiv__(self: T, other: Union[T, int]) -> T:
        return self.checked_div(other)

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


class U64(CheckedInt):
    """Unsigned 64-bit integer."""
    MIN = 0
    MAX = U64_MAX


class I64(CheckedInt):
    """Signed 64-bit integer (timestamps are carried as I64 ticks)."""
    MIN = I64_MIN
    MAX = I64_MAX


class U128(CheckedInt):
    """Unsigned 128-bit integer (quote amounts, ratios)."""
    MIN = 0
    MAX = U128_MAX


class I128(CheckedInt):
    """Signed 128-bit integer (market and fee-pool deltas)."""
    MIN = I128_MIN
    MAX = I128_MAX


__all__ = [
    "CheckedInt",
    "U64",
    "I64",
    "U128",
    "I128",
    "nth_root",
]
