"""
Lossless conversions between the checked integer widths.

A cast either reproduces the exact value in the target width or raises
MathError. Nothing is truncated, wrapped or clamped.
"""

from __future__ import annotations

from typing import Type, TypeVar, Union

from .amounts import CheckedInt, U64, I64, U128, I128
from .exc import MathError

T = TypeVar("T", bound=CheckedInt)

Castable = Union[CheckedInt, int]


def cast(x: Castable, target: Type[T]) -> T:
    """Convert `x` into `target`, raising MathError if it does not fit."""
    if isinstance(x, CheckedInt):
        v = x.value
    elif isinstance(x, int) and not isinstance(x, bool):
        v = x
    else:
        raise TypeError(f"cannot cast {type(x).__name__} to {target.__name__}")
    if v < target.MIN or v > target.MAX:
        raise MathError(f"cast of {v} to {target.__name__} would lose information")
    return target(v)


def cast_to_u128(x: Castable) -> U128:
    return cast(x, U128)


def cast_to_i128(x: Castable) -> I128:
    return cast(x, I128)


def cast_to_u64(x: Castable) -> U64:
    return cast(x, U64)


def cast_to_i64(x: Castable) -> I64:
    return cast(x, I64)


__all__ = [
    "cast",
    "cast_to_u128",
    "cast_to_i128",
    "cast_to_u64",
    "cast_to_i64",
]
