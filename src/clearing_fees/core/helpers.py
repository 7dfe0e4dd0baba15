"""
Proportion and root helpers built on the checked integer types.
"""

from __future__ import annotations

from typing import Union

from .amounts import U128, nth_root

U128Like = Union[U128, int]


def get_proportion_u128(value: U128Like, numerator: U128Like, denominator: U128Like) -> U128:
    """Return floor(value * numerator / denominator).

    The multiply is checked before the divide, so an intermediate product
    above U128 raises MathError even when the final quotient would fit.
    A zero denominator raises MathError.
    """
    return (
        U128.of(value)
        .checked_mul(U128.of(numerator))
        .checked_div(U128.of(denominator))
    )


def fourth_root(value: int) -> int:
    """Integer floor fourth root."""
    return nth_root(value, 4)


__all__ = [
    "get_proportion_u128",
    "fourth_root",
    "nth_root",
]
