"""
Paused-operation flags for a market.

Governance can pause individual operations by setting bits in a per-market
mask. Callers check the mask before settling a fill; the fee calculators
themselves never consult it.
"""

from __future__ import annotations

from enum import IntFlag
from typing import Union

from .core.exc import OperationPausedError


class PausedOperations(IntFlag):
    #: funding rate updates are paused
    FUNDING = 0b00000001
    #: fills against the AMM are blocked
    AMM_FILLS = 0b00000010
    #: all fills are blocked
    FILL = 0b00000100
    #: settling negative pnl / depositing is paused
    WITHDRAW = 0b00001000


def is_operation_paused(current: Union[PausedOperations, int], operation: PausedOperations) -> bool:
    return int(current) & int(operation) != 0


def ensure_fill_allowed(current: Union[PausedOperations, int], *, against_amm: bool) -> None:
    """Raise OperationPausedError if the fill may not be settled."""
    if is_operation_paused(current, PausedOperations.FILL):
        raise OperationPausedError(PausedOperations.FILL, int(current))
    if against_amm and is_operation_paused(current, PausedOperations.AMM_FILLS):
        raise OperationPausedError(PausedOperations.AMM_FILLS, int(current))


__all__ = [
    "PausedOperations",
    "is_operation_paused",
    "ensure_fill_allowed",
]
