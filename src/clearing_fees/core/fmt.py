"""
Formatting helpers (non-core arithmetic).

Core arithmetic is integer-only. Decimal here is only for display: CLI output,
demo tables and test messages. Nothing in this module feeds back into a fee
computation.
"""

from dataclasses import fields, is_dataclass
from decimal import Decimal, getcontext
from typing import Any, Dict, Union

from .amounts import CheckedInt
from .constants import QUOTE_PRECISION, QUOTE_PRECISION_EXP

# ---------------------------------------------------------------------------
# Global Decimal precision (formatting only)
# ---------------------------------------------------------------------------

#: Enough significant digits for a full I128 quote amount.
DEFAULT_DECIMAL_PRECISION: int = 48
getcontext().prec = DEFAULT_DECIMAL_PRECISION

#: One quote unit in Decimal (1e-6).
QUOTE_QUANTUM: Decimal = Decimal(1).scaleb(-QUOTE_PRECISION_EXP)


# ---------------------------------------------------------------------------
# Quote conversions
# ---------------------------------------------------------------------------

def quote_to_decimal(amount: Union[CheckedInt, int]) -> Decimal:
    """Convert a fixed-point quote amount into Decimal quote, for display only.

    Signed amounts keep their sign: -2000 -> Decimal('-0.002000').
    """
    v = int(amount)
    return (Decimal(v) / Decimal(QUOTE_PRECISION)).quantize(QUOTE_QUANTUM)


def fmt_quote(amount: Union[CheckedInt, int]) -> str:
    """Format a quote amount with its six fixed decimal places, e.g. '0.100000'."""
    return f"{quote_to_decimal(amount):f}"


# ---------------------------------------------------------------------------
# Record conversion
# ---------------------------------------------------------------------------

def fees_to_dict(record: Any, *, as_decimal: bool = False) -> Dict[str, Any]:
    """Flatten a fee result record into a JSON-friendly dict.

    Integers are kept as ints unless `as_decimal` is set, in which case each
    field is rendered as a fixed-point quote string.
    """
    if not is_dataclass(record) or isinstance(record, type):
        raise TypeError(f"fees_to_dict expects a dataclass instance, got {type(record).__name__}")
    out: Dict[str, Any] = {}
    for f in fields(record):
        v = getattr(record, f.name)
        out[f.name] = fmt_quote(v) if as_decimal else int(v)
    return out


__all__ = [
    "DEFAULT_DECIMAL_PRECISION",
    "QUOTE_QUANTUM",
    "quote_to_decimal",
    "fmt_quote",
    "fees_to_dict",
]
