"""
Clearing Fees Core
==================

Unified exports for the integer-domain primitives used by the fee engine:
checked fixed-width integers, lossless casts, scaled proportions and the
integer root. Decimal helpers are provided *only* for display.
"""

# NOTE:
#   Every arithmetic step in the fee calculators goes through the checked
#   types defined here. A failure anywhere raises MathError and aborts the
#   whole computation; nothing is clamped or wrapped.

# Integer-domain constants
from .constants import (
    QUOTE_PRECISION,
    QUOTE_PRECISION_EXP,
    U64_MAX,
    I64_MIN,
    I64_MAX,
    U128_MAX,
    I128_MIN,
    I128_MAX,
    FILLER_TIME_REWARD_SCALE,
    FILLER_TIME_REWARD_ROOT_SCALE,
)

# Checked integer primitives
from .amounts import (
    CheckedInt,
    U64,
    I64,
    U128,
    I128,
    nth_root,
)

# Lossless casts
from .casting import (
    cast,
    cast_to_u128,
    cast_to_i128,
    cast_to_u64,
    cast_to_i64,
)

# Proportions and roots
from .helpers import (
    get_proportion_u128,
    fourth_root,
)

# Decimal formatting helpers (non-core arithmetic)
from .fmt import (
    quote_to_decimal,
    fmt_quote,
    fees_to_dict,
)

# Core exceptions
from .exc import MathError, ConfigError, OperationPausedError

__all__ = [
    # constants
    "QUOTE_PRECISION",
    "QUOTE_PRECISION_EXP",
    "U64_MAX",
    "I64_MIN",
    "I64_MAX",
    "U128_MAX",
    "I128_MIN",
    "I128_MAX",
    "FILLER_TIME_REWARD_SCALE",
    "FILLER_TIME_REWARD_ROOT_SCALE",
    # amounts
    "CheckedInt",
    "U64",
    "I64",
    "U128",
    "I128",
    "nth_root",
    # casting
    "cast",
    "cast_to_u128",
    "cast_to_i128",
    "cast_to_u64",
    "cast_to_i64",
    # helpers
    "get_proportion_u128",
    "fourth_root",
    # fmt
    "quote_to_decimal",
    "fmt_quote",
    "fees_to_dict",
    # exceptions
    "MathError",
    "ConfigError",
    "OperationPausedError",
]
