"""
Clearing Fees Core Constants (integer domain)
=============================================

Precision scales, fixed-width integer bounds and default fee parameters.
All values are plain integers; nothing here is read implicitly by the fee
calculators, which only see what the caller passes in a FeeStructure.
"""

# NOTE: Quote amounts are fixed-point integers with QUOTE_PRECISION units per 1 quote.

# ---------------------------------------------------------------------------
# Quote precision
# ---------------------------------------------------------------------------

#: Number of decimal places carried by quote-denominated amounts.
QUOTE_PRECISION_EXP: int = 6
QUOTE_PRECISION: int = 10 ** QUOTE_PRECISION_EXP   # 1e6


# ---------------------------------------------------------------------------
# Fixed-width integer bounds
# ---------------------------------------------------------------------------

U64_MAX: int = (1 << 64) - 1
I64_MIN: int = -(1 << 63)
I64_MAX: int = (1 << 63) - 1

U128_MAX: int = (1 << 128) - 1
I128_MIN: int = -(1 << 127)
I128_MAX: int = (1 << 127) - 1


# ---------------------------------------------------------------------------
# Filler reward curve
# ---------------------------------------------------------------------------

#: Elapsed ticks are scaled by 1e8 before the fourth root is taken ...
FILLER_TIME_REWARD_SCALE: int = 100_000_000
#: ... and the root is divided back down by 1e2 = sqrt(sqrt(1e8)).
FILLER_TIME_REWARD_ROOT_SCALE: int = 100


# ---------------------------------------------------------------------------
# Default fee structure (0.1% fee, 60% maker rebate)
# ---------------------------------------------------------------------------

DEFAULT_FEE_NUMERATOR: int = 10
DEFAULT_FEE_DENOMINATOR: int = 10_000

DEFAULT_MAKER_REBATE_NUMERATOR: int = 6
DEFAULT_MAKER_REBATE_DENOMINATOR: int = 10

DEFAULT_REFERRER_REWARD_NUMERATOR: int = 5
DEFAULT_REFERRER_REWARD_DENOMINATOR: int = 100
DEFAULT_REFEREE_DISCOUNT_NUMERATOR: int = 5
DEFAULT_REFEREE_DISCOUNT_DENOMINATOR: int = 100

DEFAULT_FILLER_REWARD_NUMERATOR: int = 1
DEFAULT_FILLER_REWARD_DENOMINATOR: int = 10
#: One cent of quote.
DEFAULT_TIME_BASED_REWARD_LOWER_BOUND: int = QUOTE_PRECISION // 100


# ---------------------------------------------------------------------------
# Metadata
# ---------------------------------------------------------------------------

__all__ = [
    "QUOTE_PRECISION_EXP",
    "QUOTE_PRECISION",
    "U64_MAX",
    "I64_MIN",
    "I64_MAX",
    "U128_MAX",
    "I128_MIN",
    "I128_MAX",
    "FILLER_TIME_REWARD_SCALE",
    "FILLER_TIME_REWARD_ROOT_SCALE",
    "DEFAULT_FEE_NUMERATOR",
    "DEFAULT_FEE_DENOMINATOR",
    "DEFAULT_MAKER_REBATE_NUMERATOR",
    "DEFAULT_MAKER_REBATE_DENOMINATOR",
    "DEFAULT_REFERRER_REWARD_NUMERATOR",
    "DEFAULT_REFERRER_REWARD_DENOMINATOR",
    "DEFAULT_REFEREE_DISCOUNT_NUMERATOR",
    "DEFAULT_REFEREE_DISCOUNT_DENOMINATOR",
    "DEFAULT_FILLER_REWARD_NUMERATOR",
    "DEFAULT_FILLER_REWARD_DENOMINATOR",
    "DEFAULT_TIME_BASED_REWARD_LOWER_BOUND",
]
