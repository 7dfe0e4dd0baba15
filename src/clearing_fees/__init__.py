# Top-level API for clearing_fees (integer-domain).
"""
Top-level API for clearing_fees (integer-domain).

This module exposes the fee engine used at trade settlement:
  - calculate_fee_for_order_fulfill_against_amm: taker (or post-only maker) vs. the AMM
  - calculate_fee_for_fulfillment_with_match: taker vs. a resting maker order
  - calculate_fee_for_fulfillment_with_serum: fill routed through the external venue

Configuration is an explicit, immutable FeeStructure. Results are frozen
FillFees / SerumFillFees records in fixed-point quote units. Every arithmetic
step is checked and raises MathError on failure.
"""

# NOTE:
#   Checked integer primitives, casts and display helpers live under
#   `clearing_fees.core`. Import them from there when building callers.

from __future__ import annotations

from .config import (
    FeeStructure,
    ReferralDiscount,
    OrderFillerRewardStructure,
    load_fee_structure,
)
from .fees import (
    FillFees,
    SerumFillFees,
    calculate_fee,
    calculate_fee_for_order_fulfill_against_amm,
    calculate_fee_for_fulfillment_with_match,
    calculate_fee_for_fulfillment_with_serum,
)
from .filler import (
    calculate_filler_reward,
    size_based_filler_reward,
    time_based_filler_reward,
)
from .referral import calculate_referrer_reward_and_referee_discount
from .paused import PausedOperations, is_operation_paused, ensure_fill_allowed
from .core import (
    QUOTE_PRECISION,
    MathError,
    ConfigError,
    OperationPausedError,
)

__all__ = [
    # configuration
    "FeeStructure",
    "ReferralDiscount",
    "OrderFillerRewardStructure",
    "load_fee_structure",
    # fee paths
    "FillFees",
    "SerumFillFees",
    "calculate_fee",
    "calculate_fee_for_order_fulfill_against_amm",
    "calculate_fee_for_fulfillment_with_match",
    "calculate_fee_for_fulfillment_with_serum",
    # reward models
    "calculate_filler_reward",
    "size_based_filler_reward",
    "time_based_filler_reward",
    "calculate_referrer_reward_and_referee_discount",
    # paused operations
    "PausedOperations",
    "is_operation_paused",
    "ensure_fill_allowed",
    # constants / errors
    "QUOTE_PRECISION",
    "MathError",
    "ConfigError",
    "OperationPausedError",
]
