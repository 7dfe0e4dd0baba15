"""
Referral split: referrer reward and referee discount, each carved
independently from the same gross fee before any filler deduction.
"""

from __future__ import annotations

from typing import Tuple, Union

from .config import FeeStructure
from .core import U128, get_proportion_u128


def calculate_referrer_reward_and_referee_discount(
    fee: Union[U128, int],
    fee_structure: FeeStructure,
) -> Tuple[U128, U128]:
    """Return (referrer_reward, referee_discount) for a gross fee."""
    referral = fee_structure.referral_discount
    return (
        get_proportion_u128(
            fee,
            referral.referrer_reward_numerator,
            referral.referrer_reward_denominator,
        ),
        get_proportion_u128(
            fee,
            referral.referee_discount_numerator,
            referral.referee_discount_denominator,
        ),
    )


__all__ = [
    "calculate_referrer_reward_and_referee_discount",
]
