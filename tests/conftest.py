from __future__ import annotations

from dataclasses import replace

import pytest

# Import project primitives
from clearing_fees import FeeStructure, ReferralDiscount, OrderFillerRewardStructure
from clearing_fees.core import QUOTE_PRECISION


# -----------------------------
# Pytest fixtures
# -----------------------------

@pytest.fixture()
def quote_asset_amount() -> int:
    """100 quote; at the default 0.1% fee this is a 100000-unit fee."""
    return 100 * QUOTE_PRECISION


@pytest.fixture()
def fee_structure_default() -> FeeStructure:
    return FeeStructure()


@pytest.fixture()
def fee_structure_referral() -> FeeStructure:
    """Referrer reward and referee discount both 1/10 of the gross fee."""
    return replace(FeeStructure(), referral_discount=ReferralDiscount(1, 10, 1, 10))


@pytest.fixture()
def fee_structure_whole_fee_filler() -> FeeStructure:
    """Size-based filler reward equal to the whole fee, so the time curve binds."""
    return replace(FeeStructure(), filler_reward_structure=OrderFillerRewardStructure(reward_numerator=1, reward_denominator=1))


@pytest.fixture()
def fee_structure_four_bps() -> FeeStructure:
    return replace(FeeStructure(), fee_numerator=4, fee_denominator=10_000)
