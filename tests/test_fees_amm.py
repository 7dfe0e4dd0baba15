import pytest

from clearing_fees import (
    FeeStructure,
    ReferralDiscount,
    OrderFillerRewardStructure,
    MathError,
    calculate_fee_for_order_fulfill_against_amm,
)


# ---------------------------
# Standard (taker vs. AMM) mode
# ---------------------------


def test_referrer(quote_asset_amount, fee_structure_referral):
    print("[amm-referrer] 100 quote, referral 1/10 each, zero surplus")
    fees = calculate_fee_for_order_fulfill_against_amm(
        quote_asset_amount, fee_structure_referral, 0, 60, False, True, 0, False
    )
    assert fees.user_fee == 90_000
    assert fees.fee_to_market == 80_000
    assert fees.filler_reward == 0
    assert fees.referrer_reward == 10_000
    assert fees.referee_discount == 10_000
    assert fees.fee_to_market_for_lp == 80_000
    assert fees.maker_rebate == 0


def test_no_extras(quote_asset_amount, fee_structure_default):
    fees = calculate_fee_for_order_fulfill_against_amm(
        quote_asset_amount, fee_structure_default, 0, 0, False, False, 0, False
    )
    assert fees.user_fee == 100_000
    assert fees.fee_to_market == 100_000
    assert fees.fee_to_market_for_lp == 100_000


@pytest.mark.parametrize("surplus", [-150_000, -50_000, 0, 25_000])
def test_surplus_goes_to_market_not_lp(quote_asset_amount, fee_structure_default, surplus):
    print(f"[amm-surplus] surplus={surplus} is added to fee_to_market and excluded from the LP share")
    fees = calculate_fee_for_order_fulfill_against_amm(
        quote_asset_amount, fee_structure_default, 0, 0, True, False, surplus, False
    )
    # filler = min(fee/10, lower bound) = 10000
    assert fees.filler_reward == 10_000
    assert fees.fee_to_market == 90_000 + surplus
    assert fees.fee_to_market_for_lp == 90_000
    assert fees.fee_to_market - fees.fee_to_market_for_lp == surplus


def test_filler_and_referral_together(quote_asset_amount, fee_structure_referral):
    fees = calculate_fee_for_order_fulfill_against_amm(
        quote_asset_amount, fee_structure_referral, 0, 0, True, True, 0, False
    )
    # filler is computed off the gross fee (100000), not the discounted user fee
    assert fees.filler_reward == 10_000
    assert fees.user_fee == 90_000
    assert fees.fee_to_market == 90_000 - 10_000 - 10_000


def test_filler_exceeding_user_fee_aborts(quote_asset_amount):
    # referee keeps 90% of the fee, filler wants the whole fee
    fee_structure = FeeStructure(
        referral_discount=ReferralDiscount(0, 1, 9, 10),
        filler_reward_structure=OrderFillerRewardStructure(1, 1, 10 ** 12),
    )
    with pytest.raises(MathError):
        calculate_fee_for_order_fulfill_against_amm(
            quote_asset_amount, fee_structure, 0, 0, True, True, 0, False
        )


# ---------------------------
# Post-only mode
# ---------------------------


def test_post_only_fee_comes_from_surplus(quote_asset_amount, fee_structure_referral):
    print("[amm-post-only] surplus=30000; user pays nothing, referral ignored, filler from surplus")
    fees = calculate_fee_for_order_fulfill_against_amm(
        quote_asset_amount, fee_structure_referral, 0, 0, True, True, 30_000, True
    )
    assert fees.user_fee == 0
    assert fees.maker_rebate == 0
    assert fees.referrer_reward == 0
    assert fees.referee_discount == 0
    assert fees.filler_reward == 3_000  # size-based: surplus / 10
    assert fees.fee_to_market == 27_000
    assert fees.fee_to_market_for_lp == 0


def test_post_only_without_filler(quote_asset_amount, fee_structure_default):
    fees = calculate_fee_for_order_fulfill_against_amm(
        quote_asset_amount, fee_structure_default, 0, 0, False, False, 30_000, True
    )
    assert fees.fee_to_market == 30_000
    assert fees.filler_reward == 0


def test_post_only_negative_surplus_raises(quote_asset_amount, fee_structure_default):
    with pytest.raises(MathError):
        calculate_fee_for_order_fulfill_against_amm(
            quote_asset_amount, fee_structure_default, 0, 0, False, False, -1, True
        )


def test_surplus_out_of_i128_range_raises(quote_asset_amount, fee_structure_default):
    with pytest.raises(MathError):
        calculate_fee_for_order_fulfill_against_amm(
            quote_asset_amount, fee_structure_default, 0, 0, False, False, 2 ** 127, False
        )
