import pytest

from clearing_fees import MathError, calculate_fee_for_fulfillment_with_serum

SERUM_FEE = 32_000  # 3.2 bps
SERUM_REFERRER_REBATE = 8_000  # .8 bps


def test_no_filler(quote_asset_amount, fee_structure_default):
    fees = calculate_fee_for_fulfillment_with_serum(
        quote_asset_amount, fee_structure_default, 0, 0, False, SERUM_FEE, SERUM_REFERRER_REBATE, 0
    )
    assert fees.user_fee == 100_000
    assert fees.fee_to_market == 68_000
    assert fees.fee_pool_delta == 60_000
    assert fees.filler_reward == 0


def test_filler_reward_from_excess_user_fee(quote_asset_amount, fee_structure_default):
    fees = calculate_fee_for_fulfillment_with_serum(
        quote_asset_amount, fee_structure_default, 0, 0, True, SERUM_FEE, SERUM_REFERRER_REBATE, 0
    )
    assert fees.user_fee == 100_000
    assert fees.fee_to_market == 58_000
    assert fees.fee_pool_delta == 50_000
    assert fees.filler_reward == 10_000


def test_filler_reward_from_fee_pool(quote_asset_amount, fee_structure_four_bps):
    print("[serum-fee-pool] user fee == venue take; filler advanced from pool of 10000")
    fees = calculate_fee_for_fulfillment_with_serum(
        quote_asset_amount, fee_structure_four_bps, 0, 0, True, SERUM_FEE, SERUM_REFERRER_REBATE, 10_000
    )
    assert fees.user_fee == 40_000
    assert fees.fee_to_market == 4_000
    assert fees.fee_pool_delta == -4_000
    assert fees.filler_reward == 4_000


def test_filler_reward_from_smaller_fee_pool(quote_asset_amount, fee_structure_four_bps):
    print("[serum-fee-pool] pool of 2000 caps the filler reward")
    fees = calculate_fee_for_fulfillment_with_serum(
        quote_asset_amount, fee_structure_four_bps, 0, 0, True, SERUM_FEE, SERUM_REFERRER_REBATE, 2_000
    )
    assert fees.user_fee == 40_000
    assert fees.fee_to_market == 6_000
    assert fees.fee_pool_delta == -2_000
    assert fees.filler_reward == 2_000


def test_user_fee_floored_at_venue_take(quote_asset_amount, fee_structure_four_bps):
    fees = calculate_fee_for_fulfillment_with_serum(
        quote_asset_amount, fee_structure_four_bps, 0, 0, False, 50_000, 10_000, 0
    )
    assert fees.user_fee == 60_000
    assert fees.fee_to_market == 10_000
    assert fees.fee_pool_delta == 0


def test_empty_pool_and_no_excess_pays_no_filler(quote_asset_amount, fee_structure_four_bps):
    fees = calculate_fee_for_fulfillment_with_serum(
        quote_asset_amount, fee_structure_four_bps, 0, 0, True, SERUM_FEE, SERUM_REFERRER_REBATE, 0
    )
    assert fees.filler_reward == 0
    assert fees.fee_pool_delta == 0


@pytest.mark.parametrize("serum_fee,rebate", [(0, 0), (32_000, 8_000), (120_000, 30_000), (90_000, 70_000)])
@pytest.mark.parametrize("pool", [0, 2_000, 10 ** 9])
@pytest.mark.parametrize("reward_filler", [False, True])
def test_invariants(quote_asset_amount, fee_structure_default, serum_fee, rebate, pool, reward_filler):
    fees = calculate_fee_for_fulfillment_with_serum(
        quote_asset_amount, fee_structure_default, 0, 30, reward_filler, serum_fee, rebate, pool
    )
    assert fees.user_fee >= serum_fee + rebate
    assert fees.user_fee == fees.fee_to_market + serum_fee + fees.filler_reward
    assert fees.fee_pool_delta == fees.fee_to_market - rebate


def test_venue_fee_overflow_raises(quote_asset_amount, fee_structure_default):
    with pytest.raises(MathError):
        calculate_fee_for_fulfillment_with_serum(
            quote_asset_amount, fee_structure_default, 0, 0, False, 2 ** 128 - 1, 1, 0
        )


def test_negative_pool_rejected(quote_asset_amount, fee_structure_default):
    with pytest.raises(MathError):
        calculate_fee_for_fulfillment_with_serum(
            quote_asset_amount, fee_structure_default, 0, 0, True, SERUM_FEE, SERUM_REFERRER_REBATE, -1
        )


def test_pool_draw_beyond_what_venue_left_aborts(quote_asset_amount, fee_structure_default):
    print("[serum-pool-draw] venue took the whole user fee; pool-funded filler would push fee_to_market negative")
    with pytest.raises(MathError):
        calculate_fee_for_fulfillment_with_serum(
            quote_asset_amount, fee_structure_default, 0, 0, True, 150_000, 0, 10 ** 9
        )
