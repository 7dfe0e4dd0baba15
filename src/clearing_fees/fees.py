"""
Fee topologies for the three liquidity paths.

- AMM fill:      taker trades against the exchange's own AMM.
- Matched fill:  two resting orders are matched directly; the maker is rebated.
- Serum fill:    the fill executes on an external venue that has already taken
                 its own fee and paid its own referrer rebate.

Every function is pure: scalars and a FeeStructure in, a frozen result record
out. All arithmetic is checked; the first failure raises MathError and no
partial result exists.

Alignment notes:
- Referral and filler rewards are always computed off the *gross* fee.
- `fee_to_market` on the matched path must stay non-negative; an
  under-funded fee tier is a hard failure, never clamped to zero.
- On the Serum path the exchange fee is floored at what the venue already
  extracted, so the fee pool is never net-debited by venue fee variance.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .config import FeeStructure
from .core import (
    I64,
    I128,
    U128,
    U128_MAX,
    I128_MIN,
    I128_MAX,
    MathError,
    cast_to_i128,
    cast_to_u128,
    get_proportion_u128,
)
from .filler import calculate_filler_reward
from .referral import calculate_referrer_reward_and_referee_discount

# Debug printing control
DEBUG_FEES = False

def _dbg(msg: str) -> None:
    if DEBUG_FEES:
        print(f"[fees] {msg}")


U128Like = Union[U128, int]
I128Like = Union[I128, int]
I64Like = Union[I64, int]


def _check_range(record: object, name: str, lo: int, hi: int) -> None:
    v = getattr(record, name)
    if not isinstance(v, int) or isinstance(v, bool):
        raise TypeError(f"{type(record).__name__}.{name} must be an int, got {type(v).__name__}")
    if v < lo or v > hi:
        raise MathError(f"{type(record).__name__}.{name} out of range: {v}")


# ---------------------------------------------------------------------------
# Result records
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class FillFees:
    """Fee breakdown for an AMM or matched fill (quote units).

    Fields:
    - user_fee: fee charged to the taker, net of the referee discount.
    - maker_rebate: paid to the maker (matched fills only).
    - fee_to_market: signed amount kept by the market, including any AMM surplus.
    - fee_to_market_for_lp: the part of fee_to_market attributable to LPs
      (surplus excluded).
    - filler_reward, referee_discount, referrer_reward: as named.
    """

    user_fee: int
    maker_rebate: int
    fee_to_market: int
    fee_to_market_for_lp: int
    filler_reward: int
    referee_discount: int
    referrer_reward: int

    def __post_init__(self):
        for name in ("user_fee", "maker_rebate", "filler_reward", "referee_discount", "referrer_reward"):
            _check_range(self, name, 0, U128_MAX)
        for name in ("fee_to_market", "fee_to_market_for_lp"):
            _check_range(self, name, I128_MIN, I128_MAX)


@dataclass(frozen=True)
class SerumFillFees:
    """Fee breakdown for a fill executed on the external (Serum) venue."""

    user_fee: int
    fee_to_market: int
    fee_pool_delta: int
    filler_reward: int

    def __post_init__(self):
        for name in ("user_fee", "fee_to_market", "filler_reward"):
            _check_range(self, name, 0, U128_MAX)
        _check_range(self, "fee_pool_delta", I128_MIN, I128_MAX)


# ---------------------------------------------------------------------------
# Shared steps
# ---------------------------------------------------------------------------

def calculate_fee(quote_asset_amount: U128Like, fee_structure: FeeStructure) -> U128:
    """Gross exchange fee for a notional."""
    return get_proportion_u128(
        quote_asset_amount,
        fee_structure.fee_numerator,
        fee_structure.fee_denominator,
    )


def _referral(fee: U128, fee_structure: FeeStructure, reward_referrer: bool):
    if not reward_referrer:
        return U128.zero(), U128.zero()
    return calculate_referrer_reward_and_referee_discount(fee, fee_structure)


def _filler(fee: U128, order_ts: I64Like, now: I64Like, fee_structure: FeeStructure, reward_filler: bool) -> U128:
    if not reward_filler:
        return U128.zero()
    return calculate_filler_reward(fee, order_ts, now, fee_structure.filler_reward_structure)


# ---------------------------------------------------------------------------
# AMM fill
# ---------------------------------------------------------------------------

def calculate_fee_for_order_fulfill_against_amm(
    quote_asset_amount: U128Like,
    fee_structure: FeeStructure,
    order_ts: I64Like,
    now: I64Like,
    reward_filler: bool,
    reward_referrer: bool,
    quote_asset_amount_surplus: I128Like,
    is_post_only: bool,
) -> FillFees:
    """Fees for a fill against the AMM.

    When `is_post_only` the order was a resting maker order and the AMM's
    price-improvement surplus is the whole fee base: the user pays nothing,
    referral is off, and the filler is paid out of the surplus. A negative
    surplus in this mode is a MathError.

    Otherwise the taker pays the regular fee and the (possibly negative)
    surplus is added on top of what the market keeps. `fee_to_market_for_lp`
    removes the surplus again so LPs are never credited with it.
    """
    surplus = I128.of(quote_asset_amount_surplus)

    if is_post_only:
        fee = cast_to_u128(surplus)
        filler_reward = _filler(fee, order_ts, now, fee_structure, reward_filler)
        fee_to_market = cast_to_i128(fee.checked_sub(filler_reward))
        _dbg(f"amm post-only: surplus={surplus} filler={filler_reward} to_market={fee_to_market}")
        return FillFees(
            user_fee=0,
            maker_rebate=0,
            fee_to_market=fee_to_market.value,
            fee_to_market_for_lp=0,
            filler_reward=filler_reward.value,
            referee_discount=0,
            referrer_reward=0,
        )

    fee = calculate_fee(quote_asset_amount, fee_structure)
    referrer_reward, referee_discount = _referral(fee, fee_structure, reward_referrer)
    user_fee = fee.checked_sub(referee_discount)
    filler_reward = _filler(fee, order_ts, now, fee_structure, reward_filler)

    fee_to_market = cast_to_i128(
        user_fee
        .checked_sub(filler_reward)
        .checked_sub(referrer_reward)
    ).checked_add(surplus)
    fee_to_market_for_lp = fee_to_market.checked_sub(surplus)

    _dbg(
        f"amm: fee={fee} user_fee={user_fee} filler={filler_reward} referrer={referrer_reward} "
        f"surplus={surplus} to_market={fee_to_market} for_lp={fee_to_market_for_lp}"
    )
    return FillFees(
        user_fee=user_fee.value,
        maker_rebate=0,
        fee_to_market=fee_to_market.value,
        fee_to_market_for_lp=fee_to_market_for_lp.value,
        filler_reward=filler_reward.value,
        referee_discount=referee_discount.value,
        referrer_reward=referrer_reward.value,
    )


# ---------------------------------------------------------------------------
# Matched fill
# ---------------------------------------------------------------------------

def calculate_fee_for_fulfillment_with_match(
    quote_asset_amount: U128Like,
    fee_structure: FeeStructure,
    order_ts: I64Like,
    now: I64Like,
    reward_filler: bool,
    reward_referrer: bool,
) -> FillFees:
    """Fees for a fill matched between a taker and a resting maker order.

    taker_fee == fee_to_market + filler_reward + referrer_reward + maker_rebate
    """
    fee = calculate_fee(quote_asset_amount, fee_structure)
    maker_rebate = get_proportion_u128(
        fee,
        fee_structure.maker_rebate_numerator,
        fee_structure.maker_rebate_denominator,
    )
    referrer_reward, referee_discount = _referral(fee, fee_structure, reward_referrer)
    taker_fee = fee.checked_sub(referee_discount)
    filler_reward = _filler(fee, order_ts, now, fee_structure, reward_filler)

    # must be non-negative
    fee_to_market = cast_to_i128(
        taker_fee
        .checked_sub(filler_reward)
        .checked_sub(referrer_reward)
        .checked_sub(maker_rebate)
    )

    _dbg(
        f"match: fee={fee} taker_fee={taker_fee} rebate={maker_rebate} filler={filler_reward} "
        f"referrer={referrer_reward} to_market={fee_to_market}"
    )
    return FillFees(
        user_fee=taker_fee.value,
        maker_rebate=maker_rebate.value,
        fee_to_market=fee_to_market.value,
        fee_to_market_for_lp=0,
        filler_reward=filler_reward.value,
        referee_discount=referee_discount.value,
        referrer_reward=referrer_reward.value,
    )


# ---------------------------------------------------------------------------
# Serum fill
# ---------------------------------------------------------------------------

def calculate_fee_for_fulfillment_with_serum(
    quote_asset_amount: U128Like,
    fee_structure: FeeStructure,
    order_ts: I64Like,
    now: I64Like,
    reward_filler: bool,
    serum_fee: U128Like,
    serum_referrer_rebate: U128Like,
    fee_pool_amount: U128Like,
) -> SerumFillFees:
    """Fees for a fill executed on Serum.

    The user pays at least `serum_fee + serum_referrer_rebate`. The filler can
    be paid immediately only out of what this fill collected above the venue's
    take, or out of the existing fee pool, whichever is larger; the reward is
    never above the regular filler formula.
    """
    fee = calculate_fee(quote_asset_amount, fee_structure)
    serum_fee = U128.of(serum_fee)
    serum_referrer_rebate = U128.of(serum_referrer_rebate)
    fee_pool_amount = U128.of(fee_pool_amount)

    serum_fee_plus_referrer_rebate = serum_fee.checked_add(serum_referrer_rebate)
    user_fee = fee.max(serum_fee_plus_referrer_rebate)

    if reward_filler:
        user_fee_available = user_fee.checked_sub(serum_fee_plus_referrer_rebate)
        available_fee = user_fee_available.max(fee_pool_amount)
        filler_reward = calculate_filler_reward(
            user_fee,
            order_ts,
            now,
            fee_structure.filler_reward_structure,
        ).min(available_fee)
    else:
        filler_reward = U128.zero()

    fee_to_market = user_fee.checked_sub(serum_fee).checked_sub(filler_reward)
    fee_pool_delta = cast_to_i128(fee_to_market).checked_sub(cast_to_i128(serum_referrer_rebate))

    _dbg(
        f"serum: fee={fee} user_fee={user_fee} serum_fee={serum_fee} rebate={serum_referrer_rebate} "
        f"pool={fee_pool_amount} filler={filler_reward} to_market={fee_to_market} pool_delta={fee_pool_delta}"
    )
    return SerumFillFees(
        user_fee=user_fee.value,
        fee_to_market=fee_to_market.value,
        fee_pool_delta=fee_pool_delta.value,
        filler_reward=filler_reward.value,
    )


__all__ = [
    "FillFees",
    "SerumFillFees",
    "calculate_fee",
    "calculate_fee_for_order_fulfill_against_amm",
    "calculate_fee_for_fulfillment_with_match",
    "calculate_fee_for_fulfillment_with_serum",
]
