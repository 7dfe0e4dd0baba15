"""Demo: fee breakdowns for the three liquidity paths.

Scenarios covered:
S1a) Matched fill, no filler, no referral
S1b) Matched fill, filler paid on a 60-tick-old order (time-based reward binds)
S1c) Matched fill with referral
S2a) AMM fill with referral, zero surplus
S2b) AMM fill with negative surplus (slippage absorbed by the market)
S2c) AMM post-only fill paid from surplus
S3a) Serum fill, filler paid from this fill's excess over the venue fee
S3b) Serum fill, filler advanced from a small fee pool
"""
from __future__ import annotations

import argparse
from dataclasses import fields, replace

from clearing_fees import (
    FeeStructure,
    ReferralDiscount,
    OrderFillerRewardStructure,
    FillFees,
    calculate_fee_for_order_fulfill_against_amm,
    calculate_fee_for_fulfillment_with_match,
    calculate_fee_for_fulfillment_with_serum,
)
from clearing_fees.core import QUOTE_PRECISION, fmt_quote

# ---------- pretty printers ----------

def print_result(title: str, result, *, raw: bool = False) -> None:
    print(f"\n=== {title} ===")
    for f in fields(result):
        v = getattr(result, f.name)
        shown = str(v) if raw else fmt_quote(v)
        print(f"  {f.name:<22} {shown:>16}")
    if isinstance(result, FillFees):
        # taker fee decomposition; AMM surplus shows up as the residual
        parts = result.fee_to_market + result.filler_reward + result.referrer_reward + result.maker_rebate
        print(f"  {'(market+filler+referrer+rebate)':<22} {fmt_quote(parts):>16}")


# ---------- scenarios ----------

def run(raw: bool) -> None:
    notional = 100 * QUOTE_PRECISION
    default = FeeStructure()
    referral = replace(default, referral_discount=ReferralDiscount(1, 10, 1, 10))
    whole_fee_filler = replace(default, filler_reward_structure=OrderFillerRewardStructure(1, 1))
    four_bps = replace(default, fee_numerator=4, fee_denominator=10_000)

    print(f"Notional: {fmt_quote(notional)} quote")

    print_result(
        "S1a matched, no filler",
        calculate_fee_for_fulfillment_with_match(notional, default, 0, 0, False, False),
        raw=raw,
    )
    print_result(
        "S1b matched, filler on 60-tick-old order",
        calculate_fee_for_fulfillment_with_match(notional, whole_fee_filler, 0, 60, True, False),
        raw=raw,
    )
    print_result(
        "S1c matched, referral 10%/10%",
        calculate_fee_for_fulfillment_with_match(notional, referral, 0, 0, False, True),
        raw=raw,
    )
    print_result(
        "S2a AMM, referral 10%/10%, no surplus",
        calculate_fee_for_order_fulfill_against_amm(notional, referral, 0, 60, False, True, 0, False),
        raw=raw,
    )
    print_result(
        "S2b AMM, surplus -50000",
        calculate_fee_for_order_fulfill_against_amm(notional, default, 0, 0, False, False, -50_000, False),
        raw=raw,
    )
    print_result(
        "S2c AMM post-only, surplus 30000, filler paid",
        calculate_fee_for_order_fulfill_against_amm(notional, default, 0, 0, True, False, 30_000, True),
        raw=raw,
    )
    print_result(
        "S3a serum, filler from excess user fee",
        calculate_fee_for_fulfillment_with_serum(notional, default, 0, 0, True, 32_000, 8_000, 0),
        raw=raw,
    )
    print_result(
        "S3b serum at 4 bps, filler from fee pool of 2000",
        calculate_fee_for_fulfillment_with_serum(notional, four_bps, 0, 0, True, 32_000, 8_000, 2_000),
        raw=raw,
    )


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Print fee breakdowns for reference scenarios.")
    parser.add_argument("--raw", action="store_true", help="Show raw integer quote units instead of decimals")
    run(parser.parse_args().raw)
