#!/usr/bin/env python3
"""Compute the fee breakdown for a single fill and print it as JSON."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from clearing_fees import (
    FeeStructure,
    load_fee_structure,
    calculate_fee_for_order_fulfill_against_amm,
    calculate_fee_for_fulfillment_with_match,
    calculate_fee_for_fulfillment_with_serum,
    ensure_fill_allowed,
    MathError,
    ConfigError,
    OperationPausedError,
)
from clearing_fees.core.fmt import fees_to_dict


def _add_common(p: argparse.ArgumentParser) -> None:
    p.add_argument("--quote-asset-amount", type=int, required=True, help="Fill notional in quote units (1e6 = 1 quote)")
    p.add_argument("--order-ts", type=int, default=0, help="Order placement tick")
    p.add_argument("--now", type=int, default=0, help="Fill tick")
    p.add_argument("--reward-filler", action="store_true", help="Pay the filler")
    p.add_argument("--fee-structure", type=Path, default=None, help="JSON fee structure (defaults if omitted)")
    p.add_argument("--paused-ops", type=lambda s: int(s, 0), default=0, help="Paused-operations bit mask, e.g. 0b100")
    p.add_argument("--decimal", action="store_true", help="Render amounts as fixed-point quote strings")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Compute settlement fees for one fill.")
    sub = parser.add_subparsers(dest="path", required=True)

    amm = sub.add_parser("amm", help="Fill against the AMM")
    _add_common(amm)
    amm.add_argument("--reward-referrer", action="store_true", help="Apply referral split")
    amm.add_argument("--surplus", type=int, default=0, help="Signed quote surplus captured by the AMM")
    amm.add_argument("--post-only", action="store_true", help="AMM filled a resting post-only maker order")

    match = sub.add_parser("match", help="Fill matched between two orders")
    _add_common(match)
    match.add_argument("--reward-referrer", action="store_true", help="Apply referral split")

    serum = sub.add_parser("serum", help="Fill routed through the external venue")
    _add_common(serum)
    serum.add_argument("--serum-fee", type=int, required=True, help="Fee already levied by the venue")
    serum.add_argument("--serum-referrer-rebate", type=int, default=0, help="Referrer rebate already paid by the venue")
    serum.add_argument("--fee-pool", type=int, default=0, help="Current fee pool balance")

    return parser.parse_args(argv)


def compute(args: argparse.Namespace):
    fee_structure = load_fee_structure(args.fee_structure) if args.fee_structure else FeeStructure()
    ensure_fill_allowed(args.paused_ops, against_amm=(args.path == "amm"))

    if args.path == "amm":
        return calculate_fee_for_order_fulfill_against_amm(
            args.quote_asset_amount,
            fee_structure,
            args.order_ts,
            args.now,
            args.reward_filler,
            args.reward_referrer,
            args.surplus,
            args.post_only,
        )
    if args.path == "match":
        return calculate_fee_for_fulfillment_with_match(
            args.quote_asset_amount,
            fee_structure,
            args.order_ts,
            args.now,
            args.reward_filler,
            args.reward_referrer,
        )
    return calculate_fee_for_fulfillment_with_serum(
        args.quote_asset_amount,
        fee_structure,
        args.order_ts,
        args.now,
        args.reward_filler,
        args.serum_fee,
        args.serum_referrer_rebate,
        args.fee_pool,
    )


def main(argv=None) -> int:
    args = parse_args(argv)
    try:
        result = compute(args)
    except (MathError, ConfigError, OperationPausedError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    out = {"path": args.path, **fees_to_dict(result, as_decimal=args.decimal)}
    print(json.dumps(out, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
