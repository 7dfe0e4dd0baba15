"""
Filler (relayer) reward model.

Two candidates are computed and the lesser is paid:
- size-based: a fixed fraction of the fee, which caps the reward on large fills;
- time-based: grows with the fourth root of the order's age, which rewards
  keepers for filling older orders rather than only the largest ones.

Elapsed time is floored at one tick so a same-tick fill still earns the
lower-bound reward. A fill timestamped before its order is a MathError.
"""

from __future__ import annotations

from typing import Union

from .config import OrderFillerRewardStructure
from .core import (
    I64,
    U128,
    FILLER_TIME_REWARD_SCALE,
    FILLER_TIME_REWARD_ROOT_SCALE,
    cast_to_u128,
    get_proportion_u128,
)

# Debug printing control
DEBUG_FILLER = False

def _dbg(msg: str) -> None:
    if DEBUG_FILLER:
        print(f"[filler] {msg}")


def time_since_order(order_ts: Union[I64, int], now: Union[I64, int]) -> U128:
    """Ticks between order placement and fill, floored at 1."""
    elapsed = cast_to_u128(I64.of(now).checked_sub(I64.of(order_ts)))
    return elapsed.max(U128(1))


def size_based_filler_reward(
    fee: Union[U128, int],
    filler_reward_structure: OrderFillerRewardStructure,
) -> U128:
    return get_proportion_u128(
        fee,
        filler_reward_structure.reward_numerator,
        filler_reward_structure.reward_denominator,
    )


def time_based_filler_reward(
    order_ts: Union[I64, int],
    now: Union[I64, int],
    filler_reward_structure: OrderFillerRewardStructure,
) -> U128:
    """fourth_root(elapsed * 1e8) * lower_bound / 1e2.

    With elapsed == 1 this is exactly `time_based_reward_lower_bound`.
    """
    return (
        time_since_order(order_ts, now)
        .checked_mul(FILLER_TIME_REWARD_SCALE)
        .checked_nth_root(4)
        .checked_mul(filler_reward_structure.time_based_reward_lower_bound)
        .checked_div(FILLER_TIME_REWARD_ROOT_SCALE)
    )


def calculate_filler_reward(
    fee: Union[U128, int],
    order_ts: Union[I64, int],
    now: Union[I64, int],
    filler_reward_structure: OrderFillerRewardStructure,
) -> U128:
    """Lesser of the size-based and time-based filler rewards."""
    size_reward = size_based_filler_reward(fee, filler_reward_structure)
    time_reward = time_based_filler_reward(order_ts, now, filler_reward_structure)
    _dbg(f"fee={fee} order_ts={order_ts} now={now} size={size_reward} time={time_reward}")
    return size_reward.min(time_reward)


__all__ = [
    "time_since_order",
    "size_based_filler_reward",
    "time_based_filler_reward",
    "calculate_filler_reward",
]
