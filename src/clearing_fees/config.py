"""
Fee structure configuration.

A FeeStructure is built once by the caller (from governed parameters, a
mapping or a JSON file) and passed explicitly into every fee calculation.
The calculators never read module state.

Alignment notes:
- Every field is an unsigned 128-bit ratio term or bound.
- Construction validates types and ranges only. A zero denominator is a
  legal configuration value and surfaces as MathError when the ratio is used.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field, fields, is_dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Union

from .core.constants import (
    U128_MAX,
    DEFAULT_FEE_NUMERATOR,
    DEFAULT_FEE_DENOMINATOR,
    DEFAULT_MAKER_REBATE_NUMERATOR,
    DEFAULT_MAKER_REBATE_DENOMINATOR,
    DEFAULT_REFERRER_REWARD_NUMERATOR,
    DEFAULT_REFERRER_REWARD_DENOMINATOR,
    DEFAULT_REFEREE_DISCOUNT_NUMERATOR,
    DEFAULT_REFEREE_DISCOUNT_DENOMINATOR,
    DEFAULT_FILLER_REWARD_NUMERATOR,
    DEFAULT_FILLER_REWARD_DENOMINATOR,
    DEFAULT_TIME_BASED_REWARD_LOWER_BOUND,
)
from .core.exc import ConfigError


def _validate_u128_fields(obj: Any) -> None:
    for f in fields(obj):
        v = getattr(obj, f.name)
        if is_dataclass(v):
            continue
        if not isinstance(v, int) or isinstance(v, bool):
            raise ConfigError(f"{type(obj).__name__}.{f.name} must be an int, got {type(v).__name__}")
        if not (0 <= v <= U128_MAX):
            raise ConfigError(f"{type(obj).__name__}.{f.name} out of u128 range: {v}")


def _build(cls, data: Mapping[str, Any]):
    if not isinstance(data, Mapping):
        raise ConfigError(f"{cls.__name__} expects a mapping, got {type(data).__name__}")
    known = {f.name for f in fields(cls)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"unknown {cls.__name__} keys: {', '.join(unknown)}")
    return cls(**dict(data))


# ---------------------------------------------------------------------------
# Sub-structures
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ReferralDiscount:
    """Referrer reward and referee discount ratios, both taken off the gross fee."""

    referrer_reward_numerator: int = DEFAULT_REFERRER_REWARD_NUMERATOR
    referrer_reward_denominator: int = DEFAULT_REFERRER_REWARD_DENOMINATOR
    referee_discount_numerator: int = DEFAULT_REFEREE_DISCOUNT_NUMERATOR
    referee_discount_denominator: int = DEFAULT_REFEREE_DISCOUNT_DENOMINATOR

    def __post_init__(self):
        _validate_u128_fields(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ReferralDiscount":
        return _build(cls, data)


@dataclass(frozen=True)
class OrderFillerRewardStructure:
    """Filler reward curve.

    Fields:
    - reward_numerator / reward_denominator: size-based cap as a fraction of the fee.
    - time_based_reward_lower_bound: reward paid for a one-tick-old order; the
      time-based reward grows with the fourth root of the order's age.
    """

    reward_numerator: int = DEFAULT_FILLER_REWARD_NUMERATOR
    reward_denominator: int = DEFAULT_FILLER_REWARD_DENOMINATOR
    time_based_reward_lower_bound: int = DEFAULT_TIME_BASED_REWARD_LOWER_BOUND

    def __post_init__(self):
        _validate_u128_fields(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "OrderFillerRewardStructure":
        return _build(cls, data)


# ---------------------------------------------------------------------------
# FeeStructure
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class FeeStructure:
    """Immutable fee configuration passed into every calculator.

    Use `dataclasses.replace` to derive variants, e.g. a 4 bps fee:
        replace(FeeStructure(), fee_numerator=4, fee_denominator=10_000)
    """

    fee_numerator: int = DEFAULT_FEE_NUMERATOR
    fee_denominator: int = DEFAULT_FEE_DENOMINATOR
    maker_rebate_numerator: int = DEFAULT_MAKER_REBATE_NUMERATOR
    maker_rebate_denominator: int = DEFAULT_MAKER_REBATE_DENOMINATOR
    referral_discount: ReferralDiscount = field(default_factory=ReferralDiscount)
    filler_reward_structure: OrderFillerRewardStructure = field(default_factory=OrderFillerRewardStructure)

    def __post_init__(self):
        if not isinstance(self.referral_discount, ReferralDiscount):
            raise ConfigError("FeeStructure.referral_discount must be a ReferralDiscount")
        if not isinstance(self.filler_reward_structure, OrderFillerRewardStructure):
            raise ConfigError("FeeStructure.filler_reward_structure must be an OrderFillerRewardStructure")
        _validate_u128_fields(self)

    # ------------- mapping / JSON bridges -------------

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FeeStructure":
        """Build from a nested mapping; missing keys keep their defaults."""
        if not isinstance(data, Mapping):
            raise ConfigError(f"FeeStructure expects a mapping, got {type(data).__name__}")
        flat = dict(data)
        if "referral_discount" in flat:
            flat["referral_discount"] = ReferralDiscount.from_dict(flat["referral_discount"])
        if "filler_reward_structure" in flat:
            flat["filler_reward_structure"] = OrderFillerRewardStructure.from_dict(
                flat["filler_reward_structure"]
            )
        return _build(cls, flat)

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        for f in fields(self):
            v = getattr(self, f.name)
            if is_dataclass(v):
                out[f.name] = {g.name: getattr(v, g.name) for g in fields(v)}
            else:
                out[f.name] = v
        return out


def load_fee_structure(path: Union[str, Path]) -> FeeStructure:
    """Read a FeeStructure from a JSON file."""
    p = Path(path)
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(f"cannot read fee structure file {p}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid JSON in fee structure file {p}: {e}") from e
    return FeeStructure.from_dict(data)


__all__ = [
    "ReferralDiscount",
    "OrderFillerRewardStructure",
    "FeeStructure",
    "load_fee_structure",
]
