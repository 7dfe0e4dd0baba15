import pytest

from clearing_fees.core.amounts import U64, I64, U128, I128
from clearing_fees.core.casting import cast, cast_to_u128, cast_to_i128, cast_to_u64, cast_to_i64
from clearing_fees.core.constants import U128_MAX, I128_MAX, I64_MIN
from clearing_fees.core.exc import MathError


def test_signed_to_unsigned_rejects_negative():
    print("[cast] I128(-1) -> U128, expect MathError (no silent wrap)")
    with pytest.raises(MathError):
        cast_to_u128(I128(-1))


def test_unsigned_to_signed_rejects_top_half():
    with pytest.raises(MathError):
        cast_to_i128(U128(U128_MAX))
    assert cast_to_i128(U128(I128_MAX)) == I128(I128_MAX)


def test_narrowing_casts():
    assert cast_to_u64(U128(42)) == U64(42)
    with pytest.raises(MathError):
        cast_to_u64(U128(1 << 64))
    with pytest.raises(MathError):
        cast_to_i64(I128(I64_MIN - 1))


def test_widening_and_plain_ints():
    assert cast_to_u128(I64(7)) == U128(7)
    assert cast(-3, I128) == I128(-3)
    assert cast(I64(-3), I64) == I64(-3)


def test_non_integer_cast_is_type_error():
    with pytest.raises(TypeError):
        cast(1.5, U128)
    with pytest.raises(TypeError):
        cast(False, U128)
