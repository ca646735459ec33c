from typing import Optional

import pytest

from zigzagbot.protocol.enums import Side
from zigzagbot.protocol.errors import ArityMismatch, TypeMismatch
from zigzagbot.protocol.messages import Liquidity
from zigzagbot.protocol.positional import (
    F64,
    STR,
    U32,
    U64,
    arity,
    col,
    decode_record,
    encode_record,
    positional,
)
from zigzagbot.protocol.scalars import Price


@positional
class Pair:
    a: int = col(U32)
    b: str = col(STR)
    c: Optional[int] = col(U64, optional=True)


@positional
class Tail:
    a: int = col(U32)
    x: Optional[int] = col(U32, optional=True)
    y: Optional[int] = col(U32, optional=True)


def test_trailing_optional_omitted():
    assert encode_record(Pair(1, "x")) == [1, "x"]
    assert encode_record(Pair(1, "x", 7)) == [1, "x", 7]
    assert decode_record(Pair, [1, "x"]) == Pair(1, "x", None)


def test_only_strict_tail_is_dropped():
    # y가 있으면 앞의 x는 null로 자리를 지킨다
    assert encode_record(Tail(1, None, 5)) == [1, None, 5]
    assert encode_record(Tail(1, 4, None)) == [1, 4]
    assert decode_record(Tail, [1, None, 5]) == Tail(1, None, 5)


def test_arity_mismatch():
    assert arity(Pair) == (2, 3)
    with pytest.raises(ArityMismatch) as ei:
        decode_record(Pair, [1])
    assert (ei.value.min_len, ei.value.max_len, ei.value.actual) == (2, 3, 1)
    with pytest.raises(ArityMismatch):
        decode_record(Pair, [1, "x", 2, 3])


def test_type_mismatch_reports_path():
    with pytest.raises(TypeMismatch) as ei:
        decode_record(Pair, [True, "x"])
    assert ei.value.path == "Pair.a"
    with pytest.raises(TypeMismatch):
        decode_record(Pair, {"a": 1, "b": "x"})
    with pytest.raises(TypeMismatch):
        decode_record(Pair, [2**32, "x"])


def test_required_field_cannot_follow_optional():
    with pytest.raises(TypeError):

        @positional
        class Broken:
            a: Optional[int] = col(U32, optional=True)
            b: int = col(U32)


def test_liquidity():
    l = Liquidity(side=Side.BUY, price=Price(3100.0), base_quantity=1.2322, expires=1642677967)
    assert encode_record(l) == ["b", 3100.0, 1.2322, 1642677967]
    l2 = Liquidity(side=Side.BUY, price=Price(3100.0), base_quantity=1.2322)
    assert encode_record(l2) == ["b", 3100.0, 1.2322]

    d = decode_record(Liquidity, ["s", 3300, 0.2822])
    assert d == Liquidity(side=Side.SELL, price=Price(3300.0), base_quantity=0.2822)
    assert d.expires is None


def test_float_leaf_rejects_out_of_range_int():
    assert F64.decode(3, "q") == 3.0
    with pytest.raises(TypeMismatch) as ei:
        F64.decode(10**400, "Liquidity.base_quantity")
    assert ei.value.path == "Liquidity.base_quantity"
