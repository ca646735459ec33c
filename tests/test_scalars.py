import pytest

from zigzagbot.protocol.errors import TypeMismatch
from zigzagbot.protocol.scalars import (
    ErrorMessage,
    Price,
    Remaining,
    TxHash,
    decode_price,
    decode_remaining_or_error,
    encode_price,
    encode_remaining_or_error,
    float_value,
)


def test_price_number_and_string():
    p = decode_price(3300)
    assert p == Price(3300.0)
    assert not p.is_string
    s = decode_price("3300")
    assert s.is_string
    assert float_value(s) == 3300.0
    assert s.float_value == 3300.0


def test_price_encode_keeps_shape():
    assert encode_price(Price("0.25")) == "0.25"
    assert encode_price(Price(0.25)) == 0.25
    # 같은 값이라도 모양이 다르면 다른 Price
    assert Price("3300") != Price(3300.0)


def test_price_unparsable_string_is_zero():
    assert Price("n/a").float_value == 0.0


def test_price_rejects_other_json_kinds():
    for bad in (True, None, [1], {"p": 1}):
        with pytest.raises(TypeMismatch):
            decode_price(bad)


def test_remaining_or_error():
    assert decode_remaining_or_error(1) == Remaining(1.0)
    assert decode_remaining_or_error("Not enough balance") == ErrorMessage(
        "Not enough balance"
    )
    assert encode_remaining_or_error(Remaining(0.5)) == 0.5
    assert encode_remaining_or_error(ErrorMessage("x")) == "x"
    with pytest.raises(TypeMismatch):
        decode_remaining_or_error(False)


def test_out_of_range_int_is_type_mismatch():
    huge = 10**400
    with pytest.raises(TypeMismatch) as ei:
        decode_price(huge, "Marketsummary.price")
    assert ei.value.path == "Marketsummary.price"
    with pytest.raises(TypeMismatch):
        decode_remaining_or_error(huge)
    # 문자열 가격은 그대로 보존
    assert decode_price("9" * 400).value == "9" * 400


def test_tx_hash():
    h = TxHash.from_hex("0x" + "00" * 31 + "01")
    assert not h.is_zero()
    assert h.hex() == "0x" + "00" * 31 + "01"
    assert TxHash(bytes(32)).is_zero()
    with pytest.raises(ValueError):
        TxHash.from_hex("0x1234")
