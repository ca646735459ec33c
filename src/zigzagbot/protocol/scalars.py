# src/zigzagbot/protocol/scalars.py
# ------------------------------------------------------------
# 값의 JSON 모양(number / string)으로 구분되는 스칼라들
# - Price: 숫자 또는 숫자 문자열 (받은 모양 그대로 다시 인코딩)
# - RemainingOrError: 숫자 → Remaining, 문자열 → ErrorMessage
# - TxHash: "0x" + 64 hex
# ------------------------------------------------------------
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Union

from zigzagbot.protocol.errors import TypeMismatch


def _is_number(value: Any) -> bool:
    # bool은 int의 하위 타입이지만 숫자로 취급하지 않는다
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def to_float(value: Any, path: str) -> float:
    # float 범위를 넘는 JSON 정수는 OverflowError
    try:
        return float(value)
    except OverflowError:
        raise TypeMismatch(path, "finite number", value) from None


@dataclass(frozen=True)
class Price:
    value: Union[float, str]

    def __post_init__(self):
        if isinstance(self.value, str):
            return
        if not _is_number(self.value):
            raise TypeError(f"Price must be a float or str, not {type(self.value).__name__}")
        object.__setattr__(self, "value", float(self.value))

    @property
    def is_string(self) -> bool:
        return isinstance(self.value, str)

    @property
    def float_value(self) -> float:
        return float_value(self)


def decode_price(value: Any, path: str = "price") -> Price:
    if _is_number(value):
        return Price(to_float(value, path))
    if isinstance(value, str):
        return Price(value)
    raise TypeMismatch(path, "number or string", value)


def encode_price(price: Price) -> Union[float, str]:
    return price.value


def float_value(price: Price) -> float:
    """Canonical float of a price; an unparsable string gives 0.0."""
    if isinstance(price.value, str):
        try:
            return float(price.value)
        except ValueError:
            return 0.0
    return price.value


@dataclass(frozen=True)
class Remaining:
    quantity: float


@dataclass(frozen=True)
class ErrorMessage:
    message: str


RemainingOrError = Union[Remaining, ErrorMessage]


def decode_remaining_or_error(value: Any, path: str = "remaining") -> RemainingOrError:
    if _is_number(value):
        return Remaining(to_float(value, path))
    if isinstance(value, str):
        return ErrorMessage(value)
    raise TypeMismatch(path, "number or string", value)


def encode_remaining_or_error(value: RemainingOrError) -> Union[float, str]:
    if isinstance(value, Remaining):
        return float(value.quantity)
    return value.message


@dataclass(frozen=True)
class TxHash:
    raw: bytes

    def __post_init__(self):
        if len(self.raw) != 32:
            raise ValueError(f"TxHash must be 32 bytes, got {len(self.raw)}")

    @classmethod
    def from_hex(cls, text: str) -> "TxHash":
        if not text.startswith("0x") or len(text) != 66:
            raise ValueError(f"not a 0x-prefixed 32 byte hex string: {text!r}")
        return cls(bytes.fromhex(text[2:]))

    def hex(self) -> str:
        return "0x" + self.raw.hex()

    def is_zero(self) -> bool:
        return not any(self.raw)

    def __str__(self) -> str:
        return self.hex()
