# src/zigzagbot/protocol/enums.py
# ------------------------------------------------------------
# 와이어 short code 열거형
# - 멤버 값 = 와이어 코드 (Enum 자체가 양방향 조회 표)
# - 모르는 코드 → UnknownCode
# ------------------------------------------------------------
from __future__ import annotations

from enum import Enum
from typing import Type, TypeVar

from zigzagbot.protocol.errors import UnknownCode

E = TypeVar("E", bound="ShortCodeEnum")


class ShortCodeEnum(Enum):
    @property
    def code(self) -> str:
        return self.value

    @classmethod
    def from_code(cls: Type[E], code: str, path: str | None = None) -> E:
        try:
            return cls(code)
        except ValueError:
            raise UnknownCode(cls.__name__, code, path) from None


class OrderStatus(ShortCodeEnum):
    CANCELED = "c"
    OPEN = "o"
    EXPIRED = "e"
    MATCHED = "m"
    REJECTED = "r"
    FILLED = "f"
    BROADCASTED = "b"
    PARTIAL_FILL = "pf"
    PARTIAL_MATCH = "pm"


class Side(ShortCodeEnum):
    BUY = "b"
    SELL = "s"


def encode_code(member: ShortCodeEnum) -> str:
    return member.code


def decode_code(enum_cls: Type[E], code: str, path: str | None = None) -> E:
    return enum_cls.from_code(code, path)
