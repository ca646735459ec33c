# src/zigzagbot/protocol/positional.py
# ------------------------------------------------------------
# 위치 기반(배열) 레코드 코덱
# - 레코드 = frozen dataclass, 필드 순서 = JSON 배열 순서
# - col(leaf, optional=True): 꼬리(trailing) 위치에서만 생략 가능
# - col(leaf, nullable=True): 자리는 유지하되 null 허용
# ------------------------------------------------------------
from __future__ import annotations
from dataclasses import dataclass, field, fields
from typing import Any, Protocol, Sequence, Type, TypeVar

from pydantic import BaseModel, ValidationError

from zigzagbot.protocol.enums import ShortCodeEnum
from zigzagbot.protocol.errors import ArityMismatch, TypeMismatch
from zigzagbot.protocol.scalars import (
    Price,
    Remaining,
    ErrorMessage,
    TxHash,
    decode_price,
    encode_price,
    decode_remaining_or_error,
    encode_remaining_or_error,
    to_float,
)

T = TypeVar("T")


class Leaf(Protocol):
    expected: str

    def decode(self, value: Any, path: str) -> Any: ...
    def encode(self, value: Any, path: str) -> Any: ...


# --- 기본 leaf ---
class _UInt:
    def __init__(self, bits: int):
        self.expected = f"u{bits}"
        self.max = 2**bits - 1

    def _check(self, value: Any, path: str) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeMismatch(path, self.expected, value)
        if not 0 <= value <= self.max:
            raise TypeMismatch(path, f"{self.expected} in 0..{self.max}", value)
        return value

    decode = _check
    encode = _check


class _Float:
    expected = "number"

    def decode(self, value: Any, path: str) -> float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeMismatch(path, self.expected, value)
        return to_float(value, path)

    encode = decode


class _Str:
    expected = "string"

    def decode(self, value: Any, path: str) -> str:
        if not isinstance(value, str):
            raise TypeMismatch(path, self.expected, value)
        return value

    encode = decode


class _Bool:
    expected = "bool"

    def decode(self, value: Any, path: str) -> bool:
        if not isinstance(value, bool):
            raise TypeMismatch(path, self.expected, value)
        return value

    encode = decode


class _Price:
    expected = "number or string"

    def decode(self, value: Any, path: str) -> Price:
        return decode_price(value, path)

    def encode(self, value: Any, path: str) -> Any:
        if not isinstance(value, Price):
            raise TypeMismatch(path, "Price", value)
        return encode_price(value)


class _RemainingOrError:
    expected = "number or string"

    def decode(self, value: Any, path: str):
        return decode_remaining_or_error(value, path)

    def encode(self, value: Any, path: str) -> Any:
        if not isinstance(value, (Remaining, ErrorMessage)):
            raise TypeMismatch(path, "RemainingOrError", value)
        return encode_remaining_or_error(value)


class _TxHash:
    expected = "0x-prefixed 32 byte hex string"

    def decode(self, value: Any, path: str) -> TxHash:
        if not isinstance(value, str):
            raise TypeMismatch(path, self.expected, value)
        try:
            return TxHash.from_hex(value)
        except ValueError:
            raise TypeMismatch(path, self.expected, value) from None

    def encode(self, value: Any, path: str) -> str:
        if not isinstance(value, TxHash):
            raise TypeMismatch(path, "TxHash", value)
        return value.hex()


U32 = _UInt(32)
U64 = _UInt(64)
F64 = _Float()
STR = _Str()
BOOL = _Bool()
PRICE = _Price()
REMAINING = _RemainingOrError()
TX_HASH = _TxHash()


# --- 조합 leaf ---
class Code:
    """Enum member <-> short code string."""

    def __init__(self, enum_cls: Type[ShortCodeEnum]):
        self.enum_cls = enum_cls
        self.expected = f"{enum_cls.__name__} code"

    def decode(self, value: Any, path: str) -> ShortCodeEnum:
        if not isinstance(value, str):
            raise TypeMismatch(path, self.expected, value)
        return self.enum_cls.from_code(value, path)

    def encode(self, value: Any, path: str) -> str:
        if not isinstance(value, self.enum_cls):
            raise TypeMismatch(path, self.enum_cls.__name__, value)
        return value.code


class Record:
    """Nested positional record."""

    def __init__(self, cls: type):
        self.cls = cls
        self.expected = f"{cls.__name__} array"

    def decode(self, value: Any, path: str) -> Any:
        return decode_record(self.cls, value, path)

    def encode(self, value: Any, path: str) -> Any:
        # 정확한 타입만 허용 (Orderreceipt 등 하위 클래스 거부)
        # 하위 클래스(Orderreceipt 등)는 디코드 시 기본 클래스로 돌아오므로 거부
        if type(value) is not self.cls:
            raise TypeMismatch(path, self.cls.__name__, value)
        return encode_record(value, path)


class ListOf:
    def __init__(self, item: Leaf):
        self.item = item
        self.expected = f"array of {item.expected}"

    def decode(self, value: Any, path: str) -> tuple:
        if not isinstance(value, list):
            raise TypeMismatch(path, self.expected, value)
        return tuple(self.item.decode(v, f"{path}[{i}]") for i, v in enumerate(value))

    def encode(self, value: Any, path: str) -> list:
        if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
            raise TypeMismatch(path, self.expected, value)
        return [self.item.encode(v, f"{path}[{i}]") for i, v in enumerate(value)]


class Model:
    """Keyed JSON object validated by a pydantic model."""

    def __init__(self, model: Type[BaseModel]):
        self.model = model
        self.expected = f"{model.__name__} object"

    def decode(self, value: Any, path: str) -> BaseModel:
        if not isinstance(value, dict):
            raise TypeMismatch(path, self.expected, value)
        try:
            return self.model.model_validate(value)
        except ValidationError as e:
            err = e.errors()[0]
            loc = ".".join(str(p) for p in err["loc"])
            raise TypeMismatch(
                f"{path}.{loc}" if loc else path, err["msg"], err.get("input")
            ) from None

    def encode(self, value: Any, path: str) -> dict:
        if not isinstance(value, self.model):
            raise TypeMismatch(path, self.model.__name__, value)
        return value.model_dump(mode="json", by_alias=True, exclude_none=True)


# --- 레코드 정의 ---
def col(leaf: Leaf, *, optional: bool = False, nullable: bool = False):
    """Declare a wire field. Optional fields default to None and must be trailing."""
    metadata = {"leaf": leaf, "optional": optional, "nullable": nullable}
    if optional:
        return field(default=None, metadata=metadata)
    return field(metadata=metadata)


def positional(cls: Type[T]) -> Type[T]:
    # dataclass 자체가 "기본값 필드 뒤에 필수 필드 금지"를 강제 → optional은 항상 꼬리
    cls = dataclass(frozen=True)(cls)
    schema = fields(cls)
    for f in schema:
        if "leaf" not in f.metadata:
            raise TypeError(f"{cls.__name__}.{f.name} is not declared with col()")
    cls._wire_fields = schema
    cls._arity = (sum(1 for f in schema if not f.metadata["optional"]), len(schema))
    return cls


def arity(cls: type) -> tuple[int, int]:
    return cls._arity


def decode_record(cls: Type[T], value: Any, path: str | None = None) -> T:
    path = path or cls.__name__
    if not isinstance(value, list):
        raise TypeMismatch(path, f"{cls.__name__} array", value)
    lo, hi = cls._arity
    if not lo <= len(value) <= hi:
        raise ArityMismatch(cls.__name__, lo, hi, len(value), path)

    kwargs: dict[str, Any] = {}
    for f, item in zip(cls._wire_fields, value):
        meta = f.metadata
        if item is None and (meta["optional"] or meta["nullable"]):
            kwargs[f.name] = None
            continue
        kwargs[f.name] = meta["leaf"].decode(item, f"{path}.{f.name}")
    return cls(**kwargs)


def encode_record(record: Any, path: str | None = None) -> list:
    cls = type(record)
    path = path or cls.__name__
    schema = cls._wire_fields
    out: list = []
    for f in schema:
        v = getattr(record, f.name)
        meta = f.metadata
        if v is None:
            if not (meta["optional"] or meta["nullable"]):
                raise TypeMismatch(f"{path}.{f.name}", meta["leaf"].expected, v)
            out.append(None)
            continue
        out.append(meta["leaf"].encode(v, f"{path}.{f.name}"))

    # 꼬리 쪽에 연속된 "없는 optional"만 잘라낸다
    n = len(out)
    while n and out[n - 1] is None and schema[n - 1].metadata["optional"]:
        n -= 1
    return out[:n]
