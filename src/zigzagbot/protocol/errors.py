# src/zigzagbot/protocol/errors.py
# ------------------------------------------------------------
# 코덱 에러 계층 (모두 CodecError → ValueError)
# - kind: 기계가 읽는 에러 종류
# - path: 실패한 필드 경로 (예: Orders.orders[0].price)
# - 재시도 없음: 디코드 실패 프레임은 통째로 버린다
# ------------------------------------------------------------
from __future__ import annotations

from typing import Any


def json_kind(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


class CodecError(ValueError):
    """Base codec error."""

    kind = "codec_error"

    def __init__(self, message: str, path: str | None = None) -> None:
        self.message = message
        self.path = path
        super().__init__(f"{path}: {message}" if path else message)


class MalformedFrame(CodecError):
    kind = "malformed_frame"

    def __init__(self, detail: str) -> None:
        super().__init__(f"malformed frame: {detail}")


class UnknownOperationTag(CodecError):
    kind = "unknown_operation_tag"

    def __init__(self, tag: str) -> None:
        self.tag = tag
        super().__init__(f"unknown operation tag: {tag!r}", path="op")


class ArityMismatch(CodecError):
    kind = "arity_mismatch"

    def __init__(
        self, schema: str, min_len: int, max_len: int, actual: int, path: str | None = None
    ) -> None:
        self.schema = schema
        self.min_len = min_len
        self.max_len = max_len
        self.actual = actual
        if min_len == max_len:
            expected = f"{min_len}"
        else:
            expected = f"{min_len}..{max_len}"
        super().__init__(
            f"{schema} expects {expected} elements, got {actual}", path=path or schema
        )


class TypeMismatch(CodecError):
    kind = "type_mismatch"

    def __init__(self, path: str, expected: str, value: Any) -> None:
        self.expected = expected
        self.got = json_kind(value)
        super().__init__(f"expected {expected}, got {self.got}", path=path)


class UnknownCode(CodecError):
    kind = "unknown_code"

    def __init__(self, enum_name: str, code: Any, path: str | None = None) -> None:
        self.enum_name = enum_name
        self.code = code
        super().__init__(f"unknown {enum_name} code: {code!r}", path=path)
