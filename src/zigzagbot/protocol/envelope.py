from __future__ import annotations

import json
from typing import Any, Mapping

from zigzagbot.protocol.errors import MalformedFrame, TypeMismatch, UnknownOperationTag
from zigzagbot.protocol.messages import Operation
from zigzagbot.protocol.positional import decode_record, encode_record
from zigzagbot.protocol.registry import OPERATIONS, lookup


def to_envelope(op: Operation) -> dict[str, Any]:
    tag = getattr(type(op), "op", None)
    if tag is None or OPERATIONS.get(tag) is not type(op):
        raise UnknownOperationTag(type(op).__name__.lower())
    return {"op": tag, "args": encode_record(op)}


def from_envelope(data: Mapping[str, Any]) -> Operation:
    if not isinstance(data, Mapping):
        raise MalformedFrame("envelope must be a JSON object")
    for key in ("op", "args"):
        if key not in data:
            raise MalformedFrame(f"missing '{key}'")
    tag = data["op"]
    if not isinstance(tag, str):
        raise TypeMismatch("op", "string", tag)
    cls = lookup(tag)
    return decode_record(cls, data["args"], cls.__name__)


def encode(op: Operation) -> bytes:
    """Encode an operation as a compact UTF-8 JSON text frame."""
    return json.dumps(to_envelope(op), separators=(",", ":"), ensure_ascii=False).encode(
        "utf-8"
    )


def decode(frame: bytes | str) -> Operation:
    """Decode one UTF-8 JSON text frame into an operation.

    Raises a CodecError subclass on any failure; nothing partial is returned.
    """
    try:
        text = frame.decode("utf-8") if isinstance(frame, (bytes, bytearray)) else frame
        data = json.loads(text)
    except RecursionError:
        raise MalformedFrame("nesting too deep") from None
    except ValueError as e:
        # JSONDecodeError, UnicodeDecodeError, 4300자리 초과 정수
        raise MalformedFrame(str(e)) from None
    return from_envelope(data)
