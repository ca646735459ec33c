# src/zigzagbot/protocol/registry.py
# ------------------------------------------------------------
# 오퍼레이션 태그 레지스트리
# - @operation: 태그 = 클래스명 소문자
# - lookup(tag): 모르는 태그 → UnknownOperationTag
# ------------------------------------------------------------
from types import MappingProxyType
from typing import Dict, Type

from zigzagbot.protocol.errors import UnknownOperationTag

_REGISTRY: Dict[str, Type] = {}

# 읽기 전용 뷰 (import 이후 변경 없음)
OPERATIONS = MappingProxyType(_REGISTRY)


def operation(cls):
    tag = cls.__name__.lower()
    if tag in _REGISTRY:
        raise ValueError(f"Operation tag '{tag}' already registered by {_REGISTRY[tag].__name__}")
    cls.op = tag
    _REGISTRY[tag] = cls
    return cls


def lookup(tag: str) -> Type:
    if tag not in _REGISTRY:
        raise UnknownOperationTag(tag)
    return _REGISTRY[tag]


def available() -> list[str]:
    return sorted(_REGISTRY)
