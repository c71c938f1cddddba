"""Base62 디코딩 오류 타입"""
from __future__ import annotations

from enum import Enum


class Base62Error(Enum):
    """디코딩 실패 종류 (두 가지뿐)"""

    NON_ALPHANUMERIC = "contains non-alphanumeric"
    OVERFLOW = "overflow"

    @property
    def description(self) -> str:
        return self.value

    def __str__(self) -> str:
        return _MESSAGES[self]


_MESSAGES = {
    Base62Error.NON_ALPHANUMERIC: "Input contains non-alphanumeric.",
    Base62Error.OVERFLOW: "Return is overflow.",
}


class DecodeError(ValueError):
    """decode() 실패 시 발생. kind 로 실패 종류를 구분합니다."""

    def __init__(self, kind: Base62Error):
        self.kind = kind
        super().__init__(str(kind))

    def __eq__(self, other):
        if isinstance(other, DecodeError):
            return self.kind is other.kind
        if isinstance(other, Base62Error):
            return self.kind is other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.kind)

    def __repr__(self) -> str:
        return f"DecodeError({self.kind})"
