"""
Base62 인코딩/디코딩 (URL 단축용)
문자집합: A-Z, a-z, 0-9 (62자)
"""
from __future__ import annotations

import sys
from types import MappingProxyType

from .errors import Base62Error, DecodeError

# 순서 변경 금지: 다른 구현과 주고받는 코드가 깨집니다
ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"
BASE = len(ALPHABET)

# 플랫폼 기본 부호 없는 워드의 최댓값 (64비트에서 2**64 - 1)
MAX_VALUE = sys.maxsize * 2 + 1

_INDEX = MappingProxyType({char: i for i, char in enumerate(ALPHABET)})


def encode(num: int) -> str:
    """정수 -> Base62 문자열 (0 은 빈 문자열)"""
    if isinstance(num, bool) or not isinstance(num, int):
        raise TypeError(f"expected int, got {type(num).__name__}")
    if num < 0:
        raise ValueError("Number must be non-negative")
    if num > MAX_VALUE:
        raise OverflowError(f"Number exceeds {MAX_VALUE}")

    result = []
    while num > 0:
        num, rem = divmod(num, BASE)
        result.append(ALPHABET[rem])
    return "".join(reversed(result))


def decode(value: str) -> int:
    """
    Base62 문자열 -> 정수

    왼쪽부터 한 글자씩 처리하며 첫 번째 오류에서 DecodeError 를 던집니다.
    빈 문자열은 0 입니다.
    """
    if not isinstance(value, str):
        raise TypeError(f"expected str, got {type(value).__name__}")

    num = 0
    for char in value:
        digit = _INDEX.get(char)
        if digit is None:
            raise DecodeError(Base62Error.NON_ALPHANUMERIC)

        num *= BASE
        if num > MAX_VALUE:
            raise DecodeError(Base62Error.OVERFLOW)
        num += digit
        if num > MAX_VALUE:
            raise DecodeError(Base62Error.OVERFLOW)
    return num
