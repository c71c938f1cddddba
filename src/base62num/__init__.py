"""정수 <-> Base62 문자열 변환기"""
from .base62 import ALPHABET, BASE, MAX_VALUE, decode, encode
from .errors import Base62Error, DecodeError

__version__ = "0.1.0"

__all__ = [
    "ALPHABET",
    "BASE",
    "MAX_VALUE",
    "Base62Error",
    "DecodeError",
    "decode",
    "encode",
]
