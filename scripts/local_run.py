#!/usr/bin/env python3
"""
로컬 Base62 변환 확인용 스크립트

사용법:
  python3 scripts/local_run.py encode 123
  python3 scripts/local_run.py decode B9
  python3 scripts/local_run.py -v decode "Base*62"
"""

import argparse
import logging
import os
import sys

# 프로젝트 루트의 src 폴더를 경로에 추가 (설치 없이 실행할 때)
_PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
_SRC = os.path.join(_PROJECT_ROOT, "src")
if _SRC not in sys.path:
    sys.path.insert(0, _SRC)

from base62num import encode, decode

logger = logging.getLogger("base62num.local_run")


def setup_logging(verbose: bool = False) -> None:
    """스크립트 전체 로깅 설정"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )


def encode_number(raw: str) -> str:
    """
    명령줄 문자열을 정수로 읽어 Base62 코드로 바꿉니다.
    """
    num = int(raw.strip())
    code = encode(num)
    logger.debug("[Base62 인코딩] %d → \"%s\"", num, code)
    return code


def decode_code(code: str) -> int:
    num = decode(code)
    logger.debug("[Base62 디코딩] \"%s\" → %d", code, num)
    return num


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="로컬 Base62 변환: encode(숫자→코드) / decode(코드→숫자)"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="변환 과정을 로그로 출력")
    sub = parser.add_subparsers(dest="command", required=True)

    p_encode = sub.add_parser("encode", help="0 이상의 정수를 Base62 코드로 바꿉니다")
    p_encode.add_argument("number", help="변환할 정수 (예: 123)")

    p_decode = sub.add_parser("decode", help="Base62 코드를 정수로 바꿉니다")
    p_decode.add_argument("code", help="Base62 코드 (예: B9)")

    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    try:
        if args.command == "encode":
            print(encode_number(args.number))
        elif args.command == "decode":
            print(decode_code(args.code))
    except (ValueError, OverflowError) as e:
        print(f"오류: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
