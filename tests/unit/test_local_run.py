"""
로컬 스크립트 검증 (scripts/local_run.py)
"""

import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "..", "scripts"))
from local_run import main


def test_encode_command(capsys):
    assert main(["encode", "123"]) == 0
    assert capsys.readouterr().out.strip() == "B9"


def test_decode_command(capsys):
    assert main(["decode", "B9"]) == 0
    assert capsys.readouterr().out.strip() == "123"


def test_decode_invalid_code(capsys):
    assert main(["decode", "Base*62"]) == 1
    assert "Input contains non-alphanumeric." in capsys.readouterr().err


def test_encode_negative(capsys):
    assert main(["encode", "-5"]) == 1
    assert "Number must be non-negative" in capsys.readouterr().err


def test_verbose_logs_conversion(capsys):
    assert main(["-v", "encode", "7"]) == 0
    out = capsys.readouterr().out
    assert "[Base62 인코딩]" in out
    assert out.strip().endswith("H")
