import io
import logging
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from ieee_ops import decode_binary_float, SpecialPolicy
from ieee_ops.cli import main, EXIT_OK, EXIT_INVALID_INPUT, EXIT_SPECIAL_EXPONENT

TWO = "01000000000000000000000000000000"
INF = "0" + "1" * 8 + "0" * 23


def test_cli_result(capsys):
    assert main([TWO]) == EXIT_OK
    out = capsys.readouterr().out
    assert "Result: 2.000000" in out


def test_cli_digits(capsys):
    assert main(["00111111100000000000000000000000", "--digits", "2"]) == EXIT_OK
    assert "Result: 1.00" in capsys.readouterr().out


def test_cli_verbose(capsys):
    assert main(["11000000000000000000000000000000", "-v"]) == EXIT_OK
    out = capsys.readouterr().out
    assert "Sign: 1 Exponent: 10000000 Fraction: " + "0" * 23 in out
    assert "Sign: 1 Exponent: 128 Fraction: 0.000000" in out
    assert "Class: normal" in out
    assert "Result: -2.000000" in out


def test_cli_stdin(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO(TWO + "\n"))
    assert main([]) == EXIT_OK
    out = capsys.readouterr().out
    assert "Insert the binary float: " in out
    assert "Result: 2.000000" in out


def test_cli_invalid_input(capsys):
    assert main(["0101"]) == EXIT_INVALID_INPUT
    assert "Expected 32 bits, got 4" in capsys.readouterr().err


def test_cli_empty_stdin(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO(""))
    assert main([]) == EXIT_INVALID_INPUT


def test_cli_policies(capsys):
    assert main([INF]) == EXIT_OK
    assert "Result: inf" in capsys.readouterr().out

    assert main([INF, "--policy", "sentinel"]) == EXIT_OK
    assert "Result: 0.000000" in capsys.readouterr().out

    assert main([INF, "--policy", "strict"]) == EXIT_SPECIAL_EXPONENT
    assert "Exponent is 255" in capsys.readouterr().err


def test_cli_negative_digits(capsys):
    try:
        main([TWO, "--digits", "-1"])
    except SystemExit as e:
        assert e.code == EXIT_INVALID_INPUT
    else:
        assert False, "negative --digits must be rejected"
    assert "must be >= 0" in capsys.readouterr().err


def test_decode_traces(caplog):
    caplog.set_level(logging.DEBUG, logger="ieee_ops")
    decode_binary_float("11000000000000000000000000000000")
    messages = [r.getMessage() for r in caplog.records if r.levelno == logging.DEBUG]
    assert "Binary --- Sign: 1 Exponent: 10000000 Fraction: " + "0" * 23 in messages
    assert "Decimal --- Sign: 1 Exponent: 128 Fraction: 0.000000" in messages


def test_sentinel_error_log(caplog):
    caplog.set_level(logging.ERROR, logger="ieee_ops")
    assert decode_binary_float(INF, policy=SpecialPolicy.SENTINEL) == 0.0
    errors = [r for r in caplog.records if r.levelno == logging.ERROR]
    assert len(errors) == 1
    assert errors[0].getMessage() == "Exponent is 255"
    assert errors[0].name == "ieee_ops.reconstructor"
