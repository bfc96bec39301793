import torch
import sys
import os

# Ensure project root is in path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from ieee_ops import (
    split_binary_float, SplitFields, FP32FieldSplitter,
    bitstring_to_pulse, pulse_to_bitstring,
    InvalidLength, InvalidBitCharacter, IEEEDecodeError,
)

TWO = "01000000000000000000000000000000"


def test_split_fields():
    print("\nTesting split_binary_float...")
    fields = split_binary_float(TWO)
    assert isinstance(fields, SplitFields)
    assert fields.sign == "0"
    assert fields.exponent == "10000000"
    assert fields.fraction == "0" * 23
    assert (len(fields.sign), len(fields.exponent), len(fields.fraction)) == (1, 8, 23)
    print("split: PASS")


def test_split_strips_newline():
    fields = split_binary_float(TWO + "\n")
    assert fields.exponent == "10000000"


def test_split_short_input():
    try:
        split_binary_float(TWO[:20])
    except InvalidLength as e:
        assert e.expected == 32 and e.actual == 20
    else:
        assert False, "short input must raise InvalidLength"


def test_split_long_input():
    try:
        split_binary_float(TWO + "0")
    except InvalidLength as e:
        assert e.actual == 33
    else:
        assert False, "long input must raise InvalidLength"


def test_split_bad_character():
    bad = TWO[:5] + "2" + TWO[6:]
    try:
        split_binary_float(bad)
    except InvalidBitCharacter as e:
        assert e.char == "2" and e.position == 5
        assert isinstance(e, IEEEDecodeError)
    else:
        assert False, "non-binary character must raise InvalidBitCharacter"


def test_bad_character_position_counts_leading_whitespace():
    bad = "  " + TWO[:5] + "x" + TWO[6:]
    try:
        split_binary_float(bad)
    except InvalidBitCharacter as e:
        assert e.position == 7
        assert bad[e.position] == "x"
    else:
        assert False, "non-binary character must raise InvalidBitCharacter"


def test_pulse_splitter():
    print("\nTesting FP32FieldSplitter...")
    bits = "1" + "01111111" + "1" + "0" * 22
    pulse = bitstring_to_pulse(bits)
    s, e, m = FP32FieldSplitter()(pulse)
    assert s.shape[-1] == 1 and e.shape[-1] == 8 and m.shape[-1] == 23
    assert pulse_to_bitstring(s) == "1"
    assert pulse_to_bitstring(e) == "01111111"
    assert pulse_to_bitstring(m) == "1" + "0" * 22

    batch = bitstring_to_pulse([bits, TWO])
    s, e, m = FP32FieldSplitter()(batch)
    assert s.shape == (2, 1) and e.shape == (2, 8) and m.shape == (2, 23)
    print("FP32FieldSplitter: PASS")


def test_pulse_splitter_wrong_width():
    try:
        FP32FieldSplitter()(torch.zeros(3, 16))
    except InvalidLength as e:
        assert e.actual == 16
    else:
        assert False, "16-bit pulse must raise InvalidLength"


if __name__ == "__main__":
    try:
        test_split_fields()
        test_split_strips_newline()
        test_split_short_input()
        test_split_long_input()
        test_split_bad_character()
        test_bad_character_position_counts_leading_whitespace()
        test_pulse_splitter()
        test_pulse_splitter_wrong_width()
        print("\nALL SPLITTER TESTS PASSED.")
    except Exception as e:
        print(f"\nTEST FAILED: {e}")
        exit(1)
