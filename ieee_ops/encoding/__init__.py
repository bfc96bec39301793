"""
Encoding components - BitString <-> Pulse conversion
"""
from .converters import (
    FP32_BITS,
    validate_bitstring,
    bitstring_to_pulse,
    pulse_to_bitstring,
)
