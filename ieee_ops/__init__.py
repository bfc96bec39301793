"""
IEEEOps - IEEE 754 binary32 bit-string decoder
"""
from .errors import (
    IEEEDecodeError,
    InvalidLength,
    InvalidBitCharacter,
    SpecialExponent,
)
from .decode_mode import ParseMode, SpecialPolicy, FloatClass
from .encoding import (
    FP32_BITS,
    validate_bitstring,
    bitstring_to_pulse,
    pulse_to_bitstring,
)
from .field_splitter import SplitFields, split_binary_float, FP32FieldSplitter
from .bit_parser import parse_bits, BitParser
from .reconstructor import (
    EXPONENT_BIAS,
    classify_fields,
    convert_ieee_float,
    IEEEReconstructor,
)
from .pulse_decoder import decode_binary_float, PulseFP32Decoder

__version__ = '0.1.0'
