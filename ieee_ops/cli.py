"""
Console entry point: read a 32-bit binary float, print its decimal value.

Exit codes:
    0  decoded successfully
    2  invalid input (wrong length / non-binary character) or bad arguments
    3  exponent 255 under ``--policy strict``
"""
import argparse
import logging
import sys

from .bit_parser import parse_bits
from .decode_mode import ParseMode, SpecialPolicy
from .errors import SpecialExponent, IEEEDecodeError
from .field_splitter import split_binary_float
from .reconstructor import classify_fields, convert_ieee_float

EXIT_OK = 0
EXIT_INVALID_INPUT = 2
EXIT_SPECIAL_EXPONENT = 3


def _non_negative_int(text):
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {value}")
    return value


def build_parser():
    parser = argparse.ArgumentParser(
        prog='binfloat2dec',
        description='Convert an IEEE 754 single-precision binary string to decimal.')
    parser.add_argument('bits', nargs='?', default=None,
                        help='32 binary digits; read from stdin if omitted')
    parser.add_argument('--policy', default=SpecialPolicy.IEEE,
                        choices=[SpecialPolicy.IEEE, SpecialPolicy.SENTINEL, SpecialPolicy.STRICT],
                        help='handling of exponent 255 (default: ieee)')
    parser.add_argument('--digits', default=6, type=_non_negative_int,
                        help='digits after the decimal point (default: 6)')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='print the binary and decimal field breakdown')
    parser.add_argument('--log-level', default='WARNING',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='logging level (default: WARNING)')
    return parser


def _read_bits():
    try:
        return input('Insert the binary float: ')
    except EOFError:
        return ''


def _print_breakdown(fields):
    print(f"\nBinary ---\nSign: {fields.sign} Exponent: {fields.exponent} Fraction: {fields.fraction}")
    sign = parse_bits(fields.sign, ParseMode.INTEGER)
    exponent = parse_bits(fields.exponent, ParseMode.INTEGER)
    fraction = parse_bits(fields.fraction, ParseMode.FRACTIONAL)
    print(f"\nDecimal ---\nSign: {sign:.0f} Exponent: {exponent:.0f} Fraction: {fraction:f}")
    print(f"Class: {classify_fields(fields)}")


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))

    bits = args.bits if args.bits is not None else _read_bits()

    try:
        fields = split_binary_float(bits)
        if args.verbose:
            _print_breakdown(fields)
        value = convert_ieee_float(fields, policy=args.policy)
    except SpecialExponent as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_SPECIAL_EXPONENT
    except IEEEDecodeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    print(f"Result: {value:.{args.digits}f}")
    return EXIT_OK


if __name__ == '__main__':
    sys.exit(main())
