"""
Decode Errors
=============

Error taxonomy for the binary32 decode pipeline.

Every failure is terminal for the current decode call: there is no retry
and no partial result. All errors derive from ``IEEEDecodeError`` (itself a
``ValueError``) so callers can catch the family with a single clause.

作者: IEEEOps Project
"""


class IEEEDecodeError(ValueError):
    """Base class for all decode failures."""


class InvalidLength(IEEEDecodeError):
    """Input does not supply the expected number of bits."""

    def __init__(self, expected, actual):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Expected {expected} bits, got {actual}"
        )


class InvalidBitCharacter(IEEEDecodeError):
    """Input contains a character other than '0' or '1'."""

    def __init__(self, char, position):
        self.char = char
        self.position = position
        super().__init__(
            f"Invalid bit character {char!r} at position {position}"
        )


class SpecialExponent(IEEEDecodeError):
    """Exponent field is all ones (255): infinity or NaN region."""

    def __init__(self, sign, fraction):
        self.sign = sign
        self.fraction = fraction
        kind = "NaN" if self.is_nan else "infinity"
        super().__init__(f"Exponent is 255 ({kind})")

    @property
    def is_nan(self):
        return '1' in self.fraction
