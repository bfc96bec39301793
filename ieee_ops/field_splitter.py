"""
FP32 字段拆分器 (Field Splitter)
================================

将 32 位 IEEE 754 单精度位串拆分为三个字段:

FP32: [S | E7..E0 | M22..M0], bias=127

- sign: 1 位
- exponent: 8 位
- fraction: 23 位

输入不足或超过 32 位时抛出 InvalidLength, 不做部分填充。

作者: IEEEOps Project
"""
import logging
from typing import NamedTuple

import torch.nn as nn

from .encoding.converters import FP32_BITS, pulse_to_bitstring, validate_bitstring
from .errors import InvalidLength

logger = logging.getLogger(__name__)

SIGN_BITS = 1
EXPONENT_BITS = 8
FRACTION_BITS = 23

_EXP_START = SIGN_BITS
_FRAC_START = SIGN_BITS + EXPONENT_BITS


class SplitFields(NamedTuple):
    """单次解码调用拥有的三个字段 (不可变)"""
    sign: str
    exponent: str
    fraction: str


def split_binary_float(binary_float):
    """拆分 32 位位串为 sign / exponent / fraction

    Args:
        binary_float: 32 个 '0'/'1' 字符 (允许首尾空白)

    Returns:
        SplitFields

    Raises:
        InvalidLength: 位数不是 32
        InvalidBitCharacter: 存在非法字符
    """
    bits = validate_bitstring(binary_float, FP32_BITS)
    fields = SplitFields(
        sign=bits[:_EXP_START],
        exponent=bits[_EXP_START:_FRAC_START],
        fraction=bits[_FRAC_START:],
    )
    logger.debug("Binary --- Sign: %s Exponent: %s Fraction: %s", *fields)
    return fields


class FP32FieldSplitter(nn.Module):
    """FP32 脉冲字段拆分器 (批量)

    输入: pulse [..., 32] (MSB first)
    输出: (sign [..., 1], exponent [..., 8], fraction [..., 23])
    """
    def __init__(self):
        super().__init__()

    def forward(self, pulse):
        if pulse.shape[-1] != FP32_BITS:
            raise InvalidLength(FP32_BITS, pulse.shape[-1])

        s = pulse[..., :_EXP_START]
        e = pulse[..., _EXP_START:_FRAC_START]
        m = pulse[..., _FRAC_START:]

        if logger.isEnabledFor(logging.DEBUG) and pulse.dim() == 1:
            logger.debug("Binary --- Sign: %s Exponent: %s Fraction: %s",
                         pulse_to_bitstring(s), pulse_to_bitstring(e), pulse_to_bitstring(m))
        return s, e, m
