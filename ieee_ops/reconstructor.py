"""
IEEE 754 重建器 (IEEE Reconstructor)
====================================

由 sign / exponent / fraction 三个字段重建十进制数值 (提升为 double)。

FP32: [S | E7..E0 | M22..M0], bias=127

重建规则:
- Normal (1 <= E <= 254): (-1)^S × 2^(E-127) × (1 + F)
- Subnormal (E = 0):      (-1)^S × 2^(-126) × F   (无隐含的 1)
- Special (E = 255):      由 SpecialPolicy 决定
    - IEEE:     F = 0 → ±inf, F != 0 → nan
    - SENTINEL: 记录错误并返回 0.0
    - STRICT:   抛出 SpecialExponent

零的符号会被保留: S=1, E=0, F=0 → -0.0

作者: IEEEOps Project
"""
import logging

import torch
import torch.nn as nn

from .bit_parser import BitParser, parse_bits
from .decode_mode import FloatClass, ParseMode, SpecialPolicy
from .encoding.converters import pulse_to_bitstring
from .errors import SpecialExponent

logger = logging.getLogger(__name__)

EXPONENT_BIAS = 127
EXPONENT_SPECIAL = 255
SUBNORMAL_EXP_PART = 2.0 ** (1 - EXPONENT_BIAS)


def _parse_fields(fields):
    sign = parse_bits(fields.sign, ParseMode.INTEGER)
    exponent = parse_bits(fields.exponent, ParseMode.INTEGER)
    fraction = parse_bits(fields.fraction, ParseMode.FRACTIONAL)
    return sign, exponent, fraction


def classify_fields(fields):
    """判断字段所属的 IEEE 754 区域

    Returns:
        FloatClass 常量
    """
    _, exponent, fraction = _parse_fields(fields)
    if exponent == EXPONENT_SPECIAL:
        return FloatClass.NAN if fraction else FloatClass.INFINITY
    if exponent == 0:
        return FloatClass.SUBNORMAL if fraction else FloatClass.ZERO
    return FloatClass.NORMAL


def convert_ieee_float(fields, policy=None):
    """SplitFields → double

    Args:
        fields: SplitFields (sign, exponent, fraction)
        policy: SpecialPolicy 实例级覆盖, None 跟随上下文/全局

    Returns:
        float: 十进制数值

    Raises:
        SpecialExponent: E=255 且策略为 STRICT
    """
    sign, exponent, fraction = _parse_fields(fields)
    logger.debug("Decimal --- Sign: %.0f Exponent: %.0f Fraction: %f",
                 sign, exponent, fraction)

    sign_part = -1.0 if sign else 1.0

    if exponent == EXPONENT_SPECIAL:
        return _special_value(fields, sign_part, fraction, SpecialPolicy.resolve(policy))
    elif exponent == 0:
        exp_part = SUBNORMAL_EXP_PART
        frac_part = fraction
    else:
        exp_part = 2.0 ** (exponent - EXPONENT_BIAS)
        frac_part = 1.0 + fraction

    return sign_part * exp_part * frac_part


def _special_value(fields, sign_part, fraction, policy):
    if policy == SpecialPolicy.STRICT:
        raise SpecialExponent(fields.sign, fields.fraction)
    if policy == SpecialPolicy.SENTINEL:
        logger.error("Exponent is 255")
        return 0.0
    if fraction:
        return float('nan')
    return sign_part * float('inf')


class IEEEReconstructor(nn.Module):
    """IEEE 754 重建器 (批量脉冲)

    输入: sign [..., 1], exponent [..., 8], fraction [..., 23]
    输出: [...] float64

    Args:
        policy: SpecialPolicy 实例级覆盖, None 跟随上下文/全局
    """
    def __init__(self, policy=None):
        super().__init__()
        if policy is not None:
            SpecialPolicy.resolve(policy)
        self.policy = policy

        self.int_parser = BitParser(ParseMode.INTEGER)
        self.frac_parser = BitParser(ParseMode.FRACTIONAL)

    def forward(self, s, e, m):
        sign = self.int_parser(s).to(torch.float64)
        exponent = self.int_parser(e).to(torch.float64)
        fraction = self.frac_parser(m).to(torch.float64)

        is_special = exponent == EXPONENT_SPECIAL
        is_subnormal = exponent == 0

        policy = SpecialPolicy.resolve(self.policy)
        if policy == SpecialPolicy.STRICT and bool(is_special.any()):
            idx = tuple(is_special.nonzero()[0].tolist())
            raise SpecialExponent(pulse_to_bitstring(s[idx]), pulse_to_bitstring(m[idx]))

        sign_part = 1.0 - 2.0 * sign

        # ===== Normal / Subnormal 路径 =====
        exp_part = torch.where(
            is_subnormal,
            torch.full_like(exponent, SUBNORMAL_EXP_PART),
            torch.pow(2.0, exponent - EXPONENT_BIAS),
        )
        frac_part = torch.where(is_subnormal, fraction, 1.0 + fraction)
        value = sign_part * exp_part * frac_part

        # ===== Special 路径 =====
        if policy == SpecialPolicy.SENTINEL:
            n_special = int(is_special.sum().item())
            if n_special:
                logger.error("Exponent is 255 (%d element(s) replaced with 0.0)", n_special)
            special = torch.zeros_like(value)
        else:
            special = torch.where(
                fraction != 0,
                torch.full_like(value, float('nan')),
                sign_part * float('inf'),
            )

        return torch.where(is_special, special, value)
