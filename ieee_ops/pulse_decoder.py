"""
FP32 解码流水线
==============

Splitter → (3 × BitParser) → Reconstructor

- decode_binary_float: 单个位串 → float
- PulseFP32Decoder: 批量脉冲 [..., 32] → float64 张量

流水线无共享可变状态, 可被多个调用方并发使用。

作者: IEEEOps Project
"""
import torch
import torch.nn as nn

from .encoding.converters import FP32_BITS, bitstring_to_pulse
from .field_splitter import FP32FieldSplitter, split_binary_float
from .reconstructor import IEEEReconstructor, convert_ieee_float


def decode_binary_float(binary_float, policy=None):
    """32 位 IEEE 754 位串 → 十进制 double

    Args:
        binary_float: 32 个 '0'/'1' 字符
        policy: SpecialPolicy 覆盖, None 跟随上下文/全局

    Raises:
        InvalidLength, InvalidBitCharacter, SpecialExponent
    """
    fields = split_binary_float(binary_float)
    return convert_ieee_float(fields, policy=policy)


class PulseFP32Decoder(nn.Module):
    """FP32 脉冲解码器

    输入: [..., 32] 脉冲, 或 str / str 列表
    输出: [...] float64

    Args:
        policy: SpecialPolicy 实例级覆盖
    """
    def __init__(self, policy=None):
        super().__init__()
        self.splitter = FP32FieldSplitter()
        self.reconstructor = IEEEReconstructor(policy=policy)

    def forward(self, x):
        if not isinstance(x, torch.Tensor):
            x = bitstring_to_pulse(x, expected_length=FP32_BITS)
        s, e, m = self.splitter(x)
        return self.reconstructor(s, e, m)
