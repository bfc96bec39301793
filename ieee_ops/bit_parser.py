"""
位串解析器 (Bit Parser)
======================

将位串解析为数值:

- INTEGER: 大端无符号整数, 从左到右折叠 acc = acc*2 + bit
  8 位 → [0, 255], 1 位 → [0, 1]
- FRACTIONAL: 小数点后的位, 权重从 0.5 开始每位减半
  23 位 → [0, 1)

累加使用单精度 (float32)。对 1/8/23 位字段结果是精确的;
更长的位串按 float32 舍入。

作者: IEEEOps Project
"""
import numpy as np
import torch
import torch.nn as nn

from .decode_mode import ParseMode


def parse_bits(binary_string, mode=ParseMode.INTEGER):
    """解析位串为 float

    Args:
        binary_string: '0'/'1' 组成的字符串, 空串得 0.0
        mode: ParseMode.INTEGER 或 ParseMode.FRACTIONAL

    Returns:
        float: 位串表示的数值
    """
    ParseMode.validate(mode)
    acc = np.float32(0.0)
    if mode == ParseMode.INTEGER:
        two = np.float32(2.0)
        for c in binary_string:
            acc = acc * two + np.float32(c == '1')
    else:
        factor = np.float32(0.5)
        half = np.float32(2.0)
        for c in binary_string:
            if c == '1':
                acc = acc + factor
            factor = factor / half
    return float(acc)


class BitParser(nn.Module):
    """位串解析器 (批量脉冲)

    输入: bits [..., n] (MSB first)
    输出: [...] float32

    Args:
        mode: ParseMode.INTEGER 或 ParseMode.FRACTIONAL
    """
    def __init__(self, mode=ParseMode.INTEGER):
        super().__init__()
        self.mode = ParseMode.validate(mode)

    def forward(self, bits: torch.Tensor):
        # 逐位 float32 左折叠, 与 parse_bits 的舍入顺序一致
        bits = bits.to(torch.float32)
        acc = torch.zeros(bits.shape[:-1], dtype=torch.float32, device=bits.device)
        if self.mode == ParseMode.INTEGER:
            for i in range(bits.shape[-1]):
                acc = acc * 2.0 + bits[..., i]
        else:
            factor = torch.tensor(0.5, dtype=torch.float32, device=bits.device)
            for i in range(bits.shape[-1]):
                acc = acc + bits[..., i] * factor
                factor = factor / 2.0
        return acc
