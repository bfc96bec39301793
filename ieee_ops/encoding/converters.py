"""
位串 <-> 脉冲 转换器
===================

位串 (BitString): 仅由 '0' / '1' 组成的 str, MSB 在前
脉冲 (Pulse): 0.0 / 1.0 浮点张量, 位在最后一维, MSB 在前

作者: IEEEOps Project
"""
import torch

from ..errors import InvalidBitCharacter, InvalidLength

FP32_BITS = 32


def validate_bitstring(bits, expected_length=None):
    """校验位串并返回去除首尾空白后的结果

    Args:
        bits: 输入字符串 (控制台读入的行可能带换行符)
        expected_length: 期望位数, None 表示不检查长度

    Raises:
        InvalidBitCharacter: 存在 '0'/'1' 以外的字符
        InvalidLength: 位数与 expected_length 不符
    """
    # 位置按调用方原始字符串计
    offset = len(bits) - len(bits.lstrip())
    bits = bits.strip()
    for i, c in enumerate(bits):
        if c not in '01':
            raise InvalidBitCharacter(c, i + offset)
    if expected_length is not None and len(bits) != expected_length:
        raise InvalidLength(expected_length, len(bits))
    return bits


def bitstring_to_pulse(bits, device=None, expected_length=None):
    """位串 → 脉冲张量

    Args:
        bits: str → [n]; str 序列 → [N, n]
        device: 目标设备
        expected_length: 每个位串的期望位数

    Returns:
        float32 脉冲张量
    """
    if isinstance(bits, str):
        bits = validate_bitstring(bits, expected_length)
        return torch.tensor([float(c) for c in bits], dtype=torch.float32, device=device)

    rows = [validate_bitstring(b, expected_length) for b in bits]
    if rows:
        # 批内位数必须一致
        width = len(rows[0])
        for row in rows[1:]:
            if len(row) != width:
                raise InvalidLength(width, len(row))
    else:
        width = expected_length or 0
    data = [[float(c) for c in row] for row in rows]
    return torch.tensor(data, dtype=torch.float32, device=device).reshape(len(rows), width)


def pulse_to_bitstring(pulse):
    """脉冲张量 [n] → 位串"""
    flat = pulse.detach().reshape(-1).cpu().tolist()
    return ''.join('1' if v > 0.5 else '0' for v in flat)
