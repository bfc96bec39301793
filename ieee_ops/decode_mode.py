"""
解码模式配置 (Decode Mode Configuration)
========================================

- **ParseMode**: 位串解析模式 (整数 / 小数)
- **SpecialPolicy**: 指数全 1 (E=255) 时的处理策略
- **FloatClass**: 解码结果所属的 IEEE 754 区域

SpecialPolicy 控制层次
----------------------
1. 全局策略 - 整个进程的默认行为
2. 上下文管理器 - 局部临时切换
3. 实例级覆盖 - 特定组件固定行为

优先级: 实例策略 > 上下文策略 > 全局策略

使用示例
--------
```python
from ieee_ops import SpecialPolicy, decode_binary_float

# 1. 默认 IEEE 策略: E=255 → ±inf / nan
decode_binary_float('0' + '1' * 8 + '0' * 23)   # inf

# 2. 上下文管理器 (局部切换)
with SpecialPolicy.strict():
    decode_binary_float(bits)  # E=255 时抛出 SpecialExponent

# 3. 实例级覆盖
recon = IEEEReconstructor(policy=SpecialPolicy.SENTINEL)
```

作者: IEEEOps Project
"""

import threading
from contextlib import contextmanager


class ParseMode:
    """位串解析模式

    - INTEGER: 大端无符号二进制整数 (acc = acc*2 + bit)
    - FRACTIONAL: 小数点后的位 (权重 0.5, 0.25, 0.125, ...)
    """

    INTEGER = 'integer'
    FRACTIONAL = 'fractional'

    @classmethod
    def validate(cls, mode):
        """验证解析模式是否有效"""
        if mode not in (cls.INTEGER, cls.FRACTIONAL):
            raise ValueError(
                f"Invalid parse mode: {mode}. "
                f"Expected one of: 'integer', 'fractional'"
            )
        return mode


class FloatClass:
    """IEEE 754 区域标签"""

    ZERO = 'zero'
    SUBNORMAL = 'subnormal'
    NORMAL = 'normal'
    INFINITY = 'infinity'
    NAN = 'nan'


class SpecialPolicy:
    """指数 E=255 处理策略

    Attributes:
        IEEE: 按 IEEE 754 返回 ±inf (尾数为0) 或 nan (尾数非0)
        SENTINEL: 记录错误日志并返回 0.0 (兼容旧行为)
        STRICT: 抛出 SpecialExponent
    """

    IEEE = 'ieee'
    SENTINEL = 'sentinel'
    STRICT = 'strict'

    _VALID = (IEEE, SENTINEL, STRICT)

    # 线程安全的全局状态
    _local = threading.local()
    _global_policy = IEEE

    @classmethod
    def _check(cls, policy):
        if policy not in cls._VALID:
            raise ValueError(
                f"Invalid policy: {policy}. "
                f"Use SpecialPolicy.IEEE, SpecialPolicy.SENTINEL or SpecialPolicy.STRICT"
            )
        return policy

    @classmethod
    def _get_context_stack(cls):
        """获取当前线程的上下文栈"""
        if not hasattr(cls._local, 'context_stack'):
            cls._local.context_stack = []
        return cls._local.context_stack

    @classmethod
    def get_policy(cls):
        """获取当前有效策略 (上下文 > 全局)"""
        stack = cls._get_context_stack()
        if stack:
            return stack[-1]
        return cls._global_policy

    @classmethod
    def set_global_policy(cls, policy):
        """设置全局策略

        Raises:
            ValueError: 如果 policy 不是有效策略
        """
        cls._global_policy = cls._check(policy)

    @classmethod
    def get_global_policy(cls):
        return cls._global_policy

    @classmethod
    @contextmanager
    def policy(cls, policy):
        """上下文管理器: 临时切换到指定策略

        Example:
            with SpecialPolicy.policy(SpecialPolicy.SENTINEL):
                value = decode_binary_float(bits)
            # 退出后恢复原策略
        """
        cls._check(policy)
        stack = cls._get_context_stack()
        stack.append(policy)
        try:
            yield
        finally:
            stack.pop()

    @classmethod
    @contextmanager
    def ieee(cls):
        with cls.policy(cls.IEEE):
            yield

    @classmethod
    @contextmanager
    def sentinel(cls):
        with cls.policy(cls.SENTINEL):
            yield

    @classmethod
    @contextmanager
    def strict(cls):
        with cls.policy(cls.STRICT):
            yield

    @classmethod
    def resolve(cls, instance_policy=None):
        """解析实际生效的策略

        Args:
            instance_policy: 实例级策略覆盖，None 表示跟随全局/上下文

        Returns:
            str: 生效策略
        """
        if instance_policy is not None:
            return cls._check(instance_policy)
        return cls.get_policy()
