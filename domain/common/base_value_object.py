"""值对象基类"""

from dataclasses import dataclass


@dataclass(frozen=True)
class BaseValueObject:
    """
    值对象基类

    值对象不可变，创建时自动调用 validate() 校验。
    子类需使用 @dataclass(frozen=True) 并按需覆盖 validate()。
    """

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """验证值对象有效性（子类覆盖）"""
        pass
