"""
枚举 <-> 交易所字符串

所有发往交易所的枚举字段都必须经过 to_wire, 不要在调用处自行拼字符串。
"""
from enum import Enum
from typing import Type, TypeVar

E = TypeVar("E", bound=Enum)


def to_wire(member: Enum) -> str:
    """Return the exact upper-case token the exchange expects for ``member``."""
    return member.value


def from_wire(enum_cls: Type[E], token: str) -> E:
    """Inverse of :func:`to_wire`; raises ``ValueError`` for an unknown token."""
    return enum_cls(token)
