"""Sentinels which sort above or below every other value.

These pad out the comparison keys of :class:`~.version.Version` so that a
missing segment (e.g. no pre-release) can be ordered against a present one.
"""

from __future__ import annotations

from typing import Any, ClassVar


class _Unbounded:
    __slots__ = ()

    _sign: ClassVar[int]
    _name: ClassVar[str]

    def __repr__(self) -> str:
        return self._name

    def __hash__(self) -> int:
        return hash(self._name)

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, _Unbounded) and other._sign == self._sign

    def __lt__(self, other: Any) -> bool:
        return self._sign < 0 and not self == other

    def __le__(self, other: Any) -> bool:
        return self._sign < 0 or self == other

    def __gt__(self, other: Any) -> bool:
        return self._sign > 0 and not self == other

    def __ge__(self, other: Any) -> bool:
        return self._sign > 0 or self == other


class InfinityType(_Unbounded):
    _sign = 1
    _name = "Infinity"

    def __neg__(self) -> NegativeInfinityType:
        return NegativeInfinity


class NegativeInfinityType(_Unbounded):
    _sign = -1
    _name = "-Infinity"

    def __neg__(self) -> InfinityType:
        return Infinity


Infinity = InfinityType()

NegativeInfinity = NegativeInfinityType()
