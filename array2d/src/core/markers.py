"""Sentinel values for unset slots and failed lookups."""

from __future__ import annotations

from typing import Tuple

__all__ = ["EMPTY", "NOT_FOUND", "NO_POSITION"]


class _Marker:
    """Named singleton that is falsy and survives copying and pickling."""

    _instances: dict = {}

    def __new__(cls, name: str) -> "_Marker":
        if name not in cls._instances:
            inst = super().__new__(cls)
            inst._name = name
            cls._instances[name] = inst
        return cls._instances[name]

    def __repr__(self) -> str:
        return self._name

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        return (_Marker, (self._name,))

    def __copy__(self) -> "_Marker":
        return self

    def __deepcopy__(self, memo) -> "_Marker":
        return self


EMPTY = _Marker("EMPTY")
NOT_FOUND = _Marker("NOT_FOUND")
NO_POSITION: Tuple[int, int] = (-1, -1)
