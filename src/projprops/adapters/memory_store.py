"""Dict-backed PropertyStore."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping


class InMemoryPropertyStore:
    def __init__(self, values: Mapping[str, str] | None = None):
        self._values: dict[str, str] = dict(values or {})

    async def get_unevaluated_value(self, name: str) -> str | None:
        return self._values.get(name)

    async def get_evaluated_value(self, name: str) -> str | None:
        # No expression evaluation; surrounding whitespace is not significant
        value = self._values.get(name)
        return value.strip() if value is not None else None

    async def set_value(self, name: str, value: str) -> None:
        self._values[name] = value

    async def delete_value(self, name: str) -> None:
        self._values.pop(name, None)

    def snapshot(self) -> Mapping[str, str | None]:
        return MappingProxyType(dict(self._values))
