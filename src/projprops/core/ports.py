"""Core ports (interfaces) for projprops.

These protocols define the boundaries between the interception core and the
storage it sits in front of. They are intentionally small and
capability-oriented so any collaborator with the right coroutines can be
plugged in, test doubles included.
"""

from __future__ import annotations

from typing import Mapping, Protocol, runtime_checkable


@runtime_checkable
class ApplicationFileAccessor(Protocol):
    """Reads and writes values held in the project's application definition file."""

    async def get_startup_uri(self) -> str | None:
        """Return the startup URI, or None if the file does not define one."""

    async def set_startup_uri(self, value: str) -> None:
        """Persist a new startup URI."""

    async def get_shutdown_mode(self) -> str | None:
        """Return the shutdown mode, or None if the file does not define one."""

    async def set_shutdown_mode(self, value: str) -> None:
        """Persist a new shutdown mode."""


@runtime_checkable
class PropertyStore(Protocol):
    """Standard project property storage."""

    async def get_unevaluated_value(self, name: str) -> str | None:
        """Return the raw stored text."""

    async def get_evaluated_value(self, name: str) -> str | None:
        """Return the value after evaluation."""

    async def set_value(self, name: str, value: str) -> None:
        """Persist a value."""

    async def delete_value(self, name: str) -> None:
        """Remove a value."""

    def snapshot(self) -> Mapping[str, str | None]:
        """Return a read-only copy of the current values."""


@runtime_checkable
class InterceptingValueProvider(Protocol):
    """Overrides reads and writes for the property names it is registered for.

    A None result from a getter means "no override". A None result from the
    setter means nothing should be written to the standard store.
    """

    async def on_get_evaluated_value(
        self, name: str, evaluated_value: str | None, snapshot: Mapping[str, str | None]
    ) -> str | None:
        """Return an override for the evaluated value."""

    async def on_get_unevaluated_value(
        self, name: str, unevaluated_value: str | None, snapshot: Mapping[str, str | None]
    ) -> str | None:
        """Return an override for the unevaluated value."""

    async def on_set_value(
        self, name: str, unevaluated_value: str, snapshot: Mapping[str, str | None]
    ) -> str | None:
        """Handle a write; return the value the store should persist, if any."""
