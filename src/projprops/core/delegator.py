"""Routes StartupURI and ShutdownMode to the application definition file.

For a windowed application these two properties are not stored with the rest
of the project's properties; they are attributes of the application file.
The delegator decides per call whether that applies and, if so, forwards the
read or write to an ApplicationFileAccessor.
"""

from __future__ import annotations

import logging
from typing import Mapping

from .gating import (
    OUTPUT_TYPE_PROPERTY,
    SHUTDOWN_MODE_PROPERTY,
    STARTUP_URI_PROPERTY,
    USE_WPF_PROPERTY,
    is_delegated_property,
    is_delegation_enabled_for,
)
from .ports import ApplicationFileAccessor

logger = logging.getLogger(__name__)


class ConditionalPropertyDelegator:
    """Value provider for the application-file backed properties.

    Holds no state besides the accessor; the gating condition is evaluated
    from the snapshot passed to each call. Accessor exceptions propagate
    unchanged.
    """

    def __init__(self, accessor: ApplicationFileAccessor, *, trace_decisions: bool = False):
        self._accessor = accessor
        self._log_level = logging.INFO if trace_decisions else logging.DEBUG

    async def get(
        self,
        name: str,
        unevaluated_value: str | None,
        snapshot: Mapping[str, str | None],
    ) -> str | None:
        """Return the effective value for `name`, or None for no override.

        Args:
            name: Requested property name.
            unevaluated_value: Value currently in the standard store (unused).
            snapshot: Current project property values used for gating.
        """
        if not is_delegation_enabled_for(snapshot):
            self._log_decision("get", name, delegated=False)
            return None

        if name == STARTUP_URI_PROPERTY:
            self._log_decision("get", name, delegated=True)
            return await self._accessor.get_startup_uri()
        if name == SHUTDOWN_MODE_PROPERTY:
            self._log_decision("get", name, delegated=True)
            return await self._accessor.get_shutdown_mode()

        self._log_decision("get", name, delegated=False)
        return None

    async def set(
        self,
        name: str,
        new_value: str,
        snapshot: Mapping[str, str | None],
    ) -> None:
        """Forward a write to the application file when delegation applies.

        Always returns None: a delegated value is owned by the application
        file and must not also be written to the standard store.
        """
        if not is_delegation_enabled_for(snapshot):
            self._log_decision("set", name, delegated=False)
            if is_delegated_property(name):
                logger.debug(
                    "Write to %s dropped: not a windowed application (%s=%r, %s=%r)",
                    name,
                    USE_WPF_PROPERTY,
                    snapshot.get(USE_WPF_PROPERTY),
                    OUTPUT_TYPE_PROPERTY,
                    snapshot.get(OUTPUT_TYPE_PROPERTY),
                )
            return None

        if name == STARTUP_URI_PROPERTY:
            self._log_decision("set", name, delegated=True)
            await self._accessor.set_startup_uri(new_value)
        elif name == SHUTDOWN_MODE_PROPERTY:
            self._log_decision("set", name, delegated=True)
            await self._accessor.set_shutdown_mode(new_value)
        else:
            self._log_decision("set", name, delegated=False)
        return None

    async def on_get_evaluated_value(
        self, name: str, evaluated_value: str | None, snapshot: Mapping[str, str | None]
    ) -> str | None:
        return await self.get(name, evaluated_value, snapshot)

    async def on_get_unevaluated_value(
        self, name: str, unevaluated_value: str | None, snapshot: Mapping[str, str | None]
    ) -> str | None:
        return await self.get(name, unevaluated_value, snapshot)

    async def on_set_value(
        self, name: str, unevaluated_value: str, snapshot: Mapping[str, str | None]
    ) -> str | None:
        return await self.set(name, unevaluated_value, snapshot)

    def _log_decision(self, operation: str, name: str, delegated: bool) -> None:
        logger.log(
            self._log_level,
            "%s %s: %s",
            operation,
            name,
            "application file" if delegated else "passthrough",
        )
