"""Property store wrapper that routes intercepted names to value providers."""

from __future__ import annotations

import logging
from typing import Iterable, Mapping

from ..errors import DuplicateInterceptorError
from .delegator import ConditionalPropertyDelegator
from .gating import DELEGATED_PROPERTIES
from .ports import ApplicationFileAccessor, InterceptingValueProvider, PropertyStore

logger = logging.getLogger(__name__)


class InterceptedProperties:
    """Reads and writes project properties, consulting registered providers.

    Names without a provider go straight to the store. For an intercepted
    name, a non-None override from the provider replaces the stored value on
    read, and on write the provider's result is what gets persisted (None
    means nothing is written).
    """

    def __init__(
        self,
        store: PropertyStore,
        providers: Mapping[str, InterceptingValueProvider] | None = None,
    ):
        self._store = store
        self._providers: dict[str, InterceptingValueProvider] = {}
        for name, provider in (providers or {}).items():
            self.register(provider, [name])

    @property
    def store(self) -> PropertyStore:
        return self._store

    def register(self, provider: InterceptingValueProvider, names: Iterable[str]) -> None:
        names = list(names)
        for name in names:
            if name in self._providers:
                raise DuplicateInterceptorError(name)
        for name in names:
            self._providers[name] = provider

    def interceptor_for(self, name: str) -> InterceptingValueProvider | None:
        return self._providers.get(name)

    async def get_unevaluated_value(self, name: str) -> str | None:
        value = await self._store.get_unevaluated_value(name)
        provider = self._providers.get(name)
        if provider is None:
            return value

        override = await provider.on_get_unevaluated_value(name, value, self._store.snapshot())
        if override is None:
            return value
        logger.debug("Unevaluated %s overridden by %s", name, type(provider).__name__)
        return override

    async def get_evaluated_value(self, name: str) -> str | None:
        value = await self._store.get_evaluated_value(name)
        provider = self._providers.get(name)
        if provider is None:
            return value

        override = await provider.on_get_evaluated_value(name, value, self._store.snapshot())
        if override is None:
            return value
        logger.debug("Evaluated %s overridden by %s", name, type(provider).__name__)
        return override

    async def set_value(self, name: str, value: str) -> None:
        provider = self._providers.get(name)
        if provider is None:
            await self._store.set_value(name, value)
            return

        to_store = await provider.on_set_value(name, value, self._store.snapshot())
        if to_store is None:
            logger.debug("Write to %s handled by %s", name, type(provider).__name__)
            return
        await self._store.set_value(name, to_store)


def register_application_file_properties(
    properties: InterceptedProperties,
    accessor: ApplicationFileAccessor,
    *,
    trace_decisions: bool = False,
) -> ConditionalPropertyDelegator:
    """Route StartupURI and ShutdownMode through a delegator over `accessor`."""
    delegator = ConditionalPropertyDelegator(accessor, trace_decisions=trace_decisions)
    properties.register(delegator, sorted(DELEGATED_PROPERTIES))
    return delegator
