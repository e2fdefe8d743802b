import pytest

from projprops.adapters.memory_accessor import InMemoryApplicationFileAccessor
from projprops.adapters.memory_store import InMemoryPropertyStore
from projprops.core.delegator import ConditionalPropertyDelegator
from projprops.core.intercepted_properties import (
    InterceptedProperties,
    register_application_file_properties,
)
from projprops.core.ports import InterceptingValueProvider
from projprops.errors import DuplicateInterceptorError


class _UpperCaseProvider(InterceptingValueProvider):
    def __init__(self):
        self.snapshots = []

    async def on_get_evaluated_value(self, name, evaluated_value, snapshot):
        self.snapshots.append(snapshot)
        return evaluated_value.upper() if evaluated_value else None

    async def on_get_unevaluated_value(self, name, unevaluated_value, snapshot):
        self.snapshots.append(snapshot)
        return None

    async def on_set_value(self, name, unevaluated_value, snapshot):
        self.snapshots.append(snapshot)
        return unevaluated_value.upper()


def _windowed_store(**extra):
    return InMemoryPropertyStore({"UseWPF": "true", "OutputType": "WinExe", **extra})


@pytest.mark.asyncio
async def test_windowed_app_reads_and_writes_application_file():
    store = _windowed_store(StartupURI="Stale.xaml")
    accessor = InMemoryApplicationFileAccessor(startup_uri="MainWindow.xaml", shutdown_mode="OnLastWindowClose")
    properties = InterceptedProperties(store)
    register_application_file_properties(properties, accessor)

    assert await properties.get_unevaluated_value("StartupURI") == "MainWindow.xaml"
    assert await properties.get_evaluated_value("ShutdownMode") == "OnLastWindowClose"

    await properties.set_value("StartupURI", "Other.xaml")

    assert await accessor.get_startup_uri() == "Other.xaml"
    assert await store.get_unevaluated_value("StartupURI") == "Stale.xaml"


@pytest.mark.asyncio
async def test_console_app_falls_back_to_store_and_skips_write():
    store = InMemoryPropertyStore({"UseWPF": "true", "OutputType": "Exe", "StartupURI": "Stored.xaml"})
    accessor = InMemoryApplicationFileAccessor(startup_uri="MainWindow.xaml")
    properties = InterceptedProperties(store)
    register_application_file_properties(properties, accessor)

    assert await properties.get_unevaluated_value("StartupURI") == "Stored.xaml"

    await properties.set_value("StartupURI", "New.xaml")

    assert accessor.reads == 0
    assert accessor.writes == 0
    assert await store.get_unevaluated_value("StartupURI") == "Stored.xaml"


@pytest.mark.asyncio
async def test_dropped_write_is_logged_with_gating_values(caplog):
    store = InMemoryPropertyStore({"UseWPF": "false", "OutputType": "WinExe"})
    properties = InterceptedProperties(store)
    register_application_file_properties(properties, InMemoryApplicationFileAccessor())

    with caplog.at_level("DEBUG", logger="projprops.core.delegator"):
        await properties.set_value("ShutdownMode", "OnExplicitShutdown")

    assert "Write to ShutdownMode dropped" in caplog.text
    assert "UseWPF='false'" in caplog.text
    assert await store.get_unevaluated_value("ShutdownMode") is None


@pytest.mark.asyncio
async def test_gating_follows_store_changes():
    store = InMemoryPropertyStore({"OutputType": "WinExe"})
    accessor = InMemoryApplicationFileAccessor(shutdown_mode="OnExplicitShutdown")
    properties = InterceptedProperties(store)
    register_application_file_properties(properties, accessor)

    assert await properties.get_unevaluated_value("ShutdownMode") is None

    await properties.set_value("UseWPF", "true")

    assert await properties.get_unevaluated_value("ShutdownMode") == "OnExplicitShutdown"


@pytest.mark.asyncio
async def test_unregistered_names_go_to_store():
    store = _windowed_store()
    properties = InterceptedProperties(store)
    register_application_file_properties(properties, InMemoryApplicationFileAccessor())

    await properties.set_value("AssemblyName", "  Contoso  ")

    assert await properties.get_unevaluated_value("AssemblyName") == "  Contoso  "
    assert await properties.get_evaluated_value("AssemblyName") == "Contoso"
    assert properties.interceptor_for("AssemblyName") is None


@pytest.mark.asyncio
async def test_provider_result_is_persisted_and_gets_fresh_snapshot():
    store = InMemoryPropertyStore({"Title": "hello"})
    provider = _UpperCaseProvider()
    properties = InterceptedProperties(store, {"Title": provider})

    assert await properties.get_evaluated_value("Title") == "HELLO"
    assert await properties.get_unevaluated_value("Title") == "hello"

    await properties.set_value("Title", "world")

    assert await store.get_unevaluated_value("Title") == "WORLD"
    assert provider.snapshots[0]["Title"] == "hello"
    with pytest.raises(TypeError):
        provider.snapshots[0]["Title"] = "mutated"


def test_register_rejects_duplicate_names():
    properties = InterceptedProperties(InMemoryPropertyStore())
    register_application_file_properties(properties, InMemoryApplicationFileAccessor())

    with pytest.raises(DuplicateInterceptorError) as exc_info:
        properties.register(_UpperCaseProvider(), ["Title", "StartupURI"])

    assert exc_info.value.name == "StartupURI"
    assert properties.interceptor_for("Title") is None


def test_register_application_file_properties_returns_delegator():
    properties = InterceptedProperties(InMemoryPropertyStore())

    delegator = register_application_file_properties(properties, InMemoryApplicationFileAccessor())

    assert isinstance(delegator, ConditionalPropertyDelegator)
    assert properties.interceptor_for("StartupURI") is delegator
    assert properties.interceptor_for("ShutdownMode") is delegator
    assert isinstance(delegator, InterceptingValueProvider)
