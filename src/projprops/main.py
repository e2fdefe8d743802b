#!/usr/bin/env python3
"""projprops: resolve project properties the way the interception layer would"""

from __future__ import annotations

import argparse
import asyncio
import logging

from .adapters.config_env import load_app_config
from .adapters.memory_accessor import InMemoryApplicationFileAccessor
from .adapters.memory_store import InMemoryPropertyStore
from .core.delegator import ConditionalPropertyDelegator
from .core.gating import DELEGATED_PROPERTIES, is_delegated_property, is_delegation_enabled_for
from .core.intercepted_properties import InterceptedProperties, register_application_file_properties
from .logging_config import setup_logging

logger = logging.getLogger(__name__)


def _assignment(text: str) -> tuple[str, str]:
    name, sep, value = text.partition("=")
    if not sep or not name:
        raise argparse.ArgumentTypeError(f"expected NAME=VALUE, got {text!r}")
    return name, value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="projprops",
        description="Resolve project properties, routing StartupURI and ShutdownMode "
        "to the application file for windowed applications.",
    )
    parser.add_argument(
        "-p",
        "--property",
        dest="assignments",
        metavar="NAME=VALUE",
        type=_assignment,
        action="append",
        default=[],
        help="project property value (repeatable)",
    )
    parser.add_argument("--startup-uri", help="StartupURI held by the application file")
    parser.add_argument("--shutdown-mode", help="ShutdownMode held by the application file")
    parser.add_argument(
        "names",
        nargs="*",
        metavar="PROPERTY",
        help="property names to resolve (default: ShutdownMode and StartupURI)",
    )
    return parser


def explain(snapshot: dict[str, str], names: list[str]) -> list[str]:
    """Return where each property is read from: application file or passthrough."""
    enabled = is_delegation_enabled_for(snapshot)
    return [
        f"{name}: application file" if enabled and is_delegated_property(name) else f"{name}: passthrough"
        for name in names
    ]


async def resolve(
    properties: InterceptedProperties,
    delegator: ConditionalPropertyDelegator,
    names: list[str],
) -> list[tuple[str, str | None]]:
    """Resolve each name; delegated names report the application file's value only."""
    snapshot = properties.store.snapshot()
    enabled = is_delegation_enabled_for(snapshot)
    values = []
    for name in names:
        if enabled and is_delegated_property(name):
            value = await delegator.get(name, snapshot.get(name), snapshot)
        else:
            value = await properties.get_evaluated_value(name)
        values.append((name, value))
    return values


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    app_config = load_app_config()
    setup_logging(app_config)

    snapshot = dict(args.assignments)
    names = args.names or sorted(DELEGATED_PROPERTIES)

    properties = InterceptedProperties(InMemoryPropertyStore(snapshot))
    delegator = register_application_file_properties(
        properties,
        InMemoryApplicationFileAccessor(args.startup_uri, args.shutdown_mode),
        trace_decisions=app_config.trace_delegation,
    )
    values = asyncio.run(resolve(properties, delegator, names))
    logger.debug("Resolved %d properties", len(values))

    for line, (_, value) in zip(explain(snapshot, names), values):
        print(f"{line} = {value if value is not None else '<unset>'}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
