"""Gating rule for application-file delegation.

The startup URI and shutdown mode of a windowed application live in its
application definition file, not in the project's own property storage. They
are only meaningful when the UI framework is enabled and the project builds a
windowed executable.
"""

from __future__ import annotations

from typing import Mapping

STARTUP_URI_PROPERTY = "StartupURI"
SHUTDOWN_MODE_PROPERTY = "ShutdownMode"
USE_WPF_PROPERTY = "UseWPF"
OUTPUT_TYPE_PROPERTY = "OutputType"

WIN_EXE_OUTPUT_TYPE = "WinExe"

DELEGATED_PROPERTIES = frozenset({STARTUP_URI_PROPERTY, SHUTDOWN_MODE_PROPERTY})


def parse_bool_text(value: str | None) -> bool:
    """Parse a textual boolean; anything other than "true" is False."""
    if value is None:
        return False
    return value.strip().lower() == "true"


def is_delegation_enabled(feature_enabled: str | None, output_kind: str | None) -> bool:
    """Return True when the UI framework is on and the output is a windowed exe."""
    return parse_bool_text(feature_enabled) and output_kind == WIN_EXE_OUTPUT_TYPE


def is_delegation_enabled_for(snapshot: Mapping[str, str | None]) -> bool:
    return is_delegation_enabled(
        snapshot.get(USE_WPF_PROPERTY),
        snapshot.get(OUTPUT_TYPE_PROPERTY),
    )


def is_delegated_property(name: str) -> bool:
    return name in DELEGATED_PROPERTIES
