"""Exceptions raised by projprops."""

from __future__ import annotations


class ProjPropsError(Exception):
    """Base class for projprops errors."""


class DuplicateInterceptorError(ProjPropsError):
    """A property name already has a registered value provider."""

    def __init__(self, name: str):
        super().__init__(f"Property {name!r} already has a registered value provider")
        self.name = name


class ConfigurationError(ProjPropsError):
    """Invalid projprops configuration."""

    @classmethod
    def invalid_value(cls, key: str, value: str, reason: str) -> "ConfigurationError":
        return cls(f"Invalid {key}={value!r}: {reason}")
