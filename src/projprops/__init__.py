"""projprops - StartupURI/ShutdownMode interception for project properties"""

__version__ = "1.0.0"
__description__ = "Routes application-file backed project properties to their accessor"

__all__ = [
    "ConditionalPropertyDelegator",
    "InterceptedProperties",
    "main",
    "__version__",
]


def __getattr__(name: str):
    """Lazy import so `import projprops` does not load dotenv configuration."""
    if name == "ConditionalPropertyDelegator":
        from .core.delegator import ConditionalPropertyDelegator

        return ConditionalPropertyDelegator
    if name == "InterceptedProperties":
        from .core.intercepted_properties import InterceptedProperties

        return InterceptedProperties
    if name == "main":
        from .main import main

        return main
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
