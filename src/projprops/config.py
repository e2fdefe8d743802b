"""Configuration for projprops"""
import os

from dotenv import load_dotenv

from .core.gating import parse_bool_text

load_dotenv()


class Config:
    """Environment-backed settings"""

    DEBUG = parse_bool_text(os.getenv("PROJPROPS_DEBUG"))

    # Explicit level wins; otherwise DEBUG when debugging, WARNING when not
    LOG_LEVEL = os.getenv("PROJPROPS_LOG_LEVEL", "DEBUG" if DEBUG else "WARNING").strip().upper()

    # Log every StartupURI/ShutdownMode routing decision at INFO
    TRACE_DELEGATION = parse_bool_text(os.getenv("PROJPROPS_TRACE_DELEGATION"))


config = Config()
