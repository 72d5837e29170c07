"""
Utility functions for DemoReel.

This module provides:
- Safe numeric coercion for decoded property values
- Steam ID conversion
- Chat text cleanup
- Logging setup and a timing context manager
"""

from __future__ import annotations

import logging
import math
import re
import time
from logging.handlers import RotatingFileHandler
from typing import TYPE_CHECKING, Any

import pandas as pd

from demoreel.core.constants import STEAM_ID64_BASE

if TYPE_CHECKING:
    from demoreel.core.config import LoggingConfig

logger = logging.getLogger(__name__)


# Safe type conversion helpers
def safe_int(value: Any, default: int = 0) -> int:
    """Safely convert a value to int."""
    if value is None:
        return default
    try:
        if pd.isna(value):
            return default
        return int(value)
    except (ValueError, TypeError, OverflowError):
        return default


def safe_float(value: Any, default: float = 0.0) -> float:
    """Safely convert a value to float."""
    if value is None:
        return default
    try:
        if pd.isna(value):
            return default
        result = float(value)
    except (ValueError, TypeError, OverflowError):
        return default
    if not math.isfinite(result):
        return default
    return result


def safe_str(value: Any, default: str = "") -> str:
    """Safely convert a value to string."""
    if value is None or (isinstance(value, float) and pd.isna(value)):
        return default
    return str(value)


def safe_u32(value: Any) -> int:
    """Coerce to int and reinterpret as an unsigned 32-bit word."""
    return safe_int(value) & 0xFFFFFFFF


_STEAM3_RE = re.compile(r"^\[?U:1:(\d+)\]?$")


def steam3_to_steam_id64(steam3: str) -> int:
    """
    Convert a Steam3 id ("[U:1:22202]") to a SteamID64.

    Bots and malformed ids map to 0.

    Args:
        steam3: The Steam3 id from the player info table

    Returns:
        The 64-bit Steam ID, or 0
    """
    match = _STEAM3_RE.match(steam3.strip()) if steam3 else None
    if match is None:
        return 0
    return STEAM_ID64_BASE + int(match.group(1))


# \x07 is followed by an RGB hex color, \x08 by RGBA
_COLOR_CODE_RE = re.compile(r"\x07[0-9A-Fa-f]{6}|\x08[0-9A-Fa-f]{8}|[\x01-\x06]")


def strip_color_codes(text: str) -> str:
    """Remove Source chat color control sequences."""
    return _COLOR_CODE_RE.sub("", text)


def configure_logging(config: LoggingConfig) -> None:
    """Configure root logging from a LoggingConfig."""
    level = getattr(logging, str(config.level).upper(), logging.INFO)
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if config.file:
        handlers.append(
            RotatingFileHandler(
                config.file,
                maxBytes=config.file_max_bytes,
                backupCount=config.file_backup_count,
            )
        )
    logging.basicConfig(level=level, format=config.format, handlers=handlers, force=True)


class PerformanceMonitor:
    """
    Context manager for monitoring performance of code blocks.

    Usage:
        with PerformanceMonitor("analysing message log"):
            analyse_message_log(...)
    """

    def __init__(self, operation_name: str, log_level: int = logging.INFO):
        self.operation_name = operation_name
        self.log_level = log_level
        self.start_time: float | None = None

    def __enter__(self):
        self.start_time = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        elapsed = time.perf_counter() - (self.start_time or 0)
        if exc_type is not None:
            logger.error(f"{self.operation_name} failed after {elapsed:.3f}s: {exc_val}")
        else:
            logger.log(self.log_level, f"{self.operation_name} completed in {elapsed:.3f}s")
        return False
