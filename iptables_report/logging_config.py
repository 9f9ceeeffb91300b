"""
Logging configuration for iptables denial reporting.

All package loggers live under the ``iptables_report`` namespace. Output
goes to stderr so that reports written to stdout stay machine-readable.

Usage:
    from iptables_report.logging_config import get_logger

    logger = get_logger(__name__)
    logger.debug("Skipped %d lines", skipped)
"""

import logging
import sys
from typing import Dict, Optional, TextIO

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
SIMPLE_FORMAT = "%(message)s"

NAMESPACE = "iptables_report"

_loggers: Dict[str, logging.Logger] = {}
_configured: bool = False


def configure_logging(
    level: int = logging.WARNING,
    format_string: Optional[str] = None,
    stream: Optional[TextIO] = None,
    simple_mode: bool = True,
) -> None:
    """
    Configure the package logger.

    Args:
        level: Logging level (default: WARNING).
        format_string: Custom format string. If None, uses SIMPLE_FORMAT
            or DEFAULT_FORMAT based on simple_mode.
        stream: Output stream (default: sys.stderr).
        simple_mode: If True, log the bare message without timestamps.
    """
    global _configured

    if format_string is None:
        format_string = SIMPLE_FORMAT if simple_mode else DEFAULT_FORMAT

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(format_string))

    root_logger = logging.getLogger(NAMESPACE)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)
    root_logger.propagate = False

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the given module name.

    Configures the package logger with defaults on first use.
    """
    if not _configured:
        configure_logging()

    if name not in _loggers:
        _loggers[name] = logging.getLogger(name)

    return _loggers[name]


def set_level(level: int) -> None:
    """Set the logging level for all iptables_report loggers."""
    logging.getLogger(NAMESPACE).setLevel(level)


def enable_debug() -> None:
    """Enable debug-level logging."""
    set_level(logging.DEBUG)
