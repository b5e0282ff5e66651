"""Shared utilities."""

from .io import read_yaml_file
from .logging import enable_console_logging, format_summary, get_logger
from .registry import Registry

__all__ = ["Registry", "enable_console_logging", "format_summary", "get_logger", "read_yaml_file"]
