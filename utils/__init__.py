"""Utility modules for tTime.

This package provides duration formatting and logging setup.

Modules:
    time_utils: Duration splitting and formatting
    logger: Logging configuration
"""
from utils.time_utils import split_duration, format_duration

__all__ = ["split_duration", "format_duration"]
