# Author: Green Mountain Systems AI Inc.
# Donated to IAB Tech Lab

"""Shared utilities."""

from .logger import StructuredLogger, get_logger
from .params import drop_none

__all__ = ["StructuredLogger", "drop_none", "get_logger"]
