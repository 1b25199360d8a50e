"""
Shared utilities module

This module provides common utilities used across the entire application.
"""

from .logger import ColoredFormatter, JSONFormatter, configure_logging, mask_secret
from .network import get_local_ip

__all__ = [
    "ColoredFormatter",
    "JSONFormatter",
    "configure_logging",
    "mask_secret",
    "get_local_ip",
]
