"""Application package for the Company Z HR records system."""

from .core import get_logger, get_settings

__all__ = ["get_logger", "get_settings"]
