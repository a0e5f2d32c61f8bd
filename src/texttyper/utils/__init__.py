"""Utility modules for texttyper.

Provides:
- logger: get_logger for namespaced logging
"""

from texttyper.utils.logger import get_logger

__all__ = ["get_logger"]
