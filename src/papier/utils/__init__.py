"""Utility modules for Papier."""

from papier.utils.logger import get_logger

__all__ = ["get_logger"]
