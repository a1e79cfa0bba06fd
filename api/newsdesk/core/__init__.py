"""Core utilities package."""

from .logging import get_logger, log_event, setup_logging

__all__ = ["setup_logging", "get_logger", "log_event"]
