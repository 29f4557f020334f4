"""Monitoring module - Logging."""

from .logger import get_logger, log_session_event, setup_logging

__all__ = ["get_logger", "log_session_event", "setup_logging"]
