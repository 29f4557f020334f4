"""Centralized logging configuration using Loguru."""

import sys
from typing import Any

from loguru import logger

from pomkit.core.config import Settings

_configured = False


def setup_logging(settings: Settings) -> None:
    """Configure Loguru logging for a test process.

    Safe to call more than once; only the first call installs sinks.
    """
    global _configured
    if _configured:
        return

    # Remove default handler
    logger.remove()

    console_format = (
        "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
        "<level>{message}</level>"
    )

    file_format = (
        "{time:YYYY-MM-DD HH:mm:ss.SSS} | "
        "{level: <8} | "
        "{name}:{function}:{line} | "
        "{message} | "
        "{extra}"
    )

    logger.add(
        sys.stderr,
        format=console_format,
        level=settings.log_level,
        colorize=True,
        backtrace=True,
        diagnose=False,
    )

    # One file per worker so parallel processes never share a sink
    settings.logs_dir.mkdir(parents=True, exist_ok=True)
    worker = settings.worker_id or "main"
    logger.add(
        settings.logs_dir / f"pomkit_{worker}_{{time:YYYY-MM-DD}}.log",
        format=file_format,
        level="DEBUG",
        rotation="00:00",
        retention="7 days",
        backtrace=True,
        diagnose=True,
    )

    _configured = True
    logger.info(
        f"Logging initialized | level={settings.log_level} | worker={worker} | "
        f"host={settings.selenium_host.value} | browser={settings.browser_name.value}"
    )


def get_logger(name: str) -> Any:
    """Get a logger instance with the given name.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Configured logger instance
    """
    return logger.bind(name=name)


def log_session_event(test_id: str, action: str, session_id: str | None = None, **extra: Any) -> None:
    """Log a session lifecycle event.

    Args:
        test_id: Fully qualified test name
        action: What happened (acquired, released, screenshot, ...)
        session_id: WebDriver session id, when known
        **extra: Additional context
    """
    logger.bind(test_id=test_id, session_id=session_id, **extra).info(
        f"Session {action} | test={test_id} | session_id={session_id}"
    )
