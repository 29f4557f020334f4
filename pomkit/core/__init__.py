"""Core module - Configuration."""

from .config import BrowserType, Host, Settings, get_settings

__all__ = ["BrowserType", "Host", "Settings", "get_settings"]
