"""Automation module - Selenium browser creation, locators and actions."""

from .actions import Actions
from .browser import BrowserFactory
from .locators import Locator

__all__ = ["Actions", "BrowserFactory", "Locator"]
