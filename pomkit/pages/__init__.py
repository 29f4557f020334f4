"""Page Object Model classes."""

from .base import BasePage, resolve_url
from .dynamic_loading_page import DynamicLoadingPage
from .iframe_page import IFramePage
from .login_page import LoginPage

__all__ = ["BasePage", "DynamicLoadingPage", "IFramePage", "LoginPage", "resolve_url"]
