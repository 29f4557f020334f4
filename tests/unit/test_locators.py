"""Tests for element locators."""

import dataclasses

import pytest
from selenium.webdriver.common.by import By

from pomkit.automation.locators import Locator


@pytest.mark.unit
class TestLocator:
    """Tests for Locator."""

    def test_constructors_pick_strategy(self):
        """Test each named constructor maps to its By strategy."""
        assert Locator.id("username").as_tuple() == (By.ID, "username")
        assert Locator.css(".flash").as_tuple() == (By.CSS_SELECTOR, ".flash")
        assert Locator.xpath("//h3").as_tuple() == (By.XPATH, "//h3")
        assert Locator.name("q").as_tuple() == (By.NAME, "q")
        assert Locator.link_text("Home").as_tuple() == (By.LINK_TEXT, "Home")

    def test_unpacks_like_a_tuple(self):
        """Test locator can be splatted into find_element."""
        by, value = Locator.id("password")
        assert (by, value) == (By.ID, "password")

    def test_immutable(self):
        """Test locators cannot be changed after definition."""
        locator = Locator.id("username")
        with pytest.raises(dataclasses.FrozenInstanceError):
            locator.value = "other"

    def test_description_ignored_in_equality(self):
        """Test two locators for the same element are equal."""
        assert Locator.id("login", "Login form") == Locator.id("login")

    def test_from_dict(self):
        """Test building a locator from config data."""
        locator = Locator.from_dict({"type": "xpath", "value": "//form"})
        assert locator == Locator.xpath("//form")

    def test_from_dict_defaults_to_css(self):
        """Test css is the default strategy."""
        assert Locator.from_dict({"value": "#login"}).by == By.CSS_SELECTOR

    def test_from_dict_unknown_type(self):
        """Test unknown strategy names are rejected."""
        with pytest.raises(ValueError, match="Unknown locator type"):
            Locator.from_dict({"type": "shadow", "value": "x"})

    def test_str(self):
        assert str(Locator.id("finish")) == "id=finish"
