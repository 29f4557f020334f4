"""Root conftest: command line switches shared by all test layers."""

import pytest


def pytest_addoption(parser: pytest.Parser) -> None:
    parser.addoption(
        "--acceptance",
        action="store_true",
        default=False,
        help="Run browser acceptance tests against the demo application",
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip acceptance tests unless --acceptance was given."""
    if config.getoption("--acceptance"):
        return
    skip = pytest.mark.skip(reason="needs --acceptance and a browser")
    for item in items:
        if "acceptance" in item.keywords:
            item.add_marker(skip)
