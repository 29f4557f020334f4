"""pytest plugin: per-test browser sessions for page-object suites.

Fixtures:

* ``settings`` - the process-wide ``Settings`` (one per worker).
* ``driver_factory`` - callable creating a WebDriver; override it in a
  conftest to swap in another factory.
* ``lifecycle`` - a ``SessionLifecycle`` acquired before the test and
  released after it, with a screenshot when the test failed.
* ``driver`` - the live WebDriver of ``lifecycle``.
"""

import pytest

from pomkit.automation.browser import BrowserFactory
from pomkit.core.config import Settings, get_settings
from pomkit.lifecycle import DriverFactory, SessionLifecycle
from pomkit.monitoring.logger import get_logger, setup_logging

logger = get_logger(__name__)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:
    """Register markers, set up logging and CI result output."""
    config.addinivalue_line("markers", "shallow: Fast smoke checks")
    config.addinivalue_line("markers", "deep: Slower end-to-end checks")

    settings = get_settings()
    setup_logging(settings)

    # junitxml reads xmlpath in its own pytest_configure, which runs after this one
    if settings.ci and not config.option.xmlpath:
        settings.results_dir.mkdir(parents=True, exist_ok=True)
        config.option.xmlpath = str(settings.results_file)
        logger.info(f"CI mode | writing results to {settings.results_file}")


@pytest.hookimpl(wrapper=True)
def pytest_runtest_makereport(item: pytest.Item, call: pytest.CallInfo):
    """Keep each phase's report on the item for fixture teardown."""
    report = yield
    setattr(item, f"rep_{report.when}", report)
    return report


def _test_failed(node: pytest.Item) -> bool:
    for when in ("setup", "call"):
        report = getattr(node, f"rep_{when}", None)
        if report is not None and report.failed:
            return True
    return False


@pytest.fixture(scope="session")
def settings() -> Settings:
    return get_settings()


@pytest.fixture(scope="session")
def driver_factory() -> DriverFactory:
    return BrowserFactory.create


@pytest.fixture
def lifecycle(request: pytest.FixtureRequest, settings: Settings, driver_factory: DriverFactory):
    """Browser session for one test, released on every exit path."""
    session = SessionLifecycle(settings, request.node.nodeid, factory=driver_factory)
    session.acquire()
    yield session
    session.release(failed=_test_failed(request.node))


@pytest.fixture
def driver(lifecycle: SessionLifecycle):
    return lifecycle.driver
