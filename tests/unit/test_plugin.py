"""Tests for the pytest plugin, run in an isolated pytester session."""

import json

import pytest

from pomkit.core.config import get_settings

FAKE_FACTORY_CONFTEST = """
import json
from pathlib import Path
from unittest.mock import MagicMock

import pytest

EVENTS = Path(__file__).parent / "events.json"


def _record(event):
    events = json.loads(EVENTS.read_text()) if EVENTS.exists() else []
    events.append(event)
    EVENTS.write_text(json.dumps(events))


@pytest.fixture(scope="session")
def driver_factory():
    def create(settings, test_name=None):
        _record(["acquire", test_name])
        driver = MagicMock(session_id=test_name)

        def save_screenshot(path):
            _record(["screenshot", test_name])
            Path(path).write_bytes(b"png")
            return True

        driver.save_screenshot.side_effect = save_screenshot
        driver.quit.side_effect = lambda: _record(["release", test_name])
        return driver

    return create
"""


@pytest.fixture
def suite(pytester, monkeypatch):
    """pytester project with a fake driver factory."""
    for name in ("CI", "TEST_ENV_NUMBER", "PYTEST_XDIST_WORKER"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("SCREENSHOTS_DIR", str(pytester.path / "shots"))
    monkeypatch.setenv("LOGS_DIR", str(pytester.path / "logs"))
    pytester.makeconftest(FAKE_FACTORY_CONFTEST)
    # Settings are cached per process; let the inner session resolve its own
    get_settings.cache_clear()
    yield pytester
    get_settings.cache_clear()


def _events(pytester):
    return json.loads((pytester.path / "events.json").read_text())


@pytest.mark.unit
class TestLifecycleFixture:
    """Tests for per-test session handling through fixtures."""

    def test_passing_and_failing_tests_release_every_session(self, suite):
        suite.makepyfile(
            test_sample="""
            def test_passes(driver):
                assert driver.session_id.endswith("test_passes")

            def test_fails(driver):
                raise AssertionError("banner missing")
            """
        )

        result = suite.runpytest("-p", "pomkit.plugin")

        result.assert_outcomes(passed=1, failed=1)
        events = _events(suite)
        acquired = [e for e in events if e[0] == "acquire"]
        released = [e for e in events if e[0] == "release"]
        assert len(acquired) == len(released) == 2

    def test_screenshot_only_for_failures_and_before_release(self, suite):
        suite.makepyfile(
            test_sample="""
            def test_passes(driver):
                pass

            def test_fails(driver):
                assert False
            """
        )

        suite.runpytest("-p", "pomkit.plugin")

        events = _events(suite)
        assert [e[0] for e in events if e[1].endswith("test_fails")] == [
            "acquire",
            "screenshot",
            "release",
        ]
        assert "screenshot" not in [e[0] for e in events if e[1].endswith("test_passes")]
        assert len(list((suite.path / "shots").glob("test_sample.py_test_fails-*.png"))) == 1

    def test_markers_registered(self, suite):
        suite.makepyfile(
            test_sample="""
            import pytest

            @pytest.mark.deep
            def test_deep(driver):
                pass
            """
        )

        result = suite.runpytest("-p", "pomkit.plugin", "--strict-markers", "-m", "deep")

        result.assert_outcomes(passed=1)


@pytest.mark.unit
class TestCiResults:
    """Tests for JUnit XML output in CI mode."""

    def test_ci_writes_worker_results_file(self, suite, monkeypatch):
        monkeypatch.setenv("CI", "true")
        monkeypatch.setenv("TEST_ENV_NUMBER", "2")
        monkeypatch.setenv("RESULTS_DIR", str(suite.path / "results"))
        suite.makepyfile(test_sample="def test_ok(driver):\n    pass\n")

        result = suite.runpytest("-p", "pomkit.plugin")

        result.assert_outcomes(passed=1)
        assert (suite.path / "results" / "result2.xml").exists()
