"""Command line entry point for running page-object suites in parallel.

Usage:
    pomkit local [--processes N] [--tag deep] [chrome|firefox|edge] [-- pytest args]
    pomkit grid [options] BROWSER [VERSION] [PLATFORM] [-- pytest args]
    pomkit sauce [options] BROWSER VERSION PLATFORM [-- pytest args]

Options go before the positional arguments; everything after the
positionals is handed to pytest.
"""

import argparse
import os
import sys
from typing import Sequence

import pytest

from pomkit.core.config import BrowserType, Host, Settings, get_settings


def build_environment(
    host: Host,
    browser_name: str | None = None,
    browser_version: str | None = None,
    platform_name: str | None = None,
) -> dict[str, str]:
    """Build the environment overrides for a run.

    Args:
        host: Where to start browsers
        browser_name: Browser type
        browser_version: Browser version (remote only)
        platform_name: Platform name (remote only)

    Returns:
        Variables to export before pytest starts
    """
    env = {"SELENIUM_HOST": host.value}
    if browser_name:
        env["BROWSER_NAME"] = browser_name
    if browser_version:
        env["BROWSER_VERSION"] = browser_version
    if platform_name:
        env["PLATFORM_NAME"] = platform_name
    return env


def build_pytest_args(
    settings: Settings,
    processes: int | None = None,
    tag: str | None = None,
    extra: Sequence[str] = (),
) -> list[str]:
    """Build the pytest command line.

    Args:
        settings: Resolved settings; CI mode adds the JUnit XML results file
        processes: Number of parallel workers (pytest-xdist)
        tag: Marker expression selecting tests
        extra: Additional pytest arguments

    Returns:
        Argument list for ``pytest.main``
    """
    args: list[str] = []
    if processes:
        args += ["-n", str(processes)]
    if tag:
        args += ["-m", tag]
    if settings.ci:
        args.append(f"--junitxml={settings.results_file}")

    extra = list(extra)
    if extra and extra[0] == "--":
        extra = extra[1:]
    args += extra
    return args


def _parser() -> argparse.ArgumentParser:
    browsers = [b.value for b in BrowserType]

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--processes", "-n", type=int, help="Number of parallel workers")
    common.add_argument("--tag", "-m", help="Only run tests matching this marker expression")

    parser = argparse.ArgumentParser(prog="pomkit", description="Run page-object test suites")
    commands = parser.add_subparsers(dest="command", required=True)

    local = commands.add_parser("local", parents=[common], help="Run tests on local browsers")
    local.add_argument("browser_name", nargs="?", choices=browsers)

    grid = commands.add_parser("grid", parents=[common], help="Run tests on a Selenium Grid")
    grid.add_argument("browser_name", choices=browsers)
    grid.add_argument("browser_version", nargs="?")
    grid.add_argument("platform_name", nargs="?")

    sauce = commands.add_parser("sauce", parents=[common], help="Run tests on Sauce Labs")
    sauce.add_argument("browser_name", choices=browsers)
    sauce.add_argument("browser_version")
    sauce.add_argument("platform_name")

    for command in (local, grid, sauce):
        command.add_argument("pytest_args", nargs=argparse.REMAINDER, help="Arguments passed to pytest")

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = _parser().parse_args(argv)

    host = {"local": Host.LOCAL, "grid": Host.GRID, "sauce": Host.SAUCELABS}[args.command]
    env = build_environment(
        host,
        args.browser_name,
        getattr(args, "browser_version", None),
        getattr(args, "platform_name", None),
    )
    # Workers inherit the parent environment, so export before pytest starts
    os.environ.update(env)
    get_settings.cache_clear()
    settings = get_settings()

    return int(
        pytest.main(build_pytest_args(settings, args.processes, args.tag, args.pytest_args))
    )


if __name__ == "__main__":
    sys.exit(main())
