"""Dependency installation through the package manager.

Both install calls share one mechanism: registry names and git URLs are
passed as plain argv entries and the package manager resolves either form.
Output is not captured; the child writes straight to the operator's terminal.
"""

from __future__ import annotations

import shutil
import subprocess
from collections.abc import Sequence
from pathlib import Path

import structlog

from forgesetup.catalog import CORE_PACKAGES, resolve_packages
from forgesetup.cli.output import err, info, ok
from forgesetup.models import Answers

logger = structlog.get_logger()

DEFAULT_PACKAGE_MANAGER = "npm"
TIMEOUT_INSTALL: int = 600


def build_install_command(packages: Sequence[str], *, package_manager: str = DEFAULT_PACKAGE_MANAGER) -> list[str]:
    """Return the argv for installing *packages*."""
    return [package_manager, "install", *packages]


def run_install(
    packages: Sequence[str],
    project_dir: Path,
    *,
    package_manager: str = DEFAULT_PACKAGE_MANAGER,
    timeout: int = TIMEOUT_INSTALL,
) -> bool:
    """Run one ``<package_manager> install`` call.

    Returns ``True`` on success, ``False`` on a missing binary, a non-zero
    exit or a timeout.
    """
    executable = shutil.which(package_manager)
    if not executable:
        err(f"{package_manager} not found on PATH")
        logger.error("install_failed", reason="missing_binary", package_manager=package_manager)
        return False

    # Resolved path, so Windows launches npm.cmd without a shell
    cmd = build_install_command(packages, package_manager=executable)
    logger.info("install_started", cmd=cmd)
    try:
        result = subprocess.run(cmd, cwd=project_dir, timeout=timeout, check=False)
    except FileNotFoundError:
        err(f"{package_manager} binary not found")
        logger.error("install_failed", reason="missing_binary", package_manager=package_manager)
        return False
    except subprocess.TimeoutExpired:
        err(f"{package_manager} install timed out ({timeout}s)")
        logger.error("install_failed", reason="timeout", timeout=timeout)
        return False

    if result.returncode != 0:
        err(f"{package_manager} install exited with status {result.returncode}")
        logger.error("install_failed", reason="exit_status", returncode=result.returncode)
        return False
    logger.info("install_finished", packages=list(packages))
    return True


def install_dependencies(
    answers: Answers,
    project_dir: Path,
    *,
    package_manager: str = DEFAULT_PACKAGE_MANAGER,
    timeout: int = TIMEOUT_INSTALL,
) -> bool:
    """Install core packages, then the packages for any selected features.

    Stops at the first failed call.
    """
    info("Installing core dependencies...")
    if not run_install(CORE_PACKAGES, project_dir, package_manager=package_manager, timeout=timeout):
        return False
    ok("Core dependencies installed")

    optional = resolve_packages(answers.features)
    if not optional:
        return True

    info("Installing selected optional dependencies...")
    if not run_install(optional, project_dir, package_manager=package_manager, timeout=timeout):
        return False
    ok(f"Optional dependencies installed ({len(optional)} packages)")
    return True
