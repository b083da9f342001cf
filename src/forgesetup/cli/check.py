"""Post-setup diagnostics for ``forgesetup check``.

Verifies that a bootstrapped bot project has everything ``node index.js``
needs: the tooling, the secrets file, the handler folders, the generated
sources and the installed framework.
"""

from __future__ import annotations

import shutil
import sys
from pathlib import Path

from forgesetup.cli.output import BOLD, GREEN, RED, RESET, YELLOW, header, info
from forgesetup.cli.output import err as _err_print
from forgesetup.cli.output import ok as _ok_print
from forgesetup.cli.output import warn as _warn_print
from forgesetup.envfile import ENV_FILENAME, ENV_KEYS, load_env
from forgesetup.scaffold.generator import INDEX_FILENAME, PROJECT_FOLDERS, SAMPLE_COMMANDS


class CheckReport:
    """Collects check results for a summary at the end."""

    def __init__(self) -> None:
        self.passed: int = 0
        self.warnings: int = 0
        self.errors: int = 0

    def ok(self, msg: str) -> None:
        _ok_print(msg)
        self.passed += 1

    def warn(self, msg: str) -> None:
        _warn_print(msg)
        self.warnings += 1

    def err(self, msg: str) -> None:
        _err_print(msg)
        self.errors += 1


# ---------------------------------------------------------------------------
# Individual checks
# ---------------------------------------------------------------------------


def _check_tools(report: CheckReport, package_manager: str = "npm") -> None:
    header("Tooling")
    for cmd in ("node", package_manager):
        if shutil.which(cmd):
            report.ok(f"{cmd} found")
        else:
            report.err(f"{cmd} not found on PATH")


def _check_env(report: CheckReport, project_dir: Path) -> None:
    """Check that ``.env`` exists and defines every key index.js reads."""
    header("Secrets")
    env_path = project_dir / ENV_FILENAME
    if not env_path.is_file():
        report.err(f"{ENV_FILENAME} not found at {env_path}")
        info("Run 'forgesetup' to create one")
        return

    env = load_env(env_path)
    for key in ENV_KEYS:
        if key not in env:
            report.err(f"{key} missing from {ENV_FILENAME}")
        elif not env[key]:
            report.warn(f"{key} is empty")
        else:
            report.ok(f"{key} set")


def _check_layout(report: CheckReport, project_dir: Path) -> None:
    header("Project layout")
    for name in PROJECT_FOLDERS:
        if (project_dir / name).is_dir():
            report.ok(f"{name}/")
        else:
            report.err(f"{name}/ missing")

    files = [INDEX_FILENAME] + [f"{folder}/{filename}" for folder, filename, _ in SAMPLE_COMMANDS]
    for rel in files:
        if (project_dir / rel).is_file():
            report.ok(rel)
        else:
            report.err(f"{rel} missing")


def _check_node_modules(report: CheckReport, project_dir: Path) -> None:
    header("Dependencies")
    framework = project_dir / "node_modules" / "@tryforge" / "forgescript"
    if framework.is_dir():
        report.ok("@tryforge/forgescript installed")
    else:
        report.warn("@tryforge/forgescript not installed, run 'npm install'")


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------


def run_check(project_dir: Path | None = None, *, package_manager: str = "npm") -> bool:
    """Run every check and print a summary. Returns ``True`` if no errors."""
    project_dir = project_dir or Path.cwd()
    report = CheckReport()

    print()
    print(f"  {BOLD}\U0001f50d Bot project check{RESET} ({project_dir})")

    _check_tools(report, package_manager)
    _check_env(report, project_dir)
    _check_layout(report, project_dir)
    _check_node_modules(report, project_dir)

    print()
    summary = (
        f"{GREEN}{report.passed} passed{RESET}, "
        f"{YELLOW}{report.warnings} warnings{RESET}, "
        f"{RED}{report.errors} errors{RESET}"
    )
    print(f"  {BOLD}Summary:{RESET} {summary}")
    print()
    return report.errors == 0


def main_check(project_dir: Path | None = None, *, package_manager: str = "npm") -> None:
    sys.exit(0 if run_check(project_dir, package_manager=package_manager) else 1)
