"""Interactive setup wizard that bootstraps a ForgeScript bot project.

Runs four steps strictly in order and stops at the first failure:
  1. Collect the bot token, MongoDB URI, prefix and optional features
  2. Write ``.env``
  3. ``npm install`` core packages, then the selected feature packages
  4. Create handler folders, ``index.js`` and two sample commands

Nothing is rolled back on failure.  Re-running is safe: every file is
overwritten and folders are only created when missing.
"""

from __future__ import annotations

import getpass
import re
import sys
from collections.abc import Iterable
from pathlib import Path

import structlog
from pydantic import ValidationError

from forgesetup.cli.output import BOLD, BLUE, GREEN, RESET, YELLOW, err, header, info, ok, warn
from forgesetup.config import Settings
from forgesetup.envfile import write_env
from forgesetup.installer import install_dependencies
from forgesetup.models import Answers, Feature, check_env_safe
from forgesetup.scaffold.generator import scaffold_project

logger = structlog.get_logger()

TOTAL_STEPS = 4
FEATURE_MENU: tuple[Feature, ...] = tuple(Feature)

# ---------------------------------------------------------------------------
# Interactive prompt helpers
# ---------------------------------------------------------------------------


def _prompt(label: str, *, secret: bool = False) -> str:
    """Prompt for a free-text value, returned exactly as typed.

    Empty input is a valid answer.  Surrounding spaces are kept, since a
    prefix such as ``"! "`` is meaningful.
    """
    while True:
        value = getpass.getpass(f"  {label}: ") if secret else input(f"  {label}: ")
        try:
            check_env_safe(value)
        except ValueError as e:
            err(f"Invalid value: {e}.")
            continue
        return value


def _parse_feature_selection(raw: str) -> frozenset[Feature] | None:
    """Parse ``"1,3"`` / ``"1 3"`` into features. Returns ``None`` if invalid."""
    tokens = [t for t in re.split(r"[,\s]+", raw.strip()) if t]
    selected: set[Feature] = set()
    for token in tokens:
        if not token.isdigit():
            return None
        idx = int(token)
        if not 1 <= idx <= len(FEATURE_MENU):
            return None
        selected.add(FEATURE_MENU[idx - 1])
    return frozenset(selected)


def _prompt_features() -> frozenset[Feature]:
    """Multi-select menu for the optional features."""
    print(f"  {YELLOW}Select additional features to install:{RESET}")
    for i, feature in enumerate(FEATURE_MENU, 1):
        print(f"    {i}) {GREEN}{feature.label}{RESET}")

    while True:
        raw = input(f"  Choose any of [1-{len(FEATURE_MENU)}], comma separated (Enter for none): ")
        selected = _parse_feature_selection(raw)
        if selected is not None:
            return selected
        err(f"Please enter numbers between 1 and {len(FEATURE_MENU)}.")


def _collect_answers() -> Answers:
    """Ask the four setup questions in order."""
    token = _prompt("Enter your Discord bot token", secret=True)
    mongo_uri = _prompt("Enter your MongoDB connection URI")
    prefix = _prompt("Enter your bot prefix")
    features = _prompt_features()
    return Answers(token=token, mongo_uri=mongo_uri, prefix=prefix, features=features)


def _answers_from_flags(
    token: str | None,
    mongo_uri: str | None,
    prefix: str | None,
    features: Iterable[str],
) -> Answers:
    """Build answers from CLI flags. Raises ``ValidationError`` on bad input."""
    return Answers(
        token=token or "",
        mongo_uri=mongo_uri or "",
        prefix=prefix or "",
        features=frozenset(features),
    )


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------


def run_setup(
    *,
    project_dir: Path | None = None,
    non_interactive: bool = False,
    token: str | None = None,
    mongo_uri: str | None = None,
    prefix: str | None = None,
    features: Iterable[str] = (),
    skip_install: bool = False,
    settings: Settings | None = None,
) -> None:
    """Entry point called from CLI. Exits non-zero on the first failed step."""
    project_dir = project_dir or Path.cwd()
    settings = settings or Settings()

    print()
    print(f"  {BLUE}{BOLD}\U0001f527 Welcome to the Discord Bot Setup!{RESET}")

    # ── Step 1: Answers ───────────────────────────────────────────────
    header("Bot details", step=1, total=TOTAL_STEPS)
    if non_interactive:
        try:
            answers = _answers_from_flags(token, mongo_uri, prefix, features)
        except ValidationError as e:
            err(f"Invalid setup options: {e.error_count()} error(s)")
            for detail in e.errors():
                err(f"{'.'.join(str(p) for p in detail['loc'])}: {detail['msg']}")
            sys.exit(1)
    else:
        try:
            answers = _collect_answers()
        except EOFError:
            print()
            err("Input closed. Setup aborted, no files written.")
            logger.warning("setup_aborted", reason="eof")
            sys.exit(1)
        except KeyboardInterrupt:
            print()
            err("Setup cancelled, no files written.")
            logger.warning("setup_aborted", reason="interrupt")
            sys.exit(130)

    logger.info(
        "answers_collected",
        features=sorted(answers.features),
        token=answers.token,
        mongo_uri=answers.mongo_uri,
    )

    # ── Step 2: .env ──────────────────────────────────────────────────
    header("Secrets file", step=2, total=TOTAL_STEPS)
    try:
        write_env(project_dir, answers)
    except OSError as e:
        err(f"Could not write .env: {e}")
        logger.error("env_write_failed", error=str(e))
        sys.exit(1)
    ok("`.env` file created")

    # ── Step 3: Dependencies ──────────────────────────────────────────
    header("Dependencies", step=3, total=TOTAL_STEPS)
    if skip_install:
        warn("Skipping dependency install (--skip-install)")
    elif not install_dependencies(
        answers,
        project_dir,
        package_manager=settings.package_manager,
        timeout=settings.install_timeout,
    ):
        err("Dependency installation failed, remaining steps skipped")
        sys.exit(1)

    # ── Step 4: Project files ─────────────────────────────────────────
    header("Project files", step=4, total=TOTAL_STEPS)
    try:
        scaffold_project(project_dir, answers.features)
    except OSError as e:
        err(f"Could not generate project files: {e}")
        logger.error("scaffold_failed", error=str(e))
        sys.exit(1)

    # ── Done ──────────────────────────────────────────────────────────
    print()
    print(f"  {GREEN}{BOLD}\U0001f389 Setup complete!{RESET} Run {BLUE}{BOLD}`node index.js`{RESET} to start your bot.")
    info("Run 'forgesetup check' to verify the project at any time.")
    print()
