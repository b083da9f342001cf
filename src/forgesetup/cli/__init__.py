"""forgesetup CLI: bootstrap a ForgeScript Discord bot project.

Entry point: ``forgesetup`` (or ``python -m forgesetup``)

Subcommands:
    forgesetup             Run the setup wizard in the current directory (default)
    forgesetup init        Same, with options for CI and target directory
    forgesetup check       Verify an already bootstrapped project
    forgesetup features    List optional features and their npm packages
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from forgesetup.models import Feature


def _add_init_arguments(parser: argparse.ArgumentParser, *, with_defaults: bool = True) -> None:
    """Add the wizard options to *parser*.

    The ``init`` subparser is built with ``with_defaults=False`` so that its
    unset options stay out of the namespace and cannot clobber values given
    before the subcommand (``forgesetup --token abc init``).
    """

    def default(value: object) -> object:
        return value if with_defaults else argparse.SUPPRESS

    parser.add_argument(
        "--directory",
        type=Path,
        default=default(None),
        help="Directory to bootstrap (default: current directory)",
    )
    parser.add_argument(
        "--non-interactive",
        action="store_true",
        default=default(False),
        help="Take answers from flags instead of prompts (for CI/CD)",
    )
    parser.add_argument("--token", default=default(None), help="Discord bot token (non-interactive)")
    parser.add_argument("--mongo-uri", default=default(None), help="MongoDB connection URI (non-interactive)")
    parser.add_argument("--prefix", default=default(None), help="Bot command prefix (non-interactive)")
    parser.add_argument(
        "--feature",
        action="append",
        default=default([]),
        choices=[f.value for f in Feature],
        help="Optional feature to install; repeatable (non-interactive)",
    )
    parser.add_argument(
        "--skip-install",
        action="store_true",
        default=default(False),
        help="Skip npm install and only write files",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="forgesetup",
        description="Bootstrap a ForgeScript Discord bot project",
    )
    _add_init_arguments(parser)
    sub = parser.add_subparsers(dest="command")

    # --- forgesetup init ---
    init_parser = sub.add_parser("init", help="Run the setup wizard")
    _add_init_arguments(init_parser, with_defaults=False)

    # --- forgesetup check ---
    check_parser = sub.add_parser("check", help="Verify a bootstrapped project")
    check_parser.add_argument(
        "--directory",
        type=Path,
        default=argparse.SUPPRESS,
        help="Project directory (default: current directory)",
    )

    # --- forgesetup features ---
    sub.add_parser("features", help="List optional features and their packages")

    return parser


def _print_features() -> None:
    from forgesetup.catalog import CORE_PACKAGES, FEATURE_CATALOG
    from forgesetup.cli.output import BOLD, RESET

    print(f"{BOLD}core{RESET}: {' '.join(CORE_PACKAGES)}")
    for feature, packages in FEATURE_CATALOG.items():
        print(f"{BOLD}{feature.value}{RESET} ({feature.label}): {' '.join(packages)}")


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point dispatching to subcommands."""
    args = build_parser().parse_args(argv)

    from pydantic import ValidationError

    from forgesetup.cli.output import err
    from forgesetup.config import Settings
    from forgesetup.logging import setup_logging

    try:
        settings = Settings()
    except ValidationError as e:
        err(f"Invalid FORGESETUP_* settings: {e.error_count()} error(s)")
        for detail in e.errors():
            err(f"{'.'.join(str(p) for p in detail['loc'])}: {detail['msg']}")
        sys.exit(1)
    setup_logging(settings.log_level)

    if args.command == "check":
        from forgesetup.cli.check import main_check

        main_check(args.directory, package_manager=settings.package_manager)
    elif args.command == "features":
        _print_features()
    else:
        # Default: run the wizard
        from forgesetup.cli.setup import run_setup

        run_setup(
            project_dir=args.directory,
            non_interactive=args.non_interactive,
            token=args.token,
            mongo_uri=args.mongo_uri,
            prefix=args.prefix,
            features=args.feature,
            skip_install=args.skip_install,
            settings=settings,
        )


if __name__ == "__main__":
    main()
