"""Terminal output helpers for the setup wizard and ``check``.

Colors are dropped automatically when stdout is not a TTY, so piped output
and captured test output stay plain.
"""

from __future__ import annotations

import sys

SUPPORTS_COLOR = hasattr(sys.stdout, "isatty") and sys.stdout.isatty()

GREEN = "\033[92m" if SUPPORTS_COLOR else ""
YELLOW = "\033[93m" if SUPPORTS_COLOR else ""
RED = "\033[91m" if SUPPORTS_COLOR else ""
BLUE = "\033[94m" if SUPPORTS_COLOR else ""
MAGENTA = "\033[95m" if SUPPORTS_COLOR else ""
CYAN = "\033[96m" if SUPPORTS_COLOR else ""
BOLD = "\033[1m" if SUPPORTS_COLOR else ""
DIM = "\033[2m" if SUPPORTS_COLOR else ""
RESET = "\033[0m" if SUPPORTS_COLOR else ""


def ok(msg: str) -> None:
    """Print a success line with a green checkmark."""
    print(f"  {GREEN}✓{RESET} {msg}")


def warn(msg: str) -> None:
    print(f"  {YELLOW}⚠{RESET} {msg}")


def err(msg: str) -> None:
    print(f"  {RED}✗{RESET} {msg}")


def info(msg: str) -> None:
    print(f"  {CYAN}ℹ{RESET} {msg}")


def created(msg: str) -> None:
    """Print a line for a newly created folder."""
    print(f"  {BLUE}\U0001f4c1{RESET} {msg}")


def header(title: str, *, step: int | None = None, total: int | None = None) -> None:
    """Print a section header, optionally numbered as ``Step n/total``."""
    if step is not None and total is not None:
        title = f"Step {step}/{total}: {title}"
    width = 60
    print()
    print(f"  {BOLD}{MAGENTA}{'─' * width}{RESET}")
    print(f"  {BOLD}{title}{RESET}")
    print(f"  {BOLD}{MAGENTA}{'─' * width}{RESET}")
    print()
