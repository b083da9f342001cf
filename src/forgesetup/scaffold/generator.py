"""Project skeleton generation: folders, ``index.js`` and sample commands.

Folders are created only when missing and existing contents are never
touched.  Generated files are always overwritten.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

import structlog

from forgesetup.cli.output import created, ok
from forgesetup.models import Feature
from forgesetup.scaffold.templates import PREFIX_PING_COMMAND, SLASH_PING_COMMAND, build_index

logger = structlog.get_logger()

PROJECT_FOLDERS: tuple[str, ...] = ("prefix", "events", "functions", "components", "interactions")
INDEX_FILENAME = "index.js"

# (folder, filename, content)
SAMPLE_COMMANDS: tuple[tuple[str, str, str], ...] = (
    ("prefix", "ping.js", PREFIX_PING_COMMAND),
    ("interactions", "ping.js", SLASH_PING_COMMAND),
)


def create_folders(project_dir: Path) -> list[Path]:
    """Create the handler folders that do not exist yet. Returns the new ones."""
    new_dirs: list[Path] = []
    for name in PROJECT_FOLDERS:
        folder = project_dir / name
        if folder.is_dir():
            continue
        folder.mkdir(parents=True)
        created(f"Created folder: {name}")
        logger.info("folder_created", path=str(folder))
        new_dirs.append(folder)
    return new_dirs


def write_index(project_dir: Path, features: Iterable[Feature]) -> Path:
    """Render ``index.js`` for *features* and write it into *project_dir*."""
    index_path = project_dir / INDEX_FILENAME
    index_path.write_text(build_index(features), encoding="utf-8")
    ok(f"`{INDEX_FILENAME}` generated")
    logger.info("file_written", path=str(index_path))
    return index_path


def write_sample_commands(project_dir: Path) -> list[Path]:
    """Write the prefix and slash ``ping`` commands."""
    written: list[Path] = []
    for folder, filename, content in SAMPLE_COMMANDS:
        path = project_dir / folder / filename
        path.write_text(content, encoding="utf-8")
        ok(f"Sample command `{filename}` created in `{folder}/`")
        logger.info("file_written", path=str(path))
        written.append(path)
    return written


def scaffold_project(project_dir: Path, features: Iterable[Feature]) -> list[Path]:
    """Create folders, then the entry point and the sample commands.

    Returns every file written.
    """
    create_folders(project_dir)
    return [write_index(project_dir, features), *write_sample_commands(project_dir)]
