"""``.env`` secrets file I/O for the generated bot."""

from __future__ import annotations

from pathlib import Path

import structlog

from forgesetup.models import Answers

logger = structlog.get_logger()

ENV_FILENAME = ".env"
ENV_KEYS: tuple[str, ...] = ("TOKEN", "MONGO_URI", "PREFIX")


def render_env(answers: Answers) -> str:
    """Render the three ``KEY="VALUE"`` lines read by the generated ``index.js``."""
    values = {
        "TOKEN": answers.token,
        "MONGO_URI": answers.mongo_uri,
        "PREFIX": answers.prefix,
    }
    lines = [f'{key}="{values[key]}"' for key in ENV_KEYS]
    return "\n".join(lines) + "\n"


def write_env(project_dir: Path, answers: Answers) -> Path:
    """Write ``.env`` into *project_dir*, replacing any existing file."""
    env_path = project_dir / ENV_FILENAME
    env_path.write_text(render_env(answers), encoding="utf-8")
    logger.info("env_written", path=str(env_path), keys=list(ENV_KEYS))
    return env_path


def load_env(env_path: Path) -> dict[str, str]:
    """Load an existing .env file into a dict."""
    env: dict[str, str] = {}
    if not env_path.is_file():
        return env
    for line in env_path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, _, value = line.partition("=")
        # Strip optional quotes
        value = value.strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in ('"', "'"):
            value = value[1:-1]
        env[key.strip()] = value
    return env
