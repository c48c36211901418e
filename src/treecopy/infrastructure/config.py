"""Settings for treecopy, read from the environment with a .env fallback."""

from __future__ import annotations

import os
from pathlib import Path

_QUOTES = ('"', "'")


def _split_assignment(line: str) -> tuple[str, str] | None:
    """Turn ``KEY=value`` into a pair; comments, blanks and junk give None."""
    line = line.strip()
    if not line or line.startswith("#") or "=" not in line:
        return None
    key, _, value = line.partition("=")
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in _QUOTES:
        value = value[1:-1]
    return key.strip(), value


def read_env_file(keys: list[str], env_file: Path | None = None) -> dict[str, str]:
    """Return the non-empty values of ``keys`` found in a .env file.

    The file defaults to ``.env`` in the working directory. Values are not
    exported to ``os.environ``. A missing or unreadable file yields ``{}``.
    """
    path = env_file or Path.cwd() / ".env"
    try:
        lines = path.read_text().splitlines()
    except OSError:
        return {}

    wanted = set(keys)
    pairs = (_split_assignment(line) for line in lines)
    return {key: value for key, value in filter(None, pairs) if key in wanted and value}


def get_setting(key: str, default: str, env_config: dict[str, str] | None = None) -> str:
    """Look up a setting: process environment first, then the .env values."""
    if env_config is None:
        env_config = read_env_file([key])
    return os.environ.get(key) or env_config.get(key, default)


def parse_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


_env_config = read_env_file(["LOG_LEVEL", "TREECOPY_FORCE"])

LOG_LEVEL: str = get_setting("LOG_LEVEL", "INFO", _env_config).upper()

# Default for the CLI's --force flag. Library calls always default to CopyOptions().
DEFAULT_FORCE: bool = parse_bool(get_setting("TREECOPY_FORCE", "false", _env_config))
