"""Application configuration and env loading."""

from __future__ import annotations

import os
from collections.abc import Sequence
from pathlib import Path

DEFAULT_ENV_FILES: tuple[str, ...] = (
    "appdata/config/.env",
    "appdata/config/.env.local",
    ".env",
    ".env.local",
)

_QUOTES = frozenset({"'", '"'})


def parse_env_lines(text: str) -> dict[str, str]:
    """Parse ``KEY=VALUE`` lines, skipping comments and malformed entries.

    An ``export`` prefix is accepted and one layer of matching quotes is stripped.
    """
    values: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if line.startswith("export "):
            line = line[len("export ") :].lstrip()
        key, sep, value = line.partition("=")
        key = key.strip()
        if line.startswith("#") or not sep or not key:
            continue
        value = value.strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in _QUOTES:
            value = value[1:-1]
        values[key] = value
    return values


def load_env_file(path: str = ".env", *, override_existing: bool = True) -> dict[str, str]:
    """Apply an env file to the process environment and return what was set."""
    env_path = _resolve_env_path(path)
    if not env_path.is_file():
        return {}
    applied = {
        key: value
        for key, value in parse_env_lines(env_path.read_text(encoding="utf-8")).items()
        if override_existing or key not in os.environ
    }
    os.environ.update(applied)
    return applied


def load_default_env_files(
    *, override_existing: bool = True, paths: Sequence[str] | None = None
) -> None:
    """Load the env files in order; later files win when overriding."""
    for path in tuple(paths) if paths is not None else DEFAULT_ENV_FILES:
        load_env_file(path, override_existing=override_existing)


def env_flag(name: str, default: bool = False) -> bool:
    """Read a boolean env flag ("1", "true", "yes", "on")."""
    raw = os.getenv(name, "").strip().lower()
    if not raw:
        return default
    return raw in {"1", "true", "yes", "on"}


def _resolve_env_path(path: str) -> Path:
    """Resolve an env path from the cwd, falling back to the project root."""
    candidate = Path(path)
    if candidate.exists() or candidate.is_absolute():
        return candidate
    return Path(__file__).resolve().parents[2] / path
