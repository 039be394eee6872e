"""Centralized settings loaded from ``VARTASK_*`` environment variables.

A value already present in the environment always wins over the
built-in default, so a calling script can point the runner at another
base or variables directory without touching the command line.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

ENV_PREFIX = "VARTASK"

PROG_NAME = "vartask"
DEFAULT_VARS_NAME = "default.env"
DEFAULT_LOG_LEVEL = "WARNING"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    base_dir: Path
    vars_dir: Path
    default_vars: str
    """File name offered when no ``-v`` reference is given."""

    log_level: str
    log_file: Path | None


def get_settings() -> Settings:
    """Build :class:`Settings` from the current environment."""
    base_dir = _env_path(_k("BASE_DIR"), Path.cwd())
    vars_dir = _env_path(_k("VARS_DIR"), base_dir / "vars")

    # An explicitly empty default falls back to the program name.
    default_vars = os.getenv(_k("DEFAULT_VARS"), DEFAULT_VARS_NAME).strip() or PROG_NAME

    raw_log_file = os.getenv(_k("LOG_FILE"), "").strip()

    return Settings(
        base_dir=base_dir,
        vars_dir=vars_dir,
        default_vars=default_vars,
        log_level=os.getenv(_k("LOG_LEVEL"), DEFAULT_LOG_LEVEL).strip().upper() or DEFAULT_LOG_LEVEL,
        log_file=Path(raw_log_file).expanduser() if raw_log_file else None,
    )
