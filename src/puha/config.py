"""Configuration loading from environment variables and puha.toml."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib
from pathlib import Path

from puha.errors import ConfigError

_DEFAULT_FILE = Path("space.json")
_CONFIG_FILENAME = "puha.toml"


@dataclass
class PuhaConfig:
    """Top-level puha configuration."""

    file: Path = _DEFAULT_FILE
    log_level: str = "WARNING"
    indent: int = 2


def _read_toml(path: Path) -> dict:
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"cannot load {path}: {e}") from e


def load_config(config_path: Path | None = None) -> PuhaConfig:
    """Load configuration from environment variables and optional puha.toml.

    Priority: environment variables > puha.toml > defaults.
    """
    file_data: dict = {}
    if config_path and config_path.exists():
        file_data = _read_toml(config_path)
    else:
        # Search current dir and ~/.puha/
        for candidate in [Path.cwd() / _CONFIG_FILENAME, Path.home() / ".puha" / _CONFIG_FILENAME]:
            if candidate.exists():
                file_data = _read_toml(candidate)
                break

    indent = os.getenv("PUHA_INDENT", file_data.get("indent", 2))
    try:
        indent = int(indent)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"indent must be an integer, got {indent!r}") from e

    return PuhaConfig(
        file=Path(os.getenv("PUHA_FILE", file_data.get("file", str(_DEFAULT_FILE)))).expanduser(),
        log_level=os.getenv("PUHA_LOG_LEVEL", file_data.get("log_level", "WARNING")),
        indent=indent,
    )
