"""User configuration in ~/.ulidgen/config.toml."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import toml  # type: ignore[import-untyped]

from ulidgen.core.generator import REGRESSION_POLICIES

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "ULIDGEN_CONFIG"
SECTION = "generate"


def default_config_path() -> Path:
    """Config file location, honouring ``ULIDGEN_CONFIG``."""
    override = os.environ.get(CONFIG_ENV_VAR, "").strip()
    if override:
        return Path(override).expanduser()
    return Path.home() / ".ulidgen" / "config.toml"


@dataclass(slots=True)
class UlidgenConfig:
    """Defaults for the ``ulidgen`` command.

    ``sources`` maps each setting to where its value came from: ``"default"``
    or the config file path.
    """

    lowercase: bool = False
    count: int = 1
    on_regression: str = "clamp"
    path: Path | None = None
    sources: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "lowercase": self.lowercase,
            "count": self.count,
            "on_regression": self.on_regression,
        }


def _valid_lowercase(value: Any) -> bool:
    return isinstance(value, bool)


def _valid_count(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def _valid_on_regression(value: Any) -> bool:
    return value in REGRESSION_POLICIES


_VALIDATORS = {
    "lowercase": _valid_lowercase,
    "count": _valid_count,
    "on_regression": _valid_on_regression,
}


def load_config(path: Path | None = None) -> UlidgenConfig:
    """Load configuration, falling back to defaults for anything unusable.

    A missing file is not an error. A malformed file, or a value of the wrong
    type, logs a warning and the affected settings keep their defaults.
    """
    config_path = path or default_config_path()
    config = UlidgenConfig(path=config_path)
    config.sources = {name: "default" for name in _VALIDATORS}

    if not config_path.exists():
        return config

    # TomlDecodeError and UnicodeDecodeError are both ValueErrors.
    try:
        data: dict[str, Any] = toml.load(config_path)
    except (ValueError, OSError, TypeError) as exc:
        logger.warning("Ignoring unreadable config file %s: %s", config_path, exc)
        return config

    section = data.get(SECTION)
    if section is None:
        return config
    if not isinstance(section, dict):
        logger.warning("Ignoring [%s] in %s: not a table", SECTION, config_path)
        return config

    for name, value in section.items():
        validator = _VALIDATORS.get(name)
        if validator is None:
            logger.warning("Unknown setting %r in %s", name, config_path)
            continue
        if not validator(value):
            logger.warning(
                "Invalid value %r for %r in %s; using default", value, name, config_path
            )
            continue
        setattr(config, name, value)
        config.sources[name] = str(config_path)

    return config
