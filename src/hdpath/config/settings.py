"""Default path components loaded from environment variables and config files.

Configuration is loaded from (highest priority first):
1. Environment variables (prefix: ``HDPATH_``)
2. YAML config file (``HDPATH_CONFIG_PATH`` env var or ``PathDefaults.from_yaml``)
3. Defaults defined here (``m/44'/0'/0'/0/0``)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Self

import yaml
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from hdpath.path.purpose import Purpose
from hdpath.path.value import PathValue

logger = logging.getLogger(__name__)

COMPONENT_FIELDS = ("purpose", "coin_type", "account", "change", "index")


def _read_path_yaml(path: str | Path) -> dict[str, Any]:
    """Path components from a YAML mapping, keyed by field name.

    A missing, empty or non-mapping file yields no components. Keys other
    than the five path components are dropped with a warning.
    """
    p = Path(path)
    if not p.is_file():
        logger.debug("No path config at %s", p)
        return {}
    data = yaml.safe_load(p.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        return {}
    unknown = sorted(str(key) for key in data if key not in COMPONENT_FIELDS)
    if unknown:
        logger.warning("Ignoring unknown keys in %s: %s", p, ", ".join(unknown))
    return {key: data[key] for key in COMPONENT_FIELDS if key in data}


class PathDefaults(BaseSettings):
    """Components used when a caller asks for a default path."""

    model_config = SettingsConfigDict(
        env_prefix="HDPATH_",
        case_sensitive=False,
    )

    purpose: Purpose = Field(
        default=Purpose.PUBKEY,
        description="BIP-43 purpose, by code (84) or name (witness)",
    )
    coin_type: int = 0
    account: int = 0
    change: int = 0
    index: int = 0
    config_path: str = ""

    @field_validator("purpose", mode="before")
    @classmethod
    def _coerce_purpose(cls, value: Any) -> Any:
        """Accept ``"84"`` or ``"witness"`` as well as a Purpose."""
        if isinstance(value, str):
            text = value.strip()
            if text.isdecimal():
                return int(text)
            try:
                return Purpose[text.upper()]
            except KeyError:
                msg = f"unknown purpose: {value!r}"
                raise ValueError(msg) from None
        return value

    @field_validator("coin_type", "account", "change", "index")
    @classmethod
    def _check_range(cls, value: int) -> int:
        if not PathValue.is_ok(value):
            msg = f"must be between 0 and 2^31-1, got {value}"
            raise ValueError(msg)
        return value

    @model_validator(mode="before")
    @classmethod
    def _merge_yaml(cls, values: dict[str, Any]) -> dict[str, Any]:
        """Fill components the environment leaves unset from ``config_path``."""
        config_path = values.get("config_path", "")
        if not config_path:
            return values
        explicit = {key: val for key, val in values.items() if val is not None}
        return {**_read_path_yaml(config_path), **explicit}

    @classmethod
    def from_yaml(cls, path: str | Path) -> Self:
        """Defaults read from the YAML file at *path*, under any ``HDPATH_*`` overrides."""
        return cls(config_path=str(path))
