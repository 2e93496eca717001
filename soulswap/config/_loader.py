"""YAML config file discovery and Pydantic settings source."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Any

import yaml
from pydantic.fields import FieldInfo
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

_CAMEL_RE = re.compile(r"(?<=[a-z0-9])([A-Z])")


def find_config_file() -> Path | None:
    """Find soulswap.yaml using search order:
    1. SOULSWAP_CONFIG env var (explicit path)
    2. ./soulswap.yaml (CWD)
    3. ./soulswap.yml (CWD alt)
    4. ~/.soulswap/soulswap.yaml (user home)
    """
    explicit = os.environ.get("SOULSWAP_CONFIG")
    if explicit:
        p = Path(explicit).expanduser()
        if p.is_file():
            return p
        return None

    candidates = [
        Path.cwd() / "soulswap.yaml",
        Path.cwd() / "soulswap.yml",
        Path.home() / ".soulswap" / "soulswap.yaml",
    ]
    for candidate in candidates:
        if candidate.is_file():
            return candidate
    return None


def snake_case_keys(data: Any) -> Any:
    """Rewrite camelCase mapping keys (userTimezone, soulEvil) to snake_case
    so either spelling loads into the same fields."""
    if isinstance(data, dict):
        return {
            (_CAMEL_RE.sub(r"_\1", k).lower() if isinstance(k, str) else k): snake_case_keys(v)
            for k, v in data.items()
        }
    if isinstance(data, list):
        return [snake_case_keys(v) for v in data]
    return data


class YamlSettingsSource(PydanticBaseSettingsSource):
    """Load settings from a YAML file."""

    def __init__(self, settings_cls: type[BaseSettings]) -> None:
        super().__init__(settings_cls)
        self._yaml_data: dict[str, Any] = {}
        config_path = find_config_file()
        if config_path is not None:
            with open(config_path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
                if isinstance(data, dict):
                    self._yaml_data = snake_case_keys(data)

    def get_field_value(self, field: FieldInfo, field_name: str) -> tuple[Any, str, bool]:
        val = self._yaml_data.get(field_name)
        return val, field_name, val is not None

    def __call__(self) -> dict[str, Any]:
        return self._yaml_data
