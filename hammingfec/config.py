from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from hammingfec.blocks import validate_block_size
from hammingfec.errors import ConfigError

DEFAULT_BLOCK_SIZE = 16
ENV_PREFIX = "HAMMINGFEC__"


@dataclass
class CodecConfig:
    # Bits per block, parity included; must be a power of two >= 2
    block_size: int = DEFAULT_BLOCK_SIZE

    def __post_init__(self) -> None:
        self.block_size = validate_block_size(self.block_size)


@dataclass
class LoggingConfig:
    # Level name or number; YAML and env overrides may hand over an int
    level: str = "INFO"

    def __post_init__(self) -> None:
        self.level = str(self.level)


@dataclass
class AppConfig:
    codec: CodecConfig = field(default_factory=CodecConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _read_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Cannot parse {path}: {exc}") from exc
        if not isinstance(data, dict):
            raise ConfigError("Config root must be a mapping")
        return data


def _section(raw: dict[str, Any], name: str) -> dict[str, Any]:
    section = raw.get(name, {})
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ConfigError(f"Config section '{name}' must be a mapping")
    return section


def load_config(path_str: str | None = None) -> AppConfig:
    raw: dict[str, Any] = _read_yaml(Path(path_str)) if path_str else {}

    # Environment overrides (prefix HAMMINGFEC__SECTION__KEY)
    # Example: HAMMINGFEC__CODEC__BLOCK_SIZE=32
    for k, v in os_environ_items():
        if not k.startswith(ENV_PREFIX):
            continue
        parts = k[len(ENV_PREFIX) :].split("__")
        if len(parts) != 2:
            continue
        section, key = parts[0].lower(), parts[1].lower()
        if section not in ("codec", "logging"):
            continue
        target = raw.setdefault(section, {})
        if isinstance(target, dict):
            target[key] = coerce_env_value(v)

    try:
        return AppConfig(
            codec=CodecConfig(**_section(raw, "codec")),
            logging=LoggingConfig(**_section(raw, "logging")),
        )
    except TypeError as exc:
        raise ConfigError(f"Unknown config key: {exc}") from exc


def coerce_env_value(val: str) -> Any:
    # Basic bool/int coercion for convenience
    lower = val.lower()
    if lower in {"true", "false"}:
        return lower == "true"
    try:
        return int(val)
    except ValueError:
        return val


def os_environ_items() -> list[tuple[str, str]]:
    # Wrapped for testability
    from os import environ

    return [(k, v) for k, v in environ.items()]
