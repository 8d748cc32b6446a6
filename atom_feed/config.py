from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
import os
from pathlib import Path
import tomllib
from typing import cast
import warnings

from .constants import Defaults
from .domain.entities.records import Generator


@dataclass(frozen=True, slots=True)
class AtomFeedConfig:
    generator_name: str = Defaults.GENERATOR_NAME
    generator_uri: str | None = Defaults.GENERATOR_URI
    generator_version: str | None = None
    indent: int = Defaults.INDENT

    def __post_init__(self) -> None:
        if not self.generator_name.strip():
            raise ValueError("generator_name must not be empty")
        if self.indent < 0:
            raise ValueError(f"indent must be non-negative, got {self.indent}")

    @property
    def default_generator(self) -> Generator:
        return Generator(
            value=self.generator_name,
            uri=self.generator_uri or None,
            version=self.generator_version or None,
        )

    @classmethod
    def from_env(cls) -> AtomFeedConfig:
        return cls(
            generator_name=os.getenv("ATOM_FEED_GENERATOR_NAME", Defaults.GENERATOR_NAME),
            generator_uri=os.getenv("ATOM_FEED_GENERATOR_URI", Defaults.GENERATOR_URI),
            generator_version=os.getenv("ATOM_FEED_GENERATOR_VERSION") or None,
            indent=int(os.getenv("ATOM_FEED_INDENT", str(Defaults.INDENT))),
        )


class ConfigLoader:
    pass

    @staticmethod
    def load(config_file: Path | None = None) -> AtomFeedConfig:
        try:
            config = AtomFeedConfig.from_env()
        except ValueError as e:
            warnings.warn(
                f"Ignoring invalid environment configuration: {e}", stacklevel=2
            )
            config = AtomFeedConfig()
        if config_file is None:
            config_file = Path(Defaults.CONFIG_FILE)
        if config_file.exists():
            try:
                config = ConfigLoader._load_from_toml(config_file, config)
            except (OSError, tomllib.TOMLDecodeError, ValueError) as e:
                warnings.warn(
                    f"Failed to load config from {config_file}: {e}", stacklevel=2
                )
        return config

    @staticmethod
    def _load_from_toml(
        config_file: Path, base_config: AtomFeedConfig
    ) -> AtomFeedConfig:
        with config_file.open("rb") as handle:
            data = tomllib.load(handle)
        generator = _get_table(data, "generator")
        render = _get_table(data, "render")
        generator_name = base_config.generator_name
        if value := generator.get("name"):
            generator_name = str(value)
        generator_uri = base_config.generator_uri
        if "uri" in generator:
            raw = generator.get("uri")
            generator_uri = (str(raw).strip() or None) if raw is not None else None
        generator_version = base_config.generator_version
        if (value := generator.get("version")) is not None:
            generator_version = str(value).strip() or None
        indent = base_config.indent
        if (value := render.get("indent")) is not None:
            indent = _coerce_int(value, key="render.indent")
        return AtomFeedConfig(
            generator_name=generator_name,
            generator_uri=generator_uri,
            generator_version=generator_version,
            indent=indent,
        )


def _get_table(data: Mapping[str, object], key: str) -> Mapping[str, object]:
    value = data.get(key)
    if isinstance(value, Mapping):
        return cast("Mapping[str, object]", value)
    return {}


def _coerce_int(value: object, *, key: str) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{key} must be an int, got bool")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    if isinstance(value, str):
        return int(value)
    raise ValueError(f"{key} must be int-like or string, got {type(value).__name__}")
