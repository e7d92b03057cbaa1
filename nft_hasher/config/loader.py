from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

from ..models.chip0007 import Collection, CollectionAttribute

"""Settings loader.

Responsibilities:
- Load an optional YAML settings file
- Validate it against the bundled config_schema.json
- Apply defaults for every key that is not given
- Warn when the file changes what goes into the hash (format, collection)

A settings file is only read when named explicitly; nothing is picked up from
the working directory.
"""

__all__ = [
    "ConfigError",
    "Settings",
    "SCHEMA_PATH",
    "default_settings",
    "load_config",
    "resolve_settings",
]

SCHEMA_PATH = Path(__file__).with_name("config_schema.json")

DEFAULT_FORMAT = "CHIP-0007"
DEFAULT_HASH_COLUMN = "Hash"
DEFAULT_OUTPUT_SUFFIX = ".output.csv"

DEFAULT_COLLECTION = Collection(
    name="Zuri NFT Tickets for Free Lunch",
    id="b774f676-c1d5-422e-beed-00ef5510c64d",
    attributes=CollectionAttribute(
        type="description",
        value="Rewards for accomplishments during HNGi9.",
    ),
)

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    pass


@dataclass(frozen=True)
class Settings:
    """Per-run settings. Every field has a default."""
    format: str = DEFAULT_FORMAT
    hash_column: str = DEFAULT_HASH_COLUMN
    output_suffix: str = DEFAULT_OUTPUT_SUFFIX
    echo_json: bool = True
    collection: Collection = field(default=DEFAULT_COLLECTION)


def default_settings() -> Settings:
    return Settings()


def _validate_config_schema(data: dict[str, Any]) -> None:
    """Validate settings data against the bundled JSON schema.

    Raises:
        ConfigError: If the schema file is missing or unreadable, or the data
            fails validation (unknown keys, wrong types).
    """
    if not SCHEMA_PATH.exists():
        raise ConfigError(f"config schema not found: {SCHEMA_PATH}")

    try:
        schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
        jsonschema.validate(data, schema)
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid schema file: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"config validation failed: {e.message}") from e


def _collection_from(raw: dict[str, Any]) -> Collection:
    attrs_raw = raw.get("attributes")
    if attrs_raw is None:
        attrs = DEFAULT_COLLECTION.attributes
    else:
        attrs = CollectionAttribute(type=attrs_raw["type"], value=attrs_raw["value"])
    return Collection(name=raw["name"], id=raw["id"], attributes=attrs)


def load_config(path: Path) -> Settings:
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e
    except OSError as e:
        raise ConfigError(f"cannot read config file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"config root must be a mapping, got {type(data).__name__}")

    _validate_config_schema(data)

    collection = DEFAULT_COLLECTION
    if "collection" in data:
        collection = _collection_from(data["collection"])

    settings = Settings(
        format=data.get("format", DEFAULT_FORMAT),
        hash_column=data.get("hash_column", DEFAULT_HASH_COLUMN),
        output_suffix=data.get("output_suffix", DEFAULT_OUTPUT_SUFFIX),
        echo_json=data.get("echo_json", True),
        collection=collection,
    )
    _warn_on_hash_overrides(settings, path)
    return settings


def _warn_on_hash_overrides(settings: Settings, path: Path) -> None:
    # format and collection are serialized into every hashed object
    if settings.format != DEFAULT_FORMAT:
        logger.warning(
            "%s overrides format: %s (default %s)", path, settings.format, DEFAULT_FORMAT
        )
    if settings.collection != DEFAULT_COLLECTION:
        logger.warning(
            "%s overrides collection: %s (default %s)",
            path,
            settings.collection.id,
            DEFAULT_COLLECTION.id,
        )


def resolve_settings(explicit: Path | None) -> Settings:
    """Settings for a run: the explicit file when given, else the built-in defaults."""
    if explicit is None:
        return default_settings()
    return load_config(explicit)
