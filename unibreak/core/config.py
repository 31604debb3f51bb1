"""
Configuration for stream processing and output.

Configuration files are YAML (``.yaml`` / ``.yml``) or JSON. Example:

    block_size: 65536
    encoding: utf-8
    output_format: json
    log_level: verbose
    show_classes: true
"""

import codecs
import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Union

import yaml

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("text", "json", "yaml")
LOG_LEVELS = ("silent", "minimal", "normal", "verbose", "debug", "trace")


class ConfigError(ValueError):
    """Raised for unreadable or invalid configuration."""
    pass


@dataclass
class StreamConfig:
    """Settings used by the CLI and by file streaming."""

    block_size: int = 64 * 1024
    encoding: str = "utf-8"
    output_format: str = "text"
    log_level: str = "normal"
    show_classes: bool = True

    def __post_init__(self):
        if not isinstance(self.block_size, int) or self.block_size <= 0:
            raise ConfigError(f"block_size must be a positive integer, got {self.block_size!r}")
        try:
            codecs.lookup(self.encoding)
        except LookupError as e:
            raise ConfigError(f"Unknown encoding: {self.encoding!r}") from e
        if self.output_format not in OUTPUT_FORMATS:
            raise ConfigError(f"output_format must be one of {OUTPUT_FORMATS}, got {self.output_format!r}")
        if self.log_level not in LOG_LEVELS:
            raise ConfigError(f"log_level must be one of {LOG_LEVELS}, got {self.log_level!r}")

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "StreamConfig":
        """Build a config, rejecting unknown keys."""
        if not isinstance(data, dict):
            raise ConfigError(f"Configuration must be a mapping, got {type(data).__name__}")
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")
        return cls(**data)


def load_config(config_path: Union[str, Path]) -> StreamConfig:
    """
    Load configuration from a YAML or JSON file.

    Args:
        config_path: Path to the configuration file

    Returns:
        Parsed configuration

    Raises:
        FileNotFoundError: If the file does not exist
        ConfigError: If the file cannot be parsed or holds invalid settings
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    suffix = config_path.suffix.lower()
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            if suffix in (".yaml", ".yml"):
                try:
                    raw_config = yaml.safe_load(f)
                except yaml.composer.ComposerError:
                    # Multi-document YAML, use the first document
                    f.seek(0)
                    raw_config = next(yaml.safe_load_all(f))
            elif suffix == ".json":
                raw_config = json.load(f)
            else:
                raise ConfigError(f"Unsupported configuration file format: {config_path.suffix}")
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigError(f"Could not parse {config_path}: {e}") from e

    config = StreamConfig.from_dict(raw_config or {})
    logger.debug(f"Loaded configuration from {config_path}: {config.to_dict()}")
    return config
