"""
Configuration management using YAML files and dataclasses.

This module defines all configuration dataclasses and provides loading
from YAML files with defaults. Configuration sections:
- ContentConfig: Locations of the content files the queries read
- LoggingConfig: Logging behavior
- AppConfig: Root configuration container
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import yaml

from .assets import SUPPORTED_EXTENSIONS


@dataclass
class ContentConfig:
    """Configuration for content sources.

    Relative paths are resolved against the content root given at run time.

    Attributes:
        snippets_path: YAML file holding the list of snippet records
        redirects_path: YAML file holding the list of {from, to} redirects
        cover_asset_path: Directory containing cover images
        supported_extensions: Image extensions counted as cover assets
        model_name: Name of the dataset model the queries read
    """

    snippets_path: str = "content/snippets.yaml"
    redirects_path: str = "content/redirects.yaml"
    cover_asset_path: str = "content/assets/cover"
    supported_extensions: list[str] = field(default_factory=lambda: list(SUPPORTED_EXTENSIONS))
    model_name: str = "Snippet"


@dataclass
class LoggingConfig:
    """Configuration for logging behavior.

    Attributes:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR")
        console: Whether to log to console
        log_path: JSONL or plain log file to write, no file when unset
        format: Log file format ("jsonl" or "plain")
    """

    level: str = "INFO"
    console: bool = True
    log_path: str | None = None
    format: str = "jsonl"


@dataclass
class AppConfig:
    """Root configuration container aggregating all config sections."""

    content: ContentConfig = field(default_factory=ContentConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


DEFAULT_CONFIG = AppConfig()


def load_config(path: str | None) -> AppConfig:
    """Load configuration from a YAML file with defaults.

    Always returns a new AppConfig, so callers may override fields freely.
    """
    if not path:
        return _fromdict(_asdict(DEFAULT_CONFIG))

    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    return _merge_config(DEFAULT_CONFIG, raw)


def _merge_config(base: AppConfig, raw: dict[str, Any]) -> AppConfig:
    """Merge raw YAML config into base AppConfig."""
    data = _asdict(base)
    for key, value in raw.items():
        if key not in data:
            continue
        if isinstance(value, dict) and isinstance(data[key], dict):
            data[key].update(value)
        else:
            data[key] = value
    return _fromdict(data)


def _asdict(cfg: AppConfig) -> dict[str, Any]:
    """Convert AppConfig to nested dictionary."""
    return {
        "content": {
            "snippets_path": cfg.content.snippets_path,
            "redirects_path": cfg.content.redirects_path,
            "cover_asset_path": cfg.content.cover_asset_path,
            "supported_extensions": list(cfg.content.supported_extensions),
            "model_name": cfg.content.model_name,
        },
        "logging": {
            "level": cfg.logging.level,
            "console": cfg.logging.console,
            "log_path": cfg.logging.log_path,
            "format": cfg.logging.format,
        },
    }


def _fromdict(data: dict[str, Any]) -> AppConfig:
    """Reconstruct AppConfig from nested dictionary."""
    return AppConfig(
        content=ContentConfig(**data["content"]),
        logging=LoggingConfig(**data["logging"]),
    )
