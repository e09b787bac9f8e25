"""Configuration loading for actiongallery (.actiongallery.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .extractors.constants import DEFAULT_EXTENSION
from .remote.client import DEFAULT_API_BASE

CONFIG_FILENAME = ".actiongallery.yml"
DEFAULT_REPO_URL = "https://github.com/onflow/FlowActions"
DEFAULT_ROOT_PATH = "cadence/contracts/connectors"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class SourceConfig:
    """Where connector files are listed from."""

    api_base: str = DEFAULT_API_BASE
    repo_url: str = DEFAULT_REPO_URL
    root_path: str = DEFAULT_ROOT_PATH
    extension: str = DEFAULT_EXTENSION


@dataclass
class FetchConfig:
    """Request batching for the enrichment pass."""

    batch_size: int = 5
    batch_delay: float = 0.1
    request_timeout: Optional[float] = None


@dataclass
class OutputConfig:
    """Where and how the static gallery is written."""

    path: Path = Path("public/index.html")
    title: str = "Flow Actions"
    templates_dir: Optional[Path] = None


@dataclass
class GalleryConfig:
    """Represents the settings defined in .actiongallery.yml."""

    root: Path
    source: SourceConfig = field(default_factory=SourceConfig)
    fetch: FetchConfig = field(default_factory=FetchConfig)
    output: OutputConfig = field(default_factory=OutputConfig)


def load_config(config_path: Path) -> GalleryConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return GalleryConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    source = SourceConfig()
    source_data = _as_dict(data.get("source"))
    if source_data:
        source.api_base = _as_str(source_data.get("api_base")) or source.api_base
        source.repo_url = _as_str(source_data.get("repo_url")) or source.repo_url
        source.root_path = _as_str(source_data.get("root_path")) or source.root_path
        source.extension = _as_str(source_data.get("extension")) or source.extension

    fetch = FetchConfig()
    fetch_data = _as_dict(data.get("fetch"))
    if fetch_data:
        batch_size = _as_int(fetch_data.get("batch_size"))
        if batch_size is not None:
            if batch_size < 1:
                raise ConfigError("fetch.batch_size must be at least 1")
            fetch.batch_size = batch_size
        batch_delay = _as_float(fetch_data.get("batch_delay"))
        if batch_delay is not None:
            fetch.batch_delay = max(0.0, batch_delay)
        fetch.request_timeout = _as_float(fetch_data.get("request_timeout"))

    output = OutputConfig()
    output_data = _as_dict(data.get("output"))
    if output_data:
        path_str = _as_str(output_data.get("path"))
        if path_str:
            output.path = root / path_str
        output.title = _as_str(output_data.get("title")) or output.title
        templates_str = _as_str(output_data.get("templates_dir"))
        output.templates_dir = root / templates_str if templates_str else None

    return GalleryConfig(root=root, source=source, fetch=fetch, output=output)


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Failed to read {path.name}: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    if isinstance(value, bool):
        return None
    return str(value) if isinstance(value, (str, int, float)) else None


def _as_float(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


__all__ = [
    "ConfigError",
    "FetchConfig",
    "GalleryConfig",
    "OutputConfig",
    "SourceConfig",
    "load_config",
]
