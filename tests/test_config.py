"""Tests for actiongallery.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from actiongallery.config import (
    DEFAULT_REPO_URL,
    DEFAULT_ROOT_PATH,
    ConfigError,
    GalleryConfig,
    load_config,
)
from actiongallery.remote.client import DEFAULT_API_BASE


def test_load_config_returns_defaults_when_missing(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert isinstance(config, GalleryConfig)
    assert config.root == tmp_path.resolve()
    assert config.source.api_base == DEFAULT_API_BASE
    assert config.source.repo_url == DEFAULT_REPO_URL
    assert config.source.root_path == DEFAULT_ROOT_PATH
    assert config.source.extension == ".cdc"
    assert config.fetch.batch_size == 5
    assert config.fetch.batch_delay == 0.1
    assert config.fetch.request_timeout is None
    assert config.output.path == Path("public/index.html")
    assert config.output.templates_dir is None


def test_load_config_parses_expected_fields(tmp_path: Path) -> None:
    config_file = tmp_path / ".actiongallery.yml"
    config_file.write_text(
        """
source:
  api_base: "https://api.example/repos/acme/actions/contents"
  repo_url: "https://example/acme/actions"
  root_path: "contracts"
  extension: ".cadence"
fetch:
  batch_size: 10
  batch_delay: 0.5
  request_timeout: 30
output:
  path: "site/index.html"
  title: "Acme Actions"
  templates_dir: "templates"
""",
        encoding="utf-8",
    )

    config = load_config(config_file)

    root = tmp_path.resolve()
    assert config.source.api_base == "https://api.example/repos/acme/actions/contents"
    assert config.source.repo_url == "https://example/acme/actions"
    assert config.source.root_path == "contracts"
    assert config.source.extension == ".cadence"
    assert config.fetch.batch_size == 10
    assert config.fetch.batch_delay == 0.5
    assert config.fetch.request_timeout == 30.0
    assert config.output.path == root / "site/index.html"
    assert config.output.title == "Acme Actions"
    assert config.output.templates_dir == root / "templates"


def test_load_config_empty_file_uses_defaults(tmp_path: Path) -> None:
    (tmp_path / ".actiongallery.yml").write_text("\n", encoding="utf-8")

    config = load_config(tmp_path)

    assert config.fetch.batch_size == 5


def test_load_config_rejects_non_mapping(tmp_path: Path) -> None:
    (tmp_path / ".actiongallery.yml").write_text("- one\n- two\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_load_config_rejects_invalid_yaml(tmp_path: Path) -> None:
    (tmp_path / ".actiongallery.yml").write_text("source: [unclosed\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_load_config_rejects_zero_batch_size(tmp_path: Path) -> None:
    (tmp_path / ".actiongallery.yml").write_text("fetch:\n  batch_size: 0\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_load_config_rejects_undecodable_file(tmp_path: Path) -> None:
    (tmp_path / ".actiongallery.yml").write_bytes(b"source:\n  repo_url: \xff\xfe\n")

    with pytest.raises(ConfigError, match="Failed to read"):
        load_config(tmp_path)


def test_load_config_rejects_directory_in_place_of_file(tmp_path: Path) -> None:
    (tmp_path / ".actiongallery.yml").mkdir()

    with pytest.raises(ConfigError, match="Failed to read"):
        load_config(tmp_path)
