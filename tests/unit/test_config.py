from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from emlanalyzer.config import (
    AnalyzerOptions,
    Config,
    ConfigError,
    load_config,
    options_from_mapping,
)


def _write_config(tmp_path: Path, content: str) -> Path:
    config_path = tmp_path / "config.yaml"
    config_path.write_text(textwrap.dedent(content), encoding="utf-8")
    return config_path


def test_load_config_success(tmp_path: Path) -> None:
    config_path = _write_config(
        tmp_path,
        f"""
        options:
          fetchExternalAssetsSize: true
          probeTimeout: 2.5
        logging:
          level: debug
          file: {tmp_path}/logs/emlanalyzer.log
        """,
    )

    config = load_config(config_path)

    assert config.options == AnalyzerOptions(fetch_external_assets_size=True, probe_timeout=2.5)
    assert config.logging.level == "debug"
    assert config.logging.file == tmp_path / "logs" / "emlanalyzer.log"


def test_load_config_from_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    config_path = _write_config(
        tmp_path,
        """
        options:
          fetch_external_assets_size: true
        """,
    )

    monkeypatch.setenv("EMLANALYZER_CONFIG", str(config_path))
    config = load_config()

    assert config.options.fetch_external_assets_size is True


def test_missing_default_config_uses_defaults(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.delenv("EMLANALYZER_CONFIG", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))

    assert load_config() == Config()


def test_missing_explicit_config_is_an_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Config file not found"):
        load_config(tmp_path / "absent.yaml")


def test_options_default_to_no_fetching() -> None:
    options = options_from_mapping(None)
    assert options.fetch_external_assets_size is False
    assert options.probe_timeout > 0


@pytest.mark.parametrize(
    "bad_content, expected_message",
    [
        ("- just\n- a list\n", "Configuration root must be a mapping"),
        ("options:\n  fetchExternalAssetsSize: 'yes'\n", "fetchExternalAssetsSize must be a boolean"),
        ("options:\n  fetchAll: true\n", "Unknown option: fetchAll"),
        (
            "options:\n  fetchExternalAssetsSize: true\n  fetch_external_assets_size: false\n",
            "given more than once",
        ),
        ("options:\n  probeTimeout: 0\n", "probeTimeout must be positive"),
        ("options:\n  probeTimeout: soon\n", "probeTimeout must be a number"),
        ("options: []\n", "options must be a mapping"),
        ("logging: debug\n", "logging must be a mapping"),
        ("reports: {}\n", "Unknown configuration section"),
        ("options: {fetch\n", "Invalid YAML"),
    ],
)
def test_load_config_validation_errors(
    bad_content: str,
    expected_message: str,
    tmp_path: Path,
) -> None:
    config_path = _write_config(tmp_path, bad_content)
    with pytest.raises(ConfigError) as excinfo:
        load_config(config_path)
    assert expected_message in str(excinfo.value)
