"""Tests for configuration loading."""

from pathlib import Path

import pytest

from refname_cli.aggregate import MarkerStyle
from refname_cli.config import AppConfig, load_config
from refname_cli.parser import InputFormat


class TestLoadConfig:
    def test_defaults_without_file(self, missing_config: Path) -> None:
        assert load_config(config_path=missing_config) == AppConfig()

    def test_values_from_file(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text(
            'marker_style: "(hg)"\ninput_format: tagged\neditor: nano\nprefill: false\nopen_viewer: true\n',
            encoding="utf-8",
        )
        config = load_config(config_path=path)
        assert config.marker_style is MarkerStyle.SHORT
        assert config.input_format is InputFormat.TAGGED
        assert config.editor == "nano"
        assert config.prefill is False
        assert config.open_viewer is True

    def test_env_beats_file_and_cli_beats_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("input_format: tagged\neditor: nano\n", encoding="utf-8")
        monkeypatch.setenv("REFNAME_INPUT_FORMAT", "auto")
        monkeypatch.setenv("REFNAME_EDITOR", "vim")

        config = load_config(config_path=path, cli_editor="code --wait")
        assert config.input_format is InputFormat.AUTO
        assert config.editor == "code --wait"

    def test_cli_booleans_override_file(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("prefill: false\n", encoding="utf-8")
        assert load_config(config_path=path, cli_prefill=True).prefill is True

    def test_quoted_booleans_are_normalized(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text('prefill: "no"\nopen_viewer: "yes"\n', encoding="utf-8")
        config = load_config(config_path=path)
        assert config.prefill is False
        assert config.open_viewer is True

    def test_non_boolean_flag_is_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("prefill: sometimes\n", encoding="utf-8")
        with pytest.raises(ValueError, match="prefill"):
            load_config(config_path=path)

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("marker_style: [unclosed\n", encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid YAML"):
            load_config(config_path=path)

    def test_root_must_be_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ValueError, match="mapping"):
            load_config(config_path=path)

    def test_unknown_marker_style(self, missing_config: Path) -> None:
        with pytest.raises(ValueError, match="marker style"):
            load_config(config_path=missing_config, cli_marker_style="(ed.)")
