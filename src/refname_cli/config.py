from __future__ import annotations

from dataclasses import dataclass
import logging
import os
from pathlib import Path
from typing import Any

import yaml

from .aggregate import MarkerStyle
from .parser import InputFormat


CONFIG_DIR_NAME = ".refname_cli"
CONFIG_FILE_NAME = "config.yaml"
DEFAULT_SYSTEM_CONFIG_PATH = Path.home() / CONFIG_DIR_NAME / CONFIG_FILE_NAME

DEFAULT_CONFIG_VALUES: dict[str, Any] = {
    "marker_style": MarkerStyle.FORMAL.value,
    "input_format": InputFormat.KEY_VALUE.value,
    "editor": "",
    "prefill": True,
    "open_viewer": False,
}

LOGGER = logging.getLogger(__name__)

_TRUE_VALUES = {"true", "yes", "on", "1"}
_FALSE_VALUES = {"false", "no", "off", "0"}


@dataclass(slots=True)
class AppConfig:
    marker_style: MarkerStyle = MarkerStyle.FORMAL
    input_format: InputFormat = InputFormat.KEY_VALUE
    editor: str | None = None
    prefill: bool = True
    open_viewer: bool = False


def _as_bool(value: Any, key: str) -> bool:
    if isinstance(value, bool):
        return value
    normalized = str(value).strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ValueError(f"Config value {key!r} must be a boolean, got {value!r}")


def _read_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        LOGGER.debug("No config file at %s, using defaults", path)
        return {}
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in config file: {path}") from exc

    if not isinstance(data, dict):
        raise ValueError("Config root must be a mapping")
    return data


def load_config(
    config_path: Path | None = None,
    cli_marker_style: str | None = None,
    cli_input_format: str | None = None,
    cli_editor: str | None = None,
    cli_prefill: bool | None = None,
    cli_open_viewer: bool | None = None,
) -> AppConfig:
    config_path = config_path or DEFAULT_SYSTEM_CONFIG_PATH
    raw = _read_yaml(config_path)

    env_marker_style = os.getenv("REFNAME_MARKER_STYLE")
    env_input_format = os.getenv("REFNAME_INPUT_FORMAT")
    env_editor = os.getenv("REFNAME_EDITOR")

    marker_style = (
        cli_marker_style
        or env_marker_style
        or raw.get("marker_style")
        or DEFAULT_CONFIG_VALUES["marker_style"]
    )
    input_format = (
        cli_input_format
        or env_input_format
        or raw.get("input_format")
        or DEFAULT_CONFIG_VALUES["input_format"]
    )
    editor = str(cli_editor or env_editor or raw.get("editor") or "").strip()

    prefill = (
        cli_prefill
        if cli_prefill is not None
        else _as_bool(raw.get("prefill", DEFAULT_CONFIG_VALUES["prefill"]), "prefill")
    )
    open_viewer = (
        cli_open_viewer
        if cli_open_viewer is not None
        else _as_bool(raw.get("open_viewer", DEFAULT_CONFIG_VALUES["open_viewer"]), "open_viewer")
    )

    return AppConfig(
        marker_style=MarkerStyle.parse(str(marker_style)),
        input_format=InputFormat.parse(str(input_format)),
        editor=editor or None,
        prefill=bool(prefill),
        open_viewer=bool(open_viewer),
    )
