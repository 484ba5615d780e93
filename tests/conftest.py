"""Pytest fixtures for refname tests."""

from pathlib import Path

import pytest

WAGNER_KEY_VALUE = """\
TITLE=Der Ring des Nibelungen
YEAR=1876
AUTHOR=Richard Wagner
#EDITOR=
"""

WAGNER_TAGGED = """\
<title>
Der Ring des Nibelungen
</title>
<year>
1876
</year>
<authors>
Richard Wagner
</authors>
"""

WAGNER_SLUG = "wagner_richard_1876_der_ring_des_nibelungen"


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's environment out of config resolution."""
    for name in ("REFNAME_MARKER_STYLE", "REFNAME_INPUT_FORMAT", "REFNAME_EDITOR"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def missing_config(tmp_path: Path) -> Path:
    """A config path that does not exist, so defaults apply."""
    return tmp_path / "no-config" / "config.yaml"


@pytest.fixture
def document(tmp_path: Path) -> Path:
    """A throwaway document to rename."""
    path = tmp_path / "scan_0001.txt"
    path.write_text("scanned pages", encoding="utf-8")
    return path
