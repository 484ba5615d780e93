"""Tests for filename slugs."""

import re

import pytest

from refname_cli.slug import slugify


class TestSlugify:
    def test_reference_becomes_slug(self) -> None:
        assert (
            slugify("Wagner, Richard (1876): Der Ring des Nibelungen")
            == "wagner_richard_1876_der_ring_des_nibelungen"
        )

    def test_runs_collapse_to_single_underscore(self) -> None:
        assert slugify("a -- b") == "a_b"

    def test_single_leading_and_trailing_underscore_removed(self) -> None:
        assert slugify("(Hello World!)") == "hello_world"
        assert slugify("__a__") == "a"

    def test_empty(self) -> None:
        assert slugify("") == ""
        assert slugify("?!") == ""

    @pytest.mark.parametrize(
        "text",
        [
            "Wagner, Richard (1876): Der Ring",
            "  leading and trailing  ",
            "__already_slugged__",
            "Ümlaut & Sønderborg",
            "",
            "_",
        ],
    )
    def test_idempotent(self, text: str) -> None:
        once = slugify(text)
        assert slugify(once) == once

    def test_only_safe_characters(self) -> None:
        assert re.fullmatch(r"[a-z0-9_]+", slugify("Doe, Jane (Hg.) (2001): A/B|C"))
