"""Unit tests for slug derivation."""

import pytest

from looncamp.services.slug import create_slug


class TestCreateSlug:
    def test_reference_example(self):
        assert create_slug("Lake View Camp #1!!") == "lake-view-camp-1"

    @pytest.mark.parametrize(
        ("title", "expected"),
        [
            ("Riverside Cottage", "riverside-cottage"),
            ("Hilltop   Villa\twith\nPool", "hilltop-villa-with-pool"),
            ("Camp -- Site", "camp-site"),
            ("Already-a-slug", "already-a-slug"),
            ("  padded title  ", "padded-title"),
            ("-edge hyphens-", "edge-hyphens"),
            ("Café Déjà Vu", "caf-dj-vu"),
            ("100% Fun & Games", "100-fun-games"),
        ],
    )
    def test_normalisation(self, title: str, expected: str):
        assert create_slug(title) == expected

    def test_deterministic(self):
        title = "Pawna Lake Camping (Premium)"
        assert create_slug(title) == create_slug(title)

    def test_titles_that_collide(self):
        assert create_slug("Lake View Camp 1") == create_slug("lake view camp #1")

    def test_only_symbols_gives_empty_slug(self):
        assert create_slug("!!!") == ""
