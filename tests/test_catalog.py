"""Tests for the emoji catalog."""
import pytest

from glyphit.catalog import DEFAULT_LABELS, EmojiCatalog, glyph_of
from glyphit.errors import ConfigurationError


def test_default_catalog():
    catalog = EmojiCatalog()

    assert len(catalog) == 66
    assert list(catalog)[0] == "🎨 :art: Improve structure/format"
    assert "🐛 :bug: Fix a bug" in catalog


def test_every_default_label_has_a_glyph():
    for label in DEFAULT_LABELS:
        glyph = glyph_of(label)
        assert len(glyph) == 1
        assert not glyph.isascii()


def test_glyph_of_custom_labels():
    catalog = EmojiCatalog(["🔥 :fire: Remove code or files", "📝 :memo: Docs"])

    assert [glyph_of(label) for label in catalog] == ["🔥", "📝"]


def test_glyph_of_empty_label():
    assert glyph_of("") == ""


def test_empty_catalog_rejected():
    with pytest.raises(ConfigurationError):
        EmojiCatalog([])


def test_blank_label_rejected():
    with pytest.raises(ConfigurationError):
        EmojiCatalog(["🔥 :fire: Remove", "   "])


def test_catalog_from_file(tmp_path):
    path = tmp_path / "emojis.toml"
    path.write_text('labels = ["🚀 :rocket: Ship it", "🧪 :test_tube: Tests"]\n', encoding="utf-8")

    catalog = EmojiCatalog.from_file(path)

    assert list(catalog) == ["🚀 :rocket: Ship it", "🧪 :test_tube: Tests"]


def test_catalog_file_without_labels(tmp_path):
    path = tmp_path / "emojis.toml"
    path.write_text('names = ["x"]\n')

    with pytest.raises(ConfigurationError, match="labels"):
        EmojiCatalog.from_file(path)


def test_catalog_file_invalid_toml(tmp_path):
    path = tmp_path / "emojis.toml"
    path.write_text("labels = [")

    with pytest.raises(ConfigurationError):
        EmojiCatalog.from_file(path)


def test_catalog_file_missing(tmp_path):
    with pytest.raises(ConfigurationError):
        EmojiCatalog.from_file(tmp_path / "nope.toml")
