"""Unit tests for responsive image resolution."""

from pathlib import Path
from unittest.mock import patch

import pytest

from mdmanifest.images import (
    ImageVariantSet,
    is_animated_image,
    is_external_image,
    parse_width,
    render_picture,
    resolve_image_variants,
    scan_variants,
)


@pytest.mark.unit
class TestReferenceClassification:
    """Tests for external and animated image detection."""

    @pytest.mark.parametrize("url", ["http://example.com/a.png", "https://example.com/a.png"])
    def test_external(self, url):
        assert is_external_image(url)

    @pytest.mark.parametrize("url", ["/images/a.png", "./a.png", "images/http.png"])
    def test_not_external(self, url):
        assert not is_external_image(url)

    @pytest.mark.parametrize("url", ["/a.gif", "/a.GIF", "https://x.com/a.gif?v=2"])
    def test_animated(self, url):
        assert is_animated_image(url)

    @pytest.mark.parametrize("url", ["/a.png", "/gif/a.jpg", "/a"])
    def test_not_animated(self, url):
        assert not is_animated_image(url)


@pytest.mark.unit
class TestParseWidth:
    """Tests for strict width parsing."""

    @pytest.mark.parametrize("stem,expected", [("1", 1), ("800", 800), ("0", 0), ("0640", 640)])
    def test_valid(self, stem, expected):
        assert parse_width(stem) == expected

    @pytest.mark.parametrize("stem", ["2.5", "-1", "large", "", "1e3", " 1", "800w"])
    def test_invalid(self, stem):
        assert parse_width(stem) is None


@pytest.mark.unit
class TestImageVariantSet:
    """Tests for ImageVariantSet."""

    def test_srcsets_keep_insertion_order(self):
        variants = ImageVariantSet(
            modern={800: "/a/800.webp", 400: "/a/400.webp"},
            fallback={800: "/a/800.jpg", 400: "/a/400.jpg"},
        )
        assert variants.modern_srcset == "/a/800.webp 800w, /a/400.webp 400w"
        assert variants.fallback_srcset == "/a/800.jpg 800w, /a/400.jpg 400w"

    def test_fallback_src_is_widest_fallback(self):
        variants = ImageVariantSet(
            modern={2000: "/a/2000.webp"},
            fallback={100: "/a/100.jpg", 900: "/a/900.png", 300: "/a/300.jpg"},
        )
        assert variants.fallback_src == "/a/900.png"

    def test_fallback_src_uses_modern_when_no_fallback(self):
        variants = ImageVariantSet(modern={1: "/a/1.webp", 2: "/a/2.webp"})
        assert variants.fallback_src == "/a/2.webp"

    def test_empty(self):
        assert ImageVariantSet().is_empty
        assert ImageVariantSet().fallback_src is None


@pytest.mark.unit
class TestScanVariants:
    """Tests for directory scanning."""

    def test_partitions_by_format(self, static_dir: Path):
        variants = scan_variants(static_dir / "set" / "x", "/set/x")
        assert variants.modern == {1: "/set/x/1.webp", 2: "/set/x/2.webp"}
        assert variants.fallback == {1: "/set/x/1.jpg", 2: "/set/x/2.jpg"}

    def test_skips_non_numeric_entries(self, tmp_path: Path, caplog):
        for name in ("10.jpg", "large.jpg", "2.5.jpg", "notes.txt"):
            (tmp_path / name).write_bytes(b"")
        with caplog.at_level("WARNING", logger="mdmanifest.images"):
            variants = scan_variants(tmp_path, "/img")
        assert variants.fallback == {10: "/img/10.jpg"}
        assert "large.jpg" in caplog.text

    def test_skips_subdirectories_and_files_without_extension(self, tmp_path: Path):
        (tmp_path / "3.jpg").mkdir()
        (tmp_path / "4").write_bytes(b"")
        (tmp_path / "5.png").write_bytes(b"")
        variants = scan_variants(tmp_path, "/img")
        assert variants.fallback == {5: "/img/5.png"}

    def test_duplicate_width_keeps_first_listed(self, tmp_path: Path):
        (tmp_path / "1.jpg").write_bytes(b"")
        (tmp_path / "1.png").write_bytes(b"")
        variants = scan_variants(tmp_path, "/img")
        assert variants.fallback == {1: "/img/1.jpg"}

    def test_trailing_slash_in_reference(self, static_dir: Path):
        variants = scan_variants(static_dir / "set" / "x", "/set/x/")
        assert variants.fallback[2] == "/set/x/2.jpg"


@pytest.mark.unit
class TestResolveImageVariants:
    """Tests for resolve_image_variants fallbacks."""

    def test_directory_resolves(self, static_dir: Path):
        variants = resolve_image_variants("/set/x", static_dir)
        assert variants is not None
        assert variants.fallback_src == "/set/x/2.jpg"

    def test_relative_reference_resolves(self, static_dir: Path):
        assert resolve_image_variants("set/x", static_dir) is not None

    def test_no_static_dir(self):
        assert resolve_image_variants("/set/x", None) is None

    def test_external_url(self, static_dir: Path):
        assert resolve_image_variants("http://example.com/set/x", static_dir) is None

    def test_missing_path(self, static_dir: Path):
        assert resolve_image_variants("/set/missing", static_dir) is None

    def test_plain_file(self, static_dir: Path):
        assert resolve_image_variants("/set/plain.jpg", static_dir) is None

    def test_path_outside_static_dir(self, static_dir: Path):
        outside = static_dir.parent / "outside"
        outside.mkdir()
        (outside / "1.jpg").write_bytes(b"")
        assert resolve_image_variants("/../outside", static_dir) is None

    def test_directory_without_variants(self, static_dir: Path):
        (static_dir / "empty").mkdir()
        assert resolve_image_variants("/empty", static_dir) is None

    def test_listing_error_is_swallowed(self, static_dir: Path):
        with patch("mdmanifest.images.scan_variants", side_effect=PermissionError("denied")):
            assert resolve_image_variants("/set/x", static_dir) is None


@pytest.mark.unit
class TestRenderPicture:
    """Tests for picture markup."""

    def test_full_markup(self):
        variants = ImageVariantSet(
            modern={1: "/set/x/1.webp", 2: "/set/x/2.webp"},
            fallback={1: "/set/x/1.jpg", 2: "/set/x/2.jpg"},
        )
        assert render_picture(variants, "Alt Text", "100vw") == (
            "<picture>"
            '<source srcset="/set/x/1.webp 1w, /set/x/2.webp 2w" sizes="100vw" type="image/webp">'
            '<source srcset="/set/x/1.jpg 1w, /set/x/2.jpg 2w" sizes="100vw">'
            '<img src="/set/x/2.jpg" alt="Alt Text" />'
            "</picture>"
        )

    def test_modern_source_omitted_when_empty(self):
        variants = ImageVariantSet(fallback={640: "/a/640.jpg"})
        html = render_picture(variants, "A", "50vw")
        assert "image/webp" not in html
        assert '<source srcset="/a/640.jpg 640w" sizes="50vw">' in html

    def test_alt_is_escaped(self):
        variants = ImageVariantSet(fallback={1: "/a/1.jpg"})
        html = render_picture(variants, 'Say "hi" & <wave>', "100vw")
        assert 'alt="Say &quot;hi&quot; &amp; &lt;wave&gt;"' in html
