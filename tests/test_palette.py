"""Tests for labwcchanger.core.palette."""

from __future__ import annotations

import pytest

from labwcchanger.core.palette import (
    derive_palette,
    parse_scheme_colors,
    parse_scheme_meta,
    render_fuzzel_colors,
    update_fuzzel_colors,
)
from labwcchanger.errors import SchemeNotFoundError

GRUVBOX_SCHEME = """\
# vim:ft=kitty

## name: Gruvbox Dark
## author: Pavel Pertsev
## license: MIT/X11

foreground              #ebdbb2
background              #282828
selection_foreground    #928374
selection_background    #ebdbb2
cursor                  #ebdbb2

active_border_color     #d79921
inactive_tab_background #3c3836
inactive_tab_foreground #a89984

color4   #458588
color8   #928374
color12  #83a598
"""


class TestParseSchemeColors:
    def test_reads_key_hex_pairs_uppercase(self):
        colors = parse_scheme_colors(GRUVBOX_SCHEME)
        assert colors["foreground"] == "EBDBB2"
        assert colors["color4"] == "458588"

    def test_ignores_comments_and_blank_lines(self):
        colors = parse_scheme_colors("# background #111111\n\n   \nbackground #222222\n")
        assert colors == {"background": "222222"}

    def test_last_occurrence_wins(self):
        colors = parse_scheme_colors("color1 #aa0000\ncolor1 #bb0000\n")
        assert colors == {"color1": "BB0000"}

    def test_rejects_short_or_non_hex_values(self):
        colors = parse_scheme_colors("color1 #abc\ncolor2 red\nfont_family Fira Code\n")
        assert colors == {}


class TestParseSchemeMeta:
    def test_reads_name_and_author(self):
        assert parse_scheme_meta(GRUVBOX_SCHEME, "name") == "Gruvbox Dark"
        assert parse_scheme_meta(GRUVBOX_SCHEME, "author") == "Pavel Pertsev"

    def test_missing_key(self):
        assert parse_scheme_meta("background #000000\n", "author") == ""


class TestDerivePalette:
    def test_full_scheme(self):
        palette = derive_palette(GRUVBOX_SCHEME, "Gruvbox Dark")
        assert palette.base05 == "ebdbb2"
        assert palette.base00 == "282828"
        assert palette.base01 == "3c3836"
        assert palette.base03 == "a89984"
        assert palette.base06 == "928374"
        assert palette.base0D == "458588"
        assert palette.scheme_author == "Pavel Pertsev"

    def test_background_only_falls_back_to_white_foreground(self):
        palette = derive_palette("background #1D2021\n", "Minimal")
        assert palette.base05 == "ffffff"
        assert palette.base00 == "1d2021"
        assert palette.base01 == "1d2021"
        assert palette.base03 == "ffffff"
        assert palette.base06 == "ffffff"
        assert palette.base0D == "ffffff"

    def test_empty_scheme_uses_literals(self):
        palette = derive_palette("", "Nothing")
        assert palette.base00 == "000000"
        assert palette.base05 == "ffffff"
        assert palette.scheme_name == "Nothing"
        assert palette.scheme_author == "unknown"

    def test_cursor_used_when_foreground_missing(self):
        palette = derive_palette("cursor #C0FFEE\n", "Cursor")
        assert palette.base05 == "c0ffee"
        assert palette.base06 == "c0ffee"

    def test_selection_background_before_background(self):
        palette = derive_palette("background #000001\nselection_background #000002\n", "Sel")
        assert palette.base01 == "000002"

    def test_accent_chain(self):
        assert derive_palette("active_border_color #111111\ncolor12 #222222\n", "A").base0D == "111111"
        assert derive_palette("color12 #222222\n", "B").base0D == "222222"

    def test_muted_foreground_uses_color8(self):
        assert derive_palette("foreground #eeeeee\ncolor8 #555555\n", "M").base03 == "555555"


class TestRenderFuzzelColors:
    def test_exact_output(self):
        rendered = render_fuzzel_colors(derive_palette(GRUVBOX_SCHEME, "ignored"))
        assert rendered == (
            "## Gruvbox Dark theme\n"
            "## by Pavel Pertsev\n"
            "\n"
            "[colors]\n"
            "background=3c3836f2\n"
            "text=ebdbb2ff\n"
            "match=458588ff\n"
            "selection=a89984ff\n"
            "selection-text=928374ff\n"
            "selection-match=458588ff\n"
            "border=458588ff\n"
        )

    def test_idempotent(self):
        first = render_fuzzel_colors(derive_palette(GRUVBOX_SCHEME, "Gruvbox Dark"))
        second = render_fuzzel_colors(derive_palette(GRUVBOX_SCHEME, "Gruvbox Dark"))
        assert first == second


class TestUpdateFuzzelColors:
    def test_writes_ini_and_creates_parent(self, tmp_path):
        schemes = tmp_path / "kitty"
        schemes.mkdir()
        (schemes / "Gruvbox Dark.conf").write_text(GRUVBOX_SCHEME, encoding="utf-8")
        target = tmp_path / "config" / "fuzzel" / "fuzzel.ini"

        written = update_fuzzel_colors("Gruvbox Dark", schemes_dir=schemes, fuzzel_path=target)

        assert written == target
        content = target.read_text(encoding="utf-8")
        assert content.startswith("## Gruvbox Dark theme\n")
        assert "border=458588ff" in content

    def test_missing_scheme_writes_nothing(self, tmp_path):
        schemes = tmp_path / "kitty"
        schemes.mkdir()
        target = tmp_path / "fuzzel" / "fuzzel.ini"

        with pytest.raises(SchemeNotFoundError):
            update_fuzzel_colors("Nope", schemes_dir=schemes, fuzzel_path=target)
        assert not target.exists()
        assert not target.parent.exists()
