"""Derive fuzzel launcher colors from a kitty color scheme."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path

from labwcchanger import runtime_paths
from labwcchanger.core.scanner import resolve_scheme_file
from labwcchanger.errors import classify_exception

logger = logging.getLogger(__name__)

_COLOR_LINE_RE = re.compile(r"^([A-Za-z0-9_-]+)\s+#([0-9A-Fa-f]{6})")

WHITE = "FFFFFF"
BLACK = "000000"
DEFAULT_AUTHOR = "unknown"

BACKGROUND_ALPHA = "f2"
OPAQUE_ALPHA = "ff"


@dataclass(frozen=True, slots=True)
class Palette:
    """Six base16-style slots, lowercase hex without '#'."""

    base00: str  # background
    base01: str  # inactive surface
    base03: str  # muted foreground
    base05: str  # foreground
    base06: str  # selection text
    base0D: str  # accent
    scheme_name: str
    scheme_author: str


def parse_scheme_colors(text: str) -> dict[str, str]:
    """Map each ``key #RRGGBB`` line to its uppercase hex; later lines win."""
    colors: dict[str, str] = {}
    for line in text.splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        match = _COLOR_LINE_RE.match(stripped)
        if match:
            colors[match.group(1)] = match.group(2).upper()
    return colors


def parse_scheme_meta(text: str, key: str) -> str:
    """Return the value of a ``## key: value`` comment, or ""."""
    pattern = re.compile(rf"^##\s*{re.escape(key)}\s*:\s*(.+)$", re.MULTILINE)
    match = pattern.search(text)
    if match:
        return match.group(1).strip()
    return ""


def _first_non_blank(*values: str | None) -> str:
    for value in values:
        if value and value.strip():
            return value
    return ""


def derive_palette(text: str, theme_name: str) -> Palette:
    """Build the fuzzel palette from scheme text via ordered fallback chains."""
    colors = parse_scheme_colors(text)

    base05 = _first_non_blank(colors.get("foreground"), colors.get("cursor"), WHITE)
    base00 = _first_non_blank(colors.get("background"), BLACK)
    base01 = _first_non_blank(
        colors.get("inactive_tab_background"),
        colors.get("selection_background"),
        base00,
    )
    base03 = _first_non_blank(colors.get("inactive_tab_foreground"), colors.get("color8"), base05)
    base06 = _first_non_blank(colors.get("selection_foreground"), colors.get("foreground"), base05)
    base0D = _first_non_blank(
        colors.get("color4"),
        colors.get("active_border_color"),
        colors.get("color12"),
        base05,
    )

    return Palette(
        base00=base00.lower(),
        base01=base01.lower(),
        base03=base03.lower(),
        base05=base05.lower(),
        base06=base06.lower(),
        base0D=base0D.lower(),
        scheme_name=parse_scheme_meta(text, "name") or theme_name,
        scheme_author=parse_scheme_meta(text, "author") or DEFAULT_AUTHOR,
    )


def render_fuzzel_colors(palette: Palette) -> str:
    """Render the ``[colors]`` snippet written to fuzzel.ini."""
    lines = [
        f"## {palette.scheme_name} theme",
        f"## by {palette.scheme_author}",
        "",
        "[colors]",
        f"background={palette.base01}{BACKGROUND_ALPHA}",
        f"text={palette.base05}{OPAQUE_ALPHA}",
        f"match={palette.base0D}{OPAQUE_ALPHA}",
        f"selection={palette.base03}{OPAQUE_ALPHA}",
        f"selection-text={palette.base06}{OPAQUE_ALPHA}",
        f"selection-match={palette.base0D}{OPAQUE_ALPHA}",
        f"border={palette.base0D}{OPAQUE_ALPHA}",
        "",
    ]
    return "\n".join(lines)


def update_fuzzel_colors(
    theme_name: str,
    schemes_dir: Path | None = None,
    fuzzel_path: Path | None = None,
) -> Path:
    """Write fuzzel.ini colors derived from the named kitty scheme.

    Raises:
        SchemeNotFoundError: the scheme is missing; nothing is written.
        LabwcChangerError: the scheme could not be read or fuzzel.ini written.
    """
    scheme_path = resolve_scheme_file(theme_name, schemes_dir)
    try:
        content = scheme_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise classify_exception(exc, scheme_path) from exc

    rendered = render_fuzzel_colors(derive_palette(content, theme_name))

    target = fuzzel_path or runtime_paths.fuzzel_ini_path()
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(rendered, encoding="utf-8")
    except OSError as exc:
        raise classify_exception(exc, target) from exc
    logger.info("wrote fuzzel colors from %s to %s", scheme_path.name, target)
    return target
