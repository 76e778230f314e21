"""Style tables and resolution of a style into per-category selections."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Mapping, Sequence

import yaml

from labwcchanger.core.matcher import best_match
from labwcchanger.core.selection import SelectionBundle
from labwcchanger.runtime_paths import builtin_styles_path

logger = logging.getLogger(__name__)


class StyleTableError(ValueError):
    """Raised when a style table file fails validation."""


@dataclass(frozen=True, slots=True)
class StyleDefinition:
    """A user-facing style and its two keyword sets."""

    label: str
    detect_keywords: tuple[str, ...]
    apply_keywords: tuple[str, ...]


class StyleTable:
    """Read-only mapping of style label to its definition."""

    def __init__(self, styles: Iterable[StyleDefinition]) -> None:
        self._styles: dict[str, StyleDefinition] = {}
        for style in styles:
            self._styles[style.label] = style

    def __contains__(self, label: object) -> bool:
        return label in self._styles

    def __iter__(self):
        return iter(self._styles.values())

    def __len__(self) -> int:
        return len(self._styles)

    def get(self, label: str) -> StyleDefinition | None:
        return self._styles.get(label)

    def labels(self) -> list[str]:
        return list(self._styles)

    def merged(self, overrides: StyleTable) -> StyleTable:
        """Return a new table where entries of ``overrides`` replace same-label entries."""
        combined = dict(self._styles)
        combined.update({style.label: style for style in overrides})
        return StyleTable(combined.values())


def parse_style_table(data: object, *, source: str = "<styles>") -> StyleTable:
    """Validate decoded YAML data into a StyleTable."""
    if data is None:
        return StyleTable([])
    if not isinstance(data, Mapping):
        raise StyleTableError(f"{source}: expected a mapping of style labels")

    styles: list[StyleDefinition] = []
    for label, entry in data.items():
        if not isinstance(label, str) or not label.strip():
            raise StyleTableError(f"{source}: style labels must be non-empty strings")
        if not isinstance(entry, Mapping):
            raise StyleTableError(f"{source}: style {label!r} must be a mapping")
        unknown = sorted(str(key) for key in entry if key not in {"detect", "apply"})
        if unknown:
            raise StyleTableError(
                f"{source}: style {label!r} has unsupported keys: {', '.join(unknown)}"
            )
        styles.append(
            StyleDefinition(
                label=label.strip(),
                detect_keywords=_keyword_list(entry, "detect", label, source),
                apply_keywords=_keyword_list(entry, "apply", label, source),
            )
        )
    return StyleTable(styles)


def _keyword_list(entry: Mapping, key: str, label: str, source: str) -> tuple[str, ...]:
    raw = entry.get(key)
    if not isinstance(raw, list) or not raw:
        raise StyleTableError(f"{source}: style {label!r} needs a non-empty {key!r} list")
    keywords: list[str] = []
    for item in raw:
        if not isinstance(item, str) or not item.strip():
            raise StyleTableError(f"{source}: style {label!r} has an invalid {key!r} keyword")
        keywords.append(item.strip())
    return tuple(keywords)


def load_style_table(path: Path | None = None, user_path: Path | None = None) -> StyleTable:
    """Load the bundled style table, with an optional user table merged on top.

    A broken user table is logged and ignored; a broken bundled table raises.
    """
    source = path or builtin_styles_path()
    try:
        data = yaml.safe_load(source.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as exc:
        raise StyleTableError(f"Unable to read style table {source}: {exc}") from exc
    table = parse_style_table(data, source=str(source))

    if user_path is not None and user_path.exists():
        try:
            user_data = yaml.safe_load(user_path.read_text(encoding="utf-8"))
            table = table.merged(parse_style_table(user_data, source=str(user_path)))
        except (OSError, yaml.YAMLError, StyleTableError) as exc:
            logger.warning("ignoring user style table %s: %s", user_path, exc)
    return table


_default_table: StyleTable | None = None


def default_style_table() -> StyleTable:
    """The bundled style table, loaded on first use."""
    global _default_table
    if _default_table is None:
        _default_table = load_style_table()
    return _default_table


def _detection_threshold(keywords: Sequence[str]) -> int:
    return 1 if len(keywords) == 1 else 2


def _any_item_matches(items: Iterable[str], keywords: Sequence[str], min_count: int) -> bool:
    lowered_keywords = [keyword.lower() for keyword in keywords]
    for item in items:
        lowered = item.lower()
        count = sum(1 for keyword in lowered_keywords if keyword in lowered)
        if count >= min_count:
            return True
    return False


def available_styles(
    gtk_themes: Iterable[str],
    wallpapers: Iterable[str],
    table: StyleTable | None = None,
) -> list[str]:
    """Return the labels of styles realizable with the installed assets, sorted."""
    if table is None:
        table = default_style_table()
    gtk_list = list(gtk_themes)
    wall_list = list(wallpapers)
    offered: set[str] = set()
    for style in table:
        keywords = style.detect_keywords
        has_gtk = _any_item_matches(gtk_list, keywords, _detection_threshold(keywords))
        has_wall = _any_item_matches(wall_list, keywords, 1)
        if has_gtk or has_wall:
            offered.add(style.label)
    return sorted(offered)


def apply_keywords_for(style: str, table: StyleTable | None = None) -> tuple[str, ...]:
    """Application keywords of ``style``; unknown styles match on their own label."""
    if table is None:
        table = default_style_table()
    definition = table.get(style)
    if definition is None or not definition.apply_keywords:
        return (style.lower(),)
    return definition.apply_keywords


def apply_style(
    style: str,
    wm_themes: Sequence[str],
    gtk_themes: Sequence[str],
    icon_themes: Sequence[str],
    terminal_schemes: Sequence[str],
    wallpapers: Sequence[str],
    table: StyleTable | None = None,
) -> SelectionBundle:
    """Resolve a style into one best match per category; unmatched slots stay empty."""
    keywords = apply_keywords_for(style, table)
    return SelectionBundle(
        wm_theme=best_match(wm_themes, keywords),
        gtk_theme=best_match(gtk_themes, keywords),
        icon_theme=best_match(icon_themes, keywords),
        terminal_scheme=best_match(terminal_schemes, keywords),
        wallpaper=best_match(wallpapers, keywords),
    )
