"""Probe the currently active desktop theme settings."""

from __future__ import annotations

import subprocess
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from pathlib import Path

from labwcchanger import runtime_paths

GNOME_INTERFACE_SCHEMA = "org.gnome.desktop.interface"


@dataclass(frozen=True, slots=True)
class CurrentSettings:
    """Active theme names; "" when unknown."""

    gtk_theme: str = ""
    icon_theme: str = ""
    wm_theme: str = ""


def load_current_settings(rc_path: Path | None = None) -> CurrentSettings:
    return CurrentSettings(
        gtk_theme=read_gsetting(GNOME_INTERFACE_SCHEMA, "gtk-theme"),
        icon_theme=read_gsetting(GNOME_INTERFACE_SCHEMA, "icon-theme"),
        wm_theme=read_labwc_theme(rc_path),
    )


def read_gsetting(schema: str, key: str) -> str:
    """Return a gsettings string value without its quotes, or "" on failure."""
    try:
        completed = subprocess.run(
            ["gsettings", "get", schema, key],
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError:
        return ""
    if completed.returncode != 0:
        return ""
    return completed.stdout.strip("'\n ")


def _local_name(tag) -> str:
    # comments and processing instructions carry a factory, not a string
    if not isinstance(tag, str):
        return ""
    return tag.rsplit("}", 1)[-1]


def theme_child(root: ET.Element, child: str) -> ET.Element | None:
    """First ``<child>`` element whose parent is a ``<theme>`` element."""
    for parent in root.iter():
        if _local_name(parent.tag) != "theme":
            continue
        for element in parent:
            if _local_name(element.tag) == child:
                return element
    return None


def read_labwc_theme(rc_path: Path | None = None) -> str:
    """Return the labwc window theme name from rc.xml, or ""."""
    path = rc_path or runtime_paths.labwc_rc_path()
    if not path.is_file():
        return ""
    try:
        root = ET.parse(path).getroot()
    except (OSError, ET.ParseError):
        return ""
    element = theme_child(root, "name")
    if element is None:
        return ""
    return (element.text or "").strip()
