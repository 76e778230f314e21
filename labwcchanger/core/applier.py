"""Persist a selection into labwc, GTK, kitty and fuzzel, then notify running apps."""

from __future__ import annotations

import logging
import subprocess
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Sequence

from labwcchanger import runtime_paths
from labwcchanger.core.current import GNOME_INTERFACE_SCHEMA, theme_child
from labwcchanger.core.palette import update_fuzzel_colors
from labwcchanger.core.selection import SelectionBundle
from labwcchanger.errors import ErrorCode, LabwcChangerError, classify_exception

if TYPE_CHECKING:
    from labwcchanger.config.settings import AppSettings

logger = logging.getLogger(__name__)

GTK_THEME_PREFIX = "GTK_THEME="


@dataclass
class ApplyPaths:
    """Files touched by an apply run."""

    rc_path: Path = field(default_factory=runtime_paths.labwc_rc_path)
    env_path: Path = field(default_factory=runtime_paths.labwc_env_path)
    wallpaper_dir: Path = field(default_factory=runtime_paths.wallpaper_dir)
    kitty_themes_dir: Path = field(default_factory=runtime_paths.kitty_themes_dir)
    fuzzel_path: Path = field(default_factory=runtime_paths.fuzzel_ini_path)

    @classmethod
    def from_settings(cls, settings: AppSettings) -> ApplyPaths:
        """Use the same wallpaper and kitty folders discovery scanned."""
        return cls(
            wallpaper_dir=Path(settings.wallpaper_dir),
            kitty_themes_dir=Path(settings.kitty_themes_dir),
        )


@dataclass
class ApplyReport:
    """What an apply run did."""

    steps: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.warnings


def run_command(args: Sequence[str]) -> str:
    """Run a command to completion and return its combined output.

    Raises:
        LabwcChangerError: the program is missing or exits non-zero.
    """
    cmdline = " ".join(args)
    try:
        completed = subprocess.run(
            list(args),
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            check=False,
        )
    except FileNotFoundError as exc:
        raise LabwcChangerError(
            ErrorCode.COMMAND_NOT_FOUND,
            message=f"{args[0]} is not installed",
            details={"command": cmdline},
        ) from exc
    except OSError as exc:
        raise LabwcChangerError(
            ErrorCode.COMMAND_FAILED,
            message=f"{cmdline} failed: {exc}",
            details={"command": cmdline},
        ) from exc
    if completed.returncode != 0:
        raise LabwcChangerError(
            ErrorCode.COMMAND_FAILED,
            message=f"{cmdline} failed with exit code {completed.returncode}\n{completed.stdout}",
            details={"command": cmdline, "exit_code": completed.returncode},
        )
    return completed.stdout


def start_detached(args: Sequence[str]) -> None:
    """Start a long-running program without waiting for it."""
    try:
        subprocess.Popen(
            list(args),
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
    except OSError as exc:
        raise LabwcChangerError(
            ErrorCode.COMMAND_NOT_FOUND,
            message=f"Could not start {args[0]}: {exc}",
            details={"command": " ".join(args)},
        ) from exc


def _tolerate(report: ApplyReport, args: Sequence[str]) -> None:
    try:
        run_command(args)
    except LabwcChangerError as exc:
        logger.warning("ignored failure: %s", exc.message)
        report.warnings.append(exc.message.splitlines()[0])
    else:
        report.steps.append(" ".join(args))


def update_rc_xml(selection: SelectionBundle, rc_path: Path) -> bool:
    """Set the window theme and icon theme in labwc's rc.xml.

    Returns False when rc.xml does not exist.
    """
    if not rc_path.is_file():
        return False

    parser = ET.XMLParser(target=ET.TreeBuilder(insert_comments=True))
    try:
        tree = ET.parse(rc_path, parser=parser)
    except (OSError, ET.ParseError) as exc:
        raise classify_exception(exc, rc_path) from exc

    root = tree.getroot()
    if root.tag.startswith("{"):
        ET.register_namespace("", root.tag[1:].split("}", 1)[0])

    if selection.wm_theme:
        element = theme_child(root, "name")
        if element is not None:
            element.text = selection.wm_theme
    if selection.icon_theme:
        element = theme_child(root, "icon")
        if element is not None:
            element.text = selection.icon_theme

    ET.indent(tree, space="  ")
    try:
        tree.write(rc_path, encoding="utf-8", xml_declaration=True)
    except OSError as exc:
        raise classify_exception(exc, rc_path) from exc
    return True


def update_gsettings(selection: SelectionBundle) -> list[str]:
    changed: list[str] = []
    if selection.gtk_theme:
        run_command(["gsettings", "set", GNOME_INTERFACE_SCHEMA, "gtk-theme", selection.gtk_theme])
        changed.append("gtk-theme")
    if selection.icon_theme:
        run_command(["gsettings", "set", GNOME_INTERFACE_SCHEMA, "icon-theme", selection.icon_theme])
        changed.append("icon-theme")
    return changed


def update_environment(selection: SelectionBundle, env_path: Path) -> bool:
    """Rewrite GTK_THEME= lines in labwc's environment file.

    Returns False when nothing was done.
    """
    if not selection.gtk_theme or not env_path.is_file():
        return False
    try:
        lines = env_path.read_text(encoding="utf-8").splitlines()
    except (OSError, UnicodeDecodeError) as exc:
        raise classify_exception(exc, env_path) from exc

    out = [
        f"{GTK_THEME_PREFIX}{selection.gtk_theme}" if line.startswith(GTK_THEME_PREFIX) else line
        for line in lines
    ]
    try:
        env_path.write_text("\n".join(out) + "\n", encoding="utf-8")
    except OSError as exc:
        raise classify_exception(exc, env_path) from exc
    return True


def apply_kitty_theme(theme_name: str) -> bool:
    # kitten expects the theme name, not a file name
    name = theme_name.strip()
    suffix = Path(name).suffix
    if suffix:
        name = name[: -len(suffix)]
    if not name:
        return False
    run_command(["kitten", "themes", "--reload-in=all", name])
    return True


def apply_selection(selection: SelectionBundle, paths: ApplyPaths | None = None) -> ApplyReport:
    """Write every selected asset to its consumer and restart what needs it.

    Raises:
        LabwcChangerError: a required step failed; later steps are not run.
    """
    paths = paths or ApplyPaths()
    report = ApplyReport()

    if update_rc_xml(selection, paths.rc_path):
        report.steps.append(f"updated {paths.rc_path}")
    for key in update_gsettings(selection):
        report.steps.append(f"gsettings {key}")
    if update_environment(selection, paths.env_path):
        report.steps.append(f"updated {paths.env_path}")

    if selection.wallpaper:
        _tolerate(report, ["swww", "img", str(paths.wallpaper_dir / selection.wallpaper)])

    if selection.terminal_scheme:
        if apply_kitty_theme(selection.terminal_scheme):
            report.steps.append(f"kitty theme {selection.terminal_scheme}")
        target = update_fuzzel_colors(
            selection.terminal_scheme,
            schemes_dir=paths.kitty_themes_dir,
            fuzzel_path=paths.fuzzel_path,
        )
        report.steps.append(f"updated {target}")

    _tolerate(report, ["labwc", "-r"])
    # waybar only picks up GTK theme changes after a restart
    try:
        run_command(["pkill", "waybar"])
    except LabwcChangerError:
        logger.debug("waybar was not running")
    try:
        start_detached(["waybar"])
        report.steps.append("restarted waybar")
    except LabwcChangerError as exc:
        report.warnings.append(exc.message)

    logger.info("applied selection %s (%d steps)", selection, len(report.steps))
    return report
