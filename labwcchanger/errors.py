"""Error codes and error handling utilities for LabWC Theme Changer."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path
from typing import Any

import yaml


class ErrorCode(Enum):
    """Standardized error codes for theme changer operations."""

    # File system errors
    FILE_NOT_FOUND = auto()
    FILE_ACCESS_DENIED = auto()
    FILE_CORRUPT = auto()
    DISK_FULL = auto()
    PATH_INVALID = auto()

    # Theme asset errors
    SCHEME_NOT_FOUND = auto()
    STYLE_TABLE_INVALID = auto()

    # External command errors
    COMMAND_NOT_FOUND = auto()
    COMMAND_FAILED = auto()

    # Operation errors
    OPERATION_FAILED = auto()


ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.FILE_NOT_FOUND: "The file was not found. It may have been moved or deleted.",
    ErrorCode.FILE_ACCESS_DENIED: "Access denied. Check file permissions or if the file is read-only.",
    ErrorCode.FILE_CORRUPT: "The file could not be parsed. It may be corrupt or incomplete.",
    ErrorCode.DISK_FULL: "The destination disk is full. Free up space and try again.",
    ErrorCode.PATH_INVALID: "The specified path is invalid or inaccessible.",

    ErrorCode.SCHEME_NOT_FOUND: "The terminal color scheme was not found in the kitty themes folder.",
    ErrorCode.STYLE_TABLE_INVALID: "The style table is invalid. Check styles.yaml for mistakes.",

    ErrorCode.COMMAND_NOT_FOUND: "A required program is not installed or not on PATH.",
    ErrorCode.COMMAND_FAILED: "An external command failed. See details for its output.",

    ErrorCode.OPERATION_FAILED: "Operation failed. See details for more information.",
}


@dataclass
class LabwcChangerError(Exception):
    """Base exception with error code and context."""

    code: ErrorCode
    message: str = ""
    path: Path | None = None
    details: dict[str, Any] = field(default_factory=dict)
    suggestion: str = ""

    def __post_init__(self) -> None:
        if not self.message:
            self.message = ERROR_MESSAGES.get(self.code, "An unexpected error occurred.")
        if not self.suggestion and self.code in ERROR_MESSAGES:
            self.suggestion = ERROR_MESSAGES[self.code]

    def __str__(self) -> str:
        parts = [self.message]
        if self.path:
            parts.append(f"\nFile: {self.path}")
        if self.details:
            details_str = " | ".join(f"{k}={v}" for k, v in self.details.items())
            parts.append(f"\nDetails: {details_str}")
        return "".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging or UI display."""
        return {
            "code": self.code.name,
            "message": self.message,
            "path": str(self.path) if self.path else None,
            "details": self.details,
            "suggestion": self.suggestion,
        }


@dataclass
class SchemeNotFoundError(LabwcChangerError):
    """Raised when a named kitty color scheme cannot be located."""

    code: ErrorCode = ErrorCode.SCHEME_NOT_FOUND
    scheme: str = ""

    def __post_init__(self) -> None:
        if not self.message and self.scheme:
            self.message = f"Kitty theme file not found: {self.scheme}"
        super().__post_init__()


def classify_exception(exc: Exception, path: Path | None = None) -> LabwcChangerError:
    """Classify a generic exception into a LabwcChangerError with appropriate code."""
    if isinstance(exc, LabwcChangerError):
        return exc

    exc_name = type(exc).__name__
    exc_str = str(exc).lower()

    if "FileNotFoundError" in exc_name or "no such file" in exc_str:
        return LabwcChangerError(ErrorCode.FILE_NOT_FOUND, path=path, details={"original": exc_str})
    if "PermissionError" in exc_name or "permission denied" in exc_str:
        return LabwcChangerError(ErrorCode.FILE_ACCESS_DENIED, path=path, details={"original": exc_str})
    if "no space left" in exc_str or "disk full" in exc_str:
        return LabwcChangerError(ErrorCode.DISK_FULL, path=path, details={"original": exc_str})
    if "IsADirectoryError" in exc_name or "NotADirectoryError" in exc_name:
        return LabwcChangerError(ErrorCode.PATH_INVALID, path=path, details={"original": exc_str})
    if isinstance(exc, (UnicodeDecodeError, yaml.YAMLError)) or "ParseError" in exc_name:
        return LabwcChangerError(ErrorCode.FILE_CORRUPT, path=path, details={"original": exc_str})
    if exc_name == "StyleTableError":
        return LabwcChangerError(ErrorCode.STYLE_TABLE_INVALID, message=str(exc), path=path)

    return LabwcChangerError(
        ErrorCode.OPERATION_FAILED,
        message=f"{exc_name}: {exc}",
        path=path,
        details={"original": exc_str},
    )


def format_error_for_user(error: LabwcChangerError | Exception) -> str:
    """Format an error for display to the user with actionable suggestions."""
    if isinstance(error, LabwcChangerError):
        parts = [error.message]
        if error.suggestion and error.suggestion != error.message:
            parts.append(f"\n\n{error.suggestion}")
        if error.path:
            parts.append(f"\n\nFile: {error.path.name}")
        return "".join(parts)

    classified = classify_exception(error)
    return format_error_for_user(classified)
