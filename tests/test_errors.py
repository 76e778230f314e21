"""Tests for labwcchanger.errors."""

import xml.etree.ElementTree as ET
from pathlib import Path

import yaml

from labwcchanger.core.styles import StyleTableError
from labwcchanger.errors import (
    ERROR_MESSAGES,
    ErrorCode,
    LabwcChangerError,
    SchemeNotFoundError,
    classify_exception,
    format_error_for_user,
)


class TestLabwcChangerError:
    def test_default_message_from_table(self):
        err = LabwcChangerError(ErrorCode.DISK_FULL)
        assert err.message == ERROR_MESSAGES[ErrorCode.DISK_FULL]

    def test_every_code_has_a_message(self):
        assert set(ERROR_MESSAGES) == set(ErrorCode)

    def test_str_includes_path_and_details(self):
        err = LabwcChangerError(
            ErrorCode.COMMAND_FAILED,
            message="labwc -r failed",
            path=Path("/tmp/rc.xml"),
            details={"exit_code": 1},
        )
        text = str(err)
        assert text.startswith("labwc -r failed")
        assert "File: /tmp/rc.xml" in text
        assert "exit_code=1" in text

    def test_to_dict(self):
        data = LabwcChangerError(ErrorCode.PATH_INVALID, path=Path("/x")).to_dict()
        assert data["code"] == "PATH_INVALID"
        assert data["path"] == "/x"


class TestSchemeNotFoundError:
    def test_message_names_scheme(self):
        err = SchemeNotFoundError(scheme="Nord")
        assert err.code is ErrorCode.SCHEME_NOT_FOUND
        assert err.message == "Kitty theme file not found: Nord"

    def test_is_a_labwcchanger_error(self):
        assert isinstance(SchemeNotFoundError(scheme="Nord"), LabwcChangerError)


class TestClassifyException:
    def test_passes_through_own_errors(self):
        err = LabwcChangerError(ErrorCode.COMMAND_FAILED)
        assert classify_exception(err) is err

    def test_file_not_found(self):
        err = classify_exception(FileNotFoundError("gone"), Path("/a"))
        assert err.code is ErrorCode.FILE_NOT_FOUND
        assert err.path == Path("/a")

    def test_permission(self):
        assert classify_exception(PermissionError("nope")).code is ErrorCode.FILE_ACCESS_DENIED

    def test_disk_full(self):
        exc = OSError(28, "No space left on device")
        assert classify_exception(exc).code is ErrorCode.DISK_FULL

    def test_directory_errors(self):
        assert classify_exception(IsADirectoryError("d")).code is ErrorCode.PATH_INVALID

    def test_xml_parse_error(self):
        try:
            ET.fromstring("<broken")
        except ET.ParseError as exc:
            assert classify_exception(exc).code is ErrorCode.FILE_CORRUPT

    def test_yaml_error(self):
        try:
            yaml.safe_load("a: [1, 2")
        except yaml.YAMLError as exc:
            assert classify_exception(exc).code is ErrorCode.FILE_CORRUPT

    def test_style_table_error(self):
        err = classify_exception(StyleTableError("styles.yaml: expected a mapping of style labels"))
        assert err.code is ErrorCode.STYLE_TABLE_INVALID
        assert err.message.startswith("styles.yaml")

    def test_unknown(self):
        err = classify_exception(ValueError("odd"))
        assert err.code is ErrorCode.OPERATION_FAILED
        assert err.message == "ValueError: odd"


class TestFormatErrorForUser:
    def test_includes_suggestion_and_file_name(self):
        err = LabwcChangerError(
            ErrorCode.FILE_CORRUPT,
            message="rc.xml is broken",
            path=Path("/home/u/.config/labwc/rc.xml"),
        )
        text = format_error_for_user(err)
        assert text.startswith("rc.xml is broken")
        assert ERROR_MESSAGES[ErrorCode.FILE_CORRUPT] in text
        assert text.endswith("File: rc.xml")

    def test_plain_exception_is_classified(self):
        text = format_error_for_user(PermissionError("denied"))
        assert text.startswith(ERROR_MESSAGES[ErrorCode.FILE_ACCESS_DENIED])
