"""Tests for funcstack.errors — exception hierarchy and messages."""

from funcstack.errors import (
    FuncstackError,
    InvalidExportNameError,
    ManifestError,
    ParamValueError,
)


class TestHierarchy:
    def test_manifest_error_is_funcstack_error(self) -> None:
        assert issubclass(ManifestError, FuncstackError)
        assert issubclass(InvalidExportNameError, ManifestError)

    def test_param_value_error_is_value_error(self) -> None:
        assert issubclass(ParamValueError, FuncstackError)
        assert issubclass(ParamValueError, ValueError)


class TestInvalidExportNameError:
    def test_top_level_message(self) -> None:
        err = InvalidExportNameError("send-mail")
        assert err.name == "send-mail"
        assert str(err).startswith("Function name 'send-mail' contains a dash.")

    def test_group_is_named(self) -> None:
        err = InvalidExportNameError("send-mail", "jobs-email-")
        assert err.prefix == "jobs-email-"
        assert "(in group 'jobs-email')" in str(err)
