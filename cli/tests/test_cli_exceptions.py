"""Tests for CLI error types and error display."""
# Copyright (c) 2026 Crashwise
#
# Licensed under the MIT License. See the LICENSE file for details.

from pathlib import Path
from unittest.mock import Mock, patch

import pytest
import typer

from dashapi.exceptions import DashboardError, TransportError, from_http_error


class TestErrorTypes:
    def test_cli_error_inherits_sdk(self):
        from dashapi_cli.exceptions import DashapiCLIError

        error = DashapiCLIError("test message", hint="test hint", exit_code=3)

        assert isinstance(error, DashboardError)
        assert error.message == "test message"
        assert error.exit_code == 3
        assert str(error) == "test message\nHint: test hint"

    def test_cli_error_without_hint(self):
        from dashapi_cli.exceptions import DashapiCLIError

        error = DashapiCLIError("plain")

        assert str(error) == "plain"
        assert error.exit_code == 1

    @pytest.mark.parametrize(
        "original, hint",
        [
            (FileNotFoundError("gone"), "exists"),
            (PermissionError("denied"), "permissions"),
        ],
    )
    def test_file_operation_hints(self, original, hint):
        from dashapi_cli.exceptions import FileOperationError

        error = FileOperationError("read", Path("/tmp/log"), original)

        assert hint in error.hint
        assert error.original_exception is original
        assert "read" in error.message

    def test_file_operation_other_error(self):
        from dashapi_cli.exceptions import FileOperationError

        error = FileOperationError("read", Path("/tmp/log"), IsADirectoryError("dir"))

        assert error.hint is None


class TestHandleErrors:
    def test_passes_through_result(self):
        from dashapi_cli.exceptions import handle_errors

        @handle_errors
        def command(value):
            return value * 2

        assert command(21) == 42

    def test_cli_error_uses_exit_code(self):
        from dashapi_cli.exceptions import DashapiCLIError, handle_errors

        @handle_errors
        def command():
            raise DashapiCLIError("bad input", exit_code=2)

        with patch("dashapi_cli.exceptions.console", Mock()):
            with pytest.raises(typer.Exit) as exc_info:
                command()

        assert exc_info.value.exit_code == 2

    def test_sdk_error_exits_with_one(self):
        from dashapi_cli.exceptions import handle_errors

        @handle_errors
        def command():
            raise TransportError("http request failed: connection refused")

        with patch("dashapi_cli.exceptions.console", Mock()):
            with pytest.raises(typer.Exit) as exc_info:
                command()

        assert exc_info.value.exit_code == 1

    def test_other_errors_propagate(self):
        from dashapi_cli.exceptions import handle_errors

        @handle_errors
        def command():
            raise ValueError("bug")

        with pytest.raises(ValueError):
            command()

    def test_keeps_signature(self):
        from dashapi_cli.exceptions import handle_errors

        def command(name: str = typer.Argument(...)):
            """Doc."""

        wrapped = handle_errors(command)

        assert wrapped.__name__ == "command"
        assert wrapped.__doc__ == "Doc."
        assert wrapped.__wrapped__ is command


class TestShowError:
    def test_shows_suggested_fixes(self):
        from dashapi_cli.exceptions import show_error

        error = from_http_error(404, "Not Found", "no such method", "https://d/api", "upload_build")
        console = Mock()

        with patch("dashapi_cli.exceptions.console", console):
            show_error(error)

        printed = " ".join(str(call.args[0]) for call in console.print.call_args_list)
        assert "Suggested fixes" in printed
        assert "dashboard address" in printed

    def test_verbose_shows_context(self):
        from dashapi_cli.exceptions import show_error

        error = from_http_error(500, "Internal Server Error", "boom", "https://d/api", "poll")
        console = Mock()

        with patch("dashapi_cli.exceptions.console", console):
            show_error(error, verbose=True)

        printed = " ".join(str(call.args[0]) for call in console.print.call_args_list)
        assert "Detailed context" in printed

    def test_hint_is_printed(self):
        from dashapi_cli.exceptions import DashapiCLIError, show_error

        console = Mock()

        with patch("dashapi_cli.exceptions.console", console):
            show_error(DashapiCLIError("oops", hint="try again"))

        printed = " ".join(str(call.args[0]) for call in console.print.call_args_list)
        assert "try again" in printed
