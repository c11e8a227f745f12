"""Tests for wren.errors — exception hierarchy and error messages."""

import pytest

from wren.errors import (
    ConfigurationError,
    HeadersAlreadySent,
    ResponseError,
    ResponseFinished,
    WrenError,
)


class TestHierarchy:
    def test_configuration_error_is_wren_error(self) -> None:
        assert issubclass(ConfigurationError, WrenError)

    def test_response_errors(self) -> None:
        assert issubclass(ResponseError, WrenError)
        assert issubclass(HeadersAlreadySent, ResponseError)
        assert issubclass(ResponseFinished, ResponseError)

    def test_catchable_as_wren_error(self) -> None:
        with pytest.raises(WrenError):
            raise HeadersAlreadySent


class TestMessages:
    def test_headers_already_sent_default(self) -> None:
        assert str(HeadersAlreadySent()) == "Cannot modify headers after headers have been sent."

    def test_headers_already_sent_action(self) -> None:
        err = HeadersAlreadySent("write the status line")
        assert str(err) == "Cannot write the status line after headers have been sent."

    def test_response_finished(self) -> None:
        assert str(ResponseFinished()) == "Cannot write to a response after end()."
