"""Tests for wren.errors: exception hierarchy and error messages."""

import pytest

from wren.errors import (
    ChainError,
    ConfigurationError,
    ContinuationReused,
    HandlerContractError,
    HTTPError,
    NotFound,
    UnhandledChain,
    WrenError,
)


class TestHierarchy:
    def test_configuration_error_is_wren_error(self) -> None:
        assert issubclass(ConfigurationError, WrenError)

    def test_chain_faults_are_chain_errors(self) -> None:
        assert issubclass(UnhandledChain, ChainError)
        assert issubclass(ContinuationReused, ChainError)
        assert issubclass(HandlerContractError, ChainError)

    def test_chain_error_is_wren_error(self) -> None:
        assert issubclass(ChainError, WrenError)

    def test_http_error_is_not_a_chain_fault(self) -> None:
        assert issubclass(HTTPError, WrenError)
        assert not issubclass(HTTPError, ChainError)

    def test_not_found_is_http_error(self) -> None:
        assert issubclass(NotFound, HTTPError)


class TestHTTPError:
    def test_status_and_detail(self) -> None:
        err = HTTPError(status=400, detail="Bad abbreviation")
        assert err.status == 400
        assert err.detail == "Bad abbreviation"

    def test_str_is_detail(self) -> None:
        assert str(HTTPError(status=400, detail="Bad abbreviation")) == "Bad abbreviation"

    def test_str_without_detail(self) -> None:
        assert str(HTTPError(status=500)) == "500"

    def test_frozen(self) -> None:
        err = HTTPError(status=400)
        with pytest.raises(AttributeError):
            err.status = 500  # type: ignore[misc]


class TestNotFound:
    def test_defaults(self) -> None:
        err = NotFound()
        assert err.status == 404
        assert err.detail == "Not Found"

    def test_custom_detail(self) -> None:
        assert NotFound("No such state").detail == "No such state"


class TestUnhandledChain:
    def test_message_names_route_and_path(self) -> None:
        err = UnhandledChain("GET", "/states/OR", "/states/:abbreviation")
        assert err.pattern == "/states/:abbreviation"
        assert "/states/:abbreviation" in str(err)
        assert "/states/OR" in str(err)
        assert "GET" in str(err)
