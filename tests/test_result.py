"""
Tests for the Success/Failure result type.
"""

import pytest

from character_catalog.entities import Failure, Success
from character_catalog.errors import CatalogError, HttpStatusError, NotFoundError


def test_success_accessors():
    result = Success(41)

    assert result.is_success and not result.is_failure
    assert result.unwrap() == 41
    assert result.map(lambda v: v + 1) == Success(42)
    assert result.fold(lambda v: f"ok {v}", lambda e: "err") == "ok 41"


def test_failure_accessors():
    error = NotFoundError("Character not found")
    result = Failure(error)

    assert result.is_failure and not result.is_success
    assert result.map(lambda v: v + 1) is result
    assert result.fold(lambda v: "ok", lambda e: e.message) == "HTTP 404: Character not found"
    with pytest.raises(NotFoundError):
        result.unwrap()


def test_not_found_is_an_http_status_error():
    error = NotFoundError()

    assert isinstance(error, HttpStatusError)
    assert isinstance(error, CatalogError)
    assert error.status_code == 404
    assert str(error) == "HTTP 404: Not Found"
