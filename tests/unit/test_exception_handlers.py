"""Unit tests for the exception-to-response translation."""

import json

import pytest
from pymongo.errors import DuplicateKeyError

from blogapi.application.exceptions import (
    BlogNotFoundError,
    InvalidAuthorizationHeaderError,
    InvalidTokenError,
    UserAlreadyExistsError,
)
from blogapi.presentation.error_codes import get_error_category, get_http_status_for_error_code
from blogapi.presentation.exception_handlers import (
    application_error_handler,
    duplicate_key_error_handler,
    error_path,
)

pytestmark = pytest.mark.unit


def body(response) -> dict:
    return json.loads(response.body)


@pytest.mark.parametrize(
    ("loc", "expected"),
    [
        (("body", "username"), "username"),
        (("body", "name", "first"), "first.name"),
        (("body", "preferences", 2), "2.preferences"),
        (("query", "filter"), "filter"),
        (("body",), "body"),
    ],
)
def test_error_path(loc, expected):
    assert error_path(loc) == expected


def test_error_category_uses_status_phrase():
    assert get_error_category(400) == "Bad Request"
    assert get_error_category(401) == "Unauthorized"
    assert get_error_category(409) == "Conflict"


def test_unknown_error_code_defaults_to_bad_request():
    assert get_http_status_for_error_code("SOMETHING_NEW") == 400


@pytest.mark.asyncio
async def test_conflict_response_names_field():
    # Act
    response = await application_error_handler(None, UserAlreadyExistsError("username"))

    # Assert
    assert response.status_code == 409
    assert body(response) == {
        "success": False,
        "error": "Conflict",
        "message": "This username is already taken",
        "error_code": "USER_ALREADY_EXISTS",
        "field": "username",
    }


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("exc", "status_code"),
    [
        (InvalidAuthorizationHeaderError(), 400),
        (InvalidTokenError(), 401),
        (BlogNotFoundError(), 404),
    ],
)
async def test_application_errors_map_to_status(exc, status_code):
    response = await application_error_handler(None, exc)

    assert response.status_code == status_code
    assert body(response)["message"] == exc.message


@pytest.mark.asyncio
async def test_duplicate_key_on_email_is_reported_as_conflict():
    # Arrange
    exc = DuplicateKeyError(
        "E11000 duplicate key error",
        code=11000,
        details={"keyValue": {"email": "ada@example.com"}},
    )

    # Act
    response = await duplicate_key_error_handler(None, exc)

    # Assert
    assert response.status_code == 409
    assert body(response)["message"] == "This email address already exists"
    assert body(response)["field"] == "email"


@pytest.mark.asyncio
async def test_duplicate_key_on_title():
    exc = DuplicateKeyError("dup", code=11000, details={"keyValue": {"title": "x"}})

    response = await duplicate_key_error_handler(None, exc)

    assert body(response)["error_code"] == "BLOG_ALREADY_EXISTS"
