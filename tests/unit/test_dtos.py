"""Unit tests for request DTO validation.

Validation happens at the API boundary before anything reaches the
services. These tests pin the normalisation rules and the exact messages
clients receive.
"""

import pytest
from pydantic import ValidationError

from blogapi.application.dtos.auth_dto import LoginDTO
from blogapi.application.dtos.blog_dto import (
    CommentDTO,
    CreateBlogDTO,
    SearchFilterDTO,
    UpdateBlogDTO,
)
from blogapi.application.dtos.user_dto import CreateUserDTO, UpdateUserDTO
from blogapi.domain.entities.preference import Preference

pytestmark = pytest.mark.unit


def signup_payload(**overrides) -> dict:
    payload = {
        "username": "ada",
        "name": {"first": "Ada", "last": "Lovelace"},
        "password": "secret1",
        "email": "ada@example.com",
        "preferences": ["tech", "music", "art"],
    }
    payload.update(overrides)
    return payload


def first_error(exc_info) -> dict:
    return exc_info.value.errors()[0]


# === SIGNUP ===


def test_create_user_dto_valid():
    dto = CreateUserDTO(**signup_payload())

    assert dto.username == "ada"
    assert dto.name.first == "Ada"
    assert dto.preferences == [Preference.TECH, Preference.MUSIC, Preference.ART]


def test_create_user_dto_normalises_username_and_email():
    """Username and email are trimmed and lower-cased."""
    dto = CreateUserDTO(**signup_payload(username="  Ada  ", email=" ADA@Example.com "))

    assert dto.username == "ada"
    assert dto.email == "ada@example.com"


def test_create_user_dto_trims_before_length_check():
    """A whitespace-only name is empty after trimming."""
    with pytest.raises(ValidationError) as exc_info:
        CreateUserDTO(**signup_payload(name={"first": "   ", "last": "L"}))

    error = first_error(exc_info)
    assert error["loc"] == ("name", "first")
    assert error["msg"] == "first-name cannot be empty"


def test_create_user_dto_long_username():
    with pytest.raises(ValidationError) as exc_info:
        CreateUserDTO(**signup_payload(username="a" * 31))

    assert first_error(exc_info)["msg"] == "username cannot be more than 30 characters long"


def test_create_user_dto_username_at_limit_is_valid():
    assert CreateUserDTO(**signup_payload(username="a" * 30)).username == "a" * 30


def test_create_user_dto_short_password():
    with pytest.raises(ValidationError) as exc_info:
        CreateUserDTO(**signup_payload(password="12345"))

    error = first_error(exc_info)
    assert error["loc"] == ("password",)
    assert error["msg"] == "Password must be 6 or more characters long"


def test_create_user_dto_invalid_email():
    with pytest.raises(ValidationError) as exc_info:
        CreateUserDTO(**signup_payload(email="not-an-email"))

    assert first_error(exc_info)["loc"] == ("email",)


def test_create_user_dto_long_email():
    with pytest.raises(ValidationError) as exc_info:
        CreateUserDTO(**signup_payload(email="averyveryverylongname@example.com"))

    assert first_error(exc_info)["msg"] == "email-ID can not have more than 30 characters"


def test_create_user_dto_needs_three_preferences():
    with pytest.raises(ValidationError) as exc_info:
        CreateUserDTO(**signup_payload(preferences=["tech", "music"]))

    error = first_error(exc_info)
    assert error["loc"] == ("preferences",)
    assert error["msg"] == "At least 3 preferences must be selected"


def test_create_user_dto_duplicates_do_not_count_towards_three():
    with pytest.raises(ValidationError):
        CreateUserDTO(**signup_payload(preferences=["tech", "tech", "music"]))


def test_create_user_dto_unknown_preference_reports_index():
    with pytest.raises(ValidationError) as exc_info:
        CreateUserDTO(**signup_payload(preferences=["tech", "music", "knitting"]))

    error = first_error(exc_info)
    assert error["loc"] == ("preferences", 2)
    assert error["msg"].startswith("Preferences must be one of the following: tech, science")


def test_create_user_dto_reports_fields_in_declaration_order():
    """With several bad fields, username comes first."""
    with pytest.raises(ValidationError) as exc_info:
        CreateUserDTO(**signup_payload(username="", password="1"))

    assert first_error(exc_info)["loc"] == ("username",)


def test_create_user_dto_missing_field():
    payload = signup_payload()
    del payload["email"]

    with pytest.raises(ValidationError) as exc_info:
        CreateUserDTO(**payload)

    error = first_error(exc_info)
    assert error["loc"] == ("email",)
    assert error["type"] == "missing"


def test_validation_is_idempotent():
    """Validating normalised output again yields the same values."""
    dto = CreateUserDTO(**signup_payload(username=" ADA "))

    again = CreateUserDTO(**dto.model_dump())

    assert again == dto


# === LOGIN / UPDATE ===


def test_login_dto_normalises_email():
    dto = LoginDTO(email="  Ada@Example.COM", password="secret1")

    assert dto.email == "ada@example.com"


def test_update_user_dto_all_optional():
    dto = UpdateUserDTO()

    assert dto.username is None
    assert dto.name is None
    assert dto.preferences is None


def test_update_user_dto_partial_name():
    dto = UpdateUserDTO(name={"last": "  King "})

    assert dto.name is not None
    assert dto.name.first is None
    assert dto.name.last == "King"


def test_update_user_dto_preferences_still_need_three():
    with pytest.raises(ValidationError) as exc_info:
        UpdateUserDTO(preferences=["tech"])

    assert first_error(exc_info)["msg"] == "At least 3 preferences must be selected"


# === BLOG ===


def test_create_blog_dto_trims_title_and_body():
    dto = CreateBlogDTO(title="  Engines ", body=" Notes ", tags=["tech", "tech"])

    assert dto.title == "Engines"
    assert dto.body == "Notes"
    assert dto.tags == [Preference.TECH]


def test_create_blog_dto_empty_title():
    with pytest.raises(ValidationError) as exc_info:
        CreateBlogDTO(title="   ", body="Notes", tags=[])

    assert first_error(exc_info)["msg"] == "blog title can not be empty"


def test_create_blog_dto_requires_tags():
    with pytest.raises(ValidationError) as exc_info:
        CreateBlogDTO(title="Engines", body="Notes")

    assert first_error(exc_info)["loc"] == ("tags",)


def test_update_blog_dto_partial():
    dto = UpdateBlogDTO(body="New body")

    assert dto.title is None
    assert dto.body == "New body"


def test_comment_dto_rejects_blank():
    with pytest.raises(ValidationError) as exc_info:
        CommentDTO(comment="   ")

    assert first_error(exc_info)["msg"] == "comment can not be empty"


def test_filter_defaults_to_empty():
    assert SearchFilterDTO().filter == ""


def test_filter_is_trimmed():
    assert SearchFilterDTO(filter="  tech ").filter == "tech"


def test_filter_too_long():
    with pytest.raises(ValidationError) as exc_info:
        SearchFilterDTO(filter="x" * 51)

    assert first_error(exc_info)["msg"] == "Filter must be 50 or fewer characters long"


def test_filter_at_limit_is_valid():
    assert SearchFilterDTO(filter="x" * 50).filter == "x" * 50
