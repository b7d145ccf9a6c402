"""Reusable constrained field types for request DTOs.

Every string is trimmed before its length is checked. Username and email
are also lower-cased. Custom errors carry the messages returned to clients,
so the first failing check of a request is reported verbatim.
"""

from typing import Annotated

from pydantic import AfterValidator, BeforeValidator, EmailStr
from pydantic_core import PydanticCustomError

from blogapi.domain.entities.preference import Preference


def strip_whitespace(v: object) -> object:
    """Strip whitespace from string values."""
    return v.strip() if isinstance(v, str) else v


def strip_and_lower(v: object) -> object:
    """Strip whitespace and lower-case string values."""
    return v.strip().lower() if isinstance(v, str) else v


def length_between(
    min_length: int,
    max_length: int | None,
    too_short: str,
    too_long: str = "",
) -> AfterValidator:
    """Build a length check that reports the given messages."""

    def check(value: str) -> str:
        if len(value) < min_length:
            raise PydanticCustomError("string_too_short", too_short)
        if max_length is not None and len(value) > max_length:
            raise PydanticCustomError("string_too_long", too_long)
        return value

    return AfterValidator(check)


PREFERENCE_CHOICES_MESSAGE = "Preferences must be one of the following: " + ", ".join(
    Preference.values()
)


def parse_preference(value: object) -> Preference:
    """Accept only vocabulary values."""
    if isinstance(value, Preference):
        return value
    if isinstance(value, str) and value in Preference.values():
        return Preference(value)
    raise PydanticCustomError("enum", PREFERENCE_CHOICES_MESSAGE)


def unique_in_order(values: list[Preference]) -> list[Preference]:
    """Drop repeated tags, keeping the first occurrence."""
    return list(dict.fromkeys(values))


def at_least_three(values: list[Preference]) -> list[Preference]:
    if len(values) < 3:
        raise PydanticCustomError("too_short", "At least 3 preferences must be selected")
    return values


PreferenceItem = Annotated[Preference, BeforeValidator(parse_preference)]

Username = Annotated[
    str,
    BeforeValidator(strip_and_lower),
    length_between(
        1, 30, "username cannot be empty", "username cannot be more than 30 characters long"
    ),
]

FirstName = Annotated[
    str,
    BeforeValidator(strip_whitespace),
    length_between(
        1, 50, "first-name cannot be empty", "first-name cannot have more than 50 characters."
    ),
]

LastName = Annotated[
    str,
    BeforeValidator(strip_whitespace),
    length_between(
        1, 50, "last-name cannot be empty", "last-name cannot have more than 50 characters."
    ),
]

Password = Annotated[
    str,
    BeforeValidator(strip_whitespace),
    length_between(6, None, "Password must be 6 or more characters long"),
]

Email = Annotated[
    EmailStr,
    BeforeValidator(strip_and_lower),
    length_between(
        6, 30, "email-ID must be 6 or more characters", "email-ID can not have more than 30 characters"
    ),
]

Preferences = Annotated[
    list[PreferenceItem],
    AfterValidator(unique_in_order),
    AfterValidator(at_least_three),
]

Tags = Annotated[list[PreferenceItem], AfterValidator(unique_in_order)]

BlogTitle = Annotated[
    str,
    BeforeValidator(strip_whitespace),
    length_between(1, None, "blog title can not be empty"),
]

BlogBody = Annotated[
    str,
    BeforeValidator(strip_whitespace),
    length_between(1, None, "blog body can not be empty"),
]

CommentText = Annotated[
    str,
    BeforeValidator(strip_whitespace),
    length_between(
        1, 1000, "comment can not be empty", "comment cannot have more than 1000 characters"
    ),
]

FilterText = Annotated[
    str,
    BeforeValidator(strip_whitespace),
    length_between(0, 50, "", "Filter must be 50 or fewer characters long"),
]
