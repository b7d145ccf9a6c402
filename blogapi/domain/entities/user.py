"""User domain entity - pure business logic, no infrastructure."""

from dataclasses import dataclass, field
from typing import Optional

from blogapi.domain.entities.preference import Preference
from blogapi.domain.exceptions import InvalidEntityStateException, BusinessRuleViolationException


@dataclass
class PersonName:
    """First and last name of a user."""

    first: str
    last: str


@dataclass
class User:
    """
    User domain entity representing an author/reader account.

    This is a pure Python class with NO dependencies on motor,
    FastAPI, or any framework. It contains business rules and validations.
    """

    username: str
    name: PersonName
    email: str
    password_hash: str
    preferences: list[Preference] = field(default_factory=list)
    id: Optional[str] = None

    def __post_init__(self):
        """
        Validate entity invariants at construction time.

        These are structural validations - they ensure the entity can exist
        in a valid state. Violations indicate the entity cannot be created.
        """
        if not self.username or len(self.username.strip()) == 0:
            raise InvalidEntityStateException("Username cannot be empty.")

        if not self.name.first or not self.name.last:
            raise InvalidEntityStateException(
                "User must have both a first and a last name."
            )

        if not self.email or "@" not in self.email:
            raise InvalidEntityStateException(
                f"Invalid email address: '{self.email}'. Email must contain '@' symbol."
            )

        if not self.password_hash:
            raise InvalidEntityStateException(
                "Password hash is required. User cannot exist without authentication credentials."
            )

        self.preferences = [Preference(p) for p in self.preferences]

    def change_username(self, new_username: str) -> None:
        """
        Change the username.

        Raises:
            BusinessRuleViolationException: If the username is empty
        """
        if not new_username or len(new_username.strip()) == 0:
            raise BusinessRuleViolationException("Cannot change username to empty value.")

        self.username = new_username

    def change_name(self, first: str | None = None, last: str | None = None) -> None:
        """
        Change one or both name parts; a part left as None is kept.

        Raises:
            BusinessRuleViolationException: If a provided part is empty
        """
        if first is not None:
            if len(first.strip()) == 0:
                raise BusinessRuleViolationException("Cannot change first name to empty value.")
            self.name.first = first

        if last is not None:
            if len(last.strip()) == 0:
                raise BusinessRuleViolationException("Cannot change last name to empty value.")
            self.name.last = last

    def change_email(self, new_email: str) -> None:
        """
        Change user's email with validation.

        Business rule: Email must be valid format.

        Args:
            new_email: The new email to set

        Raises:
            BusinessRuleViolationException: If email is invalid
        """
        if not new_email or "@" not in new_email:
            raise BusinessRuleViolationException(
                f"Cannot change email to invalid address: '{new_email}'. Email must contain '@' symbol."
            )

        self.email = new_email

    def change_preferences(self, preferences: list[Preference]) -> None:
        """Replace the preference set."""
        self.preferences = [Preference(p) for p in preferences]
