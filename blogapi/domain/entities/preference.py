"""Preference vocabulary shared by user preferences and blog tags."""

from enum import StrEnum


class Preference(StrEnum):
    """Fixed set of category tags.

    Users pick at least three of these at signup; blogs are tagged with
    any subset. Recommendations match the two sets against each other.
    """

    TECH = "tech"
    SCIENCE = "science"
    MUSIC = "music"
    ART = "art"
    TRAVEL = "travel"
    FOOD = "food"
    SPORTS = "sports"
    HEALTH = "health"
    FASHION = "fashion"
    BUSINESS = "business"
    POLITICS = "politics"
    EDUCATION = "education"
    ENTERTAINMENT = "entertainment"
    LIFESTYLE = "lifestyle"
    GAMING = "gaming"
    BOOKS = "books"

    @classmethod
    def values(cls) -> list[str]:
        """All vocabulary values in declaration order."""
        return [member.value for member in cls]
