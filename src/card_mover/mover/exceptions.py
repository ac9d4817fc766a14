"""Custom exceptions for the Card Mover."""


class CardMoverError(Exception):
    """Base exception for Card Mover errors."""


class InvalidInputError(CardMoverError):
    """Issue input or payload cannot be interpreted."""


class ProjectNotFoundError(CardMoverError):
    """No project in the repository matches the search string."""


class ColumnNotFoundError(CardMoverError):
    """No column on the project matches the configured selector."""
