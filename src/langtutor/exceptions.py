"""
Exceptions for langtutor.
"""


class LangTutorError(Exception):
    """Base exception for langtutor errors."""

    pass


class UnknownCategoryError(LangTutorError, ValueError):
    """Raised when the resolver has no providers for a category value."""

    def __init__(self, category: object):
        self.category = category
        super().__init__(f"No content provider registered for category: {category!r}")


class ContentError(LangTutorError):
    """Raised when a bundled lesson record is malformed."""

    pass
