"""
Shared helpers for the bundled lesson tables.
"""

from collections.abc import Iterable, Mapping
from typing import Callable

from pydantic import ValidationError

from langtutor.core.models import SectionSpec
from langtutor.exceptions import ContentError

# A provider turns a display name into an ordered list of lesson records
Provider = Callable[[str], list[SectionSpec]]

NAME_TOKEN = "{name}"


def lessons(name: str, records: Iterable[Mapping[str, str]]) -> list[SectionSpec]:
    """
    Build SectionSpec models from raw lesson records.

    ``{name}`` in a record's title or description is replaced with the display
    name. Syntax, usage and code are copied as-is so that code samples keep
    their own braces.

    Args:
        name: Display name of the language or technology
        records: Ordered raw records with title/description/syntax/usage/code

    Returns:
        Ordered list of SectionSpec objects

    Raises:
        ContentError: If a record is missing a field or has a non-string value
    """
    specs: list[SectionSpec] = []
    for position, record in enumerate(records, start=1):
        data = dict(record)
        for key in ("title", "description"):
            if isinstance(data.get(key), str):
                data[key] = data[key].replace(NAME_TOKEN, name)
        try:
            specs.append(SectionSpec(**data))
        except ValidationError as e:
            raise ContentError(f"Lesson {position} ({data.get('title', '<untitled>')}) is invalid: {e}") from e
    return specs
