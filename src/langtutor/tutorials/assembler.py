"""
Tutorial assembly.

Public entry point composing classification, provider resolution and
section rendering into a complete Tutorial.
"""

import logging
from collections.abc import Callable
from contextlib import nullcontext
from typing import Any

from langtutor.config import get_settings
from langtutor.core.logging import LogContext, get_logger, log_operation
from langtutor.core.models import SectionSpec, Tutorial
from langtutor.core.types import Category
from langtutor.tutorials.classifier import classify_with_rule
from langtutor.tutorials.renderer import render
from langtutor.tutorials.resolver import resolve_specs

logger = get_logger(__name__)

SpecResolver = Callable[[str, Category, str], list[SectionSpec]]


def default_description(language_name: str) -> str:
    return f"Complete {language_name} tutorial from basics to a mini project"


class TutorialGenerator:
    """Builds tutorials for any language identifier."""

    def __init__(self, resolver: SpecResolver | None = None):
        """
        Initialize the generator.

        Args:
            resolver: Callable returning specs for (identifier, category,
                display name). Defaults to the bundled content providers.
        """
        self.resolver = resolver or resolve_specs

    def classify(self, language_id: str) -> Category:
        category, _ = classify_with_rule(language_id)
        return category

    def generate(
        self,
        language_id: str,
        language_name: str,
        icon: str,
        description: str | None = "",
    ) -> Tutorial:
        """
        Generate a complete tutorial.

        Args:
            language_id: Free-form identifier used for classification
            language_name: Display name used verbatim in titles and prose
            icon: Opaque icon identifier, passed through
            description: Optional override; empty or None uses the default

        Returns:
            Tutorial with one section per lesson
        """
        verbose = get_settings().tutorial.log_generation
        timed = (
            log_operation(logger, f"tutorial generation for {language_id!r}", level=logging.DEBUG)
            if verbose
            else nullcontext()
        )
        with LogContext(language_id=language_id), timed:
            category, rule = classify_with_rule(language_id)
            if verbose:
                logger.debug(
                    f"Classified {language_id!r} as {category.value} (rule={rule})",
                    extra={"language_id": language_id, "category": category.value},
                )

            specs = self.resolver(language_id, category, language_name)
            sections = render(language_name, specs)
            if verbose:
                logger.debug(
                    f"Rendered {len(sections)} sections for {language_name!r}",
                    extra={"language_id": language_id, "section_count": len(sections)},
                )

        return Tutorial(
            title=f"Master {language_name}",
            description=description or default_description(language_name),
            icon=icon,
            sections=sections,
        )

    def to_dict(self, tutorial: Tutorial) -> dict[str, Any]:
        """Serialize a tutorial using the camelCase field names renderers expect."""
        return tutorial.model_dump(by_alias=True)


def generate_comprehensive_tutorial(
    language_id: str,
    language_name: str,
    icon: str,
    description: str | None = "",
) -> Tutorial:
    """
    Generate a tutorial for a language or technology.

    Example:
        >>> tutorial = generate_comprehensive_tutorial("css", "CSS", "css-icon", "")
        >>> tutorial.sections[0].title
        'CSS HOME'
    """
    return TutorialGenerator().generate(language_id, language_name, icon, description)
