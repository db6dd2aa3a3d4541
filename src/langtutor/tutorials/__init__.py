"""
Tutorial generation pipeline.

classify -> resolve_specs -> render -> Tutorial
"""

from langtutor.tutorials.assembler import (
    TutorialGenerator,
    default_description,
    generate_comprehensive_tutorial,
)
from langtutor.tutorials.classifier import (
    CLASSIFICATION_RULES,
    ClassificationRule,
    classify,
    classify_with_rule,
    normalize_identifier,
)
from langtutor.tutorials.renderer import (
    render,
    render_intro_content,
    render_section,
    render_standard_content,
)
from langtutor.tutorials.resolver import resolve_provider, resolve_specs

__all__ = [
    # Assembler
    "TutorialGenerator",
    "generate_comprehensive_tutorial",
    "default_description",
    # Classifier
    "CLASSIFICATION_RULES",
    "ClassificationRule",
    "classify",
    "classify_with_rule",
    "normalize_identifier",
    # Resolver
    "resolve_provider",
    "resolve_specs",
    # Renderer
    "render",
    "render_section",
    "render_intro_content",
    "render_standard_content",
]
