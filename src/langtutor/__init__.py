"""
langtutor - structured tutorials for programming languages and technologies.

This package provides:

- Classification of free-form language identifiers into content categories
- Bundled lesson content for markup, styling, scripting, frameworks, mobile,
  backend, databases, ML, DevOps, blockchain, game development and security
- Rendering of lessons into Markdown tutorial sections
"""

__version__ = "1.0.0"

# Core models
from langtutor.core.models import SectionSpec, Tutorial, TutorialSection
from langtutor.core.types import Category

# Configuration
from langtutor.config import Settings, configure, get_settings

# Errors
from langtutor.exceptions import ContentError, LangTutorError, UnknownCategoryError

# Pipeline
from langtutor.tutorials import (
    TutorialGenerator,
    classify,
    generate_comprehensive_tutorial,
    render,
    resolve_specs,
)

__all__ = [
    "__version__",
    # Models
    "Category",
    "SectionSpec",
    "Tutorial",
    "TutorialSection",
    # Configuration
    "Settings",
    "configure",
    "get_settings",
    # Errors
    "LangTutorError",
    "UnknownCategoryError",
    "ContentError",
    # Pipeline
    "TutorialGenerator",
    "classify",
    "generate_comprehensive_tutorial",
    "render",
    "resolve_specs",
]
