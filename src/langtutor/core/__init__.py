"""
Core models, types and logging for langtutor.
"""

from langtutor.core.models import SectionSpec, Tutorial, TutorialSection
from langtutor.core.types import Category

__all__ = [
    "Category",
    "SectionSpec",
    "Tutorial",
    "TutorialSection",
]
