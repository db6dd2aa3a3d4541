"""
Domain-specific types and enumerations for tutorial generation.
"""

from enum import Enum


class Category(str, Enum):
    """Canonical content categories a language identifier maps into."""

    STYLING = "styling"
    MARKUP = "markup"
    FRAMEWORK = "framework"
    SCRIPTING = "scripting"
    BACKEND = "backend"
    DATABASE = "database"
    ML = "ml"
    DEVOPS = "devops"
    BLOCKCHAIN = "blockchain"
    GAME = "game"
    SECURITY = "security"
    MOBILE = "mobile"
    GENERAL = "general"  # Fallback when nothing else matches
