"""
Language identifier classification.

Maps a free-form identifier such as ``"react-native"`` or ``"python-backend"``
to exactly one Category. Rules are evaluated in order and the first match
wins, so the order of CLASSIFICATION_RULES is significant: identifiers often
match several rules (``"react-native-css"`` is styling, mobile and framework
at once).
"""

import re
from collections.abc import Callable
from dataclasses import dataclass

from langtutor.core.types import Category

Predicate = Callable[[str], bool]

_TOKEN_SPLIT = re.compile(r"[\s._/-]+")


def _contains(*needles: str) -> Predicate:
    """Match when any needle is a substring of the identifier."""
    return lambda identifier: any(needle in identifier for needle in needles)


def _equals(*values: str) -> Predicate:
    """Match when the whole identifier is one of the values."""
    return lambda identifier: identifier in values


def _has_token(*tokens: str) -> Predicate:
    """Match when one of the separator-delimited parts equals a token."""
    return lambda identifier: any(part in tokens for part in _TOKEN_SPLIT.split(identifier))


def _any(*predicates: Predicate) -> Predicate:
    return lambda identifier: any(predicate(identifier) for predicate in predicates)


def _is_frontend_script(identifier: str) -> bool:
    """JavaScript/TypeScript that is not hinting at a server runtime."""
    if not ("javascript" in identifier or "typescript" in identifier):
        return False
    return not any(hint in identifier for hint in ("nodejs", "node", "backend"))


@dataclass(frozen=True)
class ClassificationRule:
    """One ordered (predicate, category) pair."""

    name: str
    category: Category
    matches: Predicate


CLASSIFICATION_RULES: tuple[ClassificationRule, ...] = (
    ClassificationRule("styling", Category.STYLING, _contains("css", "tailwind")),
    ClassificationRule("markup", Category.MARKUP, _contains("html")),
    ClassificationRule(
        "mobile", Category.MOBILE, _contains("react-native", "flutter", "swift", "kotlin")
    ),
    # Mobile is tested first, so react-native never reaches this rule
    ClassificationRule(
        "framework", Category.FRAMEWORK, _contains("react", "next", "vue", "angular")
    ),
    ClassificationRule("scripting", Category.SCRIPTING, _is_frontend_script),
    ClassificationRule("game", Category.GAME, _contains("unity", "unreal", "godot", "game")),
    ClassificationRule(
        "backend",
        Category.BACKEND,
        _any(
            _contains(
                "nodejs",
                "python-backend",
                "java-backend",
                "go-backend",
                "rust-backend",
                "php",
                "ruby",
                "rails",
                "rust",
            ),
            _equals("java", "go"),
        ),
    ),
    ClassificationRule(
        "database",
        Category.DATABASE,
        _contains("sql", "postgres", "postgresql", "mongodb", "redis", "firebase", "database"),
    ),
    ClassificationRule(
        "ml",
        Category.ML,
        _any(_contains("tensorflow", "pytorch", "scikit", "sklearn", "ai-ml"), _has_token("ml")),
    ),
    ClassificationRule(
        "devops",
        Category.DEVOPS,
        _contains("docker", "kubernetes", "terraform", "aws", "github-actions", "devops"),
    ),
    ClassificationRule(
        "blockchain", Category.BLOCKCHAIN, _contains("solidity", "web3", "ethereum", "blockchain")
    ),
    ClassificationRule(
        "security",
        Category.SECURITY,
        _contains("penetration", "network-security", "cryptography", "security"),
    ),
    ClassificationRule(
        "scripting-fallback",
        Category.SCRIPTING,
        _any(_contains("python", "pandas"), _equals("r")),
    ),
)


def normalize_identifier(identifier: str | None) -> str:
    """Lower-case and strip an identifier; None becomes the empty string."""
    return (identifier or "").strip().lower()


def classify_with_rule(identifier: str | None) -> tuple[Category, str | None]:
    """
    Classify an identifier and report which rule matched.

    Args:
        identifier: Free-form language identifier, any case

    Returns:
        Tuple of (category, rule name), rule name is None for the fallback
    """
    normalized = normalize_identifier(identifier)
    for rule in CLASSIFICATION_RULES:
        if rule.matches(normalized):
            return rule.category, rule.name
    return Category.GENERAL, None


def classify(identifier: str | None) -> Category:
    """
    Map a language identifier to its content category.

    Never raises: identifiers that match no rule are GENERAL.
    """
    category, _ = classify_with_rule(identifier)
    return category
