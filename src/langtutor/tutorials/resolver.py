"""
Content provider resolution.

Given an identifier and its category, pick the lesson provider to call.
Categories with several providers (framework, scripting, backend, mobile,
general) do a second, ordered substring dispatch on the identifier and fall
back to a category-wide provider.
"""

from collections.abc import Callable

from langtutor import content
from langtutor.content import Provider
from langtutor.core.models import SectionSpec
from langtutor.core.types import Category
from langtutor.exceptions import UnknownCategoryError
from langtutor.tutorials.classifier import normalize_identifier

# (test, provider) pair, tested against the normalized identifier
Variant = tuple[Callable[[str], bool], Provider]


class SubDispatch:
    """Ordered variant table for one multi-provider category."""

    def __init__(self, variants: list[Variant], fallback: Provider):
        self.variants = variants
        self.fallback = fallback

    def choose(self, identifier: str) -> Provider:
        for test, provider in self.variants:
            if test(identifier):
                return provider
        return self.fallback


def _has(*needles: str) -> Callable[[str], bool]:
    return lambda identifier: any(needle in identifier for needle in needles)


SINGLE_PROVIDERS: dict[Category, Provider] = {
    Category.STYLING: content.styling_specs,
    Category.MARKUP: content.markup_specs,
    Category.DATABASE: content.database_specs,
    Category.ML: content.ml_specs,
    Category.DEVOPS: content.devops_specs,
    Category.BLOCKCHAIN: content.blockchain_specs,
    Category.GAME: content.game_specs,
    Category.SECURITY: content.security_specs,
}

SUB_DISPATCH: dict[Category, SubDispatch] = {
    Category.FRAMEWORK: SubDispatch(
        [
            (_has("next"), content.next_specs),
            (_has("vue"), content.vue_specs),
            (lambda i: "react" in i and "native" not in i, content.react_specs),
            (_has("angular"), content.angular_specs),
        ],
        fallback=content.framework_specs,
    ),
    Category.SCRIPTING: SubDispatch(
        [(_has("python"), content.python_specs)],
        fallback=content.scripting_specs,
    ),
    Category.BACKEND: SubDispatch(
        [
            (_has("node"), content.node_specs),
            (_has("java"), content.java_specs),
            (_has("go"), content.go_specs),
            (_has("rust"), content.rust_specs),
            (_has("php"), content.php_specs),
            (_has("ruby", "rails"), content.ruby_specs),
        ],
        fallback=content.backend_specs,
    ),
    Category.MOBILE: SubDispatch(
        [
            (_has("react-native"), content.react_native_specs),
            (_has("flutter"), content.flutter_specs),
            (_has("swift"), content.swift_specs),
            (_has("kotlin"), content.kotlin_specs),
        ],
        fallback=content.react_native_specs,
    ),
    Category.GENERAL: SubDispatch(
        [
            (_has("csharp", "c#"), content.csharp_specs),
            (_has("cpp", "c++"), content.cpp_specs),
        ],
        fallback=content.general_specs,
    ),
}


def resolve_provider(identifier: str | None, category: Category) -> Provider:
    """
    Pick the lesson provider for an identifier within its category.

    Raises:
        UnknownCategoryError: If category is not a known Category value
    """
    try:
        category = Category(category)
    except ValueError as e:
        raise UnknownCategoryError(category) from e

    if category in SINGLE_PROVIDERS:
        return SINGLE_PROVIDERS[category]
    if category in SUB_DISPATCH:
        return SUB_DISPATCH[category].choose(normalize_identifier(identifier))
    raise UnknownCategoryError(category)


def resolve_specs(identifier: str | None, category: Category, display_name: str) -> list[SectionSpec]:
    """
    Resolve and invoke the lesson provider for an identifier.

    Args:
        identifier: Language identifier used for sub-dispatch
        category: Category returned by classify()
        display_name: Name interpolated into lesson titles and prose

    Returns:
        Ordered list of SectionSpec objects as returned by the provider
    """
    provider = resolve_provider(identifier, category)
    return provider(display_name)
