"""
Unit tests for content provider resolution.
"""

import pytest

from langtutor import content
from langtutor.core.models import SectionSpec
from langtutor.core.types import Category
from langtutor.exceptions import UnknownCategoryError
from langtutor.tutorials.classifier import classify
from langtutor.tutorials.resolver import resolve_provider, resolve_specs


class TestSingleProviderCategories:
    """Categories with exactly one provider ignore the identifier."""

    @pytest.mark.parametrize(
        "category, provider",
        [
            (Category.STYLING, content.styling_specs),
            (Category.MARKUP, content.markup_specs),
            (Category.DATABASE, content.database_specs),
            (Category.ML, content.ml_specs),
            (Category.DEVOPS, content.devops_specs),
            (Category.BLOCKCHAIN, content.blockchain_specs),
            (Category.GAME, content.game_specs),
            (Category.SECURITY, content.security_specs),
        ],
    )
    def test_provider(self, category, provider):
        assert resolve_provider("anything", category) is provider


class TestSubDispatch:
    """Multi-provider categories choose by identifier substring."""

    @pytest.mark.parametrize(
        "identifier, provider",
        [
            ("nextjs", content.next_specs),
            ("next", content.next_specs),
            ("vue", content.vue_specs),
            ("react", content.react_specs),
            ("angular", content.angular_specs),
            ("svelte", content.framework_specs),
            # next wins over react when both appear
            ("react-next", content.next_specs),
        ],
    )
    def test_framework(self, identifier, provider):
        assert resolve_provider(identifier, Category.FRAMEWORK) is provider

    def test_framework_react_native_excluded(self):
        assert resolve_provider("react-native", Category.FRAMEWORK) is content.framework_specs

    @pytest.mark.parametrize(
        "identifier, provider",
        [
            ("python", content.python_specs),
            ("javascript", content.scripting_specs),
            ("typescript", content.scripting_specs),
            ("pandas", content.scripting_specs),
        ],
    )
    def test_scripting(self, identifier, provider):
        assert resolve_provider(identifier, Category.SCRIPTING) is provider

    @pytest.mark.parametrize(
        "identifier, provider",
        [
            ("nodejs", content.node_specs),
            ("java", content.java_specs),
            ("java-backend", content.java_specs),
            ("go", content.go_specs),
            ("go-backend", content.go_specs),
            ("rust", content.rust_specs),
            ("php", content.php_specs),
            ("ruby", content.ruby_specs),
            ("rails", content.ruby_specs),
            ("python-backend", content.backend_specs),
        ],
    )
    def test_backend(self, identifier, provider):
        assert resolve_provider(identifier, Category.BACKEND) is provider

    @pytest.mark.parametrize(
        "identifier, provider",
        [
            ("react-native", content.react_native_specs),
            ("flutter", content.flutter_specs),
            ("swift", content.swift_specs),
            ("kotlin", content.kotlin_specs),
            ("ionic", content.react_native_specs),
        ],
    )
    def test_mobile(self, identifier, provider):
        assert resolve_provider(identifier, Category.MOBILE) is provider

    @pytest.mark.parametrize(
        "identifier, provider",
        [
            ("csharp", content.csharp_specs),
            ("cpp", content.cpp_specs),
            ("unknown-xyz", content.general_specs),
        ],
    )
    def test_general(self, identifier, provider):
        assert resolve_provider(identifier, Category.GENERAL) is provider

    def test_identifier_case_insensitive(self):
        assert resolve_provider("NextJS", Category.FRAMEWORK) is content.next_specs
        assert resolve_provider(None, Category.MOBILE) is content.react_native_specs


class TestResolveSpecs:
    """resolve_specs() calls the chosen provider with the display name."""

    @pytest.mark.parametrize(
        "identifier",
        [
            "css",
            "html",
            "react",
            "nextjs",
            "vue",
            "angular",
            "svelte",
            "javascript",
            "typescript",
            "python",
            "nodejs",
            "java",
            "go",
            "rust",
            "php",
            "ruby",
            "python-backend",
            "react-native",
            "flutter",
            "swift",
            "kotlin",
            "sql",
            "tensorflow",
            "docker",
            "solidity",
            "unity",
            "cryptography",
            "csharp",
            "cpp",
            "unknown-xyz",
        ],
    )
    def test_every_identifier_yields_specs(self, identifier):
        specs = resolve_specs(identifier, classify(identifier), "Thing")
        assert len(specs) > 0
        assert all(isinstance(s, SectionSpec) for s in specs)

    def test_display_name_used_in_first_title(self):
        specs = resolve_specs("react", Category.FRAMEWORK, "React")
        assert specs[0].title == "Introduction to React"

    def test_css_home(self):
        specs = resolve_specs("css", Category.STYLING, "CSS")
        assert specs[0].title == "CSS HOME"

    def test_category_string_value_accepted(self):
        assert resolve_provider("css", "styling") is content.styling_specs

    def test_unknown_category_raises(self):
        with pytest.raises(UnknownCategoryError, match="not-a-category"):
            resolve_provider("css", "not-a-category")

    def test_unknown_category_is_value_error(self):
        with pytest.raises(ValueError):
            resolve_specs("css", None, "CSS")
