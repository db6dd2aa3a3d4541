"""
Unit tests for language identifier classification.
"""

import pytest

from langtutor.core.types import Category
from langtutor.tutorials.classifier import (
    CLASSIFICATION_RULES,
    classify,
    classify_with_rule,
    normalize_identifier,
)


class TestClassifyCategories:
    """Each rule maps its documented identifiers."""

    @pytest.mark.parametrize("identifier", ["css", "tailwind", "tailwindcss", "scss"])
    def test_styling(self, identifier):
        assert classify(identifier) == Category.STYLING

    @pytest.mark.parametrize("identifier", ["html", "html5", "xhtml"])
    def test_markup(self, identifier):
        assert classify(identifier) == Category.MARKUP

    @pytest.mark.parametrize("identifier", ["react-native", "flutter", "swift", "kotlin", "swiftui"])
    def test_mobile(self, identifier):
        assert classify(identifier) == Category.MOBILE

    @pytest.mark.parametrize("identifier", ["react", "nextjs", "next", "vue", "angular", "preact"])
    def test_framework(self, identifier):
        assert classify(identifier) == Category.FRAMEWORK

    @pytest.mark.parametrize("identifier", ["javascript", "typescript", "JavaScript"])
    def test_scripting(self, identifier):
        assert classify(identifier) == Category.SCRIPTING

    @pytest.mark.parametrize("identifier", ["unity", "unreal", "godot", "game-dev"])
    def test_game(self, identifier):
        assert classify(identifier) == Category.GAME

    @pytest.mark.parametrize(
        "identifier",
        [
            "nodejs",
            "python-backend",
            "java-backend",
            "go-backend",
            "rust-backend",
            "php",
            "ruby",
            "rails",
            "java",
            "go",
            "rust",
        ],
    )
    def test_backend(self, identifier):
        assert classify(identifier) == Category.BACKEND

    @pytest.mark.parametrize(
        "identifier", ["sql", "mysql", "postgres", "postgresql", "mongodb", "redis", "firebase-db", "database"]
    )
    def test_database(self, identifier):
        assert classify(identifier) == Category.DATABASE

    @pytest.mark.parametrize(
        "identifier", ["tensorflow", "pytorch", "scikit-learn", "sklearn", "ai-ml", "ml", "python-ml"]
    )
    def test_ml(self, identifier):
        assert classify(identifier) == Category.ML

    @pytest.mark.parametrize(
        "identifier", ["docker", "kubernetes", "terraform", "aws", "github-actions", "devops"]
    )
    def test_devops(self, identifier):
        assert classify(identifier) == Category.DEVOPS

    @pytest.mark.parametrize("identifier", ["solidity", "web3js", "ethereum", "blockchain"])
    def test_blockchain(self, identifier):
        assert classify(identifier) == Category.BLOCKCHAIN

    @pytest.mark.parametrize(
        "identifier", ["penetration-testing", "network-security", "cryptography", "security"]
    )
    def test_security(self, identifier):
        assert classify(identifier) == Category.SECURITY

    @pytest.mark.parametrize("identifier", ["python", "r", "pandas"])
    def test_scripting_fallback(self, identifier):
        assert classify(identifier) == Category.SCRIPTING

    @pytest.mark.parametrize("identifier", ["unknown-xyz", "csharp", "cobol", "haskell"])
    def test_general(self, identifier):
        assert classify(identifier) == Category.GENERAL


class TestClassifyPrecedence:
    """Overlapping identifiers resolve to the earliest matching rule."""

    def test_mobile_before_framework(self):
        assert classify("react-native") == Category.MOBILE

    def test_styling_before_everything(self):
        assert classify("react-native-css") == Category.STYLING
        assert classify("html-css") == Category.STYLING

    def test_markup_before_ml(self):
        # "html" ends in "ml" but is markup
        assert classify("html") == Category.MARKUP

    def test_scripting_excluded_by_server_hints(self):
        assert classify("javascript-nodejs") == Category.BACKEND
        assert classify("typescript-backend") != Category.SCRIPTING
        assert classify("typescript-backend") == Category.GENERAL

    def test_node_hint_without_nodejs_token(self):
        # "node" blocks scripting but only "nodejs" selects backend
        assert classify("javascript-node") == Category.GENERAL

    def test_python_backend_is_backend_not_scripting(self):
        assert classify("python-backend") == Category.BACKEND

    def test_bare_tokens_only_match_whole_identifier(self):
        assert classify("javascript") == Category.SCRIPTING
        assert classify("golang") == Category.GENERAL
        assert classify("ruby") == Category.BACKEND
        assert classify("rx") == Category.GENERAL

    def test_ml_token_does_not_match_inside_words(self):
        assert classify("yaml") == Category.GENERAL
        assert classify("ocaml") == Category.GENERAL

    def test_game_before_backend(self):
        assert classify("rust-game") == Category.GAME


class TestClassifyTotality:
    """Classification never fails."""

    @pytest.mark.parametrize(
        "identifier", ["", "   ", "日本語", "ÇSS", "C++", "react\nnative", "-" * 500, None]
    )
    def test_always_returns_category(self, identifier):
        result = classify(identifier)
        assert isinstance(result, Category)
        assert result in set(Category)

    def test_empty_is_general(self):
        assert classify("") == Category.GENERAL
        assert classify(None) == Category.GENERAL

    @pytest.mark.parametrize("identifier", ["CSS", "Css", "REACT-NATIVE", "PyTorch", "  docker  "])
    def test_case_and_whitespace_insensitive(self, identifier):
        assert classify(identifier) == classify(identifier.strip().lower())

    @pytest.mark.parametrize("identifier", ["css", "react", "unknown", "python-backend", ""])
    def test_deterministic(self, identifier):
        assert classify(identifier) == classify(identifier)


class TestClassificationRules:
    """The rule table is ordered and auditable."""

    def test_rule_order(self):
        names = [rule.name for rule in CLASSIFICATION_RULES]
        assert names == [
            "styling",
            "markup",
            "mobile",
            "framework",
            "scripting",
            "game",
            "backend",
            "database",
            "ml",
            "devops",
            "blockchain",
            "security",
            "scripting-fallback",
        ]

    def test_every_category_but_general_reachable(self):
        categories = {rule.category for rule in CLASSIFICATION_RULES}
        assert categories == set(Category) - {Category.GENERAL}

    def test_classify_with_rule_reports_rule(self):
        assert classify_with_rule("css") == (Category.STYLING, "styling")
        assert classify_with_rule("python") == (Category.SCRIPTING, "scripting-fallback")
        assert classify_with_rule("mystery") == (Category.GENERAL, None)

    def test_normalize_identifier(self):
        assert normalize_identifier("  React-Native ") == "react-native"
        assert normalize_identifier(None) == ""
