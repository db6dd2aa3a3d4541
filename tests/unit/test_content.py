"""
Unit tests for the bundled lesson providers.
"""

import pytest

from langtutor import content
from langtutor.content._helpers import lessons
from langtutor.content.devops import tool_purpose
from langtutor.content.general import (
    DEFAULT_LANGUAGE_DESCRIPTION,
    GENERIC_SYNTAX,
    SYNTAX_TABLES,
    describe_language,
    syntax_for,
)
from langtutor.core.models import SectionSpec
from langtutor.exceptions import ContentError, LangTutorError

ALL_PROVIDERS = [getattr(content, name) for name in content.__all__ if name.endswith("_specs")]


class TestProviders:
    """Every provider returns an ordered, non-empty lesson list."""

    @pytest.mark.parametrize("provider", ALL_PROVIDERS, ids=lambda p: p.__name__)
    def test_non_empty(self, provider):
        specs = provider("Widget")
        assert len(specs) > 0
        assert all(isinstance(s, SectionSpec) for s in specs)

    @pytest.mark.parametrize("provider", ALL_PROVIDERS, ids=lambda p: p.__name__)
    def test_ends_with_project(self, provider):
        assert provider("Widget")[-1].title.startswith("Project:")

    @pytest.mark.parametrize("provider", ALL_PROVIDERS, ids=lambda p: p.__name__)
    def test_name_substituted(self, provider):
        specs = provider("Widget")
        assert "Widget" in specs[0].title
        for spec in specs:
            assert "{name}" not in spec.title
            assert "{name}" not in spec.description

    @pytest.mark.parametrize("provider", ALL_PROVIDERS, ids=lambda p: p.__name__)
    def test_fresh_list_per_call(self, provider):
        first = provider("Widget")
        second = provider("Widget")
        assert first == second
        assert first is not second

    def test_home_titles(self):
        assert content.styling_specs("CSS")[0].title == "CSS HOME"
        assert content.markup_specs("HTML")[0].title == "HTML HOME"

    def test_empty_name_accepted(self):
        assert content.react_specs("")[0].title == "Introduction to "


class TestLessonsHelper:
    """Tests for lessons()."""

    def test_substitutes_title_and_description_only(self):
        specs = lessons(
            "Foo",
            [
                {
                    "title": "About {name}",
                    "description": "{name} rocks",
                    "syntax": "{name}()",
                    "usage": "use {name}",
                    "code": 'f"{name}"',
                }
            ],
        )
        assert specs[0].title == "About Foo"
        assert specs[0].description == "Foo rocks"
        assert specs[0].syntax == "{name}()"
        assert specs[0].usage == "use {name}"
        assert specs[0].code == 'f"{name}"'

    def test_code_samples_keep_their_braces(self):
        python = content.python_specs("Python")
        functions = next(s for s in python if s.title == "Functions")
        assert 'f"Hello, {name}"' in functions.code

    def test_missing_field_raises_content_error(self):
        with pytest.raises(ContentError, match="Lesson 2"):
            lessons(
                "Foo",
                [
                    {"title": "A", "description": "a", "syntax": "s", "usage": "u", "code": "c"},
                    {"title": "B", "description": "b", "syntax": "s", "usage": "u"},
                ],
            )

    def test_content_error_is_package_error(self):
        with pytest.raises(LangTutorError):
            lessons("Foo", [{"title": "A", "description": "a", "syntax": 1, "usage": "u", "code": "c"}])

    def test_empty_records(self):
        assert lessons("Foo", []) == []


class TestGeneralPurpose:
    """Tests for the table-driven general-purpose progression."""

    def test_describe_language_known(self):
        assert "beginner-friendly" in describe_language("python")
        assert describe_language(" Rust ") == describe_language("rust")

    def test_describe_language_default(self):
        assert describe_language("cobol") == DEFAULT_LANGUAGE_DESCRIPTION
        assert describe_language("") == DEFAULT_LANGUAGE_DESCRIPTION

    def test_syntax_for_falls_back_to_generic(self):
        assert syntax_for("haskell") is GENERIC_SYNTAX
        assert syntax_for("Python") is SYNTAX_TABLES["python"]

    def test_tables_share_keys(self):
        keys = set(GENERIC_SYNTAX)
        for table in SYNTAX_TABLES.values():
            assert set(table) == keys

    def test_intro_uses_description(self):
        intro = content.general_purpose_lessons("Python", "python")[0]
        assert intro.title == "Introduction to Python"
        assert intro.description == f"Python is a {describe_language('python')}."

    def test_csharp_and_cpp_use_their_tables(self):
        csharp = content.csharp_specs("C#")
        cpp = content.cpp_specs("C++")
        assert csharp[0].code == SYNTAX_TABLES["csharp"]["hello_world"]
        assert cpp[0].code == SYNTAX_TABLES["cpp"]["hello_world"]
        assert len(csharp) == len(cpp) == 16

    def test_general_uses_generic_table(self):
        specs = content.general_specs("Mystery")
        assert specs[0].code == GENERIC_SYNTAX["hello_world"]
        assert specs[-1].title == "Project: Calculator"


class TestScripting:
    """JavaScript and TypeScript share lessons; TypeScript gets typed snippets."""

    def test_javascript_untyped(self):
        intro = content.scripting_specs("JavaScript")[0]
        assert "// JavaScript" in intro.code
        assert ": string" not in intro.code

    @pytest.mark.parametrize("name", ["TypeScript", "typescript", "TS"])
    def test_typescript_typed(self, name):
        intro = content.scripting_specs(name)[0]
        assert "// TypeScript" in intro.code
        assert ": string" in intro.code

    def test_same_lesson_titles(self):
        js = [s.title for s in content.scripting_specs("X")]
        ts = [s.title for s in content.scripting_specs("TypeScript")]
        assert js[1:] == ts[1:]

    def test_python_uses_general_progression(self):
        titles = [s.title for s in content.python_specs("Python")]
        assert titles == [s.title for s in content.general_purpose_lessons("Python", "python")]


class TestDevOps:
    """The DevOps introduction depends on the tool."""

    @pytest.mark.parametrize(
        "name, purpose",
        [
            ("Docker", "containerization"),
            ("docker-compose", "containerization"),
            ("Kubernetes", "container orchestration"),
            ("k8s", "container orchestration"),
            ("Terraform", "infrastructure management"),
            ("AWS", "infrastructure management"),
        ],
    )
    def test_tool_purpose(self, name, purpose):
        assert tool_purpose(name) == purpose

    def test_intro_mentions_purpose(self):
        intro = content.devops_specs("Docker")[0]
        assert intro.title == "Introduction to Docker"
        assert intro.description == "Docker is a tool for containerization."
