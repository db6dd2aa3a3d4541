"""
Unit and end-to-end tests for tutorial assembly.
"""

import logging

import pytest

from langtutor import content, generate_comprehensive_tutorial
from langtutor.config import Settings, TutorialSettings, configure
from langtutor.core.models import Tutorial
from langtutor.core.types import Category
from langtutor.tutorials.assembler import TutorialGenerator, default_description


class TestGenerateComprehensiveTutorial:
    """Tests for the public entry point."""

    def test_returns_tutorial(self):
        tutorial = generate_comprehensive_tutorial("css", "CSS", "css-icon", "")
        assert isinstance(tutorial, Tutorial)

    def test_title(self):
        tutorial = generate_comprehensive_tutorial("python", "Python", "py", "")
        assert tutorial.title == "Master Python"

    def test_fallback_description(self):
        tutorial = generate_comprehensive_tutorial("foo", "Foo", "icon", "")
        assert tutorial.description == "Complete Foo tutorial from basics to a mini project"

    def test_none_description_uses_fallback(self):
        tutorial = generate_comprehensive_tutorial("foo", "Foo", "icon", None)
        assert tutorial.description == default_description("Foo")

    def test_description_omitted(self):
        tutorial = generate_comprehensive_tutorial("foo", "Foo", "icon")
        assert tutorial.description == default_description("Foo")

    def test_description_override(self):
        tutorial = generate_comprehensive_tutorial("foo", "Foo", "icon", "Custom text")
        assert tutorial.description == "Custom text"

    def test_icon_passthrough(self):
        tutorial = generate_comprehensive_tutorial("go", "Go", "🐹 gopher", "")
        assert tutorial.icon == "🐹 gopher"

    def test_calls_are_independent(self):
        first = generate_comprehensive_tutorial("react", "React", "r", "")
        second = generate_comprehensive_tutorial("react", "React", "r", "")
        assert first == second
        assert first is not second
        assert first.sections[0] is not second.sections[0]


class TestEndToEnd:
    """Scenarios covering the whole pipeline."""

    def test_css(self, generator):
        tutorial = generate_comprehensive_tutorial("css", "CSS", "css-icon", "")
        assert generator.classify("css") == Category.STYLING
        assert len(tutorial.sections) == len(content.styling_specs("CSS"))
        assert tutorial.sections[0].title == "CSS HOME"
        assert tutorial.description == "Complete CSS tutorial from basics to a mini project"

    def test_react_native(self, generator):
        tutorial = generate_comprehensive_tutorial(
            "react-native", "React Native", "rn-icon", "Learn mobile dev"
        )
        assert generator.classify("react-native") == Category.MOBILE
        expected = content.react_native_specs("React Native")
        assert [s.title for s in tutorial.sections] == [s.title for s in expected]
        assert [s.title for s in tutorial.sections] != [
            s.title for s in content.flutter_specs("React Native")
        ]
        assert tutorial.description == "Learn mobile dev"
        assert tutorial.icon == "rn-icon"

    def test_unknown_identifier(self, generator):
        tutorial = generate_comprehensive_tutorial("unknown-xyz", "Mystery", "icon", "")
        assert generator.classify("unknown-xyz") == Category.GENERAL
        assert len(tutorial.sections) > 0
        assert tutorial.sections[0].title == "Introduction to Mystery"

    @pytest.mark.parametrize(
        "language_id, name",
        [
            ("html", "HTML"),
            ("typescript", "TypeScript"),
            ("nextjs", "Next.js"),
            ("python-backend", "Python Backend"),
            ("postgresql", "PostgreSQL"),
            ("pytorch", "PyTorch"),
            ("kubernetes", "Kubernetes"),
            ("ethereum", "Ethereum"),
            ("godot", "Godot"),
            ("network-security", "Network Security"),
            ("csharp", "C#"),
            ("", ""),
        ],
    )
    def test_section_invariants(self, language_id, name):
        tutorial = generate_comprehensive_tutorial(language_id, name, "icon", "")
        sections = tutorial.sections
        assert len(sections) > 0
        assert [s.id for s in sections] == [str(i) for i in range(1, len(sections) + 1)]
        assert f"Welcome to {name}" in sections[0].content
        for section in sections[1:]:
            assert section.content.startswith(f"# {section.title}")

    def test_last_section_is_project(self):
        for language_id in ("css", "html", "python", "react", "docker", "unity"):
            tutorial = generate_comprehensive_tutorial(language_id, language_id, "i", "")
            assert tutorial.sections[-1].title.startswith("Project:")


class TestTutorialGenerator:
    """Tests for the TutorialGenerator facade."""

    def test_empty_specs_give_empty_sections(self, empty_generator):
        tutorial = empty_generator.generate("anything", "Anything", "icon", "")
        assert tutorial.sections == []
        assert tutorial.title == "Master Anything"

    def test_custom_resolver_receives_classification(self, sample_specs):
        calls = []

        def resolver(identifier, category, name):
            calls.append((identifier, category, name))
            return sample_specs

        tutorial = TutorialGenerator(resolver=resolver).generate("React-Native", "RN", "i")
        assert calls == [("React-Native", Category.MOBILE, "RN")]
        assert [s.title for s in tutorial.sections] == [s.title for s in sample_specs]

    def test_to_dict_uses_wire_names(self, generator):
        tutorial = generator.generate("css", "CSS", "css-icon", "")
        data = generator.to_dict(tutorial)
        assert set(data) == {"title", "description", "icon", "sections"}
        first = data["sections"][0]
        assert first["id"] == "1"
        assert "codeExample" in first
        assert "code_example" not in first

    def test_logs_classification_at_debug(self, generator, caplog):
        with caplog.at_level(logging.DEBUG, logger="langtutor"):
            generator.generate("docker", "Docker", "whale")
        messages = [r.getMessage() for r in caplog.records]
        assert any("as devops" in m for m in messages)
        assert any("Rendered" in m for m in messages)
        assert any(m.startswith("Completed: tutorial generation") for m in messages)

    def test_generation_logging_can_be_disabled(self, generator, caplog):
        configure(Settings(tutorial=TutorialSettings(log_generation=False)))
        with caplog.at_level(logging.DEBUG, logger="langtutor"):
            generator.generate("docker", "Docker", "whale")
        assert not [r for r in caplog.records if r.name.startswith("langtutor.tutorials")]
