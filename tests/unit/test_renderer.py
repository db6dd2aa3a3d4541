"""
Unit tests for section rendering.
"""

import pytest

from langtutor.core.models import SectionSpec, TutorialSection
from langtutor.tutorials.renderer import (
    render,
    render_intro_content,
    render_section,
    render_standard_content,
)


def make_specs(count: int) -> list[SectionSpec]:
    return [
        SectionSpec(
            title=f"Lesson {i}",
            description=f"Description {i}",
            syntax=f"syntax_{i}()",
            usage=f"Usage {i}",
            code=f"code_{i}()",
        )
        for i in range(count)
    ]


class TestRender:
    """Tests for render()."""

    def test_empty_specs_render_empty_list(self):
        assert render("Foo", []) == []

    @pytest.mark.parametrize("count", [1, 2, 5, 17])
    def test_ids_are_dense_and_positional(self, count):
        sections = render("Foo", make_specs(count))
        assert len(sections) == count
        assert [s.id for s in sections] == [str(i) for i in range(1, count + 1)]

    def test_returns_tutorial_sections(self, sample_specs):
        sections = render("Foo", sample_specs)
        assert all(isinstance(s, TutorialSection) for s in sections)

    def test_fields_passed_through(self, sample_specs):
        sections = render("Foo", sample_specs)
        for spec, section in zip(sample_specs, sections):
            assert section.title == spec.title
            assert section.syntax == spec.syntax
            assert section.usage == spec.usage
            assert section.code_example == spec.code

    def test_first_section_uses_intro_template(self, sample_specs):
        sections = render("Foo", sample_specs)
        assert "Welcome to Foo" in sections[0].content
        assert "What is Foo?" in sections[0].content
        assert sample_specs[0].description in sections[0].content

    def test_other_sections_use_standard_template(self, sample_specs):
        sections = render("Foo", sample_specs)
        for spec, section in zip(sample_specs[1:], sections[1:]):
            assert "Welcome to Foo" not in section.content
            assert section.content.startswith(f"# {spec.title}")

    def test_accepts_tuple(self, sample_specs):
        assert render("Foo", tuple(sample_specs)) == render("Foo", sample_specs)

    def test_name_is_not_escaped(self):
        sections = render("<b>X</b>", make_specs(1))
        assert "Welcome to <b>X</b>" in sections[0].content


class TestTemplates:
    """Tests for the two content templates."""

    def test_standard_content_exact_layout(self, sample_specs):
        spec = sample_specs[1]
        assert render_standard_content(spec) == (
            "# Variables\n\n"
            "Store values.\n\n"
            "## Syntax\nlet x = 1\n\n"
            "## Example\nlet x = 1\nlet y = x + 1\n\n"
            "## Usage\nKeep state"
        )

    def test_intro_content_sections(self, sample_specs):
        content = render_intro_content("Foo", sample_specs[0])
        assert content.startswith("# Welcome to Foo")
        for heading in (
            "## What is Foo?",
            "## Why Learn Foo?",
            "## How This Tutorial Works",
            "## What You Will Be Able to Do",
            "## Getting Ready",
        ):
            assert heading in content

    def test_intro_content_ignores_other_fields(self, sample_specs):
        spec = sample_specs[0]
        other = spec.model_copy(update={"syntax": "different", "code": "different()", "usage": "elsewhere"})
        assert render_intro_content("Foo", spec) == render_intro_content("Foo", other)

    def test_intro_content_depends_on_description(self, sample_specs):
        spec = sample_specs[0]
        other = spec.model_copy(update={"description": "Something else entirely."})
        assert render_intro_content("Foo", spec) != render_intro_content("Foo", other)

    def test_render_section_selects_template_by_index(self, sample_specs):
        spec = sample_specs[1]
        first = render_section("Foo", spec, 0)
        later = render_section("Foo", spec, 3)
        assert first.id == "1"
        assert later.id == "4"
        assert first.content == render_intro_content("Foo", spec)
        assert later.content == render_standard_content(spec)


class TestSectionSerialization:
    """TutorialSection keeps the camelCase wire name for code samples."""

    def test_dump_by_alias(self, sample_specs):
        data = render("Foo", sample_specs)[1].model_dump(by_alias=True)
        assert data["codeExample"] == sample_specs[1].code
        assert set(data) == {"id", "title", "content", "syntax", "usage", "codeExample"}

    def test_populate_by_alias(self):
        section = TutorialSection(
            id="1", title="T", content="C", syntax="S", usage="U", codeExample="x()"
        )
        assert section.code_example == "x()"
