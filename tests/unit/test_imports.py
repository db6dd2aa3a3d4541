"""
Tests for module imports and package structure.

Ensures all public modules can be imported correctly.
"""

import pytest


class TestCoreImports:
    """Test core module imports."""

    def test_import_core_models(self):
        """Import core models."""
        from langtutor.core.models import SectionSpec, Tutorial, TutorialSection

        assert SectionSpec is not None
        assert TutorialSection is not None
        assert Tutorial is not None

    def test_import_core_types(self):
        """Import core types."""
        from langtutor.core.types import Category

        assert Category is not None

    def test_import_core_package(self):
        """Import core package."""
        from langtutor import core

        assert hasattr(core, "Category")
        assert hasattr(core, "TutorialSection")


class TestPipelineImports:
    """Test tutorial pipeline imports."""

    def test_import_tutorials_package(self):
        from langtutor import tutorials

        for name in tutorials.__all__:
            assert hasattr(tutorials, name), name

    def test_import_content_package(self):
        from langtutor import content

        for name in content.__all__:
            assert hasattr(content, name), name


class TestPackageExports:
    """Test top-level package exports."""

    def test_version(self):
        import langtutor

        assert langtutor.__version__ == "1.0.0"

    @pytest.mark.parametrize(
        "name",
        [
            "Category",
            "SectionSpec",
            "Tutorial",
            "TutorialSection",
            "Settings",
            "configure",
            "get_settings",
            "LangTutorError",
            "UnknownCategoryError",
            "ContentError",
            "TutorialGenerator",
            "classify",
            "generate_comprehensive_tutorial",
            "render",
            "resolve_specs",
        ],
    )
    def test_public_names(self, name):
        import langtutor

        assert name in langtutor.__all__
        assert getattr(langtutor, name) is not None
