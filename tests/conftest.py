"""
Shared fixtures for langtutor tests.
"""

import os

import pytest

from langtutor.config import configure
from langtutor.core.models import SectionSpec
from langtutor.tutorials.assembler import TutorialGenerator


@pytest.fixture(autouse=True)
def default_settings(monkeypatch):
    """Isolate tests from LANGTUTOR_* variables in the developer's environment."""

    for key in list(os.environ):
        if key.startswith("LANGTUTOR_"):
            monkeypatch.delenv(key, raising=False)
    settings = configure()
    yield settings
    configure()


@pytest.fixture
def sample_specs():
    """Three hand-written lesson records."""
    return [
        SectionSpec(
            title="Intro",
            description="Foo is a small language.",
            syntax="foo()",
            usage="Everywhere",
            code='foo("hello")',
        ),
        SectionSpec(
            title="Variables",
            description="Store values.",
            syntax="let x = 1",
            usage="Keep state",
            code="let x = 1\nlet y = x + 1",
        ),
        SectionSpec(
            title="Project: Widget",
            description="Build a widget.",
            syntax="N/A",
            usage="Apply all concepts",
            code="widget()",
        ),
    ]


@pytest.fixture
def empty_generator():
    """A generator whose resolver returns no lessons."""
    return TutorialGenerator(resolver=lambda identifier, category, name: [])


@pytest.fixture
def generator():
    return TutorialGenerator()
