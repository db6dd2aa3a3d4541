"""
Core data models for tutorial generation.

All models use Pydantic for validation and serialization. Instances are
frozen: the pipeline builds new objects on every call and never mutates them.
"""

from pydantic import BaseModel, ConfigDict, Field


class SectionSpec(BaseModel):
    """A raw lesson record supplied by a content provider."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(..., description="Lesson title")
    description: str = Field(..., description="Lesson prose")
    syntax: str = Field(..., description="Syntax summary")
    usage: str = Field(..., description="When and why to use it")
    code: str = Field(..., description="Code sample, may span multiple lines")


class TutorialSection(BaseModel):
    """A rendered lesson, positioned within a tutorial."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(..., description="1-based position, stringified")
    title: str
    content: str = Field(..., description="Synthesized Markdown body")
    syntax: str
    usage: str
    code_example: str = Field(..., alias="codeExample")


class Tutorial(BaseModel):
    """A complete tutorial document."""

    model_config = ConfigDict(frozen=True)

    title: str
    description: str
    icon: str
    sections: list[TutorialSection] = Field(default_factory=list)
