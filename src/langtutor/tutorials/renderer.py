"""
Section rendering.

Turns raw SectionSpec records into positioned TutorialSection objects. The
first section always gets the generic orientation page; every other section
is a direct rendering of its own fields.
"""

from collections.abc import Sequence

from langtutor.core.models import SectionSpec, TutorialSection


def render_intro_content(name: str, spec: SectionSpec) -> str:
    """Orientation page for the first lesson of any tutorial."""
    return f"""# Welcome to {name}

## What is {name}?
{spec.description}

## Why Learn {name}?
- Build real projects you can show to others
- Understand the ideas professionals use every day
- Open the door to new jobs and collaborations
- Gain a foundation that transfers to related technologies

## How This Tutorial Works
- Each lesson introduces one concept
- Every lesson shows the syntax, a working example and when to use it
- Lessons build on each other, so follow them in order
- The final lesson is a mini project that ties everything together

## What You Will Be Able to Do
- Read and write {name} with confidence
- Recognize common patterns and pitfalls
- Complete a small project from start to finish

## Getting Ready
- Set aside a little time for each lesson
- Type the examples yourself instead of copying them
- Experiment: change the examples and see what happens"""


def render_standard_content(spec: SectionSpec) -> str:
    """Markdown body for every lesson after the first."""
    return (
        f"# {spec.title}\n\n"
        f"{spec.description}\n\n"
        f"## Syntax\n{spec.syntax}\n\n"
        f"## Example\n{spec.code}\n\n"
        f"## Usage\n{spec.usage}"
    )


def render_section(name: str, spec: SectionSpec, index: int) -> TutorialSection:
    """Render one spec at its zero-based position."""
    content = render_intro_content(name, spec) if index == 0 else render_standard_content(spec)
    return TutorialSection(
        id=str(index + 1),
        title=spec.title,
        content=content,
        syntax=spec.syntax,
        usage=spec.usage,
        code_example=spec.code,
    )


def render(name: str, specs: Sequence[SectionSpec]) -> list[TutorialSection]:
    """
    Render an ordered list of specs into tutorial sections.

    Args:
        name: Display name interpolated into the intro page
        specs: Ordered lesson records, may be empty

    Returns:
        One section per spec with ids "1".."N" in order
    """
    return [render_section(name, spec, index) for index, spec in enumerate(specs)]
