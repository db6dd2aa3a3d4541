"""
Bundled lesson content.

Every provider takes a display name and returns an ordered, non-empty list
of SectionSpec objects, from introduction to capstone project.
"""

from langtutor.content._helpers import Provider, lessons
from langtutor.content.backend import (
    backend_specs,
    go_specs,
    java_specs,
    node_specs,
    php_specs,
    ruby_specs,
    rust_specs,
)
from langtutor.content.blockchain import blockchain_specs
from langtutor.content.database import database_specs
from langtutor.content.devops import devops_specs
from langtutor.content.frameworks import (
    angular_specs,
    framework_specs,
    next_specs,
    react_specs,
    vue_specs,
)
from langtutor.content.game import game_specs
from langtutor.content.general import (
    cpp_specs,
    csharp_specs,
    describe_language,
    general_purpose_lessons,
    general_specs,
)
from langtutor.content.markup import markup_specs
from langtutor.content.ml import ml_specs
from langtutor.content.mobile import (
    flutter_specs,
    kotlin_specs,
    react_native_specs,
    swift_specs,
)
from langtutor.content.scripting import python_specs, scripting_specs
from langtutor.content.security import security_specs
from langtutor.content.styling import styling_specs

__all__ = [
    "Provider",
    "lessons",
    # Single-provider categories
    "styling_specs",
    "markup_specs",
    "database_specs",
    "ml_specs",
    "devops_specs",
    "blockchain_specs",
    "game_specs",
    "security_specs",
    # Frameworks
    "next_specs",
    "vue_specs",
    "react_specs",
    "angular_specs",
    "framework_specs",
    # Scripting
    "python_specs",
    "scripting_specs",
    # Backend
    "node_specs",
    "java_specs",
    "go_specs",
    "rust_specs",
    "php_specs",
    "ruby_specs",
    "backend_specs",
    # Mobile
    "react_native_specs",
    "flutter_specs",
    "swift_specs",
    "kotlin_specs",
    # General purpose
    "general_specs",
    "csharp_specs",
    "cpp_specs",
    "general_purpose_lessons",
    "describe_language",
]
