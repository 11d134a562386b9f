"""
Java class generator module.

Formats fields, accessors, constructors, methods, annotations and
javadoc, and assembles them into a complete class through a template.
"""

from .generator import JavaGenerator, create_java_generator
from .annotations import format_annotation, format_annotations
from .attributes import AttributeBlock, format_accessors, format_attributes, format_field
from .constructors import format_constructors
from .javadoc import format_javadoc
from .methods import format_method, format_methods
from .relationships import Relationships, format_relationships
from .synthetic import format_equals_hash_code, format_to_string

__all__ = [
    "JavaGenerator",
    "create_java_generator",
    "AttributeBlock",
    "Relationships",
    "format_annotation",
    "format_annotations",
    "format_javadoc",
    "format_field",
    "format_accessors",
    "format_attributes",
    "format_constructors",
    "format_method",
    "format_methods",
    "format_relationships",
    "format_to_string",
    "format_equals_hash_code",
]
