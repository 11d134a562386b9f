"""
Generated ``toString``, ``equals`` and ``hashCode`` methods.

The bodies are built as text and rendered through the regular method
formatter with an ``@Override`` annotation.
"""

from ...core.context import GenerationContext
from ...core.naming import type_name
from ...core.schema import AnnotationSpec, ClassSchema, MethodSpec, ParameterSpec
from .methods import format_method

OBJECTS_ARTIFACT = "java.util.Objects"
STRING_ARTIFACT = "java.lang.String"


def _override() -> AnnotationSpec:
    return AnnotationSpec(name="Override")


def to_string_method(schema: ClassSchema) -> MethodSpec:
    """Describe ``toString`` as ``"Name{" + "a=" + a + ", " + "b=" + b + "}"``."""
    class_name = schema.name or ""
    pieces = [f'"{class_name}{{"']
    if schema.attributes:
        pieces.append(
            ' + ", " + '.join(
                f'"{attribute.name}=" + {attribute.name}'
                for attribute in schema.attributes
            )
        )
    pieces.append('"}"')

    return MethodSpec(
        name="toString",
        return_type=STRING_ARTIFACT,
        encapsulation="public",
        annotations=[_override()],
        content=f"return {' + '.join(pieces)};",
    )


def equals_method(schema: ClassSchema, context: GenerationContext) -> MethodSpec:
    """Describe a null-safe, field-by-field ``equals(Object o)``."""
    class_name = schema.name or ""
    objects = type_name(OBJECTS_ARTIFACT)
    comparison = " && ".join(
        f"{objects}.equals({attribute.name}, that.{attribute.name})"
        for attribute in schema.attributes
    ) or "true"

    body_indent = context.indent * 2
    content = f"\n{body_indent}".join(
        [
            "if (this == o) return true;",
            "if ((o == null) || getClass() != o.getClass()) return false;",
            f"{class_name} that = ({class_name}) o;",
            f"return {comparison};",
        ]
    )

    return MethodSpec(
        name="equals",
        return_type="boolean",
        encapsulation="public",
        parameters=[ParameterSpec(type="Object", name="o")],
        annotations=[_override()],
        content=content,
    )


def hash_code_method(schema: ClassSchema) -> MethodSpec:
    """Describe ``hashCode`` combining every attribute through ``Objects.hash``."""
    arguments = ", ".join(attribute.name for attribute in schema.attributes)
    return MethodSpec(
        name="hashCode",
        return_type="int",
        encapsulation="public",
        annotations=[_override()],
        content=f"return {type_name(OBJECTS_ARTIFACT)}.hash({arguments});",
    )


def format_to_string(schema: ClassSchema, context: GenerationContext) -> str:
    """Render ``toString`` when the schema asks for it, else an empty string."""
    if not schema.generate_to_string:
        return ""
    return format_method(to_string_method(schema), context)


def format_equals_hash_code(schema: ClassSchema, context: GenerationContext) -> str:
    """Render ``equals`` and ``hashCode`` when the schema asks for them."""
    if not schema.generate_equals_hash_code:
        return ""

    context.add_import(OBJECTS_ARTIFACT)
    return "\n\n".join(
        [
            format_method(equals_method(schema, context), context),
            format_method(hash_code_method(schema), context),
        ]
    )
