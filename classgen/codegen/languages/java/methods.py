"""
Method rendering, shared by declared and synthetic methods.
"""

from typing import Sequence

from ...core.context import GenerationContext
from ...core.naming import type_name
from ...core.schema import MethodSpec
from .annotations import format_annotations
from .javadoc import format_javadoc


def format_signature(spec: MethodSpec, context: GenerationContext) -> str:
    """
    Render the method signature up to the opening brace.

    Registers the return, parameter and thrown types as imports.
    """
    context.add_import(spec.return_type)
    for parameter in spec.parameters:
        context.add_import(parameter.type)

    parameters = ", ".join(
        f"{type_name(parameter.type)} {parameter.name}" for parameter in spec.parameters
    )
    head = " ".join(
        part for part in (spec.encapsulation, type_name(spec.return_type), spec.name) if part
    )
    signature = f"{head}({parameters})"

    if spec.throws:
        context.add_import(spec.throws)
        signature += f" throws {type_name(spec.throws)}"

    return signature + " {"


def format_method(spec: MethodSpec, context: GenerationContext) -> str:
    """
    Render javadoc, annotations and the method itself.

    ``content`` is inserted as-is after one level of body indentation;
    continuation lines keep whatever indentation they carry.
    """
    parts = []

    javadoc = format_javadoc(
        spec.javadoc if context.add_comments else None, indent=context.indent
    )
    if javadoc:
        parts.append(javadoc)

    annotations = format_annotations(spec.annotations, context, indent=context.indent)
    if annotations:
        parts.append(annotations)

    parts.append(context.indented(format_signature(spec, context)))
    if spec.content:
        parts.append(context.indented(spec.content, 2))
    parts.append(context.indented("}"))

    return "\n".join(parts)


def format_methods(methods: Sequence[MethodSpec], context: GenerationContext) -> str:
    """Render each method, separated by a blank line."""
    return "\n\n".join(format_method(spec, context) for spec in methods)
