"""
Annotation rendering.
"""

from typing import Iterable

from ...core.context import GenerationContext
from ...core.naming import type_name
from ...core.schema import AnnotationSpec


def format_annotation(spec: AnnotationSpec, context: GenerationContext) -> str:
    """
    Render one annotation usage and register its type as an import.

    ``@Entity`` without parameters, ``@Column(name = "id", nullable = false)``
    with them.
    """
    context.add_import(spec.name)

    rendered = f"@{type_name(spec.name)}"
    if spec.parameters:
        arguments = ", ".join(f"{p.name} = {p.value}" for p in spec.parameters)
        rendered += f"({arguments})"

    return rendered


def format_annotations(
    specs: Iterable[AnnotationSpec], context: GenerationContext, indent: str = ""
) -> str:
    """Render several annotations, one per line, each prefixed with ``indent``."""
    return "\n".join(
        f"{indent}{format_annotation(spec, context)}" for spec in specs
    )
