"""
``extends`` / ``implements`` clause rendering.
"""

from dataclasses import dataclass
from typing import Sequence

from ...core.context import GenerationContext
from ...core.naming import type_name


@dataclass
class Relationships:
    """Rendered inheritance clauses; either may be empty."""

    extends_clause: str
    implements_clause: str


def format_relationships(
    extends_classes: Sequence[str],
    interfaces: Sequence[str],
    context: GenerationContext,
) -> Relationships:
    """
    Render the inheritance clauses of a class.

    Every listed supertype and interface is registered as an import.
    """
    for artifact in [*extends_classes, *interfaces]:
        context.add_import(artifact)

    extends_clause = ""
    if extends_classes:
        extends_clause = "extends " + ", ".join(type_name(a) for a in extends_classes)

    implements_clause = ""
    if interfaces:
        implements_clause = "implements " + ", ".join(type_name(a) for a in interfaces)

    return Relationships(extends_clause, implements_clause)
