"""
Field declarations and their accessor methods.
"""

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from ...core.context import GenerationContext
from ...core.naming import capitalize, type_name
from ...core.schema import AttributeSpec
from ....logging_config import get_logger
from .annotations import format_annotation
from .javadoc import format_javadoc

logger = get_logger(__name__)

SERIAL_VERSION_UID = "serialVersionUID"


@dataclass
class AttributeBlock:
    """Rendered field declarations and accessors of a class."""

    fields: str
    accessors: str


def format_accessors(spec: AttributeSpec, context: GenerationContext) -> str:
    """
    Render the getter and/or setter of an attribute.

    ``age`` gives ``getAge``/``setAge``; ``ID`` gives ``getID``/``setID``.
    Returns an empty string when neither accessor is requested.
    """
    java_type = type_name(spec.type)
    suffix = capitalize(spec.name)
    methods = []

    if spec.getters:
        methods.append(
            "\n".join(
                [
                    context.indented(f"public {java_type} get{suffix}() {{"),
                    context.indented(f"return this.{spec.name};", 2),
                    context.indented("}"),
                ]
            )
        )

    if spec.setters:
        methods.append(
            "\n".join(
                [
                    context.indented(
                        f"public void set{suffix}({java_type} {spec.name}) {{"
                    ),
                    context.indented(f"this.{spec.name} = {spec.name};", 2),
                    context.indented("}"),
                ]
            )
        )

    return "\n\n".join(methods)


def format_field(spec: AttributeSpec, context: GenerationContext) -> Tuple[str, str]:
    """
    Render a field declaration.

    Returns:
        Tuple of (field text, accessor text)
    """
    context.add_import(spec.type)

    lines = []
    javadoc = format_javadoc(
        spec.javadoc if context.add_comments else None, indent=context.indent
    )
    if javadoc:
        lines.append(javadoc)

    for annotation in spec.annotations:
        lines.append(context.indented(format_annotation(annotation, context)))

    declaration = " ".join(
        part for part in (spec.encapsulation, type_name(spec.type), spec.name) if part
    )
    if spec.value is not None and spec.value != "":
        declaration += f" = {spec.value}"
    lines.append(context.indented(f"{declaration};"))

    return "\n".join(lines), format_accessors(spec, context)


def serial_version_value(context: GenerationContext) -> str:
    """
    Build the serialVersionUID literal from the context clock.

    Digits are year, month, day of week (Sunday is 00), hour and minute,
    joined by underscores, e.g. ``2026_10_01_14_05L``.

    The month is the calendar month (October is ``10``) and every part is
    zero-padded to two digits. Older generators wrote a zero-based month
    (October as ``09``) and padded the value 10 to ``010``, so the same
    instant yields different digits than theirs.
    """
    now = context.now
    day_of_week = now.isoweekday() % 7
    parts = [
        str(now.year),
        f"{now.month:02d}",
        f"{day_of_week:02d}",
        f"{now.hour:02d}",
        f"{now.minute:02d}",
    ]
    return "_".join(parts) + "L"


def serial_version_attribute(context: GenerationContext) -> AttributeSpec:
    """Synthesize the ``private static final long serialVersionUID`` field."""
    return AttributeSpec(
        name=SERIAL_VERSION_UID,
        type="long",
        encapsulation="private static final",
        value=serial_version_value(context),
    )


def format_attributes(
    attributes: Sequence[AttributeSpec],
    context: GenerationContext,
    serializable: bool = False,
) -> AttributeBlock:
    """
    Render all fields and, separately, all accessors.

    When ``serializable`` is set a serialVersionUID field is placed before
    the declared attributes.
    """
    fields: List[str] = []
    accessors: List[str] = []

    if serializable:
        serial_field, _ = format_field(serial_version_attribute(context), context)
        fields.append(serial_field)
        logger.debug("Added %s field", SERIAL_VERSION_UID)

    for spec in attributes:
        field_text, accessor_text = format_field(spec, context)
        fields.append(field_text)
        if accessor_text:
            accessors.append(accessor_text)

    return AttributeBlock(fields="\n\n".join(fields), accessors="\n\n".join(accessors))
