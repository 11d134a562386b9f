"""
Constructor rendering.
"""

from ...core.context import GenerationContext
from ...core.exceptions import ConfigurationError
from ...core.naming import type_name
from ...core.schema import ClassSchema


def format_no_args_constructor(schema: ClassSchema, context: GenerationContext) -> str:
    """Render ``public Name() { <content> }`` with the schema's default body."""
    content = schema.default_constructor.content
    lines = [context.indented(f"public {schema.name}() {{")]
    if content:
        lines.append(context.indented(content, 2))
    lines.append(context.indented("}"))
    return "\n".join(lines)


def format_all_args_constructor(schema: ClassSchema, context: GenerationContext) -> str:
    """Render a constructor taking every attribute and assigning it to ``this``."""
    for attribute in schema.attributes:
        context.add_import(attribute.type)

    parameters = ", ".join(
        f"{type_name(attribute.type)} {attribute.name}" for attribute in schema.attributes
    )
    lines = [context.indented(f"public {schema.name}({parameters}) {{")]
    lines.extend(
        context.indented(f"this.{attribute.name} = {attribute.name};", 2)
        for attribute in schema.attributes
    )
    lines.append(context.indented("}"))
    return "\n".join(lines)


def format_constructors(schema: ClassSchema, context: GenerationContext) -> str:
    """
    Render the requested constructors.

    The no-args and all-args constructors are independent; when both are
    requested they are separated by a blank line.

    Raises:
        ConfigurationError: If a constructor is requested but the class
            has no name
    """
    if not (schema.constructor_no_args or schema.all_args_constructor):
        return ""

    if not schema.name:
        raise ConfigurationError(
            "The name of class required to generate constructors"
        )

    constructors = []
    if schema.constructor_no_args:
        constructors.append(format_no_args_constructor(schema, context))
    if schema.all_args_constructor:
        constructors.append(format_all_args_constructor(schema, context))

    return "\n\n".join(constructors)
