"""
Java class generator implementation.

Assembles a complete Java source file from a ClassSchema: every formatter
writes into one GenerationContext and the collected fragments are
substituted into the class template.
"""

from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from ...core.config import GeneratorConfig
from ...core.context import GenerationContext
from ...core.generator import CodeGenerator
from ...core.naming import is_primitive, is_qualified, strip_generic
from ...core.schema import ClassSchema
from ....logging_config import get_logger
from .annotations import format_annotations
from .attributes import format_attributes
from .constructors import format_constructors
from .javadoc import format_javadoc
from .methods import format_methods
from .relationships import format_relationships
from .synthetic import format_equals_hash_code, format_to_string

logger = get_logger(__name__)

# Unqualified names that resolve without an import
IMPLICIT_TYPES = {"Object", "String"}


class JavaGenerator(CodeGenerator):
    """Code generator for Java classes."""

    def __init__(
        self,
        config: Optional[GeneratorConfig] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """
        Initialize Java generator.

        Args:
            config: Generator configuration
            clock: Source of the current time, used for serialVersionUID
        """
        super().__init__(config)
        self.clock = clock or datetime.now

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "java"

    @property
    def file_extension(self) -> str:
        """Return Java file extension."""
        return ".java"

    def get_template_directory(self) -> Path:
        """Return the Java templates directory."""
        return Path(__file__).parent / "templates"

    def create_context(self, schema: ClassSchema) -> GenerationContext:
        """Create the per-call state for one class."""
        return GenerationContext(
            package=schema.package,
            indent=self.config.indent,
            add_comments=self.config.add_comments,
            now=self.clock(),
        )

    def output_filename(self, schema: ClassSchema) -> str:
        """File name the generated class should be saved under."""
        return f"{schema.name}{self.file_extension}"

    def generate(self, schema: ClassSchema) -> str:
        """
        Generate the complete source of one class.

        Raises:
            ConfigurationError: If constructors are requested without a
                class name
            TemplateError: If the class template cannot be loaded
        """
        context = self.create_context(schema)
        logger.debug("Generating class %s.%s", schema.package, schema.name)

        relationships = format_relationships(
            schema.extends_classes, schema.interfaces, context
        )
        attributes = format_attributes(
            schema.attributes, context, serializable=schema.serializable
        )
        constructors = format_constructors(schema, context)
        methods = format_methods(schema.methods, context)
        internal_methods = [
            format_to_string(schema, context),
            format_equals_hash_code(schema, context),
            attributes.accessors,
        ]
        annotations_class = format_annotations(schema.annotations_class, context)
        class_java_doc = format_javadoc(
            schema.javadoc if self.config.add_comments else None,
            indent="",
            author=schema.author,
        )

        for artifact in schema.additional_imports:
            context.add_import(artifact)

        # Imports are read last, once every fragment had the chance to register
        imports = context.imports.render_all(sort=self.config.sort_imports)

        template_context = {
            "package": schema.package,
            "imports": imports,
            "class_java_doc": class_java_doc,
            "annotations_class": annotations_class,
            "encapsulation_class": schema.encapsulation,
            "name": schema.name or "",
            "author": schema.author or "",
            "extends_classes": relationships.extends_clause,
            "interfaces": relationships.implements_clause,
            "attributes": attributes.fields,
            "constructors": constructors,
            "methods": methods,
            "internal_methods": "\n\n".join(part for part in internal_methods if part),
        }

        code = self.render_template(self.config.template_name, template_context)
        if self.config.format_output:
            code = self.format_code(code)
        if self.config.line_ending != "\n":
            code = code.replace("\n", self.config.line_ending)

        logger.info(
            "Generated class %s with %d import(s)", schema.name, len(context.imports)
        )
        return code

    def validate_schema(self, schema: ClassSchema) -> List[str]:
        """Validate a schema for Java generation."""
        warnings = super().validate_schema(schema)

        if not schema.name:
            warnings.append("Class has no name")

        seen = set()
        for attribute in schema.attributes:
            if attribute.name in seen:
                warnings.append(f"Duplicate attribute {attribute.name}")
            seen.add(attribute.name)

            if not attribute.getters and not attribute.setters:
                warnings.append(
                    f"Attribute {schema.name}.{attribute.name} has no accessors"
                )

            if not self._resolvable(attribute.type):
                warnings.append(
                    f"Type {attribute.type} of {schema.name}.{attribute.name} "
                    f"has no package and will not be imported"
                )

        for method in schema.methods:
            for artifact in [method.return_type, *(p.type for p in method.parameters)]:
                if not self._resolvable(artifact):
                    warnings.append(
                        f"Type {artifact} in {schema.name}.{method.name} "
                        f"has no package and will not be imported"
                    )

        if not schema.attributes:
            if schema.generate_to_string:
                warnings.append("toString requested for a class without attributes")
            if schema.generate_equals_hash_code:
                warnings.append(
                    "equals/hashCode requested for a class without attributes"
                )

        return warnings

    @staticmethod
    def _resolvable(artifact: str) -> bool:
        return (
            is_qualified(strip_generic(artifact))
            or is_primitive(artifact)
            or strip_generic(artifact) in IMPLICIT_TYPES
        )


# Factory functions
def create_java_generator(
    config: Optional[Dict[str, Any]] = None,
    clock: Optional[Callable[[], datetime]] = None,
) -> JavaGenerator:
    """Create a Java generator, merging ``config`` over the defaults."""
    from ...core.config import load_config

    return JavaGenerator(load_config(custom_config=config), clock=clock)
