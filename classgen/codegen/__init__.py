"""
Class code generation module.

Generates Java class source from a declarative class schema.
"""

from typing import Any, Callable, Dict, Mapping, Optional, Union
from datetime import datetime

from .core.generator import CodeGenerator, GenerationResult, generate_code
from .core.exceptions import GeneratorError, ConfigurationError, SchemaError
from .core.schema import ClassSchema, AttributeSpec, MethodSpec, AnnotationSpec
from .core.config import GeneratorConfig, ConfigManager, ConfigError, load_config
from .core.templates import TemplateError
from .languages.java import JavaGenerator, create_java_generator


def generate_class(
    schema: Union[ClassSchema, Mapping[str, Any]],
    config: Optional[Union[GeneratorConfig, Dict[str, Any]]] = None,
    clock: Optional[Callable[[], datetime]] = None,
) -> str:
    """
    Generate Java source for one class.

    Args:
        schema: ClassSchema or a mapping in the JSON schema format
        config: GeneratorConfig or dict of overrides
        clock: Source of the current time for serialVersionUID

    Returns:
        Complete source text

    Raises:
        SchemaError: If a mapping cannot be converted to a ClassSchema
        ConfigurationError: If constructors are requested without a name
    """
    if not isinstance(schema, ClassSchema):
        schema = ClassSchema.from_dict(schema)

    if not isinstance(config, GeneratorConfig):
        config = load_config(custom_config=config)

    return JavaGenerator(config, clock=clock).generate(schema)


__all__ = [
    "CodeGenerator",
    "GenerationResult",
    "generate_code",
    "generate_class",
    "GeneratorError",
    "ConfigurationError",
    "SchemaError",
    "ClassSchema",
    "AttributeSpec",
    "MethodSpec",
    "AnnotationSpec",
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    "TemplateError",
    "JavaGenerator",
    "create_java_generator",
]
