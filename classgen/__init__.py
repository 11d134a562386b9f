"""
classgen - generate Java class source from a declarative schema.
"""

from .codegen import (
    ClassSchema,
    ConfigurationError,
    GeneratorConfig,
    GeneratorError,
    JavaGenerator,
    SchemaError,
    generate_class,
)

__version__ = "0.1.0"

__all__ = [
    "ClassSchema",
    "ConfigurationError",
    "GeneratorConfig",
    "GeneratorError",
    "JavaGenerator",
    "SchemaError",
    "generate_class",
    "__version__",
]
