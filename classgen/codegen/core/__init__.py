"""
Core code generation components.

Provides the schema model, naming utilities, generation context,
configuration and templating shared by language generators.
"""

from .generator import CodeGenerator, GenerationResult, generate_code
from .exceptions import GeneratorError, ConfigurationError, SchemaError
from .schema import (
    ClassSchema,
    AttributeSpec,
    MethodSpec,
    ParameterSpec,
    AnnotationSpec,
    AnnotationParameter,
    DefaultConstructorSpec,
)
from .naming import (
    capitalize,
    is_qualified,
    package_of,
    simple_type_of,
    strip_generic,
    type_name,
)
from .context import GenerationContext, ImportCollector
from .config import GeneratorConfig, ConfigManager, ConfigError, load_config
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Base generator interface
    "CodeGenerator",
    "GenerationResult",
    "generate_code",
    # Errors
    "GeneratorError",
    "ConfigurationError",
    "SchemaError",
    # Schema model
    "ClassSchema",
    "AttributeSpec",
    "MethodSpec",
    "ParameterSpec",
    "AnnotationSpec",
    "AnnotationParameter",
    "DefaultConstructorSpec",
    # Naming utilities
    "capitalize",
    "is_qualified",
    "package_of",
    "simple_type_of",
    "strip_generic",
    "type_name",
    # Per-call state
    "GenerationContext",
    "ImportCollector",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
