"""
Base generator interface for class generation targets.

Defines the contract that language generators implement, plus the
result wrapper used by the command line.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Any, Optional
from pathlib import Path

from .config import GeneratorConfig, load_config
from .exceptions import GeneratorError, ConfigurationError, SchemaError
from .schema import ClassSchema
from .templates import TemplateEngine, create_template_engine
from ...logging_config import get_logger

logger = get_logger(__name__)

__all__ = [
    "CodeGenerator",
    "GenerationResult",
    "GeneratorError",
    "ConfigurationError",
    "SchemaError",
    "generate_code",
]


class CodeGenerator(ABC):
    """Abstract base class for class generators."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize generator with optional configuration."""
        self.config = config or load_config()
        self._template_engine = None
        self._setup_templates()

    def _setup_templates(self):
        """Setup template engine for this generator."""
        if self.config.template_dir:
            template_dir = Path(self.config.template_dir)
        else:
            template_dir = self.get_template_directory()
        self._template_engine = create_template_engine(template_dir)

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'java')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.java')."""
        pass

    def get_template_directory(self) -> Optional[Path]:
        """
        Return the directory containing templates for this generator.

        Return None to use in-memory templates only.
        """
        return None

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._setup_templates()
        return self._template_engine

    @abstractmethod
    def generate(self, schema: ClassSchema) -> str:
        """
        Generate source code for one class.

        Args:
            schema: Class description

        Returns:
            Generated source as a string
        """
        pass

    def validate_schema(self, schema: ClassSchema) -> List[str]:
        """
        Check a schema for problems that degrade the output.

        Args:
            schema: Schema to validate

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = []

        if not schema.attributes and not schema.methods:
            warnings.append(f"Class '{schema.name}' has no attributes or methods")

        return warnings

    def format_code(self, code: str) -> str:
        """
        Apply formatting to generated code.

        Strips trailing whitespace and collapses runs of blank lines.
        """
        lines = code.split("\n")
        formatted_lines = []
        blank_count = 0

        for line in lines:
            stripped = line.rstrip()
            if not stripped:
                blank_count += 1
                if blank_count <= 1:  # Allow a single blank line between blocks
                    formatted_lines.append("")
            else:
                blank_count = 0
                formatted_lines.append(stripped)

        return "\n".join(formatted_lines).strip("\n") + "\n"

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """Render a template with context."""
        return self.template_engine.render_template(template_name, context)

    def template_exists(self, template_name: str) -> bool:
        """Check if a template exists."""
        return self.template_engine.template_exists(template_name)


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self, code: str, warnings: List[str] = None, metadata: Dict[str, Any] = None
    ):
        """
        Initialize generation result.

        Args:
            code: Generated code
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.code = code
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message = None
        self.exception = None

    @classmethod
    def error(cls, message: str, exception: Exception = None) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(code="")
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


def generate_code(generator: CodeGenerator, schema: ClassSchema) -> GenerationResult:
    """
    Generate code using the specified generator with error handling.

    Args:
        generator: Code generator instance
        schema: Class description

    Returns:
        GenerationResult with code, warnings, and metadata
    """
    try:
        warnings = generator.validate_schema(schema)
        for warning in warnings:
            logger.warning("%s", warning)

        code = generator.generate(schema)

        metadata = {
            "language": generator.language_name,
            "file_extension": generator.file_extension,
            "class_name": schema.name,
            "package": schema.package,
            "attribute_count": len(schema.attributes),
            "method_count": len(schema.methods),
        }

        return GenerationResult(code, warnings, metadata)

    except GeneratorError as e:
        logger.error("Code generation failed: %s", e)
        return GenerationResult.error(f"Code generation failed: {str(e)}", exception=e)
    except Exception as e:
        logger.error("Unexpected error during code generation: %s", e, exc_info=True)
        return GenerationResult.error(f"Code generation failed: {str(e)}", exception=e)
