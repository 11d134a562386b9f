"""
Exceptions raised while building a class.
"""


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class ConfigurationError(GeneratorError):
    """Raised when the schema lacks something a requested feature needs."""

    pass


class SchemaError(GeneratorError):
    """Raised when a schema mapping cannot be turned into a ClassSchema."""

    pass
