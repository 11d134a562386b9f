"""
Template engine wrapper for code generation.

Provides a simple interface for Jinja2 template rendering. Placeholders
missing from the render context are written back unchanged.
"""

from typing import Dict, Any, Optional
from pathlib import Path

from jinja2 import (
    DebugUndefined,
    DictLoader,
    Environment,
    FileSystemLoader,
    TemplateNotFound,
)


class TemplateError(Exception):
    """Exception raised for template-related errors."""

    pass


class TemplateEngine:
    """Wrapper for the Jinja2 environment used to assemble source files."""

    def __init__(self, template_dir: Optional[Path] = None):
        """
        Initialize template engine.

        Args:
            template_dir: Directory containing template files
        """
        self.template_dir = Path(template_dir) if template_dir else None
        self._env = None
        self._setup_environment()

    def _setup_environment(self):
        """Setup Jinja2 environment."""
        if self.template_dir and self.template_dir.exists():
            loader = FileSystemLoader(str(self.template_dir))
        else:
            # Use in-memory templates
            loader = DictLoader({})

        # Java source is not markup, never escape it
        self._env = Environment(
            loader=loader,
            autoescape=False,
            undefined=DebugUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def get_source(self, template_name: str) -> str:
        """
        Return the raw text of a template.

        Raises:
            TemplateError: If the template cannot be found
        """
        try:
            source, _, _ = self._env.loader.get_source(self._env, template_name)
        except TemplateNotFound:
            raise TemplateError(f"Template not found: {template_name}")
        return source

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template with the given context.

        Args:
            template_name: Name of template file
            context: Variables to pass to template

        Returns:
            Rendered template content
        """
        try:
            template = self._env.get_template(template_name)
        except TemplateNotFound:
            raise TemplateError(f"Template not found: {template_name}")

        try:
            return template.render(**context)
        except Exception as e:
            raise TemplateError(f"Failed to render template {template_name}: {str(e)}")

    def render_string(self, template_string: str, context: Dict[str, Any]) -> str:
        """
        Render a template string with the given context.

        Args:
            template_string: Template content as string
            context: Variables to pass to template

        Returns:
            Rendered content
        """
        try:
            template = self._env.from_string(template_string)
            return template.render(**context)
        except Exception as e:
            raise TemplateError(f"Failed to render template string: {str(e)}")

    def add_template(self, name: str, content: str):
        """
        Add an in-memory template.

        Args:
            name: Template name
            content: Template content
        """
        if not isinstance(self._env.loader, DictLoader):
            # Convert to DictLoader to support in-memory templates
            self._env.loader = DictLoader({})

        self._env.loader.mapping[name] = content

    def template_exists(self, template_name: str) -> bool:
        """Check if a template exists."""
        try:
            self._env.loader.get_source(self._env, template_name)
            return True
        except TemplateNotFound:
            return False


def create_template_engine(template_dir: Optional[Path] = None) -> TemplateEngine:
    """Create a template engine, optionally bound to a template directory."""
    return TemplateEngine(template_dir)
