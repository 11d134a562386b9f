"""
Command-line interface for class generation.

Thin shell around JavaGenerator: loads a schema, builds the configuration,
generates the class and writes or displays the result.
"""

import argparse
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.syntax import Syntax
from rich.table import Table
from rich import box

from . import __version__
from .codegen import (
    ConfigError,
    GeneratorConfig,
    GeneratorError,
    JavaGenerator,
    TemplateError,
    generate_code,
    load_config,
)
from .codegen.core.config import get_config_manager
from .codegen.core.schema import ClassSchema
from .logging_config import get_logger, setup_logging
from .utils import SchemaLoaderError, load_schema, write_code

logger = get_logger(__name__)


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


# Initialize rich console
console = Console()


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the ``classgen`` command."""
    parser = argparse.ArgumentParser(
        prog="classgen",
        description="Generate Java class source from a JSON class schema",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    input_group = parser.add_argument_group("input")
    input_group.add_argument(
        "schema",
        nargs="?",
        metavar="SCHEMA",
        help="Path to the JSON class schema",
    )
    input_group.add_argument(
        "--url",
        metavar="URL",
        help="Fetch the JSON class schema from a URL instead of a file",
    )

    output_group = parser.add_argument_group("output")
    output_group.add_argument(
        "--output",
        "-o",
        metavar="FILE",
        help="Output file for generated code (default: stdout)",
    )
    output_group.add_argument(
        "--output-dir",
        metavar="DIR",
        help="Directory to write <ClassName>.java into",
    )

    generation_group = parser.add_argument_group("generation options")
    generation_group.add_argument(
        "--config", metavar="FILE", help="JSON configuration file for code generation"
    )
    generation_group.add_argument(
        "--package",
        metavar="NAME",
        help="Override the package declared in the schema",
    )
    generation_group.add_argument(
        "--indent",
        type=int,
        metavar="N",
        help="Number of spaces per indentation level",
    )
    generation_group.add_argument(
        "--sort-imports",
        action="store_true",
        help="Sort the import block alphabetically",
    )
    generation_group.add_argument(
        "--no-comments",
        action="store_true",
        help="Don't generate javadoc blocks",
    )
    generation_group.add_argument(
        "--save-config",
        metavar="FILE",
        help="Write the effective generator configuration to a JSON file",
    )

    diagnostics_group = parser.add_argument_group("diagnostics")
    diagnostics_group.add_argument(
        "--verbose",
        action="store_true",
        help="Show generation warnings and metadata",
    )
    diagnostics_group.add_argument(
        "--log-level",
        metavar="LEVEL",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )

    return parser


def _build_config(args: argparse.Namespace) -> GeneratorConfig:
    """Merge config file and command-line overrides."""
    overrides: Dict[str, Any] = {}

    if args.indent is not None:
        if args.indent <= 0:
            raise CLIError("--indent must be a positive number")
        overrides["indent_size"] = args.indent
    if args.sort_imports:
        overrides["sort_imports"] = True
    if args.no_comments:
        overrides["add_comments"] = False

    config = load_config(custom_config=overrides, config_file=args.config)

    for warning in get_config_manager().validate_config(config):
        logger.debug("Configuration warning: %s", warning)
        console.print(f"[yellow]⚠ {warning}[/yellow]")

    if args.save_config:
        get_config_manager().save_config(config, args.save_config)
        console.print(f"[green]✓ Saved configuration to {args.save_config}[/green]")

    return config


def _get_schema(args: argparse.Namespace) -> ClassSchema:
    """Load the schema named on the command line."""
    if not args.schema and not args.url:
        raise CLIError("No schema given (pass a file path or --url)")
    if args.schema and args.url:
        raise CLIError("Pass either a schema file or --url, not both")

    source, schema = load_schema(file_path=args.schema, url=args.url)
    logger.info("Loaded schema from %s", source)

    if args.package is not None:
        schema.package = args.package

    return schema


def _resolve_output(
    args: argparse.Namespace, generator: JavaGenerator, schema: ClassSchema
) -> Optional[Path]:
    if args.output and args.output_dir:
        raise CLIError("Pass either --output or --output-dir, not both")
    if args.output:
        return Path(args.output)
    if args.output_dir:
        if not schema.name:
            raise CLIError("--output-dir requires the schema to name the class")
        return Path(args.output_dir) / generator.output_filename(schema)
    return None


def _show_metadata(result) -> None:
    """Display generation warnings and metadata."""
    for warning in result.warnings:
        console.print(f"[yellow]⚠ {warning}[/yellow]")

    table = Table(title="Generation Details", box=box.ROUNDED)
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="green")
    for key, value in result.metadata.items():
        table.add_row(key.replace("_", " ").title(), str(value))
    console.print(table)


def run(args: argparse.Namespace) -> int:
    """
    Execute a parsed command line.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    try:
        config = _build_config(args)
        schema = _get_schema(args)
        generator = JavaGenerator(config)
        output_path = _resolve_output(args, generator, schema)

        result = generate_code(generator, schema)
        if not result.success:
            console.print(f"[red]✗ {result.error_message}[/red]")
            return 1

        if args.verbose:
            _show_metadata(result)

        if output_path:
            write_code(output_path, result.code)
            console.print(f"[green]✓ Wrote {output_path}[/green]")
        else:
            console.print(Syntax(result.code, "java", line_numbers=False))

        return 0

    except (CLIError, ConfigError, SchemaLoaderError, TemplateError, GeneratorError) as e:
        console.print(f"[red]✗ Error:[/red] {e}")
        logger.error("%s", e)
        return 1
    except FileNotFoundError as e:
        console.print(f"[red]✗ Error:[/red] {e}")
        return 1
    except OSError as e:
        console.print(f"[red]✗ Could not write output:[/red] {e}")
        logger.error("Write failed: %s", e)
        return 1


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point of the ``classgen`` command."""
    parser = create_parser()
    args = parser.parse_args(argv)
    setup_logging(level=args.log_level)
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
