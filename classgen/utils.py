"""Loading class schemas and saving generated sources.

A schema is a JSON object read from a local file or fetched over HTTP.
Whatever the source, the text goes through the same parsing step so that
errors read the same way.
"""

import json
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

import requests

from .codegen.core.schema import ClassSchema
from .logging_config import get_logger

logger = get_logger(__name__)


class SchemaLoaderError(Exception):
    """Raised when a schema cannot be read or is not a JSON object."""

    pass


def _parse_schema_text(text: str, source: str) -> Any:
    """Decode schema text; ``source`` names the file or URL in errors."""
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        logger.error("Invalid JSON in %s: %s", source, e)
        raise SchemaLoaderError(f"Invalid JSON in {source}: {e}") from e


def load_json_from_file(file_path: str | Path) -> tuple[str, Any]:
    """Read and decode a schema file.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        SchemaLoaderError: If the file can't be read or decoded.
    """
    path = Path(file_path)
    if not path.is_file():
        raise FileNotFoundError(f"Schema file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise SchemaLoaderError(f"Cannot read schema file {path}: {e}") from e

    logger.debug("Read %d bytes from %s", len(text), path)
    return str(path), _parse_schema_text(text, str(path))


def load_json_from_url(url: str, timeout: int = 30) -> tuple[str, Any]:
    """Fetch and decode a schema over HTTP(S).

    Raises:
        SchemaLoaderError: On a malformed URL, any request failure, or an
            undecodable body.
    """
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise SchemaLoaderError(f"Invalid URL: {url}")

    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.exceptions.Timeout as e:
        raise SchemaLoaderError(f"Request timeout after {timeout}s: {url}") from e
    except requests.exceptions.HTTPError as e:
        status = e.response.status_code if e.response is not None else "?"
        raise SchemaLoaderError(f"HTTP error {status} fetching schema: {url}") from e
    except requests.exceptions.RequestException as e:
        raise SchemaLoaderError(f"Could not fetch schema from {url}: {e}") from e

    logger.debug("Fetched schema from %s", url)
    try:
        return url, response.json()
    except ValueError as e:
        logger.error("Invalid JSON in %s: %s", url, e)
        raise SchemaLoaderError(f"Invalid JSON in {url}: {e}") from e


def load_json(
    file_path: str | Path | None = None,
    url: str | None = None,
    timeout: int = 30,
) -> tuple[str, Any]:
    """Decode JSON from exactly one of ``file_path`` or ``url``."""
    if bool(file_path) == bool(url):
        raise SchemaLoaderError("Exactly one of a schema file or URL is required")

    if file_path:
        return load_json_from_file(file_path)
    return load_json_from_url(url, timeout)


def load_schema(
    file_path: str | Path | None = None,
    url: str | None = None,
    timeout: int = 30,
) -> tuple[str, ClassSchema]:
    """Load a class schema from a file or URL.

    Returns:
        Tuple of (source description, ClassSchema).

    Raises:
        SchemaLoaderError: If loading fails or the top level is not an object.
        SchemaError: If an entry inside the object can't be represented.
    """
    source, data = load_json(file_path=file_path, url=url, timeout=timeout)
    if not isinstance(data, dict):
        raise SchemaLoaderError(
            f"Schema in {source} must be a JSON object, got {type(data).__name__}"
        )

    logger.info("Loaded schema %s from %s", data.get("name"), source)
    return source, ClassSchema.from_dict(data)


def write_code(output_path: str | Path, code: str) -> Path:
    """Write generated code to disk, creating parent directories."""
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(code, encoding="utf-8")
    logger.info("Wrote %d characters to %s", len(code), path)
    return path
