"""
Unit tests for schema loading and code writing helpers.
"""

import json
from unittest.mock import Mock, patch

import pytest
import requests

from classgen.codegen.core.exceptions import SchemaError
from classgen.utils import (
    SchemaLoaderError,
    load_json,
    load_json_from_url,
    load_schema,
    write_code,
)


class TestLoadJson:
    """Test JSON loading from files and URLs."""

    def test_file(self, tmp_path):
        """A JSON file is parsed."""
        path = tmp_path / "a.json"
        path.write_text('{"name": "A"}')

        source, data = load_json(file_path=path)

        assert source == str(path)
        assert data == {"name": "A"}

    def test_missing_file(self, tmp_path):
        """A missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_json(file_path=tmp_path / "missing.json")

    def test_invalid_file(self, tmp_path):
        """Malformed JSON raises SchemaLoaderError."""
        path = tmp_path / "a.json"
        path.write_text("{")

        with pytest.raises(SchemaLoaderError, match="Invalid JSON"):
            load_json(file_path=path)

    def test_neither_source(self):
        """One source is required."""
        with pytest.raises(SchemaLoaderError):
            load_json()

    def test_invalid_url(self):
        """URLs need a scheme and host."""
        with pytest.raises(SchemaLoaderError, match="Invalid URL"):
            load_json_from_url("not-a-url")

    @patch("classgen.utils.requests.get")
    def test_url_timeout(self, mock_get):
        """Timeouts become SchemaLoaderError."""
        mock_get.side_effect = requests.exceptions.Timeout()

        with pytest.raises(SchemaLoaderError, match="timeout"):
            load_json_from_url("https://example.com/a.json")

    @patch("classgen.utils.requests.get")
    def test_url_invalid_json(self, mock_get):
        """An undecodable body becomes SchemaLoaderError."""
        response = Mock()
        response.raise_for_status.return_value = None
        response.json.side_effect = ValueError("Expecting value")
        mock_get.return_value = response

        with pytest.raises(SchemaLoaderError, match="Invalid JSON"):
            load_json_from_url("https://example.com/a.json")

    def test_both_sources(self, tmp_path):
        """A file and a URL can't be combined."""
        with pytest.raises(SchemaLoaderError):
            load_json(file_path=tmp_path / "a.json", url="https://example.com/a.json")

    @patch("classgen.utils.requests.get")
    def test_url_http_error(self, mock_get):
        """HTTP errors report the status code."""
        response = Mock()
        response.status_code = 404
        response.raise_for_status.side_effect = requests.exceptions.HTTPError(
            response=response
        )
        mock_get.return_value = response

        with pytest.raises(SchemaLoaderError, match="404"):
            load_json_from_url("https://example.com/a.json")


class TestLoadSchema:
    """Test schema loading."""

    def test_load_schema(self, tmp_path, person_dict):
        """The file content becomes a ClassSchema."""
        path = tmp_path / "person.json"
        path.write_text(json.dumps(person_dict))

        _, schema = load_schema(file_path=path)

        assert schema.name == "Person"
        assert len(schema.attributes) == 2

    def test_not_a_class(self, tmp_path):
        """A JSON array is rejected before building a schema."""
        path = tmp_path / "list.json"
        path.write_text("[]")

        with pytest.raises(SchemaLoaderError, match="must be a JSON object"):
            load_schema(file_path=path)

    def test_bad_entry(self, tmp_path):
        """Entries that can't be represented raise SchemaError."""
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"attributes": [{"name": "a"}]}))

        with pytest.raises(SchemaError):
            load_schema(file_path=path)


class TestWriteCode:
    """Test writing generated code."""

    def test_creates_directories(self, tmp_path):
        """Parent directories are created."""
        path = write_code(tmp_path / "com" / "acme" / "A.java", "class A {}\n")

        assert path.read_text() == "class A {}\n"
