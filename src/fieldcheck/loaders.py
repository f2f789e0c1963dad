"""Loading raw schemas and documents from YAML or JSON."""

import json
from pathlib import Path
from typing import Any, cast

import yaml

SUFFIX_FORMATS = {".yaml": "yaml", ".yml": "yaml", ".json": "json"}


def load_document(content: str, format: str = "yaml") -> Any:
    """Parse YAML or JSON text.

    Raises:
        ValueError: If format is not supported or parsing fails
    """
    if format == "yaml":
        try:
            return yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ValueError(f"Failed to parse YAML: {e}") from e
    elif format == "json":
        try:
            return json.loads(content)
        except json.JSONDecodeError as e:
            raise ValueError(f"Failed to parse JSON: {e}") from e
    else:
        raise ValueError(f"Unsupported format: {format}. Use 'yaml' or 'json'")


def load_document_from_file(path: str | Path) -> Any:
    """Load a YAML or JSON file, picking the parser from the file extension.

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If the extension is not supported or parsing fails
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    format = SUFFIX_FORMATS.get(path.suffix.lower())
    if format is None:
        raise ValueError(f"Unsupported file extension: {path.suffix}. Use .yaml, .yml, or .json")

    return load_document(path.read_text(encoding="utf-8"), format=format)


def load_schema(content: str, format: str = "yaml") -> dict[str, Any]:
    """Load a raw schema from string content.

    Args:
        content: Schema content as string
        format: Format of the content ('yaml' or 'json')

    Returns:
        Raw schema dictionary, ready to be compiled

    Raises:
        ValueError: If format is not supported, parsing fails or the
            document is not a mapping
    """
    return _ensure_mapping(load_document(content, format=format))


def load_schema_from_file(path: str | Path) -> dict[str, Any]:
    """Load a raw schema from a YAML or JSON file.

    Args:
        path: Path to the schema file

    Returns:
        Raw schema dictionary, ready to be compiled

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If file format is not supported, parsing fails or the
            document is not a mapping
    """
    return _ensure_mapping(load_document_from_file(path))


def _ensure_mapping(document: Any) -> dict[str, Any]:
    if not isinstance(document, dict):
        raise ValueError(f"Schema document must be a mapping, got {type(document).__name__}")
    return cast(dict[str, Any], document)
