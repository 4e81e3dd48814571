"""Schema input and output file helpers.

Every loader here returns a fully loaded ``SchemaProgram``: JSON syntax errors
and schema errors are both reported as ``SchemaLoadError`` naming the source
(file path, URL or ``<stdin>``) they came from.
"""

import json
from pathlib import Path
from typing import IO, Optional
from urllib.parse import urlparse

import requests

from .logging_config import get_logger
from .schema.loader import SchemaError, load_program
from .schema.types import SchemaProgram

logger = get_logger(__name__)


class SchemaLoadError(SchemaError):
    """A schema source could not be read, parsed or loaded."""

    pass


def parse_schema(text: str, source: str) -> SchemaProgram:
    """Parse schema JSON ``text`` read from ``source`` and load it.

    Raises:
        SchemaLoadError: If the text is not JSON or not a valid schema.
    """
    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        raise SchemaLoadError(
            f"{source}: invalid JSON at line {e.lineno}, column {e.colno}: {e.msg}"
        ) from e

    if isinstance(document, dict) and "models" not in document:
        logger.warning("%s declares no 'models'; nothing will be emitted", source)

    try:
        return load_program(document, source)
    except SchemaError as e:
        raise SchemaLoadError(f"{source}: {e}") from e


def read_schema_file(file_path: str | Path) -> SchemaProgram:
    """Load the schema stored at ``file_path``.

    Raises:
        SchemaLoadError: If the file is missing, unreadable or invalid.
    """
    path = Path(file_path)
    if not path.is_file():
        raise SchemaLoadError(f"Schema file not found: {path}")
    if path.suffix.lower() != ".json":
        logger.warning("Schema file does not have a .json extension: %s", path)

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise SchemaLoadError(f"Error reading schema file {path}: {e}") from e
    return parse_schema(text, str(path))


def read_schema_stream(stream: IO[str], source: str = "<stdin>") -> SchemaProgram:
    """Load a schema from an open text stream."""
    return parse_schema(stream.read(), source)


def fetch_schema(url: str, timeout: int = 30) -> SchemaProgram:
    """Download and load the schema published at ``url``.

    Raises:
        SchemaLoadError: If the URL is invalid, the request fails or the
            response is not a valid schema.
    """
    parsed_url = urlparse(url)
    if parsed_url.scheme not in ("http", "https") or not parsed_url.netloc:
        raise SchemaLoadError(f"Invalid schema URL: {url}")

    logger.debug("Fetching schema from %s", url)
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.exceptions.Timeout as e:
        raise SchemaLoadError(f"Timed out fetching schema from {url}") from e
    except requests.exceptions.HTTPError as e:
        raise SchemaLoadError(
            f"HTTP error {e.response.status_code} fetching schema from {url}"
        ) from e
    except requests.exceptions.RequestException as e:
        raise SchemaLoadError(f"Could not fetch schema from {url}: {e}") from e

    return parse_schema(response.text, url)


def load_schema(
    file_path: Optional[str | Path] = None,
    url: Optional[str] = None,
    timeout: int = 30,
) -> SchemaProgram:
    """Load a schema from exactly one of ``file_path`` or ``url``."""
    if (file_path is None) == (url is None):
        raise SchemaLoadError("Exactly one of file_path or url must be given")

    program = read_schema_file(file_path) if file_path is not None else fetch_schema(url, timeout)
    logger.info("Loaded %d model(s) from %s", len(program.models), program.source)
    return program


def write_file(path: str | Path, content: str) -> Path:
    """Write ``content`` to ``path``, creating parent directories.

    Args:
        path: Destination file.
        content: Text to write (UTF-8).

    Returns:
        The written path.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    logger.info("Wrote %s (%d bytes)", path, len(content.encode("utf-8")))
    return path
