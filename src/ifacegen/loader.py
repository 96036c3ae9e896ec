"""Load API docs documents from a URL, local file, or stdin.

This module handles all I/O for fetching a raw API docs document and turning
it into an :class:`~ifacegen.models.ApiDocs` instance. It supports both JSON
and YAML with automatic format detection.

The public functions are:

* :func:`load_document` -- Load and parse a document from any supported source.
* :func:`parse_api_docs` -- Validate a raw dict into :class:`~ifacegen.models.ApiDocs`.
* :func:`load_api_docs` -- Both of the above.

Every failure is reported as :class:`~ifacegen.exceptions.InputLoadError`, so
callers can tell a broken input document apart from a schema that fails to
render.
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any

import httpx
import yaml
from pydantic import ValidationError

from ifacegen.exceptions import InputLoadError
from ifacegen.models import ApiDocs

logger = logging.getLogger(__name__)


def load_api_docs(source: str) -> ApiDocs:
    """Load *source* and validate it as an API docs document.

    Args:
        source: A URL (http/https), file path, or '-' for stdin.

    Returns:
        The validated document.

    Raises:
        InputLoadError: If the source cannot be loaded, parsed, or validated.
    """
    return parse_api_docs(load_document(source))


def load_document(source: str) -> dict[str, Any]:
    """Load a raw document from URL, file path, or stdin ('-').

    Supports JSON and YAML formats.
    Auto-detects format from content/extension.

    Args:
        source: A URL (http/https), file path, or '-' for stdin.

    Returns:
        The parsed document as a dictionary.

    Raises:
        InputLoadError: If the source cannot be loaded or parsed.
    """
    logger.debug("Loading API docs from %s", source)
    if source == "-":
        return _load_from_stdin()
    elif source.startswith(("http://", "https://")):
        return _load_from_url(source)
    else:
        return _load_from_file(source)


def parse_api_docs(raw: dict[str, Any]) -> ApiDocs:
    """Validate a raw document dict into :class:`~ifacegen.models.ApiDocs`.

    Only the document's shape is checked here (known ``type`` values, a
    boolean ``required`` on every schema, string route fields). Whether an
    ``array`` actually carries its element schema is checked by the renderer.

    Raises:
        InputLoadError: If validation fails. The message lists each offending
            location, e.g. ``schemas.user.name.required: Field required``.
    """
    try:
        return ApiDocs.model_validate(raw)
    except ValidationError as exc:
        problems = [
            f"  {'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in exc.errors()
        ]
        raise InputLoadError(
            "Invalid API docs document:\n" + "\n".join(problems)
        ) from exc


def _load_from_stdin() -> dict[str, Any]:
    """Read the document from stdin.

    Raises:
        InputLoadError: If stdin is empty or content cannot be parsed.
    """
    try:
        content = sys.stdin.read()
    except Exception as exc:
        raise InputLoadError(f"Failed to read from stdin: {exc}") from exc

    if not content.strip():
        raise InputLoadError("No input received from stdin")

    return _parse_content(content, hint="stdin")


def _load_from_url(url: str) -> dict[str, Any]:
    """Fetch the document from *url*. Supports JSON and YAML responses.

    Raises:
        InputLoadError: If the URL cannot be fetched or content cannot be parsed.
    """
    try:
        response = httpx.get(url, timeout=30.0, follow_redirects=True)
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise InputLoadError(
            f"HTTP {exc.response.status_code} fetching API docs from {url}"
        ) from exc
    except httpx.RequestError as exc:
        raise InputLoadError(f"Failed to fetch API docs from {url}: {exc}") from exc

    content_type = response.headers.get("content-type", "")
    hint = ""
    if "json" in content_type:
        hint = "json"
    elif "yaml" in content_type or "yml" in content_type:
        hint = "yaml"

    return _parse_content(response.text, hint=hint)


def _load_from_file(path: str) -> dict[str, Any]:
    """Load the document from a local file.

    Supports .json, .yaml, and .yml extensions. Falls back to content-based
    detection if the extension is not recognized.

    Raises:
        InputLoadError: If the file cannot be read or content cannot be parsed.
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise InputLoadError(f"API docs file not found: {path}")

    try:
        content = file_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise InputLoadError(f"API docs file is not valid UTF-8: {path} ({exc.reason})") from exc
    except OSError as exc:
        raise InputLoadError(f"Failed to open {path}: {exc}") from exc

    if not content.strip():
        raise InputLoadError(f"API docs file is empty: {path}")

    suffix = file_path.suffix.lower()
    hint = ""
    if suffix == ".json":
        hint = "json"
    elif suffix in (".yaml", ".yml"):
        hint = "yaml"

    return _parse_content(content, hint=hint)


def _parse_content(content: str, hint: str = "") -> dict[str, Any]:
    """Parse content as JSON or YAML.

    Tries JSON first (unless hint is 'yaml'), then falls back to YAML.

    Args:
        content: The raw string content.
        hint: Optional format hint ('json' or 'yaml').

    Returns:
        The parsed dictionary.

    Raises:
        InputLoadError: If the content cannot be parsed as either format.
    """
    json_error: Exception | None = None
    yaml_error: Exception | None = None

    if hint != "yaml":
        try:
            result = json.loads(content)
        except json.JSONDecodeError as exc:
            json_error = exc
            # An explicit JSON hint means no YAML fallback
            if hint == "json":
                raise InputLoadError(f"Invalid JSON: {exc}") from exc
        else:
            return _ensure_object(result)

    try:
        result = yaml.safe_load(content)
    except yaml.YAMLError as exc:
        yaml_error = exc
    else:
        return _ensure_object(result)

    msg = "Failed to parse API docs as JSON or YAML"
    if json_error:
        msg += f"\n  JSON error: {json_error}"
    if yaml_error:
        msg += f"\n  YAML error: {yaml_error}"
    raise InputLoadError(msg)


def _ensure_object(result: Any) -> dict[str, Any]:
    if not isinstance(result, dict):
        found = type(result).__name__ if result is not None else "empty document"
        raise InputLoadError(f"API docs must be a JSON/YAML object (got {found})")
    return result
