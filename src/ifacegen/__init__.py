"""ifacegen -- Generate typed interface declarations from API docs schemas.

This package reads an API docs document (named models built from string,
number, boolean, object, array and enum fields) and renders one interface
declaration per model, so client-side types stay in sync with the server's
schema.

Typical workflow::

    ifacegen render --file api.json -o web/src/api.d.ts

Programmatic use::

    from ifacegen import load_api_docs, render_interfaces

    docs = load_api_docs("api.json")
    text = render_interfaces(docs.schemas)

Modules:
    app: Typer application and CLI entry point.
    models: Pydantic models for documents and configuration.
    renderer: Schema-to-text rendering engine.
    casing: Model-name to interface-name conversion.
    loader: Document loading (file, URL, stdin; JSON or YAML).
    writer: Atomic output writes.
    config: XDG-aware configuration and option precedence.
    exceptions: Exception hierarchy with exit-code mapping.
    exit_codes: Numeric exit codes following clig.dev conventions.
    output: stdout/stderr formatting system with Rich support.
"""

__version__ = "0.1.0"

from ifacegen.loader import load_api_docs  # noqa: E402
from ifacegen.renderer import (  # noqa: E402
    render_field,
    render_fields,
    render_interface,
    render_interfaces,
    render_type,
)

__all__ = [
    "__version__",
    "load_api_docs",
    "render_field",
    "render_fields",
    "render_interface",
    "render_interfaces",
    "render_type",
]
