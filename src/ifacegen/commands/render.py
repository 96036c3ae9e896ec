"""Render command -- turn an API docs document into interface declarations.

Provides ``ifacegen render``, the command build scripts call. It loads the
document, resolves render options (CLI flags over environment over project
and user config), renders every model, and prints the result to stdout or
writes it atomically to ``--output``.

Rendering is all-or-nothing: if any schema is malformed the command exits
with :data:`~ifacegen.exit_codes.EXIT_RENDER_ERROR` and the output file is
left untouched.
"""

from __future__ import annotations

from typing import Optional

import typer

from ifacegen.commands import exit_on_error
from ifacegen.models import EnumStyle, Layout
from ifacegen.output import debug, error, print_data, success


def render_command(
    file: str = typer.Option(
        ..., "--file", "-f", help="API docs document (path, URL, or '-' for stdin)."
    ),
    output_path: Optional[str] = typer.Option(
        None, "--output", "-o", help="Write declarations to this file instead of stdout."
    ),
    layout: Optional[Layout] = typer.Option(
        None, "--layout", help="Declaration layout.", case_sensitive=False
    ),
    enum_style: Optional[EnumStyle] = typer.Option(
        None, "--enum-style", help="How enum schemas are rendered.", case_sensitive=False
    ),
    export: Optional[bool] = typer.Option(
        None, "--export/--no-export", help="Prefix interfaces with 'export'."
    ),
    indent: Optional[int] = typer.Option(
        None, "--indent", min=0, max=16, help="Spaces per level (pretty layout)."
    ),
) -> None:
    """Render every model of an API docs document as an interface.

    Raises:
        InputLoadError: The document cannot be read or parsed (exit 7).
        RenderError: A schema is malformed (exit 8).
        ConfigError: The effective options are invalid (exit 1).

    Example::

        ifacegen render --file api.json
        ifacegen render --file api.json -o web/src/api.d.ts --layout pretty --export
    """
    from ifacegen.config import resolve_render_options
    from ifacegen.loader import load_api_docs
    from ifacegen.renderer import render_interfaces
    from ifacegen.writer import write_output

    with exit_on_error():
        options = resolve_render_options(
            cli_layout=layout.value if layout else None,
            cli_enum_style=enum_style.value if enum_style else None,
            cli_export=export,
            cli_indent=indent,
        )
        docs = load_api_docs(file)
        debug(f"Loaded {len(docs.schemas)} models and {len(docs.routes)} routes from {file}")
        text = render_interfaces(docs.schemas, options)

    if output_path is None:
        print_data(text.rstrip("\n"))
        return

    try:
        written = write_output(text, output_path)
    except OSError as exc:
        error(f"Failed to write {output_path}: {exc}")
        raise typer.Exit(code=1) from None
    success(f"Wrote {len(docs.schemas)} interfaces to {written}")
