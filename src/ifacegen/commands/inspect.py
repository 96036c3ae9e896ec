"""Inspect commands -- examine an API docs document.

Provides the ``ifacegen inspect`` sub-command group with read-only commands
for viewing what a document contains before rendering it: its models (and
the interface names they will get) and its routes.
"""

from __future__ import annotations

import typer

from ifacegen.commands import exit_on_error
from ifacegen.output import get_output


inspect_app = typer.Typer(no_args_is_help=True)


@inspect_app.command("models")
def inspect_models(
    file: str = typer.Option(
        ..., "--file", "-f", help="API docs document (path, URL, or '-' for stdin)."
    ),
) -> None:
    """List all models with their interface name and field count.

    Example::

        ifacegen inspect models --file api.json
    """
    from ifacegen.casing import to_pascal_case
    from ifacegen.loader import load_api_docs

    with exit_on_error():
        docs = load_api_docs(file)

    headers = ["Model", "Interface", "Fields"]
    rows: list[list[str]] = []
    for name in sorted(docs.schemas):
        rows.append([name, to_pascal_case(name), str(len(docs.schemas[name]))])

    get_output().print_table(headers, rows, title=f"Models ({len(rows)})")


@inspect_app.command("routes")
def inspect_routes(
    file: str = typer.Option(
        ..., "--file", "-f", help="API docs document (path, URL, or '-' for stdin)."
    ),
) -> None:
    """List all routes with what they accept and return.

    Routes are informational only; they are never rendered.

    Example::

        ifacegen inspect routes --file api.json
    """
    from ifacegen.loader import load_api_docs

    with exit_on_error():
        docs = load_api_docs(file)

    headers = ["Route", "Accepts", "Returns"]
    rows = [
        [name, docs.routes[name].accepts, docs.routes[name].returns]
        for name in sorted(docs.routes)
    ]

    get_output().print_table(headers, rows, title=f"Routes ({len(rows)})")
