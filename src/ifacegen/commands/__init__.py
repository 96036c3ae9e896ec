"""Built-in CLI sub-commands for ifacegen.

This package groups all Typer sub-command modules that form the CLI's
top-level command tree:

* :mod:`~ifacegen.commands.render` -- render an API docs document as
  interface declarations.
* :mod:`~ifacegen.commands.inspect` -- list the models and routes of a
  document.
* :mod:`~ifacegen.commands.config` -- view and modify global settings.

Each module either exports a :class:`typer.Typer` sub-application (for
multi-command groups like ``inspect`` and ``config``) or a plain callback
function registered directly on the root app (for single commands like
``render``).

Commands report :class:`~ifacegen.exceptions.IfacegenError` failures on
stderr and exit with the error's ``exit_code`` via :func:`exit_on_error`.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

import typer

from ifacegen.exceptions import IfacegenError


@contextmanager
def exit_on_error() -> Iterator[None]:
    """Turn an :class:`IfacegenError` into an error message and ``typer.Exit``."""
    from ifacegen.output import error

    try:
        yield
    except IfacegenError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None
