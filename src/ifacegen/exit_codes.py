"""Numeric process exit codes following `clig.dev <https://clig.dev/>`_ conventions.

Each constant maps to a specific error category and is referenced by the
corresponding :class:`~ifacegen.exceptions.IfacegenError` subclass.
Build scripts and CI jobs can inspect the exit code to tell a broken input
document from a malformed schema without parsing stderr.

Example::

    $ ifacegen render --file api.json -o src/api.ts
    $ echo $?
    8   # EXIT_RENDER_ERROR -- a schema in api.json cannot be rendered
"""

EXIT_SUCCESS = 0
"""The command completed successfully."""

EXIT_GENERIC_FAILURE = 1
"""An unclassified error occurred."""

EXIT_INVALID_USAGE = 2
"""The command was invoked with invalid arguments or missing required parameters."""

EXIT_INPUT_LOAD_ERROR = 7
"""The input document could not be read, parsed, or validated."""

EXIT_RENDER_ERROR = 8
"""A schema in the input document is malformed and cannot be rendered."""
