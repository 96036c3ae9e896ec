"""Exception hierarchy for ifacegen.

All exceptions inherit from :class:`IfacegenError`, which carries an
``exit_code`` attribute mapped to a constant from :mod:`ifacegen.exit_codes`.
The top-level error handler in :func:`ifacegen.app.main` catches
``IfacegenError`` and exits with the appropriate code, while unexpected
exceptions produce a crash log and exit with :data:`EXIT_GENERIC_FAILURE`.

Subclass hierarchy::

    IfacegenError (exit 1)
    +-- InvalidUsageError       (exit 2)
    +-- InputLoadError          (exit 7)
    +-- RenderError             (exit 8)
    |   +-- MissingSubschemaError
    |   +-- MissingFieldsError
    |   +-- MissingMembersError
    |   +-- UnsupportedKindError
    |   +-- InvalidModelNameError
    +-- ConfigError             (exit 1)
"""

from __future__ import annotations

from typing import Optional

from ifacegen.exit_codes import (
    EXIT_GENERIC_FAILURE,
    EXIT_INPUT_LOAD_ERROR,
    EXIT_INVALID_USAGE,
    EXIT_RENDER_ERROR,
)


class IfacegenError(Exception):
    """Base exception for all ifacegen errors.

    Every subclass sets a class-level ``exit_code`` corresponding to one of
    the constants in :mod:`ifacegen.exit_codes`. The entry point catches
    this exception type and calls ``sys.exit(exc.exit_code)``.

    Args:
        message: Human-readable error description printed to stderr.
        exit_code: Optional override for the class-level exit code.
    """

    exit_code: int = EXIT_GENERIC_FAILURE

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class InvalidUsageError(IfacegenError):
    """Raised for invalid CLI arguments or missing required parameters."""

    exit_code = EXIT_INVALID_USAGE


class InputLoadError(IfacegenError):
    """Raised when the input document cannot be read, parsed, or validated."""

    exit_code = EXIT_INPUT_LOAD_ERROR


class RenderError(IfacegenError):
    """Raised when a schema is malformed and cannot be rendered.

    The renderer raises this at the faulty node and each enclosing level
    prepends its own location on the way up, so the error that reaches the
    caller says exactly where the bad schema lives.

    Attributes:
        reason: Description of the problem, without location.
        kind: The ``type`` of the offending schema (e.g. ``"array"``).
        path: Field names from the model root down to the offending schema.
            Array elements are recorded as ``"[]"``.
        model: Name of the model (catalog key) containing the schema, or
            ``None`` when rendering outside a catalog.
    """

    exit_code = EXIT_RENDER_ERROR

    def __init__(
        self,
        reason: str,
        kind: Optional[str] = None,
        path: Optional[list[str]] = None,
        model: Optional[str] = None,
    ):
        self.reason = reason
        self.kind = kind
        self.path: list[str] = list(path or [])
        self.model = model
        super().__init__(self._format())

    @property
    def location(self) -> str:
        """Dotted field location, e.g. ``profile.tags[]``."""
        text = ""
        for segment in self.path:
            if segment == "[]":
                text += segment
            elif text:
                text += f".{segment}"
            else:
                text = segment
        return text

    def within_field(self, name: str) -> RenderError:
        """Record that the faulty schema sits below field *name*."""
        self.path.insert(0, name)
        self.args = (self._format(),)
        return self

    def within_array(self) -> RenderError:
        """Record that the faulty schema is an array element."""
        return self.within_field("[]")

    def within_model(self, model: str) -> RenderError:
        """Record the catalog entry that contains the faulty schema."""
        self.model = model
        self.args = (self._format(),)
        return self

    def _format(self) -> str:
        where: list[str] = []
        if self.model is not None:
            where.append(f"model '{self.model}'")
        if self.path:
            where.append(f"field '{self.location}'")
        if not where:
            return self.reason
        return f"{' '.join(where)}: {self.reason}"


class MissingSubschemaError(RenderError):
    """Raised when an ``array`` schema has no element schema."""


class MissingFieldsError(RenderError):
    """Raised when an ``object`` schema has no ``fields`` mapping."""


class MissingMembersError(RenderError):
    """Raised when an ``enum`` schema has no ``members`` (or an empty list)."""


class UnsupportedKindError(RenderError):
    """Raised when a schema kind cannot be rendered with the active options.

    With ``enum_style="strict"`` every ``enum`` schema is refused this way.
    """


class InvalidModelNameError(RenderError):
    """Raised when a model name has no letters or digits to build an interface name from."""


class ConfigError(IfacegenError):
    """Raised for configuration problems (invalid JSON, unknown values)."""

    exit_code = EXIT_GENERIC_FAILURE
