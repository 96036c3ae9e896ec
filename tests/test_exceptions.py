"""Tests for ifacegen.exceptions -- exit codes and render error locations."""

from __future__ import annotations

import pytest

from ifacegen.exceptions import (
    ConfigError,
    IfacegenError,
    InputLoadError,
    InvalidModelNameError,
    InvalidUsageError,
    MissingFieldsError,
    MissingMembersError,
    MissingSubschemaError,
    RenderError,
    UnsupportedKindError,
)
from ifacegen.exit_codes import (
    EXIT_GENERIC_FAILURE,
    EXIT_INPUT_LOAD_ERROR,
    EXIT_INVALID_USAGE,
    EXIT_RENDER_ERROR,
)


class TestExitCodes:
    @pytest.mark.parametrize(
        "exc_class, code",
        [
            (IfacegenError, EXIT_GENERIC_FAILURE),
            (InvalidUsageError, EXIT_INVALID_USAGE),
            (InputLoadError, EXIT_INPUT_LOAD_ERROR),
            (ConfigError, EXIT_GENERIC_FAILURE),
            (RenderError, EXIT_RENDER_ERROR),
            (MissingSubschemaError, EXIT_RENDER_ERROR),
            (MissingFieldsError, EXIT_RENDER_ERROR),
            (MissingMembersError, EXIT_RENDER_ERROR),
            (UnsupportedKindError, EXIT_RENDER_ERROR),
            (InvalidModelNameError, EXIT_RENDER_ERROR),
        ],
    )
    def test_class_exit_code(self, exc_class: type[IfacegenError], code: int) -> None:
        assert exc_class.exit_code == code

    def test_exit_code_override(self) -> None:
        assert IfacegenError("boom", exit_code=42).exit_code == 42

    def test_render_errors_are_ifacegen_errors(self) -> None:
        assert issubclass(MissingSubschemaError, IfacegenError)


class TestRenderErrorLocation:
    def test_bare_reason(self) -> None:
        exc = RenderError("bad", kind="array")
        assert str(exc) == "bad"
        assert exc.location == ""

    def test_field_path_built_outward(self) -> None:
        exc = RenderError("bad")
        exc.within_array()
        exc.within_field("tags")
        exc.within_field("profile")
        assert exc.path == ["profile", "tags", "[]"]
        assert exc.location == "profile.tags[]"
        assert str(exc) == "field 'profile.tags[]': bad"

    def test_model_prefix(self) -> None:
        exc = RenderError("bad", path=["a"])
        exc.within_model("user")
        assert str(exc) == "model 'user' field 'a': bad"

    def test_model_only(self) -> None:
        exc = RenderError("bad", model="user")
        assert str(exc) == "model 'user': bad"
