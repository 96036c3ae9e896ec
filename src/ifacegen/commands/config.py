"""Config commands -- view and modify global configuration.

Provides the ``ifacegen config`` sub-command group for reading, updating,
and resetting the user's global configuration file
(:class:`~ifacegen.models.GlobalConfig`). Settings are persisted in the
ifacegen config directory and provide the lowest-precedence defaults for
``ifacegen render``.
"""

from __future__ import annotations

import typer

from ifacegen.commands import exit_on_error
from ifacegen.exceptions import InvalidUsageError
from ifacegen.output import format_response, info, success


config_app = typer.Typer(no_args_is_help=True)


@config_app.command("show")
def config_show() -> None:
    """Show current configuration.

    Example::

        ifacegen config show
        ifacegen --json config show
    """
    from ifacegen.config import get_config_dir, load_global_config

    with exit_on_error():
        config = load_global_config()
    info(f"Config directory: {get_config_dir()}")
    format_response(config.model_dump(mode="json"))


@config_app.command("set")
def config_set(
    key: str = typer.Argument(
        help="Config key (dot notation, e.g., 'render.layout')."
    ),
    value: str = typer.Argument(help="Value to set."),
) -> None:
    """Set a configuration value.

    Uses dot notation for nested keys. The value is coerced to match the
    existing field's type (bool, int, or str) and the updated config is
    validated before saving.

    Raises:
        InvalidUsageError: The key path is invalid, the value cannot be
            coerced, or validation fails (exit 2).

    Example::

        ifacegen config set render.layout pretty
        ifacegen config set render.export true
        ifacegen config set render.indent 2
    """
    from ifacegen.config import load_global_config, save_global_config
    from ifacegen.models import GlobalConfig

    with exit_on_error():
        data = load_global_config().model_dump(mode="json")
        coerced = _assign(data, key, value)
        try:
            new_config = GlobalConfig.model_validate(data)
        except ValueError as exc:
            raise InvalidUsageError(f"Validation error: {exc}") from exc
        save_global_config(new_config)

    success(f"Set {key} = {coerced}")


def _assign(data: dict, key: str, value: str) -> object:
    """Store *value* at dotted *key* in *data*, coerced to the current type."""
    keys = key.split(".")
    target = data
    for k in keys[:-1]:
        if k not in target or not isinstance(target[k], dict):
            raise InvalidUsageError(f"Invalid config key: {key}")
        target = target[k]

    final_key = keys[-1]
    if final_key not in target:
        raise InvalidUsageError(f"Unknown config key: {key}")

    current = target[final_key]
    if isinstance(current, bool):
        coerced: object = value.lower() in ("true", "1", "yes")
    elif isinstance(current, int):
        try:
            coerced = int(value)
        except ValueError:
            raise InvalidUsageError(f"Expected integer for {key}, got: {value}") from None
    else:
        coerced = value

    target[final_key] = coerced
    return coerced


@config_app.command("reset")
def config_reset(ctx: typer.Context) -> None:
    """Reset configuration to defaults.

    Asks for confirmation unless ``--force`` is active.

    Example::

        ifacegen config reset
        ifacegen --force config reset
    """
    from ifacegen.config import save_global_config
    from ifacegen.models import GlobalConfig

    force = ctx.obj.get("force", False) if ctx.obj else False
    if not force:
        confirmed = typer.confirm("Reset all config to defaults?")
        if not confirmed:
            info("Cancelled.")
            raise typer.Exit()

    save_global_config(GlobalConfig())
    success("Configuration reset to defaults.")
