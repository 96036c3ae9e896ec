"""Render API docs schemas as interface declarations.

The renderer is a stack of pure functions, each delegating to the next:

* :func:`render_interfaces` -- every model of a catalog, in key order.
* :func:`render_interface` -- ``interface <Name> { ... }`` for one model.
* :func:`render_fields` -- all field declarations of one model, in key order.
* :func:`render_field` -- ``name[?]: type,`` for one field.
* :func:`render_type` -- the type expression of one schema, recursing into
  objects and arrays.

Nothing is cached between calls and no input is mutated, so rendering the same
catalog twice yields byte-identical output.

A non-required schema is wrapped in ``Optional<...>`` *and* its field carries
the ``?`` marker::

    >>> render_field("foo", FieldSchema(kind="boolean", required=False))
    'foo?: Optional<boolean>,'

Malformed schemas (an ``array`` without element schema, an ``object`` without
``fields``, an ``enum`` without members) raise a
:class:`~ifacegen.exceptions.RenderError` subclass that names the model and
field path of the faulty node. Rendering stops at the first error.
"""

from __future__ import annotations

import functools
import json
import logging
import math
from pathlib import Path
from typing import Mapping, Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from ifacegen.casing import to_pascal_case
from ifacegen.exceptions import (
    InvalidModelNameError,
    MissingFieldsError,
    MissingMembersError,
    MissingSubschemaError,
    RenderError,
    UnsupportedKindError,
)
from ifacegen.models import EnumStyle, FieldSchema, Layout, RenderOptions, SchemaKind

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent / "templates"
"""Path to the Jinja2 template directory (``ifacegen/templates/``)."""

_SCALAR_TYPES: dict[SchemaKind, str] = {
    SchemaKind.STRING: "string",
    SchemaKind.NUMBER: "number",
    SchemaKind.BOOLEAN: "boolean",
}

_DEFAULT_OPTIONS = RenderOptions()


def render_type(schema: FieldSchema, options: Optional[RenderOptions] = None) -> str:
    """Render the type expression of *schema* (not its field declaration).

    Args:
        schema: The schema to render.
        options: Rendering options; defaults to the compact layout.

    Returns:
        The type expression, e.g. ``Optional<Array<string>>``.

    Raises:
        MissingSubschemaError: An ``array`` schema has no element schema.
        MissingFieldsError: An ``object`` schema has no ``fields``.
        MissingMembersError: An ``enum`` schema has no members.
        UnsupportedKindError: An ``enum`` schema met ``enum_style="strict"``.
        RenderError: An ``enum`` member is NaN or infinite.
    """
    return _render_type(schema, options or _DEFAULT_OPTIONS, 0)


def render_field(
    name: str, schema: FieldSchema, options: Optional[RenderOptions] = None
) -> str:
    """Render one field declaration: ``<name><marker>: <type>,``.

    ``<marker>`` is ``?`` when the schema is not required, empty otherwise.
    """
    return _render_field(name, schema, options or _DEFAULT_OPTIONS, 0)


def render_fields(
    model: Mapping[str, FieldSchema], options: Optional[RenderOptions] = None
) -> str:
    """Render every field of *model* in ascending key order.

    In the compact layout the declarations are concatenated with no
    separator (each already ends with a comma); an empty model renders to
    the empty string. In the pretty layout each declaration sits on its own
    line.
    """
    options = options or _DEFAULT_OPTIONS
    separator = "\n" if options.layout == Layout.PRETTY else ""
    return separator.join(_field_lines(model, options, 0))


def render_interface(
    name: str, model: Mapping[str, FieldSchema], options: Optional[RenderOptions] = None
) -> str:
    """Render one interface declaration for *model*.

    *name* is emitted as given; casing conversion is the caller's job (see
    :func:`render_interfaces`).

    Example::

        >>> render_interface("Foo", {"baz": FieldSchema(kind="boolean", required=True)})
        'interface Foo { baz: boolean, }'
    """
    options = options or _DEFAULT_OPTIONS
    template = _jinja_env().get_template("interface.j2")
    return template.render(
        keyword="export interface" if options.export else "interface",
        name=name,
        body=_render_object(model, options, 0),
    )


def render_interfaces(
    catalog: Mapping[str, Mapping[str, FieldSchema]],
    options: Optional[RenderOptions] = None,
) -> str:
    """Render every model of *catalog* as an interface, in ascending key order.

    Model names are converted with :func:`~ifacegen.casing.to_pascal_case`
    (``foo_bar`` becomes ``FooBar``). In the compact layout declarations are
    concatenated with no separator; in the pretty layout they are separated
    by a blank line and the text ends with a newline.

    Args:
        catalog: Mapping of model name to field set.
        options: Rendering options; defaults to the compact layout.

    Returns:
        The complete output text.

    Raises:
        RenderError: On the first malformed schema, with :attr:`RenderError.model`
            set to the catalog key. No partial output is returned.
        InvalidModelNameError: A model name has no letters or digits.
    """
    options = options or _DEFAULT_OPTIONS
    logger.debug("Rendering %d models (layout=%s)", len(catalog), options.layout.value)

    declarations: list[str] = []
    for model_name in sorted(catalog):
        try:
            interface_name = to_pascal_case(model_name)
            if not interface_name:
                raise InvalidModelNameError("model name has no letters or digits")
            declarations.append(
                render_interface(interface_name, catalog[model_name], options)
            )
        except RenderError as exc:
            exc.within_model(model_name)
            raise

    if options.layout == Layout.PRETTY:
        return "\n\n".join(declarations) + ("\n" if declarations else "")
    return "".join(declarations)


# ------------------------------------------------------------------ #
# Internals
# ------------------------------------------------------------------ #


def _render_type(schema: FieldSchema, options: RenderOptions, depth: int) -> str:
    if schema.kind in _SCALAR_TYPES:
        inner = _SCALAR_TYPES[schema.kind]
    elif schema.kind == SchemaKind.ARRAY:
        if schema.element_schema is None:
            raise MissingSubschemaError(
                "array schema has no element schema", kind=schema.kind.value
            )
        try:
            element = _render_type(schema.element_schema, options, depth)
        except RenderError as exc:
            exc.within_array()
            raise
        inner = f"Array<{element}>"
    elif schema.kind == SchemaKind.OBJECT:
        if schema.fields is None:
            raise MissingFieldsError(
                "object schema has no fields", kind=schema.kind.value
            )
        inner = _render_object(schema.fields, options, depth)
    elif schema.kind == SchemaKind.ENUM:
        inner = _render_enum(schema, options)
    else:  # pragma: no cover - SchemaKind is closed
        raise UnsupportedKindError(
            f"unsupported schema type '{schema.kind}'", kind=str(schema.kind)
        )

    if not schema.required:
        return f"Optional<{inner}>"
    return inner


def _render_enum(schema: FieldSchema, options: RenderOptions) -> str:
    if options.enum_style == EnumStyle.STRICT:
        raise UnsupportedKindError(
            "enum schemas are not rendered with enum_style 'strict'",
            kind=schema.kind.value,
        )
    if not schema.members:
        raise MissingMembersError("enum schema has no members", kind=schema.kind.value)
    for member in schema.members:
        if isinstance(member, float) and not math.isfinite(member):
            raise RenderError(
                f"enum member {member!r} is not a finite number", kind=schema.kind.value
            )
    return " | ".join(json.dumps(member, ensure_ascii=False) for member in schema.members)


def _render_field(
    name: str, schema: FieldSchema, options: RenderOptions, depth: int
) -> str:
    marker = "" if schema.required else "?"
    try:
        type_expr = _render_type(schema, options, depth)
    except RenderError as exc:
        exc.within_field(name)
        raise
    return f"{name}{marker}: {type_expr},"


def _field_lines(
    model: Mapping[str, FieldSchema], options: RenderOptions, depth: int
) -> list[str]:
    return [_render_field(name, model[name], options, depth) for name in sorted(model)]


def _render_object(
    model: Mapping[str, FieldSchema], options: RenderOptions, depth: int
) -> str:
    """Render a field set as an object body: ``{ ... }``.

    Shared by nested ``object`` schemas and by interface bodies. In the
    pretty layout nested lines carry absolute indentation for *depth*.
    """
    fields = _field_lines(model, options, depth + 1)
    if options.layout == Layout.PRETTY:
        template = _jinja_env().get_template("pretty/object.j2")
        return template.render(
            fields=fields,
            inner=" " * (options.indent * (depth + 1)),
            outer=" " * (options.indent * depth),
        )
    template = _jinja_env().get_template("compact/object.j2")
    return template.render(fields=fields)


@functools.lru_cache(maxsize=1)
def _jinja_env() -> Environment:
    """Create the Jinja2 environment for declaration templates.

    Autoescape is disabled for ``.j2`` templates: the output is source code,
    and enum literals carry double quotes that must survive verbatim.
    Block trimming and lstrip are enabled for cleaner template authoring.
    """
    return Environment(
        loader=FileSystemLoader(str(TEMPLATE_DIR)),
        autoescape=select_autoescape(disabled_extensions=("j2",), default=False),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=False,
    )
