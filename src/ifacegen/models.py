"""Canonical Pydantic models shared across all ifacegen modules.

This is the single source of truth for data shapes in the project. The models
fall into two groups:

**Document models** -- the in-memory form of an API docs document, built once
by :mod:`ifacegen.loader` and consumed read-only by :mod:`ifacegen.renderer`:
    :class:`SchemaKind`, :class:`FieldSchema`, :class:`ApiRoute` and
    :class:`ApiDocs`, plus the :data:`Model` and :data:`ModelCatalog`
    aliases.

**Configuration models** -- serialised as JSON in the user's config directory
and merged by :func:`~ifacegen.config.resolve_render_options`:
    :class:`Layout`, :class:`EnumStyle`, :class:`RenderOptions`,
    :class:`OutputConfig` and :class:`GlobalConfig`.

Document models are frozen. Mapping fields keep whatever order the input had;
the renderer sorts keys itself so output never depends on input order.
"""

from __future__ import annotations

import enum
from typing import Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


# --- Document Models ---


class SchemaKind(str, enum.Enum):
    """Closed set of schema kinds, as spelled in the ``type`` key."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    OBJECT = "object"
    ARRAY = "array"
    ENUM = "enum"


EnumMember = Union[str, int, float, bool]


class FieldSchema(BaseModel):
    """Recursive description of one field's (or one nested value's) shape.

    Only the container matching ``kind`` is meaningful:

    * ``fields`` for :attr:`SchemaKind.OBJECT`
    * ``element_schema`` for :attr:`SchemaKind.ARRAY`
    * ``members`` for :attr:`SchemaKind.ENUM`

    A missing container is not rejected here. The renderer raises a typed
    :class:`~ifacegen.exceptions.RenderError` when it reaches such a node,
    so the error can name the model and field it belongs to.

    Example::

        FieldSchema.model_validate(
            {"type": "array", "schema": {"type": "string", "required": True}, "required": False}
        )
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    kind: SchemaKind = Field(alias="type")
    fields: Optional[dict[str, FieldSchema]] = Field(
        default=None, description="Child schemas if kind is object"
    )
    element_schema: Optional[FieldSchema] = Field(
        default=None,
        validation_alias=AliasChoices("schema", "model", "element_schema"),
        serialization_alias="schema",
        description="Element schema if kind is array",
    )
    members: Optional[list[EnumMember]] = Field(
        default=None, description="Literal values if kind is enum"
    )
    required: bool


Model = dict[str, FieldSchema]
"""Field set of one interface: field name to schema."""

ModelCatalog = dict[str, Model]
"""Every model to render: model name to field set."""


class ApiRoute(BaseModel):
    """A route description. Listed by ``ifacegen inspect routes``, never rendered."""

    model_config = ConfigDict(frozen=True)

    accepts: str
    returns: str


class ApiDocs(BaseModel):
    """A complete API docs document as produced by :func:`~ifacegen.loader.parse_api_docs`.

    The catalog is read from the ``schemas`` key; ``models`` is accepted as
    an alternative spelling. ``routes`` may be omitted.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    schemas: ModelCatalog = Field(
        validation_alias=AliasChoices("schemas", "models"),
    )
    routes: dict[str, ApiRoute] = Field(default_factory=dict)


FieldSchema.model_rebuild()


# --- Configuration Models ---


class Layout(str, enum.Enum):
    """How rendered declarations are laid out."""

    COMPACT = "compact"
    PRETTY = "pretty"


class EnumStyle(str, enum.Enum):
    """How ``enum`` schemas are rendered.

    ``UNION`` emits a union of JSON literals (``"a" | "b"``); ``STRICT``
    refuses enums with :class:`~ifacegen.exceptions.UnsupportedKindError`.
    """

    UNION = "union"
    STRICT = "strict"


class RenderOptions(BaseModel):
    """Rendering options. The defaults produce the canonical compact output."""

    model_config = ConfigDict(frozen=True)

    layout: Layout = Field(default=Layout.COMPACT, description="compact or pretty")
    enum_style: EnumStyle = Field(default=EnumStyle.UNION, description="union or strict")
    indent: int = Field(
        default=4, ge=0, le=16, description="Spaces per nesting level (pretty layout)"
    )
    export: bool = Field(
        default=False, description="Prefix every interface with 'export'"
    )


class OutputConfig(BaseModel):
    """Default output format preferences stored in :class:`GlobalConfig`."""

    format: str = Field(
        default="auto", description="Output format: auto, json, plain, rich"
    )


class GlobalConfig(BaseModel):
    """User-wide configuration persisted at ``~/.config/ifacegen/config.json``.

    Loaded and saved by :func:`~ifacegen.config.load_global_config` and
    :func:`~ifacegen.config.save_global_config`. Fields here have the
    lowest precedence and can be overridden by project config, environment
    variables, or CLI flags. See :func:`~ifacegen.config.resolve_render_options`
    for the full precedence chain.
    """

    render: RenderOptions = Field(default_factory=RenderOptions)
    output: OutputConfig = Field(default_factory=OutputConfig)
