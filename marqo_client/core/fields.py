"""Field markers describing where a request field travels on the wire.

Request models declare each field with one of PathParam, QueryParam or
BodyParam. The marker is stored in the pydantic field's json_schema_extra and
read back by the validator and the encoder, so a request model alone is
enough to know how to validate and serialize it.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.fields import FieldInfo

PATH = "path"
QUERY = "query"
BODY = "body"


def _marker(
    location: str | None,
    required: bool = False,
    choices: Iterable[str] | None = None,
    root: bool = False,
) -> dict[str, Any]:
    extra: dict[str, Any] = {}
    if location is not None:
        extra["location"] = location
    if required:
        extra["required"] = True
    if choices is not None:
        extra["choices"] = list(choices)
    if root:
        extra["root"] = True
    return extra


def PathParam(description: str | None = None) -> Any:  # noqa: N802
    """Declare a URL path segment. Always required and non-empty."""
    return Field(
        default="",
        description=description,
        json_schema_extra=_marker(PATH, required=True),
    )


def QueryParam(  # noqa: N802
    default: Any = None,
    *,
    alias: str | None = None,
    choices: Iterable[str] | None = None,
    required: bool = False,
    description: str | None = None,
) -> Any:
    """Declare a query-string parameter, omitted when None."""
    return Field(
        default=default,
        alias=alias,
        description=description,
        json_schema_extra=_marker(QUERY, required=required, choices=choices),
    )


def BodyParam(  # noqa: N802
    default: Any = None,
    *,
    alias: str | None = None,
    choices: Iterable[str] | None = None,
    required: bool = False,
    root: bool = False,
    description: str | None = None,
) -> Any:
    """Declare a JSON body field, omitted when None.

    A root body field is sent as the whole body (e.g. a bare id array).
    """
    return Field(
        default=default,
        alias=alias,
        description=description,
        json_schema_extra=_marker(BODY, required=required, choices=choices, root=root),
    )


def Choice(  # noqa: N802
    *choices: str,
    alias: str | None = None,
    description: str | None = None,
) -> Any:
    """Declare an optional nested-configuration field restricted to choices."""
    return Field(
        default=None,
        alias=alias,
        description=description,
        json_schema_extra=_marker(None, choices=choices),
    )


def field_meta(info: FieldInfo) -> dict[str, Any]:
    """Return the marker dict stored on a pydantic field (may be empty)."""
    extra = info.json_schema_extra
    return extra if isinstance(extra, dict) else {}


def wire_name(name: str, info: FieldInfo) -> str:
    """Return the JSON/query name of a field."""
    return info.alias or name


class WireModel(BaseModel):
    """Base for nested configuration objects sent to the server.

    Unknown keys are kept and sent through, so options added by newer servers
    can be used before they get a dedicated field.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="allow",
        protected_namespaces=(),
    )


class RequestModel(WireModel):
    """Base for top-level request objects.

    Unset optional fields are None; pydantic's model_fields_set additionally
    records which fields the caller passed explicitly.
    """

    model_config = ConfigDict(extra="forbid")

    def wire_value(self, name: str) -> Any:
        """Return the value sent on the wire for field name.

        Subclasses override this to reshape a field for transport only,
        leaving the model itself untouched.
        """
        return getattr(self, name)


class ResponseModel(BaseModel):
    """Base for decoded server responses. Unknown fields are ignored."""

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
        protected_namespaces=(),
    )
