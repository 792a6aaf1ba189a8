"""Translate typed requests into HTTP requests.

The encoder reads the PathParam/QueryParam/BodyParam markers of a request
model and produces an EncodedRequest: the HTTP verb, the concrete path, the
query parameters as strings and a JSON-ready body.

Query values are stringified as the server expects them:
- bool -> "true" / "false"
- int, float -> decimal text
- list -> comma-joined items
- nested objects -> compact JSON text in a single parameter
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel
from pydantic_core import PydanticSerializationError, to_jsonable_python

from marqo_client.core.errors import ValidationError
from marqo_client.core.fields import (
    BODY,
    PATH,
    QUERY,
    RequestModel,
    field_meta,
    wire_name,
)

if TYPE_CHECKING:
    from marqo_client.operations import Operation


@dataclass(frozen=True)
class EncodedRequest:
    """An HTTP request ready to be dispatched.

    Attributes:
        method: HTTP verb
        path: Path relative to the server's base URL
        params: Query parameters
        body: JSON-ready body, or None to send no body
    """

    method: str
    path: str
    params: dict[str, str] = field(default_factory=dict)
    body: Any = None


def to_jsonable(value: Any) -> Any:
    """Convert a field value to plain JSON types.

    Models are dumped by alias with unset (None) fields dropped; plain
    containers are converted item by item so caller data keeps its nulls.
    """
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(value, dict):
        return {key: to_jsonable(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_jsonable(item) for item in value]
    return to_jsonable_python(value)


def encode_query_value(value: Any) -> str:
    """Stringify a single query parameter value."""
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple)):
        return ",".join(encode_query_value(item) for item in value)
    return json.dumps(to_jsonable(value), separators=(",", ":"))


class RequestEncoder:
    """Builds EncodedRequest values from request models."""

    def encode(self, operation: Operation, request: BaseModel | None) -> EncodedRequest:
        """Encode a validated, defaulted request for an operation.

        Args:
            operation: Catalog entry providing the verb and path template
            request: Request model, or None for operations without input

        Returns:
            EncodedRequest for the dispatcher

        Raises:
            ValidationError: If a field value cannot be serialized to JSON
        """
        if request is None:
            return EncodedRequest(method=operation.method, path=operation.path)

        path_values: dict[str, str] = {}
        params: dict[str, str] = {}
        body: dict[str, Any] = {}
        root_body: Any = None
        has_body = False

        for name, info in type(request).model_fields.items():
            meta = field_meta(info)
            location = meta.get("location")
            key = wire_name(name, info)

            if location == PATH:
                path_values[name] = str(getattr(request, name))
                continue
            if location == BODY:
                has_body = True

            try:
                if isinstance(request, RequestModel):
                    value = request.wire_value(name)
                else:
                    value = getattr(request, name)
                if value is None:
                    continue
                if location == QUERY:
                    params[key] = encode_query_value(value)
                elif location == BODY and meta.get("root"):
                    root_body = to_jsonable(value)
                elif location == BODY:
                    body[key] = to_jsonable(value)
            except PydanticSerializationError as e:
                raise ValidationError(
                    f"invalid request: {key} is not JSON serializable: {e}",
                    fields=[key],
                    operation=operation.name,
                ) from e

        if root_body is not None:
            payload: Any = root_body
        elif has_body:
            payload = body
        else:
            payload = None

        return EncodedRequest(
            method=operation.method,
            path=operation.path.format(**path_values),
            params=params,
            body=payload,
        )
