"""Request validation.

RequestValidator checks the semantic rules that the field markers declare:
path parameters and required fields must be non-empty, and fields with a
fixed set of choices must hold one of them. It walks nested models and lists
of models, and reports every violation in a single ValidationError.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from pydantic import BaseModel

from marqo_client.core.errors import ValidationError
from marqo_client.core.fields import PATH, field_meta


def _is_empty(value: Any) -> bool:
    return value is None or value == "" or (isinstance(value, list) and not value)


class RequestValidator:
    """Validates request models before any network I/O.

    The client owns one instance; pass a subclass to MarqoClient to add
    project-specific rules.

    Example:
        >>> validator = RequestValidator()
        >>> validator.validate(GetIndexStatsRequest(index_name=""))
        Traceback (most recent call last):
        ...
        ValidationError: invalid request: index_name is required
    """

    def validate(self, request: BaseModel | None, operation: str | None = None) -> None:
        """Validate a request.

        Args:
            request: Request model, or None for operations without input
            operation: Operation name, attached to the raised error

        Raises:
            ValidationError: If any field violates its declared rules
        """
        if request is None:
            return

        problems = list(self._check(request, prefix=""))
        if problems:
            details = "; ".join(f"{name} {reason}" for name, reason in problems)
            raise ValidationError(
                f"invalid request: {details}",
                fields=[name for name, _ in problems],
                operation=operation,
            )

    def _check(self, model: BaseModel, prefix: str) -> Iterator[tuple[str, str]]:
        for name, info in type(model).model_fields.items():
            meta = field_meta(info)
            value = getattr(model, name)
            path = f"{prefix}{name}"

            if (meta.get("location") == PATH or meta.get("required")) and _is_empty(
                value
            ):
                yield path, "is required"
                continue

            choices = meta.get("choices")
            if choices is not None and value is not None and value not in choices:
                yield path, f"must be one of {', '.join(choices)}"

            yield from self._check_nested(value, path)

    def _check_nested(self, value: Any, path: str) -> Iterator[tuple[str, str]]:
        if isinstance(value, BaseModel):
            yield from self._check(value, prefix=f"{path}.")
        elif isinstance(value, list):
            for index, item in enumerate(value):
                if isinstance(item, BaseModel):
                    yield from self._check(item, prefix=f"{path}.{index}.")
        elif isinstance(value, dict):
            for key, item in value.items():
                yield from self._check_nested(item, f"{path}.{key}")
