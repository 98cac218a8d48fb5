"""Input validation against the schemas in :mod:`monime.schemas`."""

from typing import Any

from pydantic import BaseModel
from pydantic import TypeAdapter
from pydantic import ValidationError

from .errors import MonimeValidationError
from .errors import ValidationIssue


def _field_path(loc: tuple) -> str:
    return ".".join(str(part) for part in loc) or "unknown"


def to_validation_error(exc: ValidationError) -> MonimeValidationError:
    """Convert a pydantic error into :class:`MonimeValidationError`.

    Every issue is kept; nested locations are joined with dots, e.g.
    ``destination.phoneNumber`` or ``lineItems.0.price``.
    """
    issues = [
        ValidationIssue(
            field=_field_path(error["loc"]),
            message=error["msg"],
            value=error.get("input"),
        )
        for error in exc.errors()
    ]
    if not issues:
        issues = [ValidationIssue(field="unknown", message="Validation failed")]
    if len(issues) == 1:
        message = issues[0].message
    else:
        message = f"Validation failed with {len(issues)} errors"
    return MonimeValidationError(message, issues)


def validate(schema: type[BaseModel] | TypeAdapter, data: Any) -> None:
    """Check ``data`` against ``schema``.

    :param schema: A pydantic model class or a ``TypeAdapter``.
    :param data: Untrusted input, usually a camelCase dict.
    :raises MonimeValidationError: Listing every problem found.
    """
    try:
        if isinstance(schema, TypeAdapter):
            schema.validate_python(data)
        else:
            schema.model_validate(data)
    except ValidationError as exc:
        raise to_validation_error(exc) from exc
