"""Request validation shared by every resource service.

Payloads are validated with the Pydantic schemas in ``applytrack.schemas``;
the first Pydantic error is translated into the service error taxonomy so
API clients get a stable ``code`` instead of Pydantic's error list.
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any, TypeVar

from pydantic import ValidationError

from applytrack.config import get_settings
from applytrack.exceptions import (
    InvalidArgument,
    InvalidEnumValue,
    InvalidFieldValue,
    InvalidUpdateFields,
    MissingRequiredField,
    ValidationFailed,
)
from applytrack.schemas.base import CamelModel

SchemaT = TypeVar("SchemaT", bound=CamelModel)

_BLANK_TYPES = {
    "missing",
    "string_too_short",
    "string_type",
    "enum",
    "int_type",
    "int_parsing",
}


def parse_id(raw: Any, code: str = "INVALID_ID") -> int:
    """Parse a positive integer record id."""
    if isinstance(raw, bool):
        raise InvalidArgument("Valid ID is required", code=code)
    if isinstance(raw, int):
        value = raw
    elif isinstance(raw, str) and raw.strip().isdigit():
        value = int(raw.strip())
    else:
        raise InvalidArgument("Valid ID is required", code=code)
    if value < 1:
        raise InvalidArgument("Valid ID is required", code=code)
    return value


def resolve_pagination(limit: int | None, offset: int | None) -> tuple[int, int]:
    """Apply defaults and the hard cap to list pagination."""
    settings = get_settings()
    if limit is None:
        limit = settings.list_default_limit
    if offset is None:
        offset = 0
    if limit < 1:
        raise InvalidArgument("limit must be a positive integer", field="limit")
    if offset < 0:
        raise InvalidArgument("offset must not be negative", field="offset")
    return min(limit, settings.list_max_limit), offset


def validate_payload(
    schema: type[SchemaT], data: Any, index: int | None = None
) -> SchemaT:
    """Validate ``data`` against ``schema`` or raise a ``ValidationFailed``."""
    if not isinstance(data, Mapping):
        error = InvalidArgument("Request body must be a JSON object")
        if index is not None:
            error.at_index(index)
        raise error
    try:
        return schema.model_validate(data)
    except ValidationError as exc:
        error = translate_validation_error(schema, exc)
        if index is not None:
            error.at_index(index)
        raise error from exc


def translate_validation_error(
    schema: type[CamelModel], exc: ValidationError
) -> ValidationFailed:
    """Map the first Pydantic error onto the service error taxonomy."""
    detail = exc.errors()[0]
    error_type = detail["type"]
    loc = detail.get("loc") or ()
    field = str(loc[0]) if loc else None
    value = detail.get("input")

    if error_type == "blank_required":
        field = detail.get("ctx", {}).get("field", field)
        return MissingRequiredField(field, f"{field} must be a non-empty string")

    if error_type == "extra_forbidden":
        return InvalidUpdateFields(f"Field {field} cannot be updated", field=field)

    if error_type in _BLANK_TYPES and (value is None or value == "" or error_type == "missing"):
        return MissingRequiredField(field)
    if error_type == "string_too_short":
        return MissingRequiredField(field, f"{field} must be a non-empty string")

    if error_type == "enum":
        allowed = _enum_values(schema, field)
        return InvalidEnumValue(field, allowed)

    if error_type == "invalid_email":
        return InvalidFieldValue("Invalid email format", code="INVALID_EMAIL", field=field)

    code = schema.error_codes.get(field or "")
    if error_type in ("int_parsing", "int_type", "int_from_float"):
        return InvalidFieldValue(f"{field} must be a valid integer", code=code, field=field)
    return InvalidFieldValue(f"{field}: {detail['msg']}", code=code, field=field)


def _enum_values(schema: type[CamelModel], field: str | None) -> list[str]:
    for name, info in schema.model_fields.items():
        if field in (name, info.alias):
            annotation = info.annotation
            if isinstance(annotation, type) and issubclass(annotation, Enum):
                return [member.value for member in annotation]
    return []
