"""Shared schema configuration and field types."""

import re
from typing import Annotated, Any, ClassVar

from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    StringConstraints,
    model_validator,
)
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

# Plain local@domain.tld shape; EmailStr would accept and reject different addresses.
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str):
        value = value.strip()
        return value or None
    return value


def _lower(value: str | None) -> str | None:
    return value.lower() if value is not None else None


def _reject_bool(value: Any) -> Any:
    if isinstance(value, bool):
        raise PydanticCustomError("int_type", "Input should be a valid integer")
    return value


def _check_email(value: str | None) -> str | None:
    if value is not None and not EMAIL_PATTERN.match(value):
        raise PydanticCustomError("invalid_email", "Invalid email format")
    return value


# Non-empty after trimming.
RequiredStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]

# Trimmed; blank becomes None.
OptionalStr = Annotated[str | None, BeforeValidator(_blank_to_none)]

LowerStr = Annotated[str | None, BeforeValidator(_blank_to_none), AfterValidator(_lower)]

EmailField = Annotated[str | None, BeforeValidator(_blank_to_none), AfterValidator(_check_email)]

# Integer id from a JSON body; numeric strings pass, booleans do not.
RecordId = Annotated[int, BeforeValidator(_reject_bool)]


class CamelModel(BaseModel):
    """camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    # Field alias -> error code for type errors on that field.
    error_codes: ClassVar[dict[str, str]] = {}


class PartialUpdate(CamelModel):
    """Update payload where every field is optional.

    Presence is tracked by ``model_fields_set``; ``changes()`` returns only the
    fields the client actually sent, so omitted fields are never cleared.
    """

    # Fields that may be omitted but not sent as null.
    required_when_present: ClassVar[tuple[str, ...]] = ()

    @model_validator(mode="after")
    def _reject_cleared_required(self):
        for name in self.required_when_present:
            if name in self.model_fields_set and getattr(self, name) is None:
                field = to_camel(name)
                raise PydanticCustomError(
                    "blank_required",
                    "{field} must be a non-empty string",
                    {"field": field},
                )
        return self

    def changes(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)
