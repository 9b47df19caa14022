"""
Shared validation helpers.

Field-level problems are reported as a mapping of field name to a list of
messages, never as a generic error. Both the HTTP layer (via the
RequestValidationError handler) and direct callers use the same flattening.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Generic, Iterable, List, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError
from pydantic_core import PydanticCustomError

from taskboard.utils.time import as_utc

M = TypeVar("M", bound=BaseModel)

ROOT_ERROR_KEY = "_root"


@dataclass
class ValidationResult(Generic[M]):
    """Outcome of validate_input: either `data` or a non-empty `errors` map."""
    
    data: Optional[M] = None
    errors: Dict[str, List[str]] = field(default_factory=dict)
    
    @property
    def ok(self) -> bool:
        return not self.errors


def field_errors(errors: Iterable[Mapping[str, Any]], skip: int = 0) -> Dict[str, List[str]]:
    """
    Flatten pydantic error dicts into {field: [messages]}.
    
    Args:
        errors: Items of ValidationError.errors() / RequestValidationError.errors()
        skip: Number of leading `loc` parts to drop (1 for "body"/"query")
    """
    flattened: Dict[str, List[str]] = {}
    for error in errors:
        loc = tuple(error.get("loc", ()))[skip:]
        key = ".".join(str(part) for part in loc) or ROOT_ERROR_KEY
        flattened.setdefault(key, []).append(error["msg"])
    return flattened


def validate_input(schema: Type[M], payload: Any) -> ValidationResult[M]:
    """
    Validate `payload` against `schema` without raising for field problems.
    
    Unknown fields are ignored.
    """
    try:
        return ValidationResult(data=schema.model_validate(payload))
    except ValidationError as exc:
        return ValidationResult(errors=field_errors(exc.errors()))


# Reusable field validators

def reject_null(value: Any) -> Any:
    """Before-validator for partial-update fields that may be omitted but not cleared."""
    if value is None:
        raise PydanticCustomError("null_not_allowed", "Field cannot be null")
    return value


def blank_to_none(value: Any) -> Any:
    """Query filters treat an empty string as "not provided"."""
    if isinstance(value, str) and value.strip() == "":
        return None
    return value


def _is_iso_datetime(value: str) -> bool:
    text = value.strip()
    if "T" not in text:
        return False
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        datetime.fromisoformat(text)
    except ValueError:
        return False
    return True


def require_datetime_input(value: Any) -> Any:
    """
    Due dates must be datetimes or full ISO-8601 date-time strings.
    
    Numbers, numeric strings and date-only strings are rejected rather than
    coerced.
    """
    if value is None or isinstance(value, datetime):
        return value
    if isinstance(value, str) and _is_iso_datetime(value):
        return value
    raise PydanticCustomError("datetime_type", "Invalid date-time")


def normalize_datetime(value: Optional[datetime]) -> Optional[datetime]:
    if value is None:
        return None
    return as_utc(value)
