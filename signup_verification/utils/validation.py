"""Translation of request validation failures into application errors."""

from typing import Any, Dict, Sequence

from signup_verification.core.constants import ErrorMessages
from signup_verification.core.exceptions import AppError, MissingInput, ValidationError

# Error types that mean the client did not send a usable value at all.
MISSING_ERROR_TYPES = frozenset({"missing", "string_too_short"})

_VALUE_ERROR_PREFIX = "Value error, "


def _field_name(loc: Sequence[Any]) -> str:
    parts = [str(part) for part in loc if part != "body"]
    return ".".join(parts) or "body"


def _clean_message(msg: str) -> str:
    if msg.startswith(_VALUE_ERROR_PREFIX):
        return msg[len(_VALUE_ERROR_PREFIX):]
    return msg


def error_from_validation(errors: Sequence[Dict[str, Any]]) -> AppError:
    """
    Collapse pydantic errors into a single AppError with a per-field map.

    Returns MissingInput when every problem is an absent field, ValidationError
    otherwise. The first message reported for a field wins.
    """
    fields: Dict[str, str] = {}
    only_missing = True
    for err in errors:
        field = _field_name(err.get("loc", ()))
        if err.get("type") in MISSING_ERROR_TYPES:
            fields.setdefault(field, ErrorMessages.FIELD_REQUIRED)
        else:
            only_missing = False
            fields.setdefault(field, _clean_message(str(err.get("msg", ""))))

    if only_missing:
        return MissingInput(detail=ErrorMessages.MISSING_PARAMETERS, fields=fields)
    return ValidationError(fields=fields)
