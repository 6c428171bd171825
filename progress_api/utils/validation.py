"""
Invalid-data responses: one structured body listing every field error.

    {"message": "The given data was invalid.", "errors": {"field": ["..."]}}
"""

from typing import Any, Iterable

INVALID_DATA_MESSAGE = "The given data was invalid."

# Pydantic error type -> message template. Unlisted types keep pydantic's own message.
ERROR_MESSAGES: dict[str, str] = {
    "missing": "The {attribute} field is required.",
    "int_type": "The {attribute} must be an integer.",
    "int_parsing": "The {attribute} must be an integer.",
    "int_from_float": "The {attribute} must be an integer.",
    "string_type": "The {attribute} must be a string.",
    "greater_than_equal": "The {attribute} must be at least {ge}.",
    "less_than_equal": "The {attribute} must not be greater than {le}.",
    "string_too_short": "The {attribute} must be at least {min_length} characters.",
    "string_too_long": "The {attribute} must not be greater than {max_length} characters.",
}


class InvalidDataError(Exception):
    """Semantic validation failure raised by route handlers after schema validation passed."""

    def __init__(self, errors: dict[str, list[str]]):
        super().__init__(errors)
        self.errors = errors

    @classmethod
    def for_field(cls, field: str, message: str) -> "InvalidDataError":
        return cls({field: [message]})


def _field_name(loc: Iterable[Any]) -> str:
    # loc looks like ("query", "course_duration") or ("body", "email").
    parts = [str(p) for p in loc if p not in ("query", "body", "path", "header", "cookie")]
    return ".".join(parts) if parts else str(tuple(loc)[-1])


def error_message(error: dict) -> str:
    field = _field_name(error.get("loc", ()))
    template = ERROR_MESSAGES.get(error.get("type", ""))
    if template is None:
        return str(error.get("msg", "The value is invalid."))
    context = dict(error.get("ctx") or {})
    context["attribute"] = field.split(".")[-1].replace("_", " ")
    return template.format(**context)


def format_validation_errors(errors: Iterable[dict]) -> dict[str, list[str]]:
    """Group pydantic error dicts by field, preserving first-seen order."""
    grouped: dict[str, list[str]] = {}
    for error in errors:
        field = _field_name(error.get("loc", ()))
        message = error_message(error)
        messages = grouped.setdefault(field, [])
        if message not in messages:
            messages.append(message)
    return grouped


def invalid_data_body(errors: dict[str, list[str]]) -> dict:
    return {"message": INVALID_DATA_MESSAGE, "errors": errors}
