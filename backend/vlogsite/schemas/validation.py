"""Turn raw submitted fields into validated records or field issues.

Submission handlers call :func:`parse_fields` instead of constructing the
pydantic models directly so that invalid input never raises past them. Each
pydantic error is rewritten into a short sentence addressed to the person who
filled in the form, keyed by the dotted field path.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, TypeVar

from pydantic import BaseModel, ValidationError

from vlogsite.schemas.result import FieldIssue

ModelT = TypeVar("ModelT", bound=BaseModel)

_LABELS = {
    "featured_image_url": "Featured image URL",
}

# Fields whose format errors get one fixed message regardless of the
# underlying pydantic error type.
_FORMAT_MESSAGES = {
    "email": "Please enter a valid email address.",
    "featured_image_url": "Please enter a valid URL for the image.",
}


def _label(field: str) -> str:
    return _LABELS.get(field, field.replace("_", " ").capitalize())


def _issue_message(error: Mapping[str, Any]) -> str:
    loc = error.get("loc") or ()
    field = str(loc[0]) if loc else ""
    kind = error.get("type", "")
    ctx = error.get("ctx") or {}
    label = _label(field)

    if kind == "missing":
        return f"{label} is required."
    if field in _FORMAT_MESSAGES:
        return _FORMAT_MESSAGES[field]
    if kind == "string_too_short":
        return f"{label} must be at least {ctx.get('min_length')} characters."
    if kind == "string_too_long":
        return f"{label} cannot exceed {ctx.get('max_length')} characters."
    if kind == "string_type":
        return f"{label} must be text."
    if kind == "value_error" and ctx.get("error") is not None:
        return str(ctx["error"])
    return str(error.get("msg", "Invalid value."))


def issues_from_error(exc: ValidationError) -> list[FieldIssue]:
    issues: list[FieldIssue] = []
    for error in exc.errors():
        path = ".".join(str(p) for p in error.get("loc") or ())
        issues.append(FieldIssue(path=path, message=_issue_message(error)))
    return issues


def parse_fields(
    model: type[ModelT], raw: Mapping[str, Any]
) -> tuple[Optional[ModelT], list[FieldIssue]]:
    try:
        return model.model_validate(dict(raw)), []
    except ValidationError as e:
        return None, issues_from_error(e)
