"""
Noteful Backend — Request Body Validator
==========================================

What:  Checks create and partial-update bodies against a resource's field sets.
How:   Two pure functions returning a tagged result instead of raising:
         validate_create → ValidatedPayload | MissingField
         validate_update → ValidatedPayload | NoFieldsSupplied
       The controller turns a failure into a 400 via `failure.message`.
Who:   ResourceController, before any store call.

Rules:
    create: every required field must be present and not null. The error
            names the FIRST missing field in canonical order, never a set.
    update: at least one key of the body must be in the updatable set.
    Both:   unknown keys are dropped from the validated payload.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple, Union


@dataclass(frozen=True)
class ValidatedPayload:
    """Body fields that passed validation, restricted to known field names."""
    fields: Dict[str, Any] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class MissingField:
    """A create body lacks a required field."""
    name: str

    @property
    def ok(self) -> bool:
        return False

    @property
    def message(self) -> str:
        return f"Missing '{self.name}' in request body"


@dataclass(frozen=True)
class NoFieldsSupplied:
    """An update body contains none of the updatable fields."""
    expected: Tuple[str, ...]

    @property
    def ok(self) -> bool:
        return False

    @property
    def message(self) -> str:
        return f"Request body must contain {_enumerate_fields(self.expected)}"


ValidationFailure = Union[MissingField, NoFieldsSupplied]
ValidationResult = Union[ValidatedPayload, ValidationFailure]


def _enumerate_fields(names: Sequence[str]) -> str:
    """
    Render field names for an error message.

    ('title',)                    → 'title'
    ('title', 'content')          → either 'title' or 'content'
    ('title', 'style', 'content') → either 'title', 'style' or 'content'
    """
    quoted = [f"'{name}'" for name in names]
    if len(quoted) == 1:
        return quoted[0]
    return "either " + ", ".join(quoted[:-1]) + " or " + quoted[-1]


def _as_mapping(payload: Any) -> Mapping[str, Any]:
    # A missing body or a JSON array carries no fields
    if isinstance(payload, Mapping):
        return payload
    return {}


def validate_create(
    payload: Any,
    required_fields: Sequence[str],
    allowed_fields: Optional[Sequence[str]] = None,
) -> ValidationResult:
    """
    Validate a create body.

    Args:
        payload: Decoded JSON body
        required_fields: Fields that must be present, in canonical order
        allowed_fields: Fields kept in the result (defaults to required_fields)

    Returns:
        MissingField for the first required field absent or null, otherwise
        a ValidatedPayload holding the allowed fields present in the body,
        in canonical order.
    """
    body = _as_mapping(payload)

    for name in required_fields:
        if body.get(name) is None:
            return MissingField(name)

    allowed = allowed_fields if allowed_fields is not None else required_fields
    return ValidatedPayload({name: body[name] for name in allowed if name in body})


def validate_update(payload: Any, updatable_fields: Sequence[str]) -> ValidationResult:
    """
    Validate a partial-update body.

    Returns:
        NoFieldsSupplied when no key of the body is updatable, otherwise a
        ValidatedPayload holding only the updatable keys.
    """
    body = _as_mapping(payload)

    supplied = {name: body[name] for name in updatable_fields if name in body}
    if not supplied:
        return NoFieldsSupplied(tuple(updatable_fields))
    return ValidatedPayload(supplied)
