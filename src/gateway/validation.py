"""Argument and identifier validation run before any request is issued."""

import re
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from src.registry.models import OperationSpec

from .exceptions import ArgumentValidationError, InvalidIdentifierError


IDENTIFIER_PATTERN = re.compile(r"[A-Za-z0-9]+")


def json_type_name(value: Any) -> str:
    """Name a Python value by its JSON type, as clients see it."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, Mapping):
        return "object"
    return type(value).__name__


def validate_arguments(raw_args: Any, spec: OperationSpec) -> BaseModel:
    """Check a raw argument bag against an operation's declared fields.

    All violations are collected and reported in a single error. Keys the
    operation does not declare are dropped. A null optional field is
    treated as absent.

    Args:
        raw_args: Arguments as decoded from the wire.
        spec: Declaration of the operation being called.

    Returns:
        Instance of the operation's arguments model.

    Raises:
        ArgumentValidationError: If the bag is not a mapping or any field
            is missing or mistyped.
    """
    if raw_args is None and not spec.required_fields:
        raw_args = {}
    if raw_args is None:
        raise ArgumentValidationError(spec.name, reason="arguments are required")
    if not isinstance(raw_args, Mapping):
        raise ArgumentValidationError(
            spec.name,
            reason=f"arguments must be an object, got {json_type_name(raw_args)}",
        )

    declared = {field.name: field for field in spec.fields}
    candidate = {
        key: value
        for key, value in raw_args.items()
        if key in declared and not (value is None and not declared[key].required)
    }

    model = spec.arguments_model()
    try:
        return model(**candidate)
    except PydanticValidationError as e:
        missing: list[str] = []
        wrong_types: list[tuple[str, str, str]] = []
        for error in e.errors():
            field_name = str(error["loc"][0]) if error["loc"] else ""
            if error["type"] == "missing":
                missing.append(field_name)
            else:
                wrong_types.append(
                    (field_name, json_type_name(error.get("input")), declared[field_name].type)
                )
        raise ArgumentValidationError(spec.name, missing=missing, wrong_types=wrong_types) from None


def validate_identifier(parameter: str, value: str) -> str:
    """Reject identifiers that are not plain ASCII letters and digits.

    Raises:
        InvalidIdentifierError: If the value is empty or has any other character.
    """
    if not isinstance(value, str) or not IDENTIFIER_PATTERN.fullmatch(value):
        raise InvalidIdentifierError(parameter, value)
    return value


def validate_identifiers(arguments: BaseModel, spec: OperationSpec) -> None:
    """Check every identifier field that was provided."""
    for name in spec.identifier_fields:
        value = getattr(arguments, name, None)
        if value is not None:
            validate_identifier(name, value)
