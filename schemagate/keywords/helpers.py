"""Compile-time error builders shared by keywords.

Compile-time errors describe the schema document: the keyword's own location
is the "instance path" and the schema path is empty.
"""
from __future__ import annotations

from typing import Any

from schemagate.core.errors import Err
from schemagate.validation.errors import ValidationError
from schemagate.validation.paths import JsonPointer
from schemagate.validation.primitive import PrimitiveType

# Largest integer a float represents exactly
MAX_EXACT_INTEGER = 2 ** 53


def invalid_type(location: JsonPointer, schema: Any, expected: PrimitiveType) -> Err[ValidationError]:
    return Err(ValidationError.single_type_error(JsonPointer(), location, schema, expected))


def invalid_format(location: JsonPointer, schema: Any, format: str) -> Err[ValidationError]:
    return Err(ValidationError.format(JsonPointer(), location, schema, format))


def fail_on_non_positive_integer(schema: Any, location: JsonPointer) -> ValidationError:
    """Error for a limit that is not a non-negative integer."""
    if isinstance(schema, (int, float)) and not isinstance(schema, bool) and schema < 0:
        return ValidationError.minimum(JsonPointer(), location, schema, 0)
    return ValidationError.single_type_error(JsonPointer(), location, schema, PrimitiveType.INTEGER)
