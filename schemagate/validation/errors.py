"""Validation Error System

Every failure, at compile time or at validation time, is a ``ValidationError``
value: a kind from a closed set, the pointer into the schema, the pointer into
the instance, the offending value and a kind-specific payload.

Error Format (``to_dict``):
{
    "kind": "pattern",
    "message": "\"b\" does not match \"^f\"",
    "schema_path": "/pattern",
    "instance_path": "/name",
    "instance": "b",
    "context": {"pattern": "^f"}
}

Compile-time errors describe the schema document itself: their
``instance_path`` points at the offending keyword inside the schema, their
``schema_path`` is empty and ``instance`` is the offending schema fragment.
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Sequence, TypeVar

from schemagate.core.errors import Result

from .paths import JsonPointer
from .primitive import PrimitiveType

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Closed set of failure kinds."""
    BACKTRACK_LIMIT_EXCEEDED = "backtrack_limit_exceeded"
    ENUM = "enum"
    FALSE_SCHEMA = "false_schema"
    FORMAT = "format"
    MIN_ITEMS = "min_items"
    MINIMUM = "minimum"
    NOT = "not"
    PATTERN = "pattern"
    REFERENCING = "referencing"
    TYPE = "type"


def _render(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, default=str)


@dataclass(frozen=True, slots=True)
class ValidationError:
    """A single failure with its exact location.

    - kind: what went wrong
    - schema_path: pointer to the keyword (or sub-schema) that failed
    - instance_path: pointer to the offending part of the instance
    - instance: the offending value
    - context: kind-specific payload (limit, pattern, negated schema, ...)
    """
    kind: ErrorKind
    schema_path: JsonPointer
    instance_path: JsonPointer
    instance: Any = None
    context: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def backtrack_limit(cls, schema_path: JsonPointer, instance_path: JsonPointer, instance: Any,
                        error: BaseException | str) -> ValidationError:
        return cls(ErrorKind.BACKTRACK_LIMIT_EXCEEDED, schema_path, instance_path, instance, {"error": str(error)})

    @classmethod
    def enumeration(cls, schema_path: JsonPointer, instance_path: JsonPointer, instance: Any,
                    options: Sequence[Any]) -> ValidationError:
        return cls(ErrorKind.ENUM, schema_path, instance_path, instance, {"options": list(options)})

    @classmethod
    def false_schema(cls, schema_path: JsonPointer, instance_path: JsonPointer, instance: Any) -> ValidationError:
        return cls(ErrorKind.FALSE_SCHEMA, schema_path, instance_path, instance)

    @classmethod
    def format(cls, schema_path: JsonPointer, instance_path: JsonPointer, instance: Any,
               format: str) -> ValidationError:
        return cls(ErrorKind.FORMAT, schema_path, instance_path, instance, {"format": format})

    @classmethod
    def min_items(cls, schema_path: JsonPointer, instance_path: JsonPointer, instance: Any,
                  limit: int) -> ValidationError:
        return cls(ErrorKind.MIN_ITEMS, schema_path, instance_path, instance, {"limit": limit})

    @classmethod
    def minimum(cls, schema_path: JsonPointer, instance_path: JsonPointer, instance: Any,
                limit: int | float) -> ValidationError:
        return cls(ErrorKind.MINIMUM, schema_path, instance_path, instance, {"limit": limit})

    @classmethod
    def not_(cls, schema_path: JsonPointer, instance_path: JsonPointer, instance: Any,
             schema: Any) -> ValidationError:
        return cls(ErrorKind.NOT, schema_path, instance_path, instance, {"schema": schema})

    @classmethod
    def pattern(cls, schema_path: JsonPointer, instance_path: JsonPointer, instance: Any,
                pattern: str) -> ValidationError:
        return cls(ErrorKind.PATTERN, schema_path, instance_path, instance, {"pattern": pattern})

    @classmethod
    def referencing(cls, schema_path: JsonPointer, instance_path: JsonPointer, instance: Any,
                    reference: str, reason: str) -> ValidationError:
        return cls(ErrorKind.REFERENCING, schema_path, instance_path, instance,
                   {"reference": reference, "reason": reason})

    @classmethod
    def single_type_error(cls, schema_path: JsonPointer, instance_path: JsonPointer, instance: Any,
                          expected: PrimitiveType) -> ValidationError:
        return cls(ErrorKind.TYPE, schema_path, instance_path, instance, {"types": [expected.value]})

    @classmethod
    def multiple_type_error(cls, schema_path: JsonPointer, instance_path: JsonPointer, instance: Any,
                            expected: Sequence[PrimitiveType]) -> ValidationError:
        return cls(ErrorKind.TYPE, schema_path, instance_path, instance, {"types": [t.value for t in expected]})

    @property
    def message(self) -> str:
        """Human-readable description."""
        instance, ctx = _render(self.instance), self.context
        match self.kind:
            case ErrorKind.BACKTRACK_LIMIT_EXCEEDED:
                return f"Error executing regex: {ctx['error']}"
            case ErrorKind.ENUM:
                return f"{instance} is not one of {_render(ctx['options'])}"
            case ErrorKind.FALSE_SCHEMA:
                return f"False schema does not allow {instance}"
            case ErrorKind.FORMAT:
                return f'{instance} is not a "{ctx["format"]}"'
            case ErrorKind.MIN_ITEMS:
                return f"{instance} has less than {ctx['limit']} item{'' if ctx['limit'] == 1 else 's'}"
            case ErrorKind.MINIMUM:
                return f"{instance} is less than the minimum of {ctx['limit']}"
            case ErrorKind.NOT:
                return f"{_render(ctx['schema'])} is not allowed for {instance}"
            case ErrorKind.PATTERN:
                return f'{instance} does not match "{ctx["pattern"]}"'
            case ErrorKind.REFERENCING:
                return f"Unresolvable reference {ctx['reference']!r}: {ctx['reason']}"
            case ErrorKind.TYPE:
                types = ctx["types"]
                if len(types) == 1: return f'{instance} is not of type "{types[0]}"'
                quoted = ", ".join(f'"{t}"' for t in types)
                return f"{instance} is not of types {quoted}"
        return f"{instance} is invalid"

    def to_dict(self) -> dict[str, Any]:
        """Serialize for reports and logs."""
        return {"kind": self.kind.value, "message": self.message, "schema_path": str(self.schema_path),
            "instance_path": str(self.instance_path), "instance": self.instance, "context": dict(self.context)}

    def __str__(self) -> str: return self.message

    # Pointers only; ``instance`` and ``context`` may be unhashable
    def __hash__(self) -> int:
        return hash((self.kind, self.schema_path, self.instance_path))


class SchemaCompilationError(Exception):
    """Exception wrapper for a compile-time ValidationError.

    Use this when a caller prefers exceptions to the Result monad
    (e.g. ``validator_for``).
    """

    def __init__(self, error: ValidationError):
        self.error = error
        location = str(error.instance_path) or "<root>"
        super().__init__(f"Invalid schema at {location}: {error.message}")


def raise_result(result: Result[T, ValidationError]) -> T:
    """Return the Ok value or raise SchemaCompilationError for an Err.

    Usage:
        node = raise_result(compile(schema))
    """
    if result.is_err():
        raise SchemaCompilationError(result.unwrap_err())
    return result.unwrap()
