"""``type``: the instance must be of one of the named primitive types.

From Draft 6 on, a float without a fractional part (``1.0``) is an integer.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Iterator

from schemagate.core.errors import Err, Ok, Result, sequence_results
from schemagate.validation.drafts import Draft
from schemagate.validation.errors import ValidationError
from schemagate.validation.paths import JsonPointer, LazyLocation
from schemagate.validation.primitive import PrimitiveType
from schemagate.validation.validator import CompilationResult, KeywordValidator

if TYPE_CHECKING:
    from schemagate.validation.context import Context


def _parse_type(name: Any, location: JsonPointer) -> Result[PrimitiveType, ValidationError]:
    if isinstance(name, str) and name in PrimitiveType.names():
        return Ok(PrimitiveType(name))
    return Err(ValidationError.enumeration(JsonPointer(), location, name, PrimitiveType.names()))


@dataclass(frozen=True, slots=True)
class TypeValidator(KeywordValidator):
    types: tuple[PrimitiveType, ...]
    draft: Draft
    schema_path: JsonPointer

    @classmethod
    def compile(cls, ctx: Context, schema: Any) -> CompilationResult:
        location = ctx.as_pointer_with("type")
        if isinstance(schema, str):
            names = [schema]
        elif isinstance(schema, list):
            names = schema
        else:
            return Err(ValidationError.multiple_type_error(
                JsonPointer(), location, schema, [PrimitiveType.STRING, PrimitiveType.ARRAY]))
        return sequence_results(_parse_type(name, location) for name in names).map(
            lambda types: cls(tuple(types), ctx.draft, location))

    def is_valid(self, instance: Any) -> bool:
        return any(t.matches(instance, self.draft) for t in self.types)

    def validate(self, instance: Any, location: LazyLocation) -> Iterator[ValidationError]:
        if self.is_valid(instance):
            return
        if len(self.types) == 1:
            yield ValidationError.single_type_error(self.schema_path, location.to_pointer(), instance, self.types[0])
        else:
            yield ValidationError.multiple_type_error(self.schema_path, location.to_pointer(), instance, self.types)


def compile(ctx: Context, parent: dict[str, Any], schema: Any) -> CompilationResult | None:
    return TypeValidator.compile(ctx, schema)
