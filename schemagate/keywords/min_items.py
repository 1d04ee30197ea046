"""``minItems``: arrays must have at least ``limit`` elements."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Iterator

from schemagate.core.errors import Err, Ok
from schemagate.validation.drafts import Draft
from schemagate.validation.errors import ValidationError
from schemagate.validation.paths import JsonPointer, LazyLocation
from schemagate.validation.validator import CompilationResult, KeywordValidator

from .helpers import MAX_EXACT_INTEGER, fail_on_non_positive_integer

if TYPE_CHECKING:
    from schemagate.validation.context import Context


@dataclass(frozen=True, slots=True)
class MinItemsValidator(KeywordValidator):
    limit: int
    schema_path: JsonPointer

    @classmethod
    def compile(cls, schema: Any, schema_path: JsonPointer, draft: Draft) -> CompilationResult:
        if isinstance(schema, int) and not isinstance(schema, bool) and schema >= 0:
            return Ok(cls(schema, schema_path))
        if (draft.allows_integral_floats and isinstance(schema, float) and schema.is_integer()
                and 0 <= schema <= MAX_EXACT_INTEGER):
            return Ok(cls(int(schema), schema_path))
        return Err(fail_on_non_positive_integer(schema, schema_path))

    def is_valid(self, instance: Any) -> bool:
        if isinstance(instance, list):
            return len(instance) >= self.limit
        return True

    def validate(self, instance: Any, location: LazyLocation) -> Iterator[ValidationError]:
        if isinstance(instance, list) and len(instance) < self.limit:
            yield ValidationError.min_items(self.schema_path, location.to_pointer(), instance, self.limit)

    def __str__(self) -> str:
        return f"minItems: {self.limit}"


def compile(ctx: Context, parent: dict[str, Any], schema: Any) -> CompilationResult | None:
    return MinItemsValidator.compile(schema, ctx.as_pointer_with("minItems"), ctx.draft)
