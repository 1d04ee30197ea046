"""``format``: route strings to an externally registered checker.

No checker ships with the package. The keyword is only compiled when formats
are asserted (``ValidationOptions.validate_formats``) and a checker is
registered for the name; otherwise it is an annotation and is skipped.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Iterator

from schemagate.core.errors import Ok
from schemagate.validation.errors import ValidationError
from schemagate.validation.paths import JsonPointer, LazyLocation
from schemagate.validation.primitive import PrimitiveType
from schemagate.validation.validator import CompilationResult, KeywordValidator

from .helpers import invalid_type

if TYPE_CHECKING:
    from schemagate.validation.context import Context


@dataclass(frozen=True, slots=True)
class FormatValidator(KeywordValidator):
    format: str
    check: Callable[[str], bool]
    schema_path: JsonPointer

    def is_valid(self, instance: Any) -> bool:
        return not isinstance(instance, str) or bool(self.check(instance))

    def validate(self, instance: Any, location: LazyLocation) -> Iterator[ValidationError]:
        if not self.is_valid(instance):
            yield ValidationError.format(self.schema_path, location.to_pointer(), instance, self.format)


def compile(ctx: Context, parent: dict[str, Any], schema: Any) -> CompilationResult | None:
    if not ctx.options.validate_formats:
        return None
    location = ctx.as_pointer_with("format")
    if not isinstance(schema, str):
        return invalid_type(location, schema, PrimitiveType.STRING)
    if (check := ctx.options.format_checkers.get(schema)) is None:
        return None
    return Ok(FormatValidator(schema, check, location))
