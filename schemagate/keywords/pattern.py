"""``pattern``: strings must contain a match for an ECMA 262 regular expression.

Patterns are translated to the ``regex`` dialect and cached process-wide (or
in the injected cache) under their original text. A match that exceeds the
configured timeout is reported as ``backtrack_limit_exceeded`` by ``validate``
and counts as invalid for ``is_valid``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Iterator

import regex

from schemagate.core.errors import Ok
from schemagate.regex.translate import convert_regex
from schemagate.validation.errors import ValidationError
from schemagate.validation.paths import JsonPointer, LazyLocation
from schemagate.validation.primitive import PrimitiveType
from schemagate.validation.validator import CompilationResult, KeywordValidator

from .helpers import invalid_format, invalid_type

if TYPE_CHECKING:
    from schemagate.validation.context import Context


@dataclass(frozen=True, slots=True)
class PatternValidator(KeywordValidator):
    original: str
    pattern: regex.Pattern
    schema_path: JsonPointer
    timeout: float | None = None

    @classmethod
    def compile(cls, ctx: Context, pattern: Any) -> CompilationResult:
        location = ctx.as_pointer_with("pattern")
        if not isinstance(pattern, str):
            return invalid_type(location, pattern, PrimitiveType.STRING)
        try:
            compiled = ctx.regex_cache.get_or_compile(pattern, convert_regex)
        except regex.error:
            return invalid_format(location, pattern, "regex")
        return Ok(cls(original=pattern, pattern=compiled, schema_path=location, timeout=ctx.options.regex_timeout))

    def _matches(self, item: str) -> bool:
        """Raises TimeoutError when the match runs past ``timeout``."""
        return self.pattern.search(item, timeout=self.timeout) is not None

    def is_valid(self, instance: Any) -> bool:
        if not isinstance(instance, str):
            return True
        try:
            return self._matches(instance)
        except TimeoutError:
            return False

    def validate(self, instance: Any, location: LazyLocation) -> Iterator[ValidationError]:
        if not isinstance(instance, str):
            return
        try:
            matched = self._matches(instance)
        except TimeoutError as exc:
            yield ValidationError.backtrack_limit(self.schema_path, location.to_pointer(), instance, exc)
            return
        if not matched:
            yield ValidationError.pattern(self.schema_path, location.to_pointer(), instance, self.original)


def compile(ctx: Context, parent: dict[str, Any], schema: Any) -> CompilationResult | None:
    return PatternValidator.compile(ctx, schema)
