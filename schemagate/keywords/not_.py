"""``not``: the instance must NOT be valid against the sub-schema."""
from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Iterator

from schemagate.validation.errors import ValidationError
from schemagate.validation.node import SchemaNode
from schemagate.validation.paths import LazyLocation
from schemagate.validation.validator import CompilationResult, KeywordValidator

if TYPE_CHECKING:
    from schemagate.validation.context import Context


@dataclass(frozen=True, slots=True)
class NotValidator(KeywordValidator):
    original: Any  # Only used to show the negated schema in errors
    node: SchemaNode

    @classmethod
    def compile(cls, ctx: Context, schema: Any) -> CompilationResult:
        return ctx.descend("not").compile(schema).map(
            lambda node: cls(original=copy.deepcopy(schema), node=node))

    def is_valid(self, instance: Any) -> bool:
        return not self.node.is_valid(instance)

    def validate(self, instance: Any, location: LazyLocation) -> Iterator[ValidationError]:
        if not self.is_valid(instance):
            yield ValidationError.not_(self.node.location, location.to_pointer(), instance, self.original)


def compile(ctx: Context, parent: dict[str, Any], schema: Any) -> CompilationResult | None:
    return NotValidator.compile(ctx, schema)
