"""``$ref``: validate against the referenced schema.

The target is resolved through the context and compiled at the ``$ref`` location.
Targets are registered per document under the reference string before they
are compiled, so a recursive reference picks up the registered target instead
of compiling forever. Every target is filled in before ``compile`` returns;
the tree is complete and immutable by the time anyone validates with it.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Iterator

from schemagate.core.errors import Err, Ok
from schemagate.validation.errors import ValidationError
from schemagate.validation.node import SchemaNode
from schemagate.validation.paths import JsonPointer, LazyLocation
from schemagate.validation.primitive import PrimitiveType
from schemagate.validation.validator import CompilationResult, KeywordValidator

from .helpers import invalid_type

if TYPE_CHECKING:
    from schemagate.validation.context import Context


@dataclass(slots=True)
class RefTarget:
    reference: str
    node: SchemaNode | None = None


@dataclass(frozen=True, slots=True)
class RefValidator(KeywordValidator):
    target: RefTarget

    def is_valid(self, instance: Any) -> bool:
        return self.target.node.is_valid(instance)

    def validate(self, instance: Any, location: LazyLocation) -> Iterator[ValidationError]:
        yield from self.target.node.validate(instance, location)


def compile(ctx: Context, parent: dict[str, Any], schema: Any) -> CompilationResult | None:
    location = ctx.as_pointer_with("$ref")
    if not isinstance(schema, str):
        return invalid_type(location, schema, PrimitiveType.STRING)
    if (target := ctx.refs.get(schema)) is not None:
        return Ok(RefValidator(target))
    match ctx.resolve(schema):
        case Err(reason):
            return Err(ValidationError.referencing(JsonPointer(), location, schema, schema, reason))
        case Ok(resolved):
            target = ctx.refs[schema] = RefTarget(schema)
            compiled = ctx.descend("$ref").compile(resolved)
            if compiled.is_err():
                del ctx.refs[schema]
                return compiled
            target.node = compiled.unwrap()
            return Ok(RefValidator(target))
