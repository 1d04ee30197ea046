"""Compilation context.

A context is the compiler's view of "where am I": the active draft and options,
the pointer of the schema being compiled, and the per-document state shared by
every context derived from the same root (resolver, regex cache, reference
registry). Descending never mutates the parent context.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any

from schemagate.core.errors import Result
from schemagate.regex.cache import RegexCache, get_regex_cache

from .drafts import Draft
from .errors import ValidationError
from .options import ValidationOptions
from .paths import JsonPointer, PathChunk
from .resolver import LocalResolver

if TYPE_CHECKING:
    from schemagate.keywords.ref import RefTarget

    from .node import SchemaNode


@dataclass(frozen=True, slots=True)
class Context:
    draft: Draft
    options: ValidationOptions
    resolver: LocalResolver
    regex_cache: RegexCache
    location: JsonPointer = field(default_factory=JsonPointer)
    # Shared by all contexts of one document; filled while compiling ``$ref``
    refs: dict[str, RefTarget] = field(default_factory=dict)

    @classmethod
    def for_document(cls, document: Any, draft: Draft, options: ValidationOptions) -> Context:
        return cls(draft=draft, options=options, resolver=LocalResolver(document),
            regex_cache=get_regex_cache() if options.regex_cache is None else options.regex_cache)

    def descend(self, chunk: PathChunk) -> Context:
        """Context one level deeper; ``self`` is left untouched."""
        return replace(self, location=self.location.with_chunk(chunk))

    def as_pointer_with(self, chunk: PathChunk) -> JsonPointer:
        return self.location.with_chunk(chunk)

    def compile(self, schema: Any) -> Result[SchemaNode, ValidationError]:
        """Compile a nested schema rooted at this context's location."""
        from .compiler import compile_node

        return compile_node(self, schema)

    def resolve(self, reference: str) -> Result[Any, str]:
        """Resolve in-document first, then through the configured resolver."""
        local = self.resolver.resolve(reference)
        if local.is_ok() or self.options.resolver is None:
            return local
        return self.options.resolver.resolve(reference)
