"""Keyword dispatch table.

Each keyword module exposes ``compile(ctx, parent, schema)`` returning
``None`` (not applicable), ``Ok(validator)`` or ``Err(error)``. A keyword is
added by writing its module and registering it here with the drafts that know
it.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Optional

from schemagate.validation.drafts import Draft
from schemagate.validation.validator import CompilationResult

from . import format_, min_items, not_, pattern, ref, type_

if TYPE_CHECKING:
    from schemagate.validation.context import Context

CompileFunc = Callable[["Context", dict[str, Any], Any], Optional[CompilationResult]]

ALL_DRAFTS = frozenset(Draft)

KEYWORDS: dict[str, tuple[CompileFunc, frozenset[Draft]]] = {
    "$ref": (ref.compile, ALL_DRAFTS),
    "format": (format_.compile, ALL_DRAFTS),
    "minItems": (min_items.compile, ALL_DRAFTS),
    "not": (not_.compile, ALL_DRAFTS),
    "pattern": (pattern.compile, ALL_DRAFTS),
    "type": (type_.compile, ALL_DRAFTS),
}


def get_compile_function(draft: Draft, keyword: str) -> CompileFunc | None:
    """Compile function for ``keyword`` under ``draft``, or None if the draft does not know it."""
    entry = KEYWORDS.get(keyword)
    if entry is None or draft not in entry[1]:
        return None
    return entry[0]


__all__ = [
    "ALL_DRAFTS",
    "CompileFunc",
    "KEYWORDS",
    "get_compile_function",
]
