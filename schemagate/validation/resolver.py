"""Reference resolution.

Only in-document references are resolved here. Anything else goes through the
resolver supplied in ``ValidationOptions``; fetching remote documents is up to
that object.
"""
from __future__ import annotations

from typing import Any, Protocol
from urllib.parse import unquote, urljoin

from schemagate.core.errors import Err, Ok, Result

from .paths import JsonPointer


class Resolver(Protocol):
    def resolve(self, reference: str) -> Result[Any, str]:
        """Resolve ``reference`` to a schema value, or Err with the reason."""
        ...


class LocalResolver:
    """Resolves ``#`` and ``#/json/pointer`` fragments against one document."""

    def __init__(self, document: Any):
        self.document = document
        base = document.get("$id") or document.get("id") if isinstance(document, dict) else None
        self.base_uri = base.rstrip("#") if isinstance(base, str) else ""

    def resolve(self, reference: str) -> Result[Any, str]:
        uri, _, fragment = reference.partition("#")
        if uri and urljoin(self.base_uri, uri) != self.base_uri:
            return Err(f"'{uri}' is not part of this document")
        fragment = unquote(fragment)
        if not fragment:
            return Ok(self.document)
        if not fragment.startswith("/"):
            return Err(f"anchor '{fragment}' is not supported")
        value = self.document
        for token in JsonPointer.parse(fragment):
            if isinstance(value, dict) and token in value:
                value = value[token]
            elif isinstance(value, list) and str(token).isdigit() and int(token) < len(value):
                value = value[int(token)]
            else:
                return Err(f"'{token}' not found while resolving '{fragment}'")
        return Ok(value)
