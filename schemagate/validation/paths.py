"""Locations inside schema and instance documents.

``JsonPointer`` is an immutable path used on the schema side and in errors.
``LazyLocation`` tracks the instance path while validation descends; it is a
linked list of chunks and only becomes a ``JsonPointer`` when an error is built.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Union

PathChunk = Union[str, int]


def _escape(chunk: PathChunk) -> str:
    if isinstance(chunk, int): return str(chunk)
    return chunk.replace("~", "~0").replace("/", "~1")


def _unescape(token: str) -> str:
    return token.replace("~1", "/").replace("~0", "~")


@dataclass(frozen=True, slots=True)
class JsonPointer:
    """RFC 6901 pointer made of string (property) and int (index) chunks."""
    chunks: tuple[PathChunk, ...] = ()

    @classmethod
    def parse(cls, value: str) -> JsonPointer:
        """Parse the string form (``/a/0/b``). Digit-only tokens stay strings."""
        if not value: return cls()
        if not value.startswith("/"): raise ValueError(f"Invalid JSON pointer: {value!r}")
        return cls(tuple(_unescape(token) for token in value[1:].split("/")))

    def with_chunk(self, chunk: PathChunk) -> JsonPointer:
        """New pointer with one more chunk. ``self`` is left untouched."""
        return JsonPointer((*self.chunks, chunk))

    @property
    def parent(self) -> JsonPointer | None:
        return JsonPointer(self.chunks[:-1]) if self.chunks else None

    @property
    def last(self) -> PathChunk | None:
        return self.chunks[-1] if self.chunks else None

    def is_ancestor_of(self, other: JsonPointer) -> bool:
        """True when ``other`` strictly descends from this pointer."""
        return len(other.chunks) > len(self.chunks) and other.chunks[:len(self.chunks)] == self.chunks

    def __iter__(self) -> Iterator[PathChunk]: return iter(self.chunks)

    def __len__(self) -> int: return len(self.chunks)

    def __str__(self) -> str:
        return "".join(f"/{_escape(chunk)}" for chunk in self.chunks)


@dataclass(frozen=True, slots=True)
class LazyLocation:
    """Instance location built while descending into an instance.

    Pushing a chunk is O(1) and allocates a single node; the full pointer is
    only assembled by ``to_pointer`` when an error needs it.
    """
    chunk: PathChunk | None = None
    parent: LazyLocation | None = None

    def push(self, chunk: PathChunk) -> LazyLocation:
        return LazyLocation(chunk, self)

    def to_pointer(self) -> JsonPointer:
        chunks: list[PathChunk] = []
        node: LazyLocation | None = self
        while node is not None and node.parent is not None:
            chunks.append(node.chunk)  # type: ignore[arg-type]
            node = node.parent
        chunks.reverse()
        return JsonPointer(tuple(chunks))

    def __str__(self) -> str: return str(self.to_pointer())
