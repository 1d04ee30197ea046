"""Compiled (sub)schemas."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator

from .errors import ValidationError
from .paths import JsonPointer, LazyLocation
from .validator import KeywordValidator


@dataclass(frozen=True, slots=True)
class SchemaNode:
    """Compiled representation of a schema object at ``location``.

    Holds the validators of the keywords present at that location, in schema
    order. A node is the unit of reuse: compile once, then call ``is_valid`` /
    ``validate`` any number of times from any thread.
    """
    location: JsonPointer
    validators: tuple[tuple[str, KeywordValidator], ...] = ()

    @property
    def keywords(self) -> list[str]: return [keyword for keyword, _ in self.validators]

    def is_valid(self, instance: Any) -> bool:
        """Short-circuits on the first failing keyword; builds no error details."""
        for _, validator in self.validators:
            if not validator.is_valid(instance):
                return False
        return True

    def validate(self, instance: Any, location: LazyLocation | None = None) -> Iterator[ValidationError]:
        """Lazily yield every error of every keyword.

        Each call starts a fresh iteration; consumers may stop early.
        """
        location = location or LazyLocation()
        for _, validator in self.validators:
            yield from validator.validate(instance, location)

    def first_error(self, instance: Any) -> ValidationError | None:
        return next(self.validate(instance), None)
