"""The ``false`` schema: nothing is valid."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator

from schemagate.validation.errors import ValidationError
from schemagate.validation.paths import JsonPointer, LazyLocation
from schemagate.validation.validator import KeywordValidator


@dataclass(frozen=True, slots=True)
class FalseValidator(KeywordValidator):
    schema_path: JsonPointer

    def is_valid(self, instance: Any) -> bool:
        return False

    def validate(self, instance: Any, location: LazyLocation) -> Iterator[ValidationError]:
        yield ValidationError.false_schema(self.schema_path, location.to_pointer(), instance)
