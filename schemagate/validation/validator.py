"""Runtime contract shared by every compiled keyword."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Iterator, TypeAlias

from schemagate.core.errors import Result

from .errors import ValidationError
from .paths import LazyLocation


class KeywordValidator(ABC):
    """Base class for compiled keywords.

    Validators are immutable once compiled and may be shared between threads.
    ``is_valid`` is the cheap boolean check; ``validate`` lazily yields every
    error for the instance and builds error details only when asked.
    """

    @abstractmethod
    def is_valid(self, instance: Any) -> bool:
        """Whether ``instance`` satisfies this keyword."""

    @abstractmethod
    def validate(self, instance: Any, location: LazyLocation) -> Iterator[ValidationError]:
        """Yield errors for ``instance`` found at ``location``."""


CompilationResult: TypeAlias = Result[KeywordValidator, ValidationError]
