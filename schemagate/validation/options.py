"""Per-compilation configuration."""
from __future__ import annotations

from typing import Any, Callable

from pydantic import BaseModel, ConfigDict, Field, field_validator

from schemagate.core.config import get_settings
from schemagate.regex.cache import RegexCache

from .drafts import Draft


class ValidationOptions(BaseModel):
    """Options for compiling a schema document.

    Defaults come from ``Settings`` (``SCHEMAGATE_*`` environment variables).

    - draft: force a draft instead of detecting it from ``$schema``
    - validate_formats: assert the ``format`` keyword
    - format_checkers: format name -> predicate over strings
    - resolver: object with ``resolve(reference) -> Result[Any, str]`` for
      references outside the document
    - regex_cache: isolated pattern cache; the process-wide one when None
    - regex_timeout: seconds a single pattern match may run; None disables it
    """
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    draft: Draft | None = None
    validate_formats: bool = Field(default_factory=lambda: get_settings().VALIDATE_FORMATS)
    format_checkers: dict[str, Callable[[str], bool]] = Field(default_factory=dict)
    resolver: Any = None
    regex_cache: RegexCache | None = None
    regex_timeout: float | None = Field(default_factory=lambda: get_settings().REGEX_TIMEOUT, gt=0)

    @field_validator("draft", mode="before")
    @classmethod
    def _parse_draft(cls, value: Any) -> Draft | None:
        return None if value is None else Draft.from_name(value)
