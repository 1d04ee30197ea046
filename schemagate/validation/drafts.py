"""Schema language revisions."""
from __future__ import annotations

from enum import Enum
from typing import Any


class Draft(str, Enum):
    """JSON Schema draft, ordered from oldest to newest."""
    DRAFT4 = "4"
    DRAFT6 = "6"
    DRAFT7 = "7"
    DRAFT201909 = "2019-09"
    DRAFT202012 = "2020-12"

    @classmethod
    def from_url(cls, url: str) -> Draft | None:
        """Map a ``$schema`` URI to a draft, ignoring scheme and trailing ``#``."""
        normalized = url.rstrip("#").split("://", 1)[-1]
        return _DRAFT_URLS.get(normalized)

    @classmethod
    def from_name(cls, name: str | Draft) -> Draft:
        """Accept ``"7"``, ``"draft7"``, ``"draft-07"``, ``"2020-12"`` or a Draft."""
        if isinstance(name, Draft): return name
        key = name.lower().removeprefix("draft").lstrip("-").lstrip("0") or "0"
        for draft in cls:
            if draft.value == key: return draft
        raise ValueError(f"Unknown draft: {name!r}")

    @classmethod
    def detect(cls, schema: Any, default: Draft) -> Draft:
        """Draft named by the root ``$schema`` keyword, or ``default``."""
        if isinstance(schema, dict) and isinstance(url := schema.get("$schema"), str):
            return cls.from_url(url) or default
        return default

    @property
    def allows_integral_floats(self) -> bool:
        """Whether ``1.0`` is accepted where an integer is required."""
        return self is not Draft.DRAFT4

    @property
    def allows_boolean_schemas(self) -> bool:
        return self is not Draft.DRAFT4

    @property
    def ref_overrides_siblings(self) -> bool:
        """Before 2019-09, keywords next to ``$ref`` are ignored."""
        return self in (Draft.DRAFT4, Draft.DRAFT6, Draft.DRAFT7)


_DRAFT_URLS: dict[str, Draft] = {
    "json-schema.org/draft-04/schema": Draft.DRAFT4,
    "json-schema.org/draft-06/schema": Draft.DRAFT6,
    "json-schema.org/draft-07/schema": Draft.DRAFT7,
    "json-schema.org/draft/2019-09/schema": Draft.DRAFT201909,
    "json-schema.org/draft/2020-12/schema": Draft.DRAFT202012,
}
