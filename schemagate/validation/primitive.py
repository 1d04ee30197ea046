"""JSON primitive types as named by the ``type`` keyword."""
from __future__ import annotations

from enum import Enum
from typing import Any

from .drafts import Draft


class PrimitiveType(str, Enum):
    ARRAY = "array"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    NULL = "null"
    NUMBER = "number"
    OBJECT = "object"
    STRING = "string"

    @classmethod
    def names(cls) -> list[str]: return [t.value for t in cls]

    def matches(self, instance: Any, draft: Draft) -> bool:
        """Whether ``instance`` is of this type. ``bool`` is never a number."""
        match self:
            case PrimitiveType.ARRAY:
                return isinstance(instance, list)
            case PrimitiveType.BOOLEAN:
                return isinstance(instance, bool)
            case PrimitiveType.NULL:
                return instance is None
            case PrimitiveType.OBJECT:
                return isinstance(instance, dict)
            case PrimitiveType.STRING:
                return isinstance(instance, str)
            case PrimitiveType.NUMBER:
                return isinstance(instance, (int, float)) and not isinstance(instance, bool)
            case PrimitiveType.INTEGER:
                if isinstance(instance, bool): return False
                if isinstance(instance, int): return True
                return draft.allows_integral_floats and isinstance(instance, float) and instance.is_integer()
        return False
