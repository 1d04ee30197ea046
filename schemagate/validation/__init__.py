"""Schema Compilation and Validation Engine

Compiles a schema document into an immutable tree of ``SchemaNode`` objects
and validates instances against it in two modes:

- ``is_valid``: cheap boolean, short-circuits on the first failure
- ``validate``: lazy iterator over every ``ValidationError``

Errors carry the pointer into the schema and the pointer into the instance.
"""
from .paths import JsonPointer, LazyLocation, PathChunk
from .drafts import Draft
from .primitive import PrimitiveType
from .errors import ErrorKind, ValidationError, SchemaCompilationError, raise_result
from .options import ValidationOptions
from .resolver import LocalResolver, Resolver
from .validator import CompilationResult, KeywordValidator
from .node import SchemaNode
from .context import Context
from .compiler import compile, compile_node, is_valid, validator_for

__all__ = [
    "JsonPointer",
    "LazyLocation",
    "PathChunk",
    "Draft",
    "PrimitiveType",
    "ErrorKind",
    "ValidationError",
    "SchemaCompilationError",
    "raise_result",
    "ValidationOptions",
    "LocalResolver",
    "Resolver",
    "CompilationResult",
    "KeywordValidator",
    "SchemaNode",
    "Context",
    "compile",
    "compile_node",
    "is_valid",
    "validator_for",
]
