"""schemagate: JSON Schema compilation and validation

Schemas are compiled once into an immutable validator tree and reused for any
number of instances, from any number of threads.

Key Features:
- Draft-aware compilation (Draft 4 through 2020-12, detected from ``$schema``)
- Result-based compile errors, never exceptions for an invalid schema
- Two validation modes: ``is_valid`` (boolean) and ``validate`` (lazy errors)
- Exact schema and instance pointers on every error
- ECMA 262 pattern translation with a shared, bounded LRU regex cache
- Structured logging via structlog, settings via pydantic-settings

Usage:
    from schemagate import compile, validator_for, Ok, Err

    node = validator_for({"not": {"type": "string"}})
    node.is_valid(42)                   # True
    for error in node.validate("foo"):
        print(error.schema_path, error.message)   # /not ...

    match compile({"minItems": 1.5}):
        case Err(error):
            print(error.message)        # 1.5 is not of type "integer"
"""

from .core.errors import Result, Ok, Err
from .regex import RegexCache, get_regex_cache, translate, convert_regex
from .validation import (
    JsonPointer,
    LazyLocation,
    Draft,
    PrimitiveType,
    ErrorKind,
    ValidationError,
    SchemaCompilationError,
    ValidationOptions,
    LocalResolver,
    Resolver,
    KeywordValidator,
    SchemaNode,
    Context,
    compile,
    is_valid,
    validator_for,
)

__all__ = [
    "Result",
    "Ok",
    "Err",
    "RegexCache",
    "get_regex_cache",
    "translate",
    "convert_regex",
    "JsonPointer",
    "LazyLocation",
    "Draft",
    "PrimitiveType",
    "ErrorKind",
    "ValidationError",
    "SchemaCompilationError",
    "ValidationOptions",
    "LocalResolver",
    "Resolver",
    "KeywordValidator",
    "SchemaNode",
    "Context",
    "compile",
    "is_valid",
    "validator_for",
]
