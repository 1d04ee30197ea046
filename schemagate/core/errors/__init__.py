"""Monadic Error Handling System

Result type used for every compile-time outcome in schemagate.

Usage:
    from schemagate.core.errors import Ok, Err, Result

    match compile(schema):
        case Ok(node):
            node.is_valid(instance)
        case Err(error):
            log.warning("schema_rejected", error=error.message)
"""
from .types import (
    Result,
    Ok,
    Err,
    sequence_results,
)

__all__ = [
    "Result",
    "Ok",
    "Err",
    "sequence_results",
]
