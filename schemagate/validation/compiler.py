"""Schema compiler.

Turns a schema document into a tree of ``SchemaNode`` objects. Each keyword of
a schema object is dispatched to the compile function registered for it under
the active draft; unknown keywords are ignored. The first keyword that fails
to compile aborts the whole document: no partially compiled node is returned.

Usage:
    from schemagate import compile, Ok, Err

    match compile({"not": {"type": "string"}}):
        case Ok(node):
            errors = list(node.validate("foo"))
        case Err(error):
            print(error.message)
"""
from __future__ import annotations

from typing import Any

from schemagate.core.config import settings
from schemagate.core.errors import Err, Ok, Result
from schemagate.core.logging import compiler_logger
from schemagate.keywords import get_compile_function
from schemagate.keywords.boolean import FalseValidator

from .context import Context
from .drafts import Draft
from .errors import ValidationError, raise_result
from .node import SchemaNode
from .options import ValidationOptions
from .paths import JsonPointer
from .primitive import PrimitiveType
from .validator import KeywordValidator


def _compile_boolean(ctx: Context, schema: bool) -> Result[SchemaNode, ValidationError]:
    if not ctx.draft.allows_boolean_schemas:
        return Err(ValidationError.single_type_error(JsonPointer(), ctx.location, schema, PrimitiveType.OBJECT))
    validators = () if schema else (("false", FalseValidator(ctx.location)),)
    return Ok(SchemaNode(ctx.location, validators))


def compile_node(ctx: Context, schema: Any) -> Result[SchemaNode, ValidationError]:
    """Compile one (sub)schema at ``ctx.location``."""
    if isinstance(schema, bool):
        return _compile_boolean(ctx, schema)
    if not isinstance(schema, dict):
        expected = [PrimitiveType.OBJECT, PrimitiveType.BOOLEAN] if ctx.draft.allows_boolean_schemas else [PrimitiveType.OBJECT]
        return Err(ValidationError.multiple_type_error(JsonPointer(), ctx.location, schema, expected))

    keywords = schema.items()
    if ctx.draft.ref_overrides_siblings and "$ref" in schema:
        keywords = [("$ref", schema["$ref"])]

    validators: list[tuple[str, KeywordValidator]] = []
    for keyword, value in keywords:
        if (compile_fn := get_compile_function(ctx.draft, keyword)) is None:
            continue
        match compile_fn(ctx, schema, value):
            case None:
                continue
            case Ok(validator):
                validators.append((keyword, validator))
            case Err() as failure:
                return failure
    return Ok(SchemaNode(ctx.location, tuple(validators)))


def _select_draft(document: Any, draft: Draft | str | None, options: ValidationOptions) -> Draft:
    """Explicit argument, then options, then ``$schema``, then the configured default."""
    if draft is not None:
        return Draft.from_name(draft)
    if options.draft is not None:
        return options.draft
    return Draft.detect(document, Draft.from_name(settings.DEFAULT_DRAFT))


def compile(
    document: Any,
    draft: Draft | str | None = None,
    options: ValidationOptions | None = None,
) -> Result[SchemaNode, ValidationError]:
    """Compile a schema document.

    Args:
        document: Parsed schema (dict or bool)
        draft: Force a draft; detected from ``$schema`` when omitted
        options: Compilation options; defaults come from settings

    Returns:
        Ok(SchemaNode) for the root, or Err(ValidationError) describing the
        first invalid keyword
    """
    options = options or ValidationOptions()
    active = _select_draft(document, draft, options)
    result = Context.for_document(document, active, options).compile(document)

    log = compiler_logger()
    match result:
        case Ok(node):
            log.debug("schema_compiled", draft=active.value, keywords=node.keywords)
        case Err(error):
            log.warning("schema_compile_failed", draft=active.value, kind=error.kind.value,
                location=str(error.instance_path), message=error.message)
    return result


def validator_for(
    document: Any,
    draft: Draft | str | None = None,
    options: ValidationOptions | None = None,
) -> SchemaNode:
    """Compile a schema document, raising SchemaCompilationError if it is invalid."""
    return raise_result(compile(document, draft, options))


def is_valid(
    document: Any,
    instance: Any,
    draft: Draft | str | None = None,
    options: ValidationOptions | None = None,
) -> bool:
    """One-shot check. Compile once with ``validator_for`` when validating repeatedly."""
    return validator_for(document, draft, options).is_valid(instance)
