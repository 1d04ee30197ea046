import pytest

from schemagate import (
    Draft,
    Err,
    ErrorKind,
    JsonPointer,
    LazyLocation,
    Ok,
    RegexCache,
    ValidationOptions,
    compile,
    validator_for,
)
from schemagate.keywords.pattern import PatternValidator


def assert_schema_path(schema, instance, expected):
    errors = list(validator_for(schema).validate(instance))
    assert errors, f"{instance!r} should be invalid"
    assert str(errors[0].schema_path) == expected


def compile_error(schema, **kwargs):
    result = compile(schema, **kwargs)
    assert result.is_err(), f"{schema!r} should not compile"
    return result.unwrap_err()


# not

def test_not_reports_its_own_location():
    node = validator_for({"not": {"type": "string"}})
    errors = list(node.validate("foo"))

    assert len(errors) == 1
    error = errors[0]
    assert error.kind is ErrorKind.NOT
    assert str(error.schema_path) == "/not"
    assert str(error.instance_path) == ""
    assert error.context["schema"] == {"type": "string"}
    assert error.message == '{"type": "string"} is not allowed for "foo"'
    assert node.is_valid(42)


@pytest.mark.parametrize(
    "schema, instance",
    [
        ({"type": "string"}, "foo"),
        ({"type": "string"}, 1),
        ({"minItems": 2}, [1]),
        ({"minItems": 2}, [1, 2]),
        ({"pattern": "^f"}, "bar"),
        (True, None),
        (False, None),
        ({}, {"a": 1}),
    ],
)
def test_not_negates_its_operand(schema, instance):
    inner = validator_for(schema)
    negated = validator_for({"not": schema})
    assert negated.is_valid(instance) is (not inner.is_valid(instance))


def test_nested_not_locations():
    node = validator_for({"not": {"not": {"type": "string"}}})
    outer = node.validators[0][1]
    inner = outer.node.validators[0][1]

    assert str(outer.node.location) == "/not"
    assert str(inner.node.location) == "/not/not"
    assert node.is_valid("foo")
    assert_schema_path({"not": {"not": {"type": "string"}}}, 1, "/not")


def test_not_keeps_a_copy_of_the_operand():
    operand = {"type": "string"}
    node = validator_for({"not": operand})
    operand["type"] = "integer"

    error = node.first_error("foo")
    assert error.context["schema"] == {"type": "string"}


def test_not_propagates_operand_compile_errors():
    error = compile_error({"not": {"minItems": -1}})
    assert error.kind is ErrorKind.MINIMUM
    assert str(error.instance_path) == "/not/minItems"

    error = compile_error({"not": 5})
    assert error.kind is ErrorKind.TYPE
    assert str(error.instance_path) == "/not"


# pattern

@pytest.mark.parametrize(
    "pattern, instance, expected",
    [
        ("^f", "foo", True),
        ("^f", "bar", False),
        ("^f", 42, True),
        ("^abc$", "abc\n", False),
        ("^(?!eo:)", "ab:", True),
        ("^(?!eo:)", "eo:bands", False),
        (r"\\w", r"\w", True),
        (r"^[\w\-\.\+]+$", "CC-BY-4.0", True),
    ],
)
def test_pattern(pattern, instance, expected):
    assert validator_for({"pattern": pattern}).is_valid(instance) is expected


def test_pattern_error():
    error = validator_for({"pattern": "^f"}).first_error("b")

    assert error.kind is ErrorKind.PATTERN
    assert str(error.schema_path) == "/pattern"
    assert error.message == '"b" does not match "^f"'


def test_pattern_must_be_a_string():
    error = compile_error({"pattern": 5})
    assert error.kind is ErrorKind.TYPE
    assert error.context["types"] == ["string"]
    assert str(error.instance_path) == "/pattern"


def test_invalid_pattern_is_a_format_error():
    error = compile_error({"pattern": "\\"})
    assert error.kind is ErrorKind.FORMAT
    assert error.context["format"] == "regex"
    assert str(error.instance_path) == "/pattern"


def test_pattern_uses_injected_cache():
    cache = RegexCache(capacity=2)
    validator_for({"pattern": "^injected"}, options=ValidationOptions(regex_cache=cache))
    assert "^injected" in cache


class _TimingOutPattern:
    def search(self, item, timeout=None):
        raise TimeoutError("regex match timed out")


def test_pattern_timeout_is_reported():
    validator = PatternValidator(
        original="^(a+)+$",
        pattern=_TimingOutPattern(),
        schema_path=JsonPointer(("pattern",)),
        timeout=0.01,
    )

    assert not validator.is_valid("aaaa!")
    errors = list(validator.validate("aaaa!", LazyLocation()))
    assert len(errors) == 1
    assert errors[0].kind is ErrorKind.BACKTRACK_LIMIT_EXCEEDED
    assert errors[0].message == "Error executing regex: regex match timed out"


def test_catastrophic_pattern_hits_the_timeout():
    options = ValidationOptions(regex_timeout=0.05, regex_cache=RegexCache(capacity=1))
    node = validator_for({"pattern": "^(a|a)*$"}, options=options)
    instance = "a" * 40 + "!"

    assert not node.is_valid(instance)
    error = node.first_error(instance)
    assert error.kind is ErrorKind.BACKTRACK_LIMIT_EXCEEDED
    assert str(error.schema_path) == "/pattern"


# minItems

@pytest.mark.parametrize(
    "limit, instance, expected",
    [
        (1, [], False),
        (1, [1], True),
        (1.0, [], False),
        (1.0, [1], True),
        (0, [], True),
        (2, "not an array", True),
    ],
)
def test_min_items(limit, instance, expected):
    assert validator_for({"minItems": limit}).is_valid(instance) is expected


def test_min_items_error():
    assert_schema_path({"minItems": 1}, [], "/minItems")
    error = validator_for({"minItems": 1}).first_error([])
    assert error.kind is ErrorKind.MIN_ITEMS
    assert error.message == "[] has less than 1 item"


@pytest.mark.parametrize("limit", [1.5, True, "1", None, 2.0 ** 60])
def test_min_items_rejects_non_integers(limit):
    error = compile_error({"minItems": limit})
    assert error.kind is ErrorKind.TYPE
    assert error.context["types"] == ["integer"]
    assert str(error.instance_path) == "/minItems"


def test_min_items_rejects_negative_limits():
    error = compile_error({"minItems": -1})
    assert error.kind is ErrorKind.MINIMUM
    assert error.context["limit"] == 0


def test_min_items_integral_float_needs_draft_6():
    assert compile({"minItems": 1.0}, draft=Draft.DRAFT6).is_ok()
    error = compile_error({"minItems": 1.0}, draft=Draft.DRAFT4)
    assert error.kind is ErrorKind.TYPE


# type

@pytest.mark.parametrize(
    "schema, instance, draft, expected",
    [
        ({"type": "integer"}, 1, "7", True),
        ({"type": "integer"}, 1.0, "7", True),
        ({"type": "integer"}, 1.0, "4", False),
        ({"type": "integer"}, 1.5, "7", False),
        ({"type": "integer"}, True, "7", False),
        ({"type": "number"}, False, "7", False),
        ({"type": "number"}, 1, "7", True),
        ({"type": "null"}, None, "7", True),
        ({"type": ["string", "array"]}, [], "2020-12", True),
        ({"type": ["string", "array"]}, {}, "2020-12", False),
    ],
)
def test_type(schema, instance, draft, expected):
    assert validator_for(schema, draft=draft).is_valid(instance) is expected


def test_type_messages():
    assert validator_for({"type": "integer"}).first_error(1.5).message == '1.5 is not of type "integer"'
    error = validator_for({"type": ["string", "array"]}).first_error(1)
    assert error.message == '1 is not of types "string", "array"'
    assert str(error.schema_path) == "/type"


def test_unknown_type_name():
    error = compile_error({"type": ["string", "text"]})
    assert error.kind is ErrorKind.ENUM
    assert error.instance == "text"
    assert "string" in error.context["options"]

    error = compile_error({"type": 5})
    assert error.context["types"] == ["string", "array"]


# format

def test_format_is_an_annotation_by_default():
    node = validator_for({"format": "email"}, options=ValidationOptions(validate_formats=False))
    assert node.keywords == []
    assert node.is_valid("not an email")


def test_format_uses_registered_checker():
    options = ValidationOptions(validate_formats=True, format_checkers={"email": lambda value: "@" in value})
    node = validator_for({"format": "email"}, options=options)

    assert node.is_valid("a@b")
    assert node.is_valid(5)
    error = node.first_error("ab")
    assert error.kind is ErrorKind.FORMAT
    assert error.message == '"ab" is not a "email"'


def test_unknown_format_is_ignored():
    options = ValidationOptions(validate_formats=True)
    assert validator_for({"format": "uuid"}, options=options).keywords == []
    assert compile({"format": 1}, options=options).is_err()


# $ref

def test_local_reference():
    schema = {"$defs": {"short": {"minItems": 1}}, "$ref": "#/$defs/short"}
    node = validator_for(schema)

    assert node.is_valid([1])
    error = node.first_error([])
    assert str(error.schema_path) == "/$ref/minItems"


def test_ref_overrides_siblings_in_older_drafts():
    schema = {"definitions": {"s": {"type": "string"}}, "$ref": "#/definitions/s", "minItems": 5}
    assert validator_for(schema, draft="7").keywords == ["$ref"]
    assert validator_for(schema, draft="2020-12").keywords == ["$ref", "minItems"]


def test_recursive_reference_compiles():
    match compile({"not": {"$ref": "#"}}):
        case Ok(node):
            ref = node.validators[0][1].node.validators[0][1]
            assert ref.target.node is not None
        case Err(error):
            pytest.fail(error.message)


@pytest.mark.parametrize("reference", ["#/$defs/missing", "http://example.com/other.json", "#anchor"])
def test_unresolvable_reference(reference):
    error = compile_error({"$ref": reference})
    assert error.kind is ErrorKind.REFERENCING
    assert str(error.instance_path) == "/$ref"
    assert error.context["reference"] == reference


class _StaticResolver:
    def resolve(self, reference):
        if reference == "http://example.com/string.json":
            return Ok({"type": "string"})
        return Err("unknown")


def test_external_resolver():
    options = ValidationOptions(resolver=_StaticResolver())
    node = validator_for({"$ref": "http://example.com/string.json"}, options=options)
    assert node.is_valid("foo")
    assert not node.is_valid(1)
