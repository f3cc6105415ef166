"""Tests for the schema-as-data validation engine."""

import pytest

from gudang.validation import (
    Email,
    FieldError,
    FieldKind,
    FieldRule,
    Integer,
    Invalid,
    MaxLength,
    MinLength,
    Pattern,
    Range,
    Schema,
    SchemaDefinitionError,
    Valid,
    boolean,
    choice,
    number,
    text,
    validate,
)


@pytest.fixture
def member_schema():
    return Schema(
        name="member",
        fields=(
            text(
                "code",
                MinLength(3, "code too short"),
                Pattern(r"\d+", "code must be digits"),
                message="code required",
            ),
            number("age", Integer("age must be whole"), Range("age out of range", min=0, max=150), required=False),
            boolean("active", required=False, default=True),
            choice("tier", ("gold", "silver"), invalid_message="bad tier", required=False),
        ),
    )


# ─── Schema construction ─────────────────────────────────


def test_duplicate_field_names_are_rejected():
    with pytest.raises(SchemaDefinitionError) as exc_info:
        Schema(name="dup", fields=(text("a", message="m"), text("a", message="m")))
    assert exc_info.value.field == "a"
    assert exc_info.value.schema_name == "dup"


def test_min_length_above_max_length_is_rejected():
    with pytest.raises(SchemaDefinitionError):
        Schema(name="s", fields=(text("a", MinLength(5, "min"), MaxLength(3, "max"), message="m"),))


def test_range_with_inverted_bounds_is_rejected():
    with pytest.raises(SchemaDefinitionError):
        Schema(name="s", fields=(number("n", Range("r", min=10, max=1), message="m"),))


def test_constraint_for_other_kind_is_rejected():
    with pytest.raises(SchemaDefinitionError):
        Schema(name="s", fields=(text("a", Range("r", min=0), message="m"),))
    with pytest.raises(SchemaDefinitionError):
        Schema(name="s", fields=(number("n", MaxLength(3, "max"), message="m"),))


def test_required_field_needs_a_message():
    with pytest.raises(SchemaDefinitionError):
        Schema(name="s", fields=(text("a"),))


def test_choice_field_without_allowed_values_is_rejected():
    with pytest.raises(SchemaDefinitionError):
        Schema(name="s", fields=(FieldRule(name="c", kind=FieldKind.CHOICE, required=False),))
    with pytest.raises(SchemaDefinitionError):
        Schema(name="s", fields=(choice("c", (), invalid_message="bad", required=False),))


def test_invalid_regex_is_rejected():
    with pytest.raises(SchemaDefinitionError):
        Schema(name="s", fields=(text("a", Pattern("(", "bad"), message="m"),))


def test_default_violating_its_own_rules_is_rejected():
    with pytest.raises(SchemaDefinitionError):
        Schema(name="s", fields=(text("a", MaxLength(2, "max"), required=False, default="abcd"),))


def test_schema_is_immutable(member_schema):
    with pytest.raises(AttributeError):
        member_schema.fields = ()
    assert member_schema.field_names == ("code", "age", "active", "tier")


# ─── Presence and output shape ───────────────────────────


@pytest.mark.parametrize("raw", [None, [], "code=123", 42])
def test_non_mapping_input_is_treated_as_empty_record(member_schema, raw):
    result = validate(member_schema, raw)
    assert isinstance(result, Invalid)
    assert result.errors == (FieldError(field="code", message="code required"),)


def test_optional_fields_normalize_to_defaults(member_schema):
    result = validate(member_schema, {"code": "123", "age": "", "tier": "   "})
    assert isinstance(result, Valid)
    assert result.value == {"code": "123", "age": None, "active": True, "tier": None}


def test_unknown_keys_are_dropped(member_schema):
    result = validate(member_schema, {"code": "123", "is_admin": True})
    assert set(result.value) == set(member_schema.field_names)


def test_whitespace_only_required_text_is_missing(member_schema):
    result = validate(member_schema, {"code": "   "})
    assert result.messages() == ["code required"]


# ─── Per-field fail-fast, global continuation ────────────


def test_first_failing_constraint_wins(member_schema):
    result = validate(member_schema, {"code": "x"})
    assert result.errors == (FieldError(field="code", message="code too short"),)


def test_all_fields_are_checked_in_declaration_order(member_schema):
    result = validate(member_schema, {"code": "abcd", "age": -1, "active": "maybe", "tier": "bronze"})
    assert [e.field for e in result.errors] == ["code", "age", "active", "tier"]
    assert result.messages() == [
        "code must be digits",
        "age out of range",
        "Format tidak valid",
        "bad tier",
    ]


# ─── Coercion ────────────────────────────────────────────


@pytest.mark.parametrize(
    "raw_age, expected",
    [(30, 30), ("30", 30), (" 42 ", 42), (30.0, 30)],
)
def test_numbers_are_coerced(member_schema, raw_age, expected):
    result = validate(member_schema, {"code": "123", "age": raw_age})
    assert isinstance(result, Valid)
    assert result.value["age"] == expected
    assert isinstance(result.value["age"], int)


@pytest.mark.parametrize(
    "raw_age",
    [True, "abc", float("nan"), float("inf"), {"n": 1}, [1], "1_000", "\u0663", "0x10", "12abc", ".5"],
)
def test_bad_numbers_report_type_message(member_schema, raw_age):
    result = validate(member_schema, {"code": "123", "age": raw_age})
    assert isinstance(result, Invalid)
    assert result.errors[0].field == "age"
    assert result.messages() == ["Format tidak valid"]


@pytest.mark.parametrize("raw_age, expected", [("+7", 7), ("-0", 0), ("1e2", 100), ("4.0", 4)])
def test_signed_and_exponent_numbers_are_accepted(member_schema, raw_age, expected):
    assert validate(member_schema, {"code": "123", "age": raw_age}).value["age"] == expected


def test_fractional_value_fails_integer_constraint(member_schema):
    result = validate(member_schema, {"code": "123", "age": "1.5"})
    assert result.messages() == ["age must be whole"]


@pytest.mark.parametrize("raw, expected", [(False, False), ("true", True), ("FALSE", False), ("1", True)])
def test_booleans_are_coerced(member_schema, raw, expected):
    result = validate(member_schema, {"code": "123", "active": raw})
    assert result.value["active"] is expected


def test_integer_values_are_accepted_for_text_fields(member_schema):
    result = validate(member_schema, {"code": 12345})
    assert result.value["code"] == "12345"


def test_object_where_text_expected_uses_type_message():
    schema = Schema(name="s", fields=(text("a", message="a required", type_message="a must be text"),))
    result = validate(schema, {"a": {"nested": "x"}})
    assert result.errors == (FieldError(field="a", message="a must be text"),)


def test_transforms_run_before_constraints():
    schema = Schema(
        name="s",
        fields=(text("code", Pattern(r"[A-Z]+", "upper only"), message="m", transforms=(str.upper,)),),
    )
    assert validate(schema, {"code": " abc "}).value == {"code": "ABC"}


def test_transform_emptying_value_counts_as_absent():
    schema = Schema(
        name="s",
        fields=(text("digits", message="digits required", transforms=(lambda v: "".join(c for c in v if c.isdigit()),)),),
    )
    assert validate(schema, {"digits": "abc"}).messages() == ["digits required"]


def test_email_constraint():
    schema = Schema(name="s", fields=(text("email", Email("bad email"), required=False),))
    assert isinstance(validate(schema, {"email": "a@b.com"}), Valid)
    assert validate(schema, {"email": "not-an-email"}).messages() == ["bad email"]


@pytest.mark.parametrize(
    "address, ok",
    [
        ("budi@example.test", True),
        ("gudang.admin+stok@pt-maju.co.id", True),
        ("a@b.c", False),
        ("a@b.c0m", False),
        ("ü@b.com", False),
        ("budi@mäju.com", False),
        ("budi@localhost", False),
    ],
)
def test_email_syntax_edges(address, ok):
    schema = Schema(name="s", fields=(text("email", Email("bad email"), required=False),))
    assert isinstance(validate(schema, {"email": address}), Valid) is ok


# ─── Result behaviour ────────────────────────────────────


def test_results_are_truthy_only_when_valid(member_schema):
    assert validate(member_schema, {"code": "123"})
    assert not validate(member_schema, {})


def test_invalid_requires_at_least_one_error():
    with pytest.raises(ValueError):
        Invalid(errors=())


def test_errors_dump_for_ui(member_schema):
    result = validate(member_schema, {"code": ""})
    assert result.model_dump()["errors"] == [{"field": "code", "message": "code required"}]
    assert result.errors_by_field() == {"code": ["code required"]}
