"""Unit tests for value, constraint, and cardinality rendering."""

from __future__ import annotations

import pytest

from shr_docs._constants import CHILD_ROW_PREFIX
from shr_docs.exporter.values import (
    ValueRenderer,
    cardinality_markdown,
    cardinality_text,
    group_by_path,
)
from shr_docs.model import (
    TBD,
    BooleanConstraint,
    CardConstraint,
    Cardinality,
    ChoiceValue,
    CodeConstraint,
    Concept,
    IdentifiableValue,
    Identifier,
    IncludesCodeConstraint,
    PrimitiveIdentifier,
    RefValue,
    Specifications,
    TypeConstraint,
    ValueSetConstraint,
)

NS = "shr.core"
QUANTITY = Identifier(NS, "Quantity")
SIMPLE_QUANTITY = Identifier(NS, "SimpleQuantity")
CODING = Identifier(NS, "Coding")
CODE = PrimitiveIdentifier("code")


@pytest.fixture
def renderer(core_specs: Specifications) -> ValueRenderer:
    return ValueRenderer(core_specs)


@pytest.mark.parametrize(
    ("card", "expected"),
    [
        (Cardinality(1, 1), "1"),
        (Cardinality(0, 1), "optional"),
        (Cardinality(0, None), "0&nbsp;or&nbsp;more"),
        (Cardinality(1, None), "1&nbsp;or&nbsp;more"),
        (Cardinality(2, 2), "2"),
        (Cardinality(0, 0), "0"),
        (Cardinality(1, 3), "1&nbsp;to&nbsp;3"),
        (None, "?"),
    ],
)
def test_cardinality_text(card: Cardinality | None, expected: str) -> None:
    assert cardinality_text(card) == expected


def test_card_constraint_overrides_value_cardinality() -> None:
    """Direct cardinality constraints take precedence over the declared card."""
    value = IdentifiableValue(
        QUANTITY, Cardinality(0, None), (CardConstraint(Cardinality(1, 1)),)
    )
    assert cardinality_markdown(value) == "1"


def test_missing_cardinality_degrades_to_marker() -> None:
    assert cardinality_markdown(IdentifiableValue(QUANTITY)) == "?"


def test_value_markdown_variants(renderer: ValueRenderer) -> None:
    """Each value kind renders its own token."""
    assert (
        renderer.value_markdown(IdentifiableValue(QUANTITY), NS)
        == "[`Quantity`](index.md#Quantity)"
    )
    assert (
        renderer.value_markdown(RefValue(Identifier("shr.entity", "Patient")), NS)
        == "reference to [`Patient`](../entity/index.md#Patient)"
    )
    assert renderer.value_markdown(TBD("Body site"), NS) == "`Body site` _(TBD)_"
    assert renderer.value_markdown(TBD(), NS) == "_(TBD)_"


def test_value_set_clause(renderer: ValueRenderer) -> None:
    """A value-set constrained code shows the code token and the value set URL."""
    value = IdentifiableValue(
        CODE, Cardinality(1, 1), (ValueSetConstraint("http://example.org/vs/Foo"),)
    )
    assert renderer.value_markdown(value, NS) == "`code` from http://example.org/vs/Foo"


def test_constraint_clauses_follow_fixed_order(renderer: ValueRenderer) -> None:
    """Clauses render value set, code, type, then boolean regardless of input order."""
    value = IdentifiableValue(
        CODE,
        Cardinality(1, 1),
        (
            BooleanConstraint(True),
            TypeConstraint(CODING),
            CodeConstraint(Concept("http://loinc.org", "1234-5")),
            ValueSetConstraint("http://example.org/vs/Foo"),
        ),
    )
    expected = (
        "`code` from http://example.org/vs/Foo"
        " is [1234-5](http://s.details.loinc.org/LOINC/1234-5.html)"
        " is [`Coding`](index.md#Coding)"
        " is `true`"
    )
    assert renderer.value_markdown(value, NS) == expected


def test_boolean_false_clause(renderer: ValueRenderer) -> None:
    value = IdentifiableValue(
        PrimitiveIdentifier("boolean"), constraints=(BooleanConstraint(False),)
    )
    assert renderer.value_markdown(value, NS) == "`boolean` is `false`"


def test_includes_code_clauses_are_joined(renderer: ValueRenderer) -> None:
    value = IdentifiableValue(
        CODE,
        constraints=(
            IncludesCodeConstraint(Concept("http://foo.org", "a")),
            ValueSetConstraint("http://example.org/vs/Foo"),
            IncludesCodeConstraint(Concept("http://foo.org", "b")),
        ),
    )
    expected = (
        "`code` from http://example.org/vs/Foo"
        " includes [a](http://foo.org/a) and [b](http://foo.org/b)"
    )
    assert renderer.value_markdown(value, NS) == expected


def test_child_constraints_are_not_inline(renderer: ValueRenderer) -> None:
    value = IdentifiableValue(
        QUANTITY, constraints=(ValueSetConstraint("http://vs", path=(CODING,)),)
    )
    assert renderer.value_markdown(value, NS) == "[`Quantity`](index.md#Quantity)"


def test_inline_choice_prefixes_non_default_cardinality(
    renderer: ValueRenderer,
) -> None:
    choice = ChoiceValue(
        (
            IdentifiableValue(PrimitiveIdentifier("string"), Cardinality(1, 1)),
            IdentifiableValue(QUANTITY, Cardinality(0, None)),
        )
    )
    expected = (
        "Choice of: <ul><li>`string`</li>"
        "<li>0&nbsp;or&nbsp;more [`Quantity`](index.md#Quantity)</li></ul>"
    )
    assert renderer.value_markdown(choice, NS) == expected
    assert renderer.value_description(choice, NS) == expected


def test_value_description_precedence(renderer: ValueRenderer) -> None:
    """Descriptions prefer a narrowed type, then the value's own element."""
    assert renderer.value_description(IdentifiableValue(CODE), NS) == ""
    assert renderer.value_description(TBD("x"), NS) == ""
    assert renderer.value_description(IdentifiableValue(QUANTITY), NS) == "An amount"
    narrowed = IdentifiableValue(QUANTITY, constraints=(TypeConstraint(SIMPLE_QUANTITY),))
    assert renderer.value_description(narrowed, NS) == "A simple amount"
    undocumented = IdentifiableValue(
        QUANTITY, constraints=(TypeConstraint(Identifier(NS, "Units")),)
    )
    assert renderer.value_description(undocumented, NS) == "An amount"
    ref = RefValue(Identifier("shr.entity", "Patient"))
    assert renderer.value_description(ref, NS) == "A person receiving care"


def test_unresolved_identifier_has_empty_description(renderer: ValueRenderer) -> None:
    value = IdentifiableValue(Identifier("shr.missing", "Nope"), Cardinality(1, 1))
    assert renderer.value_description(value, NS) == ""


def test_group_by_path_keeps_first_appearance_order() -> None:
    constraints = [
        ValueSetConstraint("http://vs/b", path=(QUANTITY,)),
        ValueSetConstraint("http://vs/a", path=(CODING, CODE)),
        CardConstraint(Cardinality(1, 1), path=(QUANTITY,)),
    ]
    groups = group_by_path(constraints)
    assert list(groups) == [(QUANTITY,), (CODING, CODE)]
    assert len(groups[(QUANTITY,)]) == 2


def test_child_constraint_rows(renderer: ValueRenderer) -> None:
    """Each constrained path gets one row with its clauses, card, and description."""
    value = IdentifiableValue(
        Identifier(NS, "Observation"),
        Cardinality(1, 1),
        (
            ValueSetConstraint("http://vs/a", path=(CODING, CODE)),
            TypeConstraint(SIMPLE_QUANTITY, path=(QUANTITY,)),
            CardConstraint(Cardinality(1, 1), path=(QUANTITY,)),
        ),
    )
    rows = renderer.child_constraint_rows(value, NS).splitlines()
    assert rows == [
        f"| {CHILD_ROW_PREFIX}`Coding`.`code` from http://vs/a |  |  |",
        f"| {CHILD_ROW_PREFIX}[`Quantity`](index.md#Quantity)"
        " is [`SimpleQuantity`](index.md#SimpleQuantity) | 1 | A simple amount |",
    ]


def test_child_constraint_rows_do_not_mutate_value(renderer: ValueRenderer) -> None:
    constraint = ValueSetConstraint("http://vs/a", path=(CODING, CODE))
    value = IdentifiableValue(QUANTITY, constraints=(constraint,))
    renderer.child_constraint_rows(value, NS)
    assert value.constraints == (constraint,)
    assert constraint.path == (CODING, CODE)
