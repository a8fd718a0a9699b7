"""Shared specification fixtures for the exporter tests."""

from __future__ import annotations

import pytest

from shr_docs.model import (
    Cardinality,
    Concept,
    DataElement,
    IdentifiableValue,
    Identifier,
    Namespace,
    PrimitiveIdentifier,
    Specifications,
    ValueSetConstraint,
)

ONE = Cardinality(1, 1)


@pytest.fixture
def master_index_specs() -> Specifications:
    """Return two namespaces of simple and coded entry elements."""
    return Specifications(
        [Namespace("shr.test"), Namespace("shr.other.test")],
        [
            DataElement(
                Identifier("shr.test", "Simple"),
                is_entry=True,
                description="It is a simple element",
                concepts=(Concept("http://foo.org", "bar"),),
                value=IdentifiableValue(PrimitiveIdentifier("string"), ONE),
            ),
            DataElement(
                Identifier("shr.test", "Coded"),
                is_entry=True,
                description="It is a coded element",
                value=IdentifiableValue(
                    PrimitiveIdentifier("code"),
                    ONE,
                    (
                        ValueSetConstraint(
                            "http://standardhealthrecord.org/test/vs/Coded"
                        ),
                    ),
                ),
            ),
            DataElement(
                Identifier("shr.other.test", "Simple"),
                is_entry=True,
                description="It is a coded element descending from foobar",
                value=IdentifiableValue(
                    PrimitiveIdentifier("code"),
                    ONE,
                    (
                        ValueSetConstraint(
                            "http://standardhealthrecord.org/other/test/vs/Coded"
                        ),
                    ),
                ),
            ),
        ],
    )


@pytest.fixture
def core_specs() -> Specifications:
    """Return a small model of supporting elements with descriptions."""
    return Specifications(
        [Namespace("shr.core"), Namespace("shr.entity"), Namespace("shr.base")],
        [
            DataElement(Identifier("shr.core", "Quantity"), description="An amount"),
            DataElement(
                Identifier("shr.core", "SimpleQuantity"),
                description="A simple amount",
            ),
            DataElement(Identifier("shr.core", "Units")),
            DataElement(
                Identifier("shr.core", "Coding"), description="A code from a system"
            ),
            DataElement(
                Identifier("shr.entity", "Patient"),
                description="A person receiving care",
            ),
            DataElement(Identifier("shr.base", "Entry"), description="Base entry"),
        ],
    )
