"""Specification model consumed by the exporter.

The model is a read-only graph of namespaces and data elements. Build it
directly from the dataclasses in :mod:`shr_docs.model.models` or load it from
YAML with :func:`load_specifications`.

Examples
--------
>>> from shr_docs.model import Identifier, Namespace, DataElement, Specifications
>>> specs = Specifications(
...     [Namespace("shr.test")],
...     [DataElement(Identifier("shr.test", "Simple"), is_entry=True)],
... )
>>> [de.identifier.name for de in specs.by_namespace("shr.test")]
['Simple']
"""

from .loader import load_specifications, parse_specifications
from .models import (
    TBD,
    AnyIdentifier,
    BooleanConstraint,
    CardConstraint,
    Cardinality,
    ChoiceValue,
    CodeConstraint,
    Concept,
    Constraint,
    DataElement,
    IdentifiableValue,
    Identifier,
    IncludesCodeConstraint,
    ModelError,
    Namespace,
    PrimitiveIdentifier,
    RefValue,
    Specifications,
    TBDIdentifier,
    TypeConstraint,
    Value,
    ValueSetConstraint,
    child_constraints,
    constraints_on,
    effective_card,
)

__all__ = [
    "TBD",
    "AnyIdentifier",
    "BooleanConstraint",
    "CardConstraint",
    "Cardinality",
    "ChoiceValue",
    "CodeConstraint",
    "Concept",
    "Constraint",
    "DataElement",
    "IdentifiableValue",
    "Identifier",
    "IncludesCodeConstraint",
    "ModelError",
    "Namespace",
    "PrimitiveIdentifier",
    "RefValue",
    "Specifications",
    "TBDIdentifier",
    "TypeConstraint",
    "Value",
    "ValueSetConstraint",
    "child_constraints",
    "constraints_on",
    "effective_card",
    "load_specifications",
    "parse_specifications",
]
