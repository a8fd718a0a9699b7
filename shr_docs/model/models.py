"""Typed dataclasses describing a Standard Health Record specification.

The exporter treats these objects as a read-only graph. Values and
constraints form closed families (see :data:`Value` and :data:`Constraint`)
that the renderers dispatch over with ``match`` statements.
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

PRIMITIVE_NAMESPACE = "primitive"
TBD_NAME = "TBD"


class ModelError(ValueError):
    """Raised when a specification model is structurally invalid."""


@dc.dataclass(frozen=True, slots=True)
class Identifier:
    """A ``(namespace, name)`` pair naming a data element."""

    namespace: str
    name: str

    @property
    def fqn(self) -> str:
        """Return the fully qualified dotted name."""
        if not self.namespace:
            return self.name
        return f"{self.namespace}.{self.name}"

    @property
    def is_primitive(self) -> bool:
        return self.namespace == PRIMITIVE_NAMESPACE

    @property
    def is_tbd(self) -> bool:
        return False

    def __str__(self) -> str:
        return self.fqn


class PrimitiveIdentifier(Identifier):
    """Identifier for a built-in primitive such as ``string`` or ``code``."""

    __slots__ = ()

    def __init__(self, name: str) -> None:
        super().__init__(PRIMITIVE_NAMESPACE, name)


@dc.dataclass(frozen=True, slots=True)
class TBDIdentifier:
    """Placeholder identifier for an element that is not yet defined."""

    text: str | None = None

    @property
    def namespace(self) -> str:
        return ""

    @property
    def name(self) -> str:
        return TBD_NAME

    @property
    def fqn(self) -> str:
        return TBD_NAME

    @property
    def is_primitive(self) -> bool:
        return False

    @property
    def is_tbd(self) -> bool:
        return True

    def __str__(self) -> str:
        return TBD_NAME


AnyIdentifier: typ.TypeAlias = Identifier | TBDIdentifier


@dc.dataclass(frozen=True, slots=True)
class Concept:
    """A code drawn from an external terminology."""

    system: str
    code: str
    display: str | None = None


@dc.dataclass(frozen=True, slots=True)
class Cardinality:
    """Minimum and optional maximum occurrences; ``max=None`` is unbounded."""

    min: int
    max: int | None = None

    @property
    def is_exactly_one(self) -> bool:
        return self.min == 1 and self.max == 1

    @property
    def is_zero_or_one(self) -> bool:
        return self.min == 0 and self.max == 1

    @property
    def is_max_unbounded(self) -> bool:
        return self.max is None

    @classmethod
    def parse(cls, text: str | int) -> Cardinality:
        """Parse ``"1"``, ``"0..1"`` or ``"1..*"`` into a cardinality.

        Raises
        ------
        ModelError
            If ``text`` is not a recognised cardinality expression.
        """
        raw = str(text).strip()
        low, sep, high = raw.partition("..")
        try:
            minimum = int(low)
            if not sep:
                return cls(minimum, minimum)
            if high.strip() in ("*", "n", ""):
                return cls(minimum, None)
            return cls(minimum, int(high))
        except ValueError as exc:
            msg = f"Invalid cardinality '{raw}'."
            raise ModelError(msg) from exc


@dc.dataclass(frozen=True, slots=True)
class ValueSetConstraint:
    """Bind a coded value to a value set URL."""

    value_set: str
    path: tuple[Identifier, ...] = ()


@dc.dataclass(frozen=True, slots=True)
class CodeConstraint:
    """Fix a coded value to a single concept."""

    code: Concept
    path: tuple[Identifier, ...] = ()


@dc.dataclass(frozen=True, slots=True)
class IncludesCodeConstraint:
    """Require a list-valued code to include a concept."""

    code: Concept
    path: tuple[Identifier, ...] = ()


@dc.dataclass(frozen=True, slots=True)
class TypeConstraint:
    """Narrow a value to a more specific element type."""

    is_a: AnyIdentifier
    path: tuple[Identifier, ...] = ()


@dc.dataclass(frozen=True, slots=True)
class BooleanConstraint:
    """Fix a boolean value."""

    value: bool
    path: tuple[Identifier, ...] = ()


@dc.dataclass(frozen=True, slots=True)
class CardConstraint:
    """Override the cardinality of a value or one of its children."""

    card: Cardinality
    path: tuple[Identifier, ...] = ()


Constraint: typ.TypeAlias = (
    ValueSetConstraint
    | CodeConstraint
    | IncludesCodeConstraint
    | TypeConstraint
    | BooleanConstraint
    | CardConstraint
)


@dc.dataclass(frozen=True, slots=True)
class IdentifiableValue:
    """A value typed by an element or primitive identifier."""

    identifier: AnyIdentifier
    card: Cardinality | None = None
    constraints: tuple[Constraint, ...] = ()


@dc.dataclass(frozen=True, slots=True)
class RefValue:
    """A reference to an instance of another element."""

    identifier: AnyIdentifier
    card: Cardinality | None = None
    constraints: tuple[Constraint, ...] = ()


@dc.dataclass(frozen=True, slots=True)
class ChoiceValue:
    """An ordered set of alternative values; options may themselves be choices."""

    options: tuple[Value, ...] = ()
    card: Cardinality | None = None
    constraints: tuple[Constraint, ...] = ()


@dc.dataclass(frozen=True, slots=True)
class TBD:
    """A value whose type has not been decided yet."""

    text: str | None = None
    card: Cardinality | None = None
    constraints: tuple[Constraint, ...] = ()

    @property
    def identifier(self) -> TBDIdentifier:
        return TBDIdentifier(self.text)


Value: typ.TypeAlias = IdentifiableValue | RefValue | ChoiceValue | TBD


def constraints_on(value: Value) -> list[Constraint]:
    """Return the constraints applying directly to ``value``."""
    return [c for c in value.constraints if not c.path]


def child_constraints(value: Value) -> list[Constraint]:
    """Return the constraints applying to a dotted child path of ``value``."""
    return [c for c in value.constraints if c.path]


def effective_card(value: Value) -> Cardinality | None:
    """Return the cardinality after applying direct cardinality constraints."""
    card = value.card
    for constraint in constraints_on(value):
        if isinstance(constraint, CardConstraint):
            card = constraint.card
    return card


@dc.dataclass(frozen=True, slots=True)
class DataElement:
    """A single data element definition."""

    identifier: Identifier
    is_entry: bool = False
    description: str | None = None
    concepts: tuple[Concept, ...] = ()
    based_on: tuple[AnyIdentifier, ...] = ()
    value: Value | None = None
    fields: tuple[Value, ...] = ()


@dc.dataclass(frozen=True, slots=True)
class Namespace:
    """A dotted namespace such as ``shr.core``."""

    namespace: str
    description: str | None = None


class Specifications:
    """Read-only collection of namespaces and data elements.

    Namespaces keep their enumeration order. Elements are indexed by
    identifier for lookups during rendering.
    """

    def __init__(
        self,
        namespaces: typ.Iterable[Namespace] = (),
        data_elements: typ.Iterable[DataElement] = (),
    ) -> None:
        self._namespaces = tuple(namespaces)
        self._elements: dict[tuple[str, str], DataElement] = {}
        for element in data_elements:
            key = (element.identifier.namespace, element.identifier.name)
            if key in self._elements:
                msg = f"Duplicate data element '{element.identifier.fqn}'."
                raise ModelError(msg)
            self._elements[key] = element

    @property
    def namespaces(self) -> tuple[Namespace, ...]:
        return self._namespaces

    @property
    def data_elements(self) -> tuple[DataElement, ...]:
        return tuple(self._elements.values())

    def by_namespace(self, namespace: str) -> list[DataElement]:
        """Return the elements declared in ``namespace`` in insertion order."""
        return [
            element
            for element in self._elements.values()
            if element.identifier.namespace == namespace
        ]

    def find_by_identifier(self, identifier: AnyIdentifier) -> DataElement | None:
        """Return the element named by ``identifier`` or ``None``."""
        return self._elements.get((identifier.namespace, identifier.name))


__all__ = [
    "PRIMITIVE_NAMESPACE",
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
]
