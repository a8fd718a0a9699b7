"""Render typed values and their constraints into table-cell Markdown."""

from __future__ import annotations

import logging
import typing as typ

from shr_docs._constants import CHILD_ROW_PREFIX, NBSP, UNKNOWN_CARDINALITY
from shr_docs.model import (
    TBD,
    BooleanConstraint,
    CardConstraint,
    ChoiceValue,
    CodeConstraint,
    IdentifiableValue,
    IncludesCodeConstraint,
    RefValue,
    TypeConstraint,
    ValueSetConstraint,
    child_constraints,
    constraints_on,
    effective_card,
)

from .links import (
    concept_markdown,
    identifier_markdown,
    identifier_token,
    tbd_markdown,
)

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from shr_docs.model import (
        AnyIdentifier,
        Cardinality,
        Constraint,
        Identifier,
        Specifications,
        Value,
    )

logger = logging.getLogger(__name__)

CLAUSE_ORDER: dict[type, int] = {
    ValueSetConstraint: 0,
    CodeConstraint: 1,
    TypeConstraint: 2,
    BooleanConstraint: 3,
}


def table_row(col1: str = "", col2: str = "", col3: str = "") -> str:
    """Return one row of the three-column definition table."""
    return f"| {col1} | {col2} | {col3} |\n"


def cardinality_text(card: Cardinality | None) -> str:
    """Render a cardinality for a table cell.

    >>> from shr_docs.model import Cardinality
    >>> cards = [(1, 1), (0, 1), (0, None), (2, 2), (1, 3)]
    >>> [cardinality_text(Cardinality(*c)) for c in cards]
    ['1', 'optional', '0&nbsp;or&nbsp;more', '2', '1&nbsp;to&nbsp;3']
    >>> cardinality_text(None)
    '?'
    """
    if card is None:
        return UNKNOWN_CARDINALITY
    if card.is_zero_or_one:
        return "optional"
    if card.is_max_unbounded:
        return f"{card.min}{NBSP}or{NBSP}more"
    if card.min == card.max:
        return f"{card.min}"
    return f"{card.min}{NBSP}to{NBSP}{card.max}"


def cardinality_markdown(value: Value) -> str:
    """Render the effective cardinality of ``value``."""
    card = effective_card(value)
    if card is None:
        logger.debug("No cardinality resolved for %r", value)
    return cardinality_text(card)


def group_by_path(
    constraints: cabc.Iterable[Constraint],
) -> dict[tuple[Identifier, ...], list[Constraint]]:
    """Group path-qualified constraints by path, in order of first appearance."""
    groups: dict[tuple[Identifier, ...], list[Constraint]] = {}
    for constraint in constraints:
        groups.setdefault(tuple(constraint.path), []).append(constraint)
    return groups


def _type_constraint(constraints: cabc.Iterable[Constraint]) -> TypeConstraint | None:
    return next((c for c in constraints if isinstance(c, TypeConstraint)), None)


def _path_card(constraints: cabc.Iterable[Constraint]) -> Cardinality | None:
    card = None
    for constraint in constraints:
        if isinstance(constraint, CardConstraint):
            card = constraint.card
    return card


class ValueRenderer:
    """Render values, constraints, and descriptions against a specification.

    The renderer never mutates the specification. Every method that can emit
    a link takes the namespace of the document being rendered.
    """

    def __init__(self, specifications: Specifications) -> None:
        self.specifications = specifications

    def value_markdown(self, value: Value, namespace: str) -> str:
        """Render ``value`` followed by the clauses of its direct constraints."""
        match value:
            case TBD(text=text):
                md = tbd_markdown(text)
            case ChoiceValue():
                md = self.inline_choice(value, namespace)
            case RefValue(identifier=identifier):
                md = f"reference to {identifier_markdown(identifier, namespace)}"
            case IdentifiableValue(identifier=identifier):
                md = identifier_markdown(identifier, namespace)
        return md + self.constraint_clauses(constraints_on(value), namespace)

    def constraint_clauses(
        self, constraints: cabc.Sequence[Constraint], namespace: str
    ) -> str:
        """Render constraint qualifiers in their fixed order.

        Value-set bindings come first, then fixed codes, type narrowing, and
        boolean values. Included codes follow as a single ``includes`` clause.
        """
        md = ""
        ranked = sorted(
            (c for c in constraints if type(c) in CLAUSE_ORDER),
            key=lambda c: CLAUSE_ORDER[type(c)],
        )
        for constraint in ranked:
            match constraint:
                case ValueSetConstraint(value_set=value_set):
                    md += f" from {value_set}"
                case CodeConstraint(code=code):
                    md += f" is {concept_markdown(code)}"
                case TypeConstraint(is_a=is_a):
                    md += f" is {identifier_markdown(is_a, namespace)}"
                case BooleanConstraint(value=flag):
                    md += f" is `{'true' if flag else 'false'}`"

        includes = [c for c in constraints if isinstance(c, IncludesCodeConstraint)]
        if includes:
            md += " includes " + " and ".join(concept_markdown(c.code) for c in includes)
        return md

    def inline_choice(self, choice: ChoiceValue, namespace: str) -> str:
        """Render a choice as an inline HTML list with option quantifiers."""
        md = "Choice of: <ul>"
        for option in choice.options:
            quantifier = cardinality_markdown(option)
            prefix = "" if quantifier == "1" else f"{quantifier} "
            md += f"<li>{prefix}{self.value_markdown(option, namespace)}</li>"
        return md + "</ul>"

    def value_description(self, value: Value, namespace: str) -> str:
        """Return the description shown beside ``value`` in its table row."""
        match value:
            case TBD():
                return ""
            case ChoiceValue():
                # Choices nested in choices still need an inline rendering
                return self.inline_choice(value, namespace)
            case IdentifiableValue(identifier=identifier) | RefValue(
                identifier=identifier
            ):
                if identifier.is_primitive:
                    return ""
                return self.constrained_description(identifier, constraints_on(value))

    def constrained_description(
        self, identifier: AnyIdentifier, constraints: cabc.Sequence[Constraint]
    ) -> str:
        """Prefer the narrowed type's description, falling back to ``identifier``'s."""
        type_constraint = _type_constraint(constraints)
        if type_constraint is not None:
            description = self.identifier_description(type_constraint.is_a)
            if description:
                return description
        return self.identifier_description(identifier)

    def identifier_description(self, identifier: AnyIdentifier) -> str:
        """Return the description of the element named by ``identifier``, or ``""``."""
        definition = self.specifications.find_by_identifier(identifier)
        if definition is None:
            if not identifier.is_primitive and not identifier.is_tbd:
                logger.debug("No definition found for %s", identifier)
            return ""
        return definition.description or ""

    def child_constraint_rows(self, value: Value, namespace: str) -> str:
        """Render one indented row per constrained child path of ``value``."""
        rows = ""
        for path, constraints in group_by_path(child_constraints(value)).items():
            rows += self.path_row(path, constraints, namespace)
        return rows

    def path_row(
        self,
        path: tuple[Identifier, ...],
        constraints: cabc.Sequence[Constraint],
        namespace: str,
    ) -> str:
        """Render the row for a dotted child ``path`` and its constraints."""
        *parents, last = path
        last_md = identifier_markdown(last, namespace)
        last_md += self.constraint_clauses(constraints, namespace)
        path_md = ".".join([identifier_token(p) for p in parents] + [last_md])
        card = cardinality_text(_path_card(constraints))
        if last.is_primitive:
            description = ""
        else:
            description = self.constrained_description(last, constraints)
        return table_row(
            f"{CHILD_ROW_PREFIX}{path_md}",
            card if card != UNKNOWN_CARDINALITY else "",
            description,
        )


__all__ = [
    "CLAUSE_ORDER",
    "ValueRenderer",
    "cardinality_markdown",
    "cardinality_text",
    "group_by_path",
    "table_row",
]
