"""Render a single data element definition into a Markdown fragment."""

from __future__ import annotations

import typing as typ

from shr_docs._constants import INDENT_UNIT, NBSP
from shr_docs.model import ChoiceValue

from .links import concept_markdown, identifier_markdown
from .values import ValueRenderer, cardinality_markdown, table_row

if typ.TYPE_CHECKING:
    from shr_docs.model import DataElement, Specifications, Value


def indent_it(text: str, indent: int) -> str:
    """Prefix ``text`` with ``indent`` levels of table-safe indentation."""
    if indent == 0:
        return text
    return f"{INDENT_UNIT * indent}{NBSP}{text}"


class DefinitionRenderer:
    """Build the heading, description, and value table for one definition."""

    def __init__(
        self, specifications: Specifications, values: ValueRenderer | None = None
    ) -> None:
        self.specifications = specifications
        self.values = values or ValueRenderer(specifications)

    def render(self, definition: DataElement, namespace: str) -> str:
        """Render ``definition`` with links relative to ``namespace``.

        Parameters
        ----------
        definition : DataElement
            Element to render.
        namespace : str
            Namespace of the document the fragment will be placed in.

        Returns
        -------
        str
            Markdown heading, description line, and three-column table,
            without a trailing newline.
        """
        name = definition.identifier.name
        title = f"{name} [Entry]" if definition.is_entry else name
        md = f'### <a name="{name}"></a>{title}\n'
        if definition.description is not None:
            md += definition.description
        if definition.concepts:
            md += ",".join(f" {concept_markdown(c)}" for c in definition.concepts)
        md += "\n\n"

        md += table_row()
        md += table_row("---", "---", "---")
        md += self._based_on_rows(definition, namespace)
        if definition.value is not None:
            md += self._value_rows(definition.value, namespace)
        for field in definition.fields:
            md += self._field_rows(field, namespace)
        return md.removesuffix("\n")

    def _based_on_rows(self, definition: DataElement, namespace: str) -> str:
        rows = ""
        for base in definition.based_on:
            label = f"Based{NBSP}On:{NBSP}{identifier_markdown(base, namespace)}"
            rows += table_row(label, "", self.values.identifier_description(base))
        return rows

    def _value_rows(self, value: Value, namespace: str) -> str:
        if isinstance(value, ChoiceValue):
            return self.choice_rows(value, namespace, is_value=True)
        card = cardinality_markdown(value)
        rows = table_row(
            f"Value:{NBSP}{self.values.value_markdown(value, namespace)}",
            card if card != "1" else "",
            self.values.value_description(value, namespace),
        )
        return rows + self.values.child_constraint_rows(value, namespace)

    def _field_rows(self, field: Value, namespace: str) -> str:
        if isinstance(field, ChoiceValue):
            return self.choice_rows(field, namespace)
        rows = table_row(
            self.values.value_markdown(field, namespace),
            cardinality_markdown(field),
            self.values.value_description(field, namespace),
        )
        return rows + self.values.child_constraint_rows(field, namespace)

    def choice_rows(
        self,
        choice: ChoiceValue,
        namespace: str,
        indent: int = 0,
        *,
        is_value: bool = False,
    ) -> str:
        """Render a choice header row and one indented row per option.

        Nested choices recurse with ``indent + 1``; the depth only affects
        indentation.
        """
        label = f"Value:{NBSP}Choice" if is_value else "Choice"
        card = cardinality_markdown(choice)
        rows = table_row(indent_it(label, indent), "" if is_value and card == "1" else card)
        for option in choice.options:
            if isinstance(option, ChoiceValue):
                rows += self.choice_rows(option, namespace, indent + 1)
            else:
                rows += table_row(
                    indent_it(self.values.value_markdown(option, namespace), indent + 1),
                    cardinality_markdown(option),
                    self.values.value_description(option, namespace),
                )
        return rows


__all__ = ["DefinitionRenderer", "indent_it"]
