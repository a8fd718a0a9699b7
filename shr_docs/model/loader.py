"""Load a specification model from YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .models import (
    TBD,
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
)

PRIMITIVES = frozenset(
    {
        "boolean",
        "integer",
        "string",
        "decimal",
        "uri",
        "base64Binary",
        "instant",
        "date",
        "dateTime",
        "time",
        "code",
        "oid",
        "id",
        "markdown",
        "unsignedInt",
        "positiveInt",
        "xhtml",
    }
)


def load_specifications(path: Path) -> Specifications:
    """Load the YAML document describing namespaces and data elements.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML model file.

    Returns
    -------
    Specifications
        The namespaces in document order together with their elements.

    Raises
    ------
    FileNotFoundError
        If the model file does not exist at ``path``.
    ModelError
        If the document is not shaped like a specification model.
    """
    if not path.exists():
        msg = f"Model file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    return parse_specifications(loaded)


def parse_specifications(raw: typ.Any) -> Specifications:
    """Build :class:`Specifications` from an already parsed mapping."""
    if not isinstance(raw, dict):
        msg = "Top-level model structure must be a mapping."
        raise ModelError(msg)

    namespaces: list[Namespace] = []
    elements: list[DataElement] = []
    for ns_raw in raw.get("namespaces") or []:
        match ns_raw:
            case {"namespace": str(name), **rest}:
                namespaces.append(Namespace(name, rest.get("description")))
                for element_raw in rest.get("elements") or []:
                    elements.append(_parse_element(name, element_raw))
            case _:
                msg = f"Namespace entry must declare a 'namespace': {ns_raw!r}"
                raise ModelError(msg)
    return Specifications(namespaces, elements)


def _parse_element(namespace: str, raw: typ.Any) -> DataElement:
    if not isinstance(raw, dict) or not raw.get("name"):
        msg = f"Element in '{namespace}' must be a mapping with a 'name'."
        raise ModelError(msg)
    value_raw = raw.get("value")
    return DataElement(
        identifier=Identifier(namespace, str(raw["name"])),
        is_entry=bool(raw.get("entry", False)),
        description=raw.get("description"),
        concepts=tuple(_parse_concept(c) for c in raw.get("concepts") or []),
        based_on=tuple(
            _parse_identifier(namespace, b) for b in raw.get("based_on") or []
        ),
        value=_parse_value(namespace, value_raw) if value_raw is not None else None,
        fields=tuple(_parse_value(namespace, f) for f in raw.get("fields") or []),
    )


def _parse_identifier(namespace: str, text: typ.Any) -> Identifier | TBDIdentifier:
    """Resolve a type name relative to ``namespace``.

    Dotted names are fully qualified, bare primitive names become primitive
    identifiers, and any other bare name is taken from the current namespace.
    """
    name = str(text).strip()
    if name == "TBD":
        return TBDIdentifier()
    if "." in name:
        ns, _, local = name.rpartition(".")
        return Identifier(ns, local)
    if name in PRIMITIVES:
        return PrimitiveIdentifier(name)
    return Identifier(namespace, name)


def _parse_path(namespace: str, raw: typ.Any) -> tuple[Identifier, ...]:
    if raw is None:
        return ()
    if isinstance(raw, str):
        raw = raw.split(":")
    path: list[Identifier] = []
    for segment in raw:
        identifier = _parse_identifier(namespace, segment)
        if isinstance(identifier, TBDIdentifier):
            msg = "Constraint paths cannot contain TBD segments."
            raise ModelError(msg)
        path.append(identifier)
    return tuple(path)


def _parse_concept(raw: typ.Any) -> Concept:
    match raw:
        case {"system": str(system), "code": code, **rest}:
            return Concept(system, str(code), rest.get("display"))
        case _:
            msg = f"Concept must declare 'system' and 'code': {raw!r}"
            raise ModelError(msg)


def _parse_card(raw: typ.Any) -> Cardinality | None:
    if raw is None:
        return None
    return Cardinality.parse(raw)


def _parse_constraint(namespace: str, raw: typ.Any) -> Constraint:
    if not isinstance(raw, dict):
        msg = f"Constraint must be a mapping: {raw!r}"
        raise ModelError(msg)
    path = _parse_path(namespace, raw.get("path"))
    match raw:
        case {"value_set": str(url)}:
            return ValueSetConstraint(url, path)
        case {"code": code}:
            return CodeConstraint(_parse_concept(code), path)
        case {"includes_code": code}:
            return IncludesCodeConstraint(_parse_concept(code), path)
        case {"type": type_name}:
            return TypeConstraint(_parse_identifier(namespace, type_name), path)
        case {"boolean": bool(flag)}:
            return BooleanConstraint(flag, path)
        case {"card": card}:
            return CardConstraint(Cardinality.parse(card), path)
        case _:
            msg = f"Unrecognised constraint: {raw!r}"
            raise ModelError(msg)


def _parse_value(namespace: str, raw: typ.Any) -> Value:
    if isinstance(raw, str):
        raw = {"type": raw}
    if not isinstance(raw, dict):
        msg = f"Value must be a mapping or a type name: {raw!r}"
        raise ModelError(msg)
    card = _parse_card(raw.get("card"))
    constraints = tuple(
        _parse_constraint(namespace, c) for c in raw.get("constraints") or []
    )
    match raw:
        case {"choice": list(options)}:
            return ChoiceValue(
                tuple(_parse_value(namespace, option) for option in options),
                card,
                constraints,
            )
        case {"ref": target}:
            return RefValue(_parse_identifier(namespace, target), card, constraints)
        case {"tbd": text}:
            return TBD(str(text) if text else None, card, constraints)
        case {"type": type_name}:
            identifier = _parse_identifier(namespace, type_name)
            if isinstance(identifier, TBDIdentifier):
                return TBD(None, card, constraints)
            return IdentifiableValue(identifier, card, constraints)
        case _:
            msg = f"Value must declare one of 'type', 'ref', 'choice' or 'tbd': {raw!r}"
            raise ModelError(msg)


__all__ = ["PRIMITIVES", "load_specifications", "parse_specifications"]
