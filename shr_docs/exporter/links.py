"""Resolve identifiers and concepts into Markdown links.

Every link emitted by the exporter is relative. Links from a definition are
computed against the namespace being rendered, so a page for ``shr.core``
reaches ``shr.base`` via ``../base/index.md#Name``. Links from the corpus-wide
indexes are relative to the output root.
"""

from __future__ import annotations

import typing as typ

from shr_docs._constants import CONCEPT_URL_TEMPLATES, INDEX_DOCUMENT
from shr_docs.model import Identifier, TBDIdentifier

if typ.TYPE_CHECKING:
    from shr_docs.model import AnyIdentifier, Concept


def url_relative_to_namespace(identifier: Identifier, namespace: str) -> str:
    """Return the path from ``namespace``'s index document to ``identifier``.

    Parameters
    ----------
    identifier : Identifier
        Target element.
    namespace : str
        Dotted namespace of the document that will contain the link.

    Examples
    --------
    >>> url_relative_to_namespace(Identifier("shr.base", "Entry"), "shr.core")
    '../base/index.md#Entry'
    >>> url_relative_to_namespace(Identifier("shr.core", "Coding"), "shr.core")
    'index.md#Coding'
    """
    to_parts = identifier.namespace.split(".")
    from_parts = namespace.split(".")
    common = 0
    for to_part, from_part in zip(to_parts, from_parts, strict=False):
        if to_part != from_part:
            break
        common += 1
    path_parts = [".."] * (len(from_parts) - common)
    path_parts.extend(to_parts[common:])
    path_parts.append(INDEX_DOCUMENT)
    return "/".join(path_parts) + f"#{identifier.name}"


def url_relative_to_base(namespace: str, name: str | None = None) -> str:
    """Return the path from the output root to a namespace or one of its elements.

    >>> url_relative_to_base("shr.test", "Simple")
    'shr/test/index.md#Simple'
    """
    url = f"{namespace.replace('.', '/')}/{INDEX_DOCUMENT}#"
    if name:
        url += name
    return url


def tbd_markdown(text: str | None) -> str:
    """Render a to-be-determined placeholder with its optional free text."""
    if text:
        return f"`{text}` _(TBD)_"
    return "_(TBD)_"


def identifier_token(identifier: AnyIdentifier) -> str:
    """Render an identifier as a code token without linking it."""
    match identifier:
        case TBDIdentifier(text=text):
            return tbd_markdown(text)
        case Identifier(name=name):
            return f"`{name}`"


def identifier_markdown(identifier: AnyIdentifier, namespace: str) -> str:
    """Render an identifier, linking it unless it is primitive or TBD."""
    match identifier:
        case TBDIdentifier(text=text):
            return tbd_markdown(text)
        case Identifier(name=name) if identifier.is_primitive:
            return f"`{name}`"
        case Identifier(name=name):
            url = url_relative_to_namespace(identifier, namespace)
            return f"[`{name}`]({url})"


def concept_url(concept: Concept) -> str:
    """Return the browser URL for a concept in its coding system."""
    template = CONCEPT_URL_TEMPLATES.get(concept.system)
    if template is None:
        return f"{concept.system}/{concept.code}"
    return template.format(code=concept.code)


def concept_markdown(concept: Concept) -> str:
    """Render a concept as a link with its display text, when present.

    >>> from shr_docs.model import Concept
    >>> concept_markdown(Concept("http://loinc.org", "1234-5", "Foo"))
    '[1234-5](http://s.details.loinc.org/LOINC/1234-5.html) _(Foo)_'
    """
    md = f"[{concept.code}]({concept_url(concept)})"
    if concept.display:
        md = f"{md} _({concept.display})_"
    return md


__all__ = [
    "concept_markdown",
    "concept_url",
    "identifier_markdown",
    "identifier_token",
    "tbd_markdown",
    "url_relative_to_base",
    "url_relative_to_namespace",
]
