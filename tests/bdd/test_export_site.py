"""Behaviour tests for exporting a specification model to disk.

The scenarios in ``features/export_site.feature`` write a small YAML model,
run the ``shr-docs export`` command function against it, and inspect the
files it leaves behind. HTML output is parsed with BeautifulSoup so the
assertions follow the structure a browser would see rather than raw strings.
"""

from __future__ import annotations

from pathlib import Path
from textwrap import dedent

import pytest
from bs4 import BeautifulSoup
from pytest_bdd import given, scenarios, then, when

from shr_docs import cli

FEATURE_FILE = (
    Path(__file__).resolve().parents[2] / "features" / "export_site.feature"
)
scenarios(FEATURE_FILE)

TWO_NAMESPACES = dedent(
    """
    namespaces:
      - namespace: shr.core
        elements:
          - name: Quantity
            description: An amount
            value: {type: decimal, card: "1"}
          - name: Coding
            description: A code from a system
            value: {type: code, card: "1"}
      - namespace: shr.vital
        elements:
          - name: Weight
            entry: true
            description: A body weight measurement
            concepts:
              - {system: http://loinc.org, code: 29463-7}
            value:
              type: shr.core.Quantity
              card: "1"
          - name: Reading
            entry: true
            description: A reading of either kind
            value:
              card: "0..1"
              choice:
                - shr.core.Quantity
                - shr.core.Coding
    """
)

WITH_EMPTY_NAMESPACE = dedent(
    """
    namespaces:
      - namespace: shr.draft
      - namespace: shr.core
        elements:
          - name: Quantity
            description: An amount
            value: {type: decimal, card: "1"}
    """
)


def _soup(path: Path) -> BeautifulSoup:
    return BeautifulSoup(path.read_text(encoding="utf-8"), "html.parser")


@pytest.fixture
def scenario_state() -> dict[str, object]:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


def _write_model(tmp_path: Path, body: str, state: dict[str, object]) -> None:
    model_path = tmp_path / "model.yaml"
    model_path.write_text(body, encoding="utf-8")
    state["model_path"] = model_path
    state["output_dir"] = tmp_path / "site"


@given("a specification model with two namespaces")
def given_two_namespaces(tmp_path: Path, scenario_state: dict[str, object]) -> None:
    _write_model(tmp_path, TWO_NAMESPACES, scenario_state)


@given("a specification model with an empty namespace")
def given_empty_namespace(tmp_path: Path, scenario_state: dict[str, object]) -> None:
    _write_model(tmp_path, WITH_EMPTY_NAMESPACE, scenario_state)


@when("I export the model as HTML")
def when_export_html(scenario_state: dict[str, object]) -> None:
    cli.export(
        model=scenario_state["model_path"],  # type: ignore[arg-type]
        output_dir=scenario_state["output_dir"],  # type: ignore[arg-type]
        format=["html"],
    )


@when("I export the model as Markdown")
def when_export_markdown(scenario_state: dict[str, object]) -> None:
    cli.export(
        model=scenario_state["model_path"],  # type: ignore[arg-type]
        output_dir=scenario_state["output_dir"],  # type: ignore[arg-type]
        format=["markdown"],
    )


@then("the master index links to every namespace page")
def then_index_links(scenario_state: dict[str, object]) -> None:
    """Every index link resolves to a written namespace page."""
    output_dir: Path = scenario_state["output_dir"]  # type: ignore[assignment]
    soup = _soup(output_dir / "index.html")
    headings = [h2.get_text(strip=True) for h2 in soup.select("div.row h2")]
    assert headings == ["Core", "Vital"], (
        f"expected namespace headings in model order, got {headings!r}"
    )
    for link in soup.select("div.col-md-4 a"):
        href = link["href"]
        page, _, anchor = href.partition("#")
        assert page.endswith("index.html"), f"expected an HTML page link, got {href!r}"
        assert (output_dir / page).is_file(), f"expected {page} to exist"
        assert anchor == link.get_text(strip=True), (
            f"expected anchor to match link text for {href!r}"
        )


@then("the entry index lists only entry elements")
def then_entry_index(scenario_state: dict[str, object]) -> None:
    output_dir: Path = scenario_state["output_dir"]  # type: ignore[assignment]
    soup = _soup(output_dir / "entries.html")
    names = [link.get_text(strip=True) for link in soup.select("div.col-md-4 a")]
    assert names == ["Reading", "Weight"], (
        f"expected only entry elements in the entry index, got {names!r}"
    )
    headings = [h2.get_text(strip=True) for h2 in soup.select("div.row h2")]
    assert headings == ["Vital"], (
        f"expected namespaces without entries to be omitted, got {headings!r}"
    )


@then("the namespace page renders a definition table")
def then_namespace_table(scenario_state: dict[str, object]) -> None:
    output_dir: Path = scenario_state["output_dir"]  # type: ignore[assignment]
    soup = _soup(output_dir / "shr" / "vital" / "index.html")
    assert soup.title is not None
    assert soup.title.get_text() == "SHR: Vital"
    stylesheet = soup.select_one("link[rel=stylesheet]")
    assert stylesheet is not None
    assert stylesheet["href"] == "../../shr-github-markdown.css"

    anchors = [a["name"] for a in soup.select("h3 a[name]")]
    assert anchors == ["Reading", "Weight"]
    tables = soup.find_all("table")
    assert len(tables) == 2, f"expected one table per definition, got {len(tables)}"

    weight_link = soup.select_one('a[href="../core/index.html#Quantity"]')
    assert weight_link is not None, "expected Weight's value to link to Quantity"
    concept = soup.select_one('a[href="http://s.details.loinc.org/LOINC/29463-7.html"]')
    assert concept is not None, "expected the LOINC concept link"

    first_cells = [
        row.find("td").get_text(strip=True) for row in tables[0].select("tbody tr")
    ]
    assert first_cells[0].endswith("Choice"), (
        f"expected a Choice row, got {first_cells!r}"
    )
    assert first_cells[1].endswith("Quantity")
    assert first_cells[2].endswith("Coding")


@then("the master index has no heading for the empty namespace")
def then_no_empty_heading(scenario_state: dict[str, object]) -> None:
    output_dir: Path = scenario_state["output_dir"]  # type: ignore[assignment]
    index = (output_dir / "index.md").read_text(encoding="utf-8")
    assert "Draft" not in index
    assert "## [Core](shr/core/index.md#)" in index


@then("the empty namespace still gets a page")
def then_empty_page(scenario_state: dict[str, object]) -> None:
    output_dir: Path = scenario_state["output_dir"]  # type: ignore[assignment]
    page = output_dir / "shr" / "draft" / "index.md"
    assert page.read_text(encoding="utf-8") == "# Draft"
