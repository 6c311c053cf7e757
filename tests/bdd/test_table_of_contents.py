"""Behaviour tests for heading anchors and the table of contents.

The scenarios live in ``features/table_of_contents.feature``. They run
:func:`static_pages.toc.generate_toc` over small page bodies and inspect the
anchored content and the TOC markup with BeautifulSoup.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from bs4 import BeautifulSoup
from pytest_bdd import given, parsers, scenarios, then, when

from static_pages.i18n import load_catalog
from static_pages.toc import generate_toc

FEATURE_FILE = (
    Path(__file__).resolve().parents[2] / "features" / "table_of_contents.feature"
)
scenarios(FEATURE_FILE)


@pytest.fixture
def scenario_state() -> dict[str, object]:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


@given("a page body with two sections and a subsection")
def given_sectioned_body(scenario_state: dict[str, object]) -> None:
    """Store a body with two ``h2`` sections and one ``h3`` between them."""
    scenario_state["content"] = (
        "<h2>Para empezar</h2><p>Texto.</p>"
        "<h3 class='sub'>Detalles</h3><p>Más texto.</p>"
        "<h2>Otra sección</h2><p>Fin.</p>"
    )


@given("a page body with only paragraphs")
def given_plain_body(scenario_state: dict[str, object]) -> None:
    """Store a body without section headings."""
    scenario_state["content"] = "<h1>Title</h1><p>Just text.</p><h4>Aside</h4>"


@when("I generate the table of contents")
def when_generate(scenario_state: dict[str, object]) -> None:
    """Run the TOC generator with the English string table."""
    scenario_state["result"] = generate_toc(
        str(scenario_state["content"]), load_catalog("en")
    )


@then(
    parsers.parse(
        'the headings carry anchors "{first}", "{second}" and "{third}"'
    )
)
def then_anchors(
    scenario_state: dict[str, object], first: str, second: str, third: str
) -> None:
    """Assert the anchored body exposes the expected heading ids."""
    soup = BeautifulSoup(scenario_state["result"].content, "html.parser")
    ids = [tag["id"] for tag in soup.find_all(["h2", "h3"])]
    assert ids == [first, second, third]
    assert soup.find("h3")["class"] == ["sub"]


@then("the table of contents links to every anchor in document order")
def then_links(scenario_state: dict[str, object]) -> None:
    """Assert each TOC link targets a heading id, in order."""
    result = scenario_state["result"]
    soup = BeautifulSoup(result.toc, "html.parser")
    hrefs = [link["href"] for link in soup.select("nav.staticpage-toc a")]
    assert hrefs == [f"#{heading.slug}" for heading in result.headings]
    assert soup.select_one("h4.toc-title").get_text() == "Table of contents"


@then("the subsection is listed inside a nested list")
def then_nested(scenario_state: dict[str, object]) -> None:
    """Assert the ``h3`` entry sits in a ``toc-sublist``."""
    soup = BeautifulSoup(scenario_state["result"].toc, "html.parser")
    nested = soup.select("ul.toc-sublist a")
    assert [link.get_text() for link in nested] == ["Detalles"]


@then("no table of contents is produced")
def then_no_toc(scenario_state: dict[str, object]) -> None:
    """Assert the TOC markup is empty."""
    assert scenario_state["result"].toc == ""


@then("the body is unchanged")
def then_body_unchanged(scenario_state: dict[str, object]) -> None:
    """Assert the content passes through verbatim."""
    assert scenario_state["result"].content == scenario_state["content"]
