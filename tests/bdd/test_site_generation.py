"""Behaviour tests for whole-site generation.

These pytest-bdd scenarios drive ``jless_site.cli.generate`` end to end and
check the cross-page contracts of the shared page template: every page
carries the same doctype, stylesheet, header, and navigation, while titles
and footer images vary per page. The feature file
``site_generation.feature`` also asserts that regenerating produces
byte-identical output.

Usage
-----
Run ``pytest tests/bdd/test_site_generation.py -v`` after installing the test
dependencies. Scenario state is shared through the ``scenario_state``
fixture; no network access is required.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import pytest
from bs4 import BeautifulSoup
from pytest_bdd import given, scenarios, then, when

from jless_site.cli import generate
from jless_site.page import DOCTYPE

REPO_ROOT = Path(__file__).resolve().parents[2]
FEATURE_FILE = REPO_ROOT / "features" / "site_generation.feature"
scenarios(FEATURE_FILE)

BASE_CSS = "/* shared */\nbody { font-family: sans-serif; }\n"


@pytest.fixture
def scenario_state() -> dict[str, object]:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


def _read_pages(output_dir: Path) -> dict[str, str]:
    return {
        path.name: path.read_text(encoding="utf-8")
        for path in sorted(output_dir.glob("*.html"))
    }


@given("a site config with a shared base stylesheet")
def given_site_config(tmp_path: Path, scenario_state: dict[str, object]) -> None:
    """Write a stylesheet and site config into ``tmp_path``."""
    css_path = tmp_path / "base.css"
    css_path.write_text(BASE_CSS, encoding="utf-8")
    output_dir = tmp_path / "dist"
    config_path = tmp_path / "site.yaml"
    config_path.write_text(
        f"""
paths:
  base_stylesheet: {css_path}
  output_dir: {output_dir}
  releases: {REPO_ROOT / "config" / "releases.yaml"}
""".strip()
        + "\n",
        encoding="utf-8",
    )
    scenario_state["config_path"] = config_path
    scenario_state["output_dir"] = output_dir


@when("I generate every page of the site")
def when_generate_site(scenario_state: dict[str, object]) -> None:
    """Run the generate command and capture the written pages."""
    generate(config=typ.cast("Path", scenario_state["config_path"]))
    output_dir = typ.cast("Path", scenario_state["output_dir"])
    scenario_state["pages"] = _read_pages(output_dir)


@when("I generate every page of the site again")
def when_generate_site_again(scenario_state: dict[str, object]) -> None:
    """Regenerate the site, keeping the first run's output for comparison."""
    scenario_state["first_run"] = scenario_state["pages"]
    generate(config=typ.cast("Path", scenario_state["config_path"]))
    output_dir = typ.cast("Path", scenario_state["output_dir"])
    scenario_state["pages"] = _read_pages(output_dir)


@then("each page starts with the HTML5 doctype")
def then_doctype(scenario_state: dict[str, object]) -> None:
    pages = typ.cast("dict[str, str]", scenario_state["pages"])
    assert sorted(pages) == ["index.html", "releases.html", "user-guide.html"]
    for name, html in pages.items():
        assert html.startswith(DOCTYPE + "<html><head>"), f"{name} lacks the doctype"


@then("each page embeds the shared base stylesheet")
def then_stylesheet(scenario_state: dict[str, object]) -> None:
    pages = typ.cast("dict[str, str]", scenario_state["pages"])
    for name, html in pages.items():
        style = BeautifulSoup(html, "html.parser").head.style.string
        assert style.startswith(BASE_CSS), f"{name} does not start with the base CSS"


@then("each page shows the same header and navigation")
def then_shared_header(scenario_state: dict[str, object]) -> None:
    pages = typ.cast("dict[str, str]", scenario_state["pages"])
    headers = {
        str(BeautifulSoup(html, "html.parser").header)
        + str(BeautifulSoup(html, "html.parser").nav)
        for html in pages.values()
    }
    assert len(headers) == 1, "expected identical header and nav on every page"


@then("each page has its own title and footer image")
def then_distinct_titles(scenario_state: dict[str, object]) -> None:
    pages = typ.cast("dict[str, str]", scenario_state["pages"])
    soups = [BeautifulSoup(html, "html.parser") for html in pages.values()]
    titles = {soup.title.string for soup in soups}
    footers = {soup.select_one("footer img")["src"] for soup in soups}
    assert len(titles) == len(pages)
    assert len(footers) == len(pages)


@then("the second run produces identical files")
def then_identical(scenario_state: dict[str, object]) -> None:
    first = typ.cast("dict[str, str]", scenario_state["first_run"])
    second = typ.cast("dict[str, str]", scenario_state["pages"])
    assert first == second
