"""Tests for the shared page skeleton in ``jless_site.page``.

The fixtures build two throwaway pages on top of ``BasePage`` so the tests
can verify the invariant parts of the document (doctype, head metadata,
header, footer) independently of the real site copy, along with the
stylesheet caching and atomic write behaviour of ``generate``.

Usage
-----
Run ``pytest tests/test_page_template.py -v``. Only ``tmp_path`` is needed;
no network access or checked-in assets are read.
"""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

import pytest
from bs4 import BeautifulSoup

from jless_site.config import NavLinkConfig, SiteConfig
from jless_site.html_dsl import p
from jless_site.page import DOCTYPE, BasePage, code_block
from jless_site.resources import BaseStylesheet, ResourceUnavailableError

BASE_CSS = "body { color: black; }\n"


class AlphaPage(BasePage):
    key = "alpha"
    filename = "alpha.html"
    title_suffix = "Alpha"
    path = "/alpha.html"

    def render_content(self) -> str:
        return p("alpha body")


class BetaPage(BasePage):
    key = "beta"
    filename = "beta.html"
    title_suffix = "Beta"
    path = "/beta.html"

    def render_content(self) -> str:
        return p("beta body")


class StyledPage(AlphaPage):
    extra_css = ".alpha { color: red; }\n"
    footer_image_src = "./assets/logo/mascot-rocket.svg"


@pytest.fixture
def site() -> SiteConfig:
    """Return a site config with a short, predictable navigation bar."""
    return SiteConfig(
        nav_links=[
            NavLinkConfig(label="About", href="./"),
            NavLinkConfig(label="Guide & Tips", href="./user-guide.html"),
        ]
    )


@pytest.fixture
def stylesheet(tmp_path: Path) -> BaseStylesheet:
    """Write a base stylesheet into ``tmp_path`` and wrap it for a run."""
    css_path = tmp_path / "base.css"
    css_path.write_text(BASE_CSS, encoding="utf-8")
    return BaseStylesheet(css_path)


def test_document_starts_with_doctype_and_html(
    site: SiteConfig, stylesheet: BaseStylesheet
) -> None:
    """The document should be the doctype followed by one html element."""
    html = AlphaPage(site).render(stylesheet)
    assert html.startswith(DOCTYPE + "<html><head>")
    assert html.endswith("</footer></body></html>")


def test_head_contains_metadata_and_styles(
    site: SiteConfig, stylesheet: BaseStylesheet
) -> None:
    """Head metadata should be derived from the title, path, and site config."""
    soup = BeautifulSoup(StyledPage(site).render(stylesheet), "html.parser")
    head = soup.head
    assert head is not None
    assert head.title is not None
    assert head.title.string == "jless - Alpha"
    og_url = head.find("meta", attrs={"property": "og:url"})
    assert og_url is not None
    assert og_url["content"] == "https://jless.io/alpha.html"
    og_title = head.find("meta", attrs={"property": "og:title"})
    assert og_title is not None
    assert og_title["content"] == "jless - Alpha"
    creator = head.find("meta", attrs={"name": "twitter:creator"})
    assert creator is not None
    assert creator["content"] == "@CodeIsTheEnd"
    assert head.style is not None
    assert head.style.string == BASE_CSS + StyledPage.extra_css


def test_twitter_creator_omitted_without_handle(
    site: SiteConfig, stylesheet: BaseStylesheet
) -> None:
    """A site without a Twitter handle should not emit ``twitter:creator``."""
    anonymous = dc.replace(site, twitter_handle=None)
    soup = BeautifulSoup(AlphaPage(anonymous).render(stylesheet), "html.parser")
    assert soup.find("meta", attrs={"name": "twitter:creator"}) is None


def test_header_lists_navigation_links(
    site: SiteConfig, stylesheet: BaseStylesheet
) -> None:
    """Navigation should come from the site config, escaped by the template."""
    html = AlphaPage(site).render(stylesheet)
    assert "Guide &amp; Tips" in html
    soup = BeautifulSoup(html, "html.parser")
    links = [(link.get_text(), link["href"]) for link in soup.select("nav a")]
    assert links == [("About", "./"), ("Guide & Tips", "./user-guide.html")]
    assert soup.select_one("header h2").get_text() == site.tagline
    assert soup.select_one("header img#text-logo-with-mascot")["src"] == site.banner_image


def test_default_site_config_renders_full_navigation(stylesheet: BaseStylesheet) -> None:
    """A bare ``SiteConfig`` should still link every known page from the header."""
    soup = BeautifulSoup(AlphaPage(SiteConfig()).render(stylesheet), "html.parser")
    assert [link["href"] for link in soup.select("nav a")] == [
        "./",
        "./user-guide.html",
        "./releases.html",
        "https://github.com/PaulJuliusMartinez/jless",
    ]


def test_footer_image_defaults_to_shared_asset(
    site: SiteConfig, stylesheet: BaseStylesheet
) -> None:
    """Pages without an override should use the site's footer image."""
    soup = BeautifulSoup(AlphaPage(site).render(stylesheet), "html.parser")
    assert soup.select_one("footer img")["src"] == site.footer_image
    attribution = soup.select_one("footer div")
    assert attribution["style"] == "margin-top: 24px"
    assert attribution.get_text() == f"Created by {site.author_name}"
    assert attribution.a["href"] == site.author_url


def test_footer_image_override(site: SiteConfig, stylesheet: BaseStylesheet) -> None:
    """A page-level footer image should replace the shared default."""
    soup = BeautifulSoup(StyledPage(site).render(stylesheet), "html.parser")
    assert soup.select_one("footer img")["src"] == "./assets/logo/mascot-rocket.svg"


def test_body_order_is_header_content_footer(
    site: SiteConfig, stylesheet: BaseStylesheet
) -> None:
    """The content slot should sit between the site header and the footer."""
    html = AlphaPage(site).render(stylesheet)
    header_at = html.index("<header>")
    nav_at = html.index("<nav>")
    content_at = html.index("<p>alpha body</p>")
    footer_at = html.index("<footer>")
    assert html.index("<body>") < header_at < nav_at < content_at < footer_at


def test_pages_are_identical_outside_extension_points(
    site: SiteConfig, stylesheet: BaseStylesheet
) -> None:
    """Swapping title, path, and content should turn one page into the other."""
    alpha = AlphaPage(site).render(stylesheet)
    beta = BetaPage(site).render(stylesheet)
    transformed = (
        alpha.replace("jless - Alpha", "jless - Beta")
        .replace("/alpha.html", "/beta.html")
        .replace("alpha body", "beta body")
    )
    assert transformed == beta


def test_generate_is_deterministic(
    site: SiteConfig, stylesheet: BaseStylesheet, tmp_path: Path
) -> None:
    """Generating the same page twice should produce identical bytes."""
    first = AlphaPage(site).generate(tmp_path / "first.html", stylesheet)
    second = AlphaPage(site).generate(tmp_path / "second.html", stylesheet)
    assert first.read_bytes() == second.read_bytes()
    assert first.read_text(encoding="utf-8") == AlphaPage(site).render(stylesheet)


def test_generate_overwrites_existing_file(
    site: SiteConfig, stylesheet: BaseStylesheet, tmp_path: Path
) -> None:
    """An existing output file should be replaced, leaving no temp files."""
    output = tmp_path / "alpha.html"
    output.write_text("stale", encoding="utf-8")
    AlphaPage(site).generate(output, stylesheet)
    assert output.read_text(encoding="utf-8").startswith(DOCTYPE)
    assert not list(tmp_path.glob(".alpha.html-*"))


def test_stylesheet_is_read_once_per_run(
    site: SiteConfig, stylesheet: BaseStylesheet, tmp_path: Path
) -> None:
    """Later pages should reuse the cached CSS even if the file disappears."""
    AlphaPage(site).generate(tmp_path / "alpha.html", stylesheet)
    stylesheet.path.unlink()
    beta = BetaPage(site).generate(tmp_path / "beta.html", stylesheet)
    assert BASE_CSS in beta.read_text(encoding="utf-8")


def test_missing_stylesheet_is_resource_unavailable(
    site: SiteConfig, tmp_path: Path
) -> None:
    """An unreadable stylesheet should abort with the offending path."""
    missing = tmp_path / "missing.css"
    output = tmp_path / "alpha.html"
    with pytest.raises(ResourceUnavailableError) as excinfo:
        AlphaPage(site).generate(output, BaseStylesheet(missing))
    assert excinfo.value.path == missing
    assert not output.exists()


def test_missing_output_directory_is_resource_unavailable(
    site: SiteConfig, stylesheet: BaseStylesheet, tmp_path: Path
) -> None:
    """Writing into a directory that does not exist should fail cleanly."""
    output = tmp_path / "absent" / "alpha.html"
    with pytest.raises(ResourceUnavailableError) as excinfo:
        AlphaPage(site).generate(output, stylesheet)
    assert excinfo.value.path == output
    assert not output.parent.exists()


def test_base_page_requires_content(
    site: SiteConfig, stylesheet: BaseStylesheet
) -> None:
    """``BasePage`` itself has no content to render."""
    with pytest.raises(NotImplementedError):
        BasePage(site).render(stylesheet)


def test_code_block_with_prompt_prefix() -> None:
    """Prompt lines get a prefix span; ``None`` lines stay blank."""
    assert code_block(["jless a.json", None, "cat a.json | jless"]) == (
        '<div class="code-block">'
        '<span class="prefix">$ </span>jless a.json\n'
        "\n"
        '<span class="prefix">$ </span>cat a.json | jless'
        "</div>"
    )


def test_code_block_without_prefix() -> None:
    """Plain code blocks should join lines verbatim."""
    assert code_block(["# macOS", None, "url"], prefix=None) == (
        '<div class="code-block"># macOS\n\nurl</div>'
    )


def test_code_block_keeps_prefix_on_empty_string_lines() -> None:
    """Only ``None`` blanks a line; an empty command still shows its prompt."""
    assert code_block(["", None]) == (
        '<div class="code-block"><span class="prefix">$ </span>\n</div>'
    )
