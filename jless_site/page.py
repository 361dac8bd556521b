"""Shared document skeleton for every jless site page.

:class:`BasePage` owns the parts of a page that never vary: the doctype, the
head metadata block, the site header and navigation, and the footer. Concrete
pages subclass it and supply only the extension points:

* ``title`` (usually through ``title_suffix``),
* ``path``, the site-relative URL used for ``og:url``,
* ``extra_css``, appended after the shared base stylesheet,
* ``render_content()``, invoked once per generation,
* ``footer_image_src``, falling back to the site's shared footer asset.

Typical usage pairs a page with the stylesheet of the current run:

>>> from pathlib import Path
>>> from jless_site.config import SiteConfig
>>> from jless_site.pages import HomePage
>>> from jless_site.resources import BaseStylesheet
>>> site = SiteConfig()
>>> stylesheet = BaseStylesheet(site.base_stylesheet)
>>> HomePage(site).generate(Path("dist/index.html"), stylesheet)  # doctest: +SKIP
PosixPath('dist/index.html')
"""

from __future__ import annotations

import typing as typ
from html import escape
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from .html_dsl import a, div, h2, html_elem, img, span
from .resources import write_text_atomic

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .config import SiteConfig
    from .resources import BaseStylesheet

DOCTYPE = "<!DOCTYPE html>\n"


class BasePage:
    """Render a complete HTML document around page-specific content."""

    key: typ.ClassVar[str] = "base"
    filename: typ.ClassVar[str] = "index.html"
    title_suffix: typ.ClassVar[str] = "A Command-Line JSON Viewer"
    path: typ.ClassVar[str] = ""
    extra_css: typ.ClassVar[str] = ""
    footer_image_src: typ.ClassVar[str | None] = None

    def __init__(self, site: SiteConfig, *, templates_dir: Path | None = None) -> None:
        """Initialize the page and the Jinja environment for its boilerplate.

        Parameters
        ----------
        site : SiteConfig
            Site-wide metadata shared by every page (social tags, navigation,
            footer attribution).
        templates_dir : Path, optional
            Directory containing ``head.jinja``. Defaults to
            ``jless_site/templates``.
        """
        self.site = site
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(self.templates_dir),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.head_template = self.env.get_template("head.jinja")

    @property
    def title(self) -> str:
        """Return the document title."""
        return f"{self.site.site_name} - {self.title_suffix}"

    @property
    def footer_image(self) -> str:
        """Return the footer image source, defaulting to the shared asset."""
        return self.footer_image_src or self.site.footer_image

    def render_content(self) -> str:
        """Return the page body markup placed between header and footer."""
        raise NotImplementedError

    def render(self, stylesheet: BaseStylesheet) -> str:
        """Assemble the full document as a string.

        The stylesheet is read through ``stylesheet.text``, so a run that
        renders several pages with the same :class:`BaseStylesheet` reads the
        file only once.
        """
        return DOCTYPE + html_elem(
            "html",
            render=lambda: self.render_head(stylesheet)
            + html_elem(
                "body",
                render=lambda: self.render_header()
                + self.render_content()
                + self.render_footer(),
            ),
        )

    def generate(self, output_path: Path, stylesheet: BaseStylesheet) -> Path:
        """Render the page and write it to ``output_path``.

        Parameters
        ----------
        output_path : Path
            Destination HTML file. Its directory must already exist; an
            existing file is replaced atomically.
        stylesheet : BaseStylesheet
            Shared CSS for the current generation run.

        Returns
        -------
        Path
            ``output_path``, once the file has been written.

        Raises
        ------
        ResourceUnavailableError
            If the stylesheet cannot be read or the output cannot be written.
            No partial file is left behind.
        """
        return write_text_atomic(output_path, self.render(stylesheet))

    def render_head(self, stylesheet: BaseStylesheet) -> str:
        head_tags = self.head_template.render(
            site=self.site, title=self.title, path=self.path
        )
        return html_elem(
            "head",
            render=lambda: head_tags
            + "\n"
            + html_elem("style", render=lambda: stylesheet.text + self.extra_css),
        )

    def render_header(self) -> str:
        banner = img(id="text-logo-with-mascot", src=self.site.banner_image)
        links = "\n".join(
            a(escape(link.label), href=link.href) for link in self.site.nav_links
        )
        return (
            html_elem("header", banner + h2(escape(self.site.tagline)))
            + html_elem("nav", links)
            + "\n"
        )

    def render_footer(self) -> str:
        author = a(self.site.author_name, href=self.site.author_url)
        return html_elem(
            "footer",
            render=lambda: img(src=self.footer_image)
            + div(f"Created by {author}", style="margin-top: 24px"),
        )


def code_block(lines: cabc.Iterable[str | None], prefix: str | None = "$ ") -> str:
    """Render terminal-style lines inside a ``div.code-block``.

    ``None`` entries become blank lines. When ``prefix`` is set, each line is
    preceded by a ``span.prefix`` holding it, as for shell prompts.
    """

    def _line(line: str | None) -> str:
        if line is None:
            return ""
        if prefix:
            return span(prefix, klass="prefix") + line
        return line

    return div("\n".join(_line(line) for line in lines), klass="code-block")


__all__ = ["DOCTYPE", "BasePage", "code_block"]
