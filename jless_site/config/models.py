"""Typed dataclasses describing jless site configuration structures."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

DEFAULT_NAV_LINKS: tuple[tuple[str, str], ...] = (
    ("About", "./"),
    ("User Guide", "./user-guide.html"),
    ("Releases", "./releases.html"),
    ("GitHub", "https://github.com/PaulJuliusMartinez/jless"),
)


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class NavLinkConfig:
    """Navigation link rendered in the shared site header."""

    label: str
    href: str


def default_nav_links() -> list[NavLinkConfig]:
    """Return fresh header links for the about, guide, releases and repo pages."""
    return [NavLinkConfig(label=label, href=href) for label, href in DEFAULT_NAV_LINKS]


@dc.dataclass(slots=True)
class SiteConfig:
    """Site-wide metadata shared by every generated page.

    Attributes
    ----------
    site_name : str
        Short product name, used in default page titles.
    tagline : str
        Banner heading shown in the header of every page.
    base_url : str
        Absolute site origin; page paths are appended for ``og:url``.
    description : str
        Open-Graph description shared by every page.
    social_image : str
        Absolute URL of the Open-Graph preview image.
    favicon : str
        Relative URL of the SVG favicon.
    banner_image : str
        Relative URL of the logo shown in the header.
    fonts_url : str
        Google Fonts stylesheet URL linked from the head block.
    twitter_handle : str or None
        Handle without ``@`` used for ``twitter:creator``; ``None`` omits it.
    author_name : str
        Link text of the footer attribution.
    author_url : str
        Target of the footer attribution link.
    footer_image : str
        Default footer image for pages that do not override it.
    repo_url : str
        Project repository URL used for release and issue links.
    version : str
        Current release tag, shown in install instructions.
    base_stylesheet : Path
        Shared CSS file read once per generation run.
    output_dir : Path
        Directory receiving the generated HTML files.
    releases_file : Path
        YAML file holding release notes.
    nav_links : list[NavLinkConfig]
        Header navigation entries, in display order.
    page_outputs : dict[str, str]
        Output filename per page key.
    """

    site_name: str = "jless"
    tagline: str = "jless — a command-line JSON viewer"
    base_url: str = "https://jless.io"
    description: str = (
        "jless is a command-line JSON viewer designed for reading, exploring, "
        "and searching through JSON data."
    )
    social_image: str = "https://jless.io/assets/logo/text-logo-with-mascot-social.png"
    favicon: str = "./assets/logo/mascot.svg"
    banner_image: str = "./assets/logo/text-logo-with-mascot.svg"
    fonts_url: str = (
        "https://fonts.googleapis.com/css2?family=Fira+Sans:wght@400;700"
        "&family=Roboto+Slab:wght@800&display=swap"
    )
    twitter_handle: str | None = "CodeIsTheEnd"
    author_name: str = "CodeIsTheEnd"
    author_url: str = "https://twitter.com/CodeIsTheEnd"
    footer_image: str = "./assets/logo/mascot.svg"
    repo_url: str = "https://github.com/PaulJuliusMartinez/jless"
    version: str = "v0.7.2"
    base_stylesheet: Path = Path("base.css")
    output_dir: Path = Path("dist")
    releases_file: Path = Path("config/releases.yaml")
    nav_links: list[NavLinkConfig] = dc.field(default_factory=default_nav_links)
    page_outputs: dict[str, str] = dc.field(default_factory=dict)

    def output_path(self, page_key: str, default_filename: str) -> Path:
        """Return the output file for ``page_key`` inside ``output_dir``."""
        filename = self.page_outputs.get(page_key, default_filename)
        return self.output_dir / filename


__all__ = [
    "DEFAULT_NAV_LINKS",
    "NavLinkConfig",
    "SiteConfig",
    "SiteConfigError",
    "default_nav_links",
]
