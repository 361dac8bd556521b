"""Load site configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .helpers import _build_nav_links, _build_page_outputs, _optional_str
from .models import SiteConfig


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML configuration describing the jless site.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML site configuration (for example,
        ``config/site.yaml``).

    Returns
    -------
    SiteConfig
        Parsed site metadata with defaults applied for every omitted key.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteConfigError
        If navigation links or page outputs are malformed.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from jless_site.config import load_site_config
    >>> config = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
    >>> config.base_url  # doctest: +SKIP
    'https://jless.io'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):  # pragma: no cover - config error guard
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    site = raw.get("site", {}) or {}
    paths = raw.get("paths", {}) or {}
    base = SiteConfig()

    def _text(payload: typ.Mapping[str, typ.Any], key: str, default: str) -> str:
        return _optional_str(payload.get(key)) or default

    twitter_handle = base.twitter_handle
    if "twitter_handle" in site:
        twitter_handle = _optional_str(site["twitter_handle"])
        if twitter_handle:
            twitter_handle = twitter_handle.removeprefix("@")

    return SiteConfig(
        site_name=_text(site, "name", base.site_name),
        tagline=_text(site, "tagline", base.tagline),
        base_url=_text(site, "base_url", base.base_url).rstrip("/"),
        description=_text(site, "description", base.description),
        social_image=_text(site, "social_image", base.social_image),
        favicon=_text(site, "favicon", base.favicon),
        banner_image=_text(site, "banner_image", base.banner_image),
        fonts_url=_text(site, "fonts_url", base.fonts_url),
        twitter_handle=twitter_handle,
        author_name=_text(site, "author_name", base.author_name),
        author_url=_text(site, "author_url", base.author_url),
        footer_image=_text(site, "footer_image", base.footer_image),
        repo_url=_text(site, "repo_url", base.repo_url).rstrip("/"),
        version=_text(site, "version", base.version),
        base_stylesheet=Path(_text(paths, "base_stylesheet", str(base.base_stylesheet))),
        output_dir=Path(_text(paths, "output_dir", str(base.output_dir))),
        releases_file=Path(_text(paths, "releases", str(base.releases_file))),
        nav_links=_build_nav_links(raw.get("nav_links")),
        page_outputs=_build_page_outputs(raw.get("pages")),
    )


__all__ = ["load_site_config"]
