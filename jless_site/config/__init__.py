"""Load and validate the jless site configuration YAML.

This subpackage parses ``config/site.yaml`` into a :class:`SiteConfig`
carrying the site-wide metadata (social tags, navigation, footer attribution,
stylesheet and output locations) that every page template consumes. The
primary entry point is :func:`load_site_config`.

Examples
--------
>>> from pathlib import Path
>>> from jless_site.config import load_site_config
>>> site = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> [link.label for link in site.nav_links]  # doctest: +SKIP
['About', 'User Guide', 'Releases', 'GitHub']
"""

from .loader import load_site_config
from .models import NavLinkConfig, SiteConfig, SiteConfigError

__all__ = [
    "NavLinkConfig",
    "SiteConfig",
    "SiteConfigError",
    "load_site_config",
]
