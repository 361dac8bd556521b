"""Concrete jless site pages and the registry the CLI iterates over.

Each page subclasses :class:`~jless_site.page.BasePage` and only supplies its
title, path, extra CSS, footer image, and body content.

Examples
--------
>>> from jless_site.pages import PAGES
>>> list(PAGES)
['home', 'user-guide', 'releases']
>>> PAGES["releases"].filename
'releases.html'
"""

from __future__ import annotations

from ..page import BasePage
from .home import HomePage
from .releases import ReleasesPage
from .user_guide import UserGuidePage

PAGES: dict[str, type[BasePage]] = {
    HomePage.key: HomePage,
    UserGuidePage.key: UserGuidePage,
    ReleasesPage.key: ReleasesPage,
}

__all__ = ["PAGES", "HomePage", "ReleasesPage", "UserGuidePage"]
