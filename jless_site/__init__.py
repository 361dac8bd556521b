"""Static site generator for the jless marketing and documentation pages.

Pages are assembled from a tiny HTML construction DSL
(:mod:`jless_site.html_dsl`) and wrapped in a shared document skeleton
(:class:`jless_site.page.BasePage`) before being written as static files.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from jless_site import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
