"""Cyclopts CLI entrypoint for generating the jless static site.

The ``site`` console script defined here loads ``config/site.yaml``, reads the
shared base stylesheet once, and renders every page (or a single page) into
the output directory. Typical usage is ``site generate`` locally or in CI.

Examples
--------
Generate all pages for the default configuration:

>>> from jless_site.cli import main
>>> main()  # doctest: +SKIP

Regenerate only the user guide into a custom directory:

>>> from jless_site.cli import app
>>> app(["generate", "--page", "user-guide", "--output-dir", "public"])  # doctest: +SKIP
"""

from __future__ import annotations

import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import load_site_config
from .pages import PAGES
from .resources import BaseStylesheet, ResourceUnavailableError

DEFAULT_CONFIG = Path("config/site.yaml")

app = App(name="site", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


@app.command(help="Generate the static HTML pages of the jless site.")
def generate(
    *,
    page: typ.Annotated[
        str | None, Parameter(help="Page identifier", env_var="INPUT_PAGE")
    ] = None,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="INPUT_OUTPUT_DIR"),
    ] = None,
) -> None:
    """Generate site pages for the requested configuration.

    Parameters
    ----------
    page : str or None, optional
        Page key to render (``home``, ``user-guide``, ``releases``); when
        ``None`` (default) every page is rendered.
    config : Path, optional
        Path to the ``site.yaml`` configuration file (overridable via
        ``INPUT_CONFIG``).
    output_dir : Path or None, optional
        Override the configured output directory.

    Returns
    -------
    None
        Writes one HTML file per page and prints each generated path.

    Raises
    ------
    KeyError
        If ``page`` does not name a known page.
    ResourceUnavailableError
        If the base stylesheet cannot be read or a page cannot be written.
        A failing page is reported on stderr and the remaining pages are
        still generated; the first failure is raised once the run ends.
    """
    site_config = load_site_config(config)
    if output_dir is not None:
        site_config.output_dir = output_dir

    if page:
        try:
            target_pages = [PAGES[page]]
        except KeyError as exc:
            available = ", ".join(PAGES)
            msg = f"Unknown page '{page}'. Known pages: {available}"
            raise KeyError(msg) from exc
    else:
        target_pages = list(PAGES.values())

    site_config.output_dir.mkdir(parents=True, exist_ok=True)
    stylesheet = BaseStylesheet(site_config.base_stylesheet)
    failures: list[ResourceUnavailableError] = []
    for page_cls in target_pages:
        output_path = site_config.output_path(page_cls.key, page_cls.filename)
        try:
            page_cls(site_config).generate(output_path, stylesheet)
        except ResourceUnavailableError as exc:
            print(f"failed {_format_path(output_path)}: {exc}", file=sys.stderr)
            failures.append(exc)
            continue
        print(f"wrote {_format_path(output_path)}")
    if failures:
        raise failures[0]


def main() -> None:
    """Invoke the Cyclopts application that powers the ``site`` console command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
