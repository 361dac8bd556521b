r"""Load jless release notes from YAML.

Release notes live in ``config/releases.yaml`` rather than in page code so a
new release only needs a data edit. Each entry names a version, optional
intro paragraphs, and sections of bullet items; prose is written in Markdown
and rendered to HTML here so the releases page can embed it verbatim.

Example
-------
>>> from pathlib import Path
>>> from jless_site.releases import load_releases
>>> releases = load_releases(Path("config/releases.yaml"))  # doctest: +SKIP
>>> releases[0].version  # doctest: +SKIP
'v0.7.2'
"""

from __future__ import annotations

import dataclasses as dc
import re
import typing as typ

from markdown import markdown
from ruamel.yaml import YAML

from .config import SiteConfigError

if typ.TYPE_CHECKING:
    from pathlib import Path

_MARKDOWN_EXTENSIONS = ["sane_lists"]
_SINGLE_PARAGRAPH = re.compile(r"\A<p>(.*)</p>\Z", re.DOTALL)


@dc.dataclass(slots=True)
class ReleaseSection:
    """A titled list of changes within a release.

    Attributes
    ----------
    heading : str
        Section title such as ``"Bug fixes"``.
    items : list[str]
        Rendered HTML for each bullet, without a wrapping paragraph.
    """

    heading: str
    items: list[str]


@dc.dataclass(slots=True)
class Release:
    """A single published jless release.

    Attributes
    ----------
    version : str
        Git tag of the release, e.g. ``"v0.7.2"``.
    intro : list[str]
        Rendered HTML paragraphs shown before the sections.
    sections : list[ReleaseSection]
        Change lists in display order.
    binaries : dict[str, list[str]]
        Platform label mapped to the target triples published for it.
    """

    version: str
    intro: list[str] = dc.field(default_factory=list)
    sections: list[ReleaseSection] = dc.field(default_factory=list)
    binaries: dict[str, list[str]] = dc.field(default_factory=dict)


def render_markdown(text: str) -> str:
    """Render a Markdown snippet to HTML5, or ``""`` for blank input."""
    normalized = (text or "").strip()
    if not normalized:
        return ""
    return markdown(
        normalized, extensions=_MARKDOWN_EXTENSIONS, output_format="html5"
    )


def render_inline_markdown(text: str) -> str:
    """Render Markdown and unwrap it when it produced a single paragraph."""
    html = render_markdown(text)
    match = _SINGLE_PARAGRAPH.match(html)
    if match and "<p>" not in match.group(1):
        return match.group(1)
    return html


def load_releases(path: Path) -> list[Release]:
    """Load release notes in the order they appear in ``path``.

    Parameters
    ----------
    path : Path
        YAML file with a ``releases`` list and an optional top-level
        ``binaries`` mapping used by releases that do not define their own.

    Returns
    -------
    list[Release]
        Parsed releases with Markdown already rendered to HTML.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist.
    SiteConfigError
        If the document or one of its releases is malformed.
    """
    if not path.exists():
        msg = f"Release notes file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level release notes structure must be a mapping."
        raise SiteConfigError(msg)

    default_binaries = _parse_binaries(loaded.get("binaries"), context="binaries")
    entries = loaded.get("releases") or []
    if not isinstance(entries, list):
        msg = "'releases' must be a list."
        raise SiteConfigError(msg)
    return [
        _parse_release(entry, index, default_binaries)
        for index, entry in enumerate(entries)
    ]


def _parse_release(
    payload: object, index: int, default_binaries: dict[str, list[str]]
) -> Release:
    if not isinstance(payload, dict) or not payload.get("version"):
        msg = f"Release #{index} must be a mapping with a 'version'."
        raise SiteConfigError(msg)
    version = str(payload["version"]).strip()
    intro = [render_markdown(str(text)) for text in payload.get("intro") or []]
    sections: list[ReleaseSection] = []
    for section in payload.get("sections") or []:
        match section:
            case {"heading": heading, "items": list() as items}:
                sections.append(
                    ReleaseSection(
                        heading=str(heading),
                        items=[render_inline_markdown(str(item)) for item in items],
                    )
                )
            case _:
                msg = f"Release {version} has a section without 'heading' and 'items'."
                raise SiteConfigError(msg)
    binaries = default_binaries
    if "binaries" in payload:
        binaries = _parse_binaries(payload["binaries"], context=f"{version} binaries")
    return Release(
        version=version,
        intro=[html for html in intro if html],
        sections=sections,
        binaries=binaries,
    )


def _parse_binaries(raw: object, *, context: str) -> dict[str, list[str]]:
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        msg = f"'{context}' must map platforms to lists of target triples."
        raise SiteConfigError(msg)
    binaries: dict[str, list[str]] = {}
    for platform, targets in raw.items():
        match targets:
            case str():
                binaries[str(platform)] = [targets]
            case list():
                binaries[str(platform)] = [str(target) for target in targets]
            case _:
                msg = f"'{context}' entry for {platform} must list target triples."
                raise SiteConfigError(msg)
    return binaries


__all__ = [
    "Release",
    "ReleaseSection",
    "load_releases",
    "render_inline_markdown",
    "render_markdown",
]
