"""Release notes page built from ``config/releases.yaml``."""

from __future__ import annotations

import typing as typ

from ..html_dsl import div, h2, h3, h4, li, ul
from ..page import BasePage, code_block
from ..releases import load_releases

if typ.TYPE_CHECKING:
    from pathlib import Path

    from ..config import SiteConfig
    from ..releases import Release, ReleaseSection

RELEASES_CSS = """\
code {
  position: relative;
  top: -2px;
  display: inline-block;
  border: 1px solid black;
  border-radius: 4px;
  margin: 0 2px;
  padding: 2px 4px;
  background-color: #eeeeee;
  font-size: 16px;
}

footer {
  margin-top: 24px;
}
"""


class ReleasesPage(BasePage):
    """Changelog published as ``releases.html``."""

    key = "releases"
    filename = "releases.html"
    title_suffix = "Releases"
    path = "/releases.html"
    extra_css = RELEASES_CSS
    footer_image_src = "./assets/logo/mascot-peanut-butter-jelly-sandwich.svg"

    def __init__(
        self,
        site: SiteConfig,
        *,
        releases: list[Release] | None = None,
        templates_dir: Path | None = None,
    ) -> None:
        """Initialize the page, optionally with pre-loaded release notes.

        When ``releases`` is ``None`` the notes are read from
        ``site.releases_file`` at render time.
        """
        super().__init__(site, templates_dir=templates_dir)
        self.releases = releases

    def render_content(self) -> str:
        releases = self.releases
        if releases is None:
            releases = load_releases(self.site.releases_file)
        return h2("Releases", id="releases") + "\n".join(
            self.render_release(release) for release in releases
        )

    def render_release(self, release: Release) -> str:
        body = "".join(release.intro) + "\n".join(
            _render_section(section) for section in release.sections
        )
        return div(
            h3(release.version, id=release.version)
            + body
            + self.render_binaries(release),
            klass="release",
        )

    def render_binaries(self, release: Release) -> str:
        if not release.binaries:
            return ""
        lines: list[str | None] = []
        for index, (platform, targets) in enumerate(release.binaries.items()):
            if index:
                lines.append(None)
            lines.append(f"# {platform}")
            lines.extend(self.download_url(release.version, target) for target in targets)
        return h4("Binaries") + code_block(lines, prefix=None)

    def download_url(self, version: str, target: str) -> str:
        return (
            f"{self.site.repo_url}/releases/download/{version}/"
            f"{self.site.site_name}-{version}-{target}.zip"
        )


def _render_section(section: ReleaseSection) -> str:
    return h4(section.heading) + ul("\n".join(li(item) for item in section.items))


__all__ = ["ReleasesPage"]
