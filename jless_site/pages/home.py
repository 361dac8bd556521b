"""The jless landing page: pitch, feature tour, and install instructions."""

from __future__ import annotations

import dataclasses as dc

from ..html_dsl import a, code, div, h2, img, p, table, tbody, td, th, thead, tr
from ..page import BasePage, code_block

GIF_PATH = "./assets/jless-recording.gif"


@dc.dataclass(frozen=True, slots=True)
class PackageManager:
    """One row of the installation table.

    ``tool`` is ``None`` for distributions whose native package manager
    needs no name; the row then links the OS across both leading columns.
    """

    os: str
    command: str
    link: str
    tool: str | None = None


@dc.dataclass(frozen=True, slots=True)
class Feature:
    copy: str
    image: str


PACKAGE_MANAGERS: tuple[PackageManager, ...] = (
    PackageManager(
        os="macOS",
        tool="HomeBrew",
        command="brew install jless",
        link="https://formulae.brew.sh/formula/jless",
    ),
    PackageManager(
        os="macOS",
        tool="MacPorts",
        command="sudo port install jless",
        link="https://ports.macports.org/port/jless/",
    ),
    PackageManager(
        os="Linux",
        tool="HomeBrew",
        command="brew install jless",
        link="https://formulae.brew.sh/formula/jless",
    ),
    PackageManager(
        os="Arch Linux",
        command="pacman -S jless",
        link="https://archlinux.org/packages/community/x86_64/jless/",
    ),
    PackageManager(
        os="Void Linux",
        command="sudo xbps-install jless",
        link="https://github.com/void-linux/void-packages/tree/master/srcpkgs/jless",
    ),
    PackageManager(
        os="NetBSD",
        command="pkgin install jless",
        link="https://pkgsrc.se/textproc/jless/",
    ),
    PackageManager(
        os="FreeBSD",
        command="pkg install jless",
        link="https://freshports.org/textproc/jless/",
    ),
)

FEATURES: tuple[Feature, ...] = (
    Feature(
        copy=(
            "jless will pretty print your JSON and apply syntax highlighting.\n"
            "Use it when exploring external APIs, or debugging request payloads.\n"
        ),
        image="./assets/logo/mascot-indentation.svg",
    ),
    Feature(
        copy=(
            "Expand and collapse Objects and Arrays to grasp the high- and low-level\n"
            "structure of a JSON document. jless has a large suite of vim-inspired\n"
            "commands that make exploring data a breeze.\n"
        ),
        image="./assets/logo/mascot-rocks-collapsing.svg",
    ),
    Feature(
        copy=(
            "jless supports full text regular-expression based search. Quickly find\n"
            "the data you're looking for in long String values, or jump between\n"
            "values for the same Object key.\n"
        ),
        image="./assets/logo/mascot-searching.svg",
    ),
)

HOME_CSS = """\
#jless-recording {
  margin: 0 auto;
  max-width: min(540px, 100%);
}

#jless-recording {
  display: block;
  margin-bottom: 0.5em;
}

.text-and-mascot {
  display: flex;
  justify-content: space-between;
  align-items: center;
}

.text-and-mascot img {
  width: 30%;
  padding: 16px;
}

#installation-table {
  border-collapse: collapse;
  width: 100%;
}

#installation-table tbody td {
  border: 1px solid black;
  border-radius: 4px;
  padding: 4px 8px;
}

#installation-table code {
  font-size: 16px;
}

@media (max-width: 540px) {
  .text-and-mascot {
    flex-wrap: wrap;
    justify-content: center;
  }

  .text-and-mascot img {
    order: 5;
    width: 180px;
    padding: 0 16px;
  }
}
"""


class HomePage(BasePage):
    """Landing page published as ``index.html``."""

    key = "home"
    filename = "index.html"
    path = ""
    extra_css = HOME_CSS

    def render_content(self) -> str:
        intro = p(
            "jless is a command-line JSON viewer designed for reading, exploring,\n"
            "and searching through JSON data.\n"
        )
        gif = img(id="jless-recording", src=GIF_PATH)
        user_guide_link = a("user guide", href="./user-guide.html")
        user_guide = p(
            f"Check out the {user_guide_link} to learn\n"
            "about the full functionality of jless.\n"
        )
        return (
            intro
            + gif
            + self.render_features()
            + self.render_installation()
            + user_guide
        )

    def render_features(self) -> str:
        rows: list[str] = []
        for index, feature in enumerate(FEATURES):
            copy = p(feature.copy)
            picture = img(src=feature.image)
            # Alternate sides so the mascots zig-zag down the page.
            inner = copy + picture if index % 2 == 0 else picture + copy
            rows.append(div(inner, klass="text-and-mascot"))
        return "".join(rows)

    def render_installation(self) -> str:
        intro = h2("Installation") + p(
            "jless currently supports macOS and Linux and can be installed using\n"
            "various package managers.\n"
        )
        header_row = tr(th("OS") + th("Package Manager") + th("Command"))
        rows = "".join(_package_manager_row(pkg) for pkg in PACKAGE_MANAGERS)
        package_managers = table(
            thead(header_row) + tbody(rows), id="installation-table"
        )
        cargo = p(
            render=lambda: "If you have a Rust toolchain installed, you can also "
            "install directly from source using cargo:"
            + code_block(["cargo install jless"])
        )
        github_releases = a("GitHub", href=f"{self.site.repo_url}/releases")
        binaries = p(
            f"Binaries for various architectures are also available on {github_releases}.\n"
        )
        return intro + package_managers + cargo + binaries


def _package_manager_row(pkg: PackageManager) -> str:
    if pkg.tool:
        cells = td(pkg.os) + td(a(pkg.tool, href=pkg.link))
    else:
        cells = td(a(pkg.os, href=pkg.link), colspan="2")
    return tr(cells + td(code(pkg.command)))


__all__ = ["FEATURES", "PACKAGE_MANAGERS", "Feature", "HomePage", "PackageManager"]
