"""The jless user guide: usage, the command reference, and display modes."""

from __future__ import annotations

import typing as typ

from ..html_dsl import a, code, h2, h3, html_elem, li, p, ul
from ..page import BasePage, code_block

if typ.TYPE_CHECKING:
    import collections.abc as cabc

N = code("N")
JQ_URL = "https://stedolan.github.io/jq/"
REGEX_URL = "https://docs.rs/regex/latest/regex/index.html#syntax"

USER_GUIDE_CSS = """\
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
"""

CommandSpec = tuple[list[str], str, bool]


def command(inputs: cabc.Sequence[str], description: str, *, count: bool = False) -> str:
    """Render one command reference entry.

    Key sequences are shown as ``code`` tokens; counted commands are
    prefixed with an italic *count* marker.
    """
    prefix = html_elem("i", "count") + " " if count else ""
    keys = ", ".join(code(key) for key in inputs)
    return li(f"{prefix}{keys} {description}")


def count_command(inputs: cabc.Sequence[str], description: str) -> str:
    return command(inputs, description, count=True)


def _command_list(specs: cabc.Iterable[CommandSpec], separator: str = "") -> str:
    return ul(
        separator.join(
            command(inputs, description, count=counted)
            for inputs, description, counted in specs
        )
    )


UTIL_COMMANDS: tuple[CommandSpec, ...] = (
    (
        ["q", "Ctrl-C", ":quit", ":exit"],
        "Exit jless; don't worry, it's not as hard as exiting vim.",
        False,
    ),
    ([":help", "F1"], "Show the help page.", False),
)

MOVEMENT_COMMANDS: tuple[CommandSpec, ...] = (
    (["j", "DownArrow", "Ctrl-n", "Enter"], f"Move focus down one line (or {N} lines).", True),
    (["k", "UpArrow", "Ctrl-p", "Backspace"], f"Move focus up one line (or {N} lines).", True),
    (
        ["h", "LeftArrow"],
        "When focused on an expanded object or array, collapse the object or\n"
        "array. Otherwise, move focus to the parent of the focused node.\n",
        False,
    ),
    (["H"], "Focus the parent of the focused node without collapsing the focused node.", False),
    (
        ["l", "RightArrow"],
        "When focused on a collapsed object or array, expand the object or array.\n"
        "When focused on an expanded object or array, move focus to the first\n"
        "child. When focused on non-container values, does nothing.\n",
        False,
    ),
    (["J"], f"Move to the focused node's next sibling 1 or {N} times.", True),
    (["K"], f"Move to the focused node's previous sibling 1 or {N} times.", True),
    (["w"], f"Move forward until the next change in depth 1 or {N} times.", True),
    (["b"], f"Move backwards until the next change in depth 1 or {N} times.", True),
    (["Ctrl-f", "PageDown"], f"Move down by one window's height or {N} windows' heights.", True),
    (["Ctrl-b", "PageUp"], f"Move up by one window's height or {N} windows' heights.", True),
    (["0", "^"], "Move to the first sibling of the focused node's parent.", False),
    (["$"], "Move to the last sibling of the focused node's parent.", False),
    (["Home"], "Focus the first line in the input", False),
    (["End"], "Focus the last line in the input", False),
    (
        ["g"],
        "Focus the first line in the input if no count is given. If a count is given, focus\n"
        "that line number. If the line isn't visible, focus the last visible line before it.\n",
        True,
    ),
    (
        ["G"],
        "Focus the last line in the input if no count is given. If a count is given, focus\n"
        "that line number, expanding any of its parent nodes if necessary.\n",
        True,
    ),
    (["c"], "Shallow collapse the focused node and all its siblings.", False),
    (["C"], "Deep collapse the focused node and all its siblings.", False),
    (["e"], "Shallow expand the focused node and all its siblings.", False),
    (["E"], "Deep expand the focused node and all its siblings.", False),
    (["Space"], "Toggle the collapsed state of the currently focused node.", False),
)

SCROLLING_COMMANDS: tuple[CommandSpec, ...] = (
    (["Ctrl-e"], f"Scroll down one line (or {N} lines).", True),
    (["Ctrl-y"], f"Scroll up one line (or {N} lines).", True),
    (["Ctrl-d"], f"Scroll down by half the height of the screen (or by {N} lines).", True),
    (
        ["Ctrl-u"],
        f"Scroll up by half the height of the screen (or by {N} lines). For\n"
        f"this command and {code('Ctrl-d')}, focus is also moved by the\n"
        "specified number of lines. If no count is specified, the number of\n"
        "lines to scroll by is recalled from previous executions.\n",
        True,
    ),
    (["zz"], "Move the focused node to the center of the screen.", False),
    (["zt"], "Move the focused node to the top of the screen.", False),
    (["zb"], "Move the focused node to the bottom of the screen.", False),
    (["."], f"Scroll a truncated value one character to the right (or {N} characters).", True),
    ([","], f"Scroll a truncated value one character to the left (or {N} characters).", True),
    (
        [";"],
        "Scroll a truncated value all the way to the end, or, if already at\n"
        "the end, back to the start.\n",
        False,
    ),
    (["&lt;"], f"Decrease the indentation of every line by one (or {N}) tabs.", True),
    (["&gt;"], f"Increase the indentation of every line by one (or {N}) tabs.", True),
)

BRACKET_PATH = code('["foo"][3]["bar"]')

COPY_COMMANDS: tuple[CommandSpec, ...] = (
    (["yy", "pp"], "Copy/print the value of the currently focused node, pretty printed", False),
    (
        ["yv", "pv"],
        'Copy/print the value of the currently focused node in a "nicely" printed one-line format',
        False,
    ),
    (
        ["ys", "ps"],
        "When the currently focused value is a string, copy/print the contents of the\n"
        "string unescaped (except control characters)\n",
        False,
    ),
    (["yk", "pk"], "Copy/print the key of the current key/value pair", False),
    (
        ["yp", "pP"],
        "Copy/print the path from the root JSON element to the currently focused\n"
        f"node, e.g., {code('.foo[3].bar')}\n",
        False,
    ),
    (
        ["yb", "pb"],
        f"Like {code('yp')}, but always uses the bracket form for object keys,\n"
        f"e.g., {BRACKET_PATH}, which is useful if the environment\n"
        f"where you'll paste the path doesn't support the {code('.key')} format,\n"
        "like in Python\n",
        False,
    ),
    (
        ["yq", "pq"],
        f"Copy/print a {code(a('jq', href=JQ_URL))} style path that will select the currently focused\n"
        f"node, e.g., {code('.foo[].bar')}\n",
        False,
    ),
)

SEARCH_COMMANDS: tuple[CommandSpec, ...] = (
    (["/pattern"], f"Search forward for the given pattern, or to its {N}th occurrence.\n", True),
    (
        ["?pattern"],
        f"Search backwards for the given pattern, or to its {N}th previous occurrence.\n",
        True,
    ),
    (
        ["*"],
        "Move to the next occurrence of the object key on the focused line\n"
        f"(or move forward {N} occurrences).\n",
        True,
    ),
    (
        ["#"],
        "Move to the previous occurrence of the object key on the focused line\n"
        f"(or move backwards {N} occurrences).\n",
        True,
    ),
    (["n"], f"Move in the search direction to the next match (or forward {N} matches).\n", True),
    (
        ["N"],
        "Move in the opposite of the search direction to the previous match\n"
        f"(or previous {N} matches).\n",
        True,
    ),
)

SEARCH_EXAMPLES: tuple[str, ...] = (
    code("/[1, 2, 3]") + " matches an array: " + code("[1, 2, 3]"),
    code(r"/\[bch\]at")
    + " matches "
    + code("bat")
    + ", "
    + code("cat")
    + " or "
    + code("hat"),
    code("/{}") + " matches an empty object " + code("{}"),
    code(r"/(ha)\{2,3\}") + " matches " + code("haha") + " or " + code("hahaha"),
)

LINE_NUMBER_FLAGS: tuple[tuple[str, str], ...] = (
    ("-n", "--line-numbers"),
    ("-N", "--no-line-numbers"),
    ("-r", "--relative-line-numbers"),
    ("-R", "--no-relative-line-numbers"),
)
LINE_NUMBER_FLAG_HELP = (
    "Show absolute line numbers.",
    "Don't show absolute line numbers.",
    "Show relative line numbers.",
    "Don't show relative line numbers.",
)

LINE_NUMBER_SETTINGS: tuple[tuple[str, str], ...] = (
    (":set number", "Show absolute line numbers."),
    (":set nonumber", "Don't show absolute line numbers."),
    (":set number!", "Toggle whether showing absolute line numbers."),
    (":set relativenumber", "Show relative line numbers."),
    (":set norelativenumber", "Don't show relative line numbers."),
    (":set relativenumber!", "Toggle whether showing relative line numbers."),
)


class UserGuidePage(BasePage):
    """Command reference published as ``user-guide.html``."""

    key = "user-guide"
    filename = "user-guide.html"
    title_suffix = "User Guide"
    path = "/user-guide.html"
    extra_css = USER_GUIDE_CSS
    footer_image_src = "./assets/logo/mascot-rocket.svg"

    def render_content(self) -> str:
        return self.render_basic_usage() + self.render_commands()

    def render_basic_usage(self) -> str:
        jq_link = a("jq", href=JQ_URL)
        return (
            h2("Usage", id="usage")
            + p("jless can read files directly, or read JSON data from standard input:")
            + code_block(
                [
                    f"curl https://api.github.com/repos/{_repo_slug(self.site.repo_url)}"
                    "/commits -o commits.json",
                    "jless commits.json",
                    "cat commits.json | jless",
                ]
            )
            + p(
                "jless can handle newline-delimited JSON, so feel free to pipe in the\n"
                f"output from {jq_link} or some dense log files.\n"
            )
            + p(
                "jless can also handle YAML data, either automatically by detecting\n"
                f"the file extension, or by explicitly passing the {code('--yaml')} flag.\n"
                "If you frequently view YAML data, we suggest the following alias:\n"
            )
            + code_block(['alias yless="jless --yaml"'])
        )

    def render_commands(self) -> str:
        intro = h2("Commands", id="commands") + p(
            "jless has a large suite of vim-inspired commands. Commands prefixed by\n"
            f"<i>count</i> may be preceded by a number {N}, which will\n"
            "perform a command a given number of times.\n"
        )
        return (
            intro
            + _command_list(UTIL_COMMANDS)
            + h3("Moving", id="moving")
            + _command_list(MOVEMENT_COMMANDS)
            + h3("Scrolling", id="scrolling")
            + _command_list(SCROLLING_COMMANDS)
            + self.render_copying_and_printing()
            + self.render_search()
            + self.render_search_input()
            + self.render_modes()
            + self.render_line_numbers()
        )

    def render_copying_and_printing(self) -> str:
        return (
            h3("Copying and Printing", id="copying-and-printing")
            + p(
                "You can copy various parts of the JSON file to your clipboard using\n"
                f"one of the following {code('y')} commands.\n"
            )
            + p(
                f"Alternatively, you can print out values using {code('p')}. This is useful\n"
                "for viewing long string values all at once, or if the clipboard functionality\n"
                "is not working; mouse-tracking will be temporarily disabled, allowing you\n"
                "to use your terminal's native clipboard capabilities to select and copy\n"
                "the desired text.\n"
            )
            + _command_list(COPY_COMMANDS, separator="\n")
        )

    def render_search(self) -> str:
        regex_link = a("documentation of the underlying regex engine:", href=REGEX_URL)
        return (
            h3("Search", id="search")
            + p("jless supports full-text search over the input JSON.")
            + _command_list(SEARCH_COMMANDS)
            + p(
                'Searching uses "smart case" by default. If the input pattern doesn\'t\n'
                "contain any capital letters, a case insensitive search will be\n"
                "performed. If there are any capital letters, it will be case\n"
                "sensitive. You can force a case-sensitive search by appending\n"
                f"{code('/s')} to your query.\n"
            )
            + p(
                "A trailing slash will be removed from a pattern; to search for a\n"
                f"pattern ending in {code('/')} (or {code('/s')}), just add\n"
                f"another {code('/')} to the end.\n"
            )
            + p(
                "Search patterns are interpreted as mostly standard regular\n"
                "expressions, with one exception. Because JSON data contains many\n"
                f"square and curly brackets ({code('[]{}')}), these characters do\n"
                "<i>not</i> take on their usual meanings (specifying characters\n"
                "classes and repetition counts respectively) and are instead\n"
                "interpreted literally.\n"
            )
            + p(
                "To use character classes or repetition counts, escape these\n"
                "characters with a backslash.\n"
            )
            + p("Some examples:")
            + ul("".join(li(example) for example in SEARCH_EXAMPLES))
            + p(
                "For exhaustive documentation of the supported regular expression\n"
                "syntax, check out the\n"
                f"{regex_link}.\n"
            )
        )

    def render_search_input(self) -> str:
        pretty = (
            "{\n"
            '  "a": 1,\n'
            '  "b": true,\n'
            '  "c": [\n'
            "    null,\n"
            "    {},\n"
            "    [],\n"
            '  "hello"\n'
            "  ]\n"
            "}\n"
        )
        return (
            h3("Search Input", id="search-input")
            + p(
                "The search is <i>not</i> performed over the original input, but over a\n"
                "single-line pretty formatted version of the input JSON. Consider the\n"
                "following two ways to format an equivalent JSON blob:\n"
            )
            + code_block(
                ['{"a":1,"b":true,"c":[null,{},[],"hello"]}', None, pretty], prefix=None
            )
            + p("jless will create an internal representation formatted as follows:\n")
            + code_block(['{ "a": 1, "b": true, "c": [null, {}, [], "hello"] }'], prefix=None)
            + p(
                "(No spaces inside empty objects or arrays, one space inside objects\n"
                "with values, no spaces inside array square brackets, no space between\n"
                "an object key and ':', one space after the ':', and one space after\n"
                "commas separating object entries and array elements.)\n"
            )
            + p(
                "Searching will be performed over this internal representation so that\n"
                "patterns can include multiple elements without worrying about newlines\n"
                "or the exact input format.\n"
            )
            + p(
                "When the input is newline-delimited JSON, an actual newline will\n"
                "separate each top-level JSON element in the internal representation.\n"
            )
        )

    def render_modes(self) -> str:
        return (
            h3("Data Mode vs. Line Mode", id="data-mode-vs-line-mode")
            + p(
                'jless starts in "data" mode, which displays the JSON data in a more\n'
                "streamlined fashion: no closing delimiters for objects or arrays, no\n"
                "trailing commas, no quotes around object keys that are valid\n"
                "identifiers in JavaScript. It also shows single-line previews of\n"
                "objects and arrays, and array indexes before array elements. Note that\n"
                "when using full-text search, object keys will still be surrounded by\n"
                "quotes.\n"
            )
            + p(
                f'By pressing {code("m")}, you can switch jless to "line" mode, which\n'
                "displays the input as pretty printed JSON.\n"
            )
            + p(
                f"In line mode you can press {code('%')} when focused on an open or\n"
                "close delimiter of an object or array to jump to its matching pair.\n"
            )
        )

    def render_line_numbers(self) -> str:
        cli_flags = ul(
            "".join(
                li(f"{code(short)}, {code(long)} {help_text}\n")
                for (short, long), help_text in zip(
                    LINE_NUMBER_FLAGS, LINE_NUMBER_FLAG_HELP, strict=True
                )
            )
        )
        settings = "\n".join(
            li(f"{code(setting)} {help_text}\n")
            for setting, help_text in LINE_NUMBER_SETTINGS
        )
        return (
            h3("Line Numbers", id="line-numbers")
            + p(
                "jless supports displaying line numbers, and does so by default. The line\n"
                "numbers do not reflect the position of a node in the original input, but\n"
                "rather what line the node would appear on if the original input were\n"
                "pretty printed.\n"
            )
            + p(
                "jless also supports relative line numbers. When this is enabled, the\n"
                "number displayed next to each line will indicate how many lines away it\n"
                "is from the currently focused line. This makes it easier to use the\n"
                f"{code('j')} and {code('k')} commands with specified counts.\n"
            )
            + p("The appearance of line numbers can be configured via command line flags:\n")
            + cli_flags
            + p("As well as at runtime:")
            + ul(settings)
            + p(
                'When just using relative line numbers, "0" will be displayed next to the\n'
                "currently focused line. When both flags are set, the absolute line\n"
                "number will be displayed next to the focused lines, and all other line\n"
                "numbers will be relative. This matches vim's behavior.\n"
            )
        )


def _repo_slug(repo_url: str) -> str:
    """Return ``owner/name`` from a GitHub repository URL."""
    return "/".join(repo_url.rstrip("/").split("/")[-2:])


__all__ = ["UserGuidePage", "command", "count_command"]
