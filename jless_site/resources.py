"""Filesystem resources shared by a single site generation run.

A run reads the shared base stylesheet once and writes one HTML file per
page. Both sides raise :class:`ResourceUnavailableError` so callers can report
the offending path without caring whether it was a read or a write.

Examples
--------
>>> from pathlib import Path
>>> stylesheet = BaseStylesheet(Path("base.css"))  # doctest: +SKIP
>>> stylesheet.text.startswith("body")  # doctest: +SKIP
True
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

_OUTPUT_FILE_MODE = 0o644


class ResourceUnavailableError(OSError):
    """Raised when a stylesheet cannot be read or a page cannot be written."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class BaseStylesheet:
    """Site-wide CSS loaded lazily and reused by every page in a run."""

    def __init__(self, path: Path) -> None:
        self.path = path
        self._text: str | None = None

    @property
    def text(self) -> str:
        """Return the stylesheet contents, reading the file on first access.

        Raises
        ------
        ResourceUnavailableError
            If the stylesheet cannot be read.
        """
        if self._text is None:
            try:
                self._text = self.path.read_text(encoding="utf-8")
            except OSError as exc:
                raise ResourceUnavailableError(self.path, str(exc)) from exc
        return self._text


def write_text_atomic(path: Path, text: str) -> Path:
    """Write ``text`` to ``path`` via a sibling temporary file and rename.

    The destination is either fully replaced or left untouched; the temporary
    file is removed when the write fails.
    """
    try:
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{path.name}-", suffix=".tmp", dir=path.parent
        )
    except OSError as exc:
        raise ResourceUnavailableError(path, str(exc)) from exc
    tmp = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as handle:
            handle.write(text)
        os.chmod(tmp, _OUTPUT_FILE_MODE)
        tmp.replace(path)
    except OSError as exc:
        tmp.unlink(missing_ok=True)
        raise ResourceUnavailableError(path, str(exc)) from exc
    return path


__all__ = ["BaseStylesheet", "ResourceUnavailableError", "write_text_atomic"]
