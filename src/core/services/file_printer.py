"""File reading for the File Printer.

The handle is owned by a single `with` block, so it is closed whether the
read loop ends by exhaustion, by an exception, or because the consumer
stopped iterating early.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

from core.domain.models import FileContent

DEFAULT_ENCODING = "utf-8"


def read_lines(path: Path, *, encoding: str = DEFAULT_ENCODING) -> Iterator[str]:
    """Yield each line of `path` without its terminator.

    Universal newlines are on, so `\\r\\n` and `\\r` endings arrive as `\\n`.

    Raises:
        OSError: if the file cannot be opened (missing, permissions, directory).
        UnicodeDecodeError: if the content is not valid for `encoding`.
    """

    with path.open("r", encoding=encoding) as reader:
        for line in reader:
            yield line[:-1] if line.endswith("\n") else line


def read_file_content(path: Path, *, encoding: str = DEFAULT_ENCODING) -> FileContent:
    """Read `path` fully into a buffer of `line + "\\n"` chunks."""

    buffer: list[str] = []
    for line in read_lines(path, encoding=encoding):
        buffer.append(line)
        buffer.append("\n")

    return FileContent(path=path, text="".join(buffer), line_count=len(buffer) // 2)
