#!/usr/bin/env python3
"""
Core Utilities

Features:
- File I/O helpers
- Line splitting for fixed-width text
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import IO, Any, Literal, overload

# only LF and CRLF end a line
_LINE_BREAK = re.compile(r"\r?\n")

# region Common functions


@overload
def open_for_read(path: Path, binary: Literal[True], **kwargs: Any) -> IO[bytes]: ...
@overload
def open_for_read(path: Path, binary: Literal[False], **kwargs: Any) -> IO[str]: ...


def open_for_read(path: Path, binary: bool = False, **kwargs: Any) -> IO[Any]:
    mode = "rb" if binary else "r"
    if not binary:
        # keep "\r" so the parser sees the line endings exactly as written
        kwargs.setdefault("newline", "")
    return open(path, mode, **kwargs)


def split_lines(text: str) -> list[tuple[int, str]]:
    """
    Split ``text`` on ``\\n`` / ``\\r\\n`` and drop empty lines.

    Returns ``(line_no, line)`` pairs; ``line_no`` is 1-based and still counts
    the dropped empty lines so it points at the source file. Lines holding
    only whitespace are kept.
    """
    return [
        (idx, line)
        for idx, line in enumerate(_LINE_BREAK.split(text), start=1)
        if len(line) > 0
    ]


# endregion Common functions
