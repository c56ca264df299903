"""Strip comment markers from raw doc comment lines."""

from __future__ import annotations

from typing import List

from .load import CommentStyle, DocBlock

_MARKER_WIDTH = 3


def normalize_line(line: str) -> str:
    """Strip the `//!` or `/*!` marker and a single following space from `line`.

    The line must still carry its marker; already-normalized text is not a
    valid input. Trailing content is kept as written.
    """
    remainder = line[_MARKER_WIDTH:]
    if not remainder.strip():
        return ""
    if remainder.startswith(" "):
        return remainder[1:]
    return remainder


def extract_docs(block: DocBlock) -> List[str]:
    """Return the doc text of `block` with comment markers removed."""
    if block.style is CommentStyle.LINE:
        return [normalize_line(line) for line in block.lines]

    result: List[str] = []
    for index, line in enumerate(block.lines):
        if index == 0:
            # the opening `/*!` line, dropped when it carries no text
            first = normalize_line(line).rstrip()
            if first:
                result.append(first)
            continue
        result.append(line.rstrip())
    return result


__all__ = ["extract_docs", "normalize_line"]
