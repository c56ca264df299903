"""Rewrite rustdoc markup into plain markdown.

Code block start tags are rewritten so the output renders outside rustdoc:

- ```` ``` ````, ```` ```no_run ````, ```` ```ignore ```` and
  ```` ```should_panic ```` (optionally prefixed with ``rust,``) become
  ```` ```rust ````;
- ```` ```text ```` becomes a bare fence;
- fences in any other language are left alone.

Lines starting with ``# `` inside a rust block are hidden, as rustdoc does.
Markdown headings outside code blocks can be pushed one level down so the
crate name can sit at the top level.
"""

from __future__ import annotations

import enum
import re
from typing import Iterable, List, Optional

FENCE = "```"
RUST_FENCE = "```rust"

_CODE_RUST = re.compile(r"^```(rust|((rust,)?(no_run|ignore|should_panic)))?$")
_CODE_TEXT = re.compile(r"^```text$")
_CODE_OTHER = re.compile(r"^```\w[\w,+]*$")


class Section(enum.Enum):
    """Where the current line sits relative to code fences."""

    NORMAL = "normal"
    FENCED_PRIMARY = "fenced_primary"
    FENCED_OTHER = "fenced_other"


class DocProcessor:
    """Line-by-line rewriter carrying fence state across a single document."""

    def __init__(self, indent_headings: bool) -> None:
        self.indent_headings = indent_headings
        self.section = Section.NORMAL

    def process_line(self, line: str) -> Optional[str]:
        """Return the rewritten line, or ``None`` when it should be dropped."""
        # hidden lines in doc tests
        if self.section is Section.FENCED_PRIMARY and line.startswith("# "):
            return None

        if self.section is Section.NORMAL:
            if self.indent_headings and line.startswith("#"):
                return "#" + line
            if _CODE_RUST.match(line):
                self.section = Section.FENCED_PRIMARY
                return RUST_FENCE
            if _CODE_TEXT.match(line):
                self.section = Section.FENCED_OTHER
                return FENCE
            if _CODE_OTHER.match(line):
                self.section = Section.FENCED_OTHER
            return line

        if line == FENCE:
            self.section = Section.NORMAL
        return line


def process_docs(lines: Iterable[str], indent_headings: bool) -> List[str]:
    """Rewrite normalized doc lines, dropping hidden ones."""
    processor = DocProcessor(indent_headings)
    result: List[str] = []
    for line in lines:
        processed = processor.process_line(line)
        if processed is not None:
            result.append(processed)
    return result


def fold_lines(lines: Iterable[str]) -> str:
    """Join processed lines into the final document text."""
    return "\n".join(lines)


__all__ = ["DocProcessor", "FENCE", "RUST_FENCE", "Section", "fold_lines", "process_docs"]
