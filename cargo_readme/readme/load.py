"""Load the raw inner doc comment block from Rust source."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator, List

from ..errors import DocLoadError, MixedCommentStyleError
from ..logging import get_logger

LINE_MARKER = "//!"
BLOCK_MARKER = "/*!"

_BLOCK_TOKEN = re.compile(r"/\*|\*/")

logger = get_logger("load")


class CommentStyle(enum.Enum):
    """Scanning state of the loader."""

    NONE = "none"
    LINE = "line"
    BLOCK = "block"


@dataclass
class DocBlock:
    """Raw doc comment lines, all of a single comment style."""

    style: CommentStyle = CommentStyle.NONE
    lines: List[str] = field(default_factory=list)

    def __bool__(self) -> bool:
        return bool(self.lines)

    def __len__(self) -> int:
        return len(self.lines)


def load_docs(lines: Iterable[str]) -> DocBlock:
    """Return the doc block found in `lines`.

    `lines` may be any iterable of text lines, including an open file; it is
    consumed lazily and reading stops once the block ends.
    """
    block = DocBlock()
    for style, line in _scan(lines):
        block.style = style
        block.lines.append(line)
    logger.debug("Loaded %d doc lines (%s style)", len(block.lines), block.style.value)
    return block


def load_docs_from_path(path: Path) -> DocBlock:
    """Open `path` as UTF-8 and load its doc block."""
    try:
        with path.open("r", encoding="utf-8") as source:
            return load_docs(source)
    except UnicodeDecodeError as exc:
        raise DocLoadError(f"Could not decode '{path}' as UTF-8: {exc}") from exc
    except OSError as exc:
        raise DocLoadError(f"Could not open file '{path}': {exc}") from exc


def iter_doc_lines(lines: Iterable[str]) -> Iterator[str]:
    """Yield the raw doc comment lines found in `lines`."""
    for _, line in _scan(lines):
        yield line


def _scan(lines: Iterable[str]) -> Iterator[tuple[CommentStyle, str]]:
    style = CommentStyle.NONE
    nesting = 0

    for raw in lines:
        line = raw.rstrip("\r\n")

        if style is CommentStyle.NONE:
            if line.startswith(LINE_MARKER):
                style = CommentStyle.LINE
                yield style, line
            elif line.startswith(BLOCK_MARKER):
                style = CommentStyle.BLOCK
                end, nesting = _find_block_end(line, len(BLOCK_MARKER), nesting)
                if end is None:
                    yield style, line
                    continue
                # single line block, `/*! text */`
                if line[len(BLOCK_MARKER):end].strip():
                    yield style, line[:end]
                return
        elif style is CommentStyle.LINE:
            if line.startswith(LINE_MARKER):
                yield style, line
            elif line.startswith(BLOCK_MARKER):
                raise MixedCommentStyleError()
            else:
                # doc ends, code starts
                return
        else:
            end, nesting = _find_block_end(line, 0, nesting)
            if end is None:
                yield style, line
                continue
            truncated = line[:end]
            if truncated.strip():
                yield style, truncated
            return


def _find_block_end(line: str, start: int, nesting: int) -> tuple[int | None, int]:
    """Return the offset of the close token ending the block (if any) and the new nesting."""
    for match in _BLOCK_TOKEN.finditer(line, start):
        if match.group() == "/*":
            nesting += 1
            continue
        nesting -= 1
        if nesting < 0:
            return match.start(), nesting
    return None, nesting


__all__ = [
    "BLOCK_MARKER",
    "LINE_MARKER",
    "CommentStyle",
    "DocBlock",
    "iter_doc_lines",
    "load_docs",
    "load_docs_from_path",
]
