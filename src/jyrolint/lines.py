"""
Line normalization and masking.

Every pass works on the document one line at a time.  ``split_lines``
produces the line list whose indices are used for all position reports,
and ``mask_line`` hides string contents and trailing comments so that
keywords or brackets inside them never trigger a rule.  The masked text
can be shorter than the raw line, so ``MaskedLine.raw_column`` translates
match offsets back to raw columns.
"""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass
from typing import List, Tuple

from .patterns import COMMENT_MARKER, STRING_LITERAL

STRING_PLACEHOLDER = '""'


def split_lines(text: str) -> List[str]:
    """Split on ``\\n`` and drop a single trailing ``\\r`` from each line."""
    return [line[:-1] if line.endswith('\r') else line for line in text.split('\n')]


def is_skippable(line: str) -> bool:
    """True for blank lines and whole-line comments."""
    stripped = line.strip()
    return not stripped or stripped.startswith(COMMENT_MARKER)


def leading_whitespace(line: str) -> int:
    return len(line) - len(line.lstrip())


@dataclass(frozen=True)
class MaskedLine:
    raw: str
    text: str
    # (first masked column after a placeholder, cumulative shift from there on)
    shifts: Tuple[Tuple[int, int], ...] = ()

    def raw_column(self, column: int) -> int:
        if not self.shifts:
            return column
        idx = bisect_right([start for start, _ in self.shifts], column)
        if idx == 0:
            return column
        return column + self.shifts[idx - 1][1]


def mask_line(line: str, comment_first: bool = False) -> MaskedLine:
    """Blank string contents to ``""`` and cut the trailing comment.

    By default strings are masked first, so a ``#`` inside a literal does
    not start a comment.  With ``comment_first`` the line is cut at the
    first ``#`` before strings are masked.  Leading whitespace is kept, so
    columns before the first string literal are identical in the raw and
    masked text.
    """
    source = line
    if comment_first:
        cut = source.find(COMMENT_MARKER)
        if cut != -1:
            source = source[:cut]

    parts: List[str] = []
    shifts: List[Tuple[int, int]] = []
    masked_len = 0
    shift = 0
    prev = 0
    for match in STRING_LITERAL.finditer(source):
        chunk = source[prev:match.start()]
        parts.append(chunk)
        parts.append(STRING_PLACEHOLDER)
        masked_len += len(chunk) + len(STRING_PLACEHOLDER)
        shift += (match.end() - match.start()) - len(STRING_PLACEHOLDER)
        if shift:
            shifts.append((masked_len, shift))
        prev = match.end()
    parts.append(source[prev:])
    text = ''.join(parts)

    if not comment_first:
        comment = text.find(COMMENT_MARKER)
        if comment != -1:
            text = text[:comment]
    return MaskedLine(line, text, tuple(shifts))
