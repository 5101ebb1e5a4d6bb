"""
Structural / syntax checker
===========================

One forward pass over the document.  A stack of open blocks spans the
whole document; the loop depth decides whether ``break``/``continue`` are
legal.  Each rule is its own method and sees both the raw line (for quote
counting and columns) and the masked line (for keyword detection).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from .diagnostics import Diagnostic, DiagnosticCollector
from .lines import MaskedLine, is_skippable, leading_whitespace, mask_line
from .patterns import (
    BLOCK_CLOSE, BLOCK_OPEN, BRACKET_PAIRS, CONTINUATION, KEYWORDS, LOOP_BREAK,
    LOOP_CONTROL, LOOP_KINDS, PASCAL_CALL, TYPE_ANNOTATION, TYPE_KEYWORDS, VAR_LINE,
)
from .registry import DEFAULT_REGISTRY, FunctionRegistry

logger = logging.getLogger("jyrolint.syntax")

_TYPE_LIST = ", ".join(TYPE_KEYWORDS[:-1]) + ", or " + TYPE_KEYWORDS[-1]


@dataclass(frozen=True)
class BlockEntry:
    kind: str
    opening_line: int


class SyntaxChecker:
    """Checks block nesting, string balance, loop control and type names."""

    def __init__(self, registry: Optional[FunctionRegistry] = None, warn_on_host_functions: bool = True):
        self.registry = registry if registry is not None else DEFAULT_REGISTRY
        self.warn_on_host_functions = warn_on_host_functions

    def check(self, lines: List[str]) -> List[Diagnostic]:
        out = DiagnosticCollector()
        stack: List[BlockEntry] = []
        loop_depth = 0

        for index, line in enumerate(lines):
            if is_skippable(line):
                continue
            masked = mask_line(line, comment_first=True)

            self._check_quotes(out, index, line)
            self._bracket_hook(index, masked)

            opened = self._open_block(index, masked)
            if opened is not None:
                stack.append(opened)
                if opened.kind in LOOP_KINDS:
                    loop_depth += 1

            if BLOCK_CLOSE.search(masked.text):
                if not stack:
                    self._content_error(out, index, line,
                                        'Unexpected "end" without matching block start')
                else:
                    closed = stack.pop()
                    if closed.kind in LOOP_KINDS:
                        loop_depth -= 1

            self._check_loop_control(out, index, line, masked, loop_depth)
            self._check_type_annotation(out, index, line)
            if self.warn_on_host_functions:
                self._check_host_calls(out, index, masked)

        if stack:
            innermost = stack[-1]
            logger.debug("%d block(s) left open at end of document", len(stack))
            out.error(innermost.opening_line, 0, len(lines[innermost.opening_line]),
                      f'Unclosed "{innermost.kind}" block - missing "end"')

        return out.to_list()

    # ------------------------------------------------------------------
    # Rules
    # ------------------------------------------------------------------

    @staticmethod
    def _check_quotes(out: DiagnosticCollector, index: int, line: str) -> None:
        if line.count('"') % 2 != 0:
            out.error(index, 0, len(line), 'Unclosed string literal')

    @staticmethod
    def bracket_balance(text: str) -> Dict[str, int]:
        """Open-minus-close count for each bracket pair on one line."""
        return {opener + closer: text.count(opener) - text.count(closer)
                for opener, closer in BRACKET_PAIRS}

    def _bracket_hook(self, index: int, masked: MaskedLine) -> None:
        # Multi-line bracketed expressions are legal, so imbalance is not reported.
        balance = self.bracket_balance(masked.text)
        if any(balance.values()):
            logger.debug("line %d: bracket balance %s", index, balance)

    @staticmethod
    def is_continuation(masked: MaskedLine) -> bool:
        """``elseif`` extends the enclosing ``if`` rather than opening a block."""
        return CONTINUATION.match(masked.text) is not None

    def _open_block(self, index: int, masked: MaskedLine) -> Optional[BlockEntry]:
        if self.is_continuation(masked):
            return None
        match = BLOCK_OPEN.search(masked.text)
        if match is None:
            return None
        return BlockEntry(match.group(1), index)

    @staticmethod
    def _content_error(out: DiagnosticCollector, index: int, line: str, message: str) -> None:
        out.error(index, leading_whitespace(line), len(line.rstrip()), message)

    def _check_loop_control(self, out, index, line, masked, loop_depth) -> None:
        if loop_depth > 0:
            return
        if not LOOP_CONTROL.search(masked.text):
            return
        # "break" wins when both keywords are on the line.
        keyword = 'break' if LOOP_BREAK.search(masked.text) else 'continue'
        self._content_error(out, index, line, f'"{keyword}" can only be used inside loops')

    @staticmethod
    def _check_type_annotation(out: DiagnosticCollector, index: int, line: str) -> None:
        if not VAR_LINE.match(line):
            return
        match = TYPE_ANNOTATION.match(line)
        if match is None:
            return
        type_name = match.group(2)
        if type_name in TYPE_KEYWORDS:
            return
        out.error(index, match.start(2), match.end(2),
                  f'Unknown type "{type_name}". Expected: {_TYPE_LIST}')

    def _check_host_calls(self, out: DiagnosticCollector, index: int, masked: MaskedLine) -> None:
        for match in PASCAL_CALL.finditer(masked.text):
            name = match.group(1)
            if name in KEYWORDS or self.registry.has_exact(name):
                continue
            start = masked.raw_column(match.start(1))
            out.information(index, start, start + len(name),
                            f'Referenced function "{name}" will need to be made available at runtime')
