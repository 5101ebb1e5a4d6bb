"""Semantic validation: flag identifiers that no declaration accounts for."""

from __future__ import annotations

import logging
from typing import FrozenSet, Iterable, List, Optional

from .diagnostics import Diagnostic, DiagnosticCollector
from .lines import MaskedLine, is_skippable, mask_line
from .patterns import CALL_OPEN, IDENTIFIER, KEYWORDS, ROOT_BINDING, TYPE_KEYWORDS
from .registry import DEFAULT_REGISTRY, FunctionRegistry
from .symbols import Symbol

logger = logging.getLogger("jyrolint.semantics")


def declared_names(symbols: Iterable[Symbol]) -> FrozenSet[str]:
    """Symbol names plus the implicit root data binding."""
    return frozenset([s.name for s in symbols] + [ROOT_BINDING])


class SemanticValidator:
    """Second pass over the lines, checking usage against the symbol table.

    Every bare identifier counts as a use, including the target of a plain
    ``name = value`` assignment.
    """

    def __init__(self, registry: Optional[FunctionRegistry] = None):
        self.registry = registry if registry is not None else DEFAULT_REGISTRY

    def validate(self, lines: List[str], symbols: Iterable[Symbol]) -> List[Diagnostic]:
        declared = declared_names(symbols)
        out = DiagnosticCollector()

        for index, line in enumerate(lines):
            if is_skippable(line):
                continue
            masked = mask_line(line)
            for name, column in self._undeclared(masked, declared):
                out.warning(index, column, column + len(name), f'Undefined variable "{name}"')

        logger.debug("%d undefined-variable warning(s)", len(out))
        return out.to_list()

    def is_reserved(self, name: str) -> bool:
        return name in KEYWORDS or name in TYPE_KEYWORDS or self.registry.has_name(name)

    def _undeclared(self, masked: MaskedLine, declared: FrozenSet[str]):
        text = masked.text
        for match in IDENTIFIER.finditer(text):
            name = match.group(1)
            start, end = match.span(1)
            if start > 0 and text[start - 1] == '.':
                continue
            if CALL_OPEN.match(text, end):
                continue
            if self.is_reserved(name) or name in declared:
                continue
            yield name, masked.raw_column(start)
