"""Best-effort symbol table: declarations, loop bindings and first-write property paths."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Set, Tuple

from .lines import MaskedLine, is_skippable, mask_line
from .patterns import FOREACH_BINDING, PROPERTY_ASSIGNMENT, VAR_DECLARATION

logger = logging.getLogger("jyrolint.symbols")

ITERATOR = "iterator"
PROPERTY = "property"


@dataclass(frozen=True)
class Symbol:
    name: str
    type: Optional[str]
    line: int
    character: int

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "type": self.type, "line": self.line, "character": self.character}


class SymbolExtractor:
    """Forward pass producing symbols in document order.

    Only the first assignment to a dotted path defines it; later writes to
    the same path are ignored for the whole document.
    """

    def extract(self, lines: List[str]) -> List[Symbol]:
        symbols: List[Symbol] = []
        seen_paths: Set[str] = set()

        for index, line in enumerate(lines):
            if is_skippable(line):
                continue
            masked = mask_line(line)
            found = self._declarations(masked) + self._iterators(masked)
            found += self._properties(masked, seen_paths)
            found.sort(key=lambda item: item[0])
            symbols.extend(Symbol(name, type_, index, column) for column, name, type_ in found)

        logger.debug("extracted %d symbol(s) from %d line(s)", len(symbols), len(lines))
        return symbols

    @staticmethod
    def _declarations(masked: MaskedLine) -> List[Tuple[int, str, Optional[str]]]:
        return [(masked.raw_column(m.start(1)), m.group(1), m.group(2))
                for m in VAR_DECLARATION.finditer(masked.text)]

    @staticmethod
    def _iterators(masked: MaskedLine) -> List[Tuple[int, str, Optional[str]]]:
        return [(masked.raw_column(m.start(1)), m.group(1), ITERATOR)
                for m in FOREACH_BINDING.finditer(masked.text)]

    @staticmethod
    def _properties(masked: MaskedLine, seen_paths: Set[str]) -> List[Tuple[int, str, Optional[str]]]:
        found = []
        for m in PROPERTY_ASSIGNMENT.finditer(masked.text):
            path = m.group(1)
            if path in seen_paths:
                continue
            seen_paths.add(path)
            found.append((masked.raw_column(m.start(1)), path, PROPERTY))
        return found
