"""
Document analyzer
=================

Public entry point of the analysis core.  One instance is bound to one
document snapshot and one set of options::

    from jyrolint import DocumentAnalyzer, AnalyzerOptions

    analyzer = DocumentAnalyzer(text, "file:///transform.jyro",
                                AnalyzerOptions(warn_on_host_functions=False))
    for diagnostic in analyzer.analyze():
        print(diagnostic)

``analyze`` runs the syntax check, the symbol extraction and the semantic
validation in that order, since the last pass needs the symbol table.
Nothing here raises for any input text.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from .config import AnalyzerOptions
from .diagnostics import Diagnostic
from .lines import split_lines
from .registry import DEFAULT_REGISTRY, FunctionRegistry
from .semantics import SemanticValidator
from .symbols import Symbol, SymbolExtractor
from .syntax import SyntaxChecker

logger = logging.getLogger("jyrolint.analyzer")


class DocumentAnalyzer:

    def __init__(
        self,
        text: str,
        uri: str = "",
        options: Optional[AnalyzerOptions] = None,
        registry: Optional[FunctionRegistry] = None,
    ):
        self.text = text
        self.uri = uri
        self.options = options if options is not None else AnalyzerOptions()
        self.registry = registry if registry is not None else DEFAULT_REGISTRY
        self.lines: List[str] = split_lines(text)
        self._diagnostics: List[Diagnostic] = []
        self._symbols: Optional[List[Symbol]] = None

    def analyze(self) -> List[Diagnostic]:
        """Run all passes and return the diagnostics in pass order."""
        self._diagnostics = []
        self._symbols = None

        syntax = SyntaxChecker(self.registry, self.options.warn_on_host_functions).check(self.lines)
        self._symbols = SymbolExtractor().extract(self.lines)
        semantic = SemanticValidator(self.registry).validate(self.lines, self._symbols)

        self._diagnostics = syntax + semantic
        logger.debug("%s: %d line(s), %d diagnostic(s), %d symbol(s)",
                     self.uri or "<text>", len(self.lines), len(self._diagnostics), len(self._symbols))
        return list(self._diagnostics)

    def get_symbols(self) -> List[Symbol]:
        """Symbols from the last ``analyze``; extracted on demand otherwise."""
        if self._symbols is None:
            self._symbols = SymbolExtractor().extract(self.lines)
        return list(self._symbols)

    @property
    def diagnostics(self) -> List[Diagnostic]:
        return list(self._diagnostics)


def analyze_text(text: str, uri: str = "", options: Optional[AnalyzerOptions] = None) -> List[Diagnostic]:
    return DocumentAnalyzer(text, uri, options).analyze()
