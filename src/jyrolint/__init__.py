"""jyrolint - fast, line-oriented static analysis for Jyro scripts."""

from .analyzer import DocumentAnalyzer, analyze_text
from .config import AnalyzerOptions, ConfigError, resolve_options
from .diagnostics import Diagnostic, Position, Range, Severity
from .registry import DEFAULT_REGISTRY, FunctionRegistry, FunctionSignature
from .symbols import Symbol

__version__ = "0.1.0"

__all__ = [
    'DocumentAnalyzer',
    'analyze_text',
    'AnalyzerOptions',
    'ConfigError',
    'resolve_options',
    'Diagnostic',
    'Position',
    'Range',
    'Severity',
    'DEFAULT_REGISTRY',
    'FunctionRegistry',
    'FunctionSignature',
    'Symbol',
]
