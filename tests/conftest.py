"""
Pytest configuration for jyrolint tests.
"""
import sys
import os

import pytest

# Make `import jyrolint` work without installing the package.
_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
_SRC_DIR = os.path.join(_ROOT, 'src')

if _SRC_DIR not in sys.path:
	sys.path.insert(0, _SRC_DIR)


@pytest.fixture
def analyze():
	"""Run the full analysis on a text and return (diagnostics, symbols)."""
	from jyrolint.analyzer import DocumentAnalyzer
	from jyrolint.config import AnalyzerOptions

	def run(text, *, warn_on_host_functions=True, registry=None):
		analyzer = DocumentAnalyzer(
			text, "test.jyro",
			AnalyzerOptions(warn_on_host_functions=warn_on_host_functions),
			registry,
		)
		return analyzer.analyze(), analyzer.get_symbols()

	return run
