"""End-to-end behaviour of DocumentAnalyzer."""

from jyrolint import DocumentAnalyzer, analyze_text
from jyrolint.config import AnalyzerOptions
from jyrolint.diagnostics import Severity
from jyrolint.symbols import Symbol


def test_reference_example(analyze):
    diagnostics, symbols = analyze("var x = 5\nif x > 3 then\n  y = 10\nend")

    assert [s.name for s in symbols] == ["x"]
    assert symbols[0] == Symbol("x", None, 0, 4)
    assert len(diagnostics) == 1
    diag = diagnostics[0]
    assert diag.severity == Severity.WARNING
    assert diag.message == 'Undefined variable "y"'
    assert diag.line == 2
    assert diag.range.start.character == 2


def test_syntax_diagnostics_come_before_semantic_ones(analyze):
    diagnostics, _ = analyze("end\nData.x = ghost")
    assert [d.severity for d in diagnostics] == [Severity.ERROR, Severity.WARNING]


def test_host_function_option(analyze):
    source = "Data.sent = Notify(Data.email)"
    on, _ = analyze(source, warn_on_host_functions=True)
    off, _ = analyze(source, warn_on_host_functions=False)
    assert [d.severity for d in on] == [Severity.INFORMATION]
    assert off == []


def test_property_symbols_once_per_path(analyze):
    source = (
        "Data.orders = []\n"
        "Data.orders = Append(Data.orders, 1)\n"
        "Data.customers = []"
    )
    _, symbols = analyze(source)
    assert [s.name for s in symbols] == ["Data.orders", "Data.customers"]


def test_get_symbols_without_analyze():
    analyzer = DocumentAnalyzer("var a = 1\nforeach b in Data.list do\nend")
    assert [(s.name, s.type) for s in analyzer.get_symbols()] == [("a", None), ("b", "iterator")]
    assert analyzer.diagnostics == []


def test_analyze_is_repeatable():
    analyzer = DocumentAnalyzer("while true do\n  q = 1\n")
    first = analyzer.analyze()
    second = analyzer.analyze()
    assert first == second
    assert len(first) == 2
    assert len(analyzer.get_symbols()) == 0


def test_symbols_returned_are_copies():
    analyzer = DocumentAnalyzer("var a = 1")
    analyzer.get_symbols().clear()
    assert len(analyzer.get_symbols()) == 1


def test_default_options():
    analyzer = DocumentAnalyzer("")
    assert analyzer.options == AnalyzerOptions(warn_on_host_functions=True)
    assert analyzer.analyze() == []


def test_garbage_input_never_raises():
    text = 'end end )))((( "\n\r\n\x00 if while foreach "x" : : var : int\nbreak continue ]'
    diagnostics = analyze_text(text)
    assert all(d.source == "jyro" for d in diagnostics)


def test_diagnostic_to_dict():
    diag = analyze_text("var age: int")[0]
    assert diag.to_dict() == {
        "severity": 1,
        "range": {"start": {"line": 0, "character": 9}, "end": {"line": 0, "character": 12}},
        "message": 'Unknown type "int". Expected: number, string, boolean, object, or array',
        "source": "jyro",
    }


def test_realistic_script(analyze):
    source = (
        "var total: number = 0\n"
        "Data.flagged = []\n"
        "foreach order in Data.orders do\n"
        "    if order.amount > 1000 then\n"
        "        Data.flagged = Append(Data.flagged, order.id)\n"
        "        continue\n"
        "    end\n"
        "    total = total + order.amount\n"
        "end\n"
        "Data.total = Round(total, 2)\n"
        "Data.count = Length(Data.flagged) # flagged orders\n"
    )
    diagnostics, symbols = analyze(source)
    assert diagnostics == []
    assert [(s.name, s.type) for s in symbols] == [
        ("total", "number"),
        ("Data.flagged", "property"),
        ("order", "iterator"),
        ("Data.total", "property"),
        ("Data.count", "property"),
    ]
