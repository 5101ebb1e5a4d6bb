"""Symbol extraction."""

from jyrolint.lines import split_lines
from jyrolint.symbols import ITERATOR, PROPERTY, Symbol, SymbolExtractor


def extract(text):
    return SymbolExtractor().extract(split_lines(text))


def test_plain_declaration():
    assert extract("var total = 0") == [Symbol("total", None, 0, 4)]


def test_typed_declaration():
    assert extract("  var age: number = 3") == [Symbol("age", "number", 0, 6)]


def test_invalid_type_is_still_recorded():
    assert extract("var age: int")[0].type == "int"


def test_several_declarations_on_one_line():
    found = extract("var a = 1; var b: string = \"x\"")
    assert [(s.name, s.type, s.character) for s in found] == [("a", None, 4), ("b", "string", 15)]


def test_foreach_binding():
    found = extract("foreach order in Data.orders do")
    assert found == [Symbol("order", ITERATOR, 0, 8)]


def test_property_first_write_only():
    source = (
        "Data.orders = []\n"
        "Data.orders = Append(Data.orders, 1)\n"
        "Data.customers = []\n"
    )
    found = extract(source)
    assert [(s.name, s.type, s.line) for s in found] == [
        ("Data.orders", PROPERTY, 0),
        ("Data.customers", PROPERTY, 2),
    ]


def test_nested_property_path():
    found = extract("  Data.summary.count = 1")
    assert found == [Symbol("Data.summary.count", PROPERTY, 0, 2)]


def test_comparison_is_not_an_assignment():
    assert extract("if Data.status == \"open\" then") == []


def test_line_order_is_by_column():
    found = extract("foreach x in Data.list do Data.seen = true; var y = x")
    assert [s.name for s in found] == ["x", "Data.seen", "y"]


def test_strings_and_comments_ignored():
    source = 'Data.note = "var hidden = 1" # var other = 2\n# var commented = 3'
    found = extract(source)
    assert [s.name for s in found] == ["Data.note"]


def test_declaration_after_string_reports_raw_column():
    line = 'Data.s = "abcdef"; var late = 1'
    found = extract(line)
    assert found[1] == Symbol("late", None, 0, line.index("late"))


def test_document_order_across_lines():
    found = extract("var a = 1\n\nvar b = 2\r\nforeach c in Data.x do\nend")
    assert [(s.name, s.line) for s in found] == [("a", 0), ("b", 2), ("c", 3)]
