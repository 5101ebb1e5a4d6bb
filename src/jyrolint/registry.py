"""
Jyro Standard Library Function Registry
=======================================

Read-only catalog of the 57 built-in functions and their signatures.

The analyzer only needs the function *names* (exact match for the
host-function note, case-insensitive match when deciding whether an
identifier is a variable), but the full signatures are kept so that
outline, hover and the ``jyrolint functions`` command can describe them.

Usage::

    from jyrolint.registry import DEFAULT_REGISTRY

    "Upper" in DEFAULT_REGISTRY          # True, case-sensitive
    DEFAULT_REGISTRY.has_name("upper")   # True, case-insensitive
    DEFAULT_REGISTRY.get("upper").label()
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, FrozenSet, Iterable, Iterator, List, Optional, Tuple, Union


class JyroType(Enum):
    NULL = "null"
    NUMBER = "number"
    STRING = "string"
    BOOLEAN = "boolean"
    OBJECT = "object"
    ARRAY = "array"


TypeRef = Union[JyroType, Tuple[JyroType, ...]]

_ANY: Tuple[JyroType, ...] = (
    JyroType.NULL, JyroType.NUMBER, JyroType.STRING,
    JyroType.BOOLEAN, JyroType.OBJECT, JyroType.ARRAY,
)
_SCALAR: Tuple[JyroType, ...] = (
    JyroType.NULL, JyroType.NUMBER, JyroType.STRING, JyroType.BOOLEAN,
)
_NUMBERS: Tuple[JyroType, ...] = (JyroType.NUMBER, JyroType.ARRAY)
_MAYBE_NUMBER: Tuple[JyroType, ...] = (JyroType.NUMBER, JyroType.NULL)

FUNCTION_CATEGORIES = ("String", "Array", "Math", "DateTime", "Utility")


def _type_label(ref: TypeRef) -> str:
    if isinstance(ref, JyroType):
        return ref.value
    return " | ".join(t.value for t in ref)


@dataclass(frozen=True)
class FunctionParameter:
    name: str
    type: TypeRef
    description: str
    optional: bool = False

    def label(self) -> str:
        marker = "?" if self.optional else ""
        return f"{self.name}{marker}: {_type_label(self.type)}"


@dataclass(frozen=True)
class FunctionSignature:
    name: str
    category: str
    parameters: Tuple[FunctionParameter, ...]
    return_type: TypeRef
    description: str
    examples: Tuple[str, ...] = ()

    def label(self) -> str:
        """Render the signature as ``Name(a: string, b?: number) -> type``."""
        params = ", ".join(p.label() for p in self.parameters)
        return f"{self.name}({params}) -> {_type_label(self.return_type)}"


def _p(name: str, type_: TypeRef, description: str, optional: bool = False) -> FunctionParameter:
    return FunctionParameter(name, type_, description, optional)


def _fn(name, category, params, returns, description, *examples) -> FunctionSignature:
    return FunctionSignature(name, category, tuple(params), returns, description, tuple(examples))


S, N, B, O, A = JyroType.STRING, JyroType.NUMBER, JyroType.BOOLEAN, JyroType.OBJECT, JyroType.ARRAY

STDLIB_FUNCTIONS: Tuple[FunctionSignature, ...] = (
    # ── String ──────────────────────────────────────────────────────────
    _fn("Upper", "String", [_p("str", S, "The string to convert")], S,
        "Converts a string to uppercase", 'Upper("hello") # Returns "HELLO"'),
    _fn("Lower", "String", [_p("str", S, "The string to convert")], S,
        "Converts a string to lowercase", 'Lower("HELLO") # Returns "hello"'),
    _fn("Trim", "String", [_p("str", S, "The string to trim")], S,
        "Removes leading and trailing whitespace from a string"),
    _fn("Replace", "String",
        [_p("str", S, "The input string"),
         _p("search", S, "The substring to search for"),
         _p("replace", S, "The replacement string")], S,
        "Replaces all occurrences of a substring with another string"),
    _fn("Contains", "String",
        [_p("str", S, "The string to search in"),
         _p("search", S, "The substring to search for")], B,
        "Checks if a string contains a substring"),
    _fn("StartsWith", "String",
        [_p("str", S, "The string to check"), _p("prefix", S, "The prefix to check for")], B,
        "Checks if a string starts with a specific prefix"),
    _fn("EndsWith", "String",
        [_p("str", S, "The string to check"), _p("suffix", S, "The suffix to check for")], B,
        "Checks if a string ends with a specific suffix"),
    _fn("Split", "String",
        [_p("str", S, "The string to split"), _p("delimiter", S, "The delimiter to split on")], A,
        "Splits a string into an array using a delimiter"),
    _fn("Join", "String",
        [_p("arr", A, "The array to join"), _p("separator", S, "The separator between elements")], S,
        "Joins an array into a string with a separator"),
    _fn("ToNumber", "String", [_p("str", S, "The string to convert")], N,
        "Converts a string to a number"),
    _fn("RandomString", "String",
        [_p("length", N, "The length of the string to generate"),
         _p("characterSet", S, "Characters to draw from", optional=True)], S,
        "Generates a cryptographically secure random string of specified length from a character set"),

    # ── Array ───────────────────────────────────────────────────────────
    _fn("Length", "Array", [_p("arr", A, "The array to measure")], N,
        "Returns the number of elements in an array"),
    _fn("First", "Array", [_p("arr", A, "The array to get first element from")], _ANY,
        "Returns the first element of an array, or null if empty"),
    _fn("Last", "Array", [_p("arr", A, "The array to get last element from")], _ANY,
        "Returns the last element of an array, or null if empty"),
    _fn("Append", "Array",
        [_p("arr", A, "The array to append to"), _p("value", _ANY, "The value to append")], A,
        "Adds a value to the end of an array and returns the modified array"),
    _fn("Pop", "Array", [_p("arr", A, "The array to remove from")], _ANY,
        "Removes and returns the last element from an array"),
    _fn("IndexOf", "Array",
        [_p("source", (S, A), "The string or array to search"),
         _p("search", _ANY, "The value to search for")], N,
        "Returns the index of the first occurrence of a value in a string or array, or -1 if not found"),
    _fn("Insert", "Array",
        [_p("arr", A, "The array to insert into"),
         _p("index", N, "The index to insert at"),
         _p("value", _ANY, "The value to insert")], A,
        "Inserts a value at a specific index in an array"),
    _fn("RemoveAt", "Array",
        [_p("arr", A, "The array to remove from"), _p("index", N, "The index to remove")], A,
        "Removes the element at a specific index from an array"),
    _fn("RemoveLast", "Array", [_p("arr", A, "The array to remove from")], A,
        "Removes the last element from an array and returns the modified array"),
    _fn("Clear", "Array", [_p("arr", A, "The array to clear")], A,
        "Removes all elements from an array"),
    _fn("Filter", "Array",
        [_p("arr", A, "The array to filter"),
         _p("field", S, "The field name to check"),
         _p("operator", S, "The comparison operator (==, !=, <, >, <=, >=)"),
         _p("value", _SCALAR, "The value to compare against")], A,
        "Filters array elements based on a field condition"),
    _fn("CountIf", "Array",
        [_p("arr", A, "The array to count"),
         _p("field", S, "The field name to check"),
         _p("operator", S, "The comparison operator"),
         _p("value", _SCALAR, "The value to compare against")], N,
        "Counts array elements that match a field condition"),
    _fn("Sort", "Array", [_p("arr", A, "The array to sort")], A,
        "Sorts an array in ascending order (numbers or strings)"),
    _fn("SortByField", "Array",
        [_p("arr", A, "The array of objects to sort"),
         _p("field", S, "The field name to sort by"),
         _p("direction", S, 'Sort direction ("asc" or "desc")')], A,
        "Sorts an array of objects by a specific field"),
    _fn("Reverse", "Array", [_p("arr", A, "The array to reverse")], A,
        "Reverses the order of elements in an array"),
    _fn("MergeArrays", "Array", [_p("arrays", A, "Multiple arrays to merge (variadic)")], A,
        "Merges multiple arrays into a single array, concatenating all elements in order"),
    _fn("Take", "Array",
        [_p("arr", A, "The source array to take elements from"),
         _p("count", N, "The number of elements to take from the beginning")], A,
        "Returns a new array containing the first n elements from a source array"),
    _fn("GroupBy", "Array",
        [_p("arr", A, "The array of objects to group"),
         _p("fieldName", S, "The field name or nested path to group by")], O,
        "Groups an array of objects by a field into an object of arrays keyed by the distinct values"),
    _fn("RandomChoice", "Array", [_p("arr", A, "The array to select a random element from")], _ANY,
        "Selects a random element from an array, or returns null if empty"),

    # ── Math ────────────────────────────────────────────────────────────
    _fn("Min", "Math", [_p("values", _NUMBERS, "Numbers to compare (variadic or single array)")],
        _MAYBE_NUMBER, "Returns the minimum numeric value, or null if no numeric arguments provided"),
    _fn("Max", "Math", [_p("values", _NUMBERS, "Numbers to compare (variadic or single array)")],
        _MAYBE_NUMBER, "Returns the maximum numeric value, or null if no numeric arguments provided"),
    _fn("Sum", "Math", [_p("values", _NUMBERS, "Numbers to sum (variadic or single array)")],
        _MAYBE_NUMBER, "Returns the sum of all numeric values, or null if no numeric arguments provided"),
    _fn("Average", "Math", [_p("values", _NUMBERS, "Numbers to average (variadic or single array)")],
        _MAYBE_NUMBER, "Returns the arithmetic mean of all numeric values"),
    _fn("Median", "Math", [_p("values", _NUMBERS, "Numbers to find median of")],
        _MAYBE_NUMBER, "Returns the median (middle value) of all numeric values"),
    _fn("Mode", "Math", [_p("values", _NUMBERS, "Numbers to find mode of")],
        _MAYBE_NUMBER, "Returns the most frequently occurring value"),
    _fn("Abs", "Math", [_p("num", N, "The number")], N,
        "Returns the absolute value of a number"),
    _fn("Round", "Math",
        [_p("num", N, "The number to round"), _p("decimals", N, "Number of decimal places")], N,
        "Rounds a number to a specified number of decimal places"),
    _fn("RandomInt", "Math",
        [_p("min", N, "The inclusive lower bound", optional=True),
         _p("max", N, "The exclusive upper bound")], N,
        "Generates a cryptographically secure random integer in [min, max)"),

    # ── DateTime ────────────────────────────────────────────────────────
    _fn("Now", "DateTime", [], S, "Returns the current UTC date and time in ISO 8601 format"),
    _fn("Today", "DateTime", [], S, "Returns the current UTC date at midnight in ISO 8601 format"),
    _fn("ParseDate", "DateTime", [_p("str", S, "The date string to parse")], S,
        "Parses a date string and returns it in ISO 8601 format"),
    _fn("FormatDate", "DateTime",
        [_p("date", S, "The date in ISO format"), _p("format", S, ".NET date format pattern")], S,
        "Formats a date using a .NET format pattern"),
    _fn("DateAdd", "DateTime",
        [_p("date", S, "The date in ISO format"),
         _p("amount", N, "Amount to add (can be negative)"),
         _p("unit", S, "Unit: days, weeks, months, years, hours, minutes, seconds")], S,
        "Adds a time interval to a date"),
    _fn("DateDiff", "DateTime",
        [_p("endDate", S, "The end date"),
         _p("startDate", S, "The start date"),
         _p("unit", S, "Unit to return difference in")], N,
        "Calculates the difference between two dates"),
    _fn("DatePart", "DateTime",
        [_p("date", S, "The date in ISO format"),
         _p("part", S, "Part: year, month, day, hour, minute, second, dayofweek, dayofyear")], N,
        "Extracts a specific part from a date"),

    # ── Utility ─────────────────────────────────────────────────────────
    _fn("TypeOf", "Utility", [_p("value", _ANY, "The value to inspect")], S,
        "Returns the type name of a value"),
    _fn("IsNull", "Utility", [_p("value", _ANY, "The value to check")], B,
        "Returns true if the value is null"),
    _fn("Exists", "Utility", [_p("value", _ANY, "The value to check")], B,
        "Returns true if the value is not null"),
    _fn("Equal", "Utility",
        [_p("a", _ANY, "The first value"), _p("b", _ANY, "The second value")], B,
        "Performs deep equality comparison"),
    _fn("NotEqual", "Utility",
        [_p("a", _ANY, "The first value"), _p("b", _ANY, "The second value")], B,
        "Returns true if values are not deeply equal"),
    _fn("Base64Encode", "Utility", [_p("str", S, "The string to encode")], S,
        "Encodes a string to Base64"),
    _fn("Base64Decode", "Utility", [_p("str", S, "The Base64 string to decode")], S,
        "Decodes a Base64 string"),
    _fn("NewGuid", "Utility", [], S, "Generates a new GUID string"),
    _fn("CallScript", "Utility",
        [_p("source", S, "The script source code"), _p("data", O, "The data object to pass")], O,
        "Executes a child script with cycle detection",
        'CallScript("Data.result = Data.value * 2", { "value": 5 })'),
    _fn("Keys", "Utility", [_p("obj", O, "The object to extract keys from")], A,
        "Returns an array containing all property names (keys) of an object"),
    _fn("InvokeRestMethod", "Utility",
        [_p("url", S, "The URL to call"),
         _p("method", S, "HTTP method (GET, POST, PUT, DELETE). Defaults to GET", optional=True),
         _p("headers", O, "Request headers as key-value pairs", optional=True),
         _p("body", _ANY, "Request body (automatically JSON-serialized)", optional=True)], O,
        "Executes HTTP REST API calls and returns statusCode, isSuccessStatusCode, content and headers"),
)

del S, N, B, O, A


class FunctionRegistry:
    """Immutable set of function signatures.

    Never mutated after construction, so one instance can be shared by
    any number of analyzers running on different threads.
    """

    __slots__ = ("_by_name", "_by_folded", "_names")

    def __init__(self, functions: Iterable[FunctionSignature]):
        by_name: Dict[str, FunctionSignature] = {}
        for fn in functions:
            if fn.name in by_name:
                raise ValueError(f"duplicate function name: {fn.name}")
            by_name[fn.name] = fn
        self._by_name = by_name
        self._by_folded = {name.lower(): fn for name, fn in by_name.items()}
        self._names: FrozenSet[str] = frozenset(by_name)

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def __iter__(self) -> Iterator[FunctionSignature]:
        return iter(self._by_name.values())

    def __len__(self) -> int:
        return len(self._by_name)

    def names(self) -> List[str]:
        return list(self._by_name)

    def has_exact(self, name: str) -> bool:
        return name in self._names

    def has_name(self, name: str) -> bool:
        """Case-insensitive membership test."""
        return name.lower() in self._by_folded

    def get(self, name: str) -> Optional[FunctionSignature]:
        return self._by_folded.get(name.lower())

    def by_category(self, category: str) -> List[FunctionSignature]:
        return [fn for fn in self._by_name.values() if fn.category == category]

    def categories(self) -> List[str]:
        seen: List[str] = []
        for fn in self._by_name.values():
            if fn.category not in seen:
                seen.append(fn.category)
        return seen

    def restricted_to(self, names: Iterable[str]) -> "FunctionRegistry":
        """Return a registry holding only the given functions (case-insensitive)."""
        wanted = {n.lower() for n in names}
        return FunctionRegistry(fn for fn in self if fn.name.lower() in wanted)

    def without(self, names: Iterable[str]) -> "FunctionRegistry":
        dropped = {n.lower() for n in names}
        return FunctionRegistry(fn for fn in self if fn.name.lower() not in dropped)

    def __repr__(self) -> str:
        return f"FunctionRegistry({len(self)} functions)"


DEFAULT_REGISTRY = FunctionRegistry(STDLIB_FUNCTIONS)
