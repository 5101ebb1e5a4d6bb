"""Reserved words and the named pattern rules shared by the analysis passes."""

import re

COMMENT_MARKER = "#"
ROOT_BINDING = "Data"

KEYWORDS = frozenset({
    'var', 'if', 'then', 'else', 'elseif', 'end', 'switch', 'do', 'case', 'default',
    'while', 'foreach', 'in', 'return', 'fail', 'break', 'continue',
    'true', 'false', 'null', 'and', 'or', 'not', 'is', ROOT_BINDING,
})

# Order matters: it is the order used in the unknown-type message.
TYPE_KEYWORDS = ('number', 'string', 'boolean', 'object', 'array')

LOOP_KINDS = frozenset({'while', 'foreach'})

# ── Lexical ────────────────────────────────────────────────────────────
STRING_LITERAL = re.compile(r'"[^"]*"')
IDENTIFIER = re.compile(r'\b([a-zA-Z_]\w*)\b')
CALL_OPEN = re.compile(r'\s*\(')

# ── Structure ──────────────────────────────────────────────────────────
CONTINUATION = re.compile(r'^\s*elseif\b', re.IGNORECASE)
BLOCK_OPEN = re.compile(r'\b(if|while|foreach|switch)\b')
BLOCK_CLOSE = re.compile(r'\bend\b')
LOOP_CONTROL = re.compile(r'\b(break|continue)\b')
LOOP_BREAK = re.compile(r'\bbreak\b')

# ── Declarations ───────────────────────────────────────────────────────
VAR_LINE = re.compile(r'^\s*var\s+')
TYPE_ANNOTATION = re.compile(r'^(\s*)var\s+\w+\s*:\s*(\w+)')
VAR_DECLARATION = re.compile(r'\bvar\s+(\w+)(?:\s*:\s*(\w+))?')
FOREACH_BINDING = re.compile(r'\bforeach\s+(\w+)\s+in\b')
PROPERTY_ASSIGNMENT = re.compile(r'\b([a-zA-Z_]\w*(?:\.[a-zA-Z_]\w*)+)\s*=(?!=)')

# ── Calls ──────────────────────────────────────────────────────────────
PASCAL_CALL = re.compile(r'\b([A-Z][a-zA-Z0-9]*)\s*\(')

BRACKET_PAIRS = (('(', ')'), ('{', '}'), ('[', ']'))
