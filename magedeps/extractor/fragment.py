"""Object-literal fragment parser.

Mage-init declarations are neither JSON nor standalone JavaScript: they are
object literals, or the bodies of object literals, embedded in HTML. A
fragment is wrapped in just enough syntax to become a JavaScript expression,
parsed with tree-sitter, and the resulting object literal is reduced to the
typed nodes in :mod:`magedeps.extractor.models`.
"""

from __future__ import annotations

import functools
import math
import re
import sys
from decimal import Decimal

import tree_sitter_javascript as tsjs
from tree_sitter import Language, Node, Parser

from magedeps.exceptions import FragmentSyntaxError, ShapeMismatchError
from magedeps.extractor.models import (
    Expression,
    ObjectExpression,
    OpaqueExpression,
    Property,
)

_SIMPLE_ESCAPES = {
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
    "0": "\0",
}

_HEX_ESCAPE_RE = re.compile(r"^\\(?:x([0-9a-fA-F]{2})|u([0-9a-fA-F]{4})|u\{([0-9a-fA-F]+)\})$")

_LEGACY_OCTAL_RE = re.compile(r"^0[0-7]+$")

# tree-sitter-javascript accepts JSX; any JSX expression is rooted at one of these.
_JSX_TYPES = frozenset({"jsx_element", "jsx_self_closing_element"})

# Extractors read keys at most one level below the top-level object.
_REDUCED_DEPTH = 1


class _InvalidLiteral(ValueError):
    """A literal the grammar accepts but JavaScript itself rejects."""


@functools.lru_cache(maxsize=1)
def _language() -> Language:
    return Language(tsjs.language())


def parse_object_literal(fragment: str) -> ObjectExpression:
    """Parse a complete object literal, e.g. ``{"Module/Name": {}}``.

    The fragment is wrapped in parentheses so that a leading ``{`` is read
    as an object literal rather than a block statement.
    """
    return _parse_wrapped(fragment, f"({fragment})")


def parse_binding_list(fragment: str) -> ObjectExpression:
    """Parse a bracket-free binding list, e.g. ``mageInit: {...}, click: go``."""
    return _parse_wrapped(fragment, f"({{{fragment}}})")


def _parse_wrapped(fragment: str, source: str) -> ObjectExpression:
    tree = Parser(_language()).parse(source.encode("utf-8"))
    root = tree.root_node
    if root.has_error:
        raise FragmentSyntaxError(fragment, "invalid JavaScript")

    try:
        _reject_non_standard(root)
        statements = _named(root)
        if not statements or statements[0].type != "expression_statement":
            raise ShapeMismatchError(fragment, "not an expression statement")

        inner = _named(statements[0])
        if len(inner) != 1:
            raise ShapeMismatchError(fragment, "not a single expression")

        expression = _expression(inner[0], _REDUCED_DEPTH)
    except _InvalidLiteral as exc:
        raise FragmentSyntaxError(fragment, str(exc)) from exc
    if not isinstance(expression, ObjectExpression):
        raise ShapeMismatchError(fragment, f"expected object literal, got {expression.kind}")
    return expression


def _reject_non_standard(root: Node) -> None:
    """Raise for syntax tree-sitter accepts but a JavaScript engine would not."""
    stack = [root]
    while stack:
        node = stack.pop()
        if node.type in _JSX_TYPES:
            raise _InvalidLiteral("JSX is not plain JavaScript")
        if node.type == "escape_sequence":
            _unescape(_text(node))
        stack.extend(node.named_children)


def _named(node: Node) -> list[Node]:
    """Named children of *node*, comments excluded."""
    return [child for child in node.named_children if child.type != "comment"]


def _expression(node: Node, depth: int) -> Expression:
    """Reduce *node*; object values more than *depth* levels down stay opaque."""
    while node.type == "parenthesized_expression":
        inner = _named(node)
        if len(inner) != 1:
            break
        node = inner[0]

    if node.type == "object" and depth >= 0:
        return ObjectExpression(tuple(_property(child, depth - 1) for child in _named(node)))
    return OpaqueExpression(kind=node.type, source=_text(node))


def _property(node: Node, depth: int) -> Property:
    if node.type == "pair":
        key_node = node.child_by_field_name("key")
        value_node = node.child_by_field_name("value")
        key = _key_value(key_node) if key_node is not None else None
        if value_node is None:
            return Property(key=key, value=OpaqueExpression(kind="missing", source=""))
        return Property(key=key, value=_expression(value_node, depth))

    if node.type == "shorthand_property_identifier":
        name = _text(node)
        return Property(key=name, value=OpaqueExpression(kind="identifier", source=name))

    # method_definition, spread_element and anything newer in the grammar
    return Property(key=None, value=OpaqueExpression(kind=node.type, source=_text(node)))


def _key_value(node: Node) -> str | None:
    if node.type in ("property_identifier", "identifier"):
        return _text(node)
    if node.type == "number":
        return _number_key(_text(node))
    if node.type == "string":
        return _string_value(node)
    # computed_property_name: the key is only known at runtime
    return None


def _number_key(literal: str) -> str:
    """The property name a numeric literal key stands for, e.g. ``0x10`` -> ``"16"``."""
    text = literal.replace("_", "")
    if text.endswith("n"):
        try:
            return str(int(text[:-1], 0))
        except ValueError as exc:
            raise _InvalidLiteral(f"invalid BigInt literal {literal}") from exc
    try:
        if _LEGACY_OCTAL_RE.match(text):
            value = float(int(text, 8))
        elif text[:2].lower() in ("0x", "0o", "0b"):
            value = float(int(text, 0))
        else:
            value = float(text)
    except OverflowError:
        value = math.inf
    return _js_number_string(value)


def _js_number_string(value: float) -> str:
    if math.isinf(value):
        return "Infinity"
    if value.is_integer() and value < 1e21:
        return str(int(value))

    d = Decimal(repr(value)).normalize()
    _, digits_tuple, exponent = d.as_tuple()
    digits = "".join(str(digit) for digit in digits_tuple)
    k = len(digits)
    n = exponent + k  # position of the decimal point
    if k <= n <= 21:
        return digits + "0" * (n - k)
    if 0 < n <= 21:
        return f"{digits[:n]}.{digits[n:]}"
    if -6 < n <= 0:
        return f"0.{'0' * -n}{digits}"
    e = n - 1
    mantissa = digits[0] + (f".{digits[1:]}" if k > 1 else "")
    return f"{mantissa}e{'+' if e >= 0 else '-'}{abs(e)}"


def _string_value(node: Node) -> str:
    parts: list[str] = []
    for child in node.named_children:
        if child.type == "string_fragment":
            parts.append(_text(child))
        elif child.type == "escape_sequence":
            parts.append(_unescape(_text(child)))
    return "".join(parts)


def _unescape(sequence: str) -> str:
    m = _HEX_ESCAPE_RE.match(sequence)
    if m:
        code_point = int(next(g for g in m.groups() if g), 16)
        if code_point > sys.maxunicode:
            raise _InvalidLiteral(f"code point out of range in {sequence}")
        return chr(code_point)
    body = sequence[1:]
    if body.startswith(("\r\n", "\n", "\r", "\u2028", "\u2029")):
        return ""  # line continuation
    return _SIMPLE_ESCAPES.get(body, body)


def _text(node: Node) -> str:
    return node.text.decode("utf-8") if node.text is not None else ""
