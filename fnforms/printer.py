# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Render syntax nodes back into reader syntax.

For anything `fnforms.reader` can produce, `read_form(to_source(node)) == node`.
"""

from __future__ import annotations

from .nodes import (
	Keyword,
	ListForm,
	Mapping,
	Opaque,
	OrderedSequence,
	StringLiteral,
	Symbol,
	SyntaxNode,
)

_STRING_ESCAPES = {
	"\\": "\\\\",
	'"': '\\"',
	"\n": "\\n",
	"\t": "\\t",
	"\r": "\\r",
}


def _quote_string(value: str) -> str:
	return '"' + "".join(_STRING_ESCAPES.get(ch, ch) for ch in value) + '"'


def _render_opaque(payload: object) -> str:
	if payload is None:
		return "nil"
	if payload is True:
		return "true"
	if payload is False:
		return "false"
	return repr(payload)


def to_source(node: SyntaxNode) -> str:
	"""Render `node` (recursively) as source text."""
	if isinstance(node, Symbol):
		return node.name
	if isinstance(node, Keyword):
		return f":{node.name}"
	if isinstance(node, StringLiteral):
		return _quote_string(node.value)
	if isinstance(node, OrderedSequence):
		return "[" + " ".join(to_source(n) for n in node.items) + "]"
	if isinstance(node, ListForm):
		return "(" + " ".join(to_source(n) for n in node.items) + ")"
	if isinstance(node, Mapping):
		return "{" + ", ".join(f"{to_source(k)} {to_source(v)}" for k, v in node.entries) + "}"
	if isinstance(node, Opaque):
		return _render_opaque(node.payload)
	raise TypeError(f"not a syntax node: {node!r}")


__all__ = ["to_source"]
