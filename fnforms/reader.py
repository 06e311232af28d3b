# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Read source text into syntax nodes.

This is the host side of the fn/defn parsers: it turns text such as
`(defn f "doc" [x] x)` into the node tree `parse_form` consumes. The grammar
lives in `grammar.lark` next to this module.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Tuple

from lark import Lark, Token, Tree
from lark.exceptions import UnexpectedCharacters, UnexpectedEOF, UnexpectedInput, UnexpectedToken

from .errors import ReaderError
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

_GRAMMAR_PATH = Path(__file__).with_name("grammar.lark")
_GRAMMAR_SRC = _GRAMMAR_PATH.read_text()

_PARSER = Lark(
	_GRAMMAR_SRC,
	parser="lalr",
	lexer="basic",
	start="start",
	propagate_positions=True,
	maybe_placeholders=False,
)

_QUOTE = Symbol("quote")

_LITERAL_SYMBOLS = {
	"true": Opaque(True),
	"false": Opaque(False),
	"nil": Opaque(None),
}

_ESCAPES = {"n": "\n", "t": "\t", "r": "\r", '"': '"', "\\": "\\"}
_ESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)


def _decode_string_token(tok: Token) -> str:
	content = tok.value[1:-1]  # strip quotes

	def _replace(match: re.Match) -> str:
		ch = match.group(1)
		if ch not in _ESCAPES:
			raise ReaderError(f"unsupported escape \\{ch} in string", line=tok.line, column=tok.column)
		return _ESCAPES[ch]

	return _ESCAPE_RE.sub(_replace, content)


def _decode_number(tok: Token) -> Opaque:
	text = tok.value
	if any(ch in text for ch in ".eE"):
		return Opaque(float(text))
	return Opaque(int(text))


def _name(node: Tree | Token) -> str:
	if isinstance(node, Tree):
		data = node.data
		if isinstance(data, Token):
			return data.value
		return data
	if isinstance(node, Token):
		return node.type
	return str(node)


def _meta_pos(tree: Tree) -> Tuple[int | None, int | None]:
	meta = tree.meta
	return getattr(meta, "line", None), getattr(meta, "column", None)


def _build_map(tree: Tree) -> Mapping:
	line, column = _meta_pos(tree)
	items = [_build_form(child) for child in tree.children]
	if len(items) % 2:
		raise ReaderError("map literal must contain an even number of forms", line=line, column=column)
	pairs = tuple(zip(items[0::2], items[1::2]))
	try:
		return Mapping(pairs)
	except ValueError as err:
		raise ReaderError(str(err), line=line, column=column) from err


def _build_form(tree: Tree) -> SyntaxNode:
	kind = _name(tree)
	if kind == "list":
		return ListForm(tuple(_build_form(child) for child in tree.children))
	if kind == "vector":
		return OrderedSequence(tuple(_build_form(child) for child in tree.children))
	if kind == "map":
		return _build_map(tree)
	if kind == "quoted":
		return ListForm((_QUOTE, _build_form(tree.children[0])))
	tok = tree.children[0]
	if kind == "string":
		return StringLiteral(_decode_string_token(tok))
	if kind == "keyword":
		return Keyword(tok.value[1:])
	if kind == "number":
		return _decode_number(tok)
	if kind == "symbol":
		return _LITERAL_SYMBOLS.get(tok.value, Symbol(tok.value))
	raise AssertionError(f"unexpected parse tree node: {kind}")


def _reader_error(exc: UnexpectedInput) -> ReaderError:
	if isinstance(exc, UnexpectedEOF):
		return ReaderError("unexpected end of input")
	if isinstance(exc, UnexpectedToken) and exc.token.type == "$END":
		return ReaderError("unexpected end of input")
	if isinstance(exc, UnexpectedToken):
		return ReaderError(f"unexpected {exc.token.value!r}", line=exc.line, column=exc.column)
	if isinstance(exc, UnexpectedCharacters):
		return ReaderError(f"unexpected character {exc.char!r}", line=exc.line, column=exc.column)
	return ReaderError(str(exc))


def read_forms(source: str) -> Tuple[SyntaxNode, ...]:
	"""Read every top-level form in `source`."""
	try:
		tree = _PARSER.parse(source)
	except UnexpectedInput as exc:
		raise _reader_error(exc) from exc
	return tuple(_build_form(child) for child in tree.children)


def read_form(source: str) -> SyntaxNode:
	"""Read exactly one form from `source`."""
	forms = read_forms(source)
	if len(forms) != 1:
		raise ReaderError(f"expected exactly one form, found {len(forms)}")
	return forms[0]


__all__ = ["read_form", "read_forms"]
