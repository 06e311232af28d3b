# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Named definitions: `(defn name "doc"? {meta}? clauses...)`.

Parsing folds the docstring into the metadata map under `:doc`; building
always emits the metadata as one map, so `(defn f "d" [x] x)` rebuilds as
`(defn f {:doc "d"} [x] x)`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Sequence, Tuple

from .clause import Clause
from .errors import ErrorKind, make_invalid_argument_error
from .fn import build_clause_forms, parse_clauses
from .nodes import Keyword, ListForm, Mapping, StringLiteral, Symbol, SyntaxNode, is_mapping, is_string_literal
from .prefix import extract_prefix
from .printer import to_source

DEFN_HEAD = Symbol("defn")
DOC_KEY = Keyword("doc")


@dataclass(frozen=True)
class ParsedDefn:
	name: Symbol
	clauses: Tuple[Clause, ...]
	metadata: Mapping = field(default_factory=Mapping)

	def __post_init__(self) -> None:
		object.__setattr__(self, "clauses", tuple(self.clauses))
		if not self.clauses:
			raise ValueError("defn needs at least one clause")

	@property
	def docstring(self) -> Optional[str]:
		doc = self.metadata.get(DOC_KEY)
		return doc.value if isinstance(doc, StringLiteral) else None

	def to_dict(self) -> Dict[str, Any]:
		return {
			"form": "defn",
			"name": self.name.name,
			"metadata": {to_source(k): to_source(v) for k, v in self.metadata.entries},
			"clauses": [c.to_dict() for c in self.clauses],
		}


def _doc_metadata(doc: StringLiteral) -> Mapping:
	return Mapping(((DOC_KEY, doc),))


def parse_defn(forms: Sequence[SyntaxNode]) -> ParsedDefn:
	"""Parse the arguments of a `defn` form (everything after the `defn` head)."""
	forms = tuple(forms)
	name = forms[0] if forms else None
	if not isinstance(name, Symbol):
		raise make_invalid_argument_error(
			"First argument to defn must be a symbol",
			ErrorKind.MISSING_NAME,
			form=name,
		)
	metadata, rest = extract_prefix(forms[1:], _doc_metadata, is_string_literal, Mapping())
	metadata, rest = extract_prefix(rest, metadata.merge, is_mapping, metadata)
	return ParsedDefn(name=name, metadata=metadata, clauses=parse_clauses(rest))


def build_defn(parsed: ParsedDefn) -> ListForm:
	head: Tuple[SyntaxNode, ...] = (DEFN_HEAD, parsed.name)
	if not parsed.metadata.is_empty():
		head += (parsed.metadata,)
	return ListForm(head + build_clause_forms(parsed.clauses))


__all__ = ["DEFN_HEAD", "DOC_KEY", "ParsedDefn", "build_defn", "parse_defn"]
