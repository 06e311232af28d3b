# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Function literals: `(fn name? [params] body...)` and `(fn name? ([params] body...)+)`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence, Tuple

from .clause import Clause, ClauseShape, build_clause, parse_clause
from .errors import ErrorKind, make_invalid_argument_error
from .nodes import ListForm, OrderedSequence, Symbol, SyntaxNode, is_symbol
from .prefix import extract_prefix, identity

FN_HEAD = Symbol("fn")


@dataclass(frozen=True)
class ParsedFn:
	name: Optional[Symbol]
	clauses: Tuple[Clause, ...]

	def __post_init__(self) -> None:
		object.__setattr__(self, "clauses", tuple(self.clauses))
		if not self.clauses:
			raise ValueError("fn needs at least one clause")

	def to_dict(self) -> Dict[str, Any]:
		return {
			"form": "fn",
			"name": self.name.name if self.name is not None else None,
			"clauses": [c.to_dict() for c in self.clauses],
		}


def clause_shape(rest: Sequence[SyntaxNode]) -> ClauseShape:
	"""
	Decide between the single- and multi-clause grammar for `rest`.

	A leading parameter vector means `rest` is one clause; a leading list
	means every element of `rest` is a clause. Anything else has no
	parameter declaration at all.
	"""
	first = rest[0] if len(rest) > 0 else None
	if isinstance(first, OrderedSequence):
		return ClauseShape.SINGLE
	if isinstance(first, ListForm):
		return ClauseShape.MULTI
	raise make_invalid_argument_error(
		"Parameter declaration missing",
		ErrorKind.MISSING_PARAMETERS,
		form=first,
	)


def parse_clauses(rest: Sequence[SyntaxNode]) -> Tuple[Clause, ...]:
	"""Parse everything after the name (and, for defn, the doc/metadata) into clauses."""
	shape = clause_shape(rest)
	if shape is ClauseShape.SINGLE:
		return (parse_clause(tuple(rest), shape),)
	return tuple(parse_clause(raw, shape) for raw in rest)


def build_clause_forms(clauses: Sequence[Clause]) -> Tuple[SyntaxNode, ...]:
	"""
	Inverse of `parse_clauses`.

	A lone clause is spliced in place so the single-clause shape survives;
	multiple clauses are each wrapped in their own list.
	"""
	if len(clauses) == 1:
		return build_clause(clauses[0])
	return tuple(ListForm(build_clause(c)) for c in clauses)


def parse_fn(forms: Sequence[SyntaxNode]) -> ParsedFn:
	"""Parse the arguments of an `fn` form (everything after the `fn` head)."""
	name, rest = extract_prefix(tuple(forms), identity, is_symbol, None)
	return ParsedFn(name=name, clauses=parse_clauses(rest))


def build_fn(parsed: ParsedFn) -> ListForm:
	head: Tuple[SyntaxNode, ...] = (FN_HEAD,)
	if parsed.name is not None:
		head += (parsed.name,)
	return ListForm(head + build_clause_forms(parsed.clauses))


__all__ = [
	"FN_HEAD",
	"ParsedFn",
	"build_clause_forms",
	"build_fn",
	"clause_shape",
	"parse_clauses",
	"parse_fn",
]
