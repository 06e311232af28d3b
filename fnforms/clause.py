# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
One arity-variant of a definition: `([params] {:pre ... :post ...}? body...)`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Sequence, Tuple, Union

from .errors import ErrorKind, make_invalid_argument_error
from .nodes import ListForm, Mapping, OrderedSequence, Symbol, SyntaxNode, is_mapping
from .prefix import extract_prefix, identity
from .printer import to_source

_AMPERSAND = Symbol("&")


class ClauseShape(Enum):
	"""
	Which branch of the clause grammar a declaration took.

	Decided once from the first element after the optional name and then
	used for every clause of that declaration; it only affects which error is
	reported for a bad parameter declaration.
	"""

	SINGLE = "single"
	MULTI = "multi"


@dataclass(frozen=True)
class Clause:
	params: SyntaxNode
	prepost: Optional[Mapping] = None
	body: Tuple[SyntaxNode, ...] = ()

	def __post_init__(self) -> None:
		object.__setattr__(self, "body", tuple(self.body))

	@property
	def arity(self) -> int:
		"""Number of binders in the parameter vector (`&` and its rest binder excluded)."""
		items = self.params.items if isinstance(self.params, OrderedSequence) else ()
		count = 0
		for item in items:
			if item == _AMPERSAND:
				break
			count += 1
		return count

	@property
	def variadic(self) -> bool:
		items = self.params.items if isinstance(self.params, OrderedSequence) else ()
		return any(item == _AMPERSAND for item in items)

	def to_dict(self) -> Dict[str, Any]:
		return {
			"params": to_source(self.params),
			"prepost": to_source(self.prepost) if self.prepost is not None else None,
			"body": [to_source(form) for form in self.body],
		}


RawClause = Union[ListForm, OrderedSequence, Sequence[SyntaxNode]]


def _clause_items(raw_form: object) -> Tuple[SyntaxNode, ...]:
	if isinstance(raw_form, (ListForm, OrderedSequence)):
		return raw_form.items
	if isinstance(raw_form, (tuple, list)):
		return tuple(raw_form)
	raise make_invalid_argument_error(
		f"Invalid signature {to_source(raw_form)} should be a list",
		ErrorKind.INVALID_SIGNATURE,
		form=raw_form,
	)


def parse_clause(raw_form: RawClause, shape: ClauseShape) -> Clause:
	"""
	Split a raw clause into params, optional pre/post map and body.

	`raw_form` is a clause list in the multi-clause case, or the whole
	remainder of the declaration in the single-clause case.
	"""
	items = _clause_items(raw_form)
	params = items[0] if items else None
	if not isinstance(params, OrderedSequence):
		if shape is ClauseShape.MULTI:
			shown = to_source(params) if params is not None else "nil"
			raise make_invalid_argument_error(
				f"Parameter declaration {shown} should be a vector",
				ErrorKind.MALFORMED_PARAMETERS,
				form=params,
			)
		whole = ListForm(items)
		raise make_invalid_argument_error(
			f"Invalid signature {to_source(whole)} should be a list",
			ErrorKind.INVALID_SIGNATURE,
			form=whole,
		)
	prepost, body = extract_prefix(items[1:], identity, is_mapping, None)
	return Clause(params=params, prepost=prepost, body=body)


def build_clause(clause: Clause) -> Tuple[SyntaxNode, ...]:
	"""Inverse of `parse_clause`: `(params, prepost?, *body)`."""
	head: Tuple[SyntaxNode, ...] = (clause.params,)
	if clause.prepost is not None:
		head += (clause.prepost,)
	return head + tuple(clause.body)


__all__ = ["Clause", "ClauseShape", "RawClause", "build_clause", "parse_clause"]
