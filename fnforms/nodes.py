# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Code-as-data tree consumed and produced by the fn/defn parsers.

Only the shapes the definition grammar cares about get their own node type;
everything else travels as `Opaque` and is never looked into. All nodes are
frozen and keep their children in tuples, so two trees compare equal exactly
when they are structurally equal.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional, Tuple, Union


@dataclass(frozen=True)
class Symbol:
	name: str


@dataclass(frozen=True)
class Keyword:
	name: str


@dataclass(frozen=True)
class StringLiteral:
	value: str


@dataclass(frozen=True, eq=False)
class Opaque:
	"""
	Any literal or form the grammar does not interpret (numbers, booleans, nil...).

	Two opaque nodes are equal only when their payloads have the same type and
	compare equal, so `1`, `1.0` and `true` stay distinct.
	"""

	payload: Any

	def __eq__(self, other: object) -> bool:
		if not isinstance(other, Opaque):
			return NotImplemented
		return type(self.payload) is type(other.payload) and self.payload == other.payload

	def __hash__(self) -> int:
		return hash((type(self.payload), self.payload))


@dataclass(frozen=True)
class OrderedSequence:
	"""Positional grouping (`[a b]`); parameter lists are always one of these."""

	items: Tuple["SyntaxNode", ...] = ()

	def __post_init__(self) -> None:
		object.__setattr__(self, "items", tuple(self.items))

	def __iter__(self) -> Iterator["SyntaxNode"]:
		return iter(self.items)

	def __len__(self) -> int:
		return len(self.items)


@dataclass(frozen=True)
class ListForm:
	"""Code list (`(f a b)`)."""

	items: Tuple["SyntaxNode", ...] = ()

	def __post_init__(self) -> None:
		object.__setattr__(self, "items", tuple(self.items))

	def __iter__(self) -> Iterator["SyntaxNode"]:
		return iter(self.items)

	def __len__(self) -> int:
		return len(self.items)

	@property
	def head(self) -> Optional["SyntaxNode"]:
		return self.items[0] if self.items else None


@dataclass(frozen=True)
class Mapping:
	"""
	Associative literal (`{:k v}`).

	Entries keep their source order. Keys must be unique; a duplicate key is a
	construction error rather than a silent overwrite.
	"""

	entries: Tuple[Tuple["SyntaxNode", "SyntaxNode"], ...] = ()

	def __post_init__(self) -> None:
		entries = tuple((k, v) for k, v in self.entries)
		seen: list[SyntaxNode] = []
		for key, _value in entries:
			if key in seen:
				raise ValueError(f"duplicate mapping key: {key!r}")
			seen.append(key)
		object.__setattr__(self, "entries", entries)

	@classmethod
	def from_pairs(cls, pairs: Iterable[Tuple["SyntaxNode", "SyntaxNode"]]) -> "Mapping":
		return cls(tuple(pairs))

	def __len__(self) -> int:
		return len(self.entries)

	def is_empty(self) -> bool:
		return not self.entries

	def keys(self) -> Tuple["SyntaxNode", ...]:
		return tuple(k for k, _ in self.entries)

	def get(self, key: "SyntaxNode", default: Optional["SyntaxNode"] = None) -> Optional["SyntaxNode"]:
		for k, v in self.entries:
			if k == key:
				return v
		return default

	def merge(self, other: "Mapping") -> "Mapping":
		"""
		Return a new mapping with `other`'s entries laid over this one.

		On a key collision the value from `other` wins but the key keeps the
		position it had here; new keys are appended in `other`'s order.
		"""
		merged: list[Tuple[SyntaxNode, SyntaxNode]] = list(self.entries)
		for key, value in other.entries:
			for idx, (existing, _) in enumerate(merged):
				if existing == key:
					merged[idx] = (key, value)
					break
			else:
				merged.append((key, value))
		return Mapping(tuple(merged))


SyntaxNode = Union[Symbol, Keyword, StringLiteral, Opaque, OrderedSequence, ListForm, Mapping]


def is_symbol(node: object) -> bool:
	return isinstance(node, Symbol)


def is_ordered_sequence(node: object) -> bool:
	return isinstance(node, OrderedSequence)


def is_list_form(node: object) -> bool:
	return isinstance(node, ListForm)


def is_mapping(node: object) -> bool:
	return isinstance(node, Mapping)


def is_string_literal(node: object) -> bool:
	return isinstance(node, StringLiteral)


__all__ = [
	"Keyword",
	"ListForm",
	"Mapping",
	"Opaque",
	"OrderedSequence",
	"StringLiteral",
	"Symbol",
	"SyntaxNode",
	"is_list_form",
	"is_mapping",
	"is_ordered_sequence",
	"is_string_literal",
	"is_symbol",
]
