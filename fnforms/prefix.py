# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Optional-prefix extraction.

Every optional leading element in the definition grammar (name, docstring,
metadata map, pre/post map) is peeled off with `extract_prefix`.
"""

from __future__ import annotations

from typing import Callable, Sequence, Tuple, TypeVar

T = TypeVar("T")
S = TypeVar("S", bound=Sequence)


def extract_prefix(
	items: S,
	transform: Callable[[object], T],
	predicate: Callable[[object], bool],
	default: T,
) -> Tuple[T, S]:
	"""
	Take the first element of `items` if `predicate` accepts it.

	Returns `(transform(first), items[1:])` on a match and `(default, items)`
	otherwise; in the latter case `items` is handed back as the same object.
	At most one element is consumed. Exceptions from `transform`/`predicate`
	propagate untouched.
	"""
	if len(items) > 0 and predicate(items[0]):
		return transform(items[0]), items[1:]
	return default, items


def identity(value: T) -> T:
	return value


__all__ = ["extract_prefix", "identity"]
