# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""Dispatch on whole `(fn ...)` / `(defn ...)` forms by their head symbol."""

from __future__ import annotations

from typing import Union

from .defn import DEFN_HEAD, ParsedDefn, build_defn, parse_defn
from .errors import ErrorKind, make_invalid_argument_error
from .fn import FN_HEAD, ParsedFn, build_fn, parse_fn
from .nodes import ListForm, SyntaxNode
from .printer import to_source

Parsed = Union[ParsedFn, ParsedDefn]


def is_definition_form(form: SyntaxNode) -> bool:
	return isinstance(form, ListForm) and form.head in (FN_HEAD, DEFN_HEAD)


def parse_form(form: SyntaxNode) -> Parsed:
	if isinstance(form, ListForm):
		if form.head == FN_HEAD:
			return parse_fn(form.items[1:])
		if form.head == DEFN_HEAD:
			return parse_defn(form.items[1:])
	raise make_invalid_argument_error(
		f"Expected an fn or defn form, got {to_source(form)}",
		ErrorKind.UNSUPPORTED_FORM,
		form=form,
	)


def build_form(parsed: Parsed) -> ListForm:
	if isinstance(parsed, ParsedDefn):
		return build_defn(parsed)
	if isinstance(parsed, ParsedFn):
		return build_fn(parsed)
	raise TypeError(f"not a parsed definition: {parsed!r}")


__all__ = ["Parsed", "build_form", "is_definition_form", "parse_form"]
