# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

import pytest

from fnforms.clause import Clause, ClauseShape
from fnforms.errors import ErrorKind, FnFormError
from fnforms.fn import FN_HEAD, ParsedFn, build_fn, clause_shape, parse_fn
from fnforms.nodes import ListForm, Mapping, Opaque, OrderedSequence, Symbol
from fnforms.reader import read_form


def _args(source: str):
	"""Read `source` as a list and return its elements (the arguments of `fn`)."""
	return read_form(source).items


def test_single_clause_unnamed() -> None:
	args = _args("([x] (+ x 1))")
	parsed = parse_fn(args)
	assert parsed == ParsedFn(
		name=None,
		clauses=(Clause(params=OrderedSequence((Symbol("x"),)), prepost=None, body=(read_form("(+ x 1)"),)),),
	)
	rebuilt = build_fn(parsed)
	assert rebuilt == ListForm((FN_HEAD,) + args)
	assert rebuilt == read_form("(fn [x] (+ x 1))")


def test_single_clause_named() -> None:
	parsed = parse_fn(_args("(add [a b] (+ a b))"))
	assert parsed.name == Symbol("add")
	assert len(parsed.clauses) == 1
	assert build_fn(parsed) == read_form("(fn add [a b] (+ a b))")


def test_single_clause_with_prepost() -> None:
	parsed = parse_fn(_args("([x] {:pre [(pos? x)]} x)"))
	assert parsed.clauses[0].prepost == read_form("{:pre [(pos? x)]}")
	assert parsed.clauses[0].body == (Symbol("x"),)
	assert build_fn(parsed) == read_form("(fn [x] {:pre [(pos? x)]} x)")


def test_multi_clause_round_trip() -> None:
	args = _args("(([] 0) ([a] 1) ([a b] {:post [(pos? %)]} 2))")
	parsed = parse_fn(args)
	assert parsed.name is None
	assert [c.params for c in parsed.clauses] == [
		OrderedSequence(),
		OrderedSequence((Symbol("a"),)),
		OrderedSequence((Symbol("a"), Symbol("b"))),
	]
	assert parsed.clauses[0].prepost is None
	assert parsed.clauses[1].prepost is None
	assert isinstance(parsed.clauses[2].prepost, Mapping)
	assert [c.body for c in parsed.clauses] == [(Opaque(0),), (Opaque(1),), (Opaque(2),)]
	assert build_fn(parsed) == ListForm((FN_HEAD,) + args)


def test_multi_clause_named() -> None:
	source = "(fn fact ([n] (fact n 1)) ([n acc] (if (zero? n) acc (recur (dec n) (* n acc)))))"
	form = read_form(source)
	parsed = parse_fn(form.items[1:])
	assert parsed.name == Symbol("fact")
	assert [c.arity for c in parsed.clauses] == [1, 2]
	assert build_fn(parsed) == form


def test_single_clause_body_may_be_empty() -> None:
	parsed = parse_fn(_args("([])"))
	assert parsed.clauses == (Clause(params=OrderedSequence()),)
	assert build_fn(parsed) == read_form("(fn [])")


def test_clause_shape() -> None:
	assert clause_shape(_args("([x] x)")) is ClauseShape.SINGLE
	assert clause_shape(_args("(([x] x))")) is ClauseShape.MULTI


def test_missing_parameters_for_atom() -> None:
	with pytest.raises(FnFormError) as excinfo:
		parse_fn(_args("(5)"))
	assert excinfo.value.kind is ErrorKind.MISSING_PARAMETERS
	assert str(excinfo.value) == "Parameter declaration missing"


def test_missing_parameters_after_name() -> None:
	with pytest.raises(FnFormError) as excinfo:
		parse_fn(_args("(f)"))
	assert excinfo.value.kind is ErrorKind.MISSING_PARAMETERS


def test_missing_parameters_for_empty_input() -> None:
	with pytest.raises(FnFormError) as excinfo:
		parse_fn(())
	assert excinfo.value.kind is ErrorKind.MISSING_PARAMETERS


def test_missing_parameters_for_map_after_name() -> None:
	with pytest.raises(FnFormError) as excinfo:
		parse_fn(_args("(f {:a 1} [x] x)"))
	assert excinfo.value.kind is ErrorKind.MISSING_PARAMETERS


def test_multi_clause_bad_later_params_uses_multi_message() -> None:
	with pytest.raises(FnFormError) as excinfo:
		parse_fn(_args("(([a] 1) (b 2))"))
	assert excinfo.value.kind is ErrorKind.MALFORMED_PARAMETERS
	assert str(excinfo.value) == "Parameter declaration b should be a vector"


def test_multi_clause_vector_clause_is_judged_by_its_first_element() -> None:
	with pytest.raises(FnFormError) as excinfo:
		parse_fn(_args("(([a] 1) [b] 2)"))
	assert excinfo.value.kind is ErrorKind.MALFORMED_PARAMETERS
	assert str(excinfo.value) == "Parameter declaration b should be a vector"


def test_multi_clause_atom_clause() -> None:
	with pytest.raises(FnFormError) as excinfo:
		parse_fn(_args("(([a] 1) 5)"))
	assert excinfo.value.kind is ErrorKind.INVALID_SIGNATURE
	assert str(excinfo.value) == "Invalid signature 5 should be a list"


def test_parse_build_idempotent() -> None:
	sources = [
		"([x] (+ x 1))",
		"(g [x & xs] {:pre [(seq xs)]} (apply + x xs))",
		"(([] 0) ([a] 1) ([a b] {:post [(pos? %)]} 2))",
		"(h ([a] a) ([a b] b))",
	]
	for source in sources:
		parsed = parse_fn(_args(source))
		assert parse_fn(build_fn(parsed).items[1:]) == parsed


def test_opaque_body_passes_through_untouched() -> None:
	marker = object()
	body = (Opaque(marker), ListForm((Symbol("do"), Opaque([1, 2]))))
	parsed = parse_fn((OrderedSequence(),) + body)
	assert parsed.clauses[0].body == body
	rebuilt = build_fn(parsed)
	assert rebuilt.items[2].payload is marker
	assert rebuilt.items[3] is body[1]


def test_literal_kinds_stay_distinct() -> None:
	one = parse_fn(_args("([x] 1)"))
	true = parse_fn(_args("([x] true)"))
	real = parse_fn(_args("([x] 1.0)"))
	assert one != true
	assert one != real
	assert true != real
	for parsed in (one, true, real):
		assert parse_fn(build_fn(parsed).items[1:]) == parsed


def test_literal_kinds_round_trip_in_multi_clause() -> None:
	args = _args("(([] 1) ([a] true) ([a b] {:pre [(= a 1.0)]} nil))")
	parsed = parse_fn(args)
	assert [c.body for c in parsed.clauses] == [(Opaque(1),), (Opaque(True),), (Opaque(None),)]
	assert build_fn(parsed) == ListForm((FN_HEAD,) + args)
	assert build_fn(parsed) != read_form("(fn ([] true) ([a] 1) ([a b] {:pre [(= a 1)]} nil))")


def test_parsed_fn_requires_a_clause() -> None:
	with pytest.raises(ValueError, match="at least one clause"):
		ParsedFn(name=None, clauses=())
