# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
fnforms: parse and rebuild `fn` / `defn` forms as data.

  nodes    : code-as-data tree (Symbol, OrderedSequence, ListForm, Mapping, ...)
  prefix   : extract_prefix, the optional-leading-element combinator
  clause   : one `([params] prepost? body...)` arity-variant
  fn       : function literals (parse_fn / build_fn)
  defn     : named definitions (parse_defn / build_defn)
  forms    : dispatch on a whole `(fn ...)` / `(defn ...)` form
  reader   : text -> nodes (lark grammar in grammar.lark)
  printer  : nodes -> text

The CLI entrypoint is `fnforms.cli:main`.
"""

from .clause import Clause, ClauseShape, build_clause, parse_clause
from .defn import DEFN_HEAD, DOC_KEY, ParsedDefn, build_defn, parse_defn
from .errors import ErrorKind, FnFormError, ReaderError, make_invalid_argument_error
from .fn import FN_HEAD, ParsedFn, build_fn, parse_fn
from .forms import build_form, is_definition_form, parse_form
from .nodes import Keyword, ListForm, Mapping, Opaque, OrderedSequence, StringLiteral, Symbol, SyntaxNode
from .prefix import extract_prefix
from .printer import to_source
from .reader import read_form, read_forms

__all__ = [
	"Clause",
	"ClauseShape",
	"DEFN_HEAD",
	"DOC_KEY",
	"ErrorKind",
	"FN_HEAD",
	"FnFormError",
	"Keyword",
	"ListForm",
	"Mapping",
	"Opaque",
	"OrderedSequence",
	"ParsedDefn",
	"ParsedFn",
	"ReaderError",
	"StringLiteral",
	"Symbol",
	"SyntaxNode",
	"build_clause",
	"build_defn",
	"build_fn",
	"build_form",
	"extract_prefix",
	"is_definition_form",
	"make_invalid_argument_error",
	"parse_clause",
	"parse_defn",
	"parse_fn",
	"parse_form",
	"read_form",
	"read_forms",
	"to_source",
]
