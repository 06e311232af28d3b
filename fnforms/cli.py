# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List, Tuple

from fnforms.errors import FnFormError, ReaderError
from fnforms.forms import build_form, is_definition_form, parse_form
from fnforms.nodes import SyntaxNode
from fnforms.printer import to_source
from fnforms.reader import read_forms


def _build_parser() -> argparse.ArgumentParser:
	p = argparse.ArgumentParser(prog="fnforms", description="Inspect and normalize fn/defn forms")
	sub = p.add_subparsers(dest="cmd", required=True)

	check = sub.add_parser("check", help="Parse every fn/defn form and report malformed definitions")
	check.add_argument("files", nargs="+", type=str, help="Source files ('-' reads stdin)")

	normalize = sub.add_parser("normalize", help="Rebuild every fn/defn form in canonical shape")
	normalize.add_argument("file", type=str, help="Source file ('-' reads stdin)")

	dump = sub.add_parser("dump", help="Print parsed fn/defn forms as JSON")
	dump.add_argument("file", type=str, help="Source file ('-' reads stdin)")
	dump.add_argument("--compact", action="store_true", help="Emit compact single-line JSON")
	return p


def _read_source(name: str) -> str:
	try:
		if name == "-":
			return sys.stdin.read()
		return Path(name).read_text(encoding="utf-8")
	except UnicodeDecodeError as err:
		raise ReaderError(f"not valid UTF-8 ({err.reason} at byte {err.start})") from err


def _load_forms(name: str) -> Tuple[SyntaxNode, ...]:
	return read_forms(_read_source(name))


def _check(files: List[str]) -> int:
	failed = False
	for name in files:
		try:
			forms = _load_forms(name)
			count = 0
			for form in forms:
				if is_definition_form(form):
					parse_form(form)
					count += 1
			print(f"[ok] {name} ({count} definitions)")
		except (OSError, ReaderError, FnFormError) as err:
			failed = True
			print(f"[error] {name}: {err}", file=sys.stderr)
	return 1 if failed else 0


def _normalize(forms: Tuple[SyntaxNode, ...]) -> List[str]:
	lines: List[str] = []
	for form in forms:
		if is_definition_form(form):
			form = build_form(parse_form(form))
		lines.append(to_source(form))
	return lines


def main(argv: list[str] | None = None) -> int:
	p = _build_parser()
	args = p.parse_args(argv)

	if args.cmd == "check":
		return _check(list(args.files))

	if args.cmd == "normalize":
		try:
			lines = _normalize(_load_forms(args.file))
		except (OSError, ReaderError, FnFormError) as err:
			p.error(str(err))
			return 2
		for line in lines:
			print(line)
		return 0

	if args.cmd == "dump":
		try:
			parsed = [parse_form(f) for f in _load_forms(args.file) if is_definition_form(f)]
		except (OSError, ReaderError, FnFormError) as err:
			p.error(str(err))
			return 2
		obj = [item.to_dict() for item in parsed]
		if args.compact:
			print(json.dumps(obj, sort_keys=True, separators=(",", ":")))
		else:
			print(json.dumps(obj, indent=2, sort_keys=True))
		return 0

	raise AssertionError("unreachable")
