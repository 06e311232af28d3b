# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Errors raised while parsing fn/defn forms.

Every malformed-input condition goes through `make_invalid_argument_error`, so
callers (and tests) can rely on a single exception type and switch on `kind`
instead of matching message text.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from .nodes import SyntaxNode


class ErrorKind(Enum):
	MISSING_NAME = "missing-name"
	MISSING_PARAMETERS = "missing-parameters"
	# Malformed signature, reported while resolving a multi-clause form.
	MALFORMED_PARAMETERS = "malformed-parameters"
	# Malformed signature, reported while resolving a single-clause form.
	INVALID_SIGNATURE = "invalid-signature"
	UNSUPPORTED_FORM = "unsupported-form"

	@property
	def is_malformed_signature(self) -> bool:
		return self in (ErrorKind.MALFORMED_PARAMETERS, ErrorKind.INVALID_SIGNATURE)


class FnFormError(ValueError):
	"""
	User-facing error for a definition form that does not fit the grammar.

	This is a `ValueError` subclass so macro plumbing can keep treating it as
	an invalid-argument failure; `kind` pins down which rule was violated and
	`form` holds the offending node when there is one.
	"""

	def __init__(self, message: str, *, kind: ErrorKind, form: Optional[SyntaxNode] = None) -> None:
		super().__init__(message)
		self.message = message
		self.kind = kind
		self.form = form


class ReaderError(ValueError):
	"""Source text could not be read into syntax nodes."""

	def __init__(self, message: str, *, line: Optional[int] = None, column: Optional[int] = None) -> None:
		super().__init__(message)
		self.line = line
		self.column = column

	def __str__(self) -> str:
		msg = super().__str__()
		if self.line is None:
			return msg
		return f"{msg} (line {self.line}, column {self.column})"


def make_invalid_argument_error(
	message: str, kind: ErrorKind, *, form: Optional[SyntaxNode] = None
) -> FnFormError:
	return FnFormError(message, kind=kind, form=form)


__all__ = ["ErrorKind", "FnFormError", "ReaderError", "make_invalid_argument_error"]
