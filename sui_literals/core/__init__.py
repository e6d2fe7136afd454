# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""Shared plumbing: spans, diagnostics and the error taxonomy."""

from .diagnostics import Diagnostic, diag_to_json
from .errors import (
	ErrorKind,
	GenerationError,
	ParseError,
	SuiLiteralError,
	TransformError,
	as_transform_error,
)
from .span import Span

__all__ = [
	"Diagnostic",
	"ErrorKind",
	"GenerationError",
	"ParseError",
	"Span",
	"SuiLiteralError",
	"TransformError",
	"as_transform_error",
	"diag_to_json",
]
