# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Error taxonomy for the literal rewriting pass.

Three kinds, one per stage:

  ParseError       reading the literal text (delimiter, tag, hex payload)
  GenerationError  building the replacement (byte count, re-reading the output)
  TransformError   walking the tree (unexpected token kinds); also the single
                   kind the outer boundary turns into a diagnostic

Lower kinds reach the boundary through `as_transform_error`, an explicit
mapping; nothing converts implicitly.
"""

from __future__ import annotations

from enum import Enum

from .diagnostics import Diagnostic
from .span import Span


class ErrorKind(Enum):
	PARSE = "parse"
	GENERATION = "generation"
	TRANSFORM = "transform"


class SuiLiteralError(ValueError):
	"""
	Base class for pass failures.

	Carries the human-readable message and the span of the offending token so
	the reporter can anchor the diagnostic there instead of at the invocation.
	"""

	kind: ErrorKind
	prefix: str

	def __init__(self, message: str, *, span: Span | None) -> None:
		super().__init__(message)
		self.message = message
		self.span = span if span is not None else Span()

	def __str__(self) -> str:
		return f"{self.prefix}: {self.message}"

	@property
	def code(self) -> str:
		return self.kind.value

	def to_diagnostic(self) -> Diagnostic:
		return Diagnostic(
			message=self.message,
			code=self.code,
			phase="expand",
			severity="error",
			span=self.span,
		)


class ParseError(SuiLiteralError):
	"""The literal text is not `<hex>_<tag>` or its payload is not hex."""

	kind = ErrorKind.PARSE
	prefix = "Failed to parse token stream"


class GenerationError(SuiLiteralError):
	"""The replacement expression could not be built."""

	kind = ErrorKind.GENERATION
	prefix = "Failed to generate token stream"


class TransformError(SuiLiteralError):
	"""The token tree could not be rewritten."""

	kind = ErrorKind.TRANSFORM
	prefix = "Failed to transform token stream"

	def __init__(self, message: str, *, span: Span | None, origin: ErrorKind = ErrorKind.TRANSFORM) -> None:
		super().__init__(message, span=span)
		# Kind of the error this one was mapped from (TRANSFORM when raised directly).
		self.origin = origin

	@property
	def code(self) -> str:
		return self.origin.value


def as_transform_error(err: SuiLiteralError) -> TransformError:
	"""
	Map any pass error onto `TransformError`, keeping message and span.

	Exhaustive over `ErrorKind`; an error without a known kind is a bug in the
	caller and raises `TypeError`.
	"""
	if isinstance(err, TransformError):
		return err
	kind = getattr(err, "kind", None)
	if kind is ErrorKind.PARSE:
		return TransformError(err.message, span=err.span, origin=ErrorKind.PARSE)
	if kind is ErrorKind.GENERATION:
		return TransformError(err.message, span=err.span, origin=ErrorKind.GENERATION)
	raise TypeError(f"cannot map {type(err).__name__} onto TransformError")


__all__ = [
	"ErrorKind",
	"GenerationError",
	"ParseError",
	"SuiLiteralError",
	"TransformError",
	"as_transform_error",
]
