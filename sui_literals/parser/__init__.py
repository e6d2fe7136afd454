# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Token-tree reader: source text -> `TokenNode` stream.

`parse_token_stream` raises lark's `UnexpectedInput` on malformed text;
`read_source` is the non-raising form used by the driver, returning parser
diagnostics instead.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from lark.exceptions import UnexpectedInput

from sui_literals.core.diagnostics import Diagnostic
from sui_literals.core.span import Span
from sui_literals.tokens import TokenNode

from .parser import parse_token_stream


def read_source(source: str, *, file: Optional[str] = None) -> Tuple[List[TokenNode], List[Diagnostic]]:
	"""Read `source`; on failure return an empty stream and one parser diagnostic."""
	try:
		return parse_token_stream(source, file=file), []
	except UnexpectedInput as err:
		line = getattr(err, "line", None)
		column = getattr(err, "column", None)
		# UnexpectedEOF reports -1 for both.
		if line is not None and line < 0:
			line = column = None
		span = Span(file=file, line=line, column=column, raw=err)
		# Lark renders a multi-line context excerpt; the first line is the message.
		message = str(err).strip().splitlines()[0] if str(err).strip() else type(err).__name__
		return [], [Diagnostic(message=message, phase="parser", severity="error", span=span)]


__all__ = ["parse_token_stream", "read_source"]
