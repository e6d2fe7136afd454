# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Lightweight source span representation used by tokens and diagnostics.

A Span is only ever copied from an input token (or from the lark token the
reader built it from); the pass never invents positions. `Span()` is the
"unknown location" sentinel.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class Span:
	"""Represents a source span (best-effort file/line/column plus raw parser loc)."""

	file: Optional[str] = None
	line: Optional[int] = None
	column: Optional[int] = None
	end_line: Optional[int] = None
	end_column: Optional[int] = None
	raw: Any = None

	@classmethod
	def from_loc(cls, loc: Any, *, file: Optional[str] = None) -> "Span":
		"""
		Construct a Span from an existing parser/location object.

		If `loc` is already a Span, it is returned unchanged; otherwise the
		parser-specific object (usually a lark `Token`) is stored in `raw`.
		"""
		if loc is None:
			return cls(file=file)
		if isinstance(loc, cls):
			return loc
		return cls(
			file=file or getattr(loc, "file", None) or getattr(loc, "filename", None) or None,
			line=getattr(loc, "line", None),
			column=getattr(loc, "column", None),
			end_line=getattr(loc, "end_line", None),
			end_column=getattr(loc, "end_column", None),
			raw=loc,
		)

	@classmethod
	def between(cls, start: "Span", end: "Span") -> "Span":
		"""Span from the start of `start` to the end of `end` (same file)."""
		return cls(
			file=start.file,
			line=start.line,
			column=start.column,
			end_line=end.end_line,
			end_column=end.end_column,
			raw=start.raw,
		)

	@property
	def is_unknown(self) -> bool:
		return self.line is None

	def format(self) -> str:
		loc = f"{self.line if self.line is not None else '?'}:{self.column if self.column is not None else '?'}"
		return f"{self.file}:{loc}" if self.file else loc


__all__ = ["Span"]
