# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Common diagnostic structure for the reader and the rewriting pass.

A message plus an optional span/metadata; `diag_to_json` gives the structured
form printed by `--json`.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .span import Span


@dataclass
class Diagnostic:
	"""Represents a diagnostic (error/warning/etc.)."""

	message: str
	code: str | None = None
	# Phase label: "parser" (token-tree reader), "expand" (rewriting pass),
	# "config" (options/--config), "driver" (reading the input file) or
	# "evaluate" (the CLI's --evaluate step).
	phase: str | None = None
	severity: str = "error"
	span: Span = field(default_factory=Span)  # Source location (Span() denotes unknown).
	notes: list[str] = field(default_factory=list)

	def __post_init__(self) -> None:
		if self.span is None:  # type: ignore[unreachable]
			self.span = Span()

	def format_human(self, source: str | None = None) -> str:
		file = self.span.file or source or "<input>"
		loc = f"{self.span.line if self.span.line is not None else '?'}:{self.span.column if self.span.column is not None else '?'}"
		text = f"{file}:{loc}: {self.severity}: {self.message}"
		for note in self.notes:
			text += f"\n  note: {note}"
		return text


def diag_to_json(diag: Diagnostic, phase: str, source: str | None = None) -> dict:
	"""Render a Diagnostic to a structured JSON-friendly dict."""
	span = diag.span if diag.span is not None else Span()
	return {
		"phase": diag.phase or phase,
		"code": diag.code,
		"message": diag.message,
		"severity": diag.severity,
		"file": span.file or source,
		"line": span.line,
		"column": span.column,
		"notes": list(diag.notes),
	}


__all__ = ["Diagnostic", "diag_to_json"]
