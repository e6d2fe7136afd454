# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Diagnostic reporter: turn a pass error into a forced compilation failure.

The failure node replaces the whole output of the pass:

	compile_error!{"<message>"}

Every token of it carries the span of the token that failed, so the
diagnostic points at the offending literal rather than at the invocation.
"""

from __future__ import annotations

import json
from typing import Iterable, Optional, Tuple

from sui_literals.core.errors import SuiLiteralError
from sui_literals.core.span import Span
from sui_literals.tokens import Delimiter, Group, Literal, Other, OtherKind, TokenNode

COMPILE_ERROR = "compile_error"


def into_compiler_error(err: SuiLiteralError) -> Group:
	span = err.span
	payload = Group(Delimiter.BRACE, [Literal(json.dumps(err.message), span)], span)
	return Group(
		Delimiter.NONE,
		[
			Other(COMPILE_ERROR, OtherKind.IDENT, span),
			Other("!", OtherKind.PUNCT, span),
			payload,
		],
		span,
	)


def find_compile_error(stream: Iterable[TokenNode]) -> Optional[Tuple[str, Span]]:
	"""
	Return (message, span) if `stream` is a forced compilation failure.

	Accepts the node built by `into_compiler_error` and the three top-level
	tokens its rendered text reads back as (the invisible group does not
	survive rendering).
	"""
	nodes = list(stream)
	if len(nodes) == 1 and isinstance(nodes[0], Group) and nodes[0].delimiter is Delimiter.NONE:
		nodes = list(nodes[0].children)
	if len(nodes) != 3:
		return None
	ident, bang, payload = nodes
	if not (isinstance(ident, Other) and ident.text == COMPILE_ERROR):
		return None
	if not (isinstance(bang, Other) and bang.text == "!"):
		return None
	if not (isinstance(payload, Group) and payload.delimiter is Delimiter.BRACE and len(payload.children) == 1):
		return None
	message = payload.children[0]
	if not isinstance(message, Literal):
		return None
	return json.loads(message.text), message.span


__all__ = ["COMPILE_ERROR", "find_compile_error", "into_compiler_error"]
