# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Render a token stream back to source text.

Spacing is deterministic rather than faithful to the original layout: one
space between tokens, none inside brackets, none before `,` `;` `.` and none
between a name and the bracket that follows it (calls, indexing, `name!{}`).
"""

from __future__ import annotations

from typing import Iterable, Iterator, List, Tuple

from sui_literals.tokens import Delimiter, Group, Literal, Other, OtherKind, TokenNode

# Piece kinds emitted by `_flatten`.
_OPEN = "open"
_CLOSE = "close"
_LITERAL = "literal"
_IDENT = "ident"
_PUNCT = "punct"

_NO_SPACE_BEFORE = {",", ";", ".", ":"}
_NO_SPACE_AFTER = {"."}


def render_stream(stream: Iterable[TokenNode]) -> str:
	out: List[str] = []
	prev: Tuple[str, str] | None = None
	for piece in _flatten(stream):
		if prev is not None and _needs_space(prev, piece):
			out.append(" ")
		out.append(piece[1])
		prev = piece
	return "".join(out)


def render_tree(tree: TokenNode) -> str:
	return render_stream([tree])


def _flatten(stream: Iterable[TokenNode]) -> Iterator[Tuple[str, str]]:
	"""Yield (kind, text) pieces in source order without recursing."""
	# Work items are either a node to expand or a ready-made closing piece.
	work: list[TokenNode | Tuple[str, str]] = list(reversed(list(stream)))
	while work:
		item = work.pop()
		if isinstance(item, tuple):
			yield item
		elif isinstance(item, Group):
			if item.delimiter is not Delimiter.NONE:
				yield (_OPEN, item.delimiter.open)
				work.append((_CLOSE, item.delimiter.close))
			work.extend(reversed(item.children))
		elif isinstance(item, Literal):
			yield (_LITERAL, item.text)
		elif isinstance(item, Other):
			yield (_IDENT if item.kind is OtherKind.IDENT else _PUNCT, item.text)
		else:
			raise TypeError(f"cannot render {type(item).__name__}")


def _needs_space(prev: Tuple[str, str], cur: Tuple[str, str]) -> bool:
	prev_kind, prev_text = prev
	kind, text = cur
	if prev_kind == _OPEN or kind == _CLOSE:
		return False
	if prev_kind == _PUNCT and prev_text in _NO_SPACE_AFTER:
		return False
	if kind == _PUNCT and text in _NO_SPACE_BEFORE:
		return False
	if kind == _PUNCT and text == "!" and prev_kind == _IDENT:
		return False
	if kind == _OPEN and (prev_kind == _IDENT or (prev_kind == _PUNCT and prev_text == "!")):
		return False
	return True


__all__ = ["render_stream", "render_tree"]
