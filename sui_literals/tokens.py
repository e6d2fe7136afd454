# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Token tree consumed and produced by the rewriting pass.

A stream is a list of trees; a tree is one of:

  Group    delimited sequence of child trees (parens/brackets/braces/none)
  Literal  a literal token, kept as its raw source text
  Other    anything else (identifiers, punctuation)

Groups own their children exclusively: no sharing, no cycles.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Union

from sui_literals.core.span import Span


class Delimiter(Enum):
	PARENTHESIS = "()"
	BRACKET = "[]"
	BRACE = "{}"
	# Invisible grouping: renders its children inline but behaves as one term.
	NONE = ""

	@property
	def open(self) -> str:
		return self.value[:1]

	@property
	def close(self) -> str:
		return self.value[1:]


class OtherKind(Enum):
	IDENT = "ident"
	PUNCT = "punct"


@dataclass
class Group:
	delimiter: Delimiter
	children: List["TokenNode"] = field(default_factory=list)
	span: Span = field(default_factory=Span)


@dataclass
class Literal:
	"""Literal token (number-like word or string), raw text as written."""
	text: str
	span: Span = field(default_factory=Span)


@dataclass
class Other:
	"""Identifier or punctuation; opaque to the pass."""
	text: str
	kind: OtherKind = OtherKind.IDENT
	span: Span = field(default_factory=Span)


TokenNode = Union[Group, Literal, Other]
TokenStream = List[TokenNode]


def with_span(stream: TokenStream, span: Span) -> TokenStream:
	"""
	Copy `stream`, re-anchoring every token (groups included) at `span`.

	Used for synthesized code so that anything reported against it points at
	the token it replaced.
	"""
	out: TokenStream = []
	# (source children, destination list)
	work: list[tuple[list[TokenNode], list[TokenNode]]] = [(list(stream), out)]
	while work:
		src, dst = work.pop()
		for node in src:
			if isinstance(node, Group):
				copy = Group(node.delimiter, [], span)
				dst.append(copy)
				work.append((node.children, copy.children))
			elif isinstance(node, Literal):
				dst.append(Literal(node.text, span))
			else:
				dst.append(Other(node.text, node.kind, span))
	return out


__all__ = ["Delimiter", "Group", "Literal", "Other", "OtherKind", "TokenNode", "TokenStream", "with_span"]
