# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Tree walker: rewrite every literal in a token stream.

Groups are rebuilt with the same delimiter, span and child order; literals
are replaced by their construction expression wrapped in an invisible
(`Delimiter.NONE`) group carrying the literal's span. Any other token is
rejected unless `config.mixed_content` is set.

The walk uses an explicit stack so deeply nested input cannot exhaust the
interpreter's recursion limit. The first error aborts the whole walk.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Tuple

from sui_literals.config import DEFAULT_CONFIG, LiteralConfig
from sui_literals.core.errors import SuiLiteralError, TransformError, as_transform_error
from sui_literals.tokens import Delimiter, Group, Literal, Other, TokenNode, TokenStream

from .construct import build_buffer, construct_target
from .suffix import decode_hex, parse_suffix, strip_hex_prefix

logger = logging.getLogger(__name__)


def transform_literal(literal: Literal, config: LiteralConfig = DEFAULT_CONFIG) -> Group:
	"""
	Literal -> suffix -> hex payload -> 32-byte buffer -> construction expression.

	Raises ParseError/GenerationError; the walker maps them to TransformError.
	"""
	suffix = parse_suffix(literal, config)
	payload = strip_hex_prefix(suffix.value, config)
	data = decode_hex(payload, literal.span)
	buffer = build_buffer(data, literal.span, config)
	stream = construct_target(buffer, suffix.target, literal.span, config)
	return Group(Delimiter.NONE, stream, literal.span)


def transform_stream(stream: Iterable[TokenNode], config: LiteralConfig = DEFAULT_CONFIG) -> TokenStream:
	"""
	Rewrite `stream`, returning a new stream; the input is not modified.

	Raises TransformError on the first failure anywhere in the tree.
	"""
	out: TokenStream = []
	# (node, list its rewritten form is appended to); children are pushed in
	# reverse so they pop, and land, in source order.
	stack: List[Tuple[TokenNode, TokenStream]] = [(node, out) for node in reversed(list(stream))]
	rewritten = 0
	while stack:
		node, dest = stack.pop()
		if isinstance(node, Group):
			copy = Group(node.delimiter, [], node.span)
			dest.append(copy)
			stack.extend((child, copy.children) for child in reversed(node.children))
		elif isinstance(node, Literal):
			try:
				dest.append(transform_literal(node, config))
			except SuiLiteralError as err:
				raise as_transform_error(err) from err
			rewritten += 1
		elif isinstance(node, Other):
			if not config.mixed_content:
				raise TransformError(
					f"only grouped and literal tokens are permitted, found `{node.text}`",
					span=node.span,
				)
			dest.append(Other(node.text, node.kind, node.span))
		else:
			raise TypeError(f"not a token tree node: {type(node).__name__}")
	logger.debug("rewrote %d literal(s)", rewritten)
	return out


__all__ = ["transform_literal", "transform_stream"]
