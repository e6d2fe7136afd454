# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
The literal rewriting pass.

`sui_literal` is the entry point a host invokes with a token stream: it
returns either the rewritten stream or a one-element stream holding the
forced compilation failure, never both.
"""

from __future__ import annotations

from typing import Iterable, Optional

from sui_literals.config import DEFAULT_CONFIG, LiteralConfig
from sui_literals.core.errors import TransformError
from sui_literals.parser import parse_token_stream
from sui_literals.render import render_stream
from sui_literals.tokens import TokenNode, TokenStream

from .construct import build_buffer, construct_target
from .report import find_compile_error, into_compiler_error
from .suffix import SuffixSpec, TargetKind, decode_hex, parse_suffix, strip_hex_prefix
from .walker import transform_literal, transform_stream


def sui_literal(stream: Iterable[TokenNode], config: LiteralConfig = DEFAULT_CONFIG) -> TokenStream:
	try:
		return transform_stream(stream, config)
	except TransformError as err:
		return [into_compiler_error(err)]


def expand(source: str, *, config: LiteralConfig = DEFAULT_CONFIG, file: Optional[str] = None) -> TokenStream:
	"""
	Read `source` and rewrite it, raising instead of producing a failure node.

	Raises lark's UnexpectedInput for unreadable text and TransformError for
	pass failures.
	"""
	return transform_stream(parse_token_stream(source, file=file), config)


def expand_source(source: str, *, config: LiteralConfig = DEFAULT_CONFIG, file: Optional[str] = None) -> str:
	"""Read, rewrite and render `source`; a pass failure renders as `compile_error!{...}`."""
	return render_stream(sui_literal(parse_token_stream(source, file=file), config))


__all__ = [
	"SuffixSpec",
	"TargetKind",
	"build_buffer",
	"construct_target",
	"decode_hex",
	"expand",
	"expand_source",
	"find_compile_error",
	"into_compiler_error",
	"parse_suffix",
	"strip_hex_prefix",
	"sui_literal",
	"transform_literal",
	"transform_stream",
]
