# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Byte buffer builder and target constructor.

The decoded payload is laid into a fixed-width buffer (`byte_length`, 32 by
default) and the replacement expression is generated as source text, then
read back through the token-tree reader:

	OBJECT   ObjectID.new([b0, b1, ..., b31])
	ADDRESS  SuiAddress.from_object_id(ObjectID.new([b0, b1, ..., b31]))

An address is always derived from the object id expression, never built from
the bytes on its own.
"""

from __future__ import annotations

import logging

from lark.exceptions import UnexpectedInput

from sui_literals.config import DEFAULT_CONFIG, LiteralConfig, PaddingPolicy
from sui_literals.core.errors import GenerationError
from sui_literals.core.span import Span
from sui_literals.parser import parse_token_stream
from sui_literals.tokens import TokenStream, with_span

from .suffix import TargetKind

logger = logging.getLogger(__name__)


def build_buffer(data: bytes, span: Span, config: LiteralConfig = DEFAULT_CONFIG) -> bytes:
	"""
	Place `data` into a zeroed buffer of `config.byte_length` bytes.

	Oversized payloads are an error, never truncated. Short payloads follow
	`config.padding`.
	"""
	width = config.byte_length
	if len(data) > width:
		raise GenerationError(f"expected {width} bytes, got {len(data)}", span=span)
	if config.padding is PaddingPolicy.EXACT and len(data) != width:
		raise GenerationError(f"expected exactly {width} bytes, got {len(data)}", span=span)
	buffer = bytearray(width)
	if config.padding is PaddingPolicy.LEADING:
		buffer[width - len(data):] = data
	else:
		buffer[: len(data)] = data
	return bytes(buffer)


def limbs_source(buffer: bytes) -> str:
	return ", ".join(str(b) for b in buffer)


def target_source(buffer: bytes, target: TargetKind, config: LiteralConfig = DEFAULT_CONFIG) -> str:
	object_expr = f"{config.object_type}.{config.object_ctor}([{limbs_source(buffer)}])"
	if target is TargetKind.OBJECT:
		return object_expr
	if target is TargetKind.ADDRESS:
		return f"{config.address_type}.{config.address_ctor}({object_expr})"
	raise TypeError(f"unknown target kind {target!r}")


def construct_target(
	buffer: bytes,
	target: TargetKind,
	span: Span,
	config: LiteralConfig = DEFAULT_CONFIG,
) -> TokenStream:
	"""
	Build the replacement tokens for `buffer`, all anchored at `span`.

	The generated text is read back through the same reader the input came
	from; if that fails the configured constructor paths are not valid
	token text.
	"""
	source = target_source(buffer, target, config)
	try:
		stream = parse_token_stream(source)
	except UnexpectedInput as err:
		detail = str(err).strip().splitlines()[0] if str(err).strip() else type(err).__name__
		raise GenerationError(f"could not read back generated source `{source}`: {detail}", span=span) from err
	if not stream:
		raise GenerationError(f"generated source `{source}` is empty", span=span)
	logger.debug("constructed %s at %s", target.value, span.format())
	return with_span(stream, span)


__all__ = ["build_buffer", "construct_target", "limbs_source", "target_source"]
