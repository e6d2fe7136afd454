# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Suffix parser and hex payload decoding.

A literal the pass accepts looks like `<value><delimiter><tag>`, e.g.
`0x01b0...24f0_object`. The tag picks the value kind; the value is a hex
payload with an optional `0x` prefix.
"""

from __future__ import annotations

import binascii
from dataclasses import dataclass
from enum import Enum

from sui_literals.config import DEFAULT_CONFIG, LiteralConfig
from sui_literals.core.errors import ParseError
from sui_literals.core.span import Span
from sui_literals.tokens import Literal


class TargetKind(Enum):
	OBJECT = "object"
	ADDRESS = "address"


@dataclass(frozen=True)
class SuffixSpec:
	target: TargetKind
	value: str


def parse_suffix(literal: Literal, config: LiteralConfig = DEFAULT_CONFIG) -> SuffixSpec:
	"""
	Split `literal` at the last delimiter and classify the tag.

	Tags match exactly (case-sensitive). The returned value still carries its
	hex prefix, see `strip_hex_prefix`.
	"""
	text = literal.text
	delim = config.delimiter
	index = text.rfind(delim)
	if index < 0:
		raise ParseError(
			f"literal `{text}` must be suffixed with `{delim}{config.object_tag}` or `{delim}{config.address_tag}`",
			span=literal.span,
		)
	value, tag = text[:index], text[index + len(delim):]
	# `0xAA__object`: a doubled delimiter leaves one behind on the value.
	value = value.removesuffix(delim)
	if tag == config.object_tag:
		target = TargetKind.OBJECT
	elif tag == config.address_tag:
		target = TargetKind.ADDRESS
	else:
		raise ParseError(
			f"invalid literal suffix `{tag}`: expected `{config.object_tag}` or `{config.address_tag}`",
			span=literal.span,
		)
	return SuffixSpec(target=target, value=value)


def strip_hex_prefix(value: str, config: LiteralConfig = DEFAULT_CONFIG) -> str:
	return value.removeprefix(config.hex_prefix)


def decode_hex(payload: str, span: Span) -> bytes:
	"""Decode hex digits; odd length or non-hex characters are a ParseError."""
	try:
		return binascii.unhexlify(payload)
	except ValueError as err:
		# binascii.Error for odd length/bad digits, plain ValueError for non-ASCII text.
		raise ParseError(f"hex error: {err}", span=span) from err


__all__ = ["SuffixSpec", "TargetKind", "decode_hex", "parse_suffix", "strip_hex_prefix"]
