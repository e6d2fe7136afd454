# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
import pytest

from sui_literals.config import LiteralConfig
from sui_literals.core.errors import ParseError
from sui_literals.core.span import Span
from sui_literals.expand.suffix import SuffixSpec, TargetKind, decode_hex, parse_suffix, strip_hex_prefix


def test_object_suffix(make_literal) -> None:
	assert parse_suffix(make_literal("0xAA_object")) == SuffixSpec(TargetKind.OBJECT, "0xAA")


def test_address_suffix(make_literal) -> None:
	assert parse_suffix(make_literal("0xAA_address")) == SuffixSpec(TargetKind.ADDRESS, "0xAA")


def test_last_delimiter_wins_and_doubled_delimiter_is_dropped(make_literal) -> None:
	assert parse_suffix(make_literal("0xAA__object")).value == "0xAA"
	assert parse_suffix(make_literal("1_2_address")).value == "1_2"


def test_unrecognized_tag_is_named(make_literal) -> None:
	lit = make_literal("0xAA_foo", line=4, column=9)
	with pytest.raises(ParseError) as info:
		parse_suffix(lit)
	assert "`foo`" in info.value.message
	assert info.value.span is lit.span


def test_tags_are_case_sensitive(make_literal) -> None:
	with pytest.raises(ParseError, match="Object"):
		parse_suffix(make_literal("0xAA_Object"))


def test_missing_delimiter(make_literal) -> None:
	with pytest.raises(ParseError) as info:
		parse_suffix(make_literal("0xAA"))
	assert "must be suffixed" in info.value.message
	assert "_object" in info.value.message and "_address" in info.value.message


def test_custom_tags(make_literal) -> None:
	cfg = LiteralConfig(object_tag="id", address_tag="addr")
	assert parse_suffix(make_literal("0xAA_id"), cfg).target is TargetKind.OBJECT
	assert parse_suffix(make_literal("0xAA_addr"), cfg).target is TargetKind.ADDRESS
	with pytest.raises(ParseError):
		parse_suffix(make_literal("0xAA_object"), cfg)


def test_strip_hex_prefix() -> None:
	assert strip_hex_prefix("0xAA") == "AA"
	assert strip_hex_prefix("AA") == "AA"
	assert strip_hex_prefix("0x0xAA") == "0xAA"


def test_decode_hex() -> None:
	assert decode_hex("00ff10", Span()) == b"\x00\xff\x10"
	assert decode_hex("", Span()) == b""


@pytest.mark.parametrize("payload", ["ZZ", "ABC", "0g", "éé"])
def test_decode_failures_are_parse_errors(payload: str) -> None:
	span = Span(line=2, column=5)
	with pytest.raises(ParseError) as info:
		decode_hex(payload, span)
	assert info.value.message.startswith("hex error:")
	assert info.value.span is span
