# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
import pytest
from lark.exceptions import UnexpectedInput

from sui_literals.parser import parse_token_stream, read_source
from sui_literals.tokens import Delimiter, Group, Literal, Other, OtherKind


def test_single_literal_is_one_token() -> None:
	stream = parse_token_stream("0x01b0_object")
	assert len(stream) == 1
	lit = stream[0]
	assert isinstance(lit, Literal)
	assert lit.text == "0x01b0_object"
	assert (lit.span.line, lit.span.column) == (1, 1)


def test_groups_and_leaves() -> None:
	stream = parse_token_stream("[0xAA_object, (0xBB_address)]")
	assert len(stream) == 1
	outer = stream[0]
	assert isinstance(outer, Group)
	assert outer.delimiter is Delimiter.BRACKET
	first, comma, inner = outer.children
	assert isinstance(first, Literal) and first.text == "0xAA_object"
	assert isinstance(comma, Other) and comma.kind is OtherKind.PUNCT and comma.text == ","
	assert isinstance(inner, Group) and inner.delimiter is Delimiter.PARENTHESIS
	assert [c.text for c in inner.children] == ["0xBB_address"]


def test_identifiers_and_strings() -> None:
	stream = parse_token_stream('compile_error!{"oops"}')
	ident, bang, brace = stream
	assert ident == Other("compile_error", OtherKind.IDENT, ident.span)
	assert bang.text == "!"
	assert isinstance(brace, Group) and brace.delimiter is Delimiter.BRACE
	assert brace.children[0].text == '"oops"'


def test_spans_track_lines_and_columns() -> None:
	stream = parse_token_stream("{\n    0xAA_object\n}", file="lib.rs")
	group = stream[0]
	lit = group.children[0]
	assert (group.span.line, group.span.column) == (1, 1)
	assert group.span.end_line == 3
	assert (lit.span.file, lit.span.line, lit.span.column) == ("lib.rs", 2, 5)


def test_comments_and_whitespace_are_skipped() -> None:
	stream = parse_token_stream("// leading\n  0xAA_object  // trailing\n")
	assert [t.text for t in stream] == ["0xAA_object"]


def test_empty_groups_keep_a_span() -> None:
	group = parse_token_stream("  ()")[0]
	assert group.children == []
	assert (group.span.line, group.span.column) == (1, 3)


@pytest.mark.parametrize("source", ["(0xAA_object", "0xAA_object]", "0xAA`_object", "[0xAA_object)"])
def test_malformed_text_raises(source: str) -> None:
	with pytest.raises(UnexpectedInput):
		parse_token_stream(source)


def test_read_source_reports_a_parser_diagnostic() -> None:
	stream, diags = read_source("[0xAA_object\n `", file="bad.rs")
	assert stream == []
	assert len(diags) == 1
	diag = diags[0]
	assert diag.phase == "parser"
	assert diag.severity == "error"
	assert diag.span.file == "bad.rs"
	assert diag.span.line == 2


def test_read_source_on_unclosed_group_has_no_bogus_position() -> None:
	_stream, diags = read_source("(((0xAA_object")
	assert diags
	assert diags[0].span.line is None or diags[0].span.line >= 1


def test_deep_nesting_does_not_recurse() -> None:
	depth = 3000
	stream = parse_token_stream("(" * depth + "0xAA_object" + ")" * depth)
	node = stream[0]
	seen = 0
	while isinstance(node, Group):
		seen += 1
		node = node.children[0]
	assert seen == depth
	assert node.text == "0xAA_object"
