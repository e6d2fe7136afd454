# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Lark-based reader turning source text into a token tree.

The grammar only knows bracket pairs and leaf tokens; everything a host
compiler would do beyond that (expressions, statements) is out of scope.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from lark import Lark, Token, Tree

from sui_literals.core.span import Span
from sui_literals.tokens import Delimiter, Group, Literal, Other, OtherKind, TokenNode

_GRAMMAR_PATH = Path(__file__).with_name("grammar.lark")
_GRAMMAR_SRC = _GRAMMAR_PATH.read_text()

_PARSER = Lark(
	_GRAMMAR_SRC,
	parser="lalr",
	lexer="basic",
	start="start",
	propagate_positions=True,
	maybe_placeholders=False,
)

_GROUP_DELIMITERS = {
	"paren": Delimiter.PARENTHESIS,
	"bracket": Delimiter.BRACKET,
	"brace": Delimiter.BRACE,
}

_BRACKET_TOKENS = {"LPAR", "RPAR", "LSQB", "RSQB", "LBRACE", "RBRACE"}


def parse_token_stream(source: str, *, file: Optional[str] = None) -> List[TokenNode]:
	"""
	Read `source` into a token stream.

	Raises `lark.exceptions.UnexpectedInput` on stray characters or unbalanced
	brackets; `sui_literals.parser.read_source` turns that into a diagnostic.
	"""
	tree = _PARSER.parse(source)
	return _build_stream(tree, file)


def _build_stream(tree: Tree, file: Optional[str]) -> List[TokenNode]:
	"""
	Convert the lark tree bottom-up with an explicit stack.

	Nesting depth of the input is unbounded, so no Python recursion here.
	"""
	built: dict[int, Group] = {}
	stack: list[tuple[Tree, bool]] = [(tree, False)]
	root: List[TokenNode] = []
	while stack:
		node, expanded = stack.pop()
		if not expanded:
			stack.append((node, True))
			for child in node.children:
				if isinstance(child, Tree):
					stack.append((child, False))
			continue
		children: List[TokenNode] = []
		open_tok: Token | None = None
		close_tok: Token | None = None
		for child in node.children:
			if isinstance(child, Tree):
				children.append(built.pop(id(child)))
			elif child.type in _BRACKET_TOKENS:
				if open_tok is None:
					open_tok = child
				else:
					close_tok = child
			else:
				children.append(_build_leaf(child, file))
		name = _name(node)
		if name == "start":
			root = children
			continue
		delimiter = _GROUP_DELIMITERS.get(name)
		if delimiter is None:
			raise TypeError(f"unexpected grammar node {name!r}")
		span = Span.between(_span(open_tok, file), _span(close_tok, file))
		built[id(node)] = Group(delimiter, children, span)
	return root


def _build_leaf(tok: Token, file: Optional[str]) -> TokenNode:
	span = _span(tok, file)
	if tok.type == "LITERAL":
		return Literal(tok.value, span)
	if tok.type == "IDENT":
		return Other(tok.value, OtherKind.IDENT, span)
	if tok.type == "PUNCT":
		return Other(tok.value, OtherKind.PUNCT, span)
	raise TypeError(f"unexpected token type {tok.type}")


def _span(tok: Token | None, file: Optional[str]) -> Span:
	return Span.from_loc(tok, file=file)


def _name(node: Tree | Token) -> str:
	if isinstance(node, Tree):
		data = node.data
		if isinstance(data, Token):
			return data.value
		return data
	return node.type


__all__ = ["parse_token_stream"]
