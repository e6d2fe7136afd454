# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
sui_literals: rewrite suffixed hex literals into Sui value constructions.

	0x01b0...24f0_object   ->  ObjectID.new([1, 176, ...])
	0x01b0...24f0_address  ->  SuiAddress.from_object_id(ObjectID.new([1, 176, ...]))

Layout:
  core:    spans, diagnostics, errors
  parser:  lark token-tree reader (source text -> TokenNode stream)
  expand:  suffix parser, byte buffer/target constructor, tree walker, reporter
"""

from sui_literals.config import DEFAULT_CONFIG, LiteralConfig, PaddingPolicy, load_config
from sui_literals.expand import expand, expand_source, sui_literal
from sui_literals.tokens import Delimiter, Group, Literal, Other, OtherKind, TokenNode
from sui_literals.types import ObjectID, SuiAddress

__all__ = [
	"DEFAULT_CONFIG",
	"Delimiter",
	"Group",
	"Literal",
	"LiteralConfig",
	"ObjectID",
	"Other",
	"OtherKind",
	"PaddingPolicy",
	"SuiAddress",
	"TokenNode",
	"expand",
	"expand_source",
	"load_config",
	"sui_literal",
]
