# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
import pytest

from sui_literals.core.span import Span
from sui_literals.tokens import Literal

# Identifier used by the upstream Sui examples.
OBJECT_HEX = "0x01b0d52321ce82d032430f859c6df0c52eb9ce1a337a81d56d89445db2d624f0"


@pytest.fixture
def object_hex() -> str:
	return OBJECT_HEX


@pytest.fixture
def object_bytes() -> bytes:
	return bytes.fromhex(OBJECT_HEX[2:])


@pytest.fixture
def make_literal():
	"""Factory for literals anchored at a fake but distinguishable span."""

	def _make(text: str, line: int = 1, column: int = 1) -> Literal:
		return Literal(text, Span(file="<test>", line=line, column=column))

	return _make
