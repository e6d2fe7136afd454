# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Value types the generated expressions construct.

`ObjectID` is a 32-byte opaque identifier; `SuiAddress` is always derived
from an `ObjectID` (same bytes) and never built from a literal directly.
"""

from __future__ import annotations

import ast
import binascii
from typing import Any, Iterable

ID_LENGTH = 32


class ObjectID:
	__slots__ = ("_bytes",)

	def __init__(self, data: bytes) -> None:
		data = bytes(data)
		if len(data) != ID_LENGTH:
			raise ValueError(f"ObjectID requires {ID_LENGTH} bytes, got {len(data)}")
		self._bytes = data

	@classmethod
	def new(cls, limbs: Iterable[int]) -> "ObjectID":
		"""Build from a sequence of byte values (the form emitted by the pass)."""
		return cls(bytes(limbs))

	@classmethod
	def from_hex(cls, text: str) -> "ObjectID":
		"""
		Parse `0x`-optional hex. Shorter inputs are left-padded with zeros, the
		way Sui renders short ids (`0x2` is `0x00..02`).
		"""
		digits = text[2:] if text.startswith(("0x", "0X")) else text
		if len(digits) > ID_LENGTH * 2:
			raise ValueError(f"ObjectID hex is too long: {len(digits)} digits")
		try:
			return cls(binascii.unhexlify(digits.rjust(ID_LENGTH * 2, "0")))
		except binascii.Error as err:
			raise ValueError(f"invalid ObjectID hex {text!r}: {err}") from err

	from_str = from_hex

	def to_bytes(self) -> bytes:
		return self._bytes

	def to_hex(self) -> str:
		return "0x" + self._bytes.hex()

	def __eq__(self, other: object) -> bool:
		if not isinstance(other, ObjectID):
			return NotImplemented
		return self._bytes == other._bytes

	def __hash__(self) -> int:
		return hash((ObjectID, self._bytes))

	def __str__(self) -> str:
		return self.to_hex()

	def __repr__(self) -> str:
		return f"ObjectID({self.to_hex()})"


class SuiAddress:
	__slots__ = ("_bytes",)

	def __init__(self, data: bytes) -> None:
		data = bytes(data)
		if len(data) != ID_LENGTH:
			raise ValueError(f"SuiAddress requires {ID_LENGTH} bytes, got {len(data)}")
		self._bytes = data

	@classmethod
	def from_object_id(cls, object_id: ObjectID) -> "SuiAddress":
		return cls(object_id.to_bytes())

	def to_bytes(self) -> bytes:
		return self._bytes

	def to_hex(self) -> str:
		return "0x" + self._bytes.hex()

	def __eq__(self, other: object) -> bool:
		if not isinstance(other, SuiAddress):
			return NotImplemented
		return self._bytes == other._bytes

	def __hash__(self) -> int:
		return hash((SuiAddress, self._bytes))

	def __str__(self) -> str:
		return self.to_hex()

	def __repr__(self) -> str:
		return f"SuiAddress({self.to_hex()})"


_VALUE_TYPES = {"ObjectID": ObjectID, "SuiAddress": SuiAddress}
_CONSTRUCTORS = frozenset({"new", "from_hex", "from_str", "from_object_id"})


def evaluate(source: str) -> Any:
	"""
	Evaluate a rendered replacement expression.

	The text is parsed with `ast` and interpreted directly. Only list
	displays, int/str constants and calls of the form `Type.ctor(...)` on
	the two value types are understood; anything else raises `ValueError`.
	"""
	try:
		tree = ast.parse(source.strip(), mode="eval")
	except SyntaxError as err:
		raise ValueError(f"not an expression: {err.msg}") from err
	return _interpret(tree.body)


def _interpret(node: ast.AST) -> Any:
	if isinstance(node, ast.Constant) and type(node.value) in (int, str):
		return node.value
	if isinstance(node, ast.List):
		return [_interpret(elt) for elt in node.elts]
	if isinstance(node, ast.Call):
		func = node.func
		if node.keywords or not isinstance(func, ast.Attribute) or func.attr not in _CONSTRUCTORS:
			raise ValueError(f"unsupported call `{ast.dump(func)}`")
		if not isinstance(func.value, ast.Name) or func.value.id not in _VALUE_TYPES:
			raise ValueError(f"unsupported call `{ast.dump(func)}`")
		ctor = getattr(_VALUE_TYPES[func.value.id], func.attr, None)
		if ctor is None:
			raise ValueError(f"`{func.value.id}` has no constructor `{func.attr}`")
		return ctor(*[_interpret(arg) for arg in node.args])
	raise ValueError(f"unsupported expression `{type(node).__name__}`")


__all__ = ["ID_LENGTH", "ObjectID", "SuiAddress", "evaluate"]
