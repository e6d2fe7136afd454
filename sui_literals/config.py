# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Immutable configuration for the literal rewriting pass.

Everything the pass treats as a constant (delimiter, buffer width, the two
tags, the constructor paths it emits) lives on one frozen `LiteralConfig`.
`DEFAULT_CONFIG` is what `sui_literal` uses unless told otherwise; a JSON file
can override individual fields (`load_config`).
"""

from __future__ import annotations

import json
from dataclasses import dataclass, fields, replace
from enum import Enum
from pathlib import Path
from typing import Any, Mapping

from sui_literals.types import ID_LENGTH


class ConfigError(ValueError):
	"""Invalid configuration value or unknown configuration key."""


_STR_FIELDS = (
	"delimiter",
	"hex_prefix",
	"object_tag",
	"address_tag",
	"object_type",
	"object_ctor",
	"address_type",
	"address_ctor",
)


class PaddingPolicy(Enum):
	"""Where a short payload lands inside the fixed-width buffer."""

	# Payload at index 0, zero-filled tail.
	TRAILING = "trailing"
	# Zero-filled head, payload right-aligned (big-endian style).
	LEADING = "leading"
	# Payload must already be exactly `byte_length` bytes.
	EXACT = "exact"


@dataclass(frozen=True)
class LiteralConfig:
	delimiter: str = "_"
	byte_length: int = ID_LENGTH
	hex_prefix: str = "0x"
	object_tag: str = "object"
	address_tag: str = "address"
	# Emitted as `<object_type>.<object_ctor>([...])`.
	object_type: str = "ObjectID"
	object_ctor: str = "new"
	# Emitted as `<address_type>.<address_ctor>(<object expression>)`.
	address_type: str = "SuiAddress"
	address_ctor: str = "from_object_id"
	padding: PaddingPolicy = PaddingPolicy.TRAILING
	# False: any identifier/punctuation token in the input is an error.
	# True: such tokens pass through unchanged; literals are still rewritten.
	mixed_content: bool = False

	def __post_init__(self) -> None:
		for name in _STR_FIELDS:
			value = getattr(self, name)
			if not isinstance(value, str):
				raise ConfigError(f"{name} must be a string, got {value!r}")
		if isinstance(self.byte_length, bool) or not isinstance(self.byte_length, int):
			raise ConfigError(f"byte_length must be an integer, got {self.byte_length!r}")
		if not isinstance(self.mixed_content, bool):
			raise ConfigError(f"mixed_content must be a boolean, got {self.mixed_content!r}")
		if len(self.delimiter) != 1:
			raise ConfigError(f"delimiter must be a single character, got {self.delimiter!r}")
		if self.byte_length <= 0:
			raise ConfigError(f"byte_length must be positive, got {self.byte_length}")
		# ObjectID.new only accepts ID_LENGTH bytes.
		if (self.object_type, self.object_ctor) == ("ObjectID", "new") and self.byte_length != ID_LENGTH:
			raise ConfigError(
				f"byte_length must be {ID_LENGTH} for the default ObjectID constructor, got {self.byte_length}"
			)
		if not self.object_tag or not self.address_tag:
			raise ConfigError("tags must be non-empty")
		if self.object_tag == self.address_tag:
			raise ConfigError(f"object and address tags must differ, both are {self.object_tag!r}")
		for tag in (self.object_tag, self.address_tag):
			if self.delimiter in tag:
				raise ConfigError(f"tag {tag!r} must not contain the delimiter {self.delimiter!r}")
		if not isinstance(self.padding, PaddingPolicy):
			raise ConfigError(f"padding must be a PaddingPolicy, got {self.padding!r}")

	@property
	def tags(self) -> tuple[str, str]:
		return (self.object_tag, self.address_tag)

	@classmethod
	def from_mapping(cls, data: Mapping[str, Any], *, base: "LiteralConfig | None" = None) -> "LiteralConfig":
		"""
		Build a config from a JSON-style mapping, starting from `base`.

		Unknown keys are rejected rather than ignored so typos surface.
		"""
		known = {f.name for f in fields(cls)}
		unknown = sorted(set(data) - known)
		if unknown:
			raise ConfigError(f"unknown configuration key(s): {', '.join(unknown)}")
		updates: dict[str, Any] = dict(data)
		if "padding" in updates and not isinstance(updates["padding"], PaddingPolicy):
			try:
				updates["padding"] = PaddingPolicy(updates["padding"])
			except ValueError:
				choices = ", ".join(p.value for p in PaddingPolicy)
				raise ConfigError(f"padding must be one of {choices}, got {updates['padding']!r}") from None
		return replace(base or cls(), **updates)


DEFAULT_CONFIG = LiteralConfig()


def load_config(path: Path, *, base: LiteralConfig | None = None) -> LiteralConfig:
	"""Load a JSON object of overrides from `path`."""
	try:
		data = json.loads(Path(path).read_text(encoding="utf-8"))
	except UnicodeDecodeError as err:
		raise ConfigError(f"{path}: not UTF-8 text: {err}") from err
	except json.JSONDecodeError as err:
		raise ConfigError(f"{path}: invalid JSON: {err}") from err
	if not isinstance(data, dict):
		raise ConfigError(f"{path}: expected a JSON object, got {type(data).__name__}")
	return LiteralConfig.from_mapping(data, base=base)


__all__ = ["ConfigError", "DEFAULT_CONFIG", "LiteralConfig", "PaddingPolicy", "load_config"]
