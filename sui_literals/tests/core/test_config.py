# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
import dataclasses
import json
from pathlib import Path

import pytest

from sui_literals.config import DEFAULT_CONFIG, ConfigError, LiteralConfig, PaddingPolicy, load_config


def test_defaults() -> None:
	assert DEFAULT_CONFIG.delimiter == "_"
	assert DEFAULT_CONFIG.byte_length == 32
	assert DEFAULT_CONFIG.tags == ("object", "address")
	assert DEFAULT_CONFIG.padding is PaddingPolicy.TRAILING
	assert DEFAULT_CONFIG.mixed_content is False


def test_config_is_immutable() -> None:
	with pytest.raises(dataclasses.FrozenInstanceError):
		DEFAULT_CONFIG.delimiter = "-"  # type: ignore[misc]


@pytest.mark.parametrize(
	"kwargs",
	[
		{"delimiter": "__"},
		{"delimiter": ""},
		{"byte_length": 0},
		{"object_tag": "same", "address_tag": "same"},
		{"address_tag": ""},
		{"object_tag": "ob_ject"},
	],
)
def test_invalid_values_rejected(kwargs) -> None:
	with pytest.raises(ConfigError):
		LiteralConfig(**kwargs)


def test_from_mapping_converts_padding() -> None:
	cfg = LiteralConfig.from_mapping({"padding": "leading", "mixed_content": True})
	assert cfg.padding is PaddingPolicy.LEADING
	assert cfg.mixed_content is True
	assert cfg.byte_length == 32


def test_from_mapping_rejects_unknown_keys() -> None:
	with pytest.raises(ConfigError, match="bits"):
		LiteralConfig.from_mapping({"bits": 256})


def test_from_mapping_rejects_bad_padding() -> None:
	with pytest.raises(ConfigError, match="padding"):
		LiteralConfig.from_mapping({"padding": "middle"})


def test_from_mapping_rejects_non_integer_width() -> None:
	with pytest.raises(ConfigError):
		LiteralConfig.from_mapping({"byte_length": "32"})


def test_load_config_reads_json_overrides(tmp_path: Path) -> None:
	path = tmp_path / "literals.json"
	path.write_text(json.dumps({"object_tag": "id", "address_tag": "addr", "padding": "exact"}))
	cfg = load_config(path)
	assert cfg.tags == ("id", "addr")
	assert cfg.padding is PaddingPolicy.EXACT


def test_load_config_rejects_non_object(tmp_path: Path) -> None:
	path = tmp_path / "literals.json"
	path.write_text("[1, 2]")
	with pytest.raises(ConfigError, match="JSON object"):
		load_config(path)


def test_load_config_rejects_invalid_json(tmp_path: Path) -> None:
	path = tmp_path / "literals.json"
	path.write_text("{")
	with pytest.raises(ConfigError, match="invalid JSON"):
		load_config(path)


@pytest.mark.parametrize(
	"overrides",
	[{"delimiter": 5}, {"object_tag": 7}, {"address_ctor": None}, {"mixed_content": "yes"}, {"byte_length": True}],
)
def test_from_mapping_rejects_wrongly_typed_values(overrides) -> None:
	with pytest.raises(ConfigError):
		LiteralConfig.from_mapping(overrides)


def test_load_config_rejects_non_utf8(tmp_path: Path) -> None:
	path = tmp_path / "literals.json"
	path.write_bytes(b"\xff\xfe{")
	with pytest.raises(ConfigError, match="UTF-8"):
		load_config(path)


def test_width_is_tied_to_the_default_constructor() -> None:
	with pytest.raises(ConfigError, match="ObjectID"):
		LiteralConfig(byte_length=20)
	cfg = LiteralConfig(byte_length=20, object_type="Bytes20", object_ctor="from_limbs")
	assert cfg.byte_length == 20
