# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
sui-literals command line driver.

Reads a source file (or `-e TEXT`), runs the rewriting pass and prints the
rewritten text. Diagnostics go to stderr, or to stdout as JSON with `--json`.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import List

from sui_literals.config import DEFAULT_CONFIG, ConfigError, LiteralConfig, PaddingPolicy, load_config
from sui_literals.core.diagnostics import Diagnostic, diag_to_json
from sui_literals.core.errors import TransformError
from sui_literals.expand import transform_stream
from sui_literals.parser import read_source
from sui_literals.render import render_stream
from sui_literals.types import evaluate

logger = logging.getLogger(__name__)


def _report(diags: List[Diagnostic], phase: str, source: str, as_json: bool) -> int:
	if as_json:
		payload = {
			"exit_code": 1,
			"diagnostics": [diag_to_json(d, phase, source) for d in diags],
		}
		print(json.dumps(payload))
	else:
		for d in diags:
			print(d.format_human(source), file=sys.stderr)
	return 1


def _build_config(args: argparse.Namespace) -> LiteralConfig:
	config = DEFAULT_CONFIG
	if args.config is not None:
		config = load_config(args.config, base=config)
	if args.padding is not None:
		config = replace(config, padding=PaddingPolicy(args.padding))
	if args.permissive:
		config = replace(config, mixed_content=True)
	return config


def main(argv: list[str] | None = None) -> int:
	"""
	Exit status 0 when the pass succeeds, 1 on any diagnostic (reader, pass,
	configuration or evaluation).
	"""
	parser = argparse.ArgumentParser(description="Rewrite `<hex>_object` / `<hex>_address` literals")
	src = parser.add_mutually_exclusive_group(required=True)
	src.add_argument("source", type=Path, nargs="?", help="Path to a source file")
	src.add_argument("-e", "--expr", help="Source text to rewrite instead of a file")
	parser.add_argument("--config", type=Path, help="JSON file of configuration overrides")
	parser.add_argument(
		"--padding",
		choices=[p.value for p in PaddingPolicy],
		help="Placement of payloads shorter than the buffer width (default: trailing)",
	)
	parser.add_argument(
		"--permissive",
		action="store_true",
		help="Pass identifiers and punctuation through instead of rejecting them",
	)
	parser.add_argument(
		"--json",
		action="store_true",
		help="Emit diagnostics as JSON (phase/message/severity/file/line/column)",
	)
	parser.add_argument(
		"--evaluate",
		action="store_true",
		help="Evaluate the rewritten expression and print the resulting value(s)",
	)
	parser.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")
	args = parser.parse_args(argv)

	logging.basicConfig(
		level=logging.DEBUG if args.verbose else logging.WARNING,
		format="%(levelname)s %(name)s: %(message)s",
		stream=sys.stderr,
	)

	if args.expr is not None:
		text, source_name = args.expr, "<expr>"
	else:
		source_name = str(args.source)
		try:
			text = args.source.read_text(encoding="utf-8")
		except OSError as err:
			return _report([Diagnostic(message=f"cannot read source: {err}", phase="driver")], "driver", source_name, args.json)

	try:
		config = _build_config(args)
	except (ConfigError, OSError) as err:
		return _report([Diagnostic(message=str(err), phase="config")], "config", source_name, args.json)

	stream, parse_diags = read_source(text, file=source_name)
	if parse_diags:
		return _report(parse_diags, "parser", source_name, args.json)

	try:
		rewritten = transform_stream(stream, config)
	except TransformError as err:
		logger.debug("pass failed (%s): %s", err.origin.value, err.message)
		return _report([err.to_diagnostic()], "expand", source_name, args.json)

	output = render_stream(rewritten)
	if not args.evaluate:
		print(output)
		return 0
	try:
		value = evaluate(output)
	except (TypeError, ValueError) as err:
		return _report(
			[Diagnostic(message=f"cannot evaluate `{output}`: {err}", phase="evaluate")],
			"evaluate",
			source_name,
			args.json,
		)
	print(value)
	return 0


__all__ = ["main"]
