# ---------------------------------------------------------------------------
# File: __main__.py
# ---------------------------------------------------------------------------
# Description:
#   `python -m pyezui [CONFIG]` - run a configured UI from default state.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Change
# ---------------------------------------------------------------------------
# 10/16/2026	Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from pyezui.app.state import AppState
from pyezui.core.config import AppConfig
from pyezui.core.errors import ConfigError
from pyezui.core.logging import get_app_logger, init_logging
from pyezui.core.telemetry import init_telemetry
from pyezui.ui.engine import Engine
from pyezui.ui.loader import load_config


DEFAULT_CONFIG = "config/app.yaml"


def build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(prog="pyezui", description="Run a UI described by a YAML configuration.")
	parser.add_argument("config", nargs="?", default=DEFAULT_CONFIG, help=f"configuration file (default: {DEFAULT_CONFIG})")
	return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
	args = build_parser().parse_args(argv)

	try:
		config = load_config(args.config)
	except ConfigError as ex:
		print(f"pyezui: {ex}", file=sys.stderr)
		return 2

	cfg = AppConfig(config.options)
	init_logging(cfg)
	log = get_app_logger()
	telemetry = init_telemetry(cfg, logger=get_app_logger("telemetry"))
	telemetry.event("config.loaded", {"name": config.name, "containers": len(config.containers)})

	engine = Engine(config, AppState.default(), telemetry=telemetry)
	log.debug("Engine ready: %r", engine)

	# Imported late: everything above works without a display.
	from pyezui.app.app import App

	App(engine, cfg).run()
	return 0


if __name__ == "__main__":
	sys.exit(main())
