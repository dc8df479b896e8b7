# ---------------------------------------------------------------------------
# File: logging.py
# ---------------------------------------------------------------------------
# Description:
#	Core logging helpers for pyezui (stdlib logging).
#
# Notes:
#	- No Tk dependencies; safe to call before a configuration is loaded.
#	- Re-initializing with the same settings is a no-op (no duplicate handlers).
#	- Settings come from the `options:` mapping of the UI configuration.
#
#	Supported cfg keys (dotted key wins over the flat alias):
#		logging.level		/ log_level		(default: "INFO")
#		logging.console		/ log_console	(default: True)
#		logging.file		/ log_file		(default: None)
#		logging.file_mode	/ log_file_mode	(default: "a")
#		logging.format		/ log_format	(default: see DEFAULT_FORMAT)
#		logging.datefmt		/ log_datefmt	(default: "%Y-%m-%d %H:%M:%S")
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Change
# ---------------------------------------------------------------------------
# 10/12/2026	Initial coding / release
# 10/14/2026	Resolve settings into LoggingSettings before configuring
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional
import logging


APP_LOGGER_NAME = "pyezui.app"
DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True, slots=True)
class LoggingSettings:
	"""
	Resolved logging settings. Equality is used to detect re-init calls.
	"""
	level: int = logging.INFO
	console: bool = True
	file: Optional[str] = None
	file_mode: str = "a"
	fmt: str = DEFAULT_FORMAT
	datefmt: str = DEFAULT_DATEFMT


_active: Optional[LoggingSettings] = None


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def get_logger(name: str) -> logging.Logger:
	return logging.getLogger(name)


def get_app_logger(component: str | None = None) -> logging.Logger:
	"""
	Return an application-scoped logger.

	Examples:
		get_app_logger()          -> pyezui.app
		get_app_logger("engine")  -> pyezui.app.engine
		get_app_logger("loader")  -> pyezui.app.loader
	"""
	if component:
		return logging.getLogger(f"{APP_LOGGER_NAME}.{component}")
	return logging.getLogger(APP_LOGGER_NAME)


def resolve_settings(cfg: Any | None = None) -> LoggingSettings:
	"""
	Build LoggingSettings from anything exposing get(key, default).
	"""
	level = _coerce_level(_lookup(cfg, "level", "INFO"))
	console = bool(_lookup(cfg, "console", True))
	log_file = _lookup(cfg, "file", None)
	file_mode = _coerce_file_mode(_lookup(cfg, "file_mode", "a"))
	fmt = _lookup(cfg, "format", None) or DEFAULT_FORMAT
	datefmt = _lookup(cfg, "datefmt", None) or DEFAULT_DATEFMT

	return LoggingSettings(
		level=level,
		console=console,
		file=str(log_file) if log_file else None,
		file_mode=file_mode,
		fmt=str(fmt),
		datefmt=str(datefmt),
	)


def init_logging(cfg: Any | None = None) -> LoggingSettings:
	"""
	Initialize root logging for pyezui and return the settings applied.

	Args:
		cfg:
			AppConfig, a plain dict, or None for defaults.
	"""
	global _active

	settings = resolve_settings(cfg)
	if _active == settings:
		return settings

	root = logging.getLogger()
	root.setLevel(settings.level)

	for handler in list(root.handlers):
		root.removeHandler(handler)

	formatter = logging.Formatter(fmt=settings.fmt, datefmt=settings.datefmt)

	if settings.console:
		console = logging.StreamHandler()
		console.setLevel(settings.level)
		console.setFormatter(formatter)
		root.addHandler(console)

	if settings.file:
		Path(settings.file).expanduser().resolve().parent.mkdir(parents=True, exist_ok=True)
		file_handler = logging.FileHandler(settings.file, mode=settings.file_mode, encoding="utf-8")
		file_handler.setLevel(settings.level)
		file_handler.setFormatter(formatter)
		root.addHandler(file_handler)

	_active = settings
	return settings


# ---------------------------------------------------------------------------
# Internals
# ---------------------------------------------------------------------------

def _lookup(cfg: Any | None, suffix: str, default: Any) -> Any:
	"""
	Look up logging.<suffix>, then log_<suffix>.
	"""
	if cfg is None:
		return default

	getter = getattr(cfg, "get", None)
	if not callable(getter):
		return default

	value = getter(f"logging.{suffix}", None)
	if value is None:
		value = getter(f"log_{suffix}", None)
	return default if value is None else value


def _coerce_level(level: Any) -> int:
	if isinstance(level, bool):
		return logging.INFO

	if isinstance(level, int):
		return level

	if isinstance(level, str):
		val = level.strip().upper()
		if val.isdigit():
			return int(val)
		found = logging.getLevelName(val)
		return found if isinstance(found, int) else logging.INFO

	return logging.INFO


def _coerce_file_mode(mode: Any) -> str:
	# Only append or truncate.
	if isinstance(mode, str) and mode.strip().lower() in ("a", "w"):
		return mode.strip().lower()
	return "a"


# ---------------------------------------------------------------------------
# Test helper
# ---------------------------------------------------------------------------

def _reset_logging_for_tests() -> None:
	global _active
	_active = None
