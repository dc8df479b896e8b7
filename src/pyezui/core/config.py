# ---------------------------------------------------------------------------
# File: config.py
# ---------------------------------------------------------------------------
# Description:
#	Host options for pyezui (the `options:` mapping of a UI configuration).
#
# Notes:
#	Recognized keys:
#		width, height		window size in pixels (default 320 x 240)
#		theme				ttkthemes theme name (default: none)
#		frame_ms			frame interval in milliseconds (default 33)
#		logging.* / log_*	see core/logging.py
#		telemetry_*			see core/telemetry.py
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Change
# ---------------------------------------------------------------------------
# 10/16/2026	Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping


DEFAULT_WIDTH = 320
DEFAULT_HEIGHT = 240
DEFAULT_FRAME_MS = 33


@dataclass(frozen=True, slots=True)
class AppConfig:
	"""
	Read-only wrapper over host options.
	"""
	options: Mapping[str, Any] = field(default_factory=dict)

	def __post_init__(self) -> None:
		object.__setattr__(self, "options", MappingProxyType(dict(self.options or {})))

	def get(self, key: str, default: Any = None) -> Any:
		return self.options.get(key, default)

	def get_int(self, key: str, default: int, *, minimum: int = 1) -> int:
		value = self.options.get(key, default)
		if isinstance(value, bool) or not isinstance(value, int):
			return default
		return max(minimum, value)

	@property
	def width(self) -> int:
		return self.get_int("width", DEFAULT_WIDTH)

	@property
	def height(self) -> int:
		return self.get_int("height", DEFAULT_HEIGHT)

	@property
	def frame_ms(self) -> int:
		return self.get_int("frame_ms", DEFAULT_FRAME_MS)

	@property
	def theme(self) -> str | None:
		theme = self.options.get("theme")
		return str(theme) if theme else None
