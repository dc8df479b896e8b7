# ---------------------------------------------------------------------------
# File: ui/__init__.py
# ---------------------------------------------------------------------------
# Description:
#   Public UI package surface for pyezui.
#
# Notes:
#   - Lazy exports (PEP 562); only TkSurface pulls in tkinter.
#   - Inside ui modules, import specific modules, not pyezui.ui.
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import TYPE_CHECKING, Any

__all__ = [
	# Widget tree
	"Label", "HorizontalLayout", "TextEdit", "Slider", "Button", "Image",
	"MainPanel", "Configuration",

	# Loading
	"load_config", "loads_config", "parse_config", "dump_config", "save_config",

	# Interpreter
	"Engine", "Surface", "Response", "RecordingSurface", "TkSurface",
]

_EXPORTS: dict[str, tuple[str, str]] = {
	"Label": ("pyezui.ui.widgets", "Label"),
	"HorizontalLayout": ("pyezui.ui.widgets", "HorizontalLayout"),
	"TextEdit": ("pyezui.ui.widgets", "TextEdit"),
	"Slider": ("pyezui.ui.widgets", "Slider"),
	"Button": ("pyezui.ui.widgets", "Button"),
	"Image": ("pyezui.ui.widgets", "Image"),
	"MainPanel": ("pyezui.ui.widgets", "MainPanel"),
	"Configuration": ("pyezui.ui.widgets", "Configuration"),

	"load_config": ("pyezui.ui.loader", "load_config"),
	"loads_config": ("pyezui.ui.loader", "loads_config"),
	"parse_config": ("pyezui.ui.loader", "parse_config"),
	"dump_config": ("pyezui.ui.loader", "dump_config"),
	"save_config": ("pyezui.ui.loader", "save_config"),

	"Engine": ("pyezui.ui.engine", "Engine"),
	"Surface": ("pyezui.ui.surface", "Surface"),
	"Response": ("pyezui.ui.surface", "Response"),
	"RecordingSurface": ("pyezui.ui.recording", "RecordingSurface"),
	"TkSurface": ("pyezui.ui.tk_surface", "TkSurface"),
}


def __getattr__(name: str) -> Any:
	"""
	Lazy attribute resolver for pyezui.ui exports.
	"""
	try:
		mod_name, attr_name = _EXPORTS[name]
	except KeyError as ex:
		raise AttributeError(f"module {__name__!r} has no attribute {name!r}") from ex

	import importlib
	mod = importlib.import_module(mod_name)
	return getattr(mod, attr_name)


def __dir__() -> list[str]:
	return sorted(set(list(globals().keys()) + list(__all__)))


if TYPE_CHECKING:
	from pyezui.ui.engine import Engine
	from pyezui.ui.loader import dump_config, load_config, loads_config, parse_config, save_config
	from pyezui.ui.recording import RecordingSurface
	from pyezui.ui.surface import Response, Surface
	from pyezui.ui.tk_surface import TkSurface
	from pyezui.ui.widgets import Button, Configuration, HorizontalLayout, Image, Label, MainPanel, Slider, TextEdit
