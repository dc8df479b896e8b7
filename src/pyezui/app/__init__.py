# ---------------------------------------------------------------------------
# File: app/__init__.py
# ---------------------------------------------------------------------------
# Description:
#   Public app package surface for pyezui (state, expressions, commands, host).
#
# Notes:
#   - Lazy exports: importing pyezui.app does not import tkinter.
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import TYPE_CHECKING, Any

__all__ = [
	"App",
	"AppState",
	"Command",
	"NumCommand",
	"TextCommand",
	"NumLiteral",
	"NumRead",
	"TextLiteral",
	"TextRead",
	"eval_num",
	"eval_text",
]

_EXPORTS: dict[str, tuple[str, str]] = {
	"App": ("pyezui.app.app", "App"),
	"AppState": ("pyezui.app.state", "AppState"),
	"Command": ("pyezui.app.commands", "Command"),
	"NumCommand": ("pyezui.app.commands", "NumCommand"),
	"TextCommand": ("pyezui.app.commands", "TextCommand"),
	"NumLiteral": ("pyezui.app.expressions", "NumLiteral"),
	"NumRead": ("pyezui.app.expressions", "NumRead"),
	"TextLiteral": ("pyezui.app.expressions", "TextLiteral"),
	"TextRead": ("pyezui.app.expressions", "TextRead"),
	"eval_num": ("pyezui.app.expressions", "eval_num"),
	"eval_text": ("pyezui.app.expressions", "eval_text"),
}


def __getattr__(name: str) -> Any:
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
	from pyezui.app.app import App
	from pyezui.app.commands import Command, NumCommand, TextCommand
	from pyezui.app.expressions import NumLiteral, NumRead, TextLiteral, TextRead, eval_num, eval_text
	from pyezui.app.state import AppState
