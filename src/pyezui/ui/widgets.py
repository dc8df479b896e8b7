# ---------------------------------------------------------------------------
# File: widgets.py
# ---------------------------------------------------------------------------
# Description:
#   Declarative widget tree for pyezui.
#
# Notes:
#   - Composite pattern: HorizontalLayout owns its children directly.
#   - Nodes are frozen; a frame redraws them, it never mutates them.
#     State changes live in AppState only.
#   - Child sequences are tuples so trees compare and hash structurally.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Change
# ---------------------------------------------------------------------------
# 10/14/2026	Initial coding / release
# 10/15/2026	Add iter_widgets + Slider.clamp
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Optional, Union

from pyezui.app.commands import Command, NumCommand, TextCommand
from pyezui.app.expressions import NumExpr, TextExpr


@dataclass(frozen=True, slots=True)
class Label:
	text: TextExpr
	id: Optional[str] = None

	kind = "label"


@dataclass(frozen=True, slots=True)
class HorizontalLayout:
	widgets: tuple["Widget", ...] = ()

	kind = "horizontalLayout"

	def __post_init__(self) -> None:
		object.__setattr__(self, "widgets", tuple(self.widgets))


@dataclass(frozen=True, slots=True)
class TextEdit:
	value: TextExpr
	on_change: TextCommand
	label_id: Optional[str] = None

	kind = "textEdit"


@dataclass(frozen=True, slots=True)
class Slider:
	"""
	Slider over an inclusive integer range.

	The value expression is expected to stay inside `range`; the engine
	clamps for display and before dispatch, it never writes a clamped value
	back on its own.
	"""
	range: tuple[int, int]
	text: TextExpr
	value: NumExpr
	on_change: NumCommand

	kind = "slider"

	def __post_init__(self) -> None:
		lo, hi = self.range
		object.__setattr__(self, "range", (int(lo), int(hi)))

	@property
	def low(self) -> int:
		return self.range[0]

	@property
	def high(self) -> int:
		return self.range[1]

	def clamp(self, value: int) -> int:
		return max(self.low, min(self.high, value))

	def contains(self, value: int) -> bool:
		return self.low <= value <= self.high


@dataclass(frozen=True, slots=True)
class Button:
	text: TextExpr
	on_click: Command

	kind = "button"


@dataclass(frozen=True, slots=True)
class Image:
	src: TextExpr

	kind = "image"


Widget = Union[Label, HorizontalLayout, TextEdit, Slider, Button, Image]

WIDGET_TYPES: tuple[type, ...] = (Label, HorizontalLayout, TextEdit, Slider, Button, Image)


# ---------------------------------------------------------------------------
# Containers / configuration
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class MainPanel:
	widgets: tuple[Widget, ...] = ()

	kind = "mainPanel"

	def __post_init__(self) -> None:
		object.__setattr__(self, "widgets", tuple(self.widgets))


Container = MainPanel


@dataclass(frozen=True, slots=True)
class Configuration:
	"""
	Configuration

	- name:			window title.
	- containers:	top-level regions, rendered in order.
	- options:		host options (see core/config.py); not part of the tree.
	"""
	name: str
	containers: tuple[Container, ...] = ()
	options: dict[str, Any] = field(default_factory=dict, compare=False, hash=False)

	def __post_init__(self) -> None:
		object.__setattr__(self, "containers", tuple(self.containers))

	def iter_widgets(self) -> Iterator[Widget]:
		for container in self.containers:
			yield from iter_widgets(container.widgets)


def iter_widgets(widgets: tuple[Widget, ...]) -> Iterator[Widget]:
	"""
	Depth-first, declaration order.
	"""
	for widget in widgets:
		yield widget
		if isinstance(widget, HorizontalLayout):
			yield from iter_widgets(widget.widgets)
