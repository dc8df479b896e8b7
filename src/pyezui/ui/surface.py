# ---------------------------------------------------------------------------
# File: surface.py
# ---------------------------------------------------------------------------
# Description:
#   Render surface contract between the engine and a UI toolkit.
#
# Notes:
#   - Immediate-mode: the engine describes every widget on every frame.
#   - Interaction comes back as the synchronous return value of the call
#     for that widget (Response); no callbacks are registered by the engine.
#   - Widgets are identified by call order within a frame. The tree is
#     immutable, so the order is stable from frame to frame.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Change
# ---------------------------------------------------------------------------
# 10/15/2026	Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ContextManager, Optional, Protocol, runtime_checkable


@dataclass(frozen=True, slots=True)
class Response:
	"""
	Outcome of drawing one widget for one frame.

	- changed:	the user changed the widget's value (slider, text edit).
	- clicked:	the user activated the widget (button).
	- value:	the new value when changed is True.
	"""
	changed: bool = False
	clicked: bool = False
	value: Any = None


NO_RESPONSE = Response()


@runtime_checkable
class Surface(Protocol):
	def begin_frame(self) -> None: ...
	def end_frame(self) -> None: ...

	def panel(self) -> ContextManager[None]: ...
	def horizontal(self) -> ContextManager[None]: ...

	def label(self, text: str, id: Optional[str] = None) -> None: ...
	def slider(self, value: int, low: int, high: int, text: str) -> Response: ...
	def button(self, text: str) -> Response: ...
	def image(self, uri: str) -> None: ...
	def text_edit(self, value: str, id: Optional[str] = None) -> Response: ...
