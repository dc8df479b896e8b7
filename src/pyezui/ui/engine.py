# ---------------------------------------------------------------------------
# File: engine.py
# ---------------------------------------------------------------------------
# Description:
#   The pyezui interpreter: walks the widget tree once per frame, evaluates
#   expressions against AppState, draws through a Surface, and dispatches
#   commands for widgets the user interacted with.
#
# Notes:
#   Per widget, per frame:
#       1) evaluate its expressions against the current state
#       2) draw it (the surface answers with a Response)
#       3) run at most one command if the Response says so
#   A widget is always drawn from the state as it was before its own command
#   runs. Widgets later in the same frame see the mutation; earlier ones pick
#   it up on the next frame.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Change
# ---------------------------------------------------------------------------
# 10/15/2026	Initial coding / release
# 10/16/2026	Clamp slider values for display and dispatch
# 10/16/2026	Telemetry: frame timer + command counter
# 10/19/2026	Close the surface frame even when a frame raises
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Optional

from pyezui.app.commands import Command, NumCommand, TextCommand
from pyezui.app.expressions import eval_num, eval_text
from pyezui.app.state import AppState
from pyezui.core.logging import get_app_logger
from pyezui.core.telemetry import Telemetry, get_telemetry
from pyezui.ui.surface import Surface
from pyezui.ui.widgets import (
	Button,
	Configuration,
	Container,
	HorizontalLayout,
	Image,
	Label,
	MainPanel,
	Slider,
	TextEdit,
	Widget,
)


log = get_app_logger("engine")


def image_uri(src: str) -> str:
	"""
	Plain paths become file:// URIs; anything with a scheme is left alone.
	"""
	if "://" in src:
		return src
	return f"file://{src}"


class Engine:
	"""
	Engine

	Owns the configuration and the application state for the process lifetime.
	The hosting event loop calls update() once per display refresh.
	"""

	def __init__(
		self,
		config: Configuration,
		state: Optional[AppState] = None,
		telemetry: Optional[Telemetry] = None,
	) -> None:
		self.config = config
		self._state = state if state is not None else AppState.default()
		self.telemetry = telemetry or get_telemetry()
		self.frame_count = 0

	@property
	def state(self) -> AppState:
		return self._state

	# -----------------------------------------------------------------------
	# Frame driver
	# -----------------------------------------------------------------------

	def update(self, surface: Surface) -> None:
		"""
		Render one frame: every container, in configuration order.
		"""
		surface.begin_frame()
		try:
			with self.telemetry.timer("engine.frame_ms", {"config": self.config.name}):
				for container in self.config.containers:
					self.render_container(container, surface)
		finally:
			surface.end_frame()
		self.frame_count += 1

	def render_container(self, container: Container, surface: Surface) -> None:
		if isinstance(container, MainPanel):
			with surface.panel():
				for widget in container.widgets:
					self.render_widget(widget, surface)
		else:
			raise TypeError(f"not a container: {container!r}")

	# -----------------------------------------------------------------------
	# Widgets
	# -----------------------------------------------------------------------

	def render_widget(self, widget: Widget, surface: Surface) -> None:
		state = self._state

		if isinstance(widget, Label):
			surface.label(eval_text(widget.text, state), widget.id)

		elif isinstance(widget, HorizontalLayout):
			with surface.horizontal():
				for child in widget.widgets:
					self.render_widget(child, surface)

		elif isinstance(widget, Slider):
			value = widget.clamp(eval_num(widget.value, state))
			response = surface.slider(value, widget.low, widget.high, eval_text(widget.text, state))
			if response.changed and response.value is not None:
				self._run_num(widget, widget.on_change, widget.clamp(int(response.value)))

		elif isinstance(widget, Button):
			response = surface.button(eval_text(widget.text, state))
			if response.clicked:
				self._run(widget, widget.on_click)

		elif isinstance(widget, Image):
			surface.image(image_uri(eval_text(widget.src, state)))

		elif isinstance(widget, TextEdit):
			response = surface.text_edit(eval_text(widget.value, state), widget.label_id)
			if response.changed and response.value is not None:
				self._run_text(widget, widget.on_change, str(response.value))

		else:
			raise TypeError(f"not a widget: {widget!r}")

	# -----------------------------------------------------------------------
	# Dispatch
	# -----------------------------------------------------------------------

	def _run(self, widget: Widget, command: Command) -> None:
		log.debug("%s -> %s()", widget.kind, command.value)
		command.run(self._state)
		self.telemetry.command_dispatched(command.value, widget.kind)

	def _run_num(self, widget: Widget, command: NumCommand, value: int) -> None:
		log.debug("%s -> %s(%d)", widget.kind, command.value, value)
		command.run(value, self._state)
		self.telemetry.command_dispatched(command.value, widget.kind)

	def _run_text(self, widget: Widget, command: TextCommand, value: str) -> None:
		log.debug("%s -> %s(%r)", widget.kind, command.value, value)
		command.run(value, self._state)
		self.telemetry.command_dispatched(command.value, widget.kind)

	def __repr__(self) -> str:
		return f"<{self.__class__.__name__} config={self.config.name!r} frames={self.frame_count}>"
