# ---------------------------------------------------------------------------
# File: test_tk_surface.py
# ---------------------------------------------------------------------------
# Description:
#   Tests for TkSurface and the App host window.
#
# Notes:
#   - Creates real Tk widgets; skipped when no display is available.
#   - User input is simulated by invoking the widgets' own callbacks.
#
# ---------------------------------------------------------------------------

from __future__ import annotations

import tkinter as tk
from tkinter import ttk

import pytest

from pyezui.app.commands import Command, NumCommand, TextCommand
from pyezui.app.expressions import NumRead, TextLiteral, TextRead
from pyezui.core.config import AppConfig
from pyezui.core.telemetry import MemorySink, Telemetry
from pyezui.ui.engine import Engine
from pyezui.ui.tk_surface import TkSurface
from pyezui.ui.widgets import (
	Button,
	Configuration,
	HorizontalLayout,
	Image,
	Label,
	MainPanel,
	Slider,
	TextEdit,
)


@pytest.fixture
def root():
	try:
		tk_root = tk.Tk()
	except tk.TclError as ex:
		pytest.skip(f"no display: {ex}")
	tk_root.withdraw()
	try:
		yield tk_root
	finally:
		tk_root.destroy()


def _config() -> Configuration:
	return Configuration(
		name="tk",
		containers=(MainPanel(widgets=(
			Label(text=TextRead.HELLO),
			HorizontalLayout(widgets=(
				Label(text=TextLiteral("Your name: "), id="name_label"),
				TextEdit(value=TextRead.GET_NAME, on_change=TextCommand.SET_NAME, label_id="name_label"),
			)),
			Slider(range=(0, 100), text=TextLiteral("age"), value=NumRead.GET_AGE, on_change=NumCommand.SET_AGE),
			Button(text=TextLiteral("+1"), on_click=Command.INCREMENT_AGE),
			Image(src=TextLiteral("does/not/exist.png")),
		)),),
	)


def _of_type(surface: TkSurface, cls: type) -> list[tk.Widget]:
	return [w for w in surface.widgets() if isinstance(w, cls)]


def test_first_frame_builds_widgets_once(root):
	engine = Engine(_config())
	surface = TkSurface(root)

	engine.update(surface)
	first = surface.widgets()
	engine.update(surface)

	assert surface.widgets() == first
	assert len(_of_type(surface, ttk.Button)) == 1
	assert len(_of_type(surface, tk.Scale)) == 1
	assert len(_of_type(surface, ttk.Entry)) == 1


def test_button_click_dispatches_on_next_frame(root):
	engine = Engine(_config())
	surface = TkSurface(root)
	engine.update(surface)

	(button,) = _of_type(surface, ttk.Button)
	button.invoke()
	assert engine.state.age == 42

	engine.update(surface)
	assert engine.state.age == 43

	engine.update(surface)
	assert engine.state.age == 43


def test_typing_dispatches_set_name(root):
	engine = Engine(_config())
	surface = TkSurface(root)
	engine.update(surface)

	(entry,) = _of_type(surface, ttk.Entry)
	entry.delete(0, tk.END)
	entry.insert(0, "Ford")
	engine.update(surface)

	assert engine.state.name == "Ford"


def test_state_changes_reseed_entry_without_dispatch(root):
	engine = Engine(_config())
	surface = TkSurface(root)
	engine.update(surface)

	engine.state.name = "Marvin"
	engine.update(surface)
	engine.update(surface)

	(entry,) = _of_type(surface, ttk.Entry)
	assert entry.get() == "Marvin"
	assert engine.state.name == "Marvin"


def test_label_id_lookup(root):
	engine = Engine(_config())
	surface = TkSurface(root)
	engine.update(surface)

	label = surface.find_by_id("name_label")

	assert isinstance(label, ttk.Label)
	assert str(label.cget("text")) == "Your name: "


def test_missing_image_shows_placeholder(root):
	engine = Engine(_config())
	surface = TkSurface(root)

	engine.update(surface)

	labels = [str(w.cget("text")) for w in _of_type(surface, ttk.Label)]
	assert "[image: does/not/exist.png]" in labels


def test_unreached_slots_are_destroyed(root):
	surface = TkSurface(root)
	Engine(_config()).update(surface)
	assert surface.widgets()

	Engine(Configuration(name="empty")).update(surface)

	assert surface.widgets() == []


def test_app_window_runs_frames():
	from pyezui.app.app import App

	try:
		app = App(Engine(_config()), AppConfig({"width": 200, "height": 100, "theme": "no-such-theme"}))
	except tk.TclError as ex:
		pytest.skip(f"no display: {ex}")

	try:
		assert app.wm_title() == "tk"
		app.tick()
		app.tick()
		assert app.engine.frame_count == 2
		assert app.surface.widgets()
	finally:
		app.destroy()


def _slider_key(surface: TkSurface):
	(key,) = [key for key, slot in surface._slots.items() if slot.kind == "slider"]
	return key


def test_slider_drag_back_to_seeded_value_does_not_dispatch(root):
	sink = MemorySink()
	engine = Engine(_config(), telemetry=Telemetry(True, sink))
	surface = TkSurface(root)
	engine.update(surface)
	key = _slider_key(surface)

	surface._on_scale(key, "43")
	surface._on_scale(key, "42")
	engine.update(surface)

	assert engine.state.age == 42
	assert sink.metrics_named("engine.command") == []


def test_slider_drag_dispatches_latest_value(root):
	engine = Engine(_config())
	surface = TkSurface(root)
	engine.update(surface)
	key = _slider_key(surface)

	surface._on_scale(key, "43")
	surface._on_scale(key, "57")
	engine.update(surface)

	assert engine.state.age == 57


def test_app_keeps_frame_timer_armed_when_a_frame_raises():
	from pyezui.app.app import App

	try:
		app = App(Engine(_config()), AppConfig({"frame_ms": 1000}))
	except tk.TclError as ex:
		pytest.skip(f"no display: {ex}")

	def _boom() -> None:
		raise RuntimeError("frame failed")

	try:
		app.tick = _boom  # type: ignore[method-assign]
		with pytest.raises(RuntimeError):
			app._schedule()
		assert app._after_id is not None
	finally:
		app.stop()
		app.destroy()
