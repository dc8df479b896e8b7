# ---------------------------------------------------------------------------
# File: app.py
# ---------------------------------------------------------------------------
# Description:
#   Host window for pyezui: owns the Tk root, the TkSurface and the frame
#   timer that drives Engine.update().
#
# Notes:
#   - Frames run on the Tk event loop via after(); never two at once.
#   - Geometry is clamped to the screen and centered.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Change
# ---------------------------------------------------------------------------
# 10/16/2026	Initial coding / release
# 10/17/2026	Apply ttkthemes theme from options
# 10/19/2026	Re-arm the frame timer before rendering
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Optional

import tkinter as tk
from tkinter import ttk

import ttkthemes as ttk_themes

from pyezui.core.config import AppConfig
from pyezui.core.logging import get_app_logger
from pyezui.ui.engine import Engine
from pyezui.ui.tk_surface import TkSurface


log = get_app_logger("window")


class App(tk.Tk):
	"""
	App

	Root window running one Engine. Title comes from the configuration name.
	"""

	def __init__(self, engine: Engine, cfg: Optional[AppConfig] = None) -> None:
		super().__init__()

		self.engine = engine
		self.cfg = cfg or AppConfig(engine.config.options)
		self.title_text = engine.config.name or "pyezui"
		self.title(self.title_text)

		self._after_id: Optional[str] = None

		# Ensure Tk has computed screen dimensions
		self.update_idletasks()
		self._apply_geometry(self.cfg.width, self.cfg.height)
		self._apply_theme(self.cfg.theme)

		self.root_frame = ttk.Frame(self)
		self.root_frame.pack(fill="both", expand=True)

		self.surface = TkSurface(self.root_frame)

	# -----------------------------------------------------------------------
	# Frame loop
	# -----------------------------------------------------------------------

	def tick(self) -> None:
		"""
		Render one frame now.
		"""
		self.engine.update(self.surface)

	def _schedule(self) -> None:
		# Re-arm first so a failing frame does not stop the loop.
		self._after_id = self.after(self.cfg.frame_ms, self._schedule)
		self.tick()

	def stop(self) -> None:
		if self._after_id is not None:
			self.after_cancel(self._after_id)
			self._after_id = None

	def run(self) -> None:
		"""
		Render the first frame, then run the Tk event loop.
		"""
		log.info("Starting %r (%d ms/frame)", self.title_text, self.cfg.frame_ms)
		try:
			self._schedule()
			self.mainloop()
		finally:
			self.stop()
			log.info("Stopped after %d frames", self.engine.frame_count)

	# -----------------------------------------------------------------------
	# Window setup
	# -----------------------------------------------------------------------

	def _apply_geometry(self, width: int, height: int) -> None:
		screen_w = self.winfo_screenwidth()
		screen_h = self.winfo_screenheight()

		win_w = max(1, min(width, screen_w))
		win_h = max(1, min(height, screen_h))

		x = max(0, (screen_w - win_w) // 2)
		y = max(0, (screen_h - win_h) // 2)

		self.geometry(f"{win_w}x{win_h}+{x}+{y}")

	def _apply_theme(self, theme: Optional[str]) -> None:
		if not theme:
			return

		style = ttk_themes.ThemedStyle(self)
		if theme not in style.theme_names():
			log.warning("Unknown theme %r; keeping the default", theme)
			return

		style.theme_use(theme)
		log.debug("Theme %r applied", theme)

	def __repr__(self) -> str:
		return f"<{self.__class__.__name__} title={self.title_text!r}>"
