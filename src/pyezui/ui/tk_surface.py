# ---------------------------------------------------------------------------
# File: tk_surface.py
# ---------------------------------------------------------------------------
# Description:
#   Tkinter implementation of the pyezui Surface contract.
#
# Notes:
#   - Tk is retained-mode; the engine is immediate-mode. Each draw call is
#     matched to a "slot" by its position in the frame's walk. Slots are
#     created on first sight, updated afterwards, and destroyed when a frame
#     no longer reaches them.
#   - User input only marks a slot dirty. The next frame's call for that
#     slot consumes the flag and returns it as a Response.
#   - Programmatic updates (seeding a value from state) never mark a slot
#     dirty.
#   - Image load failures are logged and drawn as a text placeholder.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Change
# ---------------------------------------------------------------------------
# 10/16/2026	Initial coding / release
# 10/17/2026	Filter deferred tk.Scale callbacks against the seeded value
# 10/19/2026	Returning a slider to its seeded value clears the pending change
# ---------------------------------------------------------------------------

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, Optional

import tkinter as tk
from tkinter import ttk

from pyezui.core.logging import get_app_logger
from pyezui.ui.surface import NO_RESPONSE, Response


log = get_app_logger("tk_surface")

SlotKey = tuple[int, ...]

FILE_SCHEME = "file://"

_UNSET = object()


@dataclass(slots=True)
class _Slot:
	"""
	One Tk widget standing in for one described widget.
	"""
	kind: str
	widget: tk.Widget
	var: Optional[tk.Variable] = None
	seeded: Any = None
	dirty: bool = False
	pending: Any = None
	updating: bool = False
	resource: Any = None
	extra: dict[str, Any] = field(default_factory=dict)

	def take(self) -> tuple[bool, Any]:
		dirty, value = self.dirty, self.pending
		self.dirty = False
		self.pending = None
		return dirty, value


class TkSurface:
	"""
	TkSurface

	Draws described widgets into `parent` (usually App.root_frame).
	"""

	def __init__(self, parent: tk.Misc) -> None:
		self.parent = parent
		self._slots: dict[SlotKey, _Slot] = {}
		self._seen: set[SlotKey] = set()
		self._ids: dict[str, SlotKey] = {}

		# Walk state for the current frame
		self._prefix: list[int] = []
		self._counters: list[int] = [0]
		self._parents: list[tk.Misc] = [parent]
		self._sides: list[str] = ["top"]

	# -----------------------------------------------------------------------
	# Frame bracket
	# -----------------------------------------------------------------------

	def begin_frame(self) -> None:
		self._seen.clear()
		self._prefix = []
		self._counters = [0]
		self._parents = [self.parent]
		self._sides = ["top"]

	def end_frame(self) -> None:
		stale = [key for key in self._slots if key not in self._seen]
		# Children first so parents are destroyed last.
		for key in sorted(stale, key=len, reverse=True):
			slot = self._slots.pop(key)
			if slot.widget.winfo_exists():
				slot.widget.destroy()
		self._ids = {i: k for i, k in self._ids.items() if k in self._slots}

	# -----------------------------------------------------------------------
	# Regions
	# -----------------------------------------------------------------------

	@contextmanager
	def panel(self) -> Iterator[None]:
		slot = self._slot("panel", lambda parent: ttk.Frame(parent, padding=8), fill="both", expand=True)
		with self._region(slot, side="top"):
			yield

	@contextmanager
	def horizontal(self) -> Iterator[None]:
		slot = self._slot("horizontal", lambda parent: ttk.Frame(parent))
		with self._region(slot, side="left"):
			yield

	@contextmanager
	def _region(self, slot: _Slot, *, side: str) -> Iterator[None]:
		self._prefix.append(self._counters[-1] - 1)
		self._counters.append(0)
		self._parents.append(slot.widget)
		self._sides.append(side)
		try:
			yield
		finally:
			self._sides.pop()
			self._parents.pop()
			self._counters.pop()
			self._prefix.pop()

	# -----------------------------------------------------------------------
	# Widgets
	# -----------------------------------------------------------------------

	def label(self, text: str, id: Optional[str] = None) -> None:
		slot = self._slot("label", lambda parent: ttk.Label(parent, text=text), id=id)
		self._configure(slot, text=text)

	def button(self, text: str) -> Response:
		def build(parent: tk.Misc) -> tk.Widget:
			return ttk.Button(parent, text=text, command=lambda: self._mark(key))

		key = self._peek_key()
		slot = self._slot("button", build)
		self._configure(slot, text=text)

		clicked, _ = slot.take()
		return Response(clicked=True) if clicked else NO_RESPONSE

	def slider(self, value: int, low: int, high: int, text: str) -> Response:
		key = self._peek_key()

		def build(parent: tk.Misc) -> tk.Widget:
			var = tk.IntVar(parent, value=value)
			scale = tk.Scale(
				parent,
				from_=low,
				to=high,
				orient=tk.HORIZONTAL,
				resolution=1,
				label=text,
				variable=var,
				command=lambda raw: self._on_scale(key, raw),
			)
			scale._pyezui_var = var  # type: ignore[attr-defined]
			return scale

		slot = self._slot("slider", build)
		if slot.var is None:
			slot.var = slot.widget._pyezui_var  # type: ignore[attr-defined]
			slot.seeded = value

		self._configure(slot, from_=low, to=high, label=text)

		changed, new_value = slot.take()
		if changed:
			return Response(changed=True, value=new_value)

		if slot.seeded != value:
			slot.seeded = value
			slot.var.set(value)
		return NO_RESPONSE

	def text_edit(self, value: str, id: Optional[str] = None) -> Response:
		key = self._peek_key()

		def build(parent: tk.Misc) -> tk.Widget:
			var = tk.StringVar(parent, value=value)
			entry = ttk.Entry(parent, textvariable=var)
			entry._pyezui_var = var  # type: ignore[attr-defined]
			var.trace_add("write", lambda *_: self._on_text(key))
			return entry

		slot = self._slot("text_edit", build, id=id)
		if slot.var is None:
			slot.var = slot.widget._pyezui_var  # type: ignore[attr-defined]

		changed, _ = slot.take()
		if changed:
			return Response(changed=True, value=slot.var.get())

		if slot.var.get() != value:
			slot.updating = True
			try:
				slot.var.set(value)
			finally:
				slot.updating = False
		return NO_RESPONSE

	def image(self, uri: str) -> None:
		slot = self._slot("image", lambda parent: ttk.Label(parent))
		if slot.extra.get("uri") == uri:
			return

		slot.extra["uri"] = uri
		path = uri[len(FILE_SCHEME):] if uri.startswith(FILE_SCHEME) else uri

		try:
			photo = tk.PhotoImage(master=slot.widget, file=path)
		except tk.TclError as ex:
			log.warning("Cannot load image %r: %s", uri, ex)
			slot.resource = None
			slot.widget.configure(image="", text=f"[image: {path}]")
			return

		slot.resource = photo
		slot.widget.configure(image=photo, text="")

	# -----------------------------------------------------------------------
	# Lookup
	# -----------------------------------------------------------------------

	def find_by_id(self, id: str) -> Optional[tk.Widget]:
		key = self._ids.get(id)
		slot = self._slots.get(key) if key is not None else None
		return slot.widget if slot is not None else None

	def widgets(self) -> list[tk.Widget]:
		return [self._slots[key].widget for key in sorted(self._slots)]

	# -----------------------------------------------------------------------
	# Internals
	# -----------------------------------------------------------------------

	def _peek_key(self) -> SlotKey:
		return tuple(self._prefix) + (self._counters[-1],)

	def _slot(
		self,
		kind: str,
		build: Callable[[tk.Misc], tk.Widget],
		*,
		id: Optional[str] = None,
		fill: str = "none",
		expand: bool = False,
	) -> _Slot:
		key = self._peek_key()
		self._counters[-1] += 1
		self._seen.add(key)

		slot = self._slots.get(key)
		if slot is not None and slot.kind != kind:
			log.debug("Slot %s changed kind %s -> %s; rebuilding", key, slot.kind, kind)
			slot.widget.destroy()
			slot = None

		if slot is None:
			widget = build(self._parents[-1])
			side = self._sides[-1]
			anchor = "w" if side == "top" else "center"
			widget.pack(side=side, anchor=anchor, fill=fill, expand=expand, padx=2, pady=2)
			slot = _Slot(kind=kind, widget=widget)
			self._slots[key] = slot

		if id:
			self._ids[id] = key

		return slot

	def _configure(self, slot: _Slot, **options: Any) -> None:
		"""
		Apply only the options that differ from what was last applied.
		"""
		changed = {k: v for k, v in options.items() if slot.extra.get(k, _UNSET) != v}
		if changed:
			slot.widget.configure(**changed)
			slot.extra.update(changed)

	def _mark(self, key: SlotKey, value: Any = None) -> None:
		slot = self._slots.get(key)
		if slot is None:
			return
		slot.dirty = True
		slot.pending = value

	def _on_scale(self, key: SlotKey, raw: str) -> None:
		slot = self._slots.get(key)
		if slot is None:
			return
		value = int(float(raw))
		# tk.Scale also reports programmatic sets, after the fact. A drag that
		# ends back on the seeded value cancels any earlier pending change.
		if value == slot.seeded:
			slot.dirty = False
			slot.pending = None
			return
		self._mark(key, value)

	def _on_text(self, key: SlotKey) -> None:
		slot = self._slots.get(key)
		if slot is None or slot.updating:
			return
		self._mark(key)
