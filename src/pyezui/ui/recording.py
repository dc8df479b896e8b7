# ---------------------------------------------------------------------------
# File: recording.py
# ---------------------------------------------------------------------------
# Description:
#   Headless Surface that records draw calls and replays scripted input.
#
# Notes:
#   - Scripted input is keyed by (kind, ordinal within the frame), e.g.
#     script_slider(0, 50) answers the first slider of the next frame.
#   - Each script entry is consumed by exactly one call.
#   - Recorded ops are plain tuples so frames compare with ==.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Change
# ---------------------------------------------------------------------------
# 10/15/2026	Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from collections import Counter
from contextlib import contextmanager
from typing import Any, Iterator, Optional

from pyezui.ui.surface import NO_RESPONSE, Response


Op = tuple[str, Any]


class RecordingSurface:
	"""
	RecordingSurface

	frames:	one list of ops per completed frame.
	"""

	def __init__(self) -> None:
		self.frames: list[list[Op]] = []
		self._ops: list[Op] = []
		self._ordinals: Counter[str] = Counter()
		self._script: dict[tuple[str, int], Response] = {}

	# -----------------------------------------------------------------------
	# Scripting
	# -----------------------------------------------------------------------

	def script_slider(self, index: int, value: int) -> None:
		self._script[("slider", index)] = Response(changed=True, value=value)

	def script_button(self, index: int) -> None:
		self._script[("button", index)] = Response(clicked=True)

	def script_text(self, index: int, value: str) -> None:
		self._script[("text_edit", index)] = Response(changed=True, value=value)

	@property
	def pending(self) -> int:
		return len(self._script)

	@property
	def last_frame(self) -> list[Op]:
		return self.frames[-1] if self.frames else []

	def ops_of(self, kind: str, frame: int = -1) -> list[Any]:
		return [payload for op_kind, payload in self.frames[frame] if op_kind == kind]

	# -----------------------------------------------------------------------
	# Surface
	# -----------------------------------------------------------------------

	def begin_frame(self) -> None:
		self._ops = []
		self._ordinals.clear()

	def end_frame(self) -> None:
		self.frames.append(self._ops)
		self._ops = []

	@contextmanager
	def panel(self) -> Iterator[None]:
		self._record("panel", "begin")
		yield
		self._record("panel", "end")

	@contextmanager
	def horizontal(self) -> Iterator[None]:
		self._record("horizontal", "begin")
		yield
		self._record("horizontal", "end")

	def label(self, text: str, id: Optional[str] = None) -> None:
		self._record("label", (text, id))

	def slider(self, value: int, low: int, high: int, text: str) -> Response:
		self._record("slider", (value, low, high, text))
		return self._answer("slider")

	def button(self, text: str) -> Response:
		self._record("button", text)
		return self._answer("button")

	def image(self, uri: str) -> None:
		self._record("image", uri)

	def text_edit(self, value: str, id: Optional[str] = None) -> Response:
		self._record("text_edit", (value, id))
		return self._answer("text_edit")

	# -----------------------------------------------------------------------
	# Internals
	# -----------------------------------------------------------------------

	def _record(self, kind: str, payload: Any) -> None:
		self._ops.append((kind, payload))

	def _answer(self, kind: str) -> Response:
		ordinal = self._ordinals[kind]
		self._ordinals[kind] += 1
		return self._script.pop((kind, ordinal), NO_RESPONSE)
