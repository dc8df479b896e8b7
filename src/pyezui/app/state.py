# ---------------------------------------------------------------------------
# File: state.py
# ---------------------------------------------------------------------------
# Description:
#	Application state read by value expressions and written by commands.
#
# Notes:
#	- One owner: the Engine. Nothing else mutates it between frames.
#	- Add a field here together with its reads (expressions.py) and
#	  mutations (commands.py).
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Change
# ---------------------------------------------------------------------------
# 10/13/2026	Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class StateSnapshot:
	name: str
	age: int


@dataclass(slots=True)
class AppState:
	"""
	AppState

	- name:	display name.
	- age:	non-negative integer.
	"""
	name: str = "Arthur"
	age: int = 42

	@classmethod
	def default(cls) -> "AppState":
		return cls()

	def snapshot(self) -> StateSnapshot:
		return StateSnapshot(name=self.name, age=self.age)
