# ---------------------------------------------------------------------------
# File: commands.py
# ---------------------------------------------------------------------------
# Description:
#   Named, serializable state mutations for pyezui.
#
# Notes:
#   Commands are the single mutation spine for widgets (buttons, sliders,
#   text edits). Three families, by argument:
#       Command			no argument		(onClick)
#       NumCommand		int argument	(slider onChange)
#       TextCommand		str argument	(textEdit onChange)
#   Every member has exactly one handler; the tables are checked at import.
#   Handlers are total: they never raise for a value of their declared type.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Change
# ---------------------------------------------------------------------------
# 10/13/2026	Initial coding / release
# 10/14/2026	Split into arity families + wire parsing
# ---------------------------------------------------------------------------

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Mapping, Optional, Type, TypeVar

from pyezui.app.state import AppState
from pyezui.app.vocab import lookup_member
from pyezui.core.errors import ConfigError


C = TypeVar("C", bound=Enum)


class Command(Enum):
	INCREMENT_AGE = "incrementAge"

	def run(self, state: AppState) -> None:
		_COMMANDS[self](state)


class NumCommand(Enum):
	SET_AGE = "setAge"

	def run(self, value: int, state: AppState) -> None:
		_NUM_COMMANDS[self](state, value)


class TextCommand(Enum):
	SET_NAME = "setName"

	def run(self, value: str, state: AppState) -> None:
		_TEXT_COMMANDS[self](state, value)


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------

def _increment_age(state: AppState) -> None:
	state.age += 1


def _set_age(state: AppState, value: int) -> None:
	state.age = max(0, int(value))


def _set_name(state: AppState, value: str) -> None:
	state.name = str(value)


_COMMANDS: dict[Command, Callable[[AppState], None]] = {
	Command.INCREMENT_AGE: _increment_age,
}

_NUM_COMMANDS: dict[NumCommand, Callable[[AppState, int], None]] = {
	NumCommand.SET_AGE: _set_age,
}

_TEXT_COMMANDS: dict[TextCommand, Callable[[AppState, str], None]] = {
	TextCommand.SET_NAME: _set_name,
}


def _check_complete(enum_cls: Type[Enum], table: Mapping[Any, Any]) -> None:
	missing = [member.name for member in enum_cls if member not in table]
	if missing:
		raise RuntimeError(f"{enum_cls.__name__} has no handler for: {', '.join(missing)}")


_check_complete(Command, _COMMANDS)
_check_complete(NumCommand, _NUM_COMMANDS)
_check_complete(TextCommand, _TEXT_COMMANDS)


# ---------------------------------------------------------------------------
# Wire parsing
# ---------------------------------------------------------------------------

def parse_command(raw: Any, path: str) -> Command:
	return _parse(Command, raw, path)


def parse_num_command(raw: Any, path: str) -> NumCommand:
	return _parse(NumCommand, raw, path)


def parse_text_command(raw: Any, path: str) -> TextCommand:
	return _parse(TextCommand, raw, path)


def _parse(enum_cls: Type[C], raw: Any, path: str) -> C:
	if not isinstance(raw, str):
		raise ConfigError(f"command name expected, got {raw!r}", path)

	member: Optional[C] = lookup_member(enum_cls, raw)
	if member is None:
		known = ", ".join(m.value for m in enum_cls)
		raise ConfigError(f"unknown {enum_cls.__name__} {raw!r} (known: {known})", path)

	return member
