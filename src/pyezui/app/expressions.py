# ---------------------------------------------------------------------------
# File: expressions.py
# ---------------------------------------------------------------------------
# Description:
#	Value expressions: how a widget obtains its text or number each frame.
#
# Notes:
#	- Two families: textual (TextExpr) and numeric (NumExpr).
#	- Each is either a literal or a named read from a closed table over AppState.
#	- Evaluation is pure; it never mutates AppState.
#
#	Wire form:
#		text: "Some text"			-> TextLiteral("Some text")
#		text: getName				-> TextRead.GET_NAME
#		text: {literal: hello}		-> TextLiteral("hello")  (not the read)
#		value: 42					-> NumLiteral(42)
#		value: getAge				-> NumRead.GET_AGE
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Change
# ---------------------------------------------------------------------------
# 10/13/2026	Initial coding / release
# 10/14/2026	Add {literal: ...} escape for strings that name a read
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Mapping, Optional, Union

from pyezui.app.state import AppState
from pyezui.app.vocab import lookup_member
from pyezui.core.errors import ConfigError


LITERAL_KEY = "literal"


# ---------------------------------------------------------------------------
# Textual expressions
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class TextLiteral:
	value: str


class TextRead(Enum):
	GET_NAME = "getName"
	HELLO = "hello"

	@classmethod
	def lookup(cls, tag: str) -> Optional["TextRead"]:
		return lookup_member(cls, tag)

	def evaluate(self, state: AppState) -> str:
		return _TEXT_READS[self](state)


TextExpr = Union[TextLiteral, TextRead]


_TEXT_READS: dict[TextRead, Callable[[AppState], str]] = {
	TextRead.GET_NAME: lambda state: state.name,
	TextRead.HELLO: lambda state: f"Hello '{state.name}', age {state.age}",
}


# ---------------------------------------------------------------------------
# Numeric expressions
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class NumLiteral:
	value: int

	def __post_init__(self) -> None:
		if isinstance(self.value, bool) or not isinstance(self.value, int) or self.value < 0:
			raise ValueError(f"NumLiteral requires a non-negative int, got {self.value!r}")


class NumRead(Enum):
	GET_AGE = "getAge"

	@classmethod
	def lookup(cls, tag: str) -> Optional["NumRead"]:
		return lookup_member(cls, tag)

	def evaluate(self, state: AppState) -> int:
		return _NUM_READS[self](state)


NumExpr = Union[NumLiteral, NumRead]


_NUM_READS: dict[NumRead, Callable[[AppState], int]] = {
	NumRead.GET_AGE: lambda state: state.age,
}


def _check_complete(enum_cls: type[Enum], table: Mapping[Any, Any]) -> None:
	missing = [member.name for member in enum_cls if member not in table]
	if missing:
		raise RuntimeError(f"{enum_cls.__name__} has no reader for: {', '.join(missing)}")


_check_complete(TextRead, _TEXT_READS)
_check_complete(NumRead, _NUM_READS)


# ---------------------------------------------------------------------------
# Evaluation
# ---------------------------------------------------------------------------

def eval_text(expr: TextExpr, state: AppState) -> str:
	if isinstance(expr, TextLiteral):
		return expr.value
	return expr.evaluate(state)


def eval_num(expr: NumExpr, state: AppState) -> int:
	if isinstance(expr, NumLiteral):
		return expr.value
	return expr.evaluate(state)


# ---------------------------------------------------------------------------
# Wire parsing / dumping
# ---------------------------------------------------------------------------

def parse_text_expr(raw: Any, path: str) -> TextExpr:
	if isinstance(raw, Mapping):
		return TextLiteral(_scalar_text(_literal_payload(raw, path), path))

	if isinstance(raw, str):
		read = TextRead.lookup(raw)
		return read if read is not None else TextLiteral(raw)

	return TextLiteral(_scalar_text(raw, path))


def parse_num_expr(raw: Any, path: str) -> NumExpr:
	if isinstance(raw, Mapping):
		raw = _literal_payload(raw, path)
		if isinstance(raw, str):
			raise ConfigError(f"numeric literal expected, got {raw!r}", path)

	if isinstance(raw, str):
		read = NumRead.lookup(raw)
		if read is None:
			known = ", ".join(member.value for member in NumRead)
			raise ConfigError(f"unknown numeric read {raw!r} (known: {known})", path)
		return read

	if isinstance(raw, bool) or not isinstance(raw, int):
		raise ConfigError(f"non-negative integer expected, got {raw!r}", path)

	if raw < 0:
		raise ConfigError(f"non-negative integer expected, got {raw}", path)

	return NumLiteral(raw)


def dump_text_expr(expr: TextExpr) -> Any:
	if isinstance(expr, TextRead):
		return expr.value
	if TextRead.lookup(expr.value) is not None:
		return {LITERAL_KEY: expr.value}
	return expr.value


def dump_num_expr(expr: NumExpr) -> Any:
	# Reads dump as their tag, literals as the bare int.
	return expr.value


def _literal_payload(raw: Mapping[Any, Any], path: str) -> Any:
	if set(raw.keys()) != {LITERAL_KEY}:
		raise ConfigError(f"expression mapping must be {{{LITERAL_KEY}: ...}}, got keys {sorted(map(str, raw))}", path)
	return raw[LITERAL_KEY]


def _scalar_text(raw: Any, path: str) -> str:
	if isinstance(raw, str):
		return raw
	if isinstance(raw, (int, float)) and not isinstance(raw, bool):
		return str(raw)
	raise ConfigError(f"text expected, got {raw!r}", path)
