# ---------------------------------------------------------------------------
# File: vocab.py
# ---------------------------------------------------------------------------
# Description:
#	Wire-name helpers shared by expressions, commands and the loader.
#
# Notes:
#	Configuration files spell tags either camelCase ("horizontalLayout",
#	"getName") or snake_case ("horizontal_layout", "get_name"). Both are
#	matched exactly against those two spellings; anything else (e.g.
#	"Hello", " hello") is not a tag. Output always uses camelCase.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Change
# ---------------------------------------------------------------------------
# 10/13/2026	Initial coding / release
# 10/19/2026	Exact tag matching (no case folding or trimming)
# ---------------------------------------------------------------------------

from __future__ import annotations

import re
from enum import Enum
from typing import Iterable, Optional, Type, TypeVar


_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")

E = TypeVar("E", bound=Enum)


def snake_case(tag: str) -> str:
	return _CAMEL_BOUNDARY.sub("_", tag).lower()


def camel_case(name: str) -> str:
	head, *rest = snake_case(name).split("_")
	return head + "".join(part.capitalize() for part in rest)


def spellings(name: str) -> tuple[str, str]:
	"""
	The two accepted spellings of a snake_case name: ("on_change", "onChange").
	"""
	return name, camel_case(name)


def match_tag(tag: str, names: Iterable[str]) -> Optional[str]:
	"""
	Return the snake_case name that tag spells exactly, if any.
	"""
	for name in names:
		if tag in spellings(name):
			return name
	return None


def lookup_member(enum_cls: Type[E], tag: str) -> Optional[E]:
	"""
	Find the member whose wire value is tag, in camelCase or snake_case.
	"""
	for member in enum_cls:
		if tag == member.value or tag == snake_case(member.value):
			return member
	return None
