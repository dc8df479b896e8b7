# ---------------------------------------------------------------------------
# File: test_commands.py
# ---------------------------------------------------------------------------
# Description:
#   Unit tests for pyezui commands.
#
# Notes:
#   - Pure unit tests; no Tkinter dependency.
#
# ---------------------------------------------------------------------------

from __future__ import annotations

import pytest

from pyezui.app.commands import (
	Command,
	NumCommand,
	TextCommand,
	parse_command,
	parse_num_command,
	parse_text_command,
)
from pyezui.app.state import AppState
from pyezui.core.errors import ConfigError


@pytest.mark.parametrize("value", [0, 1, 7, 42, 100, 10_000])
def test_set_age_sets_exactly(value):
	state = AppState()

	NumCommand.SET_AGE.run(value, state)

	assert state.age == value
	assert state.name == "Arthur"


@pytest.mark.parametrize("value", ["", "Ford", "Trillian McMillan", "名前"])
def test_set_name_sets_exactly(value):
	state = AppState()

	TextCommand.SET_NAME.run(value, state)

	assert state.name == value
	assert state.age == 42


def test_increment_age():
	state = AppState(age=41)

	Command.INCREMENT_AGE.run(state)
	Command.INCREMENT_AGE.run(state)

	assert state.age == 43


def test_every_member_runs():
	state = AppState()

	for command in Command:
		command.run(state)
	for num_command in NumCommand:
		num_command.run(1, state)
	for text_command in TextCommand:
		text_command.run("x", state)


def test_parse_accepts_camel_and_snake_case():
	assert parse_command("incrementAge", "p") is Command.INCREMENT_AGE
	assert parse_command("increment_age", "p") is Command.INCREMENT_AGE
	assert parse_num_command("setAge", "p") is NumCommand.SET_AGE
	assert parse_text_command("set_name", "p") is TextCommand.SET_NAME


@pytest.mark.parametrize("raw", ["IncrementAge", "INCREMENT_AGE", " incrementAge", "incrementage"])
def test_parse_command_spelling_is_exact(raw):
	with pytest.raises(ConfigError):
		parse_command(raw, "p")


def test_parse_rejects_command_of_wrong_family():
	with pytest.raises(ConfigError):
		parse_num_command("setName", "p")
	with pytest.raises(ConfigError):
		parse_command("setAge", "p")


def test_parse_rejects_non_string():
	with pytest.raises(ConfigError):
		parse_command(None, "p")
	with pytest.raises(ConfigError):
		parse_text_command({"setName": None}, "p")
