# ---------------------------------------------------------------------------
# File: test_loader.py
# ---------------------------------------------------------------------------
# Description:
#   Unit tests for configuration loading / saving.
#
# Notes:
#   - Pure unit tests; no Tkinter dependency.
#   - Files are written under pytest's tmp_path.
#
# ---------------------------------------------------------------------------

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from pyezui.app.commands import Command, NumCommand, TextCommand
from pyezui.app.expressions import NumLiteral, NumRead, TextLiteral, TextRead
from pyezui.core.errors import ConfigError
from pyezui.ui.loader import (
	dump_config,
	dumps_config,
	load_config,
	loads_config,
	parse_config,
	save_config,
)
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


CANONICAL_YAML = """
name: Demo
containers:
  - mainPanel:
      widgets:
        - label: {text: hello}
        - horizontalLayout:
            widgets:
              - label: {text: "Your name: ", id: name_label}
              - textEdit: {value: getName, onChange: setName, labelId: name_label}
        - slider: {range: [0, 100], text: age, value: getAge, onChange: setAge}
        - button: {text: Click each year, onClick: incrementAge}
        - image: {src: logo.png}
"""

# Layout written by earlier configuration files: internally tagged, snake_case.
LEGACY_YAML = """
name: Demo
containers:
  - type: central_panel
    widgets:
      - type: label
        text: hello
      - type: horizontal_layout
        widgets:
          - type: label
            text: "Your name: "
            id: name_label
          - type: text_edit
            value: get_name
            on_change: set_name
            label_id: name_label
      - type: slider
        range: {start: 0, end: 100}
        text: age
        value: get_age
        on_change: set_age
      - type: button
        text: Click each year
        on_click: increment_age
      - type: image
        src: logo.png
"""


def _expected() -> Configuration:
	return Configuration(
		name="Demo",
		containers=(
			MainPanel(widgets=(
				Label(text=TextRead.HELLO),
				HorizontalLayout(widgets=(
					Label(text=TextLiteral("Your name: "), id="name_label"),
					TextEdit(value=TextRead.GET_NAME, on_change=TextCommand.SET_NAME, label_id="name_label"),
				)),
				Slider(range=(0, 100), text=TextLiteral("age"), value=NumRead.GET_AGE, on_change=NumCommand.SET_AGE),
				Button(text=TextLiteral("Click each year"), on_click=Command.INCREMENT_AGE),
				Image(src=TextLiteral("logo.png")),
			)),
		),
	)


def test_loads_canonical_form():
	assert loads_config(CANONICAL_YAML) == _expected()


def test_loads_internally_tagged_snake_case_form():
	assert loads_config(LEGACY_YAML) == _expected()


def test_round_trip_preserves_tree():
	original = _expected()

	assert parse_config(dump_config(original)) == original
	assert loads_config(dumps_config(original)) == original


def test_round_trip_keeps_literal_that_names_a_read():
	original = Configuration(
		name="x",
		containers=(MainPanel(widgets=(
			Label(text=TextLiteral("hello")),
			Slider(range=(1, 5), text=TextLiteral("getName"), value=NumLiteral(3), on_change=NumCommand.SET_AGE),
		)),),
	)

	assert loads_config(dumps_config(original)) == original


def test_load_and_save_file(tmp_path: Path):
	path = tmp_path / "nested" / "app.yaml"

	save_config(path, _expected())
	loaded = load_config(path)

	assert loaded == _expected()


def test_options_are_kept_and_not_part_of_equality():
	config = loads_config("name: a\ncontainers: []\noptions: {width: 640, theme: arc}\n")

	assert config.options == {"width": 640, "theme": "arc"}
	assert config == Configuration(name="a")
	assert dump_config(config)["options"] == {"width": 640, "theme": "arc"}


def test_missing_file_raises_config_error(tmp_path: Path):
	with pytest.raises(ConfigError):
		load_config(tmp_path / "missing.yaml")


def test_invalid_yaml_raises_config_error():
	with pytest.raises(ConfigError):
		loads_config("name: [unclosed")


@pytest.mark.parametrize(
	"doc, path",
	[
		({"containers": []}, "name"),
		({"name": "a"}, "containers"),
		({"name": "a", "containers": [{"sidePanel": {"widgets": []}}]}, "containers[0]"),
		({"name": "a", "containers": [{"mainPanel": {"widgets": [{"dial": {}}]}}]}, "containers[0].mainPanel.widgets[0]"),
		({"name": "a", "containers": [{"mainPanel": {"widgets": [{"label": {}}]}}]}, "containers[0].mainPanel.widgets[0].label"),
		({"name": "a", "containers": [{"mainPanel": {"widgets": [{"label": {"text": "x", "color": "red"}}]}}]}, "containers[0].mainPanel.widgets[0].label"),
		({"name": "a", "containers": [{"mainPanel": {"widgets": [{"button": {"text": "x", "onClick": "launch"}}]}}]}, "containers[0].mainPanel.widgets[0].button.onClick"),
	],
)
def test_schema_errors_report_location(doc, path):
	with pytest.raises(ConfigError) as info:
		parse_config(doc)

	assert info.value.path == path


def test_unknown_top_level_key_rejected():
	with pytest.raises(ConfigError):
		parse_config({"name": "a", "containers": [], "extra": 1})


def test_multi_key_widget_mapping_rejected():
	with pytest.raises(ConfigError):
		parse_config({"name": "a", "containers": [{"mainPanel": {"widgets": [{"label": {"text": "x"}, "image": {"src": "y"}}]}}]})


@pytest.mark.parametrize("bad_range", [[5, 1], [0], [0, 1, 2], [-1, 4], [0, "10"], "0..10", {"start": 0}])
def test_invalid_slider_range_rejected(bad_range):
	doc = {
		"name": "a",
		"containers": [{"mainPanel": {"widgets": [
			{"slider": {"range": bad_range, "text": "t", "value": 0, "onChange": "setAge"}},
		]}}],
	}

	with pytest.raises(ConfigError):
		parse_config(doc)


def test_out_of_range_literal_is_accepted_with_warning(caplog):
	doc = {
		"name": "a",
		"containers": [{"mainPanel": {"widgets": [
			{"slider": {"range": [0, 10], "text": "t", "value": 50, "onChange": "setAge"}},
		]}}],
	}

	with caplog.at_level(logging.WARNING, logger="pyezui.app.loader"):
		config = parse_config(doc)

	slider = config.containers[0].widgets[0]
	assert isinstance(slider, Slider)
	assert slider.value == NumLiteral(50)
	assert any("outside range" in r.getMessage() for r in caplog.records)


def test_sample_config_in_repo_loads():
	root = Path(__file__).resolve().parents[3]
	sample = root / "config" / "app.yaml"
	if not sample.exists():
		pytest.skip("sample configuration not present (installed package)")

	config = load_config(sample)

	assert config.name
	assert any(isinstance(w, Slider) for w in config.iter_widgets())


@pytest.mark.parametrize("caption", ["Hello", " hello", "HELLO", "GetName"])
def test_button_caption_that_resembles_a_read_stays_literal(caption):
	config = parse_config({
		"name": "a",
		"containers": [{"mainPanel": {"widgets": [{"button": {"text": caption, "onClick": "incrementAge"}}]}}],
	})

	assert config.containers[0].widgets[0] == Button(text=TextLiteral(caption), on_click=Command.INCREMENT_AGE)


@pytest.mark.parametrize(
	"widget",
	[
		{"Label": {"text": "x"}},
		{"LABEL": {"text": "x"}},
		{" label": {"text": "x"}},
		{"label": {"Text": "x"}},
		{"button": {"text": "x", "OnClick": "incrementAge"}},
		{"type": "Horizontal_Layout", "widgets": []},
	],
)
def test_tag_and_field_spelling_is_exact(widget):
	with pytest.raises(ConfigError):
		parse_config({"name": "a", "containers": [{"mainPanel": {"widgets": [widget]}}]})


def test_container_tag_spelling_is_exact():
	with pytest.raises(ConfigError):
		parse_config({"name": "a", "containers": [{"MainPanel": {"widgets": []}}]})
	assert parse_config({"name": "a", "containers": [{"centralPanel": {"widgets": []}}]}).containers == (MainPanel(),)
