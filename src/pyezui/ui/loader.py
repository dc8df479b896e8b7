# ---------------------------------------------------------------------------
# File: loader.py
# ---------------------------------------------------------------------------
# Description:
#   Load / save pyezui configurations (YAML <-> widget tree).
#
# Notes:
#   Accepted widget encodings (both may be mixed in one file):
#       - label: {text: hello}              externally tagged (canonical)
#       - {type: label, text: hello}        internally tagged
#   Tags and field names may be camelCase or snake_case.
#   A configuration either loads completely or raises ConfigError; the
#   engine never sees a partially valid tree.
#
#   Example:
#       name: Demo
#       containers:
#         - mainPanel:
#             widgets:
#               - label: {text: hello}
#               - slider: {range: [0, 100], text: Age, value: getAge, onChange: setAge}
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Change
# ---------------------------------------------------------------------------
# 10/14/2026	Initial coding / release
# 10/15/2026	Accept internally tagged widgets + {start, end} ranges
# 10/16/2026	Add options mapping + save_config
# 10/19/2026	Match tags and field names exactly
# ---------------------------------------------------------------------------

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Mapping, Optional

import yaml

from pyezui.app.commands import parse_command, parse_num_command, parse_text_command
from pyezui.app.expressions import (
	NumLiteral,
	dump_num_expr,
	dump_text_expr,
	parse_num_expr,
	parse_text_expr,
)
from pyezui.app.vocab import camel_case, match_tag
from pyezui.core.errors import ConfigError
from pyezui.core.logging import get_app_logger
from pyezui.ui.widgets import (
	Button,
	Configuration,
	Container,
	HorizontalLayout,
	Image,
	Label,
	MainPanel,
	Slider,
	TextEdit,
	Widget,
)


log = get_app_logger("loader")

TYPE_KEY = "type"

_TOP_LEVEL_KEYS = {"name", "containers", "options"}

# central_panel is the name earlier files used for the main panel.
_CONTAINER_TAGS = ("main_panel", "central_panel")


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def load_config(path: str | Path) -> Configuration:
	"""
	Read and parse a YAML configuration file.

	Raises:
		ConfigError: file missing/unreadable, invalid YAML, or invalid schema.
	"""
	config_path = Path(path)

	try:
		content = config_path.read_text(encoding="utf-8")
	except OSError as ex:
		raise ConfigError(f"cannot read configuration {config_path}: {ex}") from ex

	try:
		data = yaml.safe_load(content)
	except yaml.YAMLError as ex:
		raise ConfigError(f"invalid YAML in {config_path}: {ex}") from ex

	config = parse_config(data)
	log.info("Loaded configuration %r from %s", config.name, config_path)
	return config


def loads_config(text: str) -> Configuration:
	try:
		data = yaml.safe_load(text)
	except yaml.YAMLError as ex:
		raise ConfigError(f"invalid YAML: {ex}") from ex
	return parse_config(data)


def parse_config(data: Any) -> Configuration:
	"""
	Build a Configuration from plain data (as produced by yaml.safe_load).
	"""
	doc = _mapping(data, "<root>")

	unknown = set(doc) - _TOP_LEVEL_KEYS
	if unknown:
		raise ConfigError(f"unknown top-level keys: {sorted(map(str, unknown))}")

	name = doc.get("name")
	if not isinstance(name, str):
		raise ConfigError(f"string expected, got {name!r}", "name")

	containers = tuple(
		_parse_container(raw, f"containers[{i}]")
		for i, raw in enumerate(_sequence(doc.get("containers"), "containers"))
	)

	options = doc.get("options") or {}
	if not isinstance(options, Mapping):
		raise ConfigError(f"mapping expected, got {options!r}", "options")

	config = Configuration(name=name, containers=containers, options=dict(options))
	_warn_out_of_range(config)
	return config


def dump_config(config: Configuration) -> dict[str, Any]:
	"""
	Inverse of parse_config, in the canonical (externally tagged) form.
	"""
	data: dict[str, Any] = {
		"name": config.name,
		"containers": [_dump_container(c) for c in config.containers],
	}
	if config.options:
		data["options"] = dict(config.options)
	return data


def dumps_config(config: Configuration) -> str:
	return yaml.dump(dump_config(config), default_flow_style=False, sort_keys=False, allow_unicode=True)


def save_config(path: str | Path, config: Configuration) -> Path:
	config_path = Path(path)
	config_path.parent.mkdir(parents=True, exist_ok=True)
	config_path.write_text(dumps_config(config), encoding="utf-8")
	log.info("Saved configuration %r to %s", config.name, config_path)
	return config_path


# ---------------------------------------------------------------------------
# Containers
# ---------------------------------------------------------------------------

def _parse_container(raw: Any, path: str) -> Container:
	tag, body, body_path = _split_tagged(raw, path)

	name = match_tag(tag, _CONTAINER_TAGS)
	if name is None:
		raise ConfigError(f"unknown container type {tag!r} (known: mainPanel)", path)

	fields = _fields(body, body_path, required={"widgets"}, optional=set())
	return MainPanel(widgets=_parse_widgets(fields["widgets"], f"{body_path}.widgets"))


def _dump_container(container: Container) -> dict[str, Any]:
	return {container.kind: {"widgets": [_dump_widget(w) for w in container.widgets]}}


# ---------------------------------------------------------------------------
# Widgets
# ---------------------------------------------------------------------------

def _parse_widgets(raw: Any, path: str) -> tuple[Widget, ...]:
	return tuple(_parse_widget(item, f"{path}[{i}]") for i, item in enumerate(_sequence(raw, path)))


def _parse_widget(raw: Any, path: str) -> Widget:
	tag, body, body_path = _split_tagged(raw, path)

	name = match_tag(tag, _WIDGET_PARSERS)
	if name is None:
		known = ", ".join(camel_case(k) for k in _WIDGET_PARSERS)
		raise ConfigError(f"unknown widget type {tag!r} (known: {known})", path)

	return _WIDGET_PARSERS[name](body, body_path)


def _parse_label(body: Any, path: str) -> Label:
	f = _fields(body, path, required={"text"}, optional={"id"})
	return Label(
		text=parse_text_expr(f["text"], f"{path}.text"),
		id=_optional_str(f.get("id"), f"{path}.id"),
	)


def _parse_horizontal_layout(body: Any, path: str) -> HorizontalLayout:
	f = _fields(body, path, required={"widgets"}, optional=set())
	return HorizontalLayout(widgets=_parse_widgets(f["widgets"], f"{path}.widgets"))


def _parse_text_edit(body: Any, path: str) -> TextEdit:
	f = _fields(body, path, required={"value", "on_change"}, optional={"label_id"})
	return TextEdit(
		value=parse_text_expr(f["value"], f"{path}.value"),
		on_change=parse_text_command(f["on_change"], f"{path}.onChange"),
		label_id=_optional_str(f.get("label_id"), f"{path}.labelId"),
	)


def _parse_slider(body: Any, path: str) -> Slider:
	f = _fields(body, path, required={"range", "text", "value", "on_change"}, optional=set())
	return Slider(
		range=_parse_range(f["range"], f"{path}.range"),
		text=parse_text_expr(f["text"], f"{path}.text"),
		value=parse_num_expr(f["value"], f"{path}.value"),
		on_change=parse_num_command(f["on_change"], f"{path}.onChange"),
	)


def _parse_button(body: Any, path: str) -> Button:
	f = _fields(body, path, required={"text", "on_click"}, optional=set())
	return Button(
		text=parse_text_expr(f["text"], f"{path}.text"),
		on_click=parse_command(f["on_click"], f"{path}.onClick"),
	)


def _parse_image(body: Any, path: str) -> Image:
	f = _fields(body, path, required={"src"}, optional=set())
	return Image(src=parse_text_expr(f["src"], f"{path}.src"))


_WIDGET_PARSERS: dict[str, Callable[[Any, str], Widget]] = {
	"label": _parse_label,
	"horizontal_layout": _parse_horizontal_layout,
	"text_edit": _parse_text_edit,
	"slider": _parse_slider,
	"button": _parse_button,
	"image": _parse_image,
}


def _dump_widget(widget: Widget) -> dict[str, Any]:
	body: dict[str, Any]

	if isinstance(widget, Label):
		body = {"text": dump_text_expr(widget.text)}
		if widget.id is not None:
			body["id"] = widget.id
	elif isinstance(widget, HorizontalLayout):
		body = {"widgets": [_dump_widget(w) for w in widget.widgets]}
	elif isinstance(widget, TextEdit):
		body = {"value": dump_text_expr(widget.value), "onChange": widget.on_change.value}
		if widget.label_id is not None:
			body["labelId"] = widget.label_id
	elif isinstance(widget, Slider):
		body = {
			"range": list(widget.range),
			"text": dump_text_expr(widget.text),
			"value": dump_num_expr(widget.value),
			"onChange": widget.on_change.value,
		}
	elif isinstance(widget, Button):
		body = {"text": dump_text_expr(widget.text), "onClick": widget.on_click.value}
	elif isinstance(widget, Image):
		body = {"src": dump_text_expr(widget.src)}
	else:
		raise TypeError(f"not a widget: {widget!r}")

	return {widget.kind: body}


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _split_tagged(raw: Any, path: str) -> tuple[str, Any, str]:
	"""
	Return (tag, body, body_path) for either tagging style.
	"""
	node = _mapping(raw, path)

	if TYPE_KEY in node:
		tag = node[TYPE_KEY]
		if not isinstance(tag, str):
			raise ConfigError(f"'{TYPE_KEY}' must be a string, got {tag!r}", path)
		body = {k: v for k, v in node.items() if k != TYPE_KEY}
		return tag, body, path

	if len(node) != 1:
		raise ConfigError(f"expected a single-key mapping naming the variant, got keys {sorted(map(str, node))}", path)

	tag, body = next(iter(node.items()))
	if not isinstance(tag, str):
		raise ConfigError(f"variant tag must be a string, got {tag!r}", path)

	return tag, body, f"{path}.{tag}"


def _fields(body: Any, path: str, *, required: set[str], optional: set[str]) -> dict[str, Any]:
	"""
	Map camelCase or snake_case field names to snake_case and check required/unknown keys.
	"""
	node = _mapping(body, path)
	out: dict[str, Any] = {}

	for key, value in node.items():
		if not isinstance(key, str):
			raise ConfigError(f"field names must be strings, got {key!r}", path)
		name = match_tag(key, required | optional)
		if name is None:
			raise ConfigError(f"unknown field {key!r}", path)
		if name in out:
			raise ConfigError(f"duplicate field {key!r}", path)
		out[name] = value

	missing = sorted(camel_case(name) for name in required if name not in out)
	if missing:
		raise ConfigError(f"missing required field(s): {', '.join(missing)}", path)

	return out


def _parse_range(raw: Any, path: str) -> tuple[int, int]:
	if isinstance(raw, Mapping):
		f = _fields(raw, path, required={"start", "end"}, optional=set())
		bounds = [f["start"], f["end"]]
	elif isinstance(raw, (list, tuple)):
		bounds = list(raw)
	else:
		raise ConfigError(f"range must be [low, high] or {{start, end}}, got {raw!r}", path)

	if len(bounds) != 2:
		raise ConfigError(f"range needs exactly two bounds, got {len(bounds)}", path)

	for bound in bounds:
		if isinstance(bound, bool) or not isinstance(bound, int) or bound < 0:
			raise ConfigError(f"range bounds must be non-negative integers, got {bound!r}", path)

	lo, hi = bounds
	if lo > hi:
		raise ConfigError(f"range low bound {lo} is greater than high bound {hi}", path)

	return lo, hi


def _mapping(raw: Any, path: str) -> Mapping[Any, Any]:
	if not isinstance(raw, Mapping):
		raise ConfigError(f"mapping expected, got {type(raw).__name__}", path)
	return raw


def _sequence(raw: Any, path: str) -> list[Any]:
	if raw is None:
		raise ConfigError("missing required list", path)
	if not isinstance(raw, (list, tuple)):
		raise ConfigError(f"list expected, got {type(raw).__name__}", path)
	return list(raw)


def _optional_str(raw: Any, path: str) -> Optional[str]:
	if raw is None:
		return None
	if not isinstance(raw, str):
		raise ConfigError(f"string expected, got {raw!r}", path)
	return raw


def _warn_out_of_range(config: Configuration) -> None:
	for widget in config.iter_widgets():
		if isinstance(widget, Slider) and isinstance(widget.value, NumLiteral):
			if not widget.contains(widget.value.value):
				log.warning(
					"Slider %r value %d is outside range %d..%d; it will be shown clamped",
					widget.text,
					widget.value.value,
					widget.low,
					widget.high,
				)
