# ---------------------------------------------------------------------------
# File: errors.py
# ---------------------------------------------------------------------------
# Description:
#	Error types for pyezui.
#
# Notes:
#	ConfigError is raised only while a configuration is being loaded.
#	Rendering a frame never raises an error of its own.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Change
# ---------------------------------------------------------------------------
# 10/13/2026	Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Optional


class ConfigError(ValueError):
	"""
	Malformed configuration: bad YAML, unknown tag, missing or invalid field.

	- path:	location inside the document, e.g. "containers[0].mainPanel.widgets[1]".
	"""

	def __init__(self, message: str, path: Optional[str] = None) -> None:
		self.message = message
		self.path = path
		super().__init__(f"{path}: {message}" if path else message)
