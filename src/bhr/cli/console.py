"""CLI console helpers with optional Rich support.

Diagnostics (errors, hints) go to stderr through :data:`console`;
command results go to stdout through :func:`emit` so they can be piped.
Rich is imported lazily so that ``--help`` and ``--version`` keep
working when it is not installed.
"""

from __future__ import annotations

import sys
from typing import Any

from bhr.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console() -> Any:
	"""Create a Rich console instance targeting stderr."""
	console_class = _load_rich_console_class()
	return console_class(stderr=True)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain stderr print."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(*objects, file=sys.stderr)
			return
		rich_console.print(*objects)


console = _ConsoleProxy()


def emit(text: str) -> None:
	"""Write a command result to stdout verbatim.

	Rendered trees contain ``[ Department ]`` headers, which Rich would
	swallow as markup, so results bypass the console proxy.
	"""
	sys.stdout.write(text)
	sys.stdout.flush()


def escape(text: str) -> str:
	"""Escape Rich markup in *text* (user patterns may contain ``[``)."""
	try:
		from rich.markup import escape as rich_escape
	except ModuleNotFoundError:
		return text
	return rich_escape(text)
