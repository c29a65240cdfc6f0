"""Diagnostic sink: Events, the module-level ``events`` instance, on/off/emit."""

from __future__ import annotations

from collections.abc import Callable

from rich.console import Console
from rich.markup import escape

Listener = Callable[[str, str], None]


class Events:
    """Fan out diagnostics to listeners and, when enabled, to the console."""

    def __init__(self, console: Console | None = None, verbose: bool = False):
        self.console = console or Console(stderr=True)
        self.verbose = verbose
        self._listeners: list[Listener] = []

    def on(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def off(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def emit(self, level: str, message: str) -> None:
        for listener in list(self._listeners):
            listener(level, message)
        if level == "warn":
            self.console.print(f"  [yellow]warning: {escape(message)}[/yellow]")
        elif level == "info" or self.verbose:
            self.console.print(f"  [dim]{escape(message)}[/dim]", highlight=False)


events = Events()
