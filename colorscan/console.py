from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.text import Text


class RichLogger:
    def __init__(
        self,
        console: Optional[Console] = None,
        err_console: Optional[Console] = None,
        verbose: bool = False,
    ):
        self.console = console or Console(highlight=False)
        self.err_console = err_console or Console(stderr=True, highlight=False)
        self.verbose = verbose

    def _emit(self, console: Console, level: str, msg: str, style: str) -> None:
        tag = Text(level.ljust(5), style=style)
        console.log(tag, Text(msg))

    def echo(self, msg: str) -> None:
        self.console.print(msg, markup=False, highlight=False, soft_wrap=True)

    def info(self, msg: str) -> None:
        self._emit(self.err_console, "INFO", msg, "bold green")

    def warn(self, msg: str) -> None:
        self._emit(self.err_console, "WARN", msg, "bold yellow")

    def error(self, msg: str) -> None:
        self._emit(self.err_console, "ERROR", msg, "bold red")

    def debug(self, msg: str) -> None:
        if not self.verbose:
            return
        self._emit(self.err_console, "DEBUG", msg, "bold blue")

    def done(self, msg: str) -> None:
        self._emit(self.err_console, "DONE", msg, "bold cyan")
