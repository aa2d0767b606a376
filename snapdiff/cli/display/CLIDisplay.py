"""CLI display implementation using Rich library."""

import sys
from datetime import datetime

from rich.console import Console
from rich.markup import escape

from ...utils.display.Display import Display


class CLIDisplay(Display):
    """CLI display: diff output on stdout, everything else on a Rich stderr console."""

    def __init__(self):
        self.stdout = sys.stdout
        self.stderr_console = Console(file=sys.stderr)

    def error(self, message: str, **kwargs) -> None:  # noqa: ARG002
        timestamp = datetime.now().strftime("%H:%M:%S")
        self.stderr_console.print(f"[dim]{timestamp}[/dim] [red]✗[/red] {escape(message)}", soft_wrap=True)

    def warning(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self.stderr_console.print(f"[yellow]⚠[/yellow] {escape(message)}", soft_wrap=True)

    def output(self, text: str, **kwargs) -> None:  # noqa: ARG002
        # Reports go out untouched: no markup, no wrapping
        self.stdout.write(text if text.endswith("\n") else f"{text}\n")
        self.stdout.flush()
