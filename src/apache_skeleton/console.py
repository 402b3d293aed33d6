"""Console helpers for operator-facing output."""

from rich.console import Console
from rich.markup import escape


def info(console: Console, message: str) -> None:
    console.print(f"[cyan]\\[INFO][/] {escape(message)}")


def warn(console: Console, message: str) -> None:
    console.print(f"[yellow]\\[WARN][/] {escape(message)}")


def bold(console: Console, message: str) -> None:
    console.print(f"[bold]{escape(message)}[/]")
