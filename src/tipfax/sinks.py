"""
Receipt sinks — where tip notifications end up.

A sink takes formatted text lines followed by a cut signal that finalizes
the receipt. Sinks are called synchronously from the dispatch loop.
"""

from typing import Optional, Protocol

from rich.console import Console
from rich.panel import Panel

from tipfax.models.tip import TipRecord


class ReceiptSink(Protocol):
    def write_line(self, text: str) -> None: ...
    def cut(self) -> None: ...


def receipt_lines(record: TipRecord) -> list[str]:
    lines = [
        f"Tip from {record.username}: {record.amount} {record.currency}",
        f"Status: {record.status}",
    ]
    if record.message:
        lines.append(f"Message: {record.message}")
    return lines


class ConsoleReceiptSink:
    """Renders each receipt as a panel on the terminal."""

    def __init__(self, console: Optional[Console] = None, title: str = "Tip"):
        self._console = console or Console()
        self._title = title
        self._lines: list[str] = []

    def write_line(self, text: str) -> None:
        self._lines.append(text)

    def cut(self) -> None:
        body = "\n".join(self._lines)
        self._lines = []
        self._console.print(Panel(body, title=self._title, expand=False))


class MemorySink:
    """Keeps finished receipts in memory."""

    def __init__(self) -> None:
        self.receipts: list[list[str]] = []
        self._pending: list[str] = []

    def write_line(self, text: str) -> None:
        self._pending.append(text)

    def cut(self) -> None:
        self.receipts.append(self._pending)
        self._pending = []
