"""CLI: tipfax listen"""

from typing import Optional

import click
from rich.console import Console

from tipfax.client import AsyncTipClient
from tipfax.errors import ConfigError, TransportError
from tipfax.sinks import ConsoleReceiptSink

console = Console()


def _load_settings():
    from tipfax.cli.main import _load_settings
    return _load_settings()


def _run(coro):
    from tipfax.cli.main import _run
    return _run(coro)


@click.command("listen")
@click.option("--url", default=None, help="Astro gateway URL")
@click.option("--no-print", is_flag=True, help="Log tips without rendering receipts")
def listen_cmd(url: Optional[str], no_print: bool):
    """Subscribe to tips and render a receipt for each one."""
    settings = _load_settings()
    if not settings.se_jwt_token:
        console.print("[red]SE_JWT_TOKEN is not set. Run `tipfax token set` or export it.[/red]")
        raise SystemExit(1)

    sink = None
    if settings.print_receipts and not no_print:
        sink = ConsoleReceiptSink(console)
    client = AsyncTipClient(
        token=settings.se_jwt_token,
        url=url or settings.astro_url,
        sink=sink,
    )

    try:
        _run(client.run())
    except KeyboardInterrupt:
        console.print("[dim]Stopped.[/dim]")
    except ConfigError as e:
        console.print(f"[red]{e}[/red]")
        raise SystemExit(1)
    except TransportError as e:
        console.print(f"[red]Connection ended: {e}[/red]")
        raise SystemExit(1)
