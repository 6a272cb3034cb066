"""
tipfax CLI — `tipfax` command.

Commands:
  tipfax listen            Subscribe to tips and print receipts
  tipfax token <cmd>       Manage the stored StreamElements JWT
"""

import asyncio
import logging

try:
    import click
    from rich.console import Console
except ImportError:
    raise SystemExit("CLI requires extras: pip install tipfax[cli]")

from tipfax import __version__
from tipfax.config import Settings, load_settings, save_settings

console = Console()


def _load_settings(include_env: bool = True) -> Settings:
    return load_settings() if include_env else load_settings(environ={})


def _save_settings(settings: Settings) -> None:
    save_settings(settings)


def _run(coro):
    return asyncio.run(coro)


@click.group()
@click.version_option(__version__)
@click.option("--log-level", default="INFO", show_default=True,
              type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False))
def main(log_level: str):
    """tipfax — StreamElements tips on a receipt printer."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# Register subcommands from separate modules
from tipfax.cli.listen import listen_cmd
from tipfax.cli.token import token

main.add_command(listen_cmd)
main.add_command(token)


if __name__ == "__main__":
    main()
