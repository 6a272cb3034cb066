"""CLI: tipfax token set|status|clear"""

import click
from rich.console import Console

from tipfax.session import MIN_PLAUSIBLE_TOKEN_LENGTH, mask_token

console = Console()


def _load_settings(include_env: bool = True):
    from tipfax.cli.main import _load_settings
    return _load_settings(include_env)


def _save_settings(settings) -> None:
    from tipfax.cli.main import _save_settings
    _save_settings(settings)


@click.group()
def token():
    """StreamElements JWT commands."""


@token.command("set")
def token_set():
    """Store the JWT from the StreamElements dashboard."""
    value = click.prompt("JWT", hide_input=True).strip()
    if len(value) < MIN_PLAUSIBLE_TOKEN_LENGTH:
        console.print(f"[yellow]Token seems unusually short ({len(value)} chars).[/yellow]")
    settings = _load_settings(include_env=False)
    _save_settings(settings.model_copy(update={"se_jwt_token": value}))
    console.print("[green]Token saved to ~/.tipfax/config.json[/green]")


@token.command("status")
def token_status():
    """Show whether a token is configured."""
    settings = _load_settings()
    if settings.se_jwt_token:
        console.print(f"[green]Token set[/green] ({len(settings.se_jwt_token)} chars, "
                      f"preview: {mask_token(settings.se_jwt_token)})")
    else:
        console.print("[yellow]No token. Run `tipfax token set` or export SE_JWT_TOKEN.[/yellow]")


@token.command("clear")
def token_clear():
    """Remove the stored token."""
    settings = _load_settings(include_env=False)
    _save_settings(settings.model_copy(update={"se_jwt_token": ""}))
    console.print("[green]Token cleared.[/green]")
