"""Smart Deals CLI: run the server, mint development tokens.

Usage:
    smartdeals serve                      # Run the API on SMARTDEALS_PORT (3030)
    smartdeals serve --port 8000 --reload
    smartdeals issue-token alice@example.com
"""

import click
import uvicorn

from smartdeals.auth.verifier import create_id_token
from smartdeals.config import settings


@click.group()
def cli():
    """Smart Deals marketplace backend."""


@cli.command()
@click.option("--host", default=None, help="Bind address (default: SMARTDEALS_HOST)")
@click.option("--port", default=None, type=int, help="Port (default: SMARTDEALS_PORT)")
@click.option("--reload", is_flag=True, help="Auto-reload on code changes")
def serve(host, port, reload):
    """Run the API server."""
    uvicorn.run(
        "smartdeals.main:app",
        host=host or settings.host,
        port=port or settings.port,
        reload=reload,
    )


@cli.command("issue-token")
@click.argument("email")
@click.option("--uid", default=None, help="Subject claim (defaults to the email)")
@click.option("--minutes", default=None, type=int, help="Lifetime in minutes")
def issue_token(email, uid, minutes):
    """Mint a development ID token signed with SMARTDEALS_AUTH_SECRET."""
    try:
        token = create_id_token(email, settings, uid=uid, expires_minutes=minutes)
    except ValueError as e:
        raise click.ClickException(str(e))
    click.echo(token)


if __name__ == "__main__":
    cli()
