"""CLI interface for linkdinger.

Commands:
    setup    - Configure the Linkding instance and API token
    save     - Save the URLs in a message (tags via #hashtags, rest is the note)
    recent   - Show the most recent bookmarks
    search   - Search bookmarks
    tags     - List tags
    status   - Check the connection to Linkding
    welcome  - Show the welcome text
    usage    - Show detailed help
"""

import sys
from contextlib import contextmanager
from pathlib import Path

import click

from .config import (
    CONFIG_FILE,
    AppConfig,
    LinkdingConfig,
    config_exists,
    load_config,
    parse_allowed_users,
    save_config,
)
from .logging_config import setup_logging


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.option("--config", type=click.Path(), default=None, help="Config file path")
@click.pass_context
def main(ctx, verbose, config):
    """Linkdinger — Save links from chat messages to Linkding."""
    setup_logging(debug=verbose)
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = Path(config) if config else CONFIG_FILE


def _load_or_exit(config_path: Path) -> AppConfig:
    try:
        return load_config(config_path)
    except FileNotFoundError:
        click.echo(
            "Error: No config found. Run 'linkdinger setup' first.",
            err=True,
        )
        sys.exit(1)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@contextmanager
def _relay(ctx):
    """Build a Relay around a client for the configured instance."""
    # Lazy imports so --help stays fast
    from .client import LinkdingClient
    from .relay import Relay

    config = _load_or_exit(ctx.obj["config_path"])
    with LinkdingClient(
        config.linkding.url,
        config.linkding.api_token,
        timeout=config.timeout,
    ) as client:
        yield Relay(client, allowed_users=config.allowed_users)


@main.command()
@click.pass_context
def setup(ctx):
    """Configure the Linkding instance and API token."""
    config_path = ctx.obj["config_path"]

    click.echo("Linkdinger — Setup")
    click.echo("=" * 40)
    click.echo()
    click.echo("You need the URL of your Linkding instance and an API token.")
    click.echo("The token is shown in Linkding under Settings -> Integrations.")
    click.echo()

    url = click.prompt("Linkding URL")
    api_token = click.prompt("API token", hide_input=True)

    click.echo()
    click.echo("(Optional) Comma-separated user IDs allowed to use the relay.")
    click.echo("Press Enter to allow everyone.")
    allowed = click.prompt("allowed users", default="", show_default=False)

    config = AppConfig(
        linkding=LinkdingConfig(url=url.rstrip("/"), api_token=api_token),
        allowed_users=parse_allowed_users(allowed) if allowed else [],
    )

    save_config(config, config_path)
    click.echo(f"\nConfig saved to {config_path}")
    click.echo("Run 'linkdinger status' to check the connection.")


@main.command()
@click.argument("text", nargs=-1, required=True)
@click.option("--user-id", type=int, default=None, help="Sender ID checked against the allow-list")
@click.pass_context
def save(ctx, text, user_id):
    """Save the URLs found in TEXT.

    Hashtags become tags, any other words become the note.
    Pass '-' to read the message from stdin.
    """
    message = " ".join(text)
    if message == "-":
        message = click.get_text_stream("stdin").read()

    with _relay(ctx) as relay:
        for reply in relay.handle_text(message, user_id=user_id):
            click.echo(reply)
            click.echo()


@main.command()
@click.option("-n", "--limit", default=5, help="Number of bookmarks to show")
@click.pass_context
def recent(ctx, limit):
    """Show the most recent bookmarks."""
    with _relay(ctx) as relay:
        click.echo(relay.recent(limit=limit))


@main.command()
@click.argument("query", nargs=-1)
@click.option("-n", "--limit", default=10, help="Maximum results to show")
@click.pass_context
def search(ctx, query, limit):
    """Search bookmarks."""
    with _relay(ctx) as relay:
        click.echo(relay.search(" ".join(query), limit=limit))


@main.command()
@click.option("-n", "--limit", default=50, help="Maximum tags to show")
@click.pass_context
def tags(ctx, limit):
    """List tags."""
    with _relay(ctx) as relay:
        click.echo(relay.tags(limit=limit))


@main.command()
@click.pass_context
def status(ctx):
    """Check the connection to Linkding."""
    config_path = ctx.obj["config_path"]

    click.echo("Linkdinger — Status")
    click.echo("=" * 40)
    click.echo(f"Config: {'Found' if config_exists(config_path) else 'Not configured'} ({config_path})")

    from .replies import render_status

    with _relay(ctx) as relay:
        connected = relay.client.test_connection()
        click.echo(render_status(connected, relay.client.base_url))

    if not connected:
        sys.exit(1)


@main.command()
def welcome():
    """Show the welcome text."""
    from .replies import WELCOME_TEXT

    click.echo(WELCOME_TEXT)


@main.command()
def usage():
    """Show detailed help."""
    from .replies import HELP_TEXT

    click.echo(HELP_TEXT)
