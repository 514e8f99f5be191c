"""Command line entry point: fire a stored webhook definition once."""

from __future__ import annotations

import json

import click

from brokerhook.config import load_settings
from brokerhook.utils.logging import setup_logging
from brokerhook.webhooks.definitions import load_webhook
from brokerhook.webhooks.errors import ConfigurationError
from brokerhook.webhooks.executor import WebhookExecutor

EXIT_DELIVERED = 0
EXIT_FAILED = 1
EXIT_CONFIGURATION = 2


@click.group()
def cli() -> None:
    """Execute and inspect broker webhook definitions."""


@cli.command()
@click.argument("definition", type=click.Path(dir_okay=False))
@click.option("--value", required=True, help="Value substituted into the placeholder")
@click.option("--config", "config_path", default=None, help="Path to config YAML file")
@click.option("--log-level", default=None, help="Log level (DEBUG, INFO, WARNING, ERROR)")
@click.pass_context
def execute(
    ctx: click.Context,
    definition: str,
    value: str,
    config_path: str | None,
    log_level: str | None,
) -> None:
    """Fire DEFINITION once and print the result as JSON."""
    settings = load_settings(config_path)
    if log_level:
        settings.log_level = log_level
    setup_logging(level=settings.log_level, json_output=settings.log_json)

    try:
        request = load_webhook(definition)
        with WebhookExecutor.from_settings(settings) as executor:
            result = executor.execute(request, value)
    except ConfigurationError as e:
        click.echo(f"Configuration error: {e}", err=True)
        ctx.exit(EXIT_CONFIGURATION)

    click.echo(json.dumps(result.to_dict(), indent=2))
    ctx.exit(EXIT_DELIVERED if result.success else EXIT_FAILED)


@cli.command()
@click.argument("definition", type=click.Path(dir_okay=False))
@click.pass_context
def describe(ctx: click.Context, definition: str) -> None:
    """Show DEFINITION with credentials masked."""
    try:
        request = load_webhook(definition)
    except ConfigurationError as e:
        click.echo(f"Configuration error: {e}", err=True)
        ctx.exit(EXIT_CONFIGURATION)

    click.echo(request.description())
    if request.username is not None:
        click.echo(f"username: {request.username}")
        click.echo(f"password: {request.display_password() or ''}")
    for name, header_value in request.redacted_headers().items():
        click.echo(f"{name}: {header_value}")


if __name__ == "__main__":
    cli()
