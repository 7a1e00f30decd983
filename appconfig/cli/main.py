"""CLI commands for the App Configuration client."""

import asyncio
import json
import logging
import sys
from pathlib import Path

import click
import httpx

from appconfig.features.app_configuration import (
    ConfigurationFetcher,
    ConfigurationSetting,
)
from appconfig.features.config import (
    ConfigValidationError,
    HttpConfig,
    load_config,
)
from appconfig.features.http import (
    AppConfigurationError,
    SignedHttpClient,
    redact_secret,
)
from appconfig.features.observability import (
    bind_request_context,
    clear_request_context,
    configure_logging,
)
from appconfig.settings import SettingsError, get_settings


# Context object entry holding an optional httpx.AsyncBaseTransport
TRANSPORT_OBJ_KEY = "transport"


def _resolve_http_config(config_path: Path | None) -> HttpConfig:
    """Load endpoint settings from a file, or from the environment."""
    if config_path is not None:
        return load_config(config_path).http_config
    return get_settings().to_http_config()


def _print_validation_errors(error: ConfigValidationError) -> None:
    click.echo(f"Configuration validation failed: {error.file_path}", err=True)
    for err in error.errors:
        loc = err["loc"] or "<root>"
        click.echo(f"  - {loc}: {err['msg']}", err=True)


async def _fetch_setting(
    http_config: HttpConfig,
    key: str,
    label: str | None,
    transport: httpx.AsyncBaseTransport | None,
) -> ConfigurationSetting:
    async with SignedHttpClient(http_config, transport=transport) as client:
        return await ConfigurationFetcher(client).get(key, label=label)


@click.group()
@click.version_option(version="0.1.0")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Path to a YAML config file (default: APPCONFIG_* environment).",
)
@click.option(
    "--json-logs/--no-json-logs",
    default=True,
    help="Use JSON format for logs (default: true).",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose logging.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config_path: Path | None,
    json_logs: bool,
    verbose: bool,
) -> None:
    """App Configuration client CLI.

    \f
    Programs that embed the CLI can route requests through their own httpx
    transport (a proxy mount or an in-memory service) by invoking it with
    ``obj={"transport": transport}``; otherwise httpx's default is used.
    """
    configure_logging(
        level=logging.DEBUG if verbose else logging.WARNING,
        json_format=json_logs,
    )
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    ctx.obj.setdefault(TRANSPORT_OBJ_KEY, None)


@cli.command()
@click.argument("key")
@click.option("--label", default=None, help="Label of the setting.")
@click.pass_context
def get(ctx: click.Context, key: str, label: str | None) -> None:
    """Fetch one setting and print it as JSON."""
    try:
        http_config = _resolve_http_config(ctx.obj["config_path"])
    except ConfigValidationError as e:
        _print_validation_errors(e)
        sys.exit(1)
    except SettingsError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    bind_request_context(http_config.host, http_config.credential)

    try:
        setting = asyncio.run(
            _fetch_setting(http_config, key, label, ctx.obj[TRANSPORT_OBJ_KEY])
        )
    except AppConfigurationError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    finally:
        clear_request_context()

    click.echo(json.dumps(setting.model_dump(), indent=2, sort_keys=True))


@cli.command()
@click.argument(
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
def validate(config_path: Path) -> None:
    """Validate a YAML config file without contacting the service."""
    try:
        config = load_config(config_path)
    except ConfigValidationError as e:
        _print_validation_errors(e)
        sys.exit(1)

    http_config = config.http_config
    click.echo("Configuration is valid!")
    click.echo(f"  Endpoint: {http_config.scheme}://{http_config.host}")
    click.echo(f"  Credential: {http_config.credential}")
    click.echo(f"  Secret: {redact_secret(http_config.secret)}")
    click.echo(f"  API version: {http_config.api_version}")


if __name__ == "__main__":
    cli()
