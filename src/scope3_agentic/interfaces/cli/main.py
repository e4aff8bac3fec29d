# Author: Green Mountain Systems AI Inc.
# Donated to IAB Tech Lab

"""CLI interface for the Scope3 agentic platform."""

import asyncio
import json
import os
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional

import typer
from rich.console import Console
from rich.table import Table

from ...clients.platform import PlatformClient
from ...config import cli_config
from ...errors import ConfigError
from ...utils.logger import StructuredLogger
from .commands import (
    RESOURCE_ATTRIBUTES,
    RESOURCE_METHODS,
    CommandError,
    MethodSpec,
    build_request,
    method_attribute,
    parse_option_pairs,
)
from .formatting import OUTPUT_FORMATS, format_output

app = typer.Typer(
    name="scope3",
    help="CLI tool for the Scope3 Agentic API",
    no_args_is_help=True,
)
config_app = typer.Typer(help="Manage CLI configuration", no_args_is_help=True)
app.add_typer(config_app, name="config")

console = Console()
err_console = Console(stderr=True)


@dataclass
class CliState:
    """Global options shared by all commands."""

    api_key: Optional[str] = None
    base_url: Optional[str] = None
    environment: Optional[str] = None
    output_format: str = "table"
    debug: bool = False


@app.callback()
def main(
    ctx: typer.Context,
    api_key: Optional[str] = typer.Option(None, "--api-key", help="API key for authentication"),
    base_url: Optional[str] = typer.Option(None, "--base-url", help="Base URL for API (overrides environment)"),
    environment: Optional[str] = typer.Option(
        None, "--environment", "-e", help="API environment: production or staging"
    ),
    output_format: str = typer.Option("table", "--format", "-f", help="Output format: json, table or list"),
    debug: bool = typer.Option(False, "--debug", help="Log requests and responses to stderr"),
) -> None:
    """Scope3 Agentic CLI."""
    if output_format not in OUTPUT_FORMATS:
        err_console.print(f"[yellow]Unknown format '{output_format}', using table[/yellow]")
        output_format = "table"
    ctx.obj = CliState(
        api_key=api_key,
        base_url=base_url,
        environment=environment,
        output_format=output_format,
        debug=debug,
    )


def _state(ctx: typer.Context) -> CliState:
    root = ctx.find_root()
    return root.obj if isinstance(root.obj, CliState) else CliState()


def _load_config() -> dict[str, Any]:
    try:
        return cli_config.load_config()
    except ConfigError as e:
        err_console.print(f"[yellow]Warning:[/yellow] {e}")
        return {}


def create_client(state: CliState) -> PlatformClient:
    """Create a PlatformClient from global options, config file and environment."""
    config = _load_config()
    api_key = state.api_key or config.get("apiKey")
    if not api_key:
        err_console.print("[red]Error: API key is required[/red]")
        err_console.print("Set it via:")
        err_console.print("  - Environment variable: export SCOPE3_API_KEY=your_key")
        err_console.print("  - Config command: scope3 config set apiKey your_key")
        err_console.print("  - Flag: --api-key your_key")
        raise typer.Exit(1)

    return PlatformClient(
        api_key=api_key,
        base_url=state.base_url or config.get("baseUrl"),
        environment=state.environment or config.get("environment") or "production",
        debug=state.debug,
        logger=StructuredLogger(json_output=False, debug=state.debug),
    )


def _run_with_client(
    state: CliState,
    operation: Callable[[PlatformClient], Awaitable[Any]],
) -> Any:
    """Run an async operation with a client, always disconnecting after."""
    client = create_client(state)

    async def _run() -> Any:
        try:
            return await operation(client)
        finally:
            await client.disconnect()

    try:
        return asyncio.run(_run())
    except Exception as e:
        err_console.print(f"[red]Error:[/red] {e}")
        if state.debug or os.environ.get("DEBUG"):
            err_console.print_exception()
        raise typer.Exit(1)


# -----------------------------------------------------------------------------
# Config
# -----------------------------------------------------------------------------


@config_app.command("set")
def config_set(
    key: str = typer.Argument(..., help="Configuration key (apiKey, baseUrl or environment)"),
    value: str = typer.Argument(..., help="Configuration value"),
) -> None:
    """Set a configuration value."""
    try:
        path = cli_config.set_config_value(key, value)
    except ConfigError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    console.print(f"[green]Configuration saved to {path}[/green]")


@config_app.command("get")
def config_get(
    key: Optional[str] = typer.Argument(None, help="Configuration key. If omitted, shows all config"),
) -> None:
    """Show configuration values."""
    config = _load_config()
    if key is None:
        console.print(json.dumps(config, indent=2), markup=False, highlight=False)
    elif key in config:
        console.print(str(config[key]), markup=False, highlight=False)
    else:
        err_console.print(f"[red]Error: Unknown config key: {key}[/red]")
        raise typer.Exit(1)


@config_app.command("clear")
def config_clear() -> None:
    """Delete the configuration file."""
    if cli_config.clear_config():
        console.print("[green]Configuration cleared[/green]")
    else:
        console.print("[yellow]No configuration file found[/yellow]")


# -----------------------------------------------------------------------------
# Raw tool access
# -----------------------------------------------------------------------------


@app.command("tools")
def list_tools(ctx: typer.Context) -> None:
    """List the tools exposed by the API."""
    state = _state(ctx)
    tools = _run_with_client(state, lambda client: client.list_tools())

    if state.output_format == "json":
        format_output(tools, "json", console)
        return

    table = Table(title=f"Available Tools ({len(tools)})")
    table.add_column("Name", style="cyan")
    table.add_column("Description")
    for tool in sorted(tools, key=lambda t: t["name"]):
        description = tool["description"]
        table.add_row(tool["name"], description[:80] + "..." if len(description) > 80 else description)
    console.print(table)


@app.command("call")
def call_tool(
    ctx: typer.Context,
    tool_name: str = typer.Argument(..., help="Tool name, e.g. campaign_list"),
    args: str = typer.Option("{}", "--args", "-a", help="Tool arguments as a JSON object"),
) -> None:
    """Call any tool by name with JSON arguments."""
    state = _state(ctx)
    try:
        arguments = json.loads(args)
    except json.JSONDecodeError:
        err_console.print(f"[red]Error: Invalid JSON: {args}[/red]")
        raise typer.Exit(1)
    if not isinstance(arguments, dict):
        err_console.print("[red]Error: --args must be a JSON object[/red]")
        raise typer.Exit(1)

    result = _run_with_client(state, lambda client: client.call_tool(tool_name, arguments))
    format_output(result, state.output_format, console)


# -----------------------------------------------------------------------------
# Resource commands
# -----------------------------------------------------------------------------


def _resource_command(resource_name: str, method_name: str, spec: MethodSpec) -> Callable:
    def command(ctx: typer.Context) -> None:
        state = _state(ctx)
        try:
            request = build_request(spec, parse_option_pairs(list(ctx.args)))
        except CommandError as e:
            err_console.print(f"[red]Error:[/red] {e}")
            raise typer.Exit(1)

        async def invoke(client: PlatformClient) -> Any:
            resource = getattr(client, RESOURCE_ATTRIBUTES[resource_name])
            method = getattr(resource, method_attribute(method_name))
            return await method(request or None)

        result = _run_with_client(state, invoke)
        format_output(result, state.output_format, console)

    params = ", ".join(
        f"--{p}{' (required)' if p in spec.required else ''}" for p in spec.params
    )
    command.__doc__ = f"{method_name} {resource_name}" + (f". Options: {params}" if params else "")
    return command


def _register_resource_commands() -> None:
    for resource_name, methods in RESOURCE_METHODS.items():
        resource_app = typer.Typer(help=f"Manage {resource_name}", no_args_is_help=True)
        for method_name, spec in methods.items():
            resource_app.command(
                method_name,
                context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
            )(_resource_command(resource_name, method_name, spec))
        app.add_typer(resource_app, name=resource_name)


_register_resource_commands()


if __name__ == "__main__":
    app()
