"""Configuration commands."""

from __future__ import annotations

from dataclasses import asdict

import typer

from voicelift.commands.common import fail, get_state, print_json_payload
from voicelift.core.config import default_config, render_toml, save_config

app = typer.Typer(help="Show or create the configuration file")


@app.command("show")
def show_command(ctx: typer.Context) -> None:
    """Print the merged configuration and effective engine settings."""
    state = get_state(ctx)
    payload = {
        "config_path": str(state.config_path),
        "config_exists": state.config_path.exists(),
        "custom_store": str(state.custom_store),
        "config": state.config,
        "engine": asdict(state.settings),
    }

    if state.json_output:
        print_json_payload(state, payload)
        return

    if state.plain_output:
        typer.echo(f"config_path\t{payload['config_path']}")
        typer.echo(f"custom_store\t{payload['custom_store']}")
        for key, value in payload["engine"].items():
            typer.echo(f"engine.{key}\t{value}")
        return

    state.console.print(f"Config file: {state.config_path}" + ("" if payload["config_exists"] else " (not created)"))
    state.console.print(f"Custom exercises: {state.custom_store}")
    state.console.print(render_toml(state.config), markup=False, highlight=False)


@app.command("init")
def init_command(
    ctx: typer.Context,
    force: bool = typer.Option(False, "--force", help="Overwrite an existing config file"),
) -> None:
    """Write a default configuration file."""
    state = get_state(ctx)
    if state.config_path.exists() and not force:
        fail(state, f"Config file already exists: {state.config_path} (use --force to overwrite)", code=1)

    path = save_config(default_config(), state.config_path)

    if state.json_output:
        print_json_payload(state, {"status": "success", "config_path": str(path)})
        return
    if state.plain_output:
        typer.echo("status\tsuccess")
        typer.echo(f"config_path\t{path}")
        return
    state.console.print(f"Wrote {path}")
