"""Exercise library commands."""

from __future__ import annotations

from typing import List, Optional

import typer
from rich.table import Table

from voicelift.commands.common import fail, get_state, print_json_payload
from voicelift.core.constants import EQUIPMENT_TYPES, MUSCLE_GROUPS
from voicelift.core.fuzzy import find_best_matches
from voicelift.core.library import ExerciseLibrary
from voicelift.core.state import CLIState
from voicelift.core.storage import ExerciseStoreError, build_custom_definition

app = typer.Typer(help="Browse and edit the exercise library")


def _library(state: CLIState) -> ExerciseLibrary:
    try:
        return state.library()
    except ExerciseStoreError as exc:
        fail(state, str(exc))


@app.command("list")
def list_command(
    ctx: typer.Context,
    group: Optional[str] = typer.Option(None, "--group", help="Only show one muscle group"),
    custom_only: bool = typer.Option(False, "--custom", help="Only show custom exercises"),
) -> None:
    """List exercises grouped by muscle group."""
    state = get_state(ctx)
    if group is not None and group not in MUSCLE_GROUPS:
        raise typer.BadParameter(f"group must be one of: {', '.join(MUSCLE_GROUPS)}")

    grouped = _library(state).groups()
    entries = [
        definition
        for group_id, definitions in grouped.items()
        if group is None or group_id == group
        for definition in definitions
        if not custom_only or definition.origin == "custom"
    ]

    if state.json_output:
        print_json_payload(state, {"exercises": [item.to_dict() for item in entries], "total": len(entries)})
        return

    if state.plain_output:
        typer.echo("name\tgroup\tequipment\tbodyweight\torigin")
        for item in entries:
            typer.echo(
                f"{item.canonical_name}\t{item.group_id}\t{item.equipment}\t{str(item.is_bodyweight).lower()}\t{item.origin}"
            )
        typer.echo(f"total\t{len(entries)}")
        return

    table = Table(title=f"Exercises ({len(entries)} total)")
    table.add_column("Name")
    table.add_column("Group")
    table.add_column("Equipment")
    table.add_column("Bodyweight")
    table.add_column("Origin")
    for item in entries:
        table.add_row(
            item.canonical_name,
            MUSCLE_GROUPS.get(item.group_id, item.group_id),
            item.equipment,
            "yes" if item.is_bodyweight else "",
            item.origin,
        )
    state.console.print(table)


@app.command("search")
def search_command(
    ctx: typer.Context,
    query: str = typer.Argument(..., help="Spoken or typed exercise name"),
    threshold: float = typer.Option(0.3, help="Minimum fuzzy score"),
    limit: int = typer.Option(10, help="Maximum results"),
) -> None:
    """Fuzzy-search the library the way the voice resolver does."""
    state = get_state(ctx)
    matches = find_best_matches(query, _library(state).all_entries(), threshold)[:limit]
    results = [{"name": match.exercise.canonical_name, "score": round(match.score, 2)} for match in matches]

    if state.json_output:
        print_json_payload(state, {"query": query, "results": results})
        return

    if state.plain_output:
        typer.echo("name\tscore")
        for item in results:
            typer.echo(f"{item['name']}\t{item['score']:.2f}")
        return

    if not results:
        state.console.print(f"No exercises match '{query}'")
        return
    table = Table(title=f"Matches for '{query}'")
    table.add_column("Exercise")
    table.add_column("Score", justify="right")
    for item in results:
        table.add_row(item["name"], f"{item['score']:.2f}")
    state.console.print(table)


@app.command("add")
def add_command(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Exercise name"),
    group: Optional[str] = typer.Option(None, "--group", help="Muscle group (inferred when omitted)"),
    equipment: Optional[str] = typer.Option(None, "--equipment", help="Equipment (inferred when omitted)"),
    bodyweight: Optional[bool] = typer.Option(None, "--bodyweight/--weighted", help="Bodyweight exercise"),
    aliases: Optional[List[str]] = typer.Option(None, "--alias", help="Alternative spoken name (repeatable)"),
) -> None:
    """Add or update a custom exercise."""
    state = get_state(ctx)
    if group is not None and group not in MUSCLE_GROUPS:
        raise typer.BadParameter(f"group must be one of: {', '.join(MUSCLE_GROUPS)}")
    if equipment is not None and equipment not in EQUIPMENT_TYPES:
        raise typer.BadParameter(f"equipment must be one of: {', '.join(EQUIPMENT_TYPES)}")

    try:
        definition = build_custom_definition(name, group, equipment, aliases, bodyweight)
        saved = state.store().save(definition)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    except ExerciseStoreError as exc:
        fail(state, str(exc))

    if state.json_output:
        print_json_payload(state, {"status": "success", "exercise": saved.to_dict()})
        return
    if state.plain_output:
        typer.echo("status\tsuccess")
        typer.echo(f"name\t{saved.canonical_name}")
        typer.echo(f"group\t{saved.group_id}")
        typer.echo(f"equipment\t{saved.equipment}")
        return
    state.console.print(f"Saved {saved.canonical_name} ({MUSCLE_GROUPS.get(saved.group_id, saved.group_id)}, {saved.equipment})")


@app.command("remove")
def remove_command(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Custom exercise name"),
) -> None:
    """Delete a custom exercise. Core catalog entries cannot be removed."""
    state = get_state(ctx)
    try:
        removed = state.store().delete(name)
    except ExerciseStoreError as exc:
        fail(state, str(exc))

    if not removed:
        fail(state, f"No custom exercise named '{name}'", code=1)

    if state.json_output:
        print_json_payload(state, {"status": "success", "removed": name})
        return
    if state.plain_output:
        typer.echo("status\tsuccess")
        typer.echo(f"removed\t{name}")
        return
    state.console.print(f"Removed {name}")
