"""Parse and replay commands."""

from __future__ import annotations

from dataclasses import asdict, replace
from pathlib import Path
from typing import Any, Dict, List, Optional

import typer
from rich.table import Table

from voicelift.commands.common import fail, get_state, print_json_payload
from voicelift.core.models import NavigationCommand, ParseFailure, ParseOutcome, ParseResult, SessionContext
from voicelift.core.session import WorkoutSession
from voicelift.core.state import CLIState
from voicelift.core.storage import ExerciseStoreError
from voicelift.utils.formatting import format_set, outcome_rows, outcome_status
from voicelift.utils.loaders import LoaderError, load_context, load_plan, load_script, parse_mode

STATUS_STYLES = {
    "commit": "green",
    "complete": "green",
    "navigate": "cyan",
    "confirm": "yellow",
    "rejected": "yellow",
    "error": "red",
}


def _build_context(
    context_file: Optional[Path],
    plan_file: Optional[Path],
    mode: Optional[str],
) -> SessionContext:
    context = load_context(context_file) if context_file else SessionContext()
    if plan_file:
        plan = load_plan(plan_file)
        index = context.current_index
        if index is None and context.current_exercise is None and plan:
            index = 0
        context = replace(context, plan=plan, current_index=index)
    if mode is not None:
        context = replace(context, mode=mode)
    return context


def _detail(outcome: ParseOutcome) -> str:
    if isinstance(outcome, ParseFailure):
        return outcome.error
    if isinstance(outcome, NavigationCommand):
        return outcome.message or outcome.kind
    detail = format_set(outcome)
    if outcome.needs_confirmation:
        detail += f" ({', '.join(outcome.needs_confirmation)})"
    return detail


def render_outcome(state: CLIState, outcome: ParseOutcome) -> None:
    if state.json_output:
        print_json_payload(state, outcome.to_dict())
        return

    rows = outcome_rows(outcome)
    if state.plain_output:
        for field_name, value in rows:
            typer.echo(f"{field_name}\t{value}")
        return

    status = outcome_status(outcome)
    table = Table(title=f"\"{outcome.raw_text}\"", show_header=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")
    for field_name, value in rows:
        if field_name == "status":
            value = f"[{STATUS_STYLES.get(status, 'white')}]{value}[/]"
        table.add_row(field_name, value)
    state.console.print(table)


def parse_command(
    ctx: typer.Context,
    transcript: str = typer.Argument(..., help="Transcript of one utterance"),
    context_file: Optional[Path] = typer.Option(None, "--context", help="Session context file (YAML/JSON)"),
    plan_file: Optional[Path] = typer.Option(None, "--plan", help="Workout plan file (YAML/JSON)"),
    mode: str = typer.Option("auto", "--mode", help="Logging mode: auto|quick|guided"),
    save_new: bool = typer.Option(False, "--save-new", help="Save a proposed new exercise to the custom store"),
) -> None:
    """Interpret one utterance and print the outcome."""
    state = get_state(ctx)
    try:
        context = _build_context(context_file, plan_file, parse_mode(mode))
    except LoaderError as exc:
        fail(state, str(exc))

    try:
        engine = state.engine()
    except ExerciseStoreError as exc:
        fail(state, str(exc))

    outcome = engine.parse(transcript, context)
    if save_new and isinstance(outcome, ParseResult) and outcome.suggested_exercise is not None:
        saved = state.store().save(outcome.suggested_exercise)
        if not state.json_output and not state.plain_output:
            state.console.print(f"Saved new exercise: {saved.canonical_name} ({saved.group_id})")

    render_outcome(state, outcome)
    if isinstance(outcome, ParseFailure):
        raise typer.Exit(code=1)


def replay_command(
    ctx: typer.Context,
    script: Path = typer.Argument(..., help="Utterance script (YAML/JSON)"),
    plan_file: Optional[Path] = typer.Option(None, "--plan", help="Workout plan file, overrides the script plan"),
    mode: Optional[str] = typer.Option(None, "--mode", help="Logging mode: auto|quick|guided"),
) -> None:
    """Run a scripted workout, committing every set that needs no confirmation."""
    state = get_state(ctx)
    try:
        loaded = load_script(script)
        plan = load_plan(plan_file) if plan_file else loaded.plan
        session_mode = parse_mode(mode) if mode is not None else loaded.mode
    except LoaderError as exc:
        fail(state, str(exc))

    try:
        engine = state.engine()
    except ExerciseStoreError as exc:
        fail(state, str(exc))

    session = WorkoutSession(plan=plan, mode=session_mode)
    steps: List[Dict[str, Any]] = []
    for utterance in loaded.utterances:
        before = len(session.logged)
        outcome = session.step(engine, utterance)
        steps.append(
            {
                "utterance": utterance,
                "status": outcome_status(outcome),
                "committed": len(session.logged) > before,
                "outcome": outcome,
            }
        )

    if state.json_output:
        payload = {
            "steps": [{**step, "outcome": step["outcome"].to_dict()} for step in steps],
            "logged": [asdict(logged) for logged in session.logged],
        }
        print_json_payload(state, payload)
        return

    if state.plain_output:
        typer.echo("index\tutterance\tstatus\tcommitted\tdetail")
        for index, step in enumerate(steps, 1):
            committed = str(step["committed"]).lower()
            typer.echo(f"{index}\t{step['utterance']}\t{step['status']}\t{committed}\t{_detail(step['outcome'])}")
        typer.echo(f"logged\t{len(session.logged)}")
        return

    table = Table(title=f"Replay of {script.name}")
    table.add_column("#", justify="right")
    table.add_column("Utterance")
    table.add_column("Status")
    table.add_column("Result")
    for index, step in enumerate(steps, 1):
        style = STATUS_STYLES.get(step["status"], "white")
        table.add_row(str(index), step["utterance"], f"[{style}]{step['status']}[/]", _detail(step["outcome"]))
    state.console.print(table)
    state.console.print(f"Logged sets: {len(session.logged)}")
