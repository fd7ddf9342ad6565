"""CLI interface using Typer."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

import typer
import yaml
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from fitplan.agent.response import create_response, error_response
from fitplan.catalog import get_catalog, reset_catalog
from fitplan.config import get_settings, reload_settings
from fitplan.config.settings import Settings, default_config_path
from fitplan.engine import (
    DayPlan,
    MealPlan,
    SessionPlan,
    WorkoutPlan,
    generate_day_plan,
    generate_meal,
    generate_session,
    generate_workout,
)
from fitplan.validation import (
    PlanRequestError,
    build_day_request,
    build_meal_request,
    build_session_request,
    build_workout_request,
)

app = typer.Typer(
    help="Template-based meal and workout plan generation",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)

# Subcommand groups
catalog_app = typer.Typer(help="Inspect the template catalog")
config_app = typer.Typer(help="Manage the settings file")

app.add_typer(catalog_app, name="catalog")
app.add_typer(config_app, name="config")

CATALOG_GROUPS = ("meals", "workouts", "sessions", "warmups", "cooldowns")


# ============================================================================
# Helpers
# ============================================================================


def output_json(response: dict) -> None:
    """Write a JSON response to stdout."""
    print(json.dumps(response, indent=2))


def configure_logging(level: str) -> None:
    """Route log records through rich on stderr."""
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def use_json(json_output: bool) -> bool:
    return json_output or get_settings().defaults.output_format == "json"


def resolve_seed(seed: Optional[int]) -> Optional[int]:
    return seed if seed is not None else get_settings().defaults.seed


def fail(command: str, message: str, json_output: bool, code: Optional[str] = None,
         suggestions: Optional[list[str]] = None) -> None:
    """Report an error in the requested format and exit with status 1."""
    if json_output:
        output_json(error_response(command, message, code, suggestions).to_dict())
    else:
        console.print(f"[red]Error:[/red] {message}")
        for hint in suggestions or []:
            console.print(f"  [dim]{hint}[/dim]")
    raise typer.Exit(1)


def fail_request(command: str, exc: PlanRequestError, json_output: bool) -> None:
    fail(command, str(exc), json_output, exc.code, [f"Run 'fitplan {command} --help' for valid values"])


def fail_catalog(command: str, exc: Exception, json_output: bool) -> None:
    fail(command, f"Catalog error: {exc}", json_output, "INVALID_CATALOG",
         ["Check the catalog.path setting (fitplan config show)"])


@app.callback()
def main(
    config: Optional[Path] = typer.Option(
        None, "--config", help="Settings file (default: $FITPLAN_CONFIG or ~/.fitplan/config.yaml)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Generate meals, day plans, workouts and focus sessions."""
    settings = reload_settings(config)
    reset_catalog()
    configure_logging("DEBUG" if verbose else settings.logging.level)


# ============================================================================
# Rendering
# ============================================================================


def render_meal(plan: MealPlan, title: Optional[str] = None) -> None:
    totals = plan.total_macros
    table = Table(title=title or f"{plan.name} ({plan.meal_time.value})")
    table.add_column("Item", style="cyan")
    table.add_column("Quantity")
    table.add_column("kcal", justify="right")
    table.add_column("Protein", justify="right")
    table.add_column("Carbs", justify="right")
    table.add_column("Fats", justify="right")

    for item in plan.items:
        table.add_row(
            item.name,
            item.quantity,
            f"{item.calories:.0f}",
            f"{item.protein:.0f}g",
            f"{item.carbs:.0f}g",
            f"{item.fats:.0f}g",
        )
    table.add_row(
        "[bold]Total[/bold]",
        "",
        f"[bold]{totals.calories:.0f}[/bold]",
        f"[bold]{totals.protein:.0f}g[/bold]",
        f"[bold]{totals.carbs:.0f}g[/bold]",
        f"[bold]{totals.fats:.0f}g[/bold]",
    )
    console.print(table)
    if plan.instructions:
        console.print(f"[dim]{plan.instructions}[/dim]")
    if plan.alternatives:
        console.print(f"[dim]Alternatives: {plan.alternatives}[/dim]")
    console.print()


def _exercise_table(title: str, exercises, duration_unit: str = "s") -> Table:
    table = Table(title=title)
    table.add_column("Exercise", style="cyan")
    table.add_column("Sets", justify="right")
    table.add_column("Reps / Time", justify="right")
    table.add_column("Rest", justify="right")
    table.add_column("Difficulty", style="dim")

    for ex in exercises:
        if ex.reps is not None:
            volume = str(ex.reps)
        elif ex.duration is not None:
            volume = f"{ex.duration}{duration_unit}"
        else:
            volume = "-"
        table.add_row(
            ex.name,
            str(ex.sets) if ex.sets is not None else "-",
            volume,
            f"{ex.rest_seconds}s",
            ex.difficulty,
        )
    return table


def render_workout(plan: WorkoutPlan) -> None:
    for section in plan.sections:
        label = section.type.capitalize()
        # Main-section durations are minutes, warm-up and cool-down are seconds
        unit = " min" if section.type == "main" else "s"
        console.print(_exercise_table(f"{label} ({section.duration} min)", section.exercises, unit))
    console.print(Panel(f"Total duration: {plan.total_duration} min", title="Workout"))


def render_session(plan: SessionPlan) -> None:
    console.print(_exercise_table(f"{plan.workout_name} ({plan.duration} min)", plan.exercises))


# ============================================================================
# Plan commands
# ============================================================================


@app.command()
def meal(
    meal_time: str = typer.Option(
        ..., "--time", "-t", help="Meal time: breakfast, lunch, dinner, snack"
    ),
    calories: float = typer.Option(..., "--calories", "-c", help="Target calories"),
    protein: float = typer.Option(..., "--protein", "-p", help="Target protein (g)"),
    carbs: float = typer.Option(..., "--carbs", help="Target carbohydrates (g)"),
    fats: float = typer.Option(..., "--fats", help="Target fats (g)"),
    allergies: Optional[str] = typer.Option(
        None, "--allergies", "-a", help="Comma-separated allergy keywords"
    ),
    goal: str = typer.Option("", "--goal", help="Goal label (informational)"),
    strict_allergens: bool = typer.Option(
        False, "--strict-allergens", help="Fail instead of ignoring allergies when no meal is safe"
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed for reproducibility"),
    json_output: bool = typer.Option(
        False, "--json", help="Output as JSON with agent-friendly envelope"
    ),
) -> None:
    """Generate a single meal scaled toward a calorie target."""
    as_json = use_json(json_output)
    try:
        request = build_meal_request(
            meal_time, calories, protein, carbs, fats, allergies, goal, resolve_seed(seed)
        )
    except PlanRequestError as exc:
        fail_request("meal", exc, as_json)

    try:
        plan = generate_meal(request)
    except (FileNotFoundError, ValueError) as exc:
        fail_catalog("meal", exc, as_json)
    warnings = []
    if plan.allergen_fallback:
        if strict_allergens:
            fail(
                "meal",
                f"No {request.meal_time.value} template avoids: {', '.join(request.allergies)}",
                as_json,
                "ALLERGEN_FALLBACK",
                ["Drop --strict-allergens to accept an unfiltered meal"],
            )
        warnings.append("No template avoided every allergy; allergies were ignored")

    totals = plan.total_macros
    summary = f"{plan.name}: {totals.calories:.0f} kcal, {totals.protein:.0f}g protein"
    if as_json:
        output_json(create_response("meal", plan.to_dict(), warnings, human_summary=summary).to_dict())
        return

    for warning in warnings:
        console.print(f"[yellow]Warning:[/yellow] {warning}")
    render_meal(plan)


@app.command()
def day(
    calories: float = typer.Option(..., "--calories", "-c", help="Daily calories"),
    protein: float = typer.Option(..., "--protein", "-p", help="Daily protein (g)"),
    carbs: float = typer.Option(..., "--carbs", help="Daily carbohydrates (g)"),
    fats: float = typer.Option(..., "--fats", help="Daily fats (g)"),
    allergies: Optional[str] = typer.Option(
        None, "--allergies", "-a", help="Comma-separated allergy keywords"
    ),
    goal: str = typer.Option("", "--goal", help="Goal label (informational)"),
    strict_allergens: bool = typer.Option(
        False, "--strict-allergens", help="Fail instead of ignoring allergies when no meal is safe"
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed for reproducibility"),
    json_output: bool = typer.Option(
        False, "--json", help="Output as JSON with agent-friendly envelope"
    ),
) -> None:
    """Generate breakfast, lunch, dinner and two snacks for one day."""
    as_json = use_json(json_output)
    try:
        request = build_day_request(
            calories, protein, carbs, fats, allergies, goal, resolve_seed(seed)
        )
    except PlanRequestError as exc:
        fail_request("day", exc, as_json)

    try:
        plan: DayPlan = generate_day_plan(request)
    except (FileNotFoundError, ValueError) as exc:
        fail_catalog("day", exc, as_json)
    warnings = []
    if plan.allergen_fallback:
        if strict_allergens:
            fail(
                "day",
                f"Some meal times have no template avoiding: {', '.join(request.allergies)}",
                as_json,
                "ALLERGEN_FALLBACK",
                ["Drop --strict-allergens to accept unfiltered meals"],
            )
        warnings.append("Allergies were ignored for at least one meal time")
    if plan.snack_shortfall:
        warnings.append(
            f"Too few snack templates avoid the allergies; {plan.snack_shortfall} snack left out "
            "and the snack share given to the rest"
        )

    totals = plan.total_macros
    summary = f"{len(plan.meals)} meals: {totals.calories:.0f} kcal, {totals.protein:.0f}g protein"
    if as_json:
        output_json(create_response("day", plan.to_dict(), warnings, human_summary=summary).to_dict())
        return

    for warning in warnings:
        console.print(f"[yellow]Warning:[/yellow] {warning}")
    for m in plan.meals:
        render_meal(m, title=f"{m.meal_time.value.capitalize()}: {m.name}")
    console.print(Panel(
        f"Calories: {totals.calories:.0f}\n"
        f"Protein: {totals.protein:.0f}g\n"
        f"Carbs: {totals.carbs:.0f}g\n"
        f"Fats: {totals.fats:.0f}g",
        title="Daily Totals",
    ))


@app.command()
def workout(
    workout_type: str = typer.Option(
        ..., "--type", "-t", help="Workout type: gym, home, cardio, strength"
    ),
    duration: int = typer.Option(..., "--duration", "-d", help="Total minutes"),
    level: str = typer.Option(
        "beginner", "--level", "-l", help="Fitness level: beginner, intermediate, advanced"
    ),
    equipment: Optional[str] = typer.Option(
        None, "--equipment", "-e", help="Comma-separated equipment available (gym only)"
    ),
    injuries: Optional[str] = typer.Option(
        None, "--injuries", "-i", help="Comma-separated injuries: knee, shoulder, back, wrist"
    ),
    goal: str = typer.Option("", "--goal", help="Goal label (informational)"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed for reproducibility"),
    json_output: bool = typer.Option(
        False, "--json", help="Output as JSON with agent-friendly envelope"
    ),
) -> None:
    """Generate a warm-up, main and cool-down workout."""
    as_json = use_json(json_output)
    settings = get_settings()
    try:
        request = build_workout_request(
            workout_type,
            duration,
            level,
            equipment,
            injuries,
            goal,
            resolve_seed(seed),
            min_duration=settings.workout.min_duration,
            max_duration=settings.workout.max_duration,
        )
    except PlanRequestError as exc:
        fail_request("workout", exc, as_json)

    try:
        plan = generate_workout(
            request,
            section_fraction=settings.workout.section_fraction,
            section_cap=settings.workout.section_cap_minutes,
        )
    except (FileNotFoundError, ValueError) as exc:
        fail_catalog("workout", exc, as_json)
    warnings = []
    if plan.main_fallback:
        warnings.append("No exercise matched the filters; used safe bodyweight defaults")

    summary = (
        f"{request.workout_type.value.capitalize()} workout: {plan.total_duration} min, "
        f"{len(plan.main.exercises)} main exercises"
    )
    if as_json:
        output_json(create_response("workout", plan.to_dict(), warnings, human_summary=summary).to_dict())
        return

    for warning in warnings:
        console.print(f"[yellow]Warning:[/yellow] {warning}")
    render_workout(plan)


@app.command()
def session(
    workout_type: str = typer.Option(..., "--type", "-t", help="Session type: gym, home"),
    focus: str = typer.Option(
        ..., "--focus", "-f", help="Focus area: full_body, upper, lower, core"
    ),
    difficulty: str = typer.Option(
        ..., "--difficulty", help="Difficulty: beginner, intermediate, advanced"
    ),
    duration: int = typer.Option(..., "--duration", "-d", help="Total minutes"),
    equipment: Optional[str] = typer.Option(
        None, "--equipment", "-e", help="Comma-separated extra equipment (home only)"
    ),
    injuries: Optional[str] = typer.Option(
        None, "--injuries", "-i", help="Comma-separated injuries: knee, shoulder, back, wrist"
    ),
    json_output: bool = typer.Option(
        False, "--json", help="Output as JSON with agent-friendly envelope"
    ),
) -> None:
    """Generate a single-block focus-area session."""
    as_json = use_json(json_output)
    try:
        request = build_session_request(workout_type, focus, difficulty, duration, equipment, injuries)
    except PlanRequestError as exc:
        fail_request("session", exc, as_json)

    try:
        plan = generate_session(request)
    except (FileNotFoundError, ValueError) as exc:
        fail_catalog("session", exc, as_json)
    warnings = []
    if plan.fallback:
        warnings.append("No exercise matched the filters; used safe bodyweight defaults")

    summary = f"{plan.workout_name}: {len(plan.exercises)} exercises"
    if as_json:
        output_json(create_response("session", plan.to_dict(), warnings, human_summary=summary).to_dict())
        return

    for warning in warnings:
        console.print(f"[yellow]Warning:[/yellow] {warning}")
    render_session(plan)


# ============================================================================
# Catalog commands
# ============================================================================


def _catalog_rows(group: str) -> list[dict]:
    catalog = get_catalog()
    if group == "meals":
        return [
            {
                "id": t.id,
                "meal_time": t.meal_time.value,
                "name": t.name,
                "calories": t.total_calories,
                "protein": t.total_protein,
            }
            for templates in catalog.meals.values()
            for t in templates
        ]
    if group == "workouts":
        return [
            {"id": t.id, "type": wt.value, "name": t.name, "equipment": t.equipment}
            for wt, templates in catalog.workouts.items()
            for t in templates
        ]
    if group == "sessions":
        return [
            {"id": t.id, "level": level.value, "focus": focus.value, "name": t.name, "equipment": t.equipment}
            for (level, focus), templates in catalog.sessions.items()
            for t in templates
        ]
    micro = catalog.warmups if group == "warmups" else catalog.cooldowns
    return [{"id": m.id, "name": m.name, "minutes": m.minutes} for m in micro]


@catalog_app.command("list")
def catalog_list(
    group: Optional[str] = typer.Argument(
        None, help="Group to list: meals, workouts, sessions, warmups, cooldowns"
    ),
    json_output: bool = typer.Option(
        False, "--json", help="Output as JSON with agent-friendly envelope"
    ),
) -> None:
    """List catalog templates, or summarize group sizes."""
    as_json = use_json(json_output)
    if group is not None and group not in CATALOG_GROUPS:
        fail(
            "catalog list",
            f"Unknown group '{group}'",
            as_json,
            "INVALID_GROUP",
            [f"Choose one of: {', '.join(CATALOG_GROUPS)}"],
        )

    try:
        catalog = get_catalog()
    except (FileNotFoundError, ValueError) as exc:
        fail_catalog("catalog list", exc, as_json)

    if group is None:
        counts = catalog.counts()
        if as_json:
            output_json(create_response(
                "catalog list",
                {"counts": counts},
                human_summary=f"{sum(counts.values())} templates",
            ).to_dict())
            return
        table = Table(title="Template Catalog")
        table.add_column("Group", style="cyan")
        table.add_column("Templates", justify="right")
        for name, count in counts.items():
            table.add_row(name, str(count))
        console.print(table)
        return

    rows = _catalog_rows(group)
    if as_json:
        output_json(create_response(
            "catalog list",
            {"group": group, "templates": rows},
            human_summary=f"{len(rows)} {group}",
        ).to_dict())
        return

    if not rows:
        console.print(f"[yellow]No {group} in catalog[/yellow]")
        return

    table = Table(title=group.capitalize())
    for column in rows[0]:
        table.add_column(column, style="cyan" if column == "name" else None)
    for row in rows:
        table.add_row(*(f"{v:.0f}" if isinstance(v, float) else str(v) for v in row.values()))
    console.print(table)


# ============================================================================
# Config commands
# ============================================================================


@config_app.command("show")
def config_show(
    json_output: bool = typer.Option(
        False, "--json", help="Output as JSON with agent-friendly envelope"
    ),
) -> None:
    """Show the effective settings."""
    data = get_settings().to_dict()
    if use_json(json_output):
        output_json(create_response("config show", data, human_summary="Effective settings").to_dict())
        return
    console.print(Panel(yaml.safe_dump(data, sort_keys=False).rstrip(), title="Settings"))


@config_app.command("init")
def config_init(
    path: Optional[Path] = typer.Option(None, "--path", help="Where to write the settings file"),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing file"),
    json_output: bool = typer.Option(
        False, "--json", help="Output as JSON with agent-friendly envelope"
    ),
) -> None:
    """Write a settings file with default values."""
    as_json = use_json(json_output)
    target = path or default_config_path()
    if target.exists() and not force:
        fail(
            "config init",
            f"Settings file already exists: {target}",
            as_json,
            "CONFIG_EXISTS",
            ["Use --force to overwrite"],
        )

    Settings().save(target)
    if as_json:
        output_json(create_response(
            "config init", {"path": str(target)}, human_summary=f"Wrote {target}"
        ).to_dict())
        return
    console.print(f"[green]Wrote default settings to {target}[/green]")


if __name__ == "__main__":
    app()
