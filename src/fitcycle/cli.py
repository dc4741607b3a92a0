"""CLI interface for the fitcycle training-load engine."""

from __future__ import annotations

import json
import logging
import sys
import time
from datetime import date, datetime
from pathlib import Path

import click

from fitcycle.config import Config
from fitcycle.constants import MUSCLE_GROUPS
from fitcycle.cycle import get_cycle_phase_for_date, phase_guide
from fitcycle.logging import setup_logging
from fitcycle.models import ProfileLoadError, load_profile
from fitcycle.presets import PRESETS
from fitcycle.volume import calculate_full_program, minimum_effective_volume, recovery_rating

logger = logging.getLogger(__name__)


@click.group()
@click.pass_context
def main(ctx: click.Context):
    """Weekly training volume and cycle phase calculator."""
    config = Config.from_env()
    setup_logging(config.log_format, config.log_level)
    ctx.obj = config


@main.command()
@click.option(
    "--profile", "profile_name",
    type=click.Choice(list(PRESETS.keys())),
    help="Use a preset user profile.",
)
@click.option(
    "--profile-file",
    type=click.Path(exists=True, path_type=Path),
    help="Load a profile record from a JSON file.",
)
@click.option("--json", "as_json", is_flag=True, help="Print the program as JSON.")
def program(profile_name: str | None, profile_file: Path | None, as_json: bool):
    """Compute the weekly per-muscle set targets for a profile."""
    if profile_name and profile_file:
        click.echo("Error: Specify either --profile or --profile-file, not both.", err=True)
        sys.exit(1)

    if not profile_name and not profile_file:
        click.echo("Error: Specify --profile or --profile-file.", err=True)
        sys.exit(1)

    if profile_file:
        try:
            profile = load_profile(profile_file)
        except ProfileLoadError as exc:
            click.echo(f"Error: {exc}", err=True)
            sys.exit(1)
    else:
        profile = PRESETS[profile_name]

    result = calculate_full_program(profile)
    logger.info("Program computed", extra={"fitcycle_total_sets": result.meta.total_weekly_sets})

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
        return

    meta = result.meta
    click.echo(f"Goal: {profile.goal} ({result.training_params.goal_description})")
    click.echo(f"  Reps: {result.training_params.rep_range}, rest {result.training_params.rest_minutes} min")
    click.echo(f"  Standard sets: {meta.standard_sets}")
    click.echo(
        f"  Recovery: x{meta.recovery_multiplier:.2f} ({recovery_rating(meta.recovery_multiplier)})"
    )
    click.echo()
    for muscle, sets in result.weekly_volume.items():
        label = MUSCLE_GROUPS[muscle].label
        click.echo(
            f"  {label:<10} {sets:>3} sets/week  {result.per_day[muscle]} per day"
            f"  (MEV {minimum_effective_volume(sets)})"
        )
    click.echo(f"  Total: {meta.total_weekly_sets} sets/week")


@main.command()
@click.option("--last-period", required=True, help="First day of the last period (YYYY-MM-DD).")
@click.option("--length", type=int, default=None, help="Cycle length in days.")
@click.option(
    "--date", "target_date",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    default=None,
    help="Day to classify (default: today).",
)
@click.option("--guide", is_flag=True, help="Include the detailed phase guide.")
@click.pass_obj
def cycle(config: Config, last_period: str, length: int | None, target_date: datetime | None, guide: bool):
    """Show the cycle phase for a day."""
    target: date | float = target_date.date() if target_date else time.time() * 1000
    try:
        phase = get_cycle_phase_for_date(
            target,
            last_period,
            length or config.default_cycle_length,
            config.zone,
        )
    except ValueError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    if phase is None:
        click.echo("Error: --last-period must not be empty.", err=True)
        sys.exit(1)

    click.echo(f"Day {phase.day}: {phase.name}")
    click.echo(f"  {phase.description}")
    click.echo(f"  Recommended: {phase.recommendation}")
    click.echo(
        f"  Sleep: {phase.guidance.sleep} | Strain: {phase.guidance.strain}"
        f" | Stress: {phase.guidance.stress}"
    )
    if guide:
        details = phase_guide(phase.id)
        click.echo(f"  Days {details.days}")
        for item in details.training:
            click.echo(f"    + {item}")
        for item in details.avoid:
            click.echo(f"    - {item}")
        click.echo(f"  Nutrition: {details.nutrition}")
        click.echo(f"  Sleep: {details.sleep}")
        click.echo(f"  Mood: {details.mood}")


@main.command("list-profiles")
def list_profiles():
    """List available preset profiles."""
    for name, profile in PRESETS.items():
        click.echo(f"{name}:")
        click.echo(f"  Gender: {profile.gender}, age {profile.age}")
        click.echo(f"  Experience: {profile.experience_years} years")
        click.echo(f"  Goal: {profile.goal}")
        click.echo(f"  Training: {profile.training_days}x/week")
        click.echo(f"  Sleep: {profile.sleep} h, stress {profile.stress}, calories {profile.calories}")
        if profile.priority_muscles:
            click.echo(f"  Priority: {', '.join(profile.priority_muscles)}")
        click.echo()
