"""Weekly training-volume program per muscle group.

Turns a (possibly partial) user profile into a weekly set target for each
non-cardio muscle group:

    standard sets (experience bracket)
      x recovery multiplier (sleep, stress, calories, age)
      x goal modifier
      x gender bias per muscle
      x priority adjustment
    -> clamped to [MIN_WEEKLY_SETS, MAX_WEEKLY_SETS]

Pure and deterministic; safe to call on every render.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from pydantic.alias_generators import to_camel

from fitcycle.constants import (
    CALORIE_OPTIONS,
    GOALS,
    MUSCLE_BIAS_FACTORS,
    STRESS_LEVELS,
)
from fitcycle.models import CalculatedProgram, ProgramMeta, TrainingParams, UserProfile

logger = logging.getLogger(__name__)

MIN_WEEKLY_SETS = 3
MAX_WEEKLY_SETS = 28

PRIORITY_BOOST = 1.3
NON_PRIORITY_PENALTY = 0.9

# Fraction of the weekly target treated as the minimum effective volume
MEV_FRACTION = 0.6

DEFAULTS: dict[str, Any] = {
    "experience_years": 0,
    "sleep": 7,
    "stress": "moderate",
    "calories": "maintenance",
    "age": 25,
    "gender": "male",
    "goal": "hypertrophy",
    "priority_muscles": (),
    "training_days": 3,
}

# Exclusive age brackets, highest threshold first; only the first match applies.
_AGE_FACTORS: tuple[tuple[float, float], ...] = (
    (55, 0.85),
    (45, 0.90),
    (35, 0.95),
)

_PER_DAY_QUANTUM = Decimal("0.1")


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties away from zero for positive values."""
    return int(math.floor(value + 0.5))


def _as_float(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        result = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(result) or math.isinf(result):
        return None
    return result


def _read(profile: UserProfile | Mapping[str, Any] | None, name: str) -> Any:
    """Fetch a profile field by snake_case or camelCase name, or None."""
    if profile is None:
        return None
    if isinstance(profile, UserProfile):
        return getattr(profile, name, None)
    value = profile.get(name)
    if value is None:
        value = profile.get(to_camel(name))
    return value


def _number(profile: UserProfile | Mapping[str, Any] | None, name: str) -> float:
    value = _as_float(_read(profile, name))
    if value is None:
        return float(DEFAULTS[name])
    return value


def _choice(profile: UserProfile | Mapping[str, Any] | None, name: str) -> str:
    value = _read(profile, name)
    if not isinstance(value, str) or not value:
        return DEFAULTS[name]
    return value


def _priority_muscles(profile: UserProfile | Mapping[str, Any] | None) -> frozenset[str]:
    value = _read(profile, "priority_muscles")
    if not isinstance(value, (list, tuple, set, frozenset)):
        return frozenset()
    return frozenset(m for m in value if isinstance(m, str))


def base_sets_per_muscle(experience_years: float) -> int:
    """Baseline weekly sets per muscle from training age (stepwise brackets)."""
    if experience_years < 1:
        return 10
    if experience_years < 3:
        return 14
    return 18


def sleep_factor(sleep_hours: float) -> float:
    if sleep_hours < 6:
        return 0.8
    if sleep_hours >= 8:
        return 1.1
    return 1.0


def age_factor(age: float) -> float:
    """Age factor from the single highest bracket crossed (not cumulative)."""
    for threshold, factor in _AGE_FACTORS:
        if age > threshold:
            return factor
    return 1.0


def recovery_multiplier(sleep: float, stress: str, calories: str, age: float) -> float:
    """Compose sleep, stress, calorie and age factors multiplicatively.

    Unknown stress or calorie keys contribute a neutral 1.0.
    """
    mult = 1.0
    mult *= sleep_factor(sleep)
    stress_option = STRESS_LEVELS.get(stress)
    mult *= stress_option.value if stress_option else 1.0
    calorie_option = CALORIE_OPTIONS.get(calories)
    mult *= calorie_option.value if calorie_option else 1.0
    mult *= age_factor(age)
    return mult


def goal_modifier(goal: str) -> float:
    info = GOALS.get(goal)
    return info.volume_mod if info else 1.0


def training_params_for_goal(goal: str) -> TrainingParams:
    info = GOALS.get(goal)
    if info is None:
        return TrainingParams(rep_range="8-12", rest_minutes="1.5-2", goal_description="")
    return TrainingParams(
        rep_range=info.rep_range,
        rest_minutes=info.rest_minutes,
        goal_description=info.description,
    )


def muscle_sets(
    adjusted_base_volume: float,
    bias: float,
    *,
    is_priority: bool,
    has_priorities: bool,
) -> int:
    """Weekly sets for one muscle: bias, priority adjustment, then clamp."""
    sets = round_half_up(adjusted_base_volume * bias)
    if is_priority:
        sets = round_half_up(sets * PRIORITY_BOOST)
    elif has_priorities:
        sets = round_half_up(sets * NON_PRIORITY_PENALTY)
    return max(MIN_WEEKLY_SETS, min(MAX_WEEKLY_SETS, sets))


def per_day_sets(weekly_sets: int, training_days: float) -> Decimal:
    """Weekly sets spread across training days, one decimal place, half-up."""
    return Decimal(weekly_sets / training_days).quantize(_PER_DAY_QUANTUM, rounding=ROUND_HALF_UP)


def calculate_full_program(
    profile: UserProfile | Mapping[str, Any] | None = None,
) -> CalculatedProgram:
    """Compute the weekly per-muscle volume program for a profile.

    Accepts a validated UserProfile or a partial mapping (snake_case or
    camelCase keys). Missing or unusable fields take their defaults, so
    this never raises.
    """
    experience_years = _number(profile, "experience_years")
    sleep = _number(profile, "sleep")
    age = _number(profile, "age")
    stress = _choice(profile, "stress")
    calories = _choice(profile, "calories")
    goal = _choice(profile, "goal")
    gender = "female" if _read(profile, "gender") == "female" else "male"
    priority_muscles = _priority_muscles(profile)

    training_days = _number(profile, "training_days")
    if training_days < 1:
        logger.debug("Training days %s below one, using default", training_days)
        training_days = float(DEFAULTS["training_days"])

    standard_sets = base_sets_per_muscle(experience_years)
    recovery = recovery_multiplier(sleep, stress, calories, age)
    adjusted_base_volume = standard_sets * recovery * goal_modifier(goal)

    weekly_volume: dict[str, int] = {}
    for muscle, bias in MUSCLE_BIAS_FACTORS[gender].items():
        weekly_volume[muscle] = muscle_sets(
            adjusted_base_volume,
            bias,
            is_priority=muscle in priority_muscles,
            has_priorities=bool(priority_muscles),
        )

    total_sets = sum(weekly_volume.values())
    per_day = {
        muscle: per_day_sets(sets, training_days)
        for muscle, sets in weekly_volume.items()
    }

    logger.debug(
        "Program computed: standard_sets=%d recovery=%.3f total_sets=%d",
        standard_sets,
        recovery,
        total_sets,
        extra={"fitcycle_goal": goal, "fitcycle_total_sets": total_sets},
    )

    return CalculatedProgram(
        weekly_volume=weekly_volume,
        per_day=per_day,
        training_params=training_params_for_goal(goal),
        meta=ProgramMeta(
            standard_sets=standard_sets,
            recovery_multiplier=recovery,
            total_weekly_sets=total_sets,
        ),
    )


def recovery_rating(multiplier: float) -> str:
    """Bucket a recovery multiplier into high / normal / reduced."""
    if multiplier >= 1.05:
        return "high"
    if multiplier >= 0.95:
        return "normal"
    return "reduced"


def minimum_effective_volume(target_sets: int) -> int:
    """Weekly sets below which a muscle is considered under-stimulated."""
    return round_half_up(target_sets * MEV_FRACTION)
