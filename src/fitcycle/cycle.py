"""Menstrual-cycle phase classification.

Only the last period start date and the cycle length are stored; the phase
for any day is derived from them on demand. Phase boundaries are fixed day
ranges and do not scale with the cycle length:

    days 1-5    menstrual
    days 6-13   follicular
    days 14-16  ovulation
    day 17+     luteal
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime
from types import MappingProxyType
from typing import Mapping
from zoneinfo import ZoneInfo

from fitcycle.constants import DEFAULT_CYCLE_LENGTH
from fitcycle.dates import local_date
from fitcycle.models import CycleData, CyclePhase, PhaseGuidance, UserProfile, Workout

logger = logging.getLogger(__name__)

PHASE_IDS: tuple[str, ...] = ("menstrual", "follicular", "ovulation", "luteal")

# Last cycle day (inclusive) of each phase; luteal covers everything after.
_PHASE_UPPER_BOUNDS: tuple[tuple[int, str], ...] = (
    (5, "menstrual"),
    (13, "follicular"),
    (16, "ovulation"),
)


@dataclass(frozen=True)
class _PhaseCopy:
    name: str
    color: str
    bg: str
    description: str
    recommendation: str
    guidance: PhaseGuidance


_PHASES: Mapping[str, _PhaseCopy] = MappingProxyType({
    "menstrual": _PhaseCopy(
        name="Menstrual",
        color="#EF4444",
        bg="rgba(239, 68, 68, 0.1)",
        description="Low energy. Recovery.",
        recommendation="Yoga, walking, light stretching.",
        guidance=PhaseGuidance(sleep="High need", strain="Low", stress="Minimize"),
    ),
    "follicular": _PhaseCopy(
        name="Follicular",
        color="#EC4899",
        bg="rgba(236, 72, 153, 0.1)",
        description="Energy rising. Strength returns.",
        recommendation="Strength work, cardio, learning new skills.",
        guidance=PhaseGuidance(sleep="Normal", strain="High", stress="Moderate"),
    ),
    "ovulation": _PhaseCopy(
        name="Ovulation",
        color="#8B5CF6",
        bg="rgba(139, 92, 246, 0.1)",
        description="Peak strength and testosterone.",
        recommendation="Maximal weights, HIIT, personal records.",
        guidance=PhaseGuidance(sleep="Normal", strain="Maximal", stress="High tolerance"),
    ),
    "luteal": _PhaseCopy(
        name="Luteal",
        color="#F59E0B",
        bg="rgba(245, 158, 11, 0.1)",
        description="Energy dropping. Lower endurance.",
        recommendation="Moderate weights, more reps, pilates.",
        guidance=PhaseGuidance(
            sleep="Quality sleep needed",
            strain="Medium/Low",
            stress="Heightened sensitivity",
        ),
    ),
})


@dataclass(frozen=True)
class PhaseGuide:
    """Long-form guidance shown on the cycle detail screen."""

    id: str
    days: str
    description: str
    training: tuple[str, ...]
    avoid: tuple[str, ...]
    nutrition: str
    sleep: str
    mood: str


PHASE_GUIDES: Mapping[str, PhaseGuide] = MappingProxyType({
    "menstrual": PhaseGuide(
        id="menstrual",
        days="1-5",
        description="Low energy. The body is recovering.",
        training=(
            "Light yoga and stretching",
            "Walking",
            "Low-intensity swimming",
            "Meditation and breathing practice",
        ),
        avoid=(
            "Intense strength sessions",
            "HIIT and sprints",
            "Heavy compound lifts",
        ),
        nutrition="Increase iron intake (red meat, spinach). Drink more water.",
        sleep="High need for sleep. Go to bed earlier.",
        mood="Mood swings are possible. Be kind to yourself.",
    ),
    "follicular": PhaseGuide(
        id="follicular",
        days="6-13",
        description="Energy rising. Estrogen increases and strength returns.",
        training=(
            "Strength training with moderate weights",
            "Cardio with building intensity",
            "Learning new exercises",
            "Group classes",
        ),
        avoid=("Overreaching (energy is there, but do not overdo it)",),
        nutrition="Carbohydrates for energy. Protein for muscle repair.",
        sleep="Normal sleep schedule. Morning training works well.",
        mood="Energy and motivation grow. A good time for new goals.",
    ),
    "ovulation": PhaseGuide(
        id="ovulation",
        days="14-16",
        description="Peak strength and testosterone. Maximum performance.",
        training=(
            "Maximal weights and records",
            "HIIT and interval training",
            "Competition-style sessions",
            "Complex compound movements",
        ),
        avoid=("Skipping sessions (this is your peak)",),
        nutrition="Complete meals. More protein to get the most out of training.",
        sleep="A more intense schedule is affordable.",
        mood="Maximum confidence and social energy.",
    ),
    "luteal": PhaseGuide(
        id="luteal",
        days="17-28",
        description="Energy declining. Progesterone rises and endurance drops.",
        training=(
            "Moderate weights, more reps",
            "Pilates and low-intensity yoga",
            "Light cardio (walking, cycling)",
            "Focus on technique, not load",
        ),
        avoid=(
            "Extreme loads",
            "Long high-intensity sessions",
            "Strict diets",
        ),
        nutrition="Appetite may rise. Do not restrict hard. Magnesium and B6.",
        sleep="Quality sleep matters most. Avoid caffeine in the evening.",
        mood="Sensitivity is heightened. More rest and self-care.",
    ),
})


def phase_for_day(cycle_day: int) -> str:
    """Phase id for a 1-based cycle day."""
    for upper, phase_id in _PHASE_UPPER_BOUNDS:
        if 1 <= cycle_day <= upper:
            return phase_id
    return "luteal"


def phase_guide(phase_id: str) -> PhaseGuide:
    """Detailed guidance for a phase. Raises KeyError for unknown ids."""
    return PHASE_GUIDES[phase_id]


def _to_date(value: float | datetime | date, tz: ZoneInfo | str | None) -> date:
    if isinstance(value, datetime):
        if value.tzinfo is not None and tz is not None:
            zone = ZoneInfo(tz) if isinstance(tz, str) else tz
            value = value.astimezone(zone)
        return value.date()
    if isinstance(value, date):
        return value
    return local_date(value, tz)


def _parse_period_date(value: str | date) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    # Accept full timestamps by keeping the calendar part only
    try:
        return date.fromisoformat(value.strip()[:10])
    except ValueError as exc:
        raise ValueError(f"last period must be an ISO date, got {value!r}") from exc


def cycle_day(
    target: float | datetime | date,
    last_period: str | date,
    cycle_length: int = DEFAULT_CYCLE_LENGTH,
    tz: ZoneInfo | str | None = None,
) -> int:
    """1-based day within the current cycle, always in [1, cycle_length].

    Dates before the last period wrap backwards into the previous cycle.
    Missing, non-numeric or non-positive lengths use the 28-day default.
    """
    try:
        length = int(cycle_length)
    except (TypeError, ValueError, OverflowError):
        length = 0
    if length < 1:
        logger.debug("Unusable cycle length %r, using default", cycle_length)
        length = DEFAULT_CYCLE_LENGTH
    diff_days = (_to_date(target, tz) - _parse_period_date(last_period)).days
    return diff_days % length + 1


def get_cycle_phase_for_date(
    target: float | datetime | date,
    last_period: str | date | None,
    cycle_length: int = DEFAULT_CYCLE_LENGTH,
    tz: ZoneInfo | str | None = None,
) -> CyclePhase | None:
    """Cycle phase on the target day, or None when no last period is known.

    ``target`` is epoch milliseconds, a datetime or a date. Timestamps are
    reduced to their calendar date in ``tz`` (UTC when omitted).
    """
    if not last_period:
        return None

    day = cycle_day(target, last_period, cycle_length, tz)
    phase_id = phase_for_day(day)
    copy = _PHASES[phase_id]
    return CyclePhase(
        id=phase_id,
        name=copy.name,
        color=copy.color,
        bg=copy.bg,
        description=copy.description,
        recommendation=copy.recommendation,
        guidance=copy.guidance,
        day=day,
    )


def current_cycle_phase(
    profile: UserProfile,
    now: float | datetime | date,
    tz: ZoneInfo | str | None = None,
) -> CyclePhase | None:
    """Phase for a profile, or None unless cycle tracking applies to it."""
    if profile.gender != "female" or profile.cycle is None:
        return None
    return get_cycle_phase_for_date(now, profile.cycle.last_period, profile.cycle.length, tz)


def annotate_cycle_phases(
    workouts: Iterable[Workout],
    cycle: CycleData | None,
    tz: ZoneInfo | str | None = None,
) -> list[tuple[Workout, CyclePhase | None]]:
    """Pair each workout with the cycle phase on its date."""
    if cycle is None:
        return [(workout, None) for workout in workouts]
    return [
        (workout, get_cycle_phase_for_date(workout.date, cycle.last_period, cycle.length, tz))
        for workout in workouts
    ]
