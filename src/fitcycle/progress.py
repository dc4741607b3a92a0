"""Logged workout volume compared against the weekly program."""

from __future__ import annotations

from collections.abc import Iterable

from fitcycle.constants import VOLUME_MUSCLE_GROUPS
from fitcycle.models import (
    BodyLog,
    BodyTrend,
    CalculatedProgram,
    ExerciseBreakdown,
    MuscleStats,
    TopLift,
    VolumeProgress,
    Workout,
)
from fitcycle.volume import minimum_effective_volume, round_half_up

# Target assumed for a muscle without a program entry
FALLBACK_TARGET_SETS = 10
PERCENT_CAP = 120.0
UNDER_FRACTION = 0.5
OVER_FRACTION = 1.1


def _in_window(workout: Workout, start: int | None, end: int | None) -> bool:
    if start is not None and workout.date < start:
        return False
    if end is not None and workout.date > end:
        return False
    return True


def count_sets_by_muscle(
    workouts: Iterable[Workout],
    start: int | None = None,
    end: int | None = None,
) -> dict[str, int]:
    """Completed sets per non-cardio muscle group within [start, end] (ms)."""
    counts = {muscle: 0 for muscle in VOLUME_MUSCLE_GROUPS}
    for workout in workouts:
        if not _in_window(workout, start, end):
            continue
        for exercise in workout.exercises:
            if exercise.muscle in counts:
                counts[exercise.muscle] += len(exercise.sets)
    return counts


def volume_progress(actual: int, target: int | None) -> VolumeProgress:
    if not target:
        target = FALLBACK_TARGET_SETS
    percent = min(actual / target * 100, PERCENT_CAP)
    if actual < target * UNDER_FRACTION:
        status = "under"
    elif actual > target * OVER_FRACTION:
        status = "over"
    else:
        status = "on_track"
    return VolumeProgress(
        actual=actual,
        target=target,
        percent=percent,
        status=status,
        below_minimum=actual < minimum_effective_volume(target),
    )


def weekly_progress(
    program: CalculatedProgram,
    workouts: Iterable[Workout],
    start: int | None = None,
    end: int | None = None,
) -> dict[str, VolumeProgress]:
    actual = count_sets_by_muscle(workouts, start, end)
    return {
        muscle: volume_progress(sets, program.weekly_volume.get(muscle))
        for muscle, sets in actual.items()
    }


def muscle_stats(workouts: Iterable[Workout]) -> dict[str, MuscleStats]:
    """Sets and exercise entries per muscle, for any muscle that was trained."""
    sets: dict[str, int] = {}
    exercises: dict[str, int] = {}
    for workout in workouts:
        for exercise in workout.exercises:
            sets[exercise.muscle] = sets.get(exercise.muscle, 0) + len(exercise.sets)
            exercises[exercise.muscle] = exercises.get(exercise.muscle, 0) + 1
    return {muscle: MuscleStats(sets=sets[muscle], exercises=exercises[muscle]) for muscle in sets}


def total_tonnage(workouts: Iterable[Workout]) -> int:
    """Sum of weight x reps over every set, rounded to a whole kilogram."""
    total = 0.0
    for workout in workouts:
        for exercise in workout.exercises:
            for s in exercise.sets:
                if s.weight and s.reps:
                    total += s.weight * s.reps
    return round_half_up(total)


def top_lift(workouts: Iterable[Workout]) -> TopLift | None:
    """Exercise with the heaviest single set; first one wins on ties."""
    top: TopLift | None = None
    for workout in workouts:
        for exercise in workout.exercises:
            for s in exercise.sets:
                if s.weight and (top is None or s.weight > top.max_weight):
                    top = TopLift(name=exercise.name, max_weight=s.weight)
    return top


def exercise_breakdown(workouts: Iterable[Workout], muscle: str) -> list[ExerciseBreakdown]:
    """Per-exercise sets and tonnage for one muscle, most sets first."""
    breakdown: dict[str, ExerciseBreakdown] = {}
    for workout in workouts:
        for exercise in workout.exercises:
            if exercise.muscle != muscle:
                continue
            entry = breakdown.get(exercise.id)
            if entry is None:
                entry = breakdown[exercise.id] = ExerciseBreakdown(
                    exercise_id=exercise.id, name=exercise.name
                )
            entry.sets += len(exercise.sets)
            entry.total_weight += sum(s.weight * s.reps for s in exercise.sets)
    return sorted(breakdown.values(), key=lambda e: e.sets, reverse=True)


def sets_timeline(workouts: Iterable[Workout], muscle: str) -> list[tuple[int, int]]:
    """(date_ms, sets) for each workout that trained the muscle, oldest first."""
    points = []
    for workout in sorted(workouts, key=lambda w: w.date):
        sets = sum(len(ex.sets) for ex in workout.exercises if ex.muscle == muscle)
        if any(ex.muscle == muscle for ex in workout.exercises):
            points.append((workout.date, sets))
    return points


def body_trend(
    logs: Iterable[BodyLog],
    start: int | None = None,
    end: int | None = None,
) -> BodyTrend:
    """Weight and body-fat series within [start, end] (ms), oldest first.

    Changes are last minus first; fat only counts logs that recorded a
    positive value. Both are None when there is nothing to compare.
    """
    points = sorted(
        (
            log for log in logs
            if (start is None or log.date >= start) and (end is None or log.date <= end)
        ),
        key=lambda log: log.date,
    )
    fat_points = [log for log in points if log.fat]
    return BodyTrend(
        points=points,
        weight_change=points[-1].weight - points[0].weight if points else None,
        fat_change=fat_points[-1].fat - fat_points[0].fat if fat_points else None,
        has_fat_data=bool(fat_points),
    )
