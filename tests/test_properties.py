"""Property tests for the volume program and cycle day invariants."""

from __future__ import annotations

from datetime import date

from hypothesis import given, settings
from hypothesis import strategies as st

from fitcycle.constants import MUSCLE_BIAS_FACTORS, VOLUME_MUSCLE_GROUPS
from fitcycle.cycle import cycle_day, get_cycle_phase_for_date
from fitcycle.volume import (
    MAX_WEEKLY_SETS,
    MIN_WEEKLY_SETS,
    base_sets_per_muscle,
    calculate_full_program,
    goal_modifier,
    recovery_multiplier,
    round_half_up,
)

PROPERTY_SETTINGS = settings(max_examples=200, deadline=None)

profiles = st.fixed_dictionaries({
    "gender": st.sampled_from(["male", "female"]),
    "age": st.integers(min_value=10, max_value=100),
    "experience_years": st.floats(min_value=0, max_value=50, allow_nan=False),
    "sleep": st.floats(min_value=4, max_value=12, allow_nan=False),
    "stress": st.sampled_from(["low", "moderate", "high"]),
    "calories": st.sampled_from(["surplus", "maintenance", "deficit"]),
    "goal": st.sampled_from(["hypertrophy", "strength", "endurance"]),
    "training_days": st.integers(min_value=1, max_value=7),
    "priority_muscles": st.lists(
        st.sampled_from(VOLUME_MUSCLE_GROUPS), max_size=2, unique=True
    ),
})

# 1971-01-01 .. 2100-01-01 in epoch ms
timestamps = st.integers(min_value=31_536_000_000, max_value=4_102_444_800_000)
period_dates = st.dates(min_value=date(1971, 1, 1), max_value=date(2099, 12, 31))


def _raw_sets(profile: dict) -> dict[str, int]:
    adjusted = (
        base_sets_per_muscle(profile["experience_years"])
        * recovery_multiplier(profile["sleep"], profile["stress"], profile["calories"], profile["age"])
        * goal_modifier(profile["goal"])
    )
    return {
        muscle: round_half_up(adjusted * bias)
        for muscle, bias in MUSCLE_BIAS_FACTORS[profile["gender"]].items()
    }


@given(st.floats(min_value=0, max_value=50, allow_nan=False), st.floats(min_value=0, max_value=50, allow_nan=False))
def test_standard_sets_monotonic(a: float, b: float) -> None:
    low, high = sorted((a, b))
    assert base_sets_per_muscle(low) in {10, 14, 18}
    assert base_sets_per_muscle(low) <= base_sets_per_muscle(high)


@PROPERTY_SETTINGS
@given(profiles)
def test_weekly_volume_always_clamped(profile: dict) -> None:
    program = calculate_full_program(profile)
    for sets in program.weekly_volume.values():
        assert MIN_WEEKLY_SETS <= sets <= MAX_WEEKLY_SETS


@PROPERTY_SETTINGS
@given(profiles)
def test_no_priorities_means_unpenalized_volume(profile: dict) -> None:
    profile = {**profile, "priority_muscles": []}
    program = calculate_full_program(profile)
    for muscle, raw in _raw_sets(profile).items():
        assert program.weekly_volume[muscle] == max(MIN_WEEKLY_SETS, min(MAX_WEEKLY_SETS, raw))


@PROPERTY_SETTINGS
@given(profiles)
def test_priority_muscles_are_boosted(profile: dict) -> None:
    program = calculate_full_program(profile)
    raw = _raw_sets(profile)
    for muscle in profile["priority_muscles"]:
        assert program.weekly_volume[muscle] >= min(raw[muscle], MAX_WEEKLY_SETS)


@PROPERTY_SETTINGS
@given(profiles)
def test_per_day_reconstructs_weekly_total(profile: dict) -> None:
    program = calculate_full_program(profile)
    days = profile["training_days"]
    rebuilt = sum(float(v) * days for v in program.per_day.values())
    tolerance = 0.05 * days * len(VOLUME_MUSCLE_GROUPS) + 1e-9
    assert abs(rebuilt - program.meta.total_weekly_sets) <= tolerance
    assert program.meta.total_weekly_sets == sum(program.weekly_volume.values())


@PROPERTY_SETTINGS
@given(timestamps, period_dates, st.integers(min_value=1, max_value=60))
def test_cycle_day_within_cycle(target_ms: int, last_period: date, length: int) -> None:
    day = cycle_day(target_ms, last_period.isoformat(), length)
    assert 1 <= day <= length


@PROPERTY_SETTINGS
@given(timestamps, period_dates, st.integers(min_value=1, max_value=60))
def test_cycle_phase_deterministic(target_ms: int, last_period: date, length: int) -> None:
    first = get_cycle_phase_for_date(target_ms, last_period.isoformat(), length)
    second = get_cycle_phase_for_date(target_ms, last_period.isoformat(), length)
    assert first is not None
    assert first == second
    assert first.day == cycle_day(target_ms, last_period.isoformat(), length)
