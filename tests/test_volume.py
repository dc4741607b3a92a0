from __future__ import annotations

from decimal import Decimal

import pytest

from fitcycle.constants import VOLUME_MUSCLE_GROUPS
from fitcycle.presets import STRESSED_CUT
from fitcycle.volume import (
    MAX_WEEKLY_SETS,
    MIN_WEEKLY_SETS,
    age_factor,
    base_sets_per_muscle,
    calculate_full_program,
    minimum_effective_volume,
    per_day_sets,
    recovery_multiplier,
    recovery_rating,
    round_half_up,
)


def test_base_sets_brackets() -> None:
    assert base_sets_per_muscle(0) == 10
    assert base_sets_per_muscle(0.99) == 10
    assert base_sets_per_muscle(1) == 14
    assert base_sets_per_muscle(2.9) == 14
    assert base_sets_per_muscle(3) == 18
    assert base_sets_per_muscle(25) == 18


def test_age_factor_uses_only_highest_bracket() -> None:
    assert age_factor(35) == 1.0
    assert age_factor(36) == 0.95
    assert age_factor(46) == 0.90
    assert age_factor(60) == 0.85


def test_recovery_multiplier_composes_factors() -> None:
    assert recovery_multiplier(7, "moderate", "maintenance", 25) == 1.0
    assert recovery_multiplier(5, "high", "deficit", 40) == pytest.approx(0.8 * 0.85 * 0.85 * 0.95)
    assert recovery_multiplier(8, "low", "surplus", 30) == pytest.approx(1.1 * 1.1 * 1.1)
    # a 60-year-old gets 0.85, not 0.95 * 0.90 * 0.85
    assert recovery_multiplier(7, "moderate", "maintenance", 60) == pytest.approx(0.85)


def test_recovery_multiplier_unknown_keys_are_neutral() -> None:
    assert recovery_multiplier(7, "frantic", "keto", 25) == 1.0


def test_round_half_up_rounds_ties_up() -> None:
    assert round_half_up(4.5) == 5
    assert round_half_up(2.5) == 3
    assert round_half_up(2.49) == 2


def test_per_day_sets_one_decimal_half_up() -> None:
    assert per_day_sets(9, 4) == Decimal("2.3")
    assert per_day_sets(10, 3) == Decimal("3.3")
    assert per_day_sets(8, 3) == Decimal("2.7")
    assert per_day_sets(6, 3) == Decimal("2.0")


def test_empty_profile_uses_defaults() -> None:
    program = calculate_full_program({})

    assert program.weekly_volume == {
        "legs": 10, "back": 10, "chest": 10, "shoulders": 8, "arms": 6, "abs": 5,
    }
    assert program.meta.standard_sets == 10
    assert program.meta.recovery_multiplier == 1.0
    assert program.meta.total_weekly_sets == 49
    assert program.per_day["legs"] == Decimal("3.3")
    assert program.per_day["abs"] == Decimal("1.7")
    assert program.training_params.rep_range == "8-12"
    assert program.training_params.rest_minutes == "1.5-2"


def test_none_profile_matches_empty_profile() -> None:
    assert calculate_full_program(None) == calculate_full_program({})


def test_cardio_is_never_planned() -> None:
    program = calculate_full_program({"priority_muscles": ["cardio"]})
    assert "cardio" not in program.weekly_volume
    assert "cardio" not in program.per_day
    assert tuple(program.weekly_volume) == VOLUME_MUSCLE_GROUPS


def test_stressed_female_strength_scenario() -> None:
    program = calculate_full_program({
        "gender": "female",
        "age": 40,
        "experience_years": 2,
        "sleep": 5,
        "stress": "high",
        "calories": "deficit",
        "goal": "strength",
        "training_days": 4,
        "priority_muscles": ["legs"],
    })

    assert program.meta.standard_sets == 14
    assert program.meta.recovery_multiplier == pytest.approx(0.5491)
    assert program.weekly_volume == {
        "legs": 9, "back": 5, "chest": 3, "shoulders": 4, "arms": 3, "abs": 3,
    }
    assert program.meta.total_weekly_sets == 27
    assert program.per_day["legs"] == Decimal("2.3")
    assert program.per_day["shoulders"] == Decimal("1.0")
    assert program.training_params.rep_range == "3-5"


def test_validated_profile_and_mapping_agree() -> None:
    from_model = calculate_full_program(STRESSED_CUT)
    from_mapping = calculate_full_program(STRESSED_CUT.model_dump(by_alias=True))
    assert from_model == from_mapping


def test_camel_case_keys_are_read() -> None:
    program = calculate_full_program({"experienceYears": 4, "trainingDays": 6})
    assert program.meta.standard_sets == 18
    assert program.per_day["legs"] == Decimal("3.0")


def test_priority_boosts_focus_and_trims_the_rest() -> None:
    program = calculate_full_program({"priority_muscles": ["legs"]})
    assert program.weekly_volume == {
        "legs": 13, "back": 9, "chest": 9, "shoulders": 7, "arms": 5, "abs": 5,
    }


def test_no_priorities_means_no_penalty() -> None:
    baseline = calculate_full_program({"experience_years": 5})
    with_empty = calculate_full_program({"experience_years": 5, "priority_muscles": []})
    assert baseline.weekly_volume == with_empty.weekly_volume


def test_volume_is_clamped_to_ceiling() -> None:
    program = calculate_full_program({
        "experience_years": 10,
        "sleep": 9,
        "stress": "low",
        "calories": "surplus",
        "goal": "endurance",
        "priority_muscles": ["legs"],
    })
    assert program.weekly_volume["legs"] == MAX_WEEKLY_SETS


def test_volume_is_clamped_to_floor() -> None:
    program = calculate_full_program({
        "sleep": 4,
        "stress": "high",
        "calories": "deficit",
        "age": 60,
        "goal": "strength",
    })
    assert program.weekly_volume["abs"] == MIN_WEEKLY_SETS
    assert all(v >= MIN_WEEKLY_SETS for v in program.weekly_volume.values())


def test_unusable_fields_fall_back_to_defaults() -> None:
    program = calculate_full_program({
        "sleep": "lots",
        "age": None,
        "stress": "frantic",
        "goal": "yoga",
        "training_days": 0,
        "priority_muscles": "legs",
    })
    default = calculate_full_program({})

    assert program.weekly_volume == default.weekly_volume
    assert program.per_day == default.per_day
    assert program.training_params.rep_range == "8-12"
    assert program.training_params.goal_description == ""

    for priority in (1, True, 2.5):
        assert calculate_full_program({"priority_muscles": priority}).weekly_volume == default.weekly_volume


def test_fractional_training_days_below_one_use_default() -> None:
    default = calculate_full_program({})
    for days in (1e-30, 5e-324, 0.5):
        assert calculate_full_program({"training_days": days}).per_day == default.per_day


def test_negative_training_days_do_not_divide() -> None:
    program = calculate_full_program({"training_days": -2})
    assert program.per_day["legs"] == Decimal("3.3")


def test_unknown_gender_uses_male_bias() -> None:
    assert (
        calculate_full_program({"gender": "other"}).weekly_volume
        == calculate_full_program({"gender": "male"}).weekly_volume
    )


def test_to_dict_shape() -> None:
    data = calculate_full_program({"training_days": 4}).to_dict()
    assert set(data) == {"weeklyVolume", "perDay", "trainingParams", "meta"}
    assert data["perDay"]["legs"] == "2.5"
    assert data["meta"]["standardSets"] == 10
    assert data["trainingParams"]["repRange"] == "8-12"


def test_recovery_rating_buckets() -> None:
    assert recovery_rating(1.1) == "high"
    assert recovery_rating(1.05) == "high"
    assert recovery_rating(1.0) == "normal"
    assert recovery_rating(0.95) == "normal"
    assert recovery_rating(0.9) == "reduced"


def test_minimum_effective_volume_is_sixty_percent() -> None:
    assert minimum_effective_volume(10) == 6
    assert minimum_effective_volume(13) == 8
    assert minimum_effective_volume(3) == 2
