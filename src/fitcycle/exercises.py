"""Exercise catalog: canonical exercises and the muscle group they load."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Literal, Mapping

from fitcycle.constants import MUSCLE_GROUPS


@dataclass(frozen=True)
class Exercise:
    exercise_id: str
    name: str
    muscle: str
    kind: Literal["compound", "isolation"]


# (exercise_id, name, muscle, kind)
_CATALOG: tuple[tuple[str, str, str, str], ...] = (
    # chest
    ("bp_bb_flat", "Barbell bench press", "chest", "compound"),
    ("bp_bb_inc", "Incline barbell bench press", "chest", "compound"),
    ("bp_db_flat", "Dumbbell bench press", "chest", "compound"),
    ("bp_db_inc", "Incline dumbbell press", "chest", "compound"),
    ("fly_pec_deck", "Pec deck fly", "chest", "isolation"),
    ("cross_mid", "Cable crossover", "chest", "isolation"),
    ("dips_chest", "Chest dips", "chest", "compound"),
    ("pushup_std", "Push-up", "chest", "compound"),
    # back
    ("dl_classic", "Conventional deadlift", "back", "compound"),
    ("pullup_wide", "Wide-grip pull-up", "back", "compound"),
    ("chinup", "Chin-up", "back", "compound"),
    ("lat_pull_wide", "Wide-grip lat pulldown", "back", "isolation"),
    ("row_bb_bent", "Barbell bent-over row", "back", "compound"),
    ("row_db_one", "One-arm dumbbell row", "back", "compound"),
    ("row_cable_sit", "Seated cable row", "back", "isolation"),
    ("face_pull", "Face pull", "back", "isolation"),
    ("hyperext", "Back extension", "back", "isolation"),
    # legs
    ("sq_bb_back", "Barbell back squat", "legs", "compound"),
    ("sq_bb_front", "Front squat", "legs", "compound"),
    ("lp_45", "Leg press", "legs", "compound"),
    ("split_sq_bulg", "Bulgarian split squat", "legs", "compound"),
    ("rdl_bb", "Romanian deadlift", "legs", "compound"),
    ("leg_ext", "Leg extension", "legs", "isolation"),
    ("leg_curl_lie", "Lying leg curl", "legs", "isolation"),
    ("calf_stand", "Standing calf raise", "legs", "isolation"),
    ("hip_thrust", "Barbell hip thrust", "legs", "compound"),
    # shoulders
    ("ohp_bb", "Standing overhead press", "shoulders", "compound"),
    ("ohp_db", "Seated dumbbell press", "shoulders", "compound"),
    ("lat_raise_db", "Dumbbell lateral raise", "shoulders", "isolation"),
    ("rear_fly_db", "Bent-over rear delt fly", "shoulders", "isolation"),
    # arms
    ("bic_bb_stand", "Barbell curl", "arms", "isolation"),
    ("bic_hammer", "Hammer curl", "arms", "isolation"),
    ("tri_close_press", "Close-grip bench press", "arms", "compound"),
    ("tri_pushdown", "Rope triceps pushdown", "arms", "isolation"),
    ("tri_skull", "Lying triceps extension", "arms", "isolation"),
    # abs
    ("crunch", "Crunch", "abs", "isolation"),
    ("plank", "Plank", "abs", "isolation"),
    ("leg_raise_hang", "Hanging leg raise", "abs", "isolation"),
    ("ab_wheel", "Ab wheel rollout", "abs", "isolation"),
    # cardio
    ("run_outdoor", "Outdoor run", "cardio", "isolation"),
    ("bike_stationary", "Stationary bike", "cardio", "isolation"),
    ("rowing_machine", "Rowing machine", "cardio", "isolation"),
    ("jump_rope", "Jump rope", "cardio", "isolation"),
)

EXERCISES: Mapping[str, Exercise] = MappingProxyType({
    ex_id: Exercise(exercise_id=ex_id, name=name, muscle=muscle, kind=kind)
    for ex_id, name, muscle, kind in _CATALOG
})


def get_exercise(exercise_id: str) -> Exercise:
    """Look up an exercise by id. Raises KeyError if unknown."""
    return EXERCISES[exercise_id]


def exercises_for_muscle(muscle: str) -> list[Exercise]:
    """Catalog exercises for a muscle group, in catalog order."""
    if muscle not in MUSCLE_GROUPS:
        raise KeyError(muscle)
    return [ex for ex in EXERCISES.values() if ex.muscle == muscle]
