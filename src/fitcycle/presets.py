"""Pre-built user profiles for quick program previews."""

from __future__ import annotations

from datetime import date

from fitcycle.models import CycleData, UserProfile

BEGINNER = UserProfile(
    gender="male",
    age=24,
    height=178,
    weight=74,
    experience_years=0.5,
    sleep=7,
    stress="moderate",
    calories="surplus",
    goal="hypertrophy",
    training_days=3,
)

INTERMEDIATE_FEMALE = UserProfile(
    gender="female",
    age=31,
    height=167,
    weight=61,
    fat=24,
    experience_years=2,
    sleep=7.5,
    stress="moderate",
    calories="maintenance",
    goal="hypertrophy",
    training_days=4,
    priority_muscles=["legs"],
    cycle=CycleData(last_period=date(2025, 10, 1), length=28),
)

MASTERS_STRENGTH = UserProfile(
    gender="male",
    age=52,
    height=182,
    weight=90,
    experience_years=12,
    sleep=8,
    stress="low",
    calories="maintenance",
    goal="strength",
    training_days=4,
    priority_muscles=["back", "legs"],
)

STRESSED_CUT = UserProfile(
    gender="female",
    age=40,
    height=165,
    weight=68,
    experience_years=2,
    sleep=5,
    stress="high",
    calories="deficit",
    goal="strength",
    training_days=4,
    priority_muscles=["legs"],
)

PRESETS: dict[str, UserProfile] = {
    "beginner": BEGINNER,
    "intermediate-female": INTERMEDIATE_FEMALE,
    "masters-strength": MASTERS_STRENGTH,
    "stressed-cut": STRESSED_CUT,
}
