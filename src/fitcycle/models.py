"""Profile, workout and program data models.

Stored records (profiles, workouts, body logs) are pydantic contracts so they
are validated once at the boundary. Computed outputs are frozen dataclasses
that are rebuilt on every call and never persisted.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from fitcycle.constants import DEFAULT_CYCLE_LENGTH, MAX_PRIORITY_MUSCLES, VOLUME_MUSCLE_GROUPS


class ProfileLoadError(ValueError):
    """A profile record could not be read or failed validation."""


class _Record(BaseModel):
    # Persistence emits camelCase JSON; Python callers use snake_case.
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CycleData(_Record):
    last_period: date
    length: int = Field(default=DEFAULT_CYCLE_LENGTH, ge=1)


class UserProfile(_Record):
    id: str | None = None
    gender: Literal["male", "female"]
    age: int = Field(ge=10, le=100)
    height: float = Field(ge=100, le=250)
    weight: float = Field(ge=30, le=300)
    fat: float | None = None
    experience_years: float = Field(ge=0, le=50)
    sleep: float = Field(default=7, ge=4, le=12)
    stress: Literal["low", "moderate", "high"] = "moderate"
    calories: Literal["surplus", "maintenance", "deficit"] = "maintenance"
    goal: Literal["hypertrophy", "strength", "endurance"] = "hypertrophy"
    training_days: int = Field(default=3, ge=1, le=7)
    priority_muscles: list[str] = Field(default_factory=list)
    cycle: CycleData | None = None

    @field_validator("priority_muscles")
    @classmethod
    def validate_priority_muscles(cls, value: list[str]) -> list[str]:
        normalized: list[str] = []
        for muscle in value:
            key = muscle.strip().lower()
            if key not in VOLUME_MUSCLE_GROUPS:
                allowed = ", ".join(VOLUME_MUSCLE_GROUPS)
                raise ValueError(f"priority muscle must be one of: {allowed}")
            if key not in normalized:
                normalized.append(key)
        if len(normalized) > MAX_PRIORITY_MUSCLES:
            raise ValueError(f"at most {MAX_PRIORITY_MUSCLES} priority muscles allowed")
        return normalized


class SetData(_Record):
    weight: float = Field(default=0, ge=0)
    reps: int = Field(default=0, ge=0)


class WorkoutExercise(_Record):
    id: str
    name: str
    muscle: str
    sets: list[SetData] = Field(default_factory=list)


class Workout(_Record):
    id: str
    date: int  # epoch milliseconds
    exercises: list[WorkoutExercise] = Field(default_factory=list)


class BodyLog(_Record):
    id: str
    date: int  # epoch milliseconds
    weight: float
    fat: float | None = None


def load_profile(path: str | Path) -> UserProfile:
    """Read a profile record from a JSON file.

    Raises ProfileLoadError when the file is unreadable, not JSON, or the
    record fails validation.
    """
    path = Path(path)
    try:
        with path.open() as f:
            data = json.load(f)
    except OSError as exc:
        raise ProfileLoadError(f"cannot read profile {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ProfileLoadError(f"profile {path} is not valid JSON: {exc}") from exc

    try:
        return UserProfile.model_validate(data)
    except ValidationError as exc:
        raise ProfileLoadError(f"profile {path} is invalid: {exc}") from exc


# --- Computed outputs ---


@dataclass(frozen=True)
class TrainingParams:
    rep_range: str
    rest_minutes: str
    goal_description: str


@dataclass(frozen=True)
class ProgramMeta:
    standard_sets: int
    recovery_multiplier: float
    total_weekly_sets: int


@dataclass(frozen=True)
class CalculatedProgram:
    weekly_volume: dict[str, int]
    per_day: dict[str, Decimal]
    training_params: TrainingParams
    meta: ProgramMeta

    def to_dict(self) -> dict[str, Any]:
        """Dashboard JSON shape (camelCase keys, per-day values as strings)."""
        return {
            "weeklyVolume": dict(self.weekly_volume),
            "perDay": {muscle: str(value) for muscle, value in self.per_day.items()},
            "trainingParams": {
                "repRange": self.training_params.rep_range,
                "restMinutes": self.training_params.rest_minutes,
                "goalDescription": self.training_params.goal_description,
            },
            "meta": {
                "standardSets": self.meta.standard_sets,
                "recoveryMultiplier": self.meta.recovery_multiplier,
                "totalWeeklySets": self.meta.total_weekly_sets,
            },
        }


@dataclass(frozen=True)
class PhaseGuidance:
    sleep: str
    strain: str
    stress: str


@dataclass(frozen=True)
class CyclePhase:
    id: str
    name: str
    color: str
    bg: str
    description: str
    recommendation: str
    guidance: PhaseGuidance
    day: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "color": self.color,
            "bg": self.bg,
            "desc": self.description,
            "rec": self.recommendation,
            "guidance": {
                "sleep": self.guidance.sleep,
                "strain": self.guidance.strain,
                "stress": self.guidance.stress,
            },
            "day": self.day,
        }


@dataclass(frozen=True)
class VolumeProgress:
    actual: int
    target: int
    percent: float  # capped at 120
    status: str  # under, on_track, over
    below_minimum: bool


@dataclass(frozen=True)
class MuscleStats:
    sets: int = 0
    exercises: int = 0


@dataclass(frozen=True)
class TopLift:
    name: str
    max_weight: float


@dataclass
class ExerciseBreakdown:
    exercise_id: str
    name: str
    sets: int = 0
    total_weight: float = 0.0


@dataclass(frozen=True)
class BodyTrend:
    points: list[BodyLog]  # oldest first
    weight_change: float | None  # last minus first, kg
    fat_change: float | None  # over logs that recorded fat, percentage points
    has_fat_data: bool
