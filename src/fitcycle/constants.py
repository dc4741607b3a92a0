"""Static lookup tables for goals, lifestyle factors and muscle groups.

Built once at import and exposed read-only.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class GoalInfo:
    label: str
    description: str
    rep_range: str
    rest_minutes: str
    volume_mod: float


@dataclass(frozen=True)
class FactorOption:
    label: str
    value: float
    description: str = ""


@dataclass(frozen=True)
class MuscleGroupInfo:
    label: str
    color: str
    bg: str
    text: str


GOALS: Mapping[str, GoalInfo] = MappingProxyType({
    "hypertrophy": GoalInfo(
        label="Aesthetics and hypertrophy",
        description="Maximum muscle size and proportions.",
        rep_range="8-12",
        rest_minutes="1.5-2",
        volume_mod=1.0,
    ),
    "strength": GoalInfo(
        label="Absolute strength",
        description="Lifting maximal weights. Neural efficiency.",
        rep_range="3-5",
        rest_minutes="3-5",
        volume_mod=0.7,
    ),
    "endurance": GoalInfo(
        label="Endurance and definition",
        description="Function, tone, calorie burn and fat loss.",
        rep_range="15-20",
        rest_minutes="0.5-1",
        volume_mod=1.2,
    ),
})

STRESS_LEVELS: Mapping[str, FactorOption] = MappingProxyType({
    "low": FactorOption("Low", 1.1, "Life is calm, plenty of energy."),
    "moderate": FactorOption("Moderate", 1.0, "Normal rhythm, the odd deadline."),
    "high": FactorOption("High", 0.85, "Lots of work, nerves or missed sleep."),
})

CALORIE_OPTIONS: Mapping[str, FactorOption] = MappingProxyType({
    "surplus": FactorOption("Surplus (bulk)", 1.1),
    "maintenance": FactorOption("Maintenance (recomp)", 1.0),
    "deficit": FactorOption("Deficit (cut)", 0.85),
})

MUSCLE_GROUPS: Mapping[str, MuscleGroupInfo] = MappingProxyType({
    "legs": MuscleGroupInfo("Legs", "#34C759", "#E8F5E9", "#1B5E20"),
    "back": MuscleGroupInfo("Back", "#007AFF", "#E3F2FD", "#0D47A1"),
    "chest": MuscleGroupInfo("Chest", "#FF2D55", "#FFEBEE", "#B71C1C"),
    "shoulders": MuscleGroupInfo("Shoulders", "#FF9500", "#FFF3E0", "#E65100"),
    "arms": MuscleGroupInfo("Arms", "#AF52DE", "#F3E5F5", "#4A148C"),
    "abs": MuscleGroupInfo("Core", "#8E8E93", "#F5F5F5", "#424242"),
    "cardio": MuscleGroupInfo("Cardio", "#FF3B30", "#FFEBEE", "#C62828"),
})

# Groups that receive a set-based weekly target, in display order
VOLUME_MUSCLE_GROUPS: tuple[str, ...] = tuple(m for m in MUSCLE_GROUPS if m != "cardio")

# Gender-specific share of the adjusted base volume per muscle group
MUSCLE_BIAS_FACTORS: Mapping[str, Mapping[str, float]] = MappingProxyType({
    "male": MappingProxyType({
        "legs": 1.0, "back": 1.0, "chest": 1.0,
        "shoulders": 0.8, "arms": 0.6, "abs": 0.5,
    }),
    "female": MappingProxyType({
        "legs": 1.3, "back": 0.9, "chest": 0.5,
        "shoulders": 0.7, "arms": 0.5, "abs": 0.6,
    }),
})

MAX_PRIORITY_MUSCLES = 2
DEFAULT_CYCLE_LENGTH = 28
