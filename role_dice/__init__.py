"""Public package surface for the seeded ability score roller."""

from .abilities import (
    AbilityConfig,
    face_histogram,
    roll_ability,
    roll_ability_report,
    roll_ability_scores,
)
from .models import AbilityRoll, FaceCount
from .twister import InvalidArgument, MersenneTwister

__all__ = [
    "AbilityConfig",
    "AbilityRoll",
    "FaceCount",
    "InvalidArgument",
    "MersenneTwister",
    "face_histogram",
    "roll_ability",
    "roll_ability_report",
    "roll_ability_scores",
]
