"""Ability score rolls (4d6 drop lowest) driven by a seeded MT19937 engine."""

from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional

from .models import AbilityRoll, FaceCount
from .twister import MersenneTwister


@dataclass
class AbilityConfig:
    """Configuration for one batch of ability scores."""

    seed: Optional[int] = None  # None: seed from the wall clock
    scores: int = 6
    dice_per_score: int = 4
    faces: int = 6
    drop_lowest: int = 1

    def validate(self) -> None:
        if self.scores < 1:
            raise ValueError(f"scores must be at least 1, got {self.scores}")
        if self.dice_per_score < 1:
            raise ValueError(
                f"dice_per_score must be at least 1, got {self.dice_per_score}"
            )
        if not 0 <= self.drop_lowest < self.dice_per_score:
            raise ValueError(
                "drop_lowest must be between 0 and dice_per_score - 1, "
                f"got {self.drop_lowest}"
            )
        if self.faces <= 1:
            raise ValueError(f"faces must be greater than one, got {self.faces}")


def roll_ability(rng: MersenneTwister, cfg: AbilityConfig) -> AbilityRoll:
    """Roll one score: draw the dice, drop the lowest, sum the rest."""

    dice = tuple(rng.next_int(cfg.faces) for _ in range(cfg.dice_per_score))
    ordered = sorted(dice)
    dropped = tuple(ordered[: cfg.drop_lowest])
    kept = ordered[cfg.drop_lowest :]
    return AbilityRoll(dice=dice, dropped=dropped, total=sum(kept))


def _roll_all(cfg: AbilityConfig, rng: MersenneTwister) -> List[AbilityRoll]:
    cfg.validate()
    return [roll_ability(rng, cfg) for _ in range(cfg.scores)]


def roll_ability_scores(
    cfg: AbilityConfig, rng: Optional[MersenneTwister] = None
) -> List[int]:
    """Return the score totals in draw order.

    A fresh engine is built from ``cfg.seed`` unless one is passed in; engines
    are never shared between calls.
    """

    if rng is None:
        rng = MersenneTwister(cfg.seed)
    return [roll.total for roll in _roll_all(cfg, rng)]


def roll_ability_report(cfg: AbilityConfig) -> Dict[str, Any]:
    """Roll a batch and keep the per-die detail alongside the totals."""

    rng = MersenneTwister(cfg.seed)
    rolls = _roll_all(cfg, rng)
    return {
        "config": asdict(cfg),
        "seed": rng.seed,
        "scores": [roll.total for roll in rolls],
        "rolls": [asdict(roll) for roll in rolls],
    }


def face_histogram(rng: MersenneTwister, faces: int, draws: int) -> List[FaceCount]:
    """Count ``draws`` faces of a ``faces``-sided die and compare against uniform."""

    if draws < 1:
        raise ValueError(f"draws must be positive, got {draws}")

    counts = [0] * faces
    for _ in range(draws):
        counts[rng.next_int(faces) - 1] += 1

    expected = 1.0 / faces
    table: List[FaceCount] = []
    for face, count in enumerate(counts, start=1):
        frequency = count / draws
        table.append(
            FaceCount(
                face=face,
                count=count,
                frequency=round(frequency, 6),
                deviation=round(frequency - expected, 6),
            )
        )
    return table


if __name__ == "__main__":
    import json

    print(json.dumps(roll_ability_scores(AbilityConfig()), indent=2))
