
from dataclasses import dataclass
from typing import Tuple

@dataclass(frozen=True)
class AbilityRoll:
    dice: Tuple[int, ...]
    dropped: Tuple[int, ...]
    total: int

@dataclass(frozen=True)
class FaceCount:
    face: int
    count: int
    frequency: float
    deviation: float
