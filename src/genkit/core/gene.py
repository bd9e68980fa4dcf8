"""
Gene Representation for Genkit.

A gene is one candidate solution: a fixed-length sequence of alphabet
symbols plus the evaluation metadata filled in by scoring.
"""

from dataclasses import dataclass, replace
from typing import Any, Dict, Optional, Sequence, Tuple
import random

from genkit.core.config import Config
from genkit.core.exceptions import ConfigurationError


@dataclass(frozen=True)
class Gene:
    """
    Immutable candidate solution.

    ``cost`` is set only in cost mode and ``fitness`` only in fitness mode.
    ``score`` is the normalised, higher-is-better value used for selection.
    A freshly generated gene has all three unset.
    """

    code: Tuple[Any, ...]
    cost: Optional[float] = None
    fitness: Optional[float] = None
    score: Optional[float] = None

    def __post_init__(self):
        if not isinstance(self.code, tuple):
            object.__setattr__(self, "code", tuple(self.code))

    def __len__(self) -> int:
        return len(self.code)

    @property
    def scored(self) -> bool:
        """Whether a score pass has populated this gene."""
        return self.score is not None

    def with_code(self, code: Sequence[Any]) -> "Gene":
        """Return a copy with a new code and the same (now stale) metadata."""
        return replace(self, code=tuple(code))

    def cleared(self) -> "Gene":
        """Return a copy with cost, fitness and score unset."""
        return Gene(code=self.code)

    def to_dict(self) -> Dict[str, Any]:
        """Convert gene to dictionary representation."""
        return {
            "code": list(self.code),
            "cost": self.cost,
            "fitness": self.fitness,
            "score": self.score
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Gene":
        """Create gene from dictionary representation."""
        return cls(
            code=tuple(data["code"]),
            cost=data.get("cost"),
            fitness=data.get("fitness"),
            score=data.get("score")
        )


def random_gene(config: Config, length: int, rng: Optional[random.Random] = None) -> Gene:
    """Draw ``length`` symbols uniformly, with replacement, from the alphabet."""
    if length < 1:
        raise ConfigurationError(f"Gene length must be >= 1, got {length}")
    if not config.dna_codes:
        raise ConfigurationError("Alphabet (dna_codes) must not be empty")

    rng = rng or random
    return Gene(code=tuple(rng.choices(config.dna_codes, k=length)))
