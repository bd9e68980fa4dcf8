"""
Population Management for Genkit.

A population is an immutable snapshot of one generation. Scoring and
evolution never modify a population; they build a new one.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple
import random
import statistics

from genkit.core.config import Config
from genkit.core.exceptions import ConfigurationError
from genkit.core.gene import Gene, random_gene


@dataclass(frozen=True)
class Population:
    """
    One generation of genes.

    ``elements`` keeps insertion order so seeded runs are reproducible.
    ``generation`` starts at 0 and grows by exactly one per evolution step.
    """

    elements: Tuple[Gene, ...]
    generation: int = 0

    def __post_init__(self):
        if not isinstance(self.elements, tuple):
            object.__setattr__(self, "elements", tuple(self.elements))

    def __len__(self) -> int:
        return len(self.elements)

    def __iter__(self):
        return iter(self.elements)

    @property
    def scored(self) -> bool:
        """Whether every gene carries a score."""
        return all(gene.scored for gene in self.elements)

    @property
    def best(self) -> Optional[Gene]:
        """Highest-scoring gene, or None if the population is unscored."""
        scored = [gene for gene in self.elements if gene.scored]
        if not scored:
            return None
        return max(scored, key=lambda gene: gene.score)

    def statistics(self) -> Dict[str, Any]:
        """Calculate score statistics for the current generation."""
        scores = [gene.score for gene in self.elements if gene.score is not None]

        stats: Dict[str, Any] = {
            "generation": self.generation,
            "population_size": len(self.elements),
            "scored_count": len(scores)
        }
        if not scores:
            return stats

        stats.update({
            "best_score": max(scores),
            "worst_score": min(scores),
            "avg_score": statistics.mean(scores),
            "score_std": statistics.stdev(scores) if len(scores) > 1 else 0.0
        })

        costs = [gene.cost for gene in self.elements if gene.cost is not None]
        if costs:
            stats["min_cost"] = min(costs)
            stats["max_cost"] = max(costs)

        fitnesses = [gene.fitness for gene in self.elements if gene.fitness is not None]
        if fitnesses:
            stats["max_fitness"] = max(fitnesses)
            stats["min_fitness"] = min(fitnesses)

        return stats

    def diversity(self) -> float:
        """Ratio of distinct codes to population size."""
        if not self.elements:
            return 0.0
        unique = len({gene.code for gene in self.elements})
        return unique / len(self.elements)

    def to_dict(self) -> Dict[str, Any]:
        """Convert population to dictionary representation."""
        return {
            "generation": self.generation,
            "elements": [gene.to_dict() for gene in self.elements]
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Population":
        """Create population from dictionary representation."""
        return cls(
            elements=tuple(Gene.from_dict(item) for item in data["elements"]),
            generation=data.get("generation", 0)
        )


def random_population(
    config: Config,
    length: int,
    size: int,
    rng: Optional[random.Random] = None
) -> Population:
    """Generate ``size`` independent random genes as generation 0."""
    if size < 1:
        raise ConfigurationError(f"Population size must be >= 1, got {size}")
    if length < 1:
        raise ConfigurationError(f"Gene length must be >= 1, got {length}")

    elements: List[Gene] = [random_gene(config, length, rng) for _ in range(size)]
    return Population(elements=tuple(elements), generation=0)
