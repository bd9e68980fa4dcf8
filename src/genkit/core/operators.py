"""
Mutation and crossover wrappers around the caller's strategies.

Both return new genes; the inputs are never modified.
"""

from typing import Optional
import random

from genkit.core.config import Config
from genkit.core.exceptions import StrategyContractError
from genkit.core.gene import Gene


def maybe_mutate(
    config: Config,
    gene: Gene,
    chance: float,
    rng: Optional[random.Random] = None
) -> Gene:
    """
    Mutate one random position with probability ``chance``.

    A mutated gene has its cost, fitness and score cleared. An unmutated gene
    is returned as is, metadata included, until the next score pass.
    """
    rng = rng or random
    if rng.random() >= chance:
        return gene

    index = rng.randrange(len(gene.code))
    code = list(gene.code)
    code[index] = config.mutate(code[index], config.dna_codes)
    return Gene(code=tuple(code))


def mate(config: Config, gene1: Gene, gene2: Gene) -> Gene:
    """Cross two genes with the caller's strategy; metadata comes from ``gene1``."""
    code = tuple(config.mate(gene1.code, gene2.code))
    if len(code) != len(gene1.code):
        raise StrategyContractError(
            f"mate returned a code of length {len(code)}, expected {len(gene1.code)}"
        )
    return gene1.with_code(code)
