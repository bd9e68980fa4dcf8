"""
Fitness-proportionate parent selection by rejection sampling.

A uniformly drawn candidate is accepted with probability equal to its own
score, so over many draws selection frequency is proportional to score
without building a cumulative distribution. This requires scores in
[0, 1]; cost mode guarantees that, fitness mode leaves it to the caller
unless ``normalize`` is requested.
"""

from typing import Optional
import logging
import random

from genkit.core.gene import Gene
from genkit.core.population import Population

logger = logging.getLogger("genkit.selection")


def pick_parent(
    population: Population,
    rng: Optional[random.Random] = None,
    max_rejections: Optional[int] = None,
    normalize: bool = False
) -> Gene:
    """
    Pick one parent, favouring higher scores.

    The population must already be scored.

    Args:
        population: Scored population to draw from
        rng: Random source (module-level ``random`` when omitted)
        max_rejections: Rejected draws after which a uniform pick is returned.
            None keeps drawing until a candidate is accepted.
        normalize: Compare min/max normalised scores against the uniform draw
            instead of raw scores. Stored scores are not changed.

    Returns:
        A member of ``population.elements``
    """
    rng = rng or random
    elements = population.elements

    min_score = min(gene.score for gene in elements)
    max_score = max(gene.score for gene in elements)

    candidate = rng.choice(elements)
    if min_score == max_score:
        return candidate

    score_range = max_score - min_score
    rejections = 0

    # Accept-reject mechanism
    while True:
        acceptance = candidate.score
        if normalize:
            acceptance = (candidate.score - min_score) / score_range
        if acceptance > rng.random():
            return candidate

        rejections += 1
        if max_rejections is not None and rejections >= max_rejections:
            logger.warning(
                f"No parent accepted after {rejections} draws, falling back to uniform pick"
            )
            return rng.choice(elements)

        candidate = rng.choice(elements)
