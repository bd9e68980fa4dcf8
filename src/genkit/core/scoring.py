"""
Scoring for Genkit populations.

Turns raw evaluation output into a comparable score in one of two modes:

- cost mode: lower raw values are better; costs are min/max normalised so
  the cheapest gene scores 1.0 and the most expensive 0.0.
- fitness mode: higher raw values are better and are used as the score
  unchanged.

Evaluation of individual genes is independent, so it may run on a worker
pool. All results are joined before the population-wide min/max is taken.
"""

from concurrent.futures import Executor
from typing import List, Optional, Sequence

import logfire

from genkit.core.config import Config, EvalType
from genkit.core.exceptions import ConfigurationError
from genkit.core.gene import Gene
from genkit.core.population import Population


def score(
    config: Config,
    population: Population,
    executor: Optional[Executor] = None,
    chunk_size: int = 10
) -> Population:
    """
    Evaluate and score every gene, returning a new population.

    Args:
        config: Strategy bundle holding the evaluation mode and function
        population: Population to score; left unchanged
        executor: Optional worker pool for concurrent evaluation
        chunk_size: Genes per submitted task when an executor is given

    Returns:
        New population with the same generation and scored genes

    Raises:
        ConfigurationError: Unknown evaluation mode or empty population.
        Any exception raised by ``config.eval_fn`` propagates unchanged.
    """
    if config.eval_type not in (EvalType.COST, EvalType.FITNESS):
        raise ConfigurationError(f"Unexpected eval_type: {config.eval_type!r}")
    if not population.elements:
        raise ConfigurationError("Cannot score an empty population")

    with logfire.span("Score Population",
                      size=len(population.elements),
                      generation=population.generation,
                      mode=config.eval_type.value):
        values = _evaluate(config, population.elements, executor, chunk_size)

        if config.eval_type is EvalType.COST:
            elements = _score_by_cost(population.elements, values)
        else:
            elements = _score_by_fitness(population.elements, values)

    return Population(elements=tuple(elements), generation=population.generation)


def _score_by_cost(genes: Sequence[Gene], costs: List[float]) -> List[Gene]:
    min_cost = min(costs)
    max_cost = max(costs)
    # All genes tie: every score becomes 1.0
    cost_range = (max_cost - min_cost) or 1

    return [
        Gene(code=gene.code, cost=cost, score=1.0 - (cost - min_cost) / cost_range)
        for gene, cost in zip(genes, costs)
    ]


def _score_by_fitness(genes: Sequence[Gene], fitnesses: List[float]) -> List[Gene]:
    return [
        Gene(code=gene.code, fitness=fitness, score=fitness)
        for gene, fitness in zip(genes, fitnesses)
    ]


def _evaluate(
    config: Config,
    genes: Sequence[Gene],
    executor: Optional[Executor],
    chunk_size: int
) -> List[float]:
    """Run the evaluation function over all genes, preserving order."""
    if executor is None:
        return [config.eval_fn(gene.code) for gene in genes]

    chunks = [genes[i:i + chunk_size] for i in range(0, len(genes), chunk_size)]
    futures = [executor.submit(_evaluate_chunk, config, chunk) for chunk in chunks]

    # Wait for every chunk; result() re-raises a strategy error as-is
    values: List[float] = []
    for future in futures:
        values.extend(future.result())
    return values


def _evaluate_chunk(config: Config, genes: Sequence[Gene]) -> List[float]:
    """Evaluate a chunk of genes (for parallel processing)."""
    return [config.eval_fn(gene.code) for gene in genes]
