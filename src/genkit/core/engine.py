"""
Genetic Algorithm Engine for Genkit.

This module implements the generational reproduction step (select, mate,
mutate until the child count matches the parent count) and the engine that
drives score/evolve cycles for callers who do not want to write the loop
themselves.
"""

import logging
import multiprocessing
import random
from concurrent.futures import Executor, ThreadPoolExecutor
from datetime import datetime
from typing import Callable, List, Optional

import logfire
import numpy as np

from genkit.core.config import Config, EngineConfig, EvalType
from genkit.core.exceptions import ConfigurationError
from genkit.core.gene import Gene
from genkit.core.operators import mate, maybe_mutate
from genkit.core.population import Population, random_population
from genkit.core.scoring import score
from genkit.core.selection import pick_parent


def evolve(
    config: Config,
    population: Population,
    mutation_rate: float,
    rng: Optional[random.Random] = None,
    *,
    max_rejections: Optional[int] = None,
    normalize: bool = False,
    executor: Optional[Executor] = None,
    chunk_size: int = 10
) -> Population:
    """
    Produce the next generation from a scored population.

    Each child is ``maybe_mutate(mate(pick_parent(), pick_parent()))`` with two
    independent parent draws; self-mating is allowed. The result has the same
    size and ``generation + 1``; its metadata is stale until the next score pass.

    When an executor is given, children are built in chunks, each chunk with
    its own random stream spawned from ``rng`` so no generator is shared
    between workers.
    """
    if not 0.0 <= mutation_rate <= 1.0:
        raise ConfigurationError(f"Mutation rate must be in [0, 1], got {mutation_rate}")
    if not population.elements:
        raise ConfigurationError("Cannot evolve an empty population")

    rng = rng or random
    size = len(population.elements)

    with logfire.span("Evolve Population", size=size, generation=population.generation):
        if executor is None:
            children = _make_children(
                config, population, mutation_rate, size, rng, max_rejections, normalize
            )
        else:
            counts = [min(chunk_size, size - start) for start in range(0, size, chunk_size)]
            streams = _spawn_streams(rng, len(counts))

            futures = [
                executor.submit(
                    _make_children, config, population, mutation_rate,
                    count, stream, max_rejections, normalize
                )
                for count, stream in zip(counts, streams)
            ]

            children = []
            for future in futures:
                children.extend(future.result())

    return Population(elements=tuple(children), generation=population.generation + 1)


def _make_children(
    config: Config,
    population: Population,
    mutation_rate: float,
    count: int,
    rng: random.Random,
    max_rejections: Optional[int],
    normalize: bool
) -> List[Gene]:
    children: List[Gene] = []
    while len(children) < count:
        parent1 = pick_parent(population, rng, max_rejections, normalize)
        parent2 = pick_parent(population, rng, max_rejections, normalize)
        child = maybe_mutate(config, mate(config, parent1, parent2), mutation_rate, rng)
        children.append(child)
    return children


def _spawn_streams(rng: random.Random, count: int) -> List[random.Random]:
    """Derive ``count`` independent generators from ``rng``."""
    seed_sequence = np.random.SeedSequence(rng.getrandbits(128))
    return [
        random.Random(int(child.generate_state(1, dtype=np.uint64)[0]))
        for child in seed_sequence.spawn(count)
    ]


class GeneticAlgorithmEngine:
    """
    Drives repeated score/evolve cycles.

    The engine owns a seeded random stream and, when parallelisation is
    enabled, a thread pool used for both evaluation and child construction.
    It has no convergence criteria of its own: a run stops after the
    configured number of generations or when the caller's predicate says so.

    Use it as a context manager (``with GeneticAlgorithmEngine(...) as engine``)
    or call ``shutdown()`` so the worker pool is released after a run.
    """

    def __init__(
        self,
        config: Config,
        engine_config: Optional[EngineConfig] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize the genetic algorithm engine.

        Args:
            config: Strategy bundle (alphabet, mode, evaluate/mutate/mate)
            engine_config: Run parameters; defaults when omitted
            logger: Optional logger instance
        """
        self.config = config
        self.engine_config = engine_config or EngineConfig()
        self.logger = logger or self._setup_logger()

        # Seed module-level generators too; stock strategies draw from them
        if self.engine_config.random_seed is not None:
            random.seed(self.engine_config.random_seed)
            np.random.seed(self.engine_config.random_seed)

        self.rng = random.Random(self.engine_config.random_seed)

        # State tracking
        self.current_population: Optional[Population] = None
        self.best_gene: Optional[Gene] = None
        self.start_time: Optional[datetime] = None
        self.total_evaluations = 0

        self.executor: Optional[ThreadPoolExecutor] = None
        parallel = self.engine_config.parallelization
        if parallel.enable_parallel:
            num_workers = parallel.num_workers or multiprocessing.cpu_count()
            self.executor = ThreadPoolExecutor(max_workers=num_workers)

    def _setup_logger(self) -> logging.Logger:
        """Setup default logger."""
        logger = logging.getLogger("genkit.engine")
        # Without an explicit level the logger inherits from "genkit"
        log_level = self.engine_config.logging.log_level
        if log_level is not None:
            logger.setLevel(getattr(logging, log_level))

        if not logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )
            handler.setFormatter(formatter)
            logger.addHandler(handler)

        return logger

    def __enter__(self) -> "GeneticAlgorithmEngine":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown()

    def shutdown(self) -> None:
        """Release the worker pool, if any."""
        if self.executor:
            self.executor.shutdown(wait=True)
            self.executor = None

    def initialize(self) -> Population:
        """Create a random generation-0 population from the run parameters."""
        params = self.engine_config.evolution
        population = random_population(
            self.config, params.gene_length, params.population_size, self.rng
        )
        self.current_population = population
        self.logger.info(f"Initialized population with {len(population)} genes")
        return population

    async def score_population(self, population: Population) -> Population:
        """Score a population on the engine's worker pool."""
        scored = score(
            self.config,
            population,
            executor=self.executor,
            chunk_size=self.engine_config.parallelization.chunk_size
        )
        self.total_evaluations += len(scored)
        self.current_population = scored

        best = scored.best
        if best is not None and self._improves_on_best(best):
            self.best_gene = best

        return scored

    def _improves_on_best(self, gene: Gene) -> bool:
        """Compare raw objectives; scores are relative to their own generation."""
        if self.best_gene is None:
            return True
        if self.config.eval_type is EvalType.COST:
            return gene.cost < self.best_gene.cost
        return gene.fitness > self.best_gene.fitness

    async def next_generation(self, population: Population) -> Population:
        """Build the next (unscored) generation from a scored population."""
        selection = self.engine_config.selection
        child_population = evolve(
            self.config,
            population,
            self.engine_config.evolution.mutation_rate,
            self.rng,
            max_rejections=selection.max_rejections,
            normalize=selection.normalize_fitness,
            executor=self.executor,
            chunk_size=self.engine_config.parallelization.chunk_size
        )
        self.current_population = child_population
        return child_population

    async def run(
        self,
        population: Optional[Population] = None,
        until: Optional[Callable[[Population], bool]] = None
    ) -> Population:
        """
        Run score/evolve cycles and return the last scored population.

        Args:
            population: Starting population; a random one when omitted
            until: Caller's stopping condition, checked on every scored
                population

        Returns:
            Final scored population
        """
        params = self.engine_config.evolution

        with logfire.span("GA Evolution",
                          population_size=params.population_size,
                          generations=params.generations):
            self.start_time = datetime.now()
            self.logger.info(f"Starting evolution with mode {self.config.eval_type.value}")

            if population is None:
                population = self.initialize()

            scored = population
            for index in range(params.generations):
                scored = await self.score_population(population)

                if index % self.engine_config.logging.log_interval == 0:
                    self._log_progress(scored)

                if until is not None and until(scored):
                    self.logger.info(f"Stopping condition met at generation {scored.generation}")
                    break

                if index < params.generations - 1:
                    population = await self.next_generation(scored)

            elapsed_time = datetime.now() - self.start_time
            self.logger.info(f"Evolution completed in {elapsed_time}")

            return scored

    def _log_progress(self, population: Population) -> None:
        """Log evolution progress."""
        stats = population.statistics()
        diversity = population.diversity()

        self.logger.info(
            f"Generation {population.generation}: "
            f"Best: {stats.get('best_score', 0):.4f}, "
            f"Avg: {stats.get('avg_score', 0):.4f}, "
            f"Diversity: {diversity:.2f}"
        )

        logfire.info(
            "Evolution Progress",
            evolution_generation=population.generation,
            total_evaluations=self.total_evaluations,
            diversity=diversity,
            **{k: v for k, v in stats.items() if k != "generation"}
        )
