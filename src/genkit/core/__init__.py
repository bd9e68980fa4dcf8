"""
Genkit Core Module - Genetic Algorithm Components.

This module contains the core components of the genkit framework: the
strategy configuration, gene and population representation, scoring,
parent selection, reproduction operators and the evolution engine.
"""

from genkit.core.config import (
    Config,
    EvalType,
    EngineConfig,
    EvolutionParameters,
    SelectionConfig,
    ParallelizationConfig,
    LoggingConfig,
    create_default_config,
    create_test_config
)

from genkit.core.exceptions import (
    GenkitError,
    ConfigurationError,
    StrategyContractError
)

from genkit.core.gene import (
    Gene,
    random_gene
)

from genkit.core.population import (
    Population,
    random_population
)

from genkit.core.scoring import score
from genkit.core.selection import pick_parent
from genkit.core.operators import maybe_mutate, mate

from genkit.core.engine import (
    evolve,
    GeneticAlgorithmEngine
)

__all__ = [
    # Configuration
    "Config",
    "EvalType",
    "EngineConfig",
    "EvolutionParameters",
    "SelectionConfig",
    "ParallelizationConfig",
    "LoggingConfig",
    "create_default_config",
    "create_test_config",

    # Errors
    "GenkitError",
    "ConfigurationError",
    "StrategyContractError",

    # Representation
    "Gene",
    "random_gene",
    "Population",
    "random_population",

    # Scoring and reproduction
    "score",
    "pick_parent",
    "maybe_mutate",
    "mate",
    "evolve",

    # Engine
    "GeneticAlgorithmEngine"
]
