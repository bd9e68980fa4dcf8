"""
Genkit - a generic genetic algorithm engine.

Callers supply the alphabet, an evaluation function and mutation/crossover
strategies; genkit supplies random initialisation, normalised scoring,
fitness-proportionate parent selection and generational replacement.
"""

from genkit.core import (
    Config,
    EvalType,
    EngineConfig,
    EvolutionParameters,
    SelectionConfig,
    ParallelizationConfig,
    LoggingConfig,
    create_default_config,
    create_test_config,
    GenkitError,
    ConfigurationError,
    StrategyContractError,
    Gene,
    random_gene,
    Population,
    random_population,
    score,
    pick_parent,
    maybe_mutate,
    mate,
    evolve,
    GeneticAlgorithmEngine
)

__version__ = "1.0.0"

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
    # Operations
    "score",
    "pick_parent",
    "maybe_mutate",
    "mate",
    "evolve",
    # Engine
    "GeneticAlgorithmEngine"
]
