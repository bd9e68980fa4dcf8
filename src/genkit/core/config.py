"""
Genkit Configuration Module.

This module defines the strategy bundle a caller hands to the engine
(alphabet, evaluation mode and the three plug-in functions) together with
the run parameters controlling population size, mutation, selection,
parallel evaluation and logging.
"""

from enum import Enum
from typing import Any, Callable, Dict, Literal, Optional, Sequence, Tuple
import json
import os

from pydantic import BaseModel, ConfigDict, Field

from genkit.core.exceptions import ConfigurationError


class EvalType(str, Enum):
    """How raw evaluation output is turned into a score."""

    COST = "cost"
    FITNESS = "fitness"


EvalFn = Callable[[Tuple[Any, ...]], float]
MutateFn = Callable[[Any, Tuple[Any, ...]], Any]
MateFn = Callable[[Tuple[Any, ...], Tuple[Any, ...]], Sequence[Any]]


class Config(BaseModel):
    """
    Immutable strategy bundle supplied by the caller.

    The engine treats the three callables as opaque and side-effect free.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    dna_codes: Tuple[Any, ...] = Field(description="Alphabet genes are drawn from")
    eval_type: EvalType = Field(description="Cost minimisation or fitness maximisation")
    eval_fn: EvalFn = Field(description="evaluate(code) -> number")
    mutate: MutateFn = Field(description="mutate(symbol, alphabet) -> symbol")
    mate: MateFn = Field(description="mate(code, code) -> code")

    def __init__(self, **data: Any):
        # Checked before pydantic runs so callers get ConfigurationError,
        # not a ValidationError wrapping it.
        if "dna_codes" in data:
            data["dna_codes"] = tuple(data["dna_codes"])
            if not data["dna_codes"]:
                raise ConfigurationError("Alphabet (dna_codes) must not be empty")

        eval_type = data.get("eval_type")
        if not isinstance(eval_type, EvalType):
            try:
                data["eval_type"] = EvalType(str(eval_type).lower())
            except ValueError:
                raise ConfigurationError(f"Unexpected eval_type: {eval_type!r}") from None

        for name in ("eval_fn", "mutate", "mate"):
            if name in data and not callable(data[name]):
                raise ConfigurationError(f"{name} must be callable")

        super().__init__(**data)


class EvolutionParameters(BaseModel):
    """Parameters controlling the evolution process."""

    model_config = ConfigDict(validate_assignment=True)

    population_size: int = Field(
        default=100,
        ge=1,
        description="Number of genes in every generation"
    )
    gene_length: int = Field(
        default=10,
        ge=1,
        description="Number of symbols in every gene"
    )
    generations: int = Field(
        default=100,
        ge=1,
        description="Maximum number of generations the engine runs"
    )
    mutation_rate: float = Field(
        default=0.05,
        ge=0.0,
        le=1.0,
        description="Probability that a child gets one symbol mutated"
    )


class SelectionConfig(BaseModel):
    """Configuration for fitness-proportionate parent selection."""

    max_rejections: Optional[int] = Field(
        default=None,
        ge=1,
        description="Rejected draws before falling back to a uniform pick (None for no cap)"
    )
    normalize_fitness: bool = Field(
        default=False,
        description="Min/max normalise scores for the acceptance test only"
    )


class ParallelizationConfig(BaseModel):
    """Configuration for parallel evaluation and reproduction."""

    enable_parallel: bool = Field(
        default=False,
        description="Evaluate genes and build children on a worker pool"
    )
    num_workers: Optional[int] = Field(
        default=None,
        ge=1,
        description="Number of parallel workers (None for auto)"
    )
    chunk_size: int = Field(
        default=10,
        ge=1,
        description="Genes per parallel task"
    )


class LoggingConfig(BaseModel):
    """Configuration for engine logging."""

    log_level: Optional[Literal["DEBUG", "INFO", "WARNING", "ERROR"]] = Field(
        default=None,
        description="Engine logger level (None inherits the genkit logger level)"
    )
    log_interval: int = Field(
        default=10,
        ge=1,
        description="Generations between progress lines"
    )


class EngineConfig(BaseModel):
    """Run configuration for GeneticAlgorithmEngine."""

    model_config = ConfigDict(
        validate_assignment=True,
        extra='forbid'
    )

    evolution: EvolutionParameters = Field(
        default_factory=EvolutionParameters,
        description="Evolution parameters"
    )
    selection: SelectionConfig = Field(
        default_factory=SelectionConfig,
        description="Parent selection configuration"
    )
    parallelization: ParallelizationConfig = Field(
        default_factory=ParallelizationConfig,
        description="Parallel processing configuration"
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig,
        description="Logging configuration"
    )

    random_seed: Optional[int] = Field(
        default=None,
        description="Seeds the engine stream and the module-level random and numpy generators"
    )

    @classmethod
    def from_env(cls) -> "EngineConfig":
        """Create configuration from environment variables."""
        config_dict: Dict[str, Any] = {}

        if pop_size := os.getenv("GENKIT_POPULATION_SIZE"):
            config_dict.setdefault("evolution", {})["population_size"] = int(pop_size)
        if gene_length := os.getenv("GENKIT_GENE_LENGTH"):
            config_dict.setdefault("evolution", {})["gene_length"] = int(gene_length)
        if generations := os.getenv("GENKIT_GENERATIONS"):
            config_dict.setdefault("evolution", {})["generations"] = int(generations)
        if mutation_rate := os.getenv("GENKIT_MUTATION_RATE"):
            config_dict.setdefault("evolution", {})["mutation_rate"] = float(mutation_rate)

        if num_workers := os.getenv("GENKIT_NUM_WORKERS"):
            config_dict.setdefault("parallelization", {})["num_workers"] = int(num_workers)
            config_dict["parallelization"]["enable_parallel"] = True

        if random_seed := os.getenv("GENKIT_RANDOM_SEED"):
            config_dict["random_seed"] = int(random_seed)

        return cls(**config_dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return self.model_dump()

    def save(self, filepath: str) -> None:
        """Save configuration to JSON file."""
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load(cls, filepath: str) -> "EngineConfig":
        """Load configuration from JSON file."""
        with open(filepath, 'r') as f:
            data = json.load(f)
        return cls(**data)


# Convenience functions
def create_default_config() -> EngineConfig:
    """Create a default configuration suitable for most use cases."""
    return EngineConfig()


def create_test_config() -> EngineConfig:
    """Create a configuration suitable for testing (smaller, faster, seeded)."""
    return EngineConfig(
        evolution=EvolutionParameters(
            population_size=20,
            gene_length=5,
            generations=10,
            mutation_rate=0.05
        ),
        logging=LoggingConfig(log_level="INFO", log_interval=1),
        parallelization=ParallelizationConfig(
            enable_parallel=False  # Deterministic tests
        ),
        random_seed=42
    )
