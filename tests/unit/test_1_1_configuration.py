"""
Unit tests for genkit configuration (Task 1.1).

Tests cover:
- Strategy bundle validation (alphabet, mode, callables)
- Run parameter validation
- Environment loading and JSON save/load
- Predefined configurations
"""

import pytest
from pathlib import Path
import tempfile

from pydantic import ValidationError

from genkit import (
    Config,
    ConfigurationError,
    EngineConfig,
    EvalType,
    EvolutionParameters,
    create_default_config,
    create_test_config
)
from genkit.strategies import half_half_crossover, hamming_cost, random_mutation


def _strategies():
    return {
        "eval_fn": hamming_cost("abc"),
        "mutate": random_mutation,
        "mate": half_half_crossover
    }


class TestStrategyConfig:
    """Test suite for the caller-supplied strategy bundle."""

    def test_config_creation(self):
        """Test creating a cost-mode configuration."""
        config = Config(dna_codes="abc", eval_type=EvalType.COST, **_strategies())

        assert config.dna_codes == ("a", "b", "c")
        assert config.eval_type is EvalType.COST

    def test_eval_type_from_string(self):
        """Test that mode names are coerced to the enum."""
        config = Config(dna_codes=[0, 1], eval_type="fitness", **_strategies())
        assert config.eval_type is EvalType.FITNESS

        config = Config(dna_codes=[0, 1], eval_type="COST", **_strategies())
        assert config.eval_type is EvalType.COST

    def test_unknown_eval_type(self):
        """Test that an unknown mode is a configuration error."""
        with pytest.raises(ConfigurationError):
            Config(dna_codes=[0, 1], eval_type="pareto", **_strategies())

    def test_empty_alphabet(self):
        """Test that an empty alphabet is rejected."""
        with pytest.raises(ConfigurationError):
            Config(dna_codes=[], eval_type=EvalType.COST, **_strategies())

    def test_non_callable_strategy(self):
        """Test that strategies must be callable."""
        strategies = _strategies()
        strategies["mate"] = "half-half"

        with pytest.raises(ConfigurationError):
            Config(dna_codes=[0, 1], eval_type=EvalType.COST, **strategies)

    def test_config_is_immutable(self):
        """Test that the strategy bundle cannot be changed after creation."""
        config = Config(dna_codes=[0, 1], eval_type=EvalType.COST, **_strategies())

        with pytest.raises(ValidationError):
            config.eval_type = EvalType.FITNESS

    def test_configuration_error_is_value_error(self):
        """Test that configuration errors can be caught as ValueError."""
        with pytest.raises(ValueError):
            Config(dna_codes=(), eval_type=EvalType.COST, **_strategies())


class TestEngineConfiguration:
    """Test suite for run parameters."""

    def test_default_config_creation(self):
        """Test creating default engine configuration."""
        config = EngineConfig()

        assert config.evolution.population_size == 100
        assert config.evolution.gene_length == 10
        assert config.evolution.generations == 100
        assert config.evolution.mutation_rate == 0.05
        assert config.selection.max_rejections is None
        assert config.selection.normalize_fitness is False
        assert config.logging.log_level is None
        assert config.parallelization.enable_parallel is False

    def test_evolution_parameters_validation(self):
        """Test validation of evolution parameters."""
        params = EvolutionParameters(population_size=1, gene_length=1, mutation_rate=1.0)
        assert params.population_size == 1

        with pytest.raises(ValueError):
            EvolutionParameters(mutation_rate=1.5)

        with pytest.raises(ValueError):
            EvolutionParameters(mutation_rate=-0.1)

        with pytest.raises(ValueError):
            EvolutionParameters(population_size=0)

        with pytest.raises(ValueError):
            EvolutionParameters(gene_length=0)

    def test_unknown_field_rejected(self):
        """Test that misspelt sections are rejected."""
        with pytest.raises(ValidationError):
            EngineConfig(evolutoin={})

    def test_config_from_environment(self, monkeypatch):
        """Test loading configuration from environment variables."""
        monkeypatch.setenv("GENKIT_POPULATION_SIZE", "200")
        monkeypatch.setenv("GENKIT_GENE_LENGTH", "8")
        monkeypatch.setenv("GENKIT_MUTATION_RATE", "0.2")
        monkeypatch.setenv("GENKIT_NUM_WORKERS", "4")
        monkeypatch.setenv("GENKIT_RANDOM_SEED", "42")

        config = EngineConfig.from_env()

        assert config.evolution.population_size == 200
        assert config.evolution.gene_length == 8
        assert config.evolution.mutation_rate == 0.2
        assert config.parallelization.num_workers == 4
        assert config.parallelization.enable_parallel is True
        assert config.random_seed == 42

    def test_config_save_and_load(self):
        """Test saving and loading configuration."""
        config = create_test_config()

        with tempfile.NamedTemporaryFile(mode='w', suffix='.json', delete=False) as f:
            temp_path = f.name
        config.save(temp_path)

        loaded_config = EngineConfig.load(temp_path)

        assert loaded_config == config

        Path(temp_path).unlink()

    def test_predefined_configurations(self):
        """Test predefined configuration templates."""
        default = create_default_config()
        assert default.evolution.population_size == 100

        test = create_test_config()
        assert test.evolution.population_size == 20
        assert test.evolution.gene_length == 5
        assert test.random_seed == 42
        assert test.parallelization.enable_parallel is False
