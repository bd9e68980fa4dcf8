"""
PyTest configuration and fixtures for genkit.

This module provides shared strategy configurations, seeded random streams
and the logfire setup used across the test suite.
"""

import random
import string
from typing import Tuple

import logfire
import pytest

from genkit import Config, EngineConfig, EvalType, create_test_config
from genkit.strategies import (
    half_half_crossover,
    hamming_cost,
    match_fitness,
    random_mutation,
    updown_mutation
)


# Spans are recorded locally only during tests
logfire.configure(send_to_logfire=False, console=False)


ALPHABET: Tuple[str, ...] = tuple(string.ascii_lowercase + " ")
TARGET = "hello"


@pytest.fixture
def alphabet() -> Tuple[str, ...]:
    """Lowercase letters plus space."""
    return ALPHABET


@pytest.fixture
def target() -> str:
    return TARGET


@pytest.fixture
def rng() -> random.Random:
    """Seeded random stream for reproducible tests."""
    return random.Random(1234)


@pytest.fixture
def cost_config(alphabet, target) -> Config:
    """Cost-mode configuration evolving towards the target string."""
    return Config(
        dna_codes=alphabet,
        eval_type=EvalType.COST,
        eval_fn=hamming_cost(target),
        mutate=updown_mutation,
        mate=half_half_crossover
    )


@pytest.fixture
def fitness_config(alphabet, target) -> Config:
    """Fitness-mode configuration with fitness in [0, 1]."""
    return Config(
        dna_codes=alphabet,
        eval_type=EvalType.FITNESS,
        eval_fn=match_fitness(target),
        mutate=random_mutation,
        mate=half_half_crossover
    )


@pytest.fixture
def engine_config() -> EngineConfig:
    """Small, sequential, seeded run parameters."""
    return create_test_config()
