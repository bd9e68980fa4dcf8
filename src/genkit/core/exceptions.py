"""
Error types raised by the genkit engine.

Errors raised inside caller-supplied strategies (evaluate, mutate, mate) are
never wrapped; they reach the caller exactly as raised.
"""


class GenkitError(Exception):
    """Base class for errors detected by the engine itself."""


class ConfigurationError(GenkitError, ValueError):
    """Invalid engine configuration (mode, alphabet, sizes, rates)."""


class StrategyContractError(GenkitError, ValueError):
    """A caller strategy returned a value that breaks an engine invariant."""
