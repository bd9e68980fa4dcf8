"""
Stock strategies for the engine's plug-in points.

Evaluation factories build ``eval_fn`` callables for a fixed target;
mutation strategies follow ``mutate(symbol, alphabet) -> symbol`` and
crossover strategies follow ``mate(code, code) -> code`` with the output the
same length as the inputs.
"""

from typing import Any, Callable, Sequence, Tuple
import random


def hamming_cost(target: Sequence[Any]) -> Callable[[Sequence[Any]], int]:
    """Cost = number of positions that differ from ``target`` (lower is better)."""
    target = tuple(target)

    def evaluate(code: Sequence[Any]) -> int:
        if len(code) != len(target):
            raise ValueError(
                f"Code length {len(code)} does not match target length {len(target)}"
            )
        return sum(1 for symbol, expected in zip(code, target) if symbol != expected)

    return evaluate


def match_fitness(target: Sequence[Any]) -> Callable[[Sequence[Any]], float]:
    """Fitness = fraction of positions equal to ``target``, in [0, 1]."""
    target = tuple(target)
    cost = hamming_cost(target)

    def evaluate(code: Sequence[Any]) -> float:
        return 1.0 - cost(code) / len(target)

    return evaluate


def random_mutation(symbol: Any, alphabet: Sequence[Any]) -> Any:
    """Replace the symbol with a different one drawn uniformly from the alphabet."""
    choices = [candidate for candidate in alphabet if candidate != symbol]
    if not choices:
        return symbol
    return random.choice(choices)


def updown_mutation(symbol: Any, alphabet: Sequence[Any]) -> Any:
    """Move one step up or down the alphabet, wrapping at either end."""
    alphabet = tuple(alphabet)
    if len(alphabet) < 2:
        return symbol
    try:
        index = alphabet.index(symbol)
    except ValueError:
        return random.choice(alphabet)
    step = random.choice((-1, 1))
    return alphabet[(index + step) % len(alphabet)]


def half_half_crossover(code1: Sequence[Any], code2: Sequence[Any]) -> Tuple[Any, ...]:
    """First half from ``code1``, second half from ``code2``."""
    middle = len(code1) // 2
    return tuple(code1[:middle]) + tuple(code2[middle:])


def single_point_crossover(code1: Sequence[Any], code2: Sequence[Any]) -> Tuple[Any, ...]:
    """Split both parents at one random point and join the pieces."""
    if len(code1) < 2:
        return tuple(code1)
    point = random.randint(1, len(code1) - 1)
    return tuple(code1[:point]) + tuple(code2[point:])


def uniform_crossover(code1: Sequence[Any], code2: Sequence[Any]) -> Tuple[Any, ...]:
    """Take each position from either parent with equal probability."""
    return tuple(
        a if random.random() < 0.5 else b
        for a, b in zip(code1, code2)
    )
