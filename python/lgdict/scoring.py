"""Cost functions for dictionary entries.

A cost function takes a connector set and returns the disjunct cost as a
float. Only the constant-zero cost is built in; other scorers can be
registered by name.

Usage:
    from lgdict.scoring import get_cost_function, register_cost_function

    cost_fn = get_cost_function("zero")
    register_cost_function("length", lambda record: 0.1 * len(record.connectors))
"""

from typing import Callable

from .schema import ConnectorSet

CostFunction = Callable[[ConnectorSet], float]

_DEFAULT_COST = "zero"


def zero_cost(record: ConnectorSet) -> float:
    """Every disjunct costs nothing."""
    return 0.0


_COST_FUNCTIONS: dict[str, CostFunction] = {}


def _init_registry() -> None:
    """Initialize the registry with built-in cost functions."""
    global _COST_FUNCTIONS
    _COST_FUNCTIONS = {
        "zero": zero_cost,
    }


_init_registry()


def get_cost_function(name: str) -> CostFunction:
    """Get a cost function by name.

    Args:
        name: Registered name.

    Returns:
        The cost function.
    """
    if name not in _COST_FUNCTIONS:
        raise ValueError(
            f"Unknown cost function: {name}. "
            f"Available: {list(_COST_FUNCTIONS.keys())}"
        )
    return _COST_FUNCTIONS[name]


def register_cost_function(name: str, fn: CostFunction) -> None:
    """Register a custom cost function."""
    if not callable(fn):
        raise TypeError(f"Cost function {name!r} is not callable")
    _COST_FUNCTIONS[name] = fn


def list_cost_functions() -> list[str]:
    """List registered cost function names."""
    return list(_COST_FUNCTIONS.keys())


def get_default_cost_function() -> str:
    """Get the default cost function name."""
    return _DEFAULT_COST
