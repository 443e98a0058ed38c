"""trychain: tiny chains of fallible steps.

Main components:
* `start`: run the first step and open a chain
* `TryChain.then`: add a step, skipped once a step has failed
* `TryChain.finally_`: hook that always runs
* `TryChain.catch`: end the chain with a value or a recovered fallback
* `guarded` / `start_guarded`: opt-in conversion of raised exceptions
"""

# Version info
__version__ = "0.1.0"

# Core components
from trychain.core.result import Result, Outcome
from trychain.core.chain import TryChain, start
from trychain.core.guard import guarded, start_guarded

# Errors and settings
from trychain.errors import ChainError, StepOutcomeError
from trychain.config import TraceConfig

# Export all important symbols
__all__ = [
    # Core classes
    "TryChain",
    "Result",
    "Outcome",

    # Functions
    "start",
    "guarded",
    "start_guarded",

    # Errors
    "ChainError",
    "StepOutcomeError",

    # Config classes
    "TraceConfig",
]
