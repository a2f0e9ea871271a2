from .action import ActionError, mutation_action, require_caller
from .result import Failure, Result, Success

__all__ = [
    "ActionError",
    "Failure",
    "Result",
    "Success",
    "mutation_action",
    "require_caller",
]
