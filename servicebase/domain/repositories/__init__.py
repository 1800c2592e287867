"""Domain repository interfaces.

All abstractions are defined here with abc.ABC and @abstractmethod.
Concrete implementations live in servicebase/infrastructure/persistence/ and
are wired at the application boundary via dependency injection.
"""

from .base import Repository
from .examples import ExampleRepository

__all__ = [
    "Repository",
    "ExampleRepository",
]
