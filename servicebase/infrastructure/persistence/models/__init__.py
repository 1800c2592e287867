"""ORM model registry — imports every model module so each mapper class is
registered with Base.metadata before Alembic or SQLAlchemy runs.
"""

from servicebase.infrastructure.persistence.models.examples import (
    ExampleClass,
    ExampleTag,
    NavigationClass,
)

__all__ = [
    "NavigationClass",
    "ExampleClass",
    "ExampleTag",
]
