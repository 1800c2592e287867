"""Generic repository layer over the SQLAlchemy async ORM."""

__version__ = "0.1.0"
