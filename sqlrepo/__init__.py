"""
sqlrepo - Generic relational data access for Python entity classes.

Usage:
    from dataclasses import dataclass
    from typing import Optional

    from sqlrepo import GenericRepository, TransactionAction

    @dataclass
    class Person:
        Id: int = 0
        Name: str = ""
        Email: Optional[str] = None

    repo = GenericRepository("postgresql://localhost/app")
    person = await repo.get(Person, '"Id"', 7)
"""

from .config import RepositoryConfig, load_config
from .db import Database, GenericRepository, TransactionAction
from .dialect import POSTGRES, SQLSERVER, Dialect, get_dialect
from .entity import EntityShape, FieldShape, entity, entity_shape, register_entity
from .errors import (
    ConnectionFailureError,
    DataAccessError,
    NoResultError,
    StatementExecutionError,
    TransactionStateError,
    TypeMismatchError,
)
from .materializer import materialize
from .naming import NamingStrategy
from .query import QueryBuilder, Statement

__version__ = "0.1.0"

__all__ = [
    # Repository
    "GenericRepository",
    "Database",
    "TransactionAction",
    # Configuration
    "RepositoryConfig",
    "load_config",
    # Query building
    "QueryBuilder",
    "Statement",
    "NamingStrategy",
    "Dialect",
    "POSTGRES",
    "SQLSERVER",
    "get_dialect",
    # Entities
    "EntityShape",
    "FieldShape",
    "entity",
    "entity_shape",
    "register_entity",
    "materialize",
    # Errors
    "DataAccessError",
    "ConnectionFailureError",
    "TransactionStateError",
    "StatementExecutionError",
    "NoResultError",
    "TypeMismatchError",
]
