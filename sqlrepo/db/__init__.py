"""
sqlrepo Database - asyncpg-based data access.

- Database: single connection + transaction manager (one per repository)
- GenericRepository: query execution and entity materialization
"""

from .database import Database, TransactionAction
from .repository import GenericRepository

__all__ = ["Database", "TransactionAction", "GenericRepository"]
