"""
sqlrepo Errors - Exception taxonomy for data access failures.

Every failure raised by this package derives from DataAccessError, so
callers can catch one type. Driver exceptions are never swallowed: they
are re-raised as the matching subclass with the original exception
chained as ``__cause__``.
"""

from typing import Optional


class DataAccessError(Exception):
    """Base class for all sqlrepo errors"""
    pass


class ConnectionFailureError(DataAccessError):
    """Raised when the database connection cannot be opened"""
    pass


class TransactionStateError(DataAccessError):
    """Raised on an invalid transaction lifecycle call"""
    pass


class StatementExecutionError(DataAccessError):
    """Raised when the database rejects or fails to run a statement"""

    def __init__(self, message: str, sql: Optional[str] = None):
        super().__init__(message)
        self.sql = sql


class NoResultError(DataAccessError):
    """Raised when a single-entity query returns no rows"""

    def __init__(self, message: str, sql: Optional[str] = None):
        super().__init__(message)
        self.sql = sql


class TypeMismatchError(DataAccessError):
    """Raised when a NULL value is read into a non-nullable field"""

    def __init__(self, column: str, message: Optional[str] = None):
        super().__init__(message or f"Property {column} is not nullable.")
        self.column = column
