"""
sqlrepo Query Builder - Derives SELECT statements from entity shapes.

Usage:
    builder = QueryBuilder(dialect=SQLSERVER)
    builder.build_select_all(entity_shape(Person))
    # Statement(sql='SELECT [Id],[Name],[Email] FROM [People]', params=())

    builder.build_select_by_equality(entity_shape(Person), "Id", 7)
    # Statement(sql='SELECT [Id],[Name],[Email] FROM [People] WHERE Id = @id', params=(7,))

Only a single equality filter is supported. Anything richer (multiple
predicates, ORDER BY, LIMIT) is written by hand and passed to
GenericRepository.execute_query_single().
"""

import dataclasses
from dataclasses import dataclass
from typing import Any, Optional, Tuple

from .dialect import POSTGRES, Dialect
from .entity import EntityShape
from .naming import NamingStrategy

# Name of the single bound parameter of equality queries
KEY_PARAMETER = "id"


@dataclass(frozen=True)
class Statement:
    """SQL text plus its ordered parameter values."""

    sql: str
    params: Tuple[Any, ...] = ()
    timeout: Optional[float] = None

    def with_params(self, *params: Any) -> "Statement":
        return dataclasses.replace(self, params=tuple(params))

    def with_timeout(self, timeout: Optional[float]) -> "Statement":
        return dataclasses.replace(self, timeout=timeout)


class QueryBuilder:
    """
    Builds SELECT statements for entity shapes.

    Args:
        naming: Table/column naming strategy (default NamingStrategy()).
        dialect: Identifier quoting and placeholder rules (default POSTGRES).
    """

    def __init__(
        self,
        naming: Optional[NamingStrategy] = None,
        dialect: Dialect = POSTGRES,
    ):
        self.naming = naming or NamingStrategy()
        self.dialect = dialect

    def build_select_all(self, shape: EntityShape) -> Statement:
        """SELECT every field of the entity, in declaration order."""
        columns = ",".join(
            self.dialect.quote(self.naming.column_name_for(f.name))
            for f in shape.fields
        )
        table = self.dialect.quote(self.naming.table_name_for(shape))
        return Statement(sql=f"SELECT {columns} FROM {table}")

    def build_select_by_equality(
        self,
        shape: EntityShape,
        column_name: str,
        value: Any,
    ) -> Statement:
        """
        SELECT every field, filtered by ``column_name = value``.

        The column name is written as given; a name that does not match a
        real column fails when the statement is executed.
        """
        base = self.build_select_all(shape)
        placeholder = self.dialect.placeholder(KEY_PARAMETER, 1)
        return Statement(
            sql=f"{base.sql} WHERE {column_name} = {placeholder}",
            params=(value,),
        )
