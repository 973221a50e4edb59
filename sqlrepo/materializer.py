"""
sqlrepo Row Materializer - Turns one result row into an entity instance.

Fields are assigned in declaration order from the columns of the row
whose names match exactly. Fields without a matching column keep the
value given by the shape's factory. Values are assigned as returned by
the driver; no type coercion is attempted.

A NULL read into a non-nullable field raises TypeMismatchError at that
field: assignment stops there and no entity is returned.
"""

import logging
from typing import Any, Iterable, Optional

from .entity import EntityShape
from .errors import TypeMismatchError

logger = logging.getLogger(__name__)


def materialize(shape: EntityShape, row: Any, columns: Optional[Iterable[str]] = None) -> Any:
    """
    Build one entity from a result row.

    Args:
        shape: Shape of the entity to create.
        row: Mapping-like row (``row[column]``), e.g. an asyncpg Record.
        columns: Column names of the result set. Defaults to ``row.keys()``.

    Returns:
        A new entity instance.

    Raises:
        TypeMismatchError: If a non-nullable field receives NULL.
    """
    available = set(columns if columns is not None else row.keys())
    instance = shape.new_instance()

    for f in shape.fields:
        if f.name not in available:
            continue

        value = row[f.name]
        if value is None and not f.nullable:
            logger.debug(f"NULL in non-nullable column {f.name} of {shape.name}")
            raise TypeMismatchError(f.name)

        setattr(instance, f.name, value)

    return instance
