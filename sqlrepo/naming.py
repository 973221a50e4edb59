"""
sqlrepo Naming - Maps entity classes to table names and fields to columns.

Table names are the plural of the entity's simple class name; column
names are the field names, unchanged.

Usage:
    naming = NamingStrategy()
    naming.table_name_for(Person)        # "People"
    naming.column_name_for("Email")      # "Email"

    # Custom pluralizer (any "singular -> plural" callable)
    naming = NamingStrategy(pluralize=lambda name: name + "s")
"""

import logging
from typing import Any, Callable, Optional

from .entity import EntityShape

logger = logging.getLogger(__name__)

Pluralizer = Callable[[str], str]


def default_pluralizer() -> Pluralizer:
    """Build the default pluralizer backed by inflect."""
    import inflect

    engine = inflect.engine()
    # Class names are capitalized; do not treat them as proper names
    engine.classical(names=False)
    return engine.plural_noun


class NamingStrategy:
    """
    Derives database identifiers from entity metadata.

    Args:
        pluralize: Callable mapping a singular noun to its plural.
            Defaults to inflect's ``plural_noun``.
    """

    def __init__(self, pluralize: Optional[Pluralizer] = None):
        self._pluralize = pluralize or default_pluralizer()

    def table_name_for(self, entity: Any) -> str:
        """Return the table name for an entity class or EntityShape."""
        if isinstance(entity, EntityShape):
            name = entity.name
        else:
            name = entity.__name__
        table = self._pluralize(name)
        if not table:
            raise ValueError(f"Pluralizer returned an empty table name for '{name}'")
        logger.debug(f"Resolved table name {name} -> {table}")
        return table

    def column_name_for(self, field_name: str) -> str:
        return field_name
