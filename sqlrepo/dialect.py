"""
sqlrepo Dialects - Identifier quoting and parameter placeholders.

Generated SQL is dialect-agnostic except for how identifiers are quoted
and how bound parameters are written:

    POSTGRES:   SELECT "Id","Name" FROM "People" WHERE Id = $1
    SQLSERVER:  SELECT [Id],[Name] FROM [People] WHERE Id = @id
"""

from dataclasses import dataclass
from typing import Dict

NUMERIC = "numeric"
NAMED = "named"


@dataclass(frozen=True)
class Dialect:
    """Quoting rules for one target database."""

    name: str
    quote_open: str
    quote_close: str
    param_style: str = NUMERIC

    def quote(self, identifier: str) -> str:
        """Quote an identifier, doubling any embedded closing quote."""
        escaped = identifier.replace(self.quote_close, self.quote_close * 2)
        return f"{self.quote_open}{escaped}{self.quote_close}"

    def placeholder(self, name: str, index: int) -> str:
        """Render the placeholder for the ``index``-th (1-based) parameter."""
        if self.param_style == NAMED:
            return f"@{name}"
        return f"${index}"


POSTGRES = Dialect(name="postgres", quote_open='"', quote_close='"', param_style=NUMERIC)
SQLSERVER = Dialect(name="sqlserver", quote_open="[", quote_close="]", param_style=NAMED)

DIALECTS: Dict[str, Dialect] = {
    POSTGRES.name: POSTGRES,
    SQLSERVER.name: SQLSERVER,
}


def get_dialect(name: str) -> Dialect:
    """Look up a built-in dialect by name (case-insensitive)."""
    dialect = DIALECTS.get(name.lower())
    if dialect is None:
        raise ValueError(
            f"Unknown dialect '{name}'. Available: {', '.join(sorted(DIALECTS))}"
        )
    return dialect
