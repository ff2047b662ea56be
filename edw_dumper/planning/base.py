from __future__ import annotations

from dataclasses import dataclass

SCHEMA_PLACEHOLDER = "${schema}"
WHERE_PLACEHOLDER = "${where}"


@dataclass(frozen=True)
class TaskVariant:
    """One concrete way to run an entity's query.

    ``destination`` names the output entry, ``schema_name`` the catalog the
    query reads from and ``where_clause`` a filter only this variant applies.
    """

    destination: str
    schema_name: str
    where_clause: str = ""

    def format(self, sql_template: str) -> str:
        # Only the two placeholders are touched; any other ``$`` text, such as
        # ``$$...$$`` literals in override SQL, is left as written.
        return sql_template.replace(SCHEMA_PLACEHOLDER, self.schema_name).replace(
            WHERE_PLACEHOLDER, self.where_clause
        )
