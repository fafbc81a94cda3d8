"""Plain text dump of a schema.

This is a debugging view: render-time filters, title and layout options
are accepted for interface compatibility and ignored.
"""

from typing import BinaryIO, Optional, Sequence

from ..schema.models import Relation, Schema, Table
from .base import Drawer


class PlainTextDrawer(Drawer):
    """Writes every table and relation as plain text."""

    name = "text"

    def render(
        self,
        schema: Schema,
        sink: BinaryIO,
        include: Optional[Sequence[str]] = None,
        exclude: Optional[Sequence[str]] = None,
        title: Optional[str] = None,
        title_loc: str = "t",
        title_size: int = 30,
        title_color: str = "black",
        direction: str = "TB",
    ) -> None:
        self.write(sink, "=== Tables ===\n")
        for table in schema.tables:
            self._write_table(table, sink)
            self.write(sink, "\n")

        self.write(sink, "=== Relations ===\n")
        for relation in schema.relations:
            self._write_relation(relation, sink)
            self.write(sink, "\n")

        self.write(sink, "=== Done ===\n")

    def _write_table(self, table: Table, sink: BinaryIO) -> None:
        self.write(sink, f"[{table.name}]\n")
        for column in table.columns:
            self.write(sink, f"{column.name}: {column.data_type}\n")
        self.write(sink, "\n")

    def _write_relation(self, relation: Relation, sink: BinaryIO) -> None:
        # Both sides print the referencing endpoint
        self.write(
            sink,
            f"{relation.on_table}:{relation.on_field} -> {relation.on_table}:{relation.on_field}\n",
        )
