"""Graphviz dot drawer.

Each table becomes a plaintext node whose label is an HTML-like table.
The title cell carries the ``__title`` port and every column row is
ported by column name, so edges can point at a whole table or at a
single column. Layout is left entirely to Graphviz.
"""

from typing import BinaryIO, Optional, Sequence

from ..schema.models import Relation, Schema, Table
from .base import Drawer

TYPE_ALIASES = {
    "character varying": "varchar",
    "timestamp without time zone": "timestamp",
}

TITLE_PORT = "__title"

GRAPH_FOOTER = "\n}\n"

TABLE_FOOTER = "          </table>>];\n"


def type_alias(data_type: str) -> str:
    """Shorten verbose PostgreSQL type names for display."""
    return TYPE_ALIASES.get(data_type, data_type)


def graph_header(
    title: Optional[str],
    title_loc: str,
    title_size: int,
    title_color: str,
    direction: str,
) -> str:
    """Build the digraph header; title options are inserted verbatim."""
    if title is not None:
        title_header = (
            f"label = \"{title}\"\n"
            f"   labelloc = {title_loc}\n"
            f"    fontsize = {title_size}\n"
            f"   fontcolor = {title_color}\n"
        )
    else:
        title_header = ""

    return (
        "digraph erd {\n"
        "\n"
        f"    {title_header}\n"
        "\n"
        "    graph [\n"
        f"    rankdir = \"{direction}\"\n"
        "    ];\n"
        "    node [\n"
        "    fontsize = \"16\"\n"
        "    shape = \"plaintext\"\n"
        "    ];\n"
        "    edge [\n"
        "    ];\n"
    )


def table_header(name: str) -> str:
    return (
        f"  \"{name}\" [label=<\n"
        "        <table\n"
        "            border='0'\n"
        "            cellborder='1'\n"
        "            cellspacing='0'\n"
        "            style='rounded' >\n"
        "        <tr>\n"
        "            <td\n"
        "                colspan='2'\n"
        "                bgcolor='#009879'\n"
        f"                port='{TITLE_PORT}'\n"
        f"            ><font color='white' face='Courier bold italic' point-size='20'><b>{name}</b></font></td>\n"
        "        </tr>\n"
        "        <tr>\n"
        "            <td><font color='black' face='Courier bold' point-size='18'><b>Column</b></font></td>\n"
        "            <td><font color='black' face='Courier bold' point-size='18'><b>Type</b></font></td>\n"
        "        </tr>\n"
    )


def table_field(column_name: str, data_type: str) -> str:
    return (
        f"            <tr><td port=\"{column_name}\" align='text'><font>{column_name}</font>"
        f"<br align='left'/></td><td><font>{type_alias(data_type)}</font></td></tr>\n"
    )


def relation_edge(relation: Relation) -> str:
    return (
        f"\"{relation.on_table}\":\"{relation.on_field}\" -> "
        f"\"{relation.to_table}\":\"{relation.to_field}\"\n"
    )


class DotDrawer(Drawer):
    """Draws the schema as a Graphviz digraph."""

    name = "dot"

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
        self.write(sink, graph_header(title, title_loc, title_size, title_color, direction))

        for table in schema.tables:
            if self.table_visible(table, include, exclude):
                self._write_table(table, sink)
                self.write(sink, "\n")

        for relation in schema.relations:
            if self.relation_visible(relation, include, exclude):
                self.write(sink, relation_edge(relation))

        self.write(sink, GRAPH_FOOTER)

    def _write_table(self, table: Table, sink: BinaryIO) -> None:
        self.write(sink, table_header(table.name))
        for column in table.columns:
            self.write(sink, table_field(column.name, column.data_type))
        self.write(sink, TABLE_FOOTER)
