"""Abstract base class for diagram drawers."""

from abc import ABC, abstractmethod
from typing import BinaryIO, Optional, Sequence

from ..errors import RenderError
from ..schema.filters import should_include
from ..schema.models import Relation, Schema, Table


class Drawer(ABC):
    """Abstract base class for drawing a schema diagram.

    Subclasses implement ``render`` for one output format. Drawers hold no
    per-call state, so a single instance can render any number of schemas.
    """

    # Format name used by the drawer registry
    name: str = ""

    @abstractmethod
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
        """Write the schema diagram to the sink.

        Args:
            schema: Loaded schema (never modified)
            sink: Binary stream receiving UTF-8 output
            include: Render-time include list
            exclude: Render-time exclude list
            title: Optional diagram title
            title_loc: Title placement token
            title_size: Title font size
            title_color: Title font color
            direction: Layout direction token

        Raises:
            RenderError: If the sink rejects a write
        """
        pass

    @staticmethod
    def write(sink: BinaryIO, text: str) -> None:
        """Write text to the sink, failing fast on I/O errors."""
        try:
            sink.write(text.encode("utf-8"))
        except (OSError, ValueError) as e:
            raise RenderError(f"Failed to write diagram output: {e}") from e

    @staticmethod
    def table_visible(
        table: Table,
        include: Optional[Sequence[str]] = None,
        exclude: Optional[Sequence[str]] = None,
    ) -> bool:
        return should_include(table.name, include, exclude)

    @staticmethod
    def relation_visible(
        relation: Relation,
        include: Optional[Sequence[str]] = None,
        exclude: Optional[Sequence[str]] = None,
    ) -> bool:
        # Without an include list, the relation's own endpoints stand in for it
        include_list = include if include is not None else [relation.on_table, relation.to_table]
        exclude_list = exclude if exclude is not None else []
        return (
            relation.on_table in include_list
            and relation.to_table in include_list
            and relation.on_table not in exclude_list
            and relation.to_table not in exclude_list
        )
