"""Include/exclude rules shared by schema loading and diagram drawing."""

from typing import Optional, Sequence

from .models import Relation


def should_include(
    name: str,
    include: Optional[Sequence[str]] = None,
    exclude: Optional[Sequence[str]] = None,
) -> bool:
    """Decide whether a table takes part in the output.

    Args:
        name: Table name
        include: If given, the table must be listed here
        exclude: If given and the table is listed, it is dropped

    Returns:
        True if the table passes both lists. Exclusion always wins.
    """
    include_list = include if include is not None else [name]
    exclude_list = exclude if exclude is not None else []
    return name in include_list and name not in exclude_list


def relation_included(
    relation: Relation,
    include: Optional[Sequence[str]] = None,
    exclude: Optional[Sequence[str]] = None,
) -> bool:
    """Both endpoints of a relation must pass the table filter."""
    return (
        should_include(relation.on_table, include, exclude)
        and should_include(relation.to_table, include, exclude)
    )

