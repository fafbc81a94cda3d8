"""Diagram drawers for erd-cli.

New output formats are added by subclassing ``Drawer`` and registering
the class in ``DRAWERS``.
"""

from typing import Dict, Type

from ..errors import UnknownFormatError
from .base import Drawer
from .dot import DotDrawer
from .plain_text import PlainTextDrawer

DRAWERS: Dict[str, Type[Drawer]] = {
    DotDrawer.name: DotDrawer,
    PlainTextDrawer.name: PlainTextDrawer,
}


def get_drawer(name: str) -> Drawer:
    """Create the drawer registered for a format name.

    Raises:
        UnknownFormatError: If no drawer handles the format
    """
    try:
        drawer_cls = DRAWERS[name]
    except KeyError:
        raise UnknownFormatError(name, available=sorted(DRAWERS)) from None
    return drawer_cls()


__all__ = [
    "Drawer",
    "DotDrawer",
    "PlainTextDrawer",
    "DRAWERS",
    "get_drawer",
]
