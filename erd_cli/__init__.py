"""erd-cli - Entity-relationship diagrams from database catalogs."""

__version__ = "0.1.0"
