"""Transposition cipher engines."""

from cyrcipher.services.engines.transposition.table_route import TableRouteEngine

__all__ = [
    "TableRouteEngine",
]
