"""Polyalphabetic cipher engines."""

from cyrcipher.services.engines.polyalphabetic.gronsfeld import GronsfeldEngine

__all__ = [
    "GronsfeldEngine",
]
