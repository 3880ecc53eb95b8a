"""Lenient conversion, typed and ordered maps, API identifiers and metadata, JSON negotiation, random values, timestamps and terminal size."""

__version__ = "0.1.0"

__all__ = [
    "convert",
    "typecheck",
    "maps",
    "ordered_map",
    "scheme",
    "selection",
    "meta",
    "negotiate",
    "rands",
    "jsontime",
    "terminal",
]