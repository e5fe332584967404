"""Parsing module for column type text."""

from infoschema.parsing.type_parser import ParsedType, TypeParser

__all__ = [
    "ParsedType",
    "TypeParser",
]
