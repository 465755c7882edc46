"""Chainable type definitions."""

from typekit.builder.definition import TypeDefinition, typedef

__all__ = [
    "TypeDefinition",
    "typedef",
]
