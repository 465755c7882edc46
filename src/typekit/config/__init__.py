"""Configuration module using Pydantic Settings.

Provides typed defaults for type definitions with environment variable support.

Usage:
    from typekit import typedef
    from typekit.config import TypeKitSettings

    settings = TypeKitSettings(static_markers=["shared"])
    typedef(Counter, settings=settings).implements({"total": {"shared": 0}})
"""

from typekit.config.settings import TypeKitSettings

__all__ = [
    "TypeKitSettings",
]
