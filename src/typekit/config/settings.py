"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support for the builder.

Usage:
    from typekit.config import TypeKitSettings

    # Load from environment variables (TYPEKIT_*)
    settings = TypeKitSettings()

    # Or override with explicit values
    settings = TypeKitSettings(copy_keys=["prototype", "mixin"])
"""

from __future__ import annotations

try:
    from pydantic_settings import BaseSettings, SettingsConfigDict
except ImportError as e:
    raise ImportError(
        "pydantic-settings is required for config module. "
        "Install with: pip install typekit[config]"
    ) from e


class TypeKitSettings(BaseSettings):  # type: ignore[misc]
    """Defaults applied by TypeDefinition.

    Attributes:
        copy_keys: Candidate member names `copies` redirects each source
            through when the call passes no `key` option.
        static_markers: Descriptor keys marking a class-level member, in
            priority order.
        warn_on_overlap: Warn when several sources of one `copies` call
            contribute the same member.

    Environment Variables:
        TYPEKIT_COPY_KEYS (JSON list)
        TYPEKIT_STATIC_MARKERS (JSON list)
        TYPEKIT_WARN_ON_OVERLAP
    """

    model_config = SettingsConfigDict(
        env_prefix="TYPEKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    copy_keys: list[str] = ["prototype"]
    static_markers: list[str] = ["cls", "classvar", "static"]
    warn_on_overlap: bool = True
