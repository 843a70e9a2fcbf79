"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support for the
identifier services.

Usage:
    from relayid.config import GlobalIdSettings

    # Load from environment variables (RELAYID_*)
    settings = GlobalIdSettings()

    # Or override with explicit values
    settings = GlobalIdSettings(default_scope="local", cache_max_entries=256)
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from relayid.core.identity import MARKER, IdScope, validate_type_name


class GlobalIdSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for global id encoding and resolution.

    Attributes:
        marker: Literal tag written at the head of every global id record.
        default_scope: Scope used when a caller does not request one.
        verify_marker: Reject decoded records whose marker differs from marker.
        cache_max_entries: Capacity of the LRU cache built by
            NodeRegistry.from_settings().

    Environment Variables:
        RELAYID_MARKER
        RELAYID_DEFAULT_SCOPE
        RELAYID_VERIFY_MARKER
        RELAYID_CACHE_MAX_ENTRIES
    """

    model_config = SettingsConfigDict(
        env_prefix="RELAYID_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    marker: str = MARKER
    default_scope: IdScope = IdScope.GLOBAL
    verify_marker: bool = False
    cache_max_entries: int = Field(default=1024, gt=0)

    @field_validator("marker")
    @classmethod
    def _check_marker(cls, value: str) -> str:
        return validate_type_name(value)

    @field_validator("default_scope", mode="before")
    @classmethod
    def _parse_scope(cls, value: Any) -> IdScope:
        return IdScope.parse(value)

    @property
    def expected_marker(self) -> str | None:
        """Marker to enforce on decode, or None when not verifying."""
        return self.marker if self.verify_marker else None
