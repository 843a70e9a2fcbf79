"""Configuration module using Pydantic Settings.

Usage:
    from relayid.config import GlobalIdSettings

    settings = GlobalIdSettings(verify_marker=True)
"""

from relayid.config.settings import GlobalIdSettings

__all__ = [
    "GlobalIdSettings",
]
