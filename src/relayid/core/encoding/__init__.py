"""Character encoding functionality: reversible, transport-safe byte encoding."""

from relayid.core.encoding.models import CharacterEncoding
from relayid.core.encoding.operations import DEFAULT_ENCODING, UrlSafeBase64

__all__ = [
    "CharacterEncoding",
    "UrlSafeBase64",
    "DEFAULT_ENCODING",
]
