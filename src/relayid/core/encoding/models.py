"""Character encoding protocol used to make identifier records opaque.

Usage:
    encoding = UrlSafeBase64()
    token = encoding.encode(b"t:Film:42")  # "dDpGaWxtOjQy"
    encoding.decode(token)  # b"t:Film:42"
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class CharacterEncoding(Protocol):
    """Reversible mapping from arbitrary bytes to a transport-safe string.

    Implementations must be bijective over the bytes they accept: two distinct
    inputs never encode to the same string, and decode(encode(b)) == b.
    Invalid input to decode raises DecodeFailure.

    Built-in implementations:
    - UrlSafeBase64: RFC 4648 URL-safe alphabet without padding (default)
    """

    def encode(self, data: bytes) -> str:
        """Encode raw bytes into an opaque string."""
        ...

    def decode(self, text: str) -> bytes:
        """Decode an opaque string back into raw bytes.

        Raises:
            DecodeFailure: If text is not validly encoded.
        """
        ...
