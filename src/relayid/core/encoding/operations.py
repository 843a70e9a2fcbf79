"""URL-safe base64 character encoding.

Padding is stripped on encode so tokens can travel in URLs and query strings
without escaping. Decode accepts stripped or fully padded input and is strict
about everything else: one encoded string per byte sequence.
"""

from __future__ import annotations

import base64
import binascii
import re

from relayid.core.errors import DecodeFailure

_ALPHABET = re.compile(r"[A-Za-z0-9_-]*")
_PAD = "="


class UrlSafeBase64:
    """RFC 4648 section 5 encoding with padding removed.

    Rejects characters outside the URL-safe alphabet, misplaced or excess
    padding, impossible lengths, and non-canonical trailing bits.
    """

    def encode(self, data: bytes) -> str:
        """Encode bytes into unpadded URL-safe base64.

        Args:
            data: Raw bytes to encode.

        Returns:
            ASCII string over [A-Za-z0-9_-].
        """
        return base64.urlsafe_b64encode(data).decode("ascii").rstrip(_PAD)

    def decode(self, text: str) -> bytes:
        """Decode unpadded (or correctly padded) URL-safe base64.

        Args:
            text: Encoded string.

        Returns:
            Decoded bytes.

        Raises:
            DecodeFailure: If text is not a canonical URL-safe base64 string.
        """
        stripped = text.rstrip(_PAD)
        padding = len(text) - len(stripped)
        if padding and (padding > 2 or len(text) % 4):
            raise DecodeFailure(text, "incorrect padding")
        if len(stripped) % 4 == 1:
            raise DecodeFailure(text, "invalid length")
        if not _ALPHABET.fullmatch(stripped):
            raise DecodeFailure(text, "character outside the URL-safe base64 alphabet")

        try:
            data = base64.urlsafe_b64decode(stripped + _PAD * (-len(stripped) % 4))
        except binascii.Error as e:
            raise DecodeFailure(text, str(e)) from e

        if self.encode(data) != stripped:
            raise DecodeFailure(text, "non-canonical encoding")
        return data


DEFAULT_ENCODING = UrlSafeBase64()
"""Shared stateless instance used when no encoding is supplied."""
