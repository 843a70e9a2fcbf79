"""Local id formatting: pluggable output formats for local id fields."""

from relayid.core.formatting.core import FormatterRegistry
from relayid.core.formatting.models import IdentifierFormatter, IdFormat, RawIdFormatter

__all__ = [
    "IdFormat",
    "IdentifierFormatter",
    "RawIdFormatter",
    "FormatterRegistry",
]
