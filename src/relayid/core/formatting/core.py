"""Formatter registry keyed by IdFormat.

Usage:
    formatters = FormatterRegistry()
    formatters.register(IdFormat.ORDINAL, OrdinalFormatter(ordinals))
    formatters.format("Film", raw_id, IdFormat.ORDINAL)
"""

from __future__ import annotations

from typing import Any

from relayid.core.errors import UnsupportedIdFormat
from relayid.core.formatting.models import IdentifierFormatter, IdFormat, RawIdFormatter


class FormatterRegistry:
    """Maps each IdFormat to the strategy that renders it.

    Starts with IdFormat.UUID bound to RawIdFormatter.
    """

    def __init__(self) -> None:
        self._formatters: dict[IdFormat, IdentifierFormatter] = {
            IdFormat.UUID: RawIdFormatter(),
        }

    def register(self, id_format: IdFormat, formatter: IdentifierFormatter) -> None:
        """Bind a formatter to a format, replacing any previous binding.

        Raises:
            TypeError: If formatter does not implement IdentifierFormatter.
        """
        if not isinstance(formatter, IdentifierFormatter):
            raise TypeError(f"{type(formatter).__name__} does not implement IdentifierFormatter")
        self._formatters[id_format] = formatter

    def supports(self, id_format: IdFormat) -> bool:
        return id_format in self._formatters

    def get(self, id_format: IdFormat) -> IdentifierFormatter:
        """Get the formatter bound to a format.

        Raises:
            UnsupportedIdFormat: If nothing is registered for id_format.
        """
        try:
            return self._formatters[id_format]
        except KeyError:
            raise UnsupportedIdFormat(id_format) from None

    def format(self, type_name: str, raw_id: Any, id_format: IdFormat = IdFormat.UUID) -> str:
        """Render a local id in the requested format.

        Raises:
            UnsupportedIdFormat: If nothing is registered for id_format.
        """
        return self.get(id_format).format(type_name, raw_id)
