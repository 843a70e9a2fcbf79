"""Tests for local id formatters."""

from typing import Any

import pytest

from relayid.core.errors import UnsupportedIdFormat
from relayid.core.formatting import (
    FormatterRegistry,
    IdentifierFormatter,
    IdFormat,
    RawIdFormatter,
)


class OrdinalFormatter:
    def __init__(self, ordinals: dict[str, int]):
        self._ordinals = ordinals

    def format(self, type_name: str, raw_id: Any) -> str:
        return str(self._ordinals[str(raw_id)])


def test_uuid_format_is_raw_id_by_default():
    formatters = FormatterRegistry()

    assert formatters.format("Film", "0b5e3c") == "0b5e3c"
    assert formatters.format("Film", 7, IdFormat.UUID) == "7"


@pytest.mark.parametrize(
    "id_format", [IdFormat.ORDINAL, IdFormat.HASH_ORDINAL, IdFormat.HASH_64_ORDINAL]
)
def test_unregistered_formats_fail(id_format):
    formatters = FormatterRegistry()

    assert not formatters.supports(id_format)
    with pytest.raises(UnsupportedIdFormat) as exc_info:
        formatters.format("Film", "1", id_format)

    assert exc_info.value.id_format is id_format


def test_registered_strategy_is_used():
    formatters = FormatterRegistry()
    formatters.register(IdFormat.ORDINAL, OrdinalFormatter({"0b5e3c": 12}))

    assert formatters.supports(IdFormat.ORDINAL)
    assert formatters.format("Film", "0b5e3c", IdFormat.ORDINAL) == "12"


def test_register_replaces_existing_binding():
    formatters = FormatterRegistry()
    ordinal = OrdinalFormatter({"x": 1})
    formatters.register(IdFormat.UUID, ordinal)

    assert formatters.get(IdFormat.UUID) is ordinal


def test_register_rejects_non_formatter():
    formatters = FormatterRegistry()

    with pytest.raises(TypeError, match="does not implement IdentifierFormatter"):
        formatters.register(IdFormat.ORDINAL, object())  # type: ignore[arg-type]


def test_raw_formatter_satisfies_protocol():
    assert isinstance(RawIdFormatter(), IdentifierFormatter)
