"""Tests for the global id codec and scope policy.

Critical Invariants:
- Decode(Encode(type, id)) == (type, id), including ids containing ":"
- Local scope returns str(raw_id) untouched
- Records with fewer than three fields are rejected, never half-parsed
- Tokens are deterministic and distinct per (type, id) pair
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from relayid.core.encoding import UrlSafeBase64
from relayid.core.errors import (
    DecodeFailure,
    GlobalIdError,
    InvalidRawId,
    InvalidTypeName,
    MalformedIdentifier,
)
from relayid.core.identity import (
    GlobalId,
    IdScope,
    from_global_id,
    resolve_id,
    to_global_id,
)

type_names = st.text(min_size=1).filter(lambda s: ":" not in s)
raw_ids = st.text()


def _encode_record(record: str) -> str:
    return UrlSafeBase64().encode(record.encode("utf-8"))


# Round-trip law


@given(type_name=type_names, raw_id=raw_ids)
def test_round_trip(type_name, raw_id):
    """CRITICAL: decoding an encoded id yields exactly the input pair."""
    gid = from_global_id(to_global_id(type_name, raw_id))

    assert gid == GlobalId(type_name=type_name, id=raw_id)


def test_round_trip_simple_id():
    assert from_global_id(to_global_id("Film", "42")) == GlobalId("Film", "42")


def test_round_trip_keeps_delimiters_in_id():
    """CRITICAL: "abc:def" must not be truncated to "abc"."""
    type_name, raw_id = from_global_id(to_global_id("Planet", "abc:def"))

    assert type_name == "Planet"
    assert raw_id == "abc:def"


def test_non_string_raw_id_is_stringified():
    assert from_global_id(to_global_id("Film", 42)).id == "42"


def test_wire_format_is_unpadded_urlsafe_base64_of_record():
    assert to_global_id("Film", 42) == "dDpGaWxtOjQy"
    assert to_global_id("Film", "42") == _encode_record("t:Film:42")


def test_unicode_survives_round_trip():
    token = to_global_id("Café", "naïve:ü")

    assert from_global_id(token) == GlobalId("Café", "naïve:ü")


# Opaqueness and determinism


@given(type_name=type_names, raw_id=raw_ids)
def test_encoding_is_deterministic(type_name, raw_id):
    assert to_global_id(type_name, raw_id) == to_global_id(type_name, raw_id)


@given(a=st.tuples(type_names, raw_ids), b=st.tuples(type_names, raw_ids))
def test_distinct_pairs_give_distinct_tokens(a, b):
    if a != b:
        assert to_global_id(*a) != to_global_id(*b)


def test_tokens_are_urlsafe():
    token = to_global_id("Starship", "\xff/+?&=")

    assert set(token) <= set("ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_")


# Type name validation


@pytest.mark.parametrize("type_name", ["", "Film:Cut", ":"])
def test_invalid_type_name_rejected(type_name):
    with pytest.raises(InvalidTypeName) as exc_info:
        to_global_id(type_name, "1")

    assert exc_info.value.type_name == type_name


def test_invalid_marker_rejected():
    with pytest.raises(InvalidTypeName):
        to_global_id("Film", "1", marker="v:1")


# Malformed rejection


def test_single_field_record_is_malformed():
    token = _encode_record("onlyOnePart")

    with pytest.raises(MalformedIdentifier) as exc_info:
        from_global_id(token)

    assert exc_info.value.token == token
    assert token in str(exc_info.value)


def test_two_field_record_is_malformed():
    with pytest.raises(MalformedIdentifier):
        from_global_id(_encode_record("t:Film"))


def test_extra_fields_collapse_into_id():
    gid = from_global_id(_encode_record("a:b:c:d"))

    assert gid == GlobalId(type_name="b", id="c:d")


def test_empty_id_field_is_allowed():
    assert from_global_id(_encode_record("t:Film:")) == GlobalId("Film", "")


@pytest.mark.parametrize("token", ["not-a-token", "", "%%%", "dDp+"])
def test_arbitrary_strings_fail_with_typed_error(token):
    with pytest.raises((DecodeFailure, MalformedIdentifier)):
        from_global_id(token)


def test_non_utf8_payload_is_decode_failure():
    token = UrlSafeBase64().encode(b"\xff\xfe:a:b")

    with pytest.raises(DecodeFailure, match="UTF-8"):
        from_global_id(token)


def test_non_string_token_is_decode_failure():
    with pytest.raises(DecodeFailure):
        from_global_id(42)  # type: ignore[arg-type]


def test_error_kinds_are_distinguishable():
    """Callers must tell "not a token" from "token with a bad record"."""
    assert not issubclass(DecodeFailure, MalformedIdentifier)
    assert not issubclass(MalformedIdentifier, DecodeFailure)
    assert issubclass(DecodeFailure, GlobalIdError)
    assert issubclass(MalformedIdentifier, ValueError)


def test_marker_not_checked_by_default():
    token = to_global_id("Film", "4", marker="v2")

    assert from_global_id(token) == GlobalId("Film", "4")


def test_expected_marker_mismatch_is_malformed():
    token = to_global_id("Film", "4", marker="v2")

    with pytest.raises(MalformedIdentifier, match="unexpected marker"):
        from_global_id(token, expected_marker="t")


# Scope policy


@given(raw_id=raw_ids)
def test_local_scope_is_transparent(raw_id):
    assert resolve_id("Film", raw_id, IdScope.LOCAL) == raw_id


def test_local_scope_stringifies_without_encoding():
    assert resolve_id("Film", 42, IdScope.LOCAL) == "42"


def test_local_scope_never_validates_type_name():
    assert resolve_id("", "x", IdScope.LOCAL) == "x"


def test_global_scope_is_default():
    assert resolve_id("Film", 42) == to_global_id("Film", 42)
    assert resolve_id("Film", 42, None) == to_global_id("Film", 42)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("local", IdScope.LOCAL),
        ("LOCAL", IdScope.LOCAL),
        (" Global ", IdScope.GLOBAL),
        (IdScope.LOCAL, IdScope.LOCAL),
        (None, IdScope.GLOBAL),
    ],
)
def test_scope_parse(value, expected):
    assert IdScope.parse(value) is expected


def test_scope_parse_rejects_unknown():
    with pytest.raises(ValueError, match="Unknown id scope"):
        IdScope.parse("regional")


# Text without a UTF-8 form


def test_lone_surrogate_in_raw_id_is_typed_error():
    with pytest.raises(InvalidRawId) as exc_info:
        to_global_id("Film", "\ud800")

    assert exc_info.value.raw_id == "\ud800"
    assert isinstance(exc_info.value.__cause__, UnicodeEncodeError)


@pytest.mark.parametrize(("type_name", "marker"), [("Fi\udc00lm", "t"), ("Film", "\ud800")])
def test_lone_surrogate_in_type_name_or_marker_is_typed_error(type_name, marker):
    with pytest.raises(InvalidTypeName, match="UTF-8"):
        to_global_id(type_name, "1", marker=marker)


def test_local_scope_passes_surrogates_through():
    assert resolve_id("Film", "\ud800", IdScope.LOCAL) == "\ud800"
