"""Tests for node type descriptors."""

import pytest

from relayid.core.errors import InvalidTypeName
from relayid.nodes import IdField, NodeResult, NodeType, to_camel_case


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("FilmId", "filmId"),
        ("film_id", "filmId"),
        ("Star Ship Id", "starShipId"),
        ("id", "id"),
        ("", ""),
    ],
)
def test_to_camel_case(text, expected):
    assert to_camel_case(text) == expected


def _node(name="Film", local_name=None):
    return NodeType(name=name, get_by_id=lambda raw: raw, id_field=IdField(str, local_name))


def test_local_id_field_named_id_is_namespaced():
    """The global field owns "id", so a local "id" becomes "<type>Id"."""
    assert _node(local_name="id").local_field_name == "filmId"
    assert _node(local_name="ID").local_field_name == "filmId"
    assert _node(name="Starship", local_name="Id").local_field_name == "starshipId"


def test_other_local_names_kept():
    assert _node(local_name="episodeId").local_field_name == "episodeId"


@pytest.mark.parametrize("local_name", [None, "", "  "])
def test_no_local_field(local_name):
    assert _node(local_name=local_name).local_field_name is None


@pytest.mark.parametrize("name", ["", "Film:Cut"])
def test_node_name_validated(name):
    with pytest.raises(InvalidTypeName):
        _node(name=name)


def test_id_field_description_defaults_to_scope_help():
    assert "GLOBAL scope" in _node().describe_id_field()

    node = NodeType("Film", str, IdField(str, description="Episode key"))
    assert node.describe_id_field() == "Episode key"


def test_node_result_ok():
    assert NodeResult(token="x", value=1).ok
    assert not NodeResult(token="x", error=ValueError("bad")).ok
