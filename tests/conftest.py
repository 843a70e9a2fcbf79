"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from dataclasses import dataclass

from relayid import GlobalIdSettings, IdField, NodeRegistry, NodeType


@dataclass(slots=True)
class Film:
    episode_id: int
    title: str


@dataclass(slots=True)
class Planet:
    url: str
    name: str


FILMS = {
    "4": Film(4, "A New Hope"),
    "5": Film(5, "The Empire Strikes Back"),
}

PLANETS = {
    "planets:1": Planet("planets:1", "Tatooine"),
    "planets:2": Planet("planets:2", "Alderaan"),
}


@pytest.fixture
def settings():
    """Settings independent of the process environment."""
    return GlobalIdSettings(_env_file=None, marker="t", default_scope="global")


@pytest.fixture
def film_node():
    return NodeType(
        name="Film",
        get_by_id=FILMS.get,
        id_field=IdField(extract=lambda f: f.episode_id, local_name="id"),
    )


@pytest.fixture
def planet_node():
    async def get_planet(raw_id: str) -> Planet | None:
        return PLANETS.get(raw_id)

    return NodeType(
        name="Planet",
        get_by_id=get_planet,
        id_field=IdField(extract=lambda p: p.url),
    )


@pytest.fixture
def registry(settings, film_node, planet_node):
    """Registry with a sync Film node and an async Planet node."""
    reg = NodeRegistry(settings=settings)
    reg.register(film_node)
    reg.register(planet_node)
    return reg


@pytest.fixture
def films():
    return FILMS


@pytest.fixture
def planets():
    return PLANETS
