import pytest

from pokedexcli.models import (
    LocationArea,
    LocationPage,
    NamedResource,
    Pokemon,
    PokemonStat,
    PokemonType,
)

PIKACHU = {
    "id": 25,
    "name": "pikachu",
    "base_experience": 112,
    "height": 4,
    "weight": 60,
    "is_default": True,
    "order": 35,
    "location_area_encounters": "https://pokeapi.co/api/v2/pokemon/25/encounters",
    "species": {"name": "pikachu", "url": "https://pokeapi.co/api/v2/pokemon-species/25/"},
    "stats": [
        {"base_stat": 35, "effort": 0, "stat": {"name": "hp", "url": "u1"}},
        {"base_stat": 55, "effort": 0, "stat": {"name": "attack", "url": "u2"}},
    ],
    "types": [{"slot": 1, "type": {"name": "electric", "url": "u3"}}],
    "moves": [{"move": {"name": "thunder-shock", "url": "u4"}}],
}


def test_named_resource_from_dict():
    res = NamedResource.from_dict({"name": "canalave-city-area", "url": "u"})
    assert res == NamedResource("canalave-city-area", "u")


def test_location_page_from_dict():
    data = {
        "count": 1089,
        "next": "https://pokeapi.co/api/v2/location-area?offset=20&limit=20",
        "previous": None,
        "results": [{"name": "a", "url": "ua"}, {"name": "b", "url": "ub"}],
    }
    page = LocationPage.from_dict(data)
    assert page.count == data["count"]
    assert page.next == data["next"]
    assert page.previous is None
    assert [r.name for r in page.results] == ["a", "b"]


def test_location_area_from_dict():
    data = {
        "name": "area",
        "pokemon_encounters": [
            {"pokemon": {"name": "tentacool", "url": "u1"}, "version_details": []},
            {"pokemon": {"name": "tentacruel", "url": "u2"}},
        ],
    }
    area = LocationArea.from_dict(data)
    assert [p.name for p in area.pokemon_encounters] == ["tentacool", "tentacruel"]


def test_location_area_without_encounters_is_empty():
    assert LocationArea.from_dict({}).pokemon_encounters == ()


def test_pokemon_stat_and_type():
    stat = PokemonStat.from_dict(PIKACHU["stats"][0])
    assert stat.stat.name == "hp"
    assert stat.base_stat == PIKACHU["stats"][0]["base_stat"]
    kind = PokemonType.from_dict(PIKACHU["types"][0])
    assert kind.type.name == "electric"
    assert kind.slot == PIKACHU["types"][0]["slot"]


def test_pokemon_from_dict():
    mon = Pokemon.from_dict(PIKACHU)
    assert mon.name == "pikachu"
    assert mon.id == PIKACHU["id"]
    assert mon.base_experience == PIKACHU["base_experience"]
    assert mon.height == PIKACHU["height"]
    assert mon.weight == PIKACHU["weight"]
    assert mon.is_default is True
    assert mon.species.url == PIKACHU["species"]["url"]
    assert [s.stat.name for s in mon.stats] == ["hp", "attack"]
    assert [t.type.name for t in mon.types] == ["electric"]


def test_pokemon_null_base_experience_reads_as_zero():
    mon = Pokemon.from_dict({"name": "x", "base_experience": None})
    assert mon.base_experience == 0
    assert mon.stats == ()


def test_non_object_rejected():
    with pytest.raises(TypeError):
        Pokemon.from_dict(["not", "an", "object"])


def test_wrong_field_type_rejected():
    with pytest.raises(TypeError):
        Pokemon.from_dict({"name": "x", "height": "tall"})