"""Typed views of the PokeAPI responses the client uses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


def _require_dict(data: Any, what: str) -> dict:
    if not isinstance(data, dict):
        raise TypeError(f"{what} must be a JSON object")
    return data


def _int(data: dict, key: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"field {key!r} must be an integer")
    return value


def _bool(data: dict, key: str) -> bool:
    value = data.get(key)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise TypeError(f"field {key!r} must be a boolean")
    return value


def _optional_str(data: dict, key: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise TypeError(f"field {key!r} must be a string")
    return value


def _str(data: dict, key: str) -> str:
    return _optional_str(data, key) or ""


def _obj(data: dict, key: str) -> dict:
    value = data.get(key)
    if value is None:
        return {}
    return _require_dict(value, f"field {key!r}")


def _list(data: dict, key: str) -> list:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise TypeError(f"field {key!r} must be an array")
    return value


@dataclass(frozen=True)
class NamedResource:
    """A name and the API URL it points to."""

    name: str = ""
    url: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> NamedResource:
        data = _require_dict(data, "resource")
        return cls(name=_str(data, "name"), url=_str(data, "url"))


@dataclass(frozen=True)
class LocationPage:
    """One page of the location-area listing."""

    count: int = 0
    next: str | None = None
    previous: str | None = None
    results: tuple[NamedResource, ...] = ()

    @classmethod
    def from_dict(cls, data: Any) -> LocationPage:
        data = _require_dict(data, "location page")
        return cls(
            count=_int(data, "count"),
            next=_optional_str(data, "next"),
            previous=_optional_str(data, "previous"),
            results=tuple(NamedResource.from_dict(r) for r in _list(data, "results")),
        )


@dataclass(frozen=True)
class LocationArea:
    """A location area, reduced to the Pokemon that can be met there."""

    pokemon_encounters: tuple[NamedResource, ...] = ()

    @classmethod
    def from_dict(cls, data: Any) -> LocationArea:
        data = _require_dict(data, "location area")
        encounters = (
            _require_dict(e, "encounter") for e in _list(data, "pokemon_encounters")
        )
        return cls(
            pokemon_encounters=tuple(
                NamedResource.from_dict(_obj(e, "pokemon")) for e in encounters
            )
        )


@dataclass(frozen=True)
class PokemonStat:
    """A base stat of a Pokemon."""

    stat: NamedResource
    base_stat: int = 0
    effort: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> PokemonStat:
        data = _require_dict(data, "stat")
        return cls(
            stat=NamedResource.from_dict(_obj(data, "stat")),
            base_stat=_int(data, "base_stat"),
            effort=_int(data, "effort"),
        )


@dataclass(frozen=True)
class PokemonType:
    """One of the types of a Pokemon."""

    type: NamedResource
    slot: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> PokemonType:
        data = _require_dict(data, "type")
        return cls(
            type=NamedResource.from_dict(_obj(data, "type")),
            slot=_int(data, "slot"),
        )


@dataclass(frozen=True)
class Pokemon:
    """The details of a Pokemon that the Pokedex keeps."""

    id: int = 0
    name: str = ""
    base_experience: int = 0
    height: int = 0
    weight: int = 0
    is_default: bool = False
    order: int = 0
    location_area_encounters: str = ""
    species: NamedResource = NamedResource()
    stats: tuple[PokemonStat, ...] = ()
    types: tuple[PokemonType, ...] = ()

    @classmethod
    def from_dict(cls, data: Any) -> Pokemon:
        data = _require_dict(data, "pokemon")
        return cls(
            id=_int(data, "id"),
            name=_str(data, "name"),
            base_experience=_int(data, "base_experience"),
            height=_int(data, "height"),
            weight=_int(data, "weight"),
            is_default=_bool(data, "is_default"),
            order=_int(data, "order"),
            location_area_encounters=_str(data, "location_area_encounters"),
            species=NamedResource.from_dict(_obj(data, "species")),
            stats=tuple(PokemonStat.from_dict(s) for s in _list(data, "stats")),
            types=tuple(PokemonType.from_dict(t) for t in _list(data, "types")),
        )