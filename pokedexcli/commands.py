"""The commands the Pokedex prompt understands."""

from __future__ import annotations

import random
import sys
from dataclasses import dataclass, field
from typing import Callable

from pokedexcli.api import BASE_URL, Client, PokeAPIError
from pokedexcli.models import Pokemon

_CATCH_ROLL = 609


class CommandError(Exception):
    """A command was used wrongly or could not do its work."""


@dataclass
class Config:
    """State shared by the commands across one session."""

    client: Client
    next_locations_url: str | None = None
    prev_locations_url: str | None = None
    pokedex: dict[str, Pokemon] = field(default_factory=dict)
    rng: random.Random = field(default_factory=random.Random)


@dataclass(frozen=True)
class Command:
    """A named command, its help text and the function that runs it."""

    name: str
    description: str
    callback: Callable[..., None]


def get_commands() -> dict[str, Command]:
    """Return every command, keyed by name."""
    commands = (
        Command("exit", "Exit the Pokedex", command_exit),
        Command("help", "Displays a help message", command_help),
        Command("map", "Displays the next 20 locations", command_map),
        Command("mapb", "Displays the previous 20 locations", command_mapb),
        Command(
            "explore",
            "Takes one argument <location-name>. "
            "Displays all of the Pokemon available in the given location.",
            command_explore,
        ),
        Command(
            "catch",
            "Takes one argument <pokemon-name>. Attempts to catch the Pokemon, "
            "and returns whether or not the catch succeeded.",
            command_catch,
        ),
        Command(
            "inspect",
            "Takes one argument <pokemon-name>. "
            "Returns Pokemon details if the Pokemon has been caught.",
            command_inspect,
        ),
        Command("pokedex", "Returns a list of registered Pokemon.", command_pokedex),
    )
    return {cmd.name: cmd for cmd in commands}


def command_exit(cfg: Config, *args: str) -> None:
    """Say goodbye, release the client and end the program."""
    print("Closing the Pokedex... Goodbye!")
    cfg.client.close()
    sys.exit(0)


def command_help(cfg: Config, *args: str) -> None:
    """Print the usage of every command."""
    print("Welcome to the Pokedex!")
    print("Usage:\n")
    for cmd in get_commands().values():
        print(f"{cmd.name}: {cmd.description}")


def command_map(cfg: Config, *args: str) -> None:
    """Show the next page of location areas."""
    _show_locations(cfg, cfg.next_locations_url or f"{BASE_URL}/location-area")


def command_mapb(cfg: Config, *args: str) -> None:
    """Show the previous page of location areas."""
    if not cfg.prev_locations_url:
        print("you're on the first page")
        return
    _show_locations(cfg, cfg.prev_locations_url)


def _show_locations(cfg: Config, url: str) -> None:
    try:
        page = cfg.client.list_locations(url)
    except PokeAPIError as err:
        raise CommandError(f"call to PokeAPI failed: {err}") from err
    cfg.next_locations_url = page.next
    cfg.prev_locations_url = page.previous
    for location in page.results:
        print(location.name)


def command_explore(cfg: Config, *args: str) -> None:
    """List the Pokemon that can be met in a location area."""
    if not args:
        raise CommandError(
            "must provide a location. Example usage: explore <location-name>"
        )
    url = f"{BASE_URL}/location-area/{args[0]}"
    try:
        area = cfg.client.explore_location(url)
    except PokeAPIError as err:
        raise CommandError(f"call to PokeAPI failed: {err}") from err
    for pokemon in area.pokemon_encounters:
        print(pokemon.name)


def command_catch(cfg: Config, *args: str) -> None:
    """Throw a Pokeball; a caught Pokemon goes into the Pokedex."""
    if not args:
        raise CommandError(
            "must provide a pokemon. Example usage: catch <pokemon-name>"
        )
    name = args[0]
    pokemon = cfg.client.get_pokemon_details(f"{BASE_URL}/pokemon/{name}")
    print(f"Throwing a Pokeball at {name}...")
    if cfg.rng.randrange(_CATCH_ROLL) > int(pokemon.base_experience / 2):
        print(f"{name} was caught!")
        cfg.pokedex[name] = pokemon
    else:
        print(f"{name} escaped!")


def command_inspect(cfg: Config, *args: str) -> None:
    """Print the details of a caught Pokemon."""
    if not args:
        raise CommandError(
            "must provide a pokemon. Example usage: inspect <pokemon-name>"
        )
    pokemon = cfg.pokedex.get(args[0])
    if pokemon is None:
        print("you have not caught that pokemon")
        return
    print("Name:", pokemon.name)
    print("Height:", pokemon.height)
    print("Weight:", pokemon.weight)
    print("Stats:")
    for stat in pokemon.stats:
        print(f"  -{stat.stat.name}: {stat.base_stat}")
    print("Types:")
    for type_info in pokemon.types:
        print("  -", type_info.type.name)


def command_pokedex(cfg: Config, *args: str) -> None:
    """List the caught Pokemon."""
    print("Your Pokedex:")
    for name in cfg.pokedex:
        print(f" - {name}")