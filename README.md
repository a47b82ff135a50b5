# pokedexcli

An interactive Pokedex for the terminal. You can browse location areas, see
which Pokemon can be met in each one, try to catch them, and look up the ones
you have caught. All of its data comes from the public PokeAPI over HTTPS.
It uses only the Python standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

Start the interactive prompt:

```
pokedexcli
```

`python -m pokedexcli.repl` does the same.

At the `Pokedex > ` prompt, type one of the commands below. The whole line is
lower-cased and split on whitespace, so commands and their arguments are not
case sensitive and extra spaces are ignored. An unknown command prints
`Unknown command`. The prompt ends on `exit` or at the end of input.

| Command | What it does |
| --- | --- |
| `help` | Prints every command with its description. |
| `map` | Prints the next page of location areas (the first page on the first call). |
| `mapb` | Prints the previous page of location areas, or `you're on the first page`. |
| `explore <location-name>` | Prints the Pokemon that can be met in a location area. |
| `catch <pokemon-name>` | Throws a Pokeball. Pokemon with more base experience are harder to catch. |
| `inspect <pokemon-name>` | Prints the name, height, weight, stats and types of a Pokemon you have caught. |
| `pokedex` | Lists every Pokemon you have caught. |
| `exit` | Prints a goodbye message and ends the program. |

`explore`, `catch` and `inspect` need an argument; without one they print a
usage message. When a request to the PokeAPI fails, the error is printed and
the prompt carries on.

An example session:

```
Pokedex > map
canalave-city-area
eterna-city-area
...
Pokedex > explore canalave-city-area
tentacool
tentacruel
...
Pokedex > catch tentacool
Throwing a Pokeball at tentacool...
tentacool was caught!
Pokedex > inspect tentacool
Name: tentacool
Height: 9
Weight: 455
Stats:
  -hp: 40
  ...
Types:
  - water
  - poison
Pokedex > pokedex
Your Pokedex:
 - tentacool
Pokedex > exit
Closing the Pokedex... Goodbye!
```

## What it does not do

- Your Pokedex is kept only in memory and is lost when the program exits; it
  is not saved anywhere.
- The client looks each URL up in its cache before going to the network, but
  nothing in the package puts responses into that cache, so every command
  fetches its data afresh unless you add entries yourself with
  `client.cache.add(url, body)`.

## Using it as a library

```python
from pokedexcli.api import Client

with Client(timeout=5, cache_interval=300) as client:
    page = client.list_locations(None)
    for location in page.results:
        print(location.name)
```

`pokedexcli.api`:

- `Client(timeout, cache_interval)` – both in seconds. Methods:
  `fetch(url)` returns the raw body (from `client.cache` if it holds the URL),
  `list_locations(page_url)` returns a `LocationPage` (the first page when
  `page_url` is empty or `None`), `explore_location(url)` returns a
  `LocationArea`, `get_pokemon_details(url)` returns a `Pokemon`, and
  `close()` stops the cache's background thread. It is also a context manager.
- `PokeAPIError` – raised when a request fails, the server answers with a
  status other than 200, or the response cannot be decoded.
- `BASE_URL` – `https://pokeapi.co/api/v2`.

`pokedexcli.models` holds frozen dataclasses built with `from_dict(data)`:
`NamedResource` (`name`, `url`), `LocationPage` (`count`, `next`, `previous`,
`results`), `LocationArea` (`pokemon_encounters`), `PokemonStat`,
`PokemonType` and `Pokemon` (`id`, `name`, `base_experience`, `height`,
`weight`, `is_default`, `order`, `location_area_encounters`, `species`,
`stats`, `types`). Missing fields take empty defaults; fields of the wrong
JSON type raise `TypeError`.

`pokedexcli.cache.Cache(interval)` is a thread-safe store of byte values.
`add(key, val)` stores a value, `get(key)` returns it or `None`, and
`reap(cutoff)` removes entries created before a `time.monotonic()` time. A
background thread removes entries older than `interval` seconds every
`interval` seconds until `close()` is called. `len(cache)` gives the number of
entries, and the cache is a context manager. A non-positive interval raises
`ValueError`.

`pokedexcli.commands` has the command functions, `get_commands()`, the
`Config` session state (client, paging URLs, pokedex, random generator) and
`CommandError`; `pokedexcli.repl` has `clean_input(text)`,
`start_repl(cfg)` and `main()`.