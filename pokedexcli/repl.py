"""The interactive prompt and the program's entry point."""

from __future__ import annotations

import sys

from pokedexcli.api import Client, PokeAPIError
from pokedexcli.commands import CommandError, Config, get_commands

_TIMEOUT_SECONDS = 5.0
_CACHE_INTERVAL_SECONDS = 5 * 60.0


def clean_input(text: str) -> list[str]:
    """Lower-case ``text`` and split it into words."""
    return text.lower().split()


def start_repl(cfg: Config) -> None:
    """Read commands from standard input and run them until input ends."""
    commands = get_commands()
    while True:
        print("Pokedex > ", end="", flush=True)
        line = sys.stdin.readline()
        if not line:
            return
        words = clean_input(line)
        if not words:
            continue
        cmd = commands.get(words[0])
        if cmd is None:
            print("Unknown command")
            continue
        try:
            cmd.callback(cfg, *words[1:])
        except (CommandError, PokeAPIError) as err:
            print(err)


def main(argv: list[str] | None = None) -> int:
    """Start the Pokedex prompt."""
    with Client(_TIMEOUT_SECONDS, _CACHE_INTERVAL_SECONDS) as client:
        start_repl(Config(client=client))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())