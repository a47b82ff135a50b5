import io
import sys

import pytest

from pokedexcli.commands import Config
from pokedexcli.models import Pokemon
from pokedexcli.repl import clean_input, main, start_repl


class FakeClient:
    def __init__(self, pokemon=None):
        self.pokemon = pokemon
        self.urls = []

    def get_pokemon_details(self, url):
        self.urls.append(url)
        return self.pokemon


class FixedRng:
    def randrange(self, stop):
        return stop - 1


@pytest.mark.parametrize(
    "text, expected",
    [
        ("  hello  world  ", ["hello", "world"]),
        ("", []),
        ("Charmander Bulbasaur PIKACHU", ["charmander", "bulbasaur", "pikachu"]),
    ],
)
def test_clean_input(text, expected):
    assert clean_input(text) == expected


def run(monkeypatch, cfg, text):
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))
    start_repl(cfg)


def test_unknown_command_and_blank_lines(monkeypatch, capsys):
    run(monkeypatch, Config(client=FakeClient()), "\n   \nfoo bar\n")
    out = capsys.readouterr().out
    assert out.count("Pokedex > ") == 4
    assert out.count("Unknown command\n") == 1


def test_command_error_is_printed(monkeypatch, capsys):
    run(monkeypatch, Config(client=FakeClient()), "catch\n")
    out = capsys.readouterr().out
    assert "must provide a pokemon. Example usage: catch <pokemon-name>\n" in out


def test_input_is_lower_cased(monkeypatch, capsys):
    client = FakeClient(pokemon=Pokemon(name="pikachu", base_experience=112))
    cfg = Config(client=client, rng=FixedRng())
    run(monkeypatch, cfg, "CATCH Pikachu\nINSPECT pikachu\n")
    assert client.urls == ["https://pokeapi.co/api/v2/pokemon/pikachu"]
    assert list(cfg.pokedex) == ["pikachu"]
    assert "Name: pikachu\n" in capsys.readouterr().out


def test_main_returns_at_end_of_input(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("help\n"))
    assert main() == 0
    assert "Welcome to the Pokedex!" in capsys.readouterr().out


def test_main_exit_command(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("exit\n"))
    with pytest.raises(SystemExit) as info:
        main([])
    assert info.value.code == 0
    assert capsys.readouterr().out.endswith("Closing the Pokedex... Goodbye!\n")