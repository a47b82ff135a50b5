"""An interactive command-line Pokedex backed by PokeAPI, with its HTTP client, cache and models."""

__version__ = "0.1.0"