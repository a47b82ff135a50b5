"""HTTP client for the PokeAPI, with a response cache."""

from __future__ import annotations

import json
import urllib.error
import urllib.request
from typing import Any

from pokedexcli.cache import Cache
from pokedexcli.models import LocationArea, LocationPage, Pokemon

BASE_URL = "https://pokeapi.co/api/v2"


class PokeAPIError(Exception):
    """A request to the PokeAPI failed or returned something unreadable."""


class Client:
    """PokeAPI client.

    ``timeout`` and ``cache_interval`` are in seconds.
    """

    def __init__(self, timeout: float, cache_interval: float) -> None:
        self.timeout = timeout
        self.cache = Cache(cache_interval)

    def fetch(self, url: str) -> bytes:
        """Return the body at ``url``, from the cache if it holds it."""
        cached = self.cache.get(url)
        if cached is not None:
            return cached
        return self._get(url)

    def _get(self, url: str) -> bytes:
        request = urllib.request.Request(url, method="GET")
        try:
            with urllib.request.urlopen(request, timeout=self.timeout) as resp:
                if resp.status != 200:
                    raise PokeAPIError(_status_message(resp.status, resp.reason))
                return resp.read()
        except urllib.error.HTTPError as err:
            raise PokeAPIError(_status_message(err.code, err.reason)) from err
        except (urllib.error.URLError, OSError, ValueError) as err:
            raise PokeAPIError(str(err)) from err

    def _fetch_json(self, url: str) -> Any:
        try:
            data = self.fetch(url)
        except PokeAPIError as err:
            raise PokeAPIError(f"cached request failed: {err}") from err
        try:
            return json.loads(data)
        except ValueError as err:
            raise PokeAPIError(f"response decoding failed: {err}") from err

    def list_locations(self, page_url: str | None) -> LocationPage:
        """Return a page of location areas; the first page when no URL is given."""
        url = page_url or BASE_URL + "/location-area"
        data = self.fetch(url)
        try:
            return LocationPage.from_dict(json.loads(data))
        except (ValueError, TypeError) as err:
            raise PokeAPIError(str(err)) from err

    def explore_location(self, url: str) -> LocationArea:
        """Return the location area at ``url``."""
        data = self._fetch_json(url)
        try:
            return LocationArea.from_dict(data)
        except TypeError as err:
            raise PokeAPIError(f"response decoding failed: {err}") from err

    def get_pokemon_details(self, url: str) -> Pokemon:
        """Return the Pokemon at ``url``."""
        data = self._fetch_json(url)
        try:
            return Pokemon.from_dict(data)
        except TypeError as err:
            raise PokeAPIError(f"response decoding failed: {err}") from err

    def close(self) -> None:
        """Stop the cache's background reaper."""
        self.cache.close()

    def __enter__(self) -> Client:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def _status_message(code: int, reason: str) -> str:
    return f"HTTP call failed, Status Code: {code} Status: {code} {reason}"