"""Location value type and parsing."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TypeAlias
from urllib.parse import urljoin, urlsplit

# Only used to resolve relative strings; never leaves this module
_BASE_URL = "http://navstack.invalid/"


@dataclass(frozen=True, slots=True)
class Location:
    """A parsed location. Immutable.

    ``search`` keeps its leading ``?`` and ``hash`` its leading ``#``;
    both are ``""`` when absent.
    """

    pathname: str = "/"
    search: str = ""
    hash: str = ""

    @property
    def href(self) -> str:
        """Location as a URL path: ``/users?page=2#top``."""
        return f"{self.pathname}{self.search}{self.hash}"


# Anything push()/replace() accept as a target
LocationLike: TypeAlias = str | Location | Mapping[str, str]

_ROOT = Location()


def parse_location(to: LocationLike, base: Location = _ROOT) -> Location:
    """Normalize a navigation target into a ``Location``.

    Strings are parsed as URLs resolved against the root, so ``"name"``
    becomes ``/name``. Mappings and ``Location`` values are merged onto
    *base*: a missing pathname is taken from *base*, a missing search or
    hash is empty.

    Examples::

        parse_location("/users?page=2#top")
        # -> Location("/users", "?page=2", "#top")
        parse_location({"search": "?q=1"}, base=Location("/users"))
        # -> Location("/users", "?q=1", "")
    """
    if isinstance(to, str):
        parts = urlsplit(urljoin(_BASE_URL, to))
        return Location(
            pathname=parts.path or "/",
            search=f"?{parts.query}" if parts.query else "",
            hash=f"#{parts.fragment}" if parts.fragment else "",
        )

    if isinstance(to, Location):
        return to

    return Location(
        pathname=to.get("pathname", base.pathname),
        search=to.get("search", ""),
        hash=to.get("hash", ""),
    )
