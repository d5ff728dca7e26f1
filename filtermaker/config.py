"""Filter settings read from environment variables."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Mapping

from filtermaker.item import Item

_UNSIGNED = re.compile(r"\+?[0-9]+")


def _items(text: str) -> tuple[Item, ...]:
    return tuple(Item(line.strip()) for line in text.splitlines())


def _boolean(text: str) -> bool:
    return text == "true"


def _byte(text: str) -> int:
    if not _UNSIGNED.fullmatch(text):
        return 0
    number = int(text)
    return number if number <= 255 else 0


@dataclass(frozen=True)
class Config:
    """Item tiers and switches that shape the generated filter."""

    schwings: tuple[Item, ...] = ()
    dings: tuple[Item, ...] = ()
    pings: tuple[Item, ...] = ()
    uniques: tuple[Item, ...] = ()
    map_tier: int = 0
    show_gold: bool = False
    show_fractured: bool = False
    show_influenced: bool = False
    show_synthesized: bool = False
    show_six_links: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str]) -> Config:
        """Build settings from a mapping of variables; unset or invalid values use defaults.

        Item lists hold one base type per line. Switches accept exactly
        ``true`` or ``false``; the map tier must be a number from 0 to 255.
        """

        def get(key: str) -> str:
            return environ.get(key, "")

        return cls(
            schwings=_items(get("schwings")),
            dings=_items(get("dings")),
            pings=_items(get("pings")),
            uniques=_items(get("uniques")),
            map_tier=_byte(get("map_tier")),
            show_gold=_boolean(get("show_gold")),
            show_fractured=_boolean(get("show_fractured_bases")),
            show_influenced=_boolean(get("show_influenced_bases")),
            show_synthesized=_boolean(get("show_synthesized_bases")),
            show_six_links=_boolean(get("show_six_link_bases")),
        )