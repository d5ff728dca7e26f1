"""Item classes, item base types and rarities that a rule can match."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


@dataclass(frozen=True)
class ItemClass:
    """An item class such as Currency."""

    name: str

    CURRENCY: ClassVar[ItemClass]

    def __str__(self) -> str:
        return self.name


ItemClass.CURRENCY = ItemClass("Currency")


@dataclass(frozen=True)
class Item:
    """An item identified by its base type."""

    base_type: str


class Rarity(Enum):
    """Item rarity; ALL matches every rarity and renders nothing."""

    ALL = ""
    COMMON = "Common"
    MAGIC = "Magic"
    RARE = "Rare"
    UNIQUE = "Unique"

    def __str__(self) -> str:
        return self.value