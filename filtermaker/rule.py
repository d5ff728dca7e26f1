"""Loot filter rules: what a rule matches and how matching items are shown."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import ClassVar, Iterable

from filtermaker import color
from filtermaker.color import Color
from filtermaker.effect import Effect
from filtermaker.item import Item, ItemClass, Rarity


def _render(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _directive(prefix: str, value: object, default: object) -> str:
    """Render ``prefix value``, or nothing when the value is its default."""
    if value == default:
        return ""
    return f"{prefix} {_render(value)}"


def _quoted(keyword: str, names: Iterable[str]) -> str:
    names = list(names)
    if not names:
        return ""
    return f"{keyword} " + " ".join(f'"{name}"' for name in names)


@dataclass(frozen=True)
class Rule:
    """One Show/Hide block of a loot filter.

    A rule whose fields all hold their defaults renders as nothing, which is
    how a switched-off rule drops out of the filter.
    """

    hide: bool = False
    name: str = ""
    classes: tuple[ItemClass, ...] = ()
    items: tuple[Item, ...] = ()
    rarity: Rarity = Rarity.ALL
    map_tier: int = 0
    area_level: int = 0
    fractured: bool = False
    influenced: bool = False
    synthesized: bool = False
    links: int = 0
    stack_size: int = 0
    text_color: Color = field(default_factory=Color)
    bg_color: Color = field(default_factory=Color)
    outline_color: Color = field(default_factory=Color)
    font_size: int = 0
    effect: Effect = field(default_factory=Effect)
    finalize: bool = False

    INFLUENCED: ClassVar[str] = "HasInfluence Crusader Elder Hunter Redeemer Shaper Warlord"

    def __post_init__(self) -> None:
        object.__setattr__(self, "classes", tuple(self.classes))
        object.__setattr__(self, "items", tuple(self.items))

    @classmethod
    def _new(
        cls,
        name: str,
        classes: Iterable[ItemClass] = (),
        items: Iterable[Item] = (),
        rarity: Rarity = Rarity.ALL,
    ) -> Rule:
        return cls(
            name=name,
            classes=tuple(classes),
            items=tuple(items),
            rarity=rarity,
            text_color=color.WHITE,
            bg_color=color.BLACK,
            font_size=24,
            finalize=True,
        )

    def _only_if(self, condition: bool) -> Rule:
        return self if condition else type(self)()

    @classmethod
    def ding(cls, name, classes, items, rarity) -> Rule:
        """A-tier rule: yellow label with a small icon and a low whoosh."""
        return replace(
            cls._new(name, classes, items, rarity),
            text_color=color.BLACK,
            bg_color=color.YELLOW,
            outline_color=color.TRANSPARENT,
            effect=Effect.NORMAL_DROP,
        )

    @classmethod
    def schwing(cls, name, classes, items, rarity) -> Rule:
        """S-tier rule: red and white label, big icon, loud sound and a red beam."""
        return replace(
            cls._new(name, classes, items, rarity),
            text_color=color.RED,
            bg_color=color.WHITE,
            outline_color=color.RED,
            effect=Effect.BIG_DROP,
        )

    @classmethod
    def ping(cls, name, classes, items, rarity) -> Rule:
        """B-tier rule with the plain default style."""
        return cls._new(name, classes, items, rarity)

    @classmethod
    def maps(cls, map_tier) -> Rule:
        """Show maps of at least the given tier."""
        return replace(cls._new("Maps"), map_tier=map_tier)

    @classmethod
    def influenced_bases(cls, show_rule) -> Rule:
        """Show influenced bases, or an empty rule when switched off."""
        return replace(cls._new("Influenced Bases"), influenced=True)._only_if(show_rule)

    @classmethod
    def synthesized_bases(cls, show_rule) -> Rule:
        """Show synthesized bases, or an empty rule when switched off."""
        return replace(cls._new("Synthesized Bases"), synthesized=True)._only_if(show_rule)

    @classmethod
    def fractured_bases(cls, show_rule) -> Rule:
        """Show fractured bases, or an empty rule when switched off."""
        return replace(cls._new("Fractured Bases"), fractured=True)._only_if(show_rule)

    @classmethod
    def six_links(cls, show_rule) -> Rule:
        """Show six-linked bases, or an empty rule when switched off."""
        return replace(cls._new("Six Linked Bases"), links=6)._only_if(show_rule)

    @classmethod
    def gold(cls, show_rule) -> list[Rule]:
        """Gold styling rules, sized by pile; an empty list when switched off."""
        if not show_rule:
            return []
        gold_items = (Item("Gold"),)
        return [
            replace(
                cls._new("Gold (base style)", (), gold_items),
                text_color=color.BLACK,
                bg_color=color.YELLOW,
                outline_color=color.YELLOW,
                font_size=18,
                finalize=False,
            ),
            replace(
                cls._new("Gold (giant pile)", (), gold_items),
                stack_size=1000,
                font_size=32,
                effect=Effect.GOLD_PILE,
            ),
            replace(cls._new("Gold (huge pile)", (), gold_items), stack_size=500, font_size=28),
            replace(cls._new("Gold (large pile)", (), gold_items), stack_size=250, font_size=24),
            replace(cls._new("Gold (mid pile)", (), gold_items), stack_size=100, font_size=20),
            replace(cls._new("Gold (small pile)", (), gold_items), stack_size=1),
        ]

    def is_default(self) -> bool:
        """Whether every field holds its default, so the rule renders nothing."""
        return self == type(self)()

    def __str__(self) -> str:
        if self.is_default():
            return ""
        blank = Color()
        lines = [
            f"{'Hide' if self.hide else 'Show'} # {self.name}",
            _quoted("Class", (item_class.name for item_class in self.classes)),
            _quoted("BaseType", (item.base_type for item in self.items)),
            _directive("Rarity", self.rarity, Rarity.ALL),
            _directive("MapTier >=", self.map_tier, 0),
            _directive("AreaLevel", self.area_level, 0),
            _directive("FracturedItem", self.fractured, False),
            _directive(self.INFLUENCED, self.influenced, False),
            _directive("SynthesizedItem", self.synthesized, False),
            _directive("LinkedSockets", self.links, 0),
            _directive("StackSize >=", self.stack_size, 0),
            _directive("SetFontSize", self.font_size, 0),
            _directive("SetTextColor", self.text_color, blank),
            _directive("SetBackgroundColor", self.bg_color, blank),
            _directive("SetBorderColor", self.outline_color, blank),
            str(self.effect),
            "" if self.finalize else "Continue",
        ]
        return "".join(line + "\n" for line in lines if line) + "\n"