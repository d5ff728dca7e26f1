"""A whole loot filter: an ordered list of rules."""

from __future__ import annotations

from dataclasses import dataclass

from filtermaker.rule import Rule


@dataclass(frozen=True)
class Filter:
    """Ordered rules, rendered one after another followed by a blank line."""

    rules: tuple[Rule, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "rules", tuple(self.rules))

    def __str__(self) -> str:
        return "".join(str(rule) for rule in self.rules) + "\n"