"""Command that prints a loot filter built from environment settings."""

from __future__ import annotations

import argparse
import os
import sys

from filtermaker.config import Config
from filtermaker.item import Rarity
from filtermaker.lootfilter import Filter
from filtermaker.rule import Rule


def build_filter(config: Config) -> Filter:
    """Assemble the full filter from the given settings."""
    rules = [
        Rule.schwing("Schwings (S-Tier)", (), config.schwings, Rarity.ALL),
        Rule.ding("Dings (A-Tier)", (), config.dings, Rarity.ALL),
        Rule.ping("Pings (B-Tier)", (), config.pings, Rarity.ALL),
        Rule.schwing("Uniques (Tier 0)", (), config.uniques, Rarity.UNIQUE),
        Rule.maps(config.map_tier),
        Rule.fractured_bases(config.show_fractured),
        Rule.influenced_bases(config.show_influenced),
        Rule.synthesized_bases(config.show_synthesized),
        Rule.six_links(config.show_six_links),
        *Rule.gold(config.show_gold),
    ]
    return Filter(rules)


def main(argv=None) -> int:
    """Print the filter built from the process environment."""
    parser = argparse.ArgumentParser(
        prog="filtermaker",
        description="Print a loot filter configured through environment variables.",
    )
    parser.parse_args(argv)
    sys.stdout.write(str(build_filter(Config.from_env(os.environ))))
    return 0


if __name__ == "__main__":
    sys.exit(main())