# filtermaker

`filtermaker` writes an item loot filter to standard output. The filter is a
fixed sequence of rules built from item lists and a few switches, all taken
from environment variables.

## Installation

```
pip install .
```

## Usage

Set the variables you want and run the command, sending the output to a file:

```
export schwings="Mirror of Kalandra
Divine Orb"
export dings="Exalted Orb"
export pings="Chaos Orb"
export uniques=""
export map_tier=14
export show_gold=true
export show_fractured_bases=false
export show_influenced_bases=true
export show_synthesized_bases=false
export show_six_link_bases=true

filter-maker > my.filter
```

The command takes no options besides `--help`; everything comes from the
environment.

### Variables

| Variable                 | Meaning                                              |
|--------------------------|------------------------------------------------------|
| `schwings`               | Item base types, one per line, for the top tier      |
| `dings`                  | Item base types, one per line, for the second tier   |
| `pings`                  | Item base types, one per line, for the third tier    |
| `uniques`                | Unique item base types, one per line                 |
| `map_tier`               | Smallest map tier to highlight (0–255)               |
| `show_gold`              | `true` to add the gold pile rules                    |
| `show_fractured_bases`   | `true` to highlight fractured items                  |
| `show_influenced_bases`  | `true` to highlight influenced items                 |
| `show_synthesized_bases` | `true` to highlight synthesized items                |
| `show_six_link_bases`    | `true` to highlight six-linked items                 |

Switches accept exactly `true`; anything else, or a missing value, counts as
`false`. A `map_tier` that is not a whole number from 0 to 255 counts as 0, and
with 0 the maps rule carries no `MapTier` condition. A switched-off rule is left
out of the filter entirely.

The tier rules are always written. A tier whose variable is unset or empty gets
no `BaseType` condition, so its rule matches every item (of unique rarity, for
the uniques tier).

### Rule order

1. Schwings (S-Tier)
2. Dings (A-Tier)
3. Pings (B-Tier)
4. Uniques (Tier 0)
5. Maps
6. Fractured, influenced, synthesized and six-linked bases, when switched on
7. Gold: a base style that continues to the next rule, then giant (1000+),
   huge (500+), large (250+), mid (100+) and small piles, when switched on

### Tiers

- **Schwings**: red text on white with a red border, a loud sound, a large red
  star on the minimap and a red beam.
- **Dings**: black text on yellow, a whoosh and a small yellow circle on the
  minimap.
- **Pings**: white text on black, no alert.
- **Uniques**: styled like schwings, matching unique rarity only.

## Using it from Python

```python
from filtermaker.config import Config
from filtermaker.cli import build_filter

config = Config.from_env({"dings": "Exalted Orb", "show_gold": "true"})
print(build_filter(config), end="")
```

Rules can also be put together by hand with the constructors of
`filtermaker.rule.Rule` (`schwing`, `ding`, `ping`, `maps`, `fractured_bases`,
`influenced_bases`, `synthesized_bases`, `six_links`, `gold`) and collected in
`filtermaker.lootfilter.Filter`; `str()` of either gives the filter text. A rule
whose fields all hold their defaults renders as nothing.

## What it does not do

The package only writes filter text. It does not read, merge or validate
existing filter files, and it does not install the filter into the game; save
the output where the game expects it yourself.