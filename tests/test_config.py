import pytest

from filtermaker.config import Config
from filtermaker.item import Item


def test_empty_environment_gives_defaults():
    assert Config.from_env({}) == Config()


def test_items_are_split_by_line_and_trimmed():
    config = Config.from_env({"schwings": "  Mirror of Kalandra \nDivine Orb\n"})
    assert config.schwings == (Item("Mirror of Kalandra"), Item("Divine Orb"))
    assert config.dings == ()


def test_each_item_list_has_its_own_key():
    config = Config.from_env(
        {"schwings": "A", "dings": "B", "pings": "C", "uniques": "D"}
    )
    assert (config.schwings, config.dings, config.pings, config.uniques) == (
        (Item("A"),),
        (Item("B"),),
        (Item("C"),),
        (Item("D"),),
    )


@pytest.mark.parametrize(
    "value, expected",
    [("true", True), ("false", False), ("True", False), ("yes", False), ("", False)],
)
def test_boolean_parsing(value, expected):
    assert Config.from_env({"show_gold": value}).show_gold is expected


def test_switch_keys():
    config = Config.from_env(
        {
            "show_fractured_bases": "true",
            "show_influenced_bases": "true",
            "show_synthesized_bases": "true",
            "show_six_link_bases": "true",
        }
    )
    assert config.show_fractured and config.show_influenced
    assert config.show_synthesized and config.show_six_links
    assert config.show_gold is False


@pytest.mark.parametrize(
    "value, expected",
    [("16", 16), ("255", 255), ("+5", 5), ("256", 0), ("-1", 0), (" 5", 0), ("abc", 0)],
)
def test_map_tier_parsing(value, expected):
    assert Config.from_env({"map_tier": value}).map_tier == expected