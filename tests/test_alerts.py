import pytest

from filtermaker.alerts import (
    AlertBeam,
    AlertIcon,
    AlertName,
    AlertSound,
    AlertVolume,
    IconColor,
    IconSize,
    IconType,
)


def test_beam_none_renders_empty():
    assert AlertBeam.__str__(AlertBeam.NONE) == ""


@pytest.mark.parametrize(
    "beam, text",
    [
        (AlertBeam.RED, "PlayEffect Red"),
        (AlertBeam.CYAN, "PlayEffect Cyan"),
        (AlertBeam.PURPLE, "PlayEffect Purple"),
    ],
)
def test_beam_renders_effect(beam, text):
    assert str(beam) == text


def test_every_visible_beam_is_a_play_effect():
    for beam in AlertBeam:
        if beam is not AlertBeam.NONE:
            assert AlertBeam.__str__(beam).startswith("PlayEffect ")


def test_icon_sizes_are_numbered_largest_first():
    def render(size):
        return str(AlertIcon(size, IconColor.RED, IconType.STAR))

    assert render(IconSize.LARGE) == "MinimapIcon 0 Red Star"
    assert render(IconSize.MEDIUM) == "MinimapIcon 1 Red Star"
    assert render(IconSize.SMALL) == "MinimapIcon 2 Red Star"
    assert render(IconSize.HIDDEN) == ""


def test_icon_type_names():
    house = AlertIcon(IconSize.SMALL, IconColor.RED, IconType.UPSIDE_DOWN_HOUSE)
    assert str(house) == "MinimapIcon 2 Red UpsideDownHouse"
    assert IconType.__str__(IconType.NONE) == ""


def test_icon_color_matches_beam_colour_name():
    for color in IconColor:
        if color is not IconColor.NONE:
            beam = AlertBeam[color.name]
            assert AlertBeam.__str__(beam) == "PlayEffect " + IconColor.__str__(color)


def test_alert_icon_renders_minimap_icon():
    icon = AlertIcon(IconSize.LARGE, IconColor.RED, IconType.STAR)
    assert icon == AlertIcon.BIG_RED_STAR
    assert str(icon) == "MinimapIcon 0 Red Star"


def test_alert_icon_contains_its_parts():
    icon = AlertIcon(IconSize.SMALL, IconColor.YELLOW, IconType.CIRCLE)
    assert icon == AlertIcon.SMALL_YELLOW_CIRCLE
    assert str(icon).split() == ["MinimapIcon", "2", "Yellow", "Circle"]


@pytest.mark.parametrize(
    "icon",
    [
        AlertIcon.NONE,
        AlertIcon(IconSize.HIDDEN, IconColor.RED, IconType.STAR),
        AlertIcon(IconSize.LARGE, IconColor.NONE, IconType.STAR),
        AlertIcon(IconSize.LARGE, IconColor.RED, IconType.NONE),
    ],
)
def test_incomplete_icon_renders_empty(icon):
    assert str(icon) == ""


def test_icon_equality():
    assert AlertIcon(IconSize.MEDIUM, IconColor.YELLOW, IconType.STAR) == AlertIcon.YELLOW_STAR
    assert AlertIcon() == AlertIcon.NONE


def test_alert_name_and_volume_values():
    assert str(AlertSound(AlertName.GONG, AlertVolume.LOUD)) == "PlayAlertSound 1 300"
    assert str(AlertSound(AlertName.SLOW_PULSE, AlertVolume.QUIET)) == "PlayAlertSound 9 100"
    assert AlertName.__str__(AlertName.SILENT) == ""
    assert AlertVolume.__str__(AlertVolume.SILENT) == ""


def test_sound_renders_name_and_volume():
    whoosh = AlertSound(AlertName.LOW_WHOOSH, AlertVolume.NORMAL)
    assert whoosh == AlertSound.LOW_WHOOSH
    assert AlertSound.__str__(whoosh) == "PlayAlertSound 5 200"
    gong = AlertSound(AlertName.GONG, AlertVolume.QUIET)
    assert gong == AlertSound.QUIET_GONG
    assert AlertSound.__str__(gong).split() == ["PlayAlertSound", "1", "100"]


@pytest.mark.parametrize(
    "sound",
    [
        AlertSound.NONE,
        AlertSound(AlertName.GLITTER, AlertVolume.SILENT),
        AlertSound(AlertName.SILENT, AlertVolume.LOUD),
    ],
)
def test_silent_sound_renders_empty(sound):
    assert str(sound) == ""


def test_sound_is_immutable():
    sound = AlertSound(AlertName.GLITTER, AlertVolume.LOUD)
    with pytest.raises(AttributeError):
        sound.volume = AlertVolume.QUIET
    assert sound.volume is AlertVolume.LOUD
    assert str(sound) == "PlayAlertSound 6 300"