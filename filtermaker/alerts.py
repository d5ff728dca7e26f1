"""Sound, minimap icon and light beam alerts attached to loot filter rules."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


class _Directive(Enum):
    """Enum whose rendered form is its value; an empty value renders nothing."""

    def __str__(self) -> str:
        return self.value


class AlertBeam(_Directive):
    """Coloured light beam shown above a dropped item."""

    NONE = ""
    RED = "PlayEffect Red"
    GREEN = "PlayEffect Green"
    BLUE = "PlayEffect Blue"
    BROWN = "PlayEffect Brown"
    WHITE = "PlayEffect White"
    YELLOW = "PlayEffect Yellow"
    CYAN = "PlayEffect Cyan"
    GREY = "PlayEffect Grey"
    ORANGE = "PlayEffect Orange"
    PINK = "PlayEffect Pink"
    PURPLE = "PlayEffect Purple"

    def __str__(self) -> str:
        return self.value


class IconSize(_Directive):
    """Minimap icon size; the game numbers sizes from largest to smallest."""

    HIDDEN = ""
    SMALL = "2"
    MEDIUM = "1"
    LARGE = "0"

    def __str__(self) -> str:
        return self.value


class IconType(_Directive):
    """Minimap icon shape."""

    NONE = ""
    CIRCLE = "Circle"
    DIAMOND = "Diamond"
    HEXAGON = "Hexagon"
    SQUARE = "Square"
    STAR = "Star"
    TRIANGLE = "Triangle"
    CROSS = "Cross"
    MOON = "Moon"
    RAINDROP = "Raindrop"
    KITE = "Kite"
    PENTAGON = "Pentagon"
    UPSIDE_DOWN_HOUSE = "UpsideDownHouse"

    def __str__(self) -> str:
        return self.value


class IconColor(_Directive):
    """Minimap icon colour."""

    NONE = ""
    RED = "Red"
    GREEN = "Green"
    BLUE = "Blue"
    BROWN = "Brown"
    WHITE = "White"
    YELLOW = "Yellow"
    CYAN = "Cyan"
    GREY = "Grey"
    ORANGE = "Orange"
    PINK = "Pink"
    PURPLE = "Purple"

    def __str__(self) -> str:
        return self.value


class AlertName(_Directive):
    """Built-in alert sound, identified by its number."""

    SILENT = ""
    GONG = "1"
    HOLLOW_DRUM = "2"
    VOICE_DRUM = "3"
    VOICE_WHOOSH = "4"
    LOW_WHOOSH = "5"
    GLITTER = "6"
    TONAL_PULSE = "7"
    MECHANICAL_PULSE = "8"
    SLOW_PULSE = "9"

    def __str__(self) -> str:
        return self.value


class AlertVolume(_Directive):
    """Alert sound volume."""

    SILENT = ""
    QUIET = "100"
    NORMAL = "200"
    LOUD = "300"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class AlertIcon:
    """Minimap icon; renders nothing unless size, colour and shape are all set."""

    size: IconSize = IconSize.HIDDEN
    color: IconColor = IconColor.NONE
    icon: IconType = IconType.NONE

    NONE: ClassVar[AlertIcon]
    SMALL_YELLOW_CIRCLE: ClassVar[AlertIcon]
    BIG_RED_STAR: ClassVar[AlertIcon]
    YELLOW_STAR: ClassVar[AlertIcon]

    def __str__(self) -> str:
        if (
            self.size is IconSize.HIDDEN
            or self.color is IconColor.NONE
            or self.icon is IconType.NONE
        ):
            return ""
        return f"MinimapIcon {self.size} {self.color} {self.icon}"


AlertIcon.NONE = AlertIcon(IconSize.HIDDEN, IconColor.NONE, IconType.NONE)
AlertIcon.SMALL_YELLOW_CIRCLE = AlertIcon(IconSize.SMALL, IconColor.YELLOW, IconType.CIRCLE)
AlertIcon.BIG_RED_STAR = AlertIcon(IconSize.LARGE, IconColor.RED, IconType.STAR)
AlertIcon.YELLOW_STAR = AlertIcon(IconSize.MEDIUM, IconColor.YELLOW, IconType.STAR)


@dataclass(frozen=True)
class AlertSound:
    """Alert sound; renders nothing when either the sound or the volume is silent."""

    name: AlertName = AlertName.SILENT
    volume: AlertVolume = AlertVolume.SILENT

    LOW_WHOOSH: ClassVar[AlertSound]
    LOUD_GLITTER: ClassVar[AlertSound]
    QUIET_GONG: ClassVar[AlertSound]
    NONE: ClassVar[AlertSound]

    def __str__(self) -> str:
        if self.name is AlertName.SILENT or self.volume is AlertVolume.SILENT:
            return ""
        return f"PlayAlertSound {self.name} {self.volume}"


AlertSound.LOW_WHOOSH = AlertSound(AlertName.LOW_WHOOSH, AlertVolume.NORMAL)
AlertSound.LOUD_GLITTER = AlertSound(AlertName.GLITTER, AlertVolume.LOUD)
AlertSound.QUIET_GONG = AlertSound(AlertName.GONG, AlertVolume.QUIET)
AlertSound.NONE = AlertSound(AlertName.SILENT, AlertVolume.SILENT)