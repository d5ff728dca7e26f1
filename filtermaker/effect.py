"""Combined sound, icon and beam effect of a loot filter rule."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from filtermaker.alerts import AlertBeam, AlertIcon, AlertSound


@dataclass(frozen=True)
class Effect:
    """Sound, minimap icon and beam, rendered one per line, skipping empty ones."""

    alert_sound: AlertSound = AlertSound.NONE
    alert_icon: AlertIcon = AlertIcon.NONE
    alert_beam: AlertBeam = AlertBeam.NONE

    NONE: ClassVar[Effect]
    NORMAL_DROP: ClassVar[Effect]
    BIG_DROP: ClassVar[Effect]
    GOLD_PILE: ClassVar[Effect]

    def __str__(self) -> str:
        lines = (str(self.alert_sound), str(self.alert_icon), str(self.alert_beam))
        return "\n".join(line for line in lines if line)


Effect.NONE = Effect(AlertSound.NONE, AlertIcon.NONE, AlertBeam.NONE)
Effect.NORMAL_DROP = Effect(AlertSound.LOW_WHOOSH, AlertIcon.SMALL_YELLOW_CIRCLE, AlertBeam.NONE)
Effect.BIG_DROP = Effect(AlertSound.LOUD_GLITTER, AlertIcon.BIG_RED_STAR, AlertBeam.RED)
Effect.GOLD_PILE = Effect(AlertSound.QUIET_GONG, AlertIcon.YELLOW_STAR, AlertBeam.NONE)