"""Pad button flags and analog stick normalisation."""

from __future__ import annotations

import enum
from dataclasses import dataclass

_MID = 128
_DEADZONE = 16
_RANGE = 127.0


class Buttons(enum.IntFlag):
    """Pad button bits."""

    NONE = 0
    SELECT = 0x000001
    START = 0x000008
    UP = 0x000010
    RIGHT = 0x000020
    DOWN = 0x000040
    LEFT = 0x000080
    LTRIGGER = 0x000100
    RTRIGGER = 0x000200
    TRIANGLE = 0x001000
    CIRCLE = 0x002000
    CROSS = 0x004000
    SQUARE = 0x008000
    HOME = 0x010000
    HOLD = 0x020000
    WLAN_UP = 0x040000
    REMOTE = 0x080000
    VOLUP = 0x100000
    VOLDOWN = 0x200000
    SCREEN = 0x400000
    NOTE = 0x800000
    DISC = 0x1000000
    MS = 0x2000000


@dataclass(frozen=True)
class PadState:
    """Buttons held and the stick position, each axis in about -1..1."""

    buttons: Buttons = Buttons.NONE
    analog: tuple[float, float] = (0.0, 0.0)


def normalize_axis(raw: int) -> float:
    """Map a raw 0..255 stick reading to a float, zero inside the dead zone."""
    if not 0 <= raw <= 255:
        raise ValueError(f"analog reading out of range: {raw}")
    offset = raw - _MID
    return offset / _RANGE if abs(offset) > _DEADZONE else 0.0


def read_pad(buttons: int, lx: int, ly: int) -> PadState:
    """Build a pad state from raw button bits and stick readings."""
    return PadState(Buttons(buttons), (normalize_axis(lx), normalize_axis(ly)))