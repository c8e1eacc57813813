from __future__ import annotations

import enum
import typing

import msgspec

from .commontypes import UnsupportedEventTypeError

META = "Meta"
ALT = "Alt"
CONTROL = "Control"
SHIFT = "Shift"
MODIFIER_KEYS = frozenset((META, ALT, CONTROL, SHIFT))


@enum.unique
class EventType(enum.Enum):
    KEYDOWN = "keydown"
    KEYUP = "keyup"
    KEYPRESS = "keypress"

    @classmethod
    def parse(cls, value: EventType | str) -> EventType:
        if isinstance(value, EventType):
            return value
        try:
            return cls(value)
        except ValueError:
            raise UnsupportedEventTypeError(value) from None


class KeyPress(enum.IntEnum):
    RELEASED = 0
    PRESSED = 1
    REPEATED = 2


class RawKeyEvent(msgspec.Struct, frozen=True):
    key: str
    press: KeyPress
    target_tag: typing.Optional[str] = None

    @classmethod
    def pressed(cls, key: str, target_tag: typing.Optional[str] = None):
        return cls(key=key, press=KeyPress.PRESSED, target_tag=target_tag)

    @classmethod
    def released(cls, key: str, target_tag: typing.Optional[str] = None):
        return cls(key=key, press=KeyPress.RELEASED, target_tag=target_tag)


class KeyboardEvent(msgspec.Struct, frozen=True, kw_only=True):
    key: str
    type: EventType = EventType.KEYDOWN
    meta_key: bool = False
    alt_key: bool = False
    ctrl_key: bool = False
    shift_key: bool = False
    repeat: bool = False
    target_tag: typing.Optional[str] = None


# A keystroke descriptor: event attribute name to expected value. Attributes not named are don't-care.
Keystroke = typing.Mapping[str, typing.Any]
