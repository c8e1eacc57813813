"""Render keyboard events as short human-readable tokens, for showing an in-progress sequence."""
import typing

from .predicates import event_attribute

# canonical order: meta, alt, control, shift
MODIFIER_SYMBOLS = (
    ("meta_key", "⌘"),
    ("alt_key", "⌥"),
    ("ctrl_key", "^"),
    ("shift_key", "⇧"),
)


def format_key(event: typing.Any) -> str:
    parts = [symbol for attribute, symbol in MODIFIER_SYMBOLS if event_attribute(event, attribute)]
    key = event_attribute(event, "key")
    if key is not None:
        parts.append(str(key))
    return "".join(parts)
