# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
import collections.abc
import typing

from .events import MODIFIER_KEYS, Keystroke

TEXT_ENTRY_TAGS = ("input", "textarea")

_MISSING = object()


def event_attribute(event: typing.Any, name: str, default: typing.Any = None):
    "Look up an attribute on either a KeyboardEvent-like object or a plain mapping."
    if isinstance(event, collections.abc.Mapping):
        return event.get(name, default)
    return getattr(event, name, default)


def _strictly_equal(expected: typing.Any, actual: typing.Any) -> bool:
    # True == 1 in Python; a descriptor asking for a flag should not match a count
    if isinstance(expected, bool) or isinstance(actual, bool):
        return type(expected) is type(actual) and expected == actual
    return expected == actual


def matches(event: typing.Any, descriptor: Keystroke) -> bool:
    for name, expected in descriptor.items():
        actual = event_attribute(event, name, _MISSING)
        if actual is _MISSING or not _strictly_equal(expected, actual):
            return False
    return True


def is_from_text_entry(event: typing.Any, tags: collections.abc.Iterable[str] = TEXT_ENTRY_TAGS) -> bool:
    target_tag = event_attribute(event, "target_tag")
    if not target_tag:
        return False
    target_tag = target_tag.upper()
    return any(target_tag == tag.upper() for tag in tags)


def is_modifier_only(event: typing.Any) -> bool:
    return event_attribute(event, "key") in MODIFIER_KEYS
