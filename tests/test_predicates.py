import pytest

from keyhooks.events import EventType, KeyboardEvent
from keyhooks.formatting import format_key
from keyhooks.predicates import is_from_text_entry, is_modifier_only, matches


@pytest.mark.parametrize(
    "event,descriptor,expected",
    (
        (KeyboardEvent(key="q"), {"key": "q"}, True),
        (KeyboardEvent(key="q"), {}, True),
        (KeyboardEvent(key="q", meta_key=True), {"key": "q"}, True),
        (KeyboardEvent(key="q"), {"key": "q", "meta_key": True}, False),
        (KeyboardEvent(key="Q", shift_key=True), {"key": "q"}, False),
        (KeyboardEvent(key=";", meta_key=True), {"key": ";", "meta_key": True}, True),
        (KeyboardEvent(key="q"), {"key": "q", "code": "KeyQ"}, False),
        (KeyboardEvent(key="q", type=EventType.KEYUP), {"type": EventType.KEYUP}, True),
        (KeyboardEvent(key="q", meta_key=True), {"meta_key": 1}, False),
        ({"key": "q", "repeat": 1}, {"repeat": True}, False),
        ({"key": "q"}, {"key": "q"}, True),
    ),
)
def test_matches(event, descriptor, expected):
    assert matches(event, descriptor) is expected


@pytest.mark.parametrize(
    "target_tag,expected",
    (
        ("input", True),
        ("INPUT", True),
        ("TextArea", True),
        ("div", False),
        ("body", False),
        (None, False),
    ),
)
def test_is_from_text_entry(target_tag, expected):
    assert is_from_text_entry(KeyboardEvent(key="a", target_tag=target_tag)) is expected


def test_is_from_text_entry_custom_tags():
    event = KeyboardEvent(key="a", target_tag="select")
    assert not is_from_text_entry(event)
    assert is_from_text_entry(event, tags=("SELECT",))


@pytest.mark.parametrize(
    "key,expected",
    (
        ("Meta", True),
        ("Alt", True),
        ("Control", True),
        ("Shift", True),
        ("m", False),
        ("Enter", False),
    ),
)
def test_is_modifier_only(key, expected):
    assert is_modifier_only(KeyboardEvent(key=key)) is expected


@pytest.mark.parametrize(
    "event,expected",
    (
        (KeyboardEvent(key="q"), "q"),
        (KeyboardEvent(key=";", meta_key=True), "⌘;"),
        (KeyboardEvent(key="K", shift_key=True, ctrl_key=True), "^⇧K"),
        (KeyboardEvent(key="x", shift_key=True, ctrl_key=True, alt_key=True, meta_key=True), "⌘⌥^⇧x"),
        (KeyboardEvent(key="Enter", alt_key=True), "⌥Enter"),
        ({"key": "l"}, "l"),
        ({}, ""),
    ),
)
def test_format_key(event, expected):
    assert format_key(event) == expected
