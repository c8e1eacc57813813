# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later

# Keyboard event stages
# host level:
# stage 0: platform-specific; watch the keyboard and issue a raw keystream, or issue a pre-recorded one

# keyhooks level:
# stage 1: track modifier keydown/up and emit keydown/keypress/keyup events
# stage 2: run events of one type through a SequenceMatcher, firing hooks and absorbing suppressed events
from .commontypes import (
    InvalidHookError,
    KeyhooksError,
    KeystrokeSyntaxError,
    MatcherClosedError,
    UnknownActionError,
    UnsupportedEventTypeError,
)
from .events import EventType, KeyboardEvent, KeyPress, RawKeyEvent
from .formatting import format_key
from .hooks import Hook, HookRegistry
from .matcher import Advanced, Fired, Ignored, Reset, Resolution, SequenceMatcher, TypedKey, create_matcher
from .predicates import is_from_text_entry, is_modifier_only, matches
