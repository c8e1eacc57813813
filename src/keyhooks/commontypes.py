# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
import typing

if typing.TYPE_CHECKING:
    from .hooks import Hook


class KeyhooksError(Exception):
    pass


class InvalidHookError(KeyhooksError, ValueError):
    def __init__(self, hook: "Hook", index: int, reason: str):
        self.hook = hook
        self.index = index
        self.reason = reason
        super().__init__(f"Hook {index} ({hook.label}) is invalid: {reason}")


class UnsupportedEventTypeError(KeyhooksError, ValueError):
    def __init__(self, event_type: str):
        self.event_type = event_type
        super().__init__(f"Unsupported event type {event_type!r}; expected keydown, keyup or keypress")


class MatcherClosedError(KeyhooksError):
    def __init__(self):
        return super().__init__("Matcher has been closed")


class KeystrokeSyntaxError(KeyhooksError, ValueError):
    pass


class UnknownActionError(KeyhooksError, KeyError):
    pass
