# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import collections.abc
import logging
import types
import typing

import msgspec

from .commontypes import InvalidHookError
from .events import Keystroke

logger = logging.getLogger(__name__)

HookAction = collections.abc.Callable[[], typing.Any]
EnabledGate = typing.Union[bool, collections.abc.Callable[[], bool]]


def freeze_keystroke(descriptor: Keystroke) -> Keystroke:
    if not isinstance(descriptor, collections.abc.Mapping):
        raise TypeError(f"Keystroke must be a mapping of event attributes, not {descriptor!r}")
    if isinstance(descriptor, types.MappingProxyType):
        return descriptor
    return types.MappingProxyType(dict(descriptor))


def normalize_pattern(pattern: Keystroke | collections.abc.Iterable[Keystroke]) -> tuple[Keystroke, ...]:
    "A pattern may be given as a single keystroke descriptor or as an ordered sequence of them."
    if isinstance(pattern, collections.abc.Mapping):
        return (freeze_keystroke(pattern),)
    if isinstance(pattern, str):
        raise TypeError(f"Pattern must be a keystroke mapping or a sequence of them, not {pattern!r}")
    return tuple(freeze_keystroke(step) for step in pattern)


class Hook(msgspec.Struct, frozen=True, kw_only=True):
    pattern: tuple[Keystroke, ...]
    action: HookAction
    allow_on_text_entry: bool = False
    suppress_default: bool = False
    enabled: EnabledGate = True
    name: typing.Optional[str] = None

    @classmethod
    def build(cls, pattern: Keystroke | collections.abc.Iterable[Keystroke], action: HookAction, **options):
        return cls(pattern=normalize_pattern(pattern), action=action, **options)

    def is_enabled(self) -> bool:
        if callable(self.enabled):
            return bool(self.enabled())
        return bool(self.enabled)

    @property
    def label(self) -> str:
        if self.name is not None:
            return self.name
        return getattr(self.action, "__qualname__", repr(self.action))


class HookRegistry(collections.abc.Sequence):
    """The caller's hooks, in registration order.

    A hook is identified by its index here. Patterns are normalized once, at registration; a hook whose
    pattern is empty or is not made of keystroke mappings is rejected with InvalidHookError. Enablement is
    evaluated on every call to active() and is_active(), since gates may depend on application state.
    """

    def __init__(self, hooks: collections.abc.Iterable[Hook]):
        self._hooks: tuple[Hook, ...] = tuple(hooks)
        patterns = []
        for index, hook in enumerate(self._hooks):
            try:
                pattern = normalize_pattern(hook.pattern)
            except TypeError as exc:
                raise InvalidHookError(hook, index, str(exc)) from exc
            if len(pattern) == 0:
                raise InvalidHookError(hook, index, "empty pattern")
            patterns.append(pattern)
        self._patterns: tuple[tuple[Keystroke, ...], ...] = tuple(patterns)
        logger.debug("Registered %d hooks", len(self._hooks))

    def __getitem__(self, index):
        return self._hooks[index]

    def __len__(self):
        return len(self._hooks)

    def pattern(self, index: int) -> tuple[Keystroke, ...]:
        return self._patterns[index]

    def is_active(self, index: int) -> bool:
        return self._hooks[index].is_enabled()

    def active(self) -> list[tuple[int, Hook]]:
        return [(index, hook) for index, hook in enumerate(self._hooks) if hook.is_enabled()]
