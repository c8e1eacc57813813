# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import collections.abc
import logging
import types
import typing

import msgspec

from .commontypes import MatcherClosedError
from .events import EventType, Keystroke
from .formatting import format_key
from .hooks import Hook, HookRegistry
from .predicates import is_from_text_entry, is_modifier_only, matches

logger = logging.getLogger(__name__)


class TypedKey(msgspec.Struct, frozen=True):
    event: typing.Any
    display: str


class Fired(msgspec.Struct, frozen=True):
    hook: Hook
    suppress_default: bool = False


class Advanced(msgspec.Struct, frozen=True):
    suppress_default: bool = False


class Reset(msgspec.Struct, frozen=True):
    pass


class Ignored(msgspec.Struct, frozen=True):
    pass


Resolution = Fired | Advanced | Reset | Ignored

SequenceListener = collections.abc.Callable[[tuple[TypedKey, ...]], typing.Any]
TextEntryPredicate = collections.abc.Callable[[typing.Any], bool]


class SequenceMatcher:
    """Incrementally matches a stream of keyboard events against a list of hooks.

    While idle, every registered hook is a candidate. Each consumed event narrows the candidates to the
    enabled hooks whose next keystroke it satisfies, and each of those moves one step along its pattern.
    A hook fires once the event completes its pattern and no longer candidate is still in play; among
    hooks completed by the same event, the earliest registered one wins. An event that satisfies no
    candidate resets the matcher to idle.

    Progress is kept as a mapping from hook index to the unconsumed rest of its pattern; the hooks
    themselves are never modified.
    """

    _candidates: dict[int, tuple[Keystroke, ...]]
    _typed: list[typing.Any]

    def __init__(
        self,
        hooks: collections.abc.Iterable[Hook] | HookRegistry,
        *,
        event_type: EventType | str = EventType.KEYDOWN,
        allow_early_completion: bool = False,
        on_sequence: typing.Optional[SequenceListener] = None,
        text_entry: TextEntryPredicate = is_from_text_entry,
    ):
        self.registry = hooks if isinstance(hooks, HookRegistry) else HookRegistry(hooks)
        self.event_type = EventType.parse(event_type)
        self.allow_early_completion = allow_early_completion
        self.on_sequence = on_sequence
        self.text_entry = text_entry
        self.closed = False
        self._candidates = {}
        self._typed = []

    @property
    def candidates(self) -> collections.abc.Mapping[int, tuple[Keystroke, ...]]:
        return types.MappingProxyType(self._candidates)

    @property
    def pending(self) -> bool:
        return bool(self._candidates)

    @property
    def current_sequence(self) -> tuple[TypedKey, ...]:
        return tuple(TypedKey(event=event, display=format_key(event)) for event in self._typed)

    def _pool(self) -> list[tuple[int, tuple[Keystroke, ...]]]:
        "The enabled hooks still in play, each with the rest of its pattern."
        if self._candidates:
            return [(index, suffix) for index, suffix in self._candidates.items() if self.registry.is_active(index)]
        return [(index, self.registry.pattern(index)) for index, _ in self.registry.active()]

    def _is_viable(self, hook: Hook, next_step: Keystroke, event: typing.Any, from_text_entry: bool) -> bool:
        if from_text_entry and not hook.allow_on_text_entry:
            return False
        return matches(event, next_step)

    def _notify(self):
        if self.on_sequence is not None:
            self.on_sequence(self.current_sequence)

    def _go_idle(self):
        had_sequence = bool(self._typed)
        self._candidates = {}
        self._typed = []
        if had_sequence:
            self._notify()

    def _fire(self, index: int) -> Fired:
        hook = self.registry[index]
        logger.debug("Firing hook %d (%s) after %d typed keys", index, hook.label, len(self._typed) + 1)
        # idle before the action runs, so an action that raises cannot leave us pending
        self._go_idle()
        hook.action()
        return Fired(hook=hook, suppress_default=hook.suppress_default)

    def consume(self, event: typing.Any) -> Resolution:
        if self.closed:
            raise MatcherClosedError()
        if is_modifier_only(event):
            return Ignored()

        from_text_entry = self.text_entry(event)
        survivors = [
            (index, suffix)
            for index, suffix in self._pool()
            if self._is_viable(self.registry[index], suffix[0], event, from_text_entry)
        ]

        if not survivors:
            if self._candidates:
                logger.debug("No candidate accepts %s; resetting", format_key(event))
            self._go_idle()
            return Reset()

        if self.allow_early_completion and len(survivors) == 1:
            index, suffix = survivors[0]
            if len(suffix) == 1:
                return self._fire(index)

        remaining = {index: suffix[1:] for index, suffix in survivors if len(suffix) > 1}
        if not remaining:
            # every survivor completed on this event; registration order breaks the tie
            return self._fire(survivors[0][0])

        self._candidates = remaining
        self._typed.append(event)
        logger.debug(
            "Sequence %s has %d candidates",
            " ".join(typed.display for typed in self.current_sequence),
            len(remaining),
        )
        self._notify()
        return Advanced(suppress_default=any(self.registry[index].suppress_default for index, _ in survivors))

    def clear(self):
        self._go_idle()

    def close(self):
        self._go_idle()
        self.closed = True


def create_matcher(
    hooks: collections.abc.Iterable[Hook] | HookRegistry,
    *,
    event_type: EventType | str = EventType.KEYDOWN,
    allow_early_completion: bool = False,
    on_sequence: typing.Optional[SequenceListener] = None,
    text_entry: TextEntryPredicate = is_from_text_entry,
) -> SequenceMatcher:
    return SequenceMatcher(
        hooks,
        event_type=event_type,
        allow_early_completion=allow_early_completion,
        on_sequence=on_sequence,
        text_entry=text_entry,
    )
