# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import abc
import collections.abc
import logging
import typing
from contextlib import aclosing, asynccontextmanager
from typing import Any, AsyncIterable, cast

import trio

from .events import ALT, CONTROL, META, MODIFIER_KEYS, SHIFT, EventType, KeyboardEvent, KeyPress, RawKeyEvent
from .formatting import format_key
from .hooks import Hook
from .matcher import Advanced, Fired, SequenceListener, SequenceMatcher, create_matcher
from .predicates import event_attribute

logger = logging.getLogger(__name__)


class Section(abc.ABC):
    @abc.abstractmethod
    async def pump(self, source: trio.MemoryReceiveChannel[Any], sink: trio.MemorySendChannel[Any]): ...


# stage 1: track modifier keydown/up and turn raw presses into keydown/keypress/keyup events
class ModifierTracking(Section):
    def __init__(self):
        self.momentary_state = {
            META: False,
            ALT: False,
            CONTROL: False,
            SHIFT: False,
        }

    def _make_event(self, event: RawKeyEvent, event_type: EventType, repeat: bool = False):
        return KeyboardEvent(
            key=event.key,
            type=event_type,
            meta_key=self.momentary_state[META],
            alt_key=self.momentary_state[ALT],
            ctrl_key=self.momentary_state[CONTROL],
            shift_key=self.momentary_state[SHIFT],
            repeat=repeat,
            target_tag=event.target_tag,
        )

    async def pump(self, source: trio.MemoryReceiveChannel[RawKeyEvent], sink: trio.MemorySendChannel[KeyboardEvent]):
        async with aclosing(source), aclosing(sink):
            async for event in source:
                if event.key in self.momentary_state:
                    self.momentary_state[event.key] = event.press is not KeyPress.RELEASED
                if event.press is KeyPress.RELEASED:
                    await sink.send(self._make_event(event, EventType.KEYUP))
                    continue
                repeat = event.press is KeyPress.REPEATED
                await sink.send(self._make_event(event, EventType.KEYDOWN, repeat))
                # only keys that produce a character get a keypress
                if len(event.key) == 1 and event.key not in MODIFIER_KEYS:
                    await sink.send(self._make_event(event, EventType.KEYPRESS, repeat))


# stage 2: feed events of the matcher's type into it; absorb the ones whose default is suppressed
# once the matcher is closed, everything passes through untouched
class HookDispatch(Section):
    def __init__(self, matcher: SequenceMatcher):
        self.matcher = matcher

    def _is_watched(self, event: Any) -> bool:
        event_type = event_attribute(event, "type", EventType.KEYDOWN)
        return event_type is self.matcher.event_type or event_type == self.matcher.event_type.value

    async def pump(self, source: trio.MemoryReceiveChannel[Any], sink: trio.MemorySendChannel[Any]):
        async with aclosing(source), aclosing(sink):
            async for event in source:
                if not self._is_watched(event):
                    await sink.send(event)
                    continue
                if self.matcher.closed:
                    logger.debug("Matcher closed; passing %s through", format_key(event))
                    await sink.send(event)
                    continue
                match self.matcher.consume(event):
                    case Fired(suppress_default=True) | Advanced(suppress_default=True):
                        logger.debug("Suppressing default for %s", format_key(event))
                    case _:
                        await sink.send(event)


@asynccontextmanager
async def pump_all(first_source: AsyncIterable[Any], *sections: Section):
    async with trio.open_nursery() as nursery:
        section_input = first_source
        for section in sections:
            section_send_channel, section_receive_channel = trio.open_memory_channel(0)
            nursery.start_soon(section.pump, section_input, section_send_channel)
            section_input = section_receive_channel
        yield section_input
        nursery.cancel_scope.cancel()


@asynccontextmanager
async def bind_matcher(
    source: AsyncIterable[Any],
    matcher: SequenceMatcher,
    *,
    track_modifiers: bool = False,
):
    """Run ``matcher`` over ``source`` for the duration of the context.

    Yields the downstream keystream: every event the matcher did not absorb. On exit the pumps are cancelled
    and the matcher is closed, so it never sees another event.
    """
    sections: list[Section] = [HookDispatch(matcher)]
    if track_modifiers:
        sections.insert(0, ModifierTracking())
    try:
        async with pump_all(source, *sections) as keystream:
            yield cast(trio.MemoryReceiveChannel[KeyboardEvent], keystream)
    finally:
        matcher.close()


@asynccontextmanager
async def bind_hooks(
    source: AsyncIterable[Any],
    hooks: collections.abc.Iterable[Hook],
    *,
    event_type: EventType | str = EventType.KEYDOWN,
    allow_early_completion: bool = False,
    on_sequence: typing.Optional[SequenceListener] = None,
    track_modifiers: bool = False,
):
    matcher = create_matcher(
        hooks,
        event_type=event_type,
        allow_early_completion=allow_early_completion,
        on_sequence=on_sequence,
    )
    async with bind_matcher(source, matcher, track_modifiers=track_modifiers) as keystream:
        yield keystream
