import collections.abc
import dataclasses
import json
import pathlib
import typing

import cattrs
import msgspec
import tomli

from .commontypes import KeystrokeSyntaxError, UnknownActionError
from .events import EventType, Keystroke
from .hooks import EnabledGate, Hook, HookAction, freeze_keystroke
from .matcher import SequenceListener, SequenceMatcher, create_matcher

MODIFIER_NAMES = {
    "meta": "meta_key",
    "cmd": "meta_key",
    "super": "meta_key",
    "alt": "alt_key",
    "option": "alt_key",
    "ctrl": "ctrl_key",
    "control": "ctrl_key",
    "shift": "shift_key",
}

# canonical spelling used when writing notation back out
MODIFIER_NOTATION = (
    ("meta_key", "meta"),
    ("alt_key", "alt"),
    ("ctrl_key", "ctrl"),
    ("shift_key", "shift"),
)

KEY_NAMES = {
    "space": " ",
    "plus": "+",
}
KEY_NOTATION = {v: k for k, v in KEY_NAMES.items()}

BINDINGS = [
    {"action": "open_launcher", "keys": "meta+; l", "suppress_default": True},
    {"action": "quit", "keys": "q"},
    {"action": "go_home", "keys": "g h"},
    {"action": "go_inbox", "keys": "g i"},
    {"action": "search", "keys": "/", "suppress_default": True},
]


def parse_keystroke(text: str) -> Keystroke:
    "Parse one step such as ``ctrl+shift+k``. Modifiers named are required; the others are don't-care."
    if text == "+":
        return freeze_keystroke({"key": "+"})
    *modifiers, key = text.split("+")
    if not key:
        raise KeystrokeSyntaxError(f"Missing key in {text!r}")
    descriptor: dict[str, typing.Any] = {}
    for modifier in modifiers:
        attribute = MODIFIER_NAMES.get(modifier.lower())
        if attribute is None:
            raise KeystrokeSyntaxError(f"Unknown modifier {modifier!r} in {text!r}")
        descriptor[attribute] = True
    descriptor["key"] = KEY_NAMES.get(key.lower(), key)
    return freeze_keystroke(descriptor)


def format_keystroke(descriptor: Keystroke) -> str:
    parts = [name for attribute, name in MODIFIER_NOTATION if descriptor.get(attribute) is True]
    key = descriptor.get("key", "")
    parts.append(KEY_NOTATION.get(key, key))
    return "+".join(parts)


class KeySequence(msgspec.Struct, frozen=True):
    steps: tuple[Keystroke, ...]

    @classmethod
    def parse(cls, text: str):
        steps = text.split()
        if not steps:
            raise KeystrokeSyntaxError("Empty key sequence")
        return cls(steps=tuple(parse_keystroke(step) for step in steps))

    def __str__(self):
        return " ".join(format_keystroke(step) for step in self.steps)


settings_converter = cattrs.Converter()
settings_converter.register_unstructure_hook(KeySequence, str)
settings_converter.register_structure_hook(KeySequence, lambda v, _: KeySequence.parse(v))
settings_converter.register_unstructure_hook(pathlib.Path, str)
settings_converter.register_structure_hook(pathlib.Path, lambda v, _: pathlib.Path(v))


@dataclasses.dataclass(kw_only=True)
class Binding:
    action: str
    keys: KeySequence
    allow_on_text_entry: bool = False
    suppress_default: bool = False


@dataclasses.dataclass(kw_only=True)
class Settings:
    _path: pathlib.Path
    event_type: EventType = EventType.KEYDOWN
    allow_early_completion: bool = False
    bindings: list[Binding] = dataclasses.field(default_factory=list)

    def build_hooks(
        self,
        actions: collections.abc.Mapping[str, HookAction],
        gates: typing.Optional[collections.abc.Mapping[str, EnabledGate]] = None,
    ) -> list[Hook]:
        gates = gates or {}
        hooks = []
        for binding in self.bindings:
            if binding.action not in actions:
                raise UnknownActionError(binding.action)
            hooks.append(
                Hook(
                    pattern=binding.keys.steps,
                    action=actions[binding.action],
                    allow_on_text_entry=binding.allow_on_text_entry,
                    suppress_default=binding.suppress_default,
                    enabled=gates.get(binding.action, True),
                    name=binding.action,
                )
            )
        return hooks

    def make_matcher(
        self,
        actions: collections.abc.Mapping[str, HookAction],
        gates: typing.Optional[collections.abc.Mapping[str, EnabledGate]] = None,
        on_sequence: typing.Optional[SequenceListener] = None,
    ) -> SequenceMatcher:
        return create_matcher(
            self.build_hooks(actions, gates),
            event_type=self.event_type,
            allow_early_completion=self.allow_early_completion,
            on_sequence=on_sequence,
        )

    def save(self, dest: typing.Optional[pathlib.Path] = None):
        if dest is None:
            dest = self._path
        raw = settings_converter.unstructure(self)
        del raw["_path"]
        with dest.open("w") as outfile:
            json.dump(raw, outfile, indent=2)

    @classmethod
    def load(cls, src: pathlib.Path):
        if src.suffix == ".toml":
            with src.open("rb") as infile:
                raw = tomli.load(infile)
        else:
            with src.open() as infile:
                raw = json.load(infile)
        raw["_path"] = src
        return settings_converter.structure(raw, cls)

    @classmethod
    def for_test(cls):
        return settings_converter.structure(
            {
                "_path": "test.settings.json",
                "event_type": "keydown",
                "allow_early_completion": False,
                "bindings": BINDINGS,
            },
            cls,
        )


settings_converter.register_structure_hook(Settings, cattrs.gen.make_dict_structure_fn(Settings, settings_converter))
