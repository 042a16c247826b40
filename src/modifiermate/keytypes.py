from __future__ import annotations

import typing

import msgspec

from .classifier import matches_modifiers_and_arrow_key, matches_modifiers_and_character, screened_flags
from .keyboard_consts import ARROW_KEY_FLAGS, ArrowKey, ModifierFlag


class KeyEvent(msgspec.Struct, frozen=True):
    modifiers: ModifierFlag
    key_code: int
    characters_ignoring_modifiers: typing.Optional[str] = None

    @classmethod
    def arrow(cls, direction: ArrowKey, modifiers: ModifierFlag | int = 0):
        "An arrow key press as Cocoa delivers it, pseudo-modifiers included."
        return cls(modifiers=ModifierFlag(modifiers) | ARROW_KEY_FLAGS, key_code=direction)

    @classmethod
    def character(cls, character: str, modifiers: ModifierFlag | int = 0, key_code: int = 0):
        return cls(modifiers=ModifierFlag(modifiers), key_code=key_code, characters_ignoring_modifiers=character)


class ModifierAnnotation(msgspec.Struct, frozen=True):
    alt: bool = False
    ctrl: bool = False
    meta: bool = False
    shift: bool = False
    capslock: bool = False
    numeric_pad: bool = False
    function: bool = False

    @classmethod
    def from_flags(cls, mask: ModifierFlag | int):
        flags = screened_flags(mask)
        return cls(
            alt=ModifierFlag.OPTION in flags,
            ctrl=ModifierFlag.CONTROL in flags,
            meta=ModifierFlag.COMMAND in flags,
            shift=ModifierFlag.SHIFT in flags,
            capslock=ModifierFlag.CAPS_LOCK in flags,
            numeric_pad=ModifierFlag.NUMERIC_PAD in flags,
            function=ModifierFlag.FUNCTION in flags,
        )


class KeyCombination(msgspec.Struct, frozen=True):
    """A modifier combination plus either a character or an arrow key.

    The modifiers are matched exactly. For arrow keys, leave NUMERIC_PAD and FUNCTION out of the
    modifiers; every arrow key press carries them anyway. For characters, remember that the
    character must already reflect shift: shift-s is KeyCombination(ModifierFlag.SHIFT, character="S").
    """

    modifiers: ModifierFlag = ModifierFlag(0)
    character: typing.Optional[str] = None
    arrow_key: typing.Optional[ArrowKey] = None

    def __post_init__(self):
        if (self.character is None) == (self.arrow_key is None):
            raise ValueError("KeyCombination needs exactly one of character or arrow_key")

    def matches(self, event: KeyEvent) -> bool:
        if self.arrow_key is not None:
            return matches_modifiers_and_arrow_key(event, self.modifiers, self.arrow_key)
        return matches_modifiers_and_character(event, self.modifiers, self.character)
