# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

from typing import TYPE_CHECKING

from .keyboard_consts import ARROW_KEY_CODES, ARROW_KEY_FLAGS, DEVICE_INDEPENDENT_FLAGS_MASK, ArrowKey, ModifierFlag

if TYPE_CHECKING:
    from .keytypes import KeyEvent


# All mask arithmetic here is and/or/and-not on non-negative ints. Subtracting one flag set
# from another only works when the subtrahend is a subset, so we never do it.


def is_arrow_key_code(code: int) -> bool:
    return code in ARROW_KEY_CODES


def screened_flags(mask: ModifierFlag | int) -> ModifierFlag:
    "Drop the device-dependent bits, leaving only the ones worth comparing."
    return ModifierFlag(int(mask) & DEVICE_INDEPENDENT_FLAGS_MASK)


def contains_modifiers(event: KeyEvent, required_mask: ModifierFlag | int) -> bool:
    "True if at least the required modifiers are held, whatever else is."
    return screened_flags(event.modifiers) & required_mask == required_mask


def matches_any_arrow_key(event: KeyEvent) -> bool:
    """True for an arrow key pressed with no modifiers held.

    Cocoa still sets NUMERIC_PAD and FUNCTION on a bare arrow key press, so those two (and only
    those two) must be present.
    """
    return is_arrow_key_code(event.key_code) and screened_flags(event.modifiers) == ARROW_KEY_FLAGS


def contains_any_arrow_key(event: KeyEvent) -> bool:
    "Like matches_any_arrow_key, but shift-up, option-left and so on count too."
    return is_arrow_key_code(event.key_code) and contains_modifiers(event, ARROW_KEY_FLAGS)


def matches_arrow_key(event: KeyEvent, direction: ArrowKey) -> bool:
    return matches_any_arrow_key(event) and event.key_code == direction


def matches_arrow_down_key(event: KeyEvent) -> bool:
    return matches_arrow_key(event, ArrowKey.DOWN)


def matches_arrow_up_key(event: KeyEvent) -> bool:
    return matches_arrow_key(event, ArrowKey.UP)


def matches_arrow_left_key(event: KeyEvent) -> bool:
    return matches_arrow_key(event, ArrowKey.LEFT)


def matches_arrow_right_key(event: KeyEvent) -> bool:
    return matches_arrow_key(event, ArrowKey.RIGHT)


def matches_modifiers_and_character(event: KeyEvent, required_mask: ModifierFlag | int, required_char: str) -> bool:
    """True if the screened modifiers are exactly required_mask and the character is required_char.

    charactersIgnoringModifiers does not ignore shift: shift-s arrives as "S" but option-s arrives
    as "s". To match shift-option-s, pass ModifierFlag.SHIFT | ModifierFlag.OPTION and "S".
    No case folding happens here, and required_char must be exactly one character.
    """
    if len(required_char) != 1:
        return False
    if screened_flags(event.modifiers) != required_mask:
        return False
    # Pure modifier presses and dead keys carry no character at all.
    if not event.characters_ignoring_modifiers:
        return False
    return event.characters_ignoring_modifiers == required_char


def matches_modifiers_and_arrow_key(event: KeyEvent, required_mask: ModifierFlag | int, required_arrow_code: int) -> bool:
    """True if the given arrow key was pressed with exactly required_mask held.

    required_mask should not include NUMERIC_PAD or FUNCTION; they are removed from the event's
    modifiers before comparing. Pass ModifierFlag(0) for a bare arrow key.
    """
    flags = screened_flags(event.modifiers)
    # Without both pseudo-modifiers this can't be an arrow key press.
    if flags & ARROW_KEY_FLAGS != ARROW_KEY_FLAGS:
        return False
    # Both bits are known to be set, so xor clears exactly those two.
    remaining = flags ^ ARROW_KEY_FLAGS
    return remaining == required_mask and event.key_code == required_arrow_code
