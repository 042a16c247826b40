# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
import enum

# Cocoa reports modifier state in the high 16 bits of NSEvent.modifierFlags.
# The low 16 bits are device-dependent (left vs right shift and so on) and
# vary by keyboard, so they are never compared.
DEVICE_INDEPENDENT_FLAGS_MASK = 0xFFFF0000


class ModifierFlag(enum.IntFlag):
    # Set while caps lock is engaged.
    CAPS_LOCK = 1 << 16
    SHIFT = 1 << 17
    CONTROL = 1 << 18
    # Option is labelled Alt on some keyboards.
    OPTION = 1 << 19
    COMMAND = 1 << 20
    # Pseudo-modifier: the key is on the numeric keypad, or is an arrow key.
    NUMERIC_PAD = 1 << 21
    HELP = 1 << 22
    # Pseudo-modifier: the key is a function key (F1, arrows, page up, etc).
    FUNCTION = 1 << 23


# Every arrow key press carries both of these, whether or not the user is
# holding anything.
ARROW_KEY_FLAGS = ModifierFlag.NUMERIC_PAD | ModifierFlag.FUNCTION


# These are Carbon virtual key codes (kVK_LeftArrow and friends); they name
# physical keys, so they do not change with the keyboard layout.
class ArrowKey(enum.IntEnum):
    LEFT = 123
    RIGHT = 124
    DOWN = 125
    UP = 126


ARROW_KEY_CODES = frozenset(ArrowKey)
