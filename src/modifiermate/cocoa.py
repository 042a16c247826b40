from __future__ import annotations

import enum
import logging
import typing

from .commontypes import NotAKeyEventError
from .keyboard_consts import ModifierFlag
from .keytypes import KeyEvent

logger = logging.getLogger(__name__)

# modifierFlags is an NSUInteger, but only the low 32 bits have ever been used.
MODIFIER_FLAGS_WIDTH_MASK = 0xFFFFFFFF
KEY_CODE_WIDTH_MASK = 0xFFFF


class NSEventType(enum.IntEnum):
    KEY_DOWN = 10
    KEY_UP = 11
    # A modifier key went down or up. These have a keyCode but no characters.
    FLAGS_CHANGED = 12


KEY_EVENT_TYPES = frozenset(NSEventType)


class NSEventLike(typing.Protocol):
    def type(self) -> int: ...

    def modifierFlags(self) -> int: ...

    def keyCode(self) -> int: ...

    def charactersIgnoringModifiers(self) -> typing.Optional[str]: ...


def key_event_from_nsevent(ns_event: NSEventLike) -> KeyEvent:
    """Read the parts of an NSEvent we classify on into a KeyEvent.

    Works for keyDown, keyUp and flagsChanged events. Cocoa raises if a flagsChanged event is asked
    for its characters, so those come through with no character. Any other event type, or anything
    without the accessors, raises NotAKeyEventError.
    """
    try:
        event_type = ns_event.type()
        if event_type not in KEY_EVENT_TYPES:
            raise NotAKeyEventError(ns_event)
        modifier_flags = ns_event.modifierFlags()
        key_code = ns_event.keyCode()
        if event_type == NSEventType.FLAGS_CHANGED:
            characters = None
        else:
            characters = ns_event.charactersIgnoringModifiers()
    except AttributeError as exc:
        raise NotAKeyEventError(ns_event) from exc
    # PyObjC hands us an NSString; we want a plain str, and no empty strings.
    characters = str(characters) if characters else None
    key_event = KeyEvent(
        modifiers=ModifierFlag(modifier_flags & MODIFIER_FLAGS_WIDTH_MASK),
        key_code=key_code & KEY_CODE_WIDTH_MASK,
        characters_ignoring_modifiers=characters,
    )
    logger.debug("ns event %r -> %r", ns_event, key_event)
    return key_event
