import msgspec
import pytest

from modifiermate.keyboard_consts import ARROW_KEY_FLAGS, ArrowKey, ModifierFlag
from modifiermate.keytypes import KeyCombination, KeyEvent, ModifierAnnotation


def test_arrow_constructor_adds_pseudo_modifiers():
    event = KeyEvent.arrow(ArrowKey.RIGHT, ModifierFlag.COMMAND)
    assert event == KeyEvent(modifiers=ARROW_KEY_FLAGS | ModifierFlag.COMMAND, key_code=124)
    assert event.characters_ignoring_modifiers is None


def test_key_event_is_frozen():
    event = KeyEvent.character("a")
    with pytest.raises(AttributeError):
        event.key_code = 12
    assert msgspec.structs.replace(event, key_code=12).key_code == 12


@pytest.mark.parametrize(
    "mask,expected",
    (
        (0, ModifierAnnotation()),
        (0x20102, ModifierAnnotation(shift=True)),
        (0xA00100, ModifierAnnotation(numeric_pad=True, function=True)),
        (
            ModifierFlag.CONTROL | ModifierFlag.OPTION | ModifierFlag.COMMAND | ModifierFlag.CAPS_LOCK,
            ModifierAnnotation(ctrl=True, alt=True, meta=True, capslock=True),
        ),
    ),
)
def test_modifier_annotation(mask, expected):
    assert ModifierAnnotation.from_flags(mask) == expected


@pytest.mark.parametrize(
    "combination,event,expected",
    (
        (KeyCombination(ModifierFlag.SHIFT | ModifierFlag.OPTION, character="S"), KeyEvent.character("S", 0xA0000), True),
        (KeyCombination(ModifierFlag.SHIFT | ModifierFlag.OPTION, character="S"), KeyEvent.character("s", 0xA0000), False),
        (KeyCombination(ModifierFlag.OPTION, character="s"), KeyEvent.character("s", ModifierFlag.OPTION), True),
        (KeyCombination(character="q"), KeyEvent.character("q"), True),
        (KeyCombination(character="q"), KeyEvent.character("q", ModifierFlag.COMMAND), False),
        (KeyCombination(arrow_key=ArrowKey.UP), KeyEvent.arrow(ArrowKey.UP), True),
        (KeyCombination(arrow_key=ArrowKey.UP), KeyEvent.arrow(ArrowKey.UP, ModifierFlag.SHIFT), False),
        (KeyCombination(ModifierFlag.SHIFT, arrow_key=ArrowKey.UP), KeyEvent.arrow(ArrowKey.UP, ModifierFlag.SHIFT), True),
        (KeyCombination(ModifierFlag.SHIFT, arrow_key=ArrowKey.UP), KeyEvent.arrow(ArrowKey.DOWN, ModifierFlag.SHIFT), False),
    ),
)
def test_key_combination_matches(combination: KeyCombination, event: KeyEvent, expected: bool):
    assert combination.matches(event) is expected


def test_key_combination_needs_exactly_one_target():
    with pytest.raises(ValueError):
        KeyCombination(ModifierFlag.SHIFT)
    with pytest.raises(ValueError):
        KeyCombination(character="a", arrow_key=ArrowKey.LEFT)
