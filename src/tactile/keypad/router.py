# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import collections.abc
import logging
import typing
import weakref

import attr

from .keyset import KeySet
from .modifiers import ModifierStateMachine
from .types import (
    Alt,
    Delete,
    KeyAction,
    KeyboardDelegate,
    KeyCoordinate,
    KeypadCoordinate,
    Letter,
    Modifier,
    NextKeyboard,
    Return,
    Shift,
    Space,
    Unknown,
)

logger = logging.getLogger(__name__)

ActionMaker = collections.abc.Callable[[KeypadCoordinate], KeyAction]


@attr.frozen
class Rule:
    columns: typing.Optional[range]
    make_action: ActionMaker

    def matches(self, col: int):
        return self.columns is None or col in self.columns


def fixed(action: KeyAction) -> ActionMaker:
    return lambda coordinate: action


def letter(offset: int) -> ActionMaker:
    "Letter keys are two grid columns wide, starting at the given grid column."
    return lambda coordinate: Letter(key=KeyCoordinate(row=coordinate.row, col=(coordinate.col - offset) // 2))


LETTER_ROW = (Rule(None, letter(0)),)

MODIFIER_ROW = (
    Rule(range(0, 3), fixed(Shift())),
    Rule(range(19, 22), fixed(Delete())),
    Rule(None, letter(3)),
)

SPACE_AND_RETURN = (
    Rule(range(6, 16), fixed(Space())),
    Rule(range(16, 23), fixed(Return())),
)

BOTTOM_ROW_WITH_SWITCH = (
    Rule(range(0, 3), fixed(Alt())),
    Rule(range(3, 6), fixed(NextKeyboard())),
) + SPACE_AND_RETURN

# no switch key, so alt takes its place
BOTTOM_ROW_WITHOUT_SWITCH = (Rule(range(0, 6), fixed(Alt())),) + SPACE_AND_RETURN

ROW_RULES = {
    0: LETTER_ROW,
    1: LETTER_ROW,
    2: MODIFIER_ROW,
}


def rules_for_row(row: int, needs_alternate_input_switch: bool) -> typing.Optional[tuple[Rule, ...]]:
    if row == 3:
        return BOTTOM_ROW_WITH_SWITCH if needs_alternate_input_switch else BOTTOM_ROW_WITHOUT_SWITCH
    return ROW_RULES.get(row)


def classify(coordinate: KeypadCoordinate, needs_alternate_input_switch: bool) -> KeyAction:
    """Resolve a keypad grid coordinate into the action of the key under it.

    Rules are checked in order and the first match wins. Coordinates outside every rule resolve to Unknown,
    with the reason naming whether the row or the column was at fault.
    """
    rules = rules_for_row(coordinate.row, needs_alternate_input_switch)
    if rules is None:
        return Unknown(coordinate=coordinate, reason="row")
    for rule in rules:
        if rule.matches(coordinate.col):
            return rule.make_action(coordinate)
    return Unknown(coordinate=coordinate, reason="col")


class GestureRouter:
    def __init__(
        self,
        keyset: KeySet,
        *,
        modifiers: typing.Optional[ModifierStateMachine] = None,
        needs_alternate_input_switch: bool = False,
        delegate: typing.Optional[KeyboardDelegate] = None,
    ):
        self.keyset = keyset
        self.modifiers = modifiers if modifiers is not None else ModifierStateMachine()
        self.needs_alternate_input_switch = needs_alternate_input_switch
        self._delegate_ref = None
        self.delegate = delegate

    @property
    def delegate(self) -> typing.Optional[KeyboardDelegate]:
        if self._delegate_ref is None:
            return None
        return self._delegate_ref()

    @delegate.setter
    def delegate(self, value: typing.Optional[KeyboardDelegate]):
        self._delegate_ref = None if value is None else weakref.ref(value)

    def classify(self, coordinate: KeypadCoordinate) -> KeyAction:
        return classify(coordinate, self.needs_alternate_input_switch)

    def route(self, coordinate: KeypadCoordinate) -> None:
        self.dispatch(self.classify(coordinate))

    def dispatch(self, action: KeyAction) -> None:
        delegate = self.delegate
        match action:
            case Letter(key=key):
                self._tap_letter(key)
            case Shift():
                self._tap_modifier(Modifier.SHIFT)
            case Alt():
                self._tap_modifier(Modifier.ALT)
            case Space():
                if delegate is not None:
                    delegate.insert(" ")
            case Return():
                if delegate is not None:
                    delegate.insert("\n")
            case Delete():
                if delegate is not None:
                    delegate.delete_backward()
            case NextKeyboard():
                if delegate is not None:
                    delegate.switch_to_next_input()
            case Unknown(coordinate=coordinate, reason=reason):
                logger.error(
                    "Unknown keypad coordinate %s: %r",
                    reason,
                    coordinate,
                    extra={"keypad_row": coordinate.row, "keypad_col": coordinate.col},
                )

    def _tap_letter(self, key: KeyCoordinate):
        character = self.keyset.character(key, self.modifiers.shift, self.modifiers.alt)
        if character is None:
            logger.error("No key in layout at %r", key, extra={"key_row": key.row, "key_col": key.col})
            return
        delegate = self.delegate
        if delegate is not None:
            delegate.insert(character)
        for modifier in self.modifiers.letter_committed():
            self._notify(modifier)

    def _tap_modifier(self, modifier: Modifier):
        self.modifiers.toggle(modifier)
        self._notify(modifier)

    def _notify(self, modifier: Modifier):
        delegate = self.delegate
        if delegate is None:
            return
        new_state = self.modifiers.state(modifier)
        match modifier:
            case Modifier.SHIFT:
                delegate.shift_state_changed(new_state)
            case Modifier.ALT:
                delegate.alt_state_changed(new_state)
