# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
import logging

from .types import Modifier, ModifierState

logger = logging.getLogger(__name__)


class ModifierStateMachine:
    """Shift and alt as one-shot modifiers.

    Each modifier is toggled explicitly by its key, and affects only the next letter: once a letter is
    committed, any modifier that is on toggles itself back off.
    """

    def __init__(self):
        self.states = {
            Modifier.SHIFT: ModifierState.OFF,
            Modifier.ALT: ModifierState.OFF,
        }

    @property
    def shift(self):
        return self.states[Modifier.SHIFT]

    @property
    def alt(self):
        return self.states[Modifier.ALT]

    def state(self, modifier: Modifier) -> ModifierState:
        return self.states[modifier]

    def toggle(self, modifier: Modifier) -> ModifierState:
        new_state = self.states[modifier].toggled
        self.states[modifier] = new_state
        logger.debug("%s key is now %s.", modifier.value.capitalize(), new_state.value)
        return new_state

    def toggle_shift(self):
        return self.toggle(Modifier.SHIFT)

    def toggle_alt(self):
        return self.toggle(Modifier.ALT)

    def letter_committed(self) -> list[Modifier]:
        "Clear every modifier that is on. Returns the modifiers that were cleared."
        cleared = []
        for modifier in (Modifier.SHIFT, Modifier.ALT):
            if self.states[modifier] is ModifierState.ON:
                self.toggle(modifier)
                cleared.append(modifier)
        return cleared
