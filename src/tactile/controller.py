# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import logging
import typing
import weakref

from .keypad.types import ModifierState

logger = logging.getLogger(__name__)


class TextDocumentProxy(typing.Protocol):
    def insert_text(self, text: str) -> None:
        ...

    def delete_backward(self) -> None:
        ...

    def advance_to_next_input_mode(self) -> None:
        ...


class TextBuffer:
    """A host text field that keeps everything in memory."""

    def __init__(self, text: str = ""):
        self.characters = list(text)
        self.input_mode_switches = 0

    @property
    def text(self):
        return "".join(self.characters)

    def insert_text(self, text: str):
        self.characters.extend(text)

    def delete_backward(self):
        if self.characters:
            self.characters.pop()

    def advance_to_next_input_mode(self):
        self.input_mode_switches += 1


class InputController:
    """Receives text edits from the keypad and applies them to the host text field.

    The host is not owned here; the keyboard may be detached from its text field at any time, in which
    case edits are dropped.
    """

    def __init__(self, host: typing.Optional[TextDocumentProxy] = None):
        self._host_ref = None
        self.host = host
        self.shift_state = ModifierState.OFF
        self.alt_state = ModifierState.OFF

    @property
    def host(self) -> typing.Optional[TextDocumentProxy]:
        if self._host_ref is None:
            return None
        return self._host_ref()

    @host.setter
    def host(self, value: typing.Optional[TextDocumentProxy]):
        self._host_ref = None if value is None else weakref.ref(value)

    def _attached_host(self, operation: str):
        host = self.host
        if host is None:
            logger.debug("No host text field attached, dropping %s", operation)
        return host

    def insert(self, text: str):
        if (host := self._attached_host("insert")) is not None:
            host.insert_text(text)

    def delete_backward(self, amount: int = 1):
        if amount == 0:
            return
        if (host := self._attached_host("delete")) is not None:
            for _ in range(amount):
                host.delete_backward()

    def replace(self, amount: int, text: str):
        self.delete_backward(amount)
        self.insert(text)

    def switch_to_next_input(self):
        if (host := self._attached_host("input switch")) is not None:
            host.advance_to_next_input_mode()

    def shift_state_changed(self, new_state: ModifierState):
        self.shift_state = new_state

    def alt_state_changed(self, new_state: ModifierState):
        self.alt_state = new_state
