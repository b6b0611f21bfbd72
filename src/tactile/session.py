# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import typing

from .controller import InputController
from .keypad.grid import KeypadGrid
from .keypad.router import GestureRouter

if typing.TYPE_CHECKING:
    from .commontypes import Rect
    from .controller import TextDocumentProxy
    from .keypad.types import KeypadCoordinate
    from .settings import Settings


class KeyboardSession:
    """One keyboard's worth of state, from keypad touches to the host text field."""

    def __init__(self, settings: Settings, host: typing.Optional[TextDocumentProxy] = None):
        self.settings = settings
        self.controller = InputController(host)
        self.router = GestureRouter(
            settings.layout,
            needs_alternate_input_switch=settings.needs_alternate_input_switch,
            delegate=self.controller,
        )

    @property
    def modifiers(self):
        return self.router.modifiers

    def attach(self, host: TextDocumentProxy):
        self.controller.host = host

    def detach(self):
        self.controller.host = None

    def update(self, needs_alternate_input_switch: bool):
        self.settings.needs_alternate_input_switch = needs_alternate_input_switch
        self.router.needs_alternate_input_switch = needs_alternate_input_switch

    def touch_up(self, coordinate: KeypadCoordinate):
        self.router.route(coordinate)

    def make_grid(self, frame: Rect):
        return KeypadGrid(frame, self.settings.keypad_columns)
