# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import enum
import typing

import msgspec

from ..commontypes import Point

NonNegative = typing.Annotated[int, msgspec.Meta(ge=0)]


class KeypadCoordinate(msgspec.Struct, frozen=True):
    "Raw touch grid position; columns are finer than keys so gaps between keys have their own cells."

    row: NonNegative
    col: NonNegative


class KeyCoordinate(msgspec.Struct, frozen=True):
    "Logical key position within a row of the layout."

    row: NonNegative
    col: NonNegative


class ModifierState(enum.Enum):
    OFF = "off"
    ON = "on"

    @enum.property
    def toggled(self):
        match self:
            case ModifierState.OFF:
                return ModifierState.ON
            case ModifierState.ON:
                return ModifierState.OFF


class Modifier(enum.Enum):
    SHIFT = "shift"
    ALT = "alt"


class Letter(msgspec.Struct, frozen=True, tag=True):
    key: KeyCoordinate


class Shift(msgspec.Struct, frozen=True, tag=True):
    pass


class Alt(msgspec.Struct, frozen=True, tag=True):
    pass


class Space(msgspec.Struct, frozen=True, tag=True):
    pass


class Return(msgspec.Struct, frozen=True, tag=True):
    pass


class Delete(msgspec.Struct, frozen=True, tag=True):
    pass


class NextKeyboard(msgspec.Struct, frozen=True, tag=True):
    pass


class Unknown(msgspec.Struct, frozen=True, tag=True):
    coordinate: KeypadCoordinate
    reason: str


KeyAction = Letter | Shift | Alt | Space | Return | Delete | NextKeyboard | Unknown


class TapPhase(enum.Enum):
    INITIATED = enum.auto()
    COMPLETED = enum.auto()
    CANCELED = enum.auto()


class TapEvent(msgspec.Struct, frozen=True):
    location: Point
    phase: TapPhase


class KeyboardDelegate(typing.Protocol):
    def insert(self, text: str) -> None:
        ...

    def delete_backward(self, amount: int = 1) -> None:
        ...

    def switch_to_next_input(self) -> None:
        ...

    def shift_state_changed(self, new_state: ModifierState) -> None:
        ...

    def alt_state_changed(self, new_state: ModifierState) -> None:
        ...
