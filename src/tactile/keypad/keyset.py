# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import collections.abc
import typing

import msgspec

from ..commontypes import LayoutError
from .types import KeyCoordinate, ModifierState

# base, shifted, alt, shifted alt
DEFAULT_LAYOUT = [
    [
        ["b", "B", "|", "¦"],
        ["é", "É", "ˊ", "˝"],
        ["p", "P", "&", "§"],
        ["o", "O", "œ", "Œ"],
        ["è", "È", "`", "`"],
        ["^", "!", "¡", "¡"],
        ["v", "V", "ˇ", "ˇ"],
        ["d", "D", "ð", "Ð"],
        ["l", "L", "/", "/"],
        ["j", "J", "ĳ", "Ĳ"],
        ["z", "Z", "ə", "Ə"],
    ],
    [
        ["a", "A", "æ", "Æ"],
        ["u", "U", "ù", "Ù"],
        ["i", "I", "¨", "˙"],
        ["e", "E", "€", "¤"],
        [",", ";", "’", "˛"],
        ["c", "C", "©", "ſ"],
        ["t", "T", "þ", "Þ"],
        ["s", "S", "ß", "ẞ"],
        ["r", "R", "®", "™"],
        ["n", "N", "~", "~"],
        ["m", "M", "¯", "º"],
    ],
    [
        ["à", "À", "\\", "\\"],
        ["y", "Y", "{", "‘"],
        ["x", "X", "}", "’"],
        [".", ":", "…", "·"],
        ["k", "K", "~", "‑"],
        ["'", "?", "¿", "ˀ"],
        ["q", "Q", "˚", "˳"],
        ["g", "G", "µ", "†"],
    ],
]


class LetterSet(msgspec.Struct, frozen=True):
    base: str
    shifted: str
    alt: str
    shifted_alt: str

    def letter(self, shift: ModifierState, alt: ModifierState) -> str:
        match (shift, alt):
            case (ModifierState.OFF, ModifierState.OFF):
                return self.base
            case (ModifierState.ON, ModifierState.OFF):
                return self.shifted
            case (ModifierState.OFF, ModifierState.ON):
                return self.alt
            case (ModifierState.ON, ModifierState.ON):
                return self.shifted_alt

    def as_list(self):
        return [self.base, self.shifted, self.alt, self.shifted_alt]

    @classmethod
    def from_list(cls, variants: collections.abc.Sequence[str]):
        if len(variants) != 4:
            raise LayoutError(f"A key needs exactly 4 variants, got {variants!r}")
        return cls(*variants)


class KeySet:
    """The layout table: which letter lives at each key coordinate.

    Rows may have different lengths. Lookups outside the layout give None rather than raising, so that
    a mismatch between the keypad grid and the loaded layout can be reported instead of crashing.
    """

    def __init__(self, rows: collections.abc.Sequence[collections.abc.Sequence[LetterSet]]):
        self.rows = tuple(tuple(row) for row in rows)

    def __contains__(self, item):
        if not isinstance(item, KeyCoordinate):
            return False
        return 0 <= item.row < len(self.rows) and 0 <= item.col < len(self.rows[item.row])

    def __eq__(self, other):
        if not isinstance(other, KeySet):
            return NotImplemented
        return self.rows == other.rows

    def __repr__(self):
        return f"KeySet({[len(row) for row in self.rows]!r})"

    def key(self, at: KeyCoordinate) -> typing.Optional[LetterSet]:
        if at not in self:
            return None
        return self.rows[at.row][at.col]

    def character(self, at: KeyCoordinate, shift: ModifierState, alt: ModifierState) -> typing.Optional[str]:
        key = self.key(at)
        if key is None:
            return None
        return key.letter(shift, alt)

    def to_strings(self):
        return [[key.as_list() for key in row] for row in self.rows]

    @classmethod
    def from_strings(cls, rows: collections.abc.Sequence[collections.abc.Sequence[collections.abc.Sequence[str]]]):
        return cls([[LetterSet.from_list(key) for key in row] for row in rows])

    @classmethod
    def default(cls):
        return cls.from_strings(DEFAULT_LAYOUT)
