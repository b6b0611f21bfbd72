# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
import collections.abc
import typing

from ..commontypes import LayoutError, Point, Rect
from .types import KeypadCoordinate

DEFAULT_KEYPAD_COLUMNS = (22, 22, 22, 23)


class KeypadGrid:
    """Divides the keypad frame into equal-height rows, each split into its own number of equal columns."""

    def __init__(self, frame: Rect, columns: collections.abc.Sequence[int] = DEFAULT_KEYPAD_COLUMNS):
        if not columns or any(c <= 0 for c in columns):
            raise LayoutError(f"Every keypad row needs at least one column, got {columns!r}")
        self.frame = frame
        self.columns = tuple(columns)

    @property
    def rows(self):
        return len(self.columns)

    def locate(self, point: Point) -> typing.Optional[KeypadCoordinate]:
        if point not in self.frame:
            return None
        relative = point - self.frame.origin
        row = relative.y * self.rows // self.frame.spread.height
        col = relative.x * self.columns[row] // self.frame.spread.width
        return KeypadCoordinate(row=row, col=col)
