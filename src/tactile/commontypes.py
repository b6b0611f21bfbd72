# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
import msgspec


class Point(msgspec.Struct, frozen=True):
    x: int
    y: int

    def __sub__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return Point(x=self.x - other.x, y=self.y - other.y)


class Size(msgspec.Struct, frozen=True):
    width: int
    height: int


class Rect(msgspec.Struct, frozen=True):
    origin: Point
    spread: Size

    @property
    def bottom(self):
        return self.origin.y + self.spread.height

    @property
    def right(self):
        return self.origin.x + self.spread.width

    def __contains__(self, item):
        if not isinstance(item, Point):
            return False
        # right and bottom edges are exclusive
        return self.origin.x <= item.x < self.right and self.origin.y <= item.y < self.bottom


class TactileError(Exception):
    pass


class LayoutError(TactileError):
    pass
