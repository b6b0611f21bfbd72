# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
import pytest
from tactile.commontypes import LayoutError, Point, Rect, Size
from tactile.keypad.grid import KeypadGrid
from tactile.keypad.types import KeypadCoordinate

# 4 rows of 50 pixels, 10 pixels per column in the 22-column rows
FRAME = Rect(origin=Point(x=0, y=100), spread=Size(width=220, height=200))


@pytest.mark.parametrize(
    "point,expected",
    (
        (Point(x=0, y=100), KeypadCoordinate(row=0, col=0)),
        (Point(x=45, y=120), KeypadCoordinate(row=0, col=4)),
        (Point(x=219, y=149), KeypadCoordinate(row=0, col=21)),
        (Point(x=15, y=150), KeypadCoordinate(row=1, col=1)),
        (Point(x=200, y=260), KeypadCoordinate(row=3, col=20)),
        (Point(x=219, y=299), KeypadCoordinate(row=3, col=22)),
    ),
)
def test_locate(point, expected):
    assert KeypadGrid(FRAME).locate(point) == expected


@pytest.mark.parametrize(
    "point",
    (
        Point(x=10, y=99),
        Point(x=220, y=150),
        Point(x=10, y=300),
        Point(x=-1, y=150),
    ),
)
def test_outside_frame(point):
    assert KeypadGrid(FRAME).locate(point) is None


def test_frame_only_contains_points():
    assert (10, 150) not in FRAME
    assert Point(x=10, y=150) in FRAME


def test_columns_must_be_positive():
    with pytest.raises(LayoutError):
        KeypadGrid(FRAME, (22, 0))
    with pytest.raises(LayoutError):
        KeypadGrid(FRAME, ())
