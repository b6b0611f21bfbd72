# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
import collections.abc
import typing
from contextlib import aclosing

import pytest
from tactile.commontypes import Point, Rect, Size
from tactile.controller import TextBuffer
from tactile.keypad.grid import KeypadGrid
from tactile.keypad.streams import LocateKeys, make_keypad_stream, pump_all
from tactile.keypad.types import KeyCoordinate, KeypadCoordinate, Letter, Shift, Space, TapEvent, TapPhase
from tactile.session import KeyboardSession
from tactile.settings import Settings
from trio.lowlevel import checkpoint

T = typing.TypeVar("T")

FRAME = Rect(origin=Point(x=0, y=0), spread=Size(width=220, height=200))


async def make_async_source(
    items: collections.abc.Sequence[T],
):
    for item in items:
        await checkpoint()
        yield item


@pytest.mark.trio
async def test_only_completed_taps_are_located():
    taps = [
        TapEvent(location=Point(x=45, y=10), phase=TapPhase.INITIATED),
        TapEvent(location=Point(x=45, y=10), phase=TapPhase.COMPLETED),
        TapEvent(location=Point(x=100, y=60), phase=TapPhase.CANCELED),
        TapEvent(location=Point(x=500, y=60), phase=TapPhase.COMPLETED),
        TapEvent(location=Point(x=15, y=60), phase=TapPhase.COMPLETED),
    ]
    async with (
        aclosing(make_async_source(taps)) as tapsource,
        pump_all(tapsource, LocateKeys(KeypadGrid(FRAME))) as resultsource,
    ):
        actual = [coordinate async for coordinate in resultsource]
    assert actual == [KeypadCoordinate(row=0, col=4), KeypadCoordinate(row=1, col=1)]


@pytest.mark.trio
async def test_keypad_stream_routes_taps():
    buffer = TextBuffer()
    session = KeyboardSession(Settings.for_test(), buffer)
    taps = [
        TapEvent(location=Point(x=5, y=110), phase=TapPhase.COMPLETED),
        TapEvent(location=Point(x=45, y=10), phase=TapPhase.COMPLETED),
        TapEvent(location=Point(x=45, y=10), phase=TapPhase.COMPLETED),
        TapEvent(location=Point(x=100, y=160), phase=TapPhase.COMPLETED),
    ]
    async with (
        aclosing(make_async_source(taps)) as tapsource,
        make_keypad_stream(tapsource, session.make_grid(FRAME), session.router) as actionstream,
    ):
        actions = [action async for action in actionstream]
    assert actions == [
        Shift(),
        Letter(key=KeyCoordinate(row=0, col=2)),
        Letter(key=KeyCoordinate(row=0, col=2)),
        Space(),
    ]
    assert buffer.text == "Pp "
