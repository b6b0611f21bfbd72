# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import abc
import logging
from contextlib import aclosing, asynccontextmanager
from typing import TYPE_CHECKING, Any, AsyncIterable, cast

import trio

from .types import KeyAction, KeypadCoordinate, TapEvent, TapPhase

if TYPE_CHECKING:
    from .grid import KeypadGrid
    from .router import GestureRouter

logger = logging.getLogger(__name__)


class Section(abc.ABC):
    @abc.abstractmethod
    async def pump(self, source: trio.MemoryReceiveChannel[Any], sink: trio.MemorySendChannel[Any]): ...


# stage 1: completed taps become keypad grid coordinates
class LocateKeys(Section):
    def __init__(self, grid: KeypadGrid):
        self.grid = grid

    async def pump(self, source: trio.MemoryReceiveChannel[TapEvent], sink: trio.MemorySendChannel[KeypadCoordinate]):
        async with aclosing(source), aclosing(sink):
            async for tap in source:
                if tap.phase is not TapPhase.COMPLETED:
                    continue
                coordinate = self.grid.locate(tap.location)
                if coordinate is None:
                    logger.debug("Tap at %r is outside the keypad", tap.location)
                    continue
                await sink.send(coordinate)


# stage 2: route each coordinate, passing the resolved action along
class RouteKeys(Section):
    def __init__(self, router: GestureRouter):
        self.router = router

    async def pump(self, source: trio.MemoryReceiveChannel[KeypadCoordinate], sink: trio.MemorySendChannel[KeyAction]):
        async with aclosing(source), aclosing(sink):
            async for coordinate in source:
                action = self.router.classify(coordinate)
                self.router.dispatch(action)
                await sink.send(action)


@asynccontextmanager
async def pump_all(first_source: AsyncIterable[Any], *sections: Section):
    async with trio.open_nursery() as nursery:
        section_input = first_source
        for section in sections:
            section_send_channel, section_receive_channel = trio.open_memory_channel(0)
            nursery.start_soon(section.pump, section_input, section_send_channel)
            section_input = section_receive_channel
        yield section_input
        nursery.cancel_scope.cancel()


@asynccontextmanager
async def make_keypad_stream(tapstream: AsyncIterable[TapEvent], grid: KeypadGrid, router: GestureRouter):
    async with pump_all(tapstream, LocateKeys(grid), RouteKeys(router)) as actionstream:
        yield cast(trio.MemoryReceiveChannel[KeyAction], actionstream)
