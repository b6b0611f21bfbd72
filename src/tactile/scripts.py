# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
import argparse
import collections.abc
import logging
import pathlib
from contextlib import aclosing

import msgspec
import trio

from .controller import TextBuffer
from .keypad.streams import RouteKeys, pump_all
from .keypad.types import KeyAction, KeypadCoordinate
from .session import KeyboardSession
from .settings import Settings


def load_coordinates(path: pathlib.Path) -> list[KeypadCoordinate]:
    return msgspec.json.decode(path.read_bytes(), type=list[KeypadCoordinate])


async def coordinate_source(coordinates: collections.abc.Sequence[KeypadCoordinate]):
    for coordinate in coordinates:
        await trio.lowlevel.checkpoint()
        yield coordinate


async def replay(session: KeyboardSession, coordinates: collections.abc.Sequence[KeypadCoordinate]) -> list[KeyAction]:
    async with (
        aclosing(coordinate_source(coordinates)) as source,
        pump_all(source, RouteKeys(session.router)) as actionstream,
    ):
        return [action async for action in actionstream]


replay_parser = argparse.ArgumentParser(description="Replay recorded keypad touches and print the typed text.")
replay_parser.add_argument("coordinates", type=pathlib.Path)
replay_parser.add_argument("--settings", type=pathlib.Path)
replay_parser.add_argument("--verbose", "-v", action="store_true")


def replay_cli():
    args = replay_parser.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    settings = Settings.load(args.settings) if args.settings is not None else Settings.defaults()
    buffer = TextBuffer()
    session = KeyboardSession(settings, buffer)
    actions = trio.run(replay, session, load_coordinates(args.coordinates))
    if args.verbose:
        for action in actions:
            print(msgspec.json.encode(action).decode())
    print(buffer.text)
