# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
import dataclasses
import json
import pathlib
import typing

import cattrs
import cattrs.gen

from .keypad.grid import DEFAULT_KEYPAD_COLUMNS
from .keypad.keyset import DEFAULT_LAYOUT, KeySet

settings_converter = cattrs.Converter()
settings_converter.register_unstructure_hook(pathlib.Path, str)
settings_converter.register_structure_hook(pathlib.Path, lambda v, _: pathlib.Path(v))
settings_converter.register_unstructure_hook(KeySet, KeySet.to_strings)
settings_converter.register_structure_hook(KeySet, lambda v, _: KeySet.from_strings(v))


@dataclasses.dataclass(kw_only=True)
class Settings:
    _path: pathlib.Path
    needs_alternate_input_switch: bool
    layout: KeySet
    keypad_columns: list[int]

    def save(self, dest: typing.Optional[pathlib.Path] = None):
        if dest is None:
            dest = self._path
        raw = settings_converter.unstructure(self)
        del raw["_path"]
        with dest.open("w") as outfile:
            json.dump(raw, outfile, indent=2, ensure_ascii=False)

    @classmethod
    def load(cls, src: pathlib.Path):
        with src.open() as infile:
            raw = json.load(infile)
        raw["_path"] = src
        return settings_converter.structure(raw, cls)

    @classmethod
    def defaults(cls, path: pathlib.Path = pathlib.Path("tactile.settings.json")):
        return settings_converter.structure(
            {
                "_path": path,
                "needs_alternate_input_switch": True,
                "layout": DEFAULT_LAYOUT,
                "keypad_columns": list(DEFAULT_KEYPAD_COLUMNS),
            },
            cls,
        )

    @classmethod
    def for_test(cls):
        return cls.defaults(pathlib.Path("test.settings.json"))


settings_converter.register_structure_hook(Settings, cattrs.gen.make_dict_structure_fn(Settings, settings_converter))
