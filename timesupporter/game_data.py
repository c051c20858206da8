"""The save data of a game: progress, money and shared settings."""

from __future__ import annotations

import os
import struct
from os import PathLike
from typing import Any

_INT = struct.Struct("<i")

DEFAULT_COMMON_PATH = "savedata/commonData.dat"


def _read_ints(path: str, count: int) -> list[int] | None:
    """Read up to ``count`` 32-bit integers; None if the file cannot be opened."""
    try:
        with open(path, "rb") as handle:
            data = handle.read(_INT.size * count)
    except OSError:
        return None
    whole = len(data) // _INT.size
    return [_INT.unpack_from(data, i * _INT.size)[0] for i in range(whole)]


def _write_ints(path: str, values: list[int]) -> None:
    with open(path, "wb") as handle:
        handle.write(b"".join(_INT.pack(v) for v in values))


class GameData:
    """Save data for one slot plus the settings shared by every slot."""

    INT_DATA_PATH = "intDataNew.dat"
    STR_DATA_PATH = "strDataNew.dat"
    EVENT_DATA_PATH = "eventDataNew.dat"
    NOTICE_SAVE_DONE_TIME = 300

    def __init__(self, save_file_path: str | PathLike | None = None,
                 common_path: str | PathLike = DEFAULT_COMMON_PATH) -> None:
        self.notice_save_done = 0
        self.exist = False
        self.sound_volume = 50
        self.money = 0
        self.game_wide = 1920
        self.game_height = 1080
        self.complete_stage_sum = 0
        self.common_path = os.fspath(common_path)
        self.save_file_path = "" if save_file_path is None else os.fspath(save_file_path)
        self.load_common()
        if save_file_path is not None:
            self.exist = self.load()

    def _slot_file(self, name: str) -> str:
        return self.save_file_path + name

    def save(self) -> None:
        """Write the shared settings and this slot; raises OSError on failure."""
        self.save_common(self.sound_volume, self.game_wide, self.game_height)
        _write_ints(self._slot_file(self.INT_DATA_PATH),
                    [self.complete_stage_sum, self.money])
        self.notice_save_done = self.NOTICE_SAVE_DONE_TIME

    def load(self) -> bool:
        """Read the shared settings and this slot; False if either is missing."""
        if self.load_common() is None:
            return False
        values = _read_ints(self._slot_file(self.INT_DATA_PATH), 2)
        if values is None:
            return False
        names = ("complete_stage_sum", "money")
        for name, value in zip(names, values):
            setattr(self, name, value)
        return True

    def save_common(self, sound_volume: int, game_wide: int, game_height: int) -> None:
        """Write the settings shared by every slot; raises OSError on failure."""
        _write_ints(self.common_path, [sound_volume, game_wide, game_height])

    def load_common(self) -> tuple[int, int, int] | None:
        """Read the shared settings into this object.

        Returns (sound_volume, game_wide, game_height), or None if the file is missing.
        """
        values = _read_ints(self.common_path, 3)
        if values is None:
            return None
        names = ("sound_volume", "game_wide", "game_height")
        for name, value in zip(names, values):
            setattr(self, name, value)
        return self.sound_volume, self.game_wide, self.game_height

    def remove_save_data(self) -> None:
        """Delete this slot's files, ignoring those that do not exist."""
        for name in (self.INT_DATA_PATH, self.STR_DATA_PATH, self.EVENT_DATA_PATH):
            try:
                os.remove(self._slot_file(name))
            except OSError:
                pass

    def assign_world(self, world: Any) -> None:
        """Copy this data into a world."""
        world.money = self.money

    def assigned_world(self, world: Any) -> None:
        """Copy a world's data into this object."""
        self.money = world.money

    def update_story(self, story: Any) -> None:
        """Take over the state reached by a story."""
        world = story.world
        self.sound_volume = world.sound_player.volume
        self.money = world.money