"""Items dropped in the world that a player can pick up."""

from __future__ import annotations

from enum import IntEnum
from typing import Protocol


class ItemCode(IntEnum):
    CURE = 0
    MONEY = 1
    ENERGY = 2


class Player(Protocol):
    hp: int
    money: int
    skill_gage: int

    def atari_area(self) -> tuple[int, int, int, int]: ...


class Item:
    """An item that falls under gravity and disappears after a while.

    ``size`` is the (wide, height) of the item's picture before scaling.
    """

    ERASE_CNT = 600
    GRAPH_SCALE = 0.05
    item_code: ItemCode | None = None

    def __init__(self, item_name: str, x: int, y: int, size: tuple[int, int]) -> None:
        self.item_name = item_name
        self.x = x
        self.y = y
        self.cnt = 0
        self.vx = 0
        self.vy = 0
        self.grand = False
        self.delete_flag = False
        self.ex_rate = 1.0
        self.size = size
        self.graph_ex = self.GRAPH_SCALE * self.ex_rate

    @property
    def sound_path(self) -> str:
        return f"sound/item/{self.item_name}.wav"

    @property
    def graph_path(self) -> str:
        return f"picture/item/{self.item_name}"

    @property
    def erase_cnt(self) -> int:
        return self.ERASE_CNT

    @property
    def enable_gravity(self) -> bool:
        return True

    @property
    def graph_size(self) -> tuple[int, int]:
        """Picture size after the picture's own scaling."""
        wide, height = self.size
        return int(wide * self.graph_ex), int(height * self.graph_ex)

    def set_y(self, y: int) -> None:
        """Place the item so that it rests on ``y``."""
        _, height = self.graph_size
        self.y = y - height // 2

    def point(self) -> tuple[int, int, int, int]:
        """Bounding box (x1, y1, x2, y2) centred on the item."""
        wide, height = self.graph_size
        wide = int(wide * self.ex_rate)
        height = int(height * self.ex_rate)
        x1 = self.x - wide // 2
        y1 = self.y - height // 2
        return x1, y1, x1 + wide, y1 + height

    def init(self) -> None:
        """Per-frame reset before collisions are checked."""
        self.grand = False

    def action(self) -> None:
        """Advance one frame."""
        self.cnt += 1
        if self.cnt > self.erase_cnt:
            self.delete_flag = True
        if self.enable_gravity:
            if self.grand:
                self.vx = 0
                self.vy = 0
            self.x += self.vx
            self.y += self.vy
            if not self.grand:
                self.vy += 1

    def atari_character(self, player: Player) -> bool:
        """Apply the item to ``player`` if they overlap; True when picked up."""
        cx1, cy1, cx2, cy2 = player.atari_area()
        x1, y1, x2, y2 = self.point()
        if x2 > cx1 and x1 < cx2 and y2 > cy1 and y1 < cy2:
            self._arrange_player(player)
            self.delete_flag = True
            return True
        return False

    def _arrange_player(self, player: Player) -> None:
        pass


class CureItem(Item):
    """Restores hit points."""

    item_code = ItemCode.CURE

    def __init__(self, item_name: str, x: int, y: int, cure_value: int,
                 size: tuple[int, int]) -> None:
        super().__init__(item_name, x, y, size)
        self.cure_value = cure_value

    def _arrange_player(self, player: Player) -> None:
        player.hp = player.hp + self.cure_value


class MoneyItem(Item):
    """Gives money."""

    item_code = ItemCode.MONEY

    def __init__(self, item_name: str, x: int, y: int, money_value: int,
                 size: tuple[int, int]) -> None:
        super().__init__(item_name, x, y, size)
        self.money_value = money_value

    def _arrange_player(self, player: Player) -> None:
        player.money = player.money + self.money_value


class EnergyItem(Item):
    """Fills the skill gauge; floats in place and grows with its value."""

    GRAPH_SCALE = 0.2
    item_code = ItemCode.ENERGY

    def __init__(self, item_name: str, x: int, y: int, energy_value: int,
                 erase_time: int, size: tuple[int, int]) -> None:
        super().__init__(item_name, x, y, size)
        self.energy_value = energy_value
        self.erase_time = erase_time
        self.ex_rate = 1.0 + int(energy_value / 10)
        self.graph_ex = self.GRAPH_SCALE * self.ex_rate

    @property
    def erase_cnt(self) -> int:
        return self.erase_time

    @property
    def enable_gravity(self) -> bool:
        return False

    def _arrange_player(self, player: Player) -> None:
        player.skill_gage = player.skill_gage + self.energy_value