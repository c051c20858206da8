"""Explosions, doors and other objects a character can stand in front of."""

from __future__ import annotations

import math
from typing import Protocol

from timesupporter.objects import STAGE_MATERIAL_DIR, Controller, Object


class GraphHandle(Protocol):
    size: tuple[int, int]
    ex: float


class Animation(Protocol):
    anime_num: int
    finish_flag: bool
    handle: GraphHandle

    def count(self) -> None: ...


def _tdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


class BombObject(Object):
    """The blast of an explosion centred on (x, y), ``dx`` by ``dy`` across.

    Damage falls off with distance from the centre, and the blast only hurts
    during the middle frames of its animation.
    """

    BOMB_IMPACT = 30

    def __init__(self, x: int, y: int, dx: int, dy: int, damage: int,
                 animation: Animation) -> None:
        half_x = _tdiv(dx, 2)
        half_y = _tdiv(dy, 2)
        super().__init__(x - half_x, y - half_y, x + half_x, y + half_y, -1)
        self.animation = animation
        self.x = x
        self.y = y
        self.dx = dx
        self.dy = dy
        self.distance = int(math.sqrt(half_x * half_x + half_y * half_y))
        self.damage = damage
        # By default the blast hits everyone except neutral characters.
        self.character_id = -1
        self.group_id = -1

    def able_damage(self) -> bool:
        """True while the animation is in the frames that deal damage."""
        return 2 < self.animation.anime_num < 6

    def calc_damage_rate(self, x: int, y: int) -> float:
        """Share of the full damage dealt at (x, y); at most 1.0."""
        x -= self.x
        y -= self.y
        distance = math.sqrt(x * x + y * y)
        return min(1.0, (self.distance - distance) / self.distance)

    def _targetable(self, controller: Controller) -> bool:
        character = controller.character_action.character
        if self.character_id == character.id:
            return False
        group_id = character.group_id
        return not (self.group_id == group_id or group_id == -1)

    def atari(self, controller: Controller) -> bool:
        if not self.able_damage():
            return False
        if not self._targetable(controller):
            return False
        action = controller.character_action
        cx1, cy1, cx2, cy2 = action.character.damage_area()
        if not (cx2 > self.x1 and cx1 < self.x2 and cy2 > self.y1 and cy1 < self.y2
                and action.able_damage()):
            return False
        x, y = cx1, abs(cy1 - self.y)
        if abs(cx2 - self.x) < abs(cx1 - self.x):
            x = cx2
        if abs(cy2 - self.y) < abs(cy1 - self.y):
            y = cy2
        rate = self.calc_damage_rate(x, y)
        impact = int(rate * self.BOMB_IMPACT)
        damage = int(self.damage * rate)
        if cx1 + cx2 < self.x1 + self.x2:
            controller.damage(-impact, -impact, damage)
        else:
            controller.damage(impact, -impact, damage)
        return True

    def atari_to_object(self, obj: Object) -> bool:
        if not self.able_damage():
            return False
        if self.group_id == obj.group_id:
            return False
        if (self.x2 > obj.x1 and self.x1 < obj.x2
                and self.y2 > obj.y1 and self.y1 < obj.y2):
            rate = self.calc_damage_rate(
                min(abs(self.x - obj.x1), abs(self.x - obj.x2)),
                min(abs(self.y - obj.y1), abs(self.y - obj.y2)),
            )
            return obj.decrease_hp(int(self.damage * rate), self.id)
        return False

    def action(self) -> None:
        """Advance the animation; the blast disappears when it finishes."""
        self.animation.count()
        if self.animation.finish_flag:
            self.delete_flag = True
            return
        self.handle = self.animation.handle
        graph_size = min(self.handle.size)
        self.handle.ex = self.distance / graph_size


class DoorObject(Object):
    """A door leading to area ``area_num``; it shows a hint while touched."""

    DEFAULT_TEXT = "Ｗキーで入る"

    def __init__(self, x1: int, y1: int, x2: int, y2: int, file_name: str,
                 area_num: int) -> None:
        super().__init__(x1, y1, x2, y2)
        self.file_name = file_name
        self.graph_ex = 1.0
        self.area_num = area_num
        self._text = ""
        self.default_text = self.DEFAULT_TEXT
        self.text_num = -1
        self.text_disp = False

    @property
    def graph_path(self) -> str:
        return STAGE_MATERIAL_DIR + self.file_name

    @property
    def text(self) -> str:  # type: ignore[override]
        """The hint while a character touches the door, else the set text."""
        return self.default_text if self.text_disp else self._text

    @text.setter
    def text(self, value: str) -> None:
        self._text = value

    def atari(self, controller: Controller) -> bool:
        action = controller.character_action
        if not action.able_damage() or not action.grand:
            self.text_disp = False
            return False
        cx1, cy1, cx2, cy2 = action.character.atari_area()
        self.text_disp = (cx2 > self.x1 and cx1 < self.x2
                          and cy2 > self.y1 and cy1 < self.y2)
        return self.text_disp


class StageObject(DoorObject):
    """A scenery object that leads nowhere; it may show text ``text_num``."""

    EXAMINE_TEXT = "Ｗキーで調べる"

    def __init__(self, x1: int, y1: int, x2: int, y2: int, file_name: str,
                 text_num: int) -> None:
        super().__init__(x1, y1, x2, y2, file_name, -1)
        self.text_num = text_num
        self.default_text = "" if text_num == -1 else self.EXAMINE_TEXT