"""Attack objects: straight and parabolic bullets and close-range slashes."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from timesupporter.items import EnergyItem
from timesupporter.objects import Controller, Object

# Picture size of the energy item released by attacks, before scaling.
ENERGY_GRAPH_SIZE = (100, 100)
ENERGY_ITEM_NAME = "energy"


def _tdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


@dataclass
class AttackInfo:
    """Parameters of a character's ranged and close-range attacks."""

    bullet_rx: int = 0
    bullet_ry: int = 0
    bullet_damage: int = 0
    bullet_distance: int = 0
    bullet_hp: int = -1
    bullet_bomb: bool = False
    bullet_speed: int = 0
    bullet_effect_handle: Any = None
    bullet_sound_handle: int = -1
    slash_hp: int = -1
    slash_damage: int = 0
    slash_impact_x: int = 0
    slash_impact_y: int = 0
    slash_effect_handle: Any = None
    slash_sound_handle: int = -1
    # Frames a character is frozen after a slash hits it.
    slash_stop_cnt: int = 3


def _hits(obj: Object, x1: int, y1: int, x2: int, y2: int) -> bool:
    return x2 > obj.x1 and x1 < obj.x2 and y2 > obj.y1 and y1 < obj.y2


def _targetable(attack: Object, controller: Controller) -> bool:
    """Attacks never hit their owner, their own group or neutral characters."""
    character = controller.character_action.character
    if attack.character_id == character.id:
        return False
    group_id = character.group_id
    return not (attack.group_id == group_id or group_id == -1)


class BulletObject(Object):
    """A bullet flying straight toward (gx, gy) until its range runs out.

    (x, y) and (gx, gy) are centre points. Without ``attack_info`` the bullet
    is an empty, motionless box.
    """

    def __init__(self, x: int, y: int, color: int, gx: int, gy: int,
                 energy_erase_time: int, attack_info: AttackInfo | None = None) -> None:
        if attack_info is None:
            super().__init__()
            self.rx = self.ry = 0
            self.damage = 0
            self.d = 0
            self.hp = 0
            self.v = self.vx = self.vy = 0
        else:
            rx, ry = attack_info.bullet_rx, attack_info.bullet_ry
            super().__init__(x - rx, y - ry, x + rx, y + ry)
            self.rx, self.ry = rx, ry
            self.damage = attack_info.bullet_damage
            self.d = attack_info.bullet_distance
            self.hp = attack_info.bullet_hp
            self.bomb = attack_info.bullet_bomb
            angle = math.atan2(float(gy - y), float(gx - x))
            self.v = attack_info.bullet_speed
            self.vx = int(self.v * math.cos(angle))
            self.vy = int(self.v * math.sin(angle))
            self.effect_handles = attack_info.bullet_effect_handle
            self.sound_handle = attack_info.bullet_sound_handle
        self.character_id = -1
        self.group_id = -1
        self.color = color
        self.gx = gx
        self.gy = gy
        self.energy_cnt = 0
        self.energy_erase_time = energy_erase_time

    @property
    def reverse_x(self) -> bool:
        """The picture is mirrored while the bullet flies left."""
        return self.vx < 0

    def atari(self, controller: Controller) -> bool:
        if not _targetable(self, controller):
            return False
        action = controller.character_action
        cx1, cy1, cx2, cy2 = action.character.damage_area()
        if cx1 == cx2 and cy1 == cy2:
            return False
        if _hits(self, cx1, cy1, cx2, cy2) and action.able_damage():
            self.delete_flag = True
            controller.damage(_tdiv(self.vx, 2), _tdiv(self.vy, 2), self.damage)
            return True
        return False

    def atari_to_object(self, obj: Object) -> bool:
        if self.group_id == obj.group_id:
            return False
        if _hits(obj, self.x1, self.y1, self.x2, self.y2):
            return obj.decrease_hp(self.damage, self.id)
        return False

    def action(self) -> None:
        if self.damage_cnt > 0:
            self.damage_cnt -= 1
        self.x1 += self.vx
        self.x2 += self.vx
        self.y1 += self.vy
        self.y2 += self.vy
        self.d -= self.v
        if self.d <= 0:
            self.delete_flag = True

    def create_attack_energy(self) -> EnergyItem | None:
        """Release an energy item every 15 frames while energy is enabled."""
        self.energy_cnt += 1
        if self.energy_erase_time > 0 and self.energy_cnt % 15 == 0:
            return EnergyItem(ENERGY_ITEM_NAME, _tdiv(self.x1 + self.x2, 2),
                              _tdiv(self.y1 + self.y2, 2), self.damage,
                              self.energy_erase_time, ENERGY_GRAPH_SIZE)
        return None


class ParabolaBullet(BulletObject):
    """A bullet pulled down by gravity; it has no range limit."""

    G = 2

    @property
    def extend_graph(self) -> bool:
        return False

    @property
    def angle(self) -> float:
        """Direction of flight in radians, used to rotate the picture."""
        if self.vy == 0:
            return 0.0
        return math.atan2(float(self.vy), float(self.vx))

    def action(self) -> None:
        if self.damage_cnt > 0:
            self.damage_cnt -= 1
        self.x1 += self.vx
        self.x2 += self.vx
        self.vy += self.G
        self.y1 += self.vy
        self.y2 += self.vy


class SlashObject(Object):
    """A close-range attack that vanishes after ``slash_count_sum`` frames."""

    def __init__(self, x1: int, y1: int, x2: int, y2: int, slash_count_sum: int,
                 energy_erase_time: int, attack_info: AttackInfo | None = None) -> None:
        info = attack_info
        super().__init__(x1, y1, x2, y2, info.slash_hp if info is not None else 0)
        self.character_id = -1
        self.group_id = -1
        self.damage = info.slash_damage if info is not None else 0
        self.slash_count_sum = slash_count_sum
        self.cnt = 0
        self.slash_impact_x = info.slash_impact_x if info is not None else 0
        self.slash_impact_y = info.slash_impact_y if info is not None else 0
        self.slash_stop_cnt = info.slash_stop_cnt if info is not None else 0
        if info is not None:
            self.effect_handles = info.slash_effect_handle
            self.sound_handle = info.slash_sound_handle
        self.stop_cnt = 0
        self.energy_erase_time = energy_erase_time

    @property
    def stop_character_id(self) -> int:  # type: ignore[override]
        return self.character_id

    def atari(self, controller: Controller) -> bool:
        if not _targetable(self, controller):
            return False
        action = controller.character_action
        cx1, cy1, cx2, cy2 = action.character.damage_area()
        if _hits(self, cx1, cy1, cx2, cy2) and action.able_damage():
            if cx1 + cx2 < self.x1 + self.x2:
                controller.damage(-self.slash_impact_x, -self.slash_impact_y, self.damage)
            else:
                controller.damage(self.slash_impact_x, -self.slash_impact_y, self.damage)
            self.stop_cnt = self.slash_stop_cnt
            return True
        return False

    def atari_to_object(self, obj: Object) -> bool:
        if self.group_id == obj.group_id:
            return False
        if _hits(obj, self.x1, self.y1, self.x2, self.y2):
            return obj.decrease_hp(self.damage, self.id)
        return False

    def action(self) -> None:
        if self.damage_cnt > 0:
            self.damage_cnt -= 1
        self.cnt += 1
        if self.cnt == self.slash_count_sum:
            self.delete_flag = True

    def create_attack_energy(self) -> EnergyItem | None:
        """Release one energy item on the slash's last frame."""
        if self.energy_erase_time > 0 and self.cnt == self.slash_count_sum - 1:
            item = EnergyItem(ENERGY_ITEM_NAME, _tdiv(self.x1 + self.x2, 2),
                              _tdiv(self.y1 + self.y2, 2), self.damage,
                              self.energy_erase_time, ENERGY_GRAPH_SIZE)
            self.energy_erase_time = 0
            return item
        return None