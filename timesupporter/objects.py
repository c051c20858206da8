"""Stage objects: the base class and rectangular walls and floors."""

from __future__ import annotations

import itertools
from abc import ABC, abstractmethod
from typing import Any, Protocol


class Character(Protocol):
    id: int
    group_id: int
    x: int
    y: int
    wide: int
    height: int

    def atari_area(self) -> tuple[int, int, int, int]: ...

    def damage_area(self) -> tuple[int, int, int, int]: ...


class CharacterAction(Protocol):
    character: Character
    vx: int
    vy: int
    grand: bool
    grand_left_slope: bool
    grand_right_slope: bool

    def able_damage(self) -> bool: ...


class Controller(Protocol):
    character_action: CharacterAction

    def set_character_grand(self, grand: bool) -> None: ...

    def set_character_grand_right_slope(self, grand: bool) -> None: ...

    def set_character_grand_left_slope(self, grand: bool) -> None: ...

    def set_action_right_lock(self, lock: bool) -> None: ...

    def set_action_left_lock(self, lock: bool) -> None: ...

    def set_action_up_lock(self, lock: bool) -> None: ...

    def set_action_down_lock(self, lock: bool) -> None: ...

    def set_character_x(self, x: int) -> None: ...

    def set_character_y(self, y: int) -> None: ...

    def damage(self, vx: int, vy: int, damage_value: int) -> None: ...


STAGE_MATERIAL_DIR = "picture/stageMaterial/"
OBJECT_DEFAULT_SIZE = 0.3


class Object(ABC):
    """Something in the stage with a bounding box (x1, y1)-(x2, y2).

    An ``hp`` of -1 makes the object indestructible.
    """

    DAMAGE_CNT_SUM = 5
    _ids = itertools.count(1)

    # Defaults that attack and door objects override.
    character_id = -1
    group_id = -1
    stop_character_id = -1
    stop_cnt = 0
    damage = 0
    area_num = -1
    text_num = -1
    text = ""
    file_name = ""
    text_disp = False

    def __init__(self, x1: int = 0, y1: int = 0, x2: int = 0, y2: int = 0,
                 hp: int = -1) -> None:
        self.id = next(Object._ids)
        self.atari_id_list: list[int] = []
        self.x1, self.x2 = min(x1, x2), max(x1, x2)
        self.y1, self.y2 = min(y1, y2), max(y1, y2)
        self.handle: Any = None
        self.hp = hp
        self.bomb = False
        self.damage_cnt = 0
        self.delete_flag = False
        self.effect_handles: Any = None
        self.sound_handle = -1

    @property
    def able_delete(self) -> bool:
        return self.hp != -1

    @property
    def center_x(self) -> int:
        return (self.x1 + self.x2) // 2

    @property
    def center_y(self) -> int:
        return (self.y1 + self.y2) // 2

    @property
    def slope_flag(self) -> bool:
        return False

    @property
    def line_up_type(self) -> bool:
        """True when the picture is tiled over the box."""
        return False

    @property
    def extend_graph(self) -> bool:
        """True when the picture is stretched to fit the box."""
        return True

    def set_atari_id_list(self, ids: list[int]) -> None:
        self.atari_id_list.extend(ids)

    def get_y(self, x: int) -> int:
        """Top edge at horizontal position ``x``."""
        return self.y1

    def decrease_hp(self, damage_value: int, id: int) -> bool:
        """Take damage from attack ``id`` once; True if the hit counted."""
        if not self.able_delete:
            return False
        if id in self.atari_id_list:
            return False
        self.atari_id_list.append(id)
        self.hp = max(0, self.hp - damage_value)
        if self.hp == 0:
            self.delete_flag = True
        self.damage_cnt = self.DAMAGE_CNT_SUM
        return True

    def atari_drop_box(self, x1: int, y1: int, x2: int, y2: int,
                       vx: int, vy: int) -> tuple[bool, int, int]:
        """Collide a falling box with this object.

        Returns (landed, vx, vy) with the velocity adjusted for the collision.
        """
        if (x2 + vx >= self.x1 and x1 + vx <= self.x2
                and y2 - 1 <= self.y1 and y2 + 1 + vy >= self.y1):
            return True, 0, 0
        if x2 <= self.x1 and x2 + vx >= self.x1 and y2 > self.y1 and y1 < self.y2:
            return False, 0, vy
        if x1 >= self.x2 and x1 + vx <= self.x2 and y2 > self.y1 and y1 < self.y2:
            return False, 0, vy
        if y1 > y2 and y1 + vy <= y2 and x2 > self.x1 and x1 < self.x2:
            return False, vx, 1
        if x2 > self.x1 and x1 < self.x2 and y2 > self.y1 and y1 < self.y2:
            vy = -1 if (y1 + y2) < (self.y1 + self.y2) else 1
            vx = -1 if (x1 + x2) < (self.x1 + self.x2) else 1
            return False, vx, vy
        return False, vx, vy

    @abstractmethod
    def atari(self, controller: Controller) -> bool:
        """Collide with a character, steering it through its controller."""

    def penetration(self, controller: Controller) -> None:
        """Push out a character that ended up inside the object."""

    def atari_from_object(self, obj: Object) -> bool:
        """Be hit by another object."""
        return False

    def atari_to_object(self, obj: Object) -> bool:
        """Hit another object."""
        return False

    def action(self) -> None:
        """Advance one frame."""

    def create_attack_energy(self) -> Any:
        return None

    def create_animation(self, x: int, y: int, flame_cnt: int) -> Any:
        return None


class BoxObject(Object):
    """A rectangular wall or floor."""

    STAIR_HEIGHT = 200

    def __init__(self, x1: int, y1: int, x2: int, y2: int, file_name: str,
                 color: int, hp: int = -1) -> None:
        super().__init__(x1, y1, x2, y2, hp)
        self.file_name = file_name
        self.color = color
        self.graph_ex = OBJECT_DEFAULT_SIZE

    @property
    def graph_path(self) -> str | None:
        if self.file_name == "null":
            return None
        return STAGE_MATERIAL_DIR + self.file_name

    @property
    def line_up_type(self) -> bool:
        return True

    def atari(self, controller: Controller) -> bool:
        action = controller.character_action
        character = action.character
        cx1, cy1, cx2, cy2 = character.atari_area()
        vx, vy = action.vx, action.vy

        if cx2 > self.x1 and cx1 < self.x2:
            if cy2 <= self.y1 and cy2 + vy >= self.y1:
                controller.set_character_grand(True)
                controller.set_action_down_lock(True)
                height = cy2 - character.y
                controller.set_character_y(self.y1 - height)
            elif cy1 >= self.y2 and cy1 + vy <= self.y2:
                controller.set_action_up_lock(True)
                top = cy1 - character.y
                controller.set_character_y(self.y2 - top)

        if cy2 + vy > self.y1 and cy1 + vy < self.y2:
            slope = action.grand_left_slope or action.grand_right_slope
            stair = slope and cy2 - self.STAIR_HEIGHT <= self.y1
            if cx2 <= self.x1 and cx2 + vx >= self.x1:
                if not stair:
                    controller.set_action_right_lock(True)
                    wide = cx2 - character.x
                    controller.set_character_x(self.x1 - wide)
            elif cx1 >= self.x2 and cx1 + vx <= self.x2:
                if not stair:
                    controller.set_action_left_lock(True)
                    left = cx1 - character.x
                    controller.set_character_x(self.x2 - left)
        return False

    def penetration(self, controller: Controller) -> None:
        action = controller.character_action
        character = action.character
        cx1, cy1, cx2, cy2 = character.atari_area()
        slope = action.grand_left_slope or action.grand_right_slope
        if slope or not (cy2 > self.y1 and cy1 < self.y2
                         and cx2 > self.x1 and cx1 < self.x2):
            return
        overlap_x = min(cx2 - self.x1, self.x2 - cx1)
        overlap_y = min(cy2 - self.y1, self.y2 - cy1)
        if overlap_x < overlap_y:
            if cx1 + cx2 < self.x1 + self.x2:
                controller.set_character_x(self.x1 - (cx2 - character.x))
                controller.set_action_right_lock(True)
            else:
                controller.set_character_x(self.x2 - (cx1 - character.x))
                controller.set_action_left_lock(True)
        elif cy1 + cy2 < self.y1 + self.y2:
            controller.set_character_y(self.y1 - (cy2 - character.y))
            controller.set_character_grand(True)
            controller.set_action_down_lock(True)
        else:
            controller.set_character_y(self.y2 - (cy1 - character.y))
            controller.set_action_up_lock(True)

    def atari_from_object(self, obj: Object) -> bool:
        if (self.x2 > obj.x1 and self.x1 < obj.x2
                and self.y2 > obj.y1 and self.y1 < obj.y2):
            if obj.able_delete:
                obj.delete_flag = True
            return self.decrease_hp(obj.damage, obj.id)
        return False

    def action(self) -> None:
        if self.damage_cnt > 0:
            self.damage_cnt -= 1