"""Right-triangle stage objects: slopes that characters can walk on."""

from __future__ import annotations

from timesupporter.objects import (
    OBJECT_DEFAULT_SIZE,
    STAGE_MATERIAL_DIR,
    Controller,
    Object,
)


def _tdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


class TriangleObject(Object):
    """A slope filling the lower half of its box, cut by the diagonal.

    With ``left_down`` the surface is low on the left and high on the right;
    otherwise it is high on the left and low on the right.
    """

    def __init__(self, x1: int, y1: int, x2: int, y2: int, file_name: str,
                 color: int, left_down: bool, hp: int = -1) -> None:
        super().__init__(x1, y1, x2, y2, hp)
        self.color = color
        self.file_name = file_name
        self.left_down = left_down
        self.graph_ex = OBJECT_DEFAULT_SIZE

    @property
    def graph_path(self) -> str | None:
        if self.file_name == "null":
            return None
        return STAGE_MATERIAL_DIR + self.file_name

    @property
    def graph_reverse_x(self) -> bool:
        """The picture is drawn mirrored for slopes that go down to the right."""
        return not self.left_down

    @property
    def slope_flag(self) -> bool:
        return True

    def get_y(self, x: int) -> int:
        """Height of the slope's surface at horizontal position ``x``."""
        if x < self.x1:
            return self.y2 if self.left_down else self.y1
        if x > self.x2:
            return self.y1 if self.left_down else self.y2
        rise = float(self.y1 - self.y2)
        if not self.left_down:
            rise = -rise
        run = float(self.x2 - self.x1)
        anchor = self.x2 if self.left_down else self.x1
        intercept = self.y1 - (rise * anchor / run)
        return int(rise * x / run + intercept)

    def _land(self, controller: Controller, center_x: int, upper_inclusive: bool) -> None:
        controller.set_character_grand(True)
        inside = (self.x1 < center_x <= self.x2) if upper_inclusive \
            else (self.x1 < center_x < self.x2)
        if inside:
            if self.left_down:
                controller.set_character_grand_right_slope(True)
            else:
                controller.set_character_grand_left_slope(True)
        controller.set_action_down_lock(True)

    def atari(self, controller: Controller) -> bool:
        action = controller.character_action
        character = action.character
        cx1, cy1, cx2, cy2 = character.atari_area()
        center_x = _tdiv(cx1 + cx2, 2)
        vx, vy = action.vx, action.vy

        if cx2 > self.x1 and cx1 < self.x2:
            previous = self.get_y(center_x - vx)
            here = self.get_y(center_x)
            if cy2 - 1 <= previous <= cy2 + 1:
                # Was standing on the slope last frame: keep it grounded.
                self._land(controller, center_x, upper_inclusive=False)
                controller.set_character_y(here - (cy2 - character.y))
            elif cy2 <= here and cy2 + vy >= here:
                self._land(controller, center_x, upper_inclusive=False)
                controller.set_character_y(here - (cy2 - character.y))
            elif cy1 >= self.y2 and cy1 + vy <= self.y2:
                controller.set_action_up_lock(True)
                controller.set_character_y(self.y2 - (cy1 - character.y))

        here = self.get_y(center_x)
        if cx2 > self.x1 and cx1 < self.x2 and here <= cy2 <= self.y2:
            self._land(controller, center_x, upper_inclusive=True)
            controller.set_character_y(here - (cy2 - character.y))

        # The sharp tip of the slope.
        if cy1 < self.y2 < cy2:
            if self.left_down:
                if cx2 <= self.x1 and cx2 + vx >= self.x1:
                    controller.set_action_right_lock(True)
                    controller.set_character_x(self.x1 - (cx2 - character.x))
            elif cx1 >= self.x2 and cx1 + vx <= self.x2:
                controller.set_action_left_lock(True)
                controller.set_character_x(self.x2 - (cx1 - character.x))

        # The vertical side of the slope.
        if cy2 > self.y1 and cy1 < self.y2:
            if self.left_down:
                if cx1 >= self.x2 and cx1 + vx <= self.x2:
                    controller.set_action_left_lock(True)
                    controller.set_character_x(self.x2 - (cx1 - character.x))
            elif cx2 <= self.x1 and cx2 + vx >= self.x1:
                controller.set_action_right_lock(True)
                controller.set_character_x(self.x1 - (cx2 - character.x))
        return False

    def atari_drop_box(self, x1: int, y1: int, x2: int, y2: int,
                       vx: int, vy: int) -> tuple[bool, int, int]:
        """Collide a falling box with the slope; returns (landed, vx, vy).

        A box resting on the surface is stopped but the further checks still
        run, so ``landed`` is never reported for a slope.
        """
        y = self.get_y(_tdiv(x1 + x2, 2))
        if (x2 + vx >= self.x1 and x1 + vx <= self.x2
                and y2 - 1 <= y and y2 + 1 + vy >= y):
            vx, vy = 0, 0
        if x2 <= self.x1 and x2 + vx >= self.x1 and y2 > y and y1 < self.y2:
            return False, 0, vy
        if x1 >= self.x2 and x1 + vx <= self.x2 and y2 > y and y1 < self.y2:
            return False, 0, vy
        if y1 > y2 and y1 + vy <= y2 and x2 > self.x1 and x1 < self.x2:
            return False, vx, 1
        if x2 > self.x1 and x1 < self.x2 and y2 > y and y1 < self.y2:
            vy = -1 if (y1 + y2) < (self.y1 + self.y2) else 1
            vx = -1 if (x1 + x2) < (self.x1 + self.x2) else 1
            return False, vx, vy
        return False, vx, vy

    def penetration(self, controller: Controller) -> None:
        action = controller.character_action
        character = action.character
        cx1, cy1, cx2, cy2 = character.atari_area()
        slope_y = self.get_y(_tdiv(cx1 + cx2, 2))
        if not (cy2 > slope_y and cy1 < self.y2 and cx2 > self.x1 and cx1 < self.x2):
            return
        overlap_x = min(cx2 - self.x1, self.x2 - cx1)
        overlap_y = min(cy2 - slope_y, self.y2 - cy1)
        if overlap_x < overlap_y:
            if cx1 + cx2 < self.x1 + self.x2:
                controller.set_character_x(self.x1 - (cx2 - character.x))
                controller.set_action_right_lock(True)
            else:
                controller.set_character_x(self.x2 - (cx1 - character.x))
                controller.set_action_left_lock(True)
        elif cy1 + cy2 < slope_y + self.y2:
            controller.set_character_y(slope_y - (cy2 - character.y))
            controller.set_character_grand(True)
            controller.set_action_down_lock(True)
        else:
            controller.set_character_y(self.y2 - (cy1 - character.y))
            controller.set_action_up_lock(True)

    def atari_from_object(self, obj: Object) -> bool:
        top = self.get_y(obj.x2) if self.left_down else self.get_y(obj.x1)
        if (self.x2 > obj.x1 and self.x1 < obj.x2
                and self.y2 > obj.y1 and top < obj.y2):
            if obj.able_delete:
                obj.delete_flag = True
            return self.decrease_hp(obj.damage, obj.id)
        return False

    def action(self) -> None:
        if self.damage_cnt > 0:
            self.damage_cnt -= 1