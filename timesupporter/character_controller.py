"""Controllers: the link between a brain that decides and an action that moves."""

from __future__ import annotations

from typing import Any, Protocol

DAMAGED_ID_LIMIT = 10
DAMAGED_ID_DROP = 4
FREEZE_BRAIN_NAME = "Freeze"


class Character(Protocol):
    hp: int

    @property
    def center_x(self) -> int: ...


class Brain(Protocol):
    character_action: Any
    brain_name: str
    gx: int
    gy: int

    def action_order(self) -> bool: ...

    def set_target(self, character: Any) -> None: ...

    def search_target(self, character: Any) -> None: ...

    def search_follow(self, character: Any) -> None: ...

    def set_follow(self, character: Any) -> None: ...

    def move_order(self) -> tuple[int, int, int, int]: ...

    def move_goal_order(self) -> tuple[int, int, int, int, int, bool]: ...

    def jump_order(self) -> int: ...

    def squat_order(self) -> int: ...

    def bullet_target_point(self) -> tuple[int, int]: ...

    def bullet_order(self) -> int: ...

    def slash_target_point(self) -> tuple[int, int]: ...

    def slash_order(self) -> int: ...


class CharacterController:
    """Passes a brain's orders on to the action that moves a character.

    Subclasses decide how the orders become movement and attacks.
    """

    CONTROLLER_NAME = "CharacterController"

    def __init__(self, brain: Brain, action: Any) -> None:
        self.brain = brain
        self.character_action = action
        # Ids of objects that already hurt the character, so a hit counts once.
        self.damaged_object_ids: list[int] = []
        self.brain.character_action = action

    @property
    def controller_name(self) -> str:
        return self.CONTROLLER_NAME

    @property
    def character(self) -> Any:
        return self.character_action.character

    def action_key(self) -> bool:
        """True while the talk / enter-door button is ordered."""
        return self.brain.action_order()

    def set_action(self, action: Any) -> None:
        self.character_action = action
        self.brain.character_action = action

    def set_brain(self, brain: Brain) -> None:
        self.brain = brain
        self.brain.character_action = self.character_action

    def set_target(self, character: Any) -> None:
        self.brain.set_target(character)

    def set_damaged_object_ids(self, ids: list[int]) -> None:
        self.damaged_object_ids.extend(ids)

    # Steering used by stage objects during collision checks.
    def set_character_grand(self, grand: bool) -> None:
        self.character_action.grand = grand

    def set_character_grand_right_slope(self, grand: bool) -> None:
        self.character_action.grand_right_slope = grand

    def set_character_grand_left_slope(self, grand: bool) -> None:
        self.character_action.grand_left_slope = grand

    def set_action_right_lock(self, lock: bool) -> None:
        self.character_action.right_lock = lock

    def set_action_left_lock(self, lock: bool) -> None:
        self.character_action.left_lock = lock

    def set_action_up_lock(self, lock: bool) -> None:
        self.character_action.up_lock = lock

    def set_action_down_lock(self, lock: bool) -> None:
        self.character_action.down_lock = lock

    def set_action_sound(self, sound_player: Any) -> None:
        self.character_action.sound_player = sound_player

    def set_character_dead_flag(self, dead_flag: bool) -> None:
        self.character_action.dead_flag = dead_flag

    def set_character_x(self, x: int) -> None:
        self.character_action.set_character_x(x)

    def set_character_y(self, y: int) -> None:
        self.character_action.set_character_y(y)

    def set_character_freeze(self, freeze: bool) -> None:
        self.character_action.set_character_freeze(freeze)

    def add_action_dx(self, value: int) -> None:
        self.character_action.dx += value

    def init(self) -> None:
        """Reset the action before the frame's collision checks."""
        self.character_action.init()

    def search_target_candidate(self, character: Any) -> None:
        self.brain.search_target(character)

    def search_follow_candidate(self, character: Any) -> None:
        self.brain.search_follow(character)

    def set_brain_target(self, character: Any) -> None:
        self.brain.set_target(character)

    def set_brain_follow(self, character: Any) -> None:
        self.brain.set_follow(character)

    def action(self) -> None:
        """Apply the frame's orders and collisions: actually move the character."""
        self.character_action.action()

    def set_player_direction(self, player: Character, all: bool = False) -> None:
        """Turn toward the player; only frozen brains unless ``all`` is set."""
        if self.brain.brain_name != FREEZE_BRAIN_NAME and not all:
            return
        if not self.character_action.able_change_direction():
            return
        self.character_action.set_character_left_direction(
            player.center_x < self.character.center_x)

    def set_goal(self, gx: int, gy: int) -> None:
        self.brain.gx = gx
        self.brain.gy = gy

    def move_goal(self) -> bool:
        """Walk toward the goal; True once it is reached or the character is down."""
        if self.character.hp == 0:
            return True
        right, left, up, down, jump, done = self.brain.move_goal_order()
        self.character_action.move(right, left, up, down)
        self.character_action.jump(jump)
        return done

    def consume_stop_cnt(self) -> None:
        self.character_action.consume_stop_cnt()

    def stop_character(self, cnt: int) -> None:
        self.character_action.stop_character(cnt)

    def check_and_push_damaged_object_id(self, id: int) -> bool:
        """True if ``id`` already hurt the character; otherwise remember it."""
        if id in self.damaged_object_ids:
            return True
        self.damaged_object_ids.append(id)
        if len(self.damaged_object_ids) > DAMAGED_ID_LIMIT:
            del self.damaged_object_ids[:DAMAGED_ID_DROP]
        return False

    def control(self) -> None:
        """Move, jump and squat as ordered; once per frame."""
        raise NotImplementedError

    def bullet_attack(self) -> Any:
        raise NotImplementedError

    def slash_attack(self) -> Any:
        raise NotImplementedError

    def damage(self, vx: int, vy: int, damage_value: int) -> None:
        raise NotImplementedError


class NormalController(CharacterController):
    """The ordinary controller used by players and computer characters alike."""

    CONTROLLER_NAME = "NormalController"
    JUMP_KEY_LONG = 10

    def _down(self) -> bool:
        return self.character.hp == 0

    def control(self) -> None:
        action = self.character_action
        right = left = up = down = 0
        if not self._down():
            right, left, up, down = self.brain.move_order()
        action.move(right, left, up, down)

        jump = 0 if self._down() else self.brain.jump_order()
        action.jump(jump)
        if jump == 1 and (right > 0 or left > 0):
            action.set_boost(left > right)

        squat = 0 if self._down() else self.brain.squat_order()
        action.set_squat(squat)

        if down > 0 and (left == 1 or right == 1):
            action.set_step(left == 1)

    def bullet_attack(self) -> Any:
        """Shoot at the brain's target; the new attack objects, or None."""
        if self._down():
            return None
        target_x, target_y = self.brain.bullet_target_point()
        order = self.brain.bullet_order()
        if order > 0 or self.character_action.bullet_cnt > 0:
            return self.character_action.bullet_attack(target_x, target_y)
        return None

    def slash_attack(self) -> Any:
        """Slash or slide at the brain's target; the new attack objects, or None."""
        if self._down():
            return None
        action = self.character_action
        target_x, target_y = self.brain.slash_target_point()
        order = self.brain.slash_order()
        if order == 1:
            action.set_sliding(self.character.center_x > target_x)
        if action.sliding_done != 0:
            return action.sliding_attack()
        if order == 1 or action.slash_cnt > 0:
            return action.slash_attack(target_x, target_y)
        return None

    def damage(self, vx: int, vy: int, damage_value: int) -> None:
        self.character_action.damage(vx, vy, damage_value)


def create_controller(name: str, brain: Brain, action: Any) -> CharacterController | None:
    """Build the controller class named ``name``; None for an unknown name."""
    if name == NormalController.CONTROLLER_NAME:
        return NormalController(brain, action)
    return None