import pytest

from timesupporter.objects import STAGE_MATERIAL_DIR, BoxObject
from timesupporter.slopes import TriangleObject


class FakeCharacter:
    def __init__(self, x, y, wide, height):
        self.id = 1
        self.group_id = 0
        self.x = x
        self.y = y
        self.wide = wide
        self.height = height

    def atari_area(self):
        return self.x, self.y, self.x + self.wide, self.y + self.height

    def damage_area(self):
        return self.atari_area()


class FakeAction:
    def __init__(self, character, vx, vy):
        self.character = character
        self.vx = vx
        self.vy = vy
        self.grand = False
        self.grand_left_slope = False
        self.grand_right_slope = False

    def able_damage(self):
        return True


class FakeController:
    def __init__(self, character, vx=0, vy=0):
        self.character_action = FakeAction(character, vx, vy)
        self.locks = set()

    def set_character_grand(self, grand):
        self.character_action.grand = grand

    def set_character_grand_right_slope(self, grand):
        self.character_action.grand_right_slope = grand

    def set_character_grand_left_slope(self, grand):
        self.character_action.grand_left_slope = grand

    def _lock(self, name, lock):
        if lock:
            self.locks.add(name)

    def set_action_right_lock(self, lock):
        self._lock("right", lock)

    def set_action_left_lock(self, lock):
        self._lock("left", lock)

    def set_action_up_lock(self, lock):
        self._lock("up", lock)

    def set_action_down_lock(self, lock):
        self._lock("down", lock)

    def set_character_x(self, x):
        self.character_action.character.x = x

    def set_character_y(self, y):
        self.character_action.character.y = y

    def damage(self, vx, vy, damage_value):
        pass


def test_get_y_left_down_endpoints_and_outside():
    slope = TriangleObject(0, 0, 100, 100, "null", 0, True)
    assert slope.get_y(0) == 100
    assert slope.get_y(100) == 0
    assert slope.get_y(-50) == slope.y2
    assert slope.get_y(500) == slope.y1


def test_get_y_right_down_endpoints_and_outside():
    slope = TriangleObject(0, 0, 100, 100, "null", 0, False)
    assert slope.get_y(0) == 0
    assert slope.get_y(100) == 100
    assert slope.get_y(-50) == slope.y1
    assert slope.get_y(500) == slope.y2


@pytest.mark.parametrize("left_down", [True, False])
def test_get_y_monotone_and_within_box(left_down):
    slope = TriangleObject(20, 40, 220, 140, "null", 0, left_down)
    heights = [slope.get_y(x) for x in range(20, 221)]
    assert all(40 <= h <= 140 for h in heights)
    pairs = list(zip(heights, heights[1:]))
    if left_down:
        assert all(a >= b for a, b in pairs)
    else:
        assert all(a <= b for a, b in pairs)


def test_corners_are_normalised():
    slope = TriangleObject(100, 100, 0, 0, "null", 0, True)
    assert (slope.x1, slope.y1, slope.x2, slope.y2) == (0, 0, 100, 100)
    assert slope.slope_flag


def test_graph_path_and_reverse():
    assert TriangleObject(0, 0, 10, 10, "null", 0, True).graph_path is None
    slope = TriangleObject(0, 0, 10, 10, "slope.png", 0, False)
    assert slope.graph_path == STAGE_MATERIAL_DIR + "slope.png"
    assert slope.graph_reverse_x is True
    assert TriangleObject(0, 0, 10, 10, "slope.png", 0, True).graph_reverse_x is False


def test_character_standing_on_slope_stays_grounded():
    slope = TriangleObject(0, 0, 100, 100, "null", 0, True)
    surface = slope.get_y(50)
    character = FakeCharacter(40, surface - 40, 20, 40)
    controller = FakeController(character)
    assert slope.atari(controller) is False
    assert controller.character_action.grand
    assert controller.character_action.grand_right_slope
    assert not controller.character_action.grand_left_slope
    assert "down" in controller.locks
    assert character.y + character.height == surface


def test_falling_character_lands_on_slope():
    slope = TriangleObject(0, 0, 100, 100, "null", 0, False)
    surface = slope.get_y(50)
    character = FakeCharacter(40, surface - 60, 20, 40)
    controller = FakeController(character, vy=30)
    slope.atari(controller)
    assert controller.character_action.grand
    assert controller.character_action.grand_left_slope
    assert character.y == surface - character.height


def test_far_character_is_untouched():
    slope = TriangleObject(0, 0, 100, 100, "null", 0, True)
    character = FakeCharacter(500, 10, 20, 40)
    controller = FakeController(character, vx=3, vy=3)
    slope.atari(controller)
    assert controller.locks == set()
    assert not controller.character_action.grand
    assert (character.x, character.y) == (500, 10)


def test_side_wall_blocks_character_moving_left():
    slope = TriangleObject(0, 0, 100, 100, "null", 0, True)
    character = FakeCharacter(105, 20, 20, 40)
    controller = FakeController(character, vx=-10)
    slope.atari(controller)
    assert "left" in controller.locks
    assert character.x == slope.x2


def test_penetration_pushes_character_up_onto_surface():
    slope = TriangleObject(0, 0, 100, 100, "null", 0, False)
    character = FakeCharacter(45, 40, 10, 40)
    controller = FakeController(character)
    slope.penetration(controller)
    assert controller.character_action.grand
    assert "down" in controller.locks
    assert character.y + character.height == slope.get_y(50)


def test_penetration_ignores_character_above_surface():
    slope = TriangleObject(0, 0, 100, 100, "null", 0, False)
    character = FakeCharacter(45, 0, 10, 20)
    controller = FakeController(character)
    slope.penetration(controller)
    assert controller.locks == set()
    assert character.y == 0


def test_drop_box_resting_on_surface_is_stopped():
    slope = TriangleObject(0, 0, 100, 100, "null", 0, True)
    surface = slope.get_y(50)
    assert slope.atari_drop_box(40, surface - 20, 60, surface, 3, 5) == (False, 0, 0)


def test_drop_box_buried_is_pushed_out():
    slope = TriangleObject(0, 0, 100, 100, "null", 0, True)
    landed, vx, vy = slope.atari_drop_box(10, 10, 30, 95, 0, 0)
    assert landed is False
    assert vx == -1
    assert vy in (-1, 1)


def test_drop_box_far_away_keeps_velocity():
    slope = TriangleObject(0, 0, 100, 100, "null", 0, True)
    assert slope.atari_drop_box(500, 0, 520, 20, 4, 7) == (False, 4, 7)


def test_atari_from_object_hits_only_above_surface_line():
    slope = TriangleObject(0, 0, 100, 100, "null", 0, True, hp=10)
    high = BoxObject(80, 10, 90, 20, "null", 0, hp=5)
    high.damage = 3
    assert slope.atari_from_object(high) is True
    assert slope.hp == 7
    assert high.delete_flag is True
    assert slope.atari_from_object(high) is False
    assert slope.hp == 7

    low = BoxObject(5, 10, 15, 20, "null", 0)
    low.damage = 3
    assert slope.atari_from_object(low) is False
    assert low.delete_flag is False


def test_action_counts_damage_down():
    slope = TriangleObject(0, 0, 100, 100, "null", 0, True, hp=10)
    other = BoxObject(80, 10, 90, 20, "null", 0)
    other.damage = 1
    slope.atari_from_object(other)
    assert slope.damage_cnt == TriangleObject.DAMAGE_CNT_SUM
    for _ in range(TriangleObject.DAMAGE_CNT_SUM + 3):
        slope.action()
    assert slope.damage_cnt == 0