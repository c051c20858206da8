import math

import pytest

from timesupporter.attacks import AttackInfo, BulletObject, ParabolaBullet, SlashObject
from timesupporter.items import EnergyItem
from timesupporter.objects import BoxObject


class FakeCharacter:
    def __init__(self, id=1, group_id=2, area=(90, 90, 110, 110)):
        self.id = id
        self.group_id = group_id
        self.area = area

    def damage_area(self):
        return self.area


class FakeAction:
    def __init__(self, character, able=True):
        self.character = character
        self.able = able

    def able_damage(self):
        return self.able


class FakeController:
    def __init__(self, character, able=True):
        self.character_action = FakeAction(character, able)
        self.damages = []

    def damage(self, vx, vy, value):
        self.damages.append((vx, vy, value))


def make_bullet(gx=200, gy=100, speed=5, distance=10, damage=7, erase=0):
    info = AttackInfo(bullet_rx=5, bullet_ry=5, bullet_damage=damage,
                      bullet_distance=distance, bullet_hp=1, bullet_speed=speed)
    bullet = BulletObject(100, 100, 0, gx, gy, erase, info)
    bullet.group_id = 0
    return bullet


def test_bullet_box_and_velocity():
    bullet = make_bullet()
    assert (bullet.x1, bullet.y1, bullet.x2, bullet.y2) == (95, 95, 105, 105)
    assert (bullet.vx, bullet.vy) == (5, 0)
    assert bullet.reverse_x is False


def test_bullet_moves_until_range_runs_out():
    bullet = make_bullet(speed=5, distance=10)
    bullet.action()
    assert bullet.x1 == 100
    assert bullet.delete_flag is False
    bullet.action()
    assert bullet.delete_flag is True


def test_bullet_hits_enemy():
    bullet = make_bullet(gx=0, damage=7)
    controller = FakeController(FakeCharacter())
    assert bullet.atari(controller) is True
    assert controller.damages == [(-2, 0, 7)]
    assert bullet.delete_flag is True


@pytest.mark.parametrize("character", [
    FakeCharacter(id=0, group_id=5),
    FakeCharacter(group_id=0),
    FakeCharacter(group_id=-1),
])
def test_bullet_skips_owner_team_and_neutral(character):
    bullet = make_bullet()
    bullet.character_id = 0
    controller = FakeController(character)
    assert bullet.atari(controller) is False
    assert controller.damages == []


def test_bullet_ignores_empty_area_and_invincible():
    bullet = make_bullet()
    assert bullet.atari(FakeController(FakeCharacter(area=(100, 100, 100, 100)))) is False
    assert bullet.atari(FakeController(FakeCharacter(), able=False)) is False


def test_bullet_damages_object_once():
    bullet = make_bullet(damage=3)
    box = BoxObject(90, 90, 110, 110, "null", 0, hp=10)
    assert bullet.atari_to_object(box) is True
    assert box.hp == 7
    assert bullet.atari_to_object(box) is False
    assert box.hp == 7


def test_bullet_energy_every_fifteen_frames():
    bullet = make_bullet(erase=30, damage=4)
    items = [bullet.create_attack_energy() for _ in range(15)]
    assert items[:14] == [None] * 14
    assert isinstance(items[14], EnergyItem)
    assert items[14].energy_value == 4
    assert items[14].erase_time == 30


def test_bullet_without_info_is_inert():
    bullet = BulletObject(10, 10, 0, 20, 20, 0)
    assert (bullet.vx, bullet.vy, bullet.damage) == (0, 0, 0)
    assert bullet.create_attack_energy() is None


def test_parabola_falls():
    info = AttackInfo(bullet_rx=2, bullet_ry=2, bullet_speed=10, bullet_distance=1)
    bullet = ParabolaBullet(0, 0, 0, 100, 0, 0, info)
    assert bullet.angle == 0.0
    bullet.action()
    assert bullet.vy == ParabolaBullet.G
    bullet.action()
    assert bullet.vy == 2 * ParabolaBullet.G
    assert bullet.delete_flag is False
    assert bullet.angle == pytest.approx(math.atan2(bullet.vy, bullet.vx))
    assert bullet.extend_graph is False


def make_slash(count=3, erase=0):
    info = AttackInfo(slash_hp=1, slash_damage=9, slash_impact_x=4,
                      slash_impact_y=6, slash_stop_cnt=5)
    slash = SlashObject(0, 0, 20, 20, count, erase, info)
    slash.group_id = 0
    slash.character_id = 0
    return slash


def test_slash_knocks_back_away_from_centre():
    slash = make_slash()
    left = FakeController(FakeCharacter(area=(-10, 0, 5, 10)))
    right = FakeController(FakeCharacter(area=(15, 0, 40, 10)))
    assert slash.atari(left) is True
    assert slash.atari(right) is True
    assert left.damages == [(-4, -6, 9)]
    assert right.damages == [(4, -6, 9)]
    assert slash.stop_cnt == 5
    assert slash.stop_character_id == 0


def test_slash_skips_own_group():
    slash = make_slash()
    controller = FakeController(FakeCharacter(group_id=0, area=(0, 0, 10, 10)))
    assert slash.atari(controller) is False
    assert slash.stop_cnt == 0


def test_slash_expires():
    slash = make_slash(count=3)
    slash.action()
    slash.action()
    assert slash.delete_flag is False
    slash.action()
    assert slash.delete_flag is True


def test_slash_energy_once_on_last_frame():
    slash = make_slash(count=3, erase=40)
    assert slash.create_attack_energy() is None
    slash.action()
    slash.action()
    item = slash.create_attack_energy()
    assert isinstance(item, EnergyItem)
    assert item.energy_value == 9
    assert slash.create_attack_energy() is None


def test_slash_damages_object():
    slash = make_slash()
    box = BoxObject(10, 10, 30, 30, "null", 0, hp=20)
    assert slash.atari_to_object(box) is True
    assert box.hp == 11