"""Conditions that start an event; they only look at the world."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Protocol


class Character(Protocol):
    y: int
    height: int

    @property
    def center_x(self) -> int: ...


class World(Protocol):
    area_num: int

    def character_with_name(self, name: str) -> Character | None: ...


def _foot(character: Character) -> tuple[int, int]:
    return character.center_x, character.y + character.height


class EventFire(ABC):
    """A condition checked every frame; the event starts when all hold."""

    def __init__(self, world: World) -> None:
        self.world = world

    @abstractmethod
    def fire(self) -> bool:
        """True when the condition holds."""

    def set_world(self, world: World) -> None:
        self.world = world


class CharacterPointFire(EventFire):
    """A named character stands near a point in a given area.

    param: [name, character, area, x, y, dx, dy]
    """

    def __init__(self, world: World, param: Sequence[str]) -> None:
        super().__init__(world)
        self.param = list(param)
        self.character = world.character_with_name(self.param[1])
        self.area_num = int(self.param[2])
        self.x = int(self.param[3])
        self.y = int(self.param[4])
        self.dx = int(self.param[5])
        self.dy = int(self.param[6])

    def fire(self) -> bool:
        if self.world.area_num != self.area_num:
            return False
        x, y = _foot(self.character)
        return (self.x - self.dx < x < self.x + self.dx
                and self.y - self.dy < y < self.y + self.dy)

    def set_world(self, world: World) -> None:
        super().set_world(world)
        self.character = world.character_with_name(self.param[1])


class CharacterNearFire(EventFire):
    """A named character stands near another named character.

    param: [name, character, target, dx, dy]
    """

    def __init__(self, world: World, param: Sequence[str]) -> None:
        super().__init__(world)
        self.param = list(param)
        self.character = world.character_with_name(self.param[1])
        self.target = world.character_with_name(self.param[2])
        self.dx = int(self.param[3])
        self.dy = int(self.param[4])
        self.area_num = world.area_num

    def fire(self) -> bool:
        if self.world.area_num != self.area_num:
            self.area_num = self.world.area_num
            self.target = self.world.character_with_name(self.param[2])
        if self.target is None:
            self.target = self.world.character_with_name(self.param[2])
            return False
        x, y = _foot(self.character)
        tx, ty = _foot(self.target)
        return tx - self.dx < x < tx + self.dx and ty - self.dy < y < ty + self.dy

    def set_world(self, world: World) -> None:
        super().set_world(world)
        self.character = world.character_with_name(self.param[1])


class AutoFire(EventFire):
    """Always fires."""

    def fire(self) -> bool:
        return True


class NonFire(EventFire):
    """Never fires; used to disable an event."""

    def fire(self) -> bool:
        return False


def create_fire(param: Sequence[str], world: World) -> EventFire | None:
    """Build the condition named by ``param[0]``; None for an unknown name."""
    name = param[0]
    if name == "CharacterPoint":
        return CharacterPointFire(world, param)
    if name == "CharacterNear":
        return CharacterNearFire(world, param)
    if name == "Auto":
        return AutoFire(world)
    if name == "Non":
        return NonFire(world)
    return None