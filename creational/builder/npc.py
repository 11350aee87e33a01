"""
Builder — NPC construction driven by a Director.

The builder exposes one setter per NPC attribute. NPCDirector owns the
assembly script: it knows which values and dice rolls make up a hero and
feeds them to whatever NPCBuilder it is given.

get_npc() hands the finished NPC over to the caller; the builder then
starts again from a fresh, empty NPC.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from .dice import Dice

logger = logging.getLogger(__name__)


@dataclass
class NPC:
    """A non-player character with equipment and six ability scores."""
    name: str = ""
    health: int = 0
    armor: str = ""
    weapon: str = ""
    magic: str = ""
    strength: int = 0
    intelligence: int = 0
    wisdom: int = 0
    dexterity: int = 0
    constitution: int = 0
    charisma: int = 0

    def info(self) -> str:
        """Print the attribute dump and return it."""
        lines = [
            f"NPC {self.name}:",
            f"Health: {self.health}",
            f"Armor: {self.armor}",
            f"Weapon: {self.weapon}",
            f"Magic: {self.magic}",
            f"STR: {self.strength}",
            f"INT: {self.intelligence}",
            f"WIS: {self.wisdom}",
            f"DEX: {self.dexterity}",
            f"CON: {self.constitution}",
            f"CHA: {self.charisma}",
        ]
        text = "\n".join(lines)
        print(text)
        return text


class NPCBuilder(ABC):
    """Step-by-step construction interface for an NPC."""

    @abstractmethod
    def reset(self) -> None: ...

    @abstractmethod
    def set_name(self, name: str) -> None: ...

    @abstractmethod
    def set_health(self, health: int) -> None: ...

    @abstractmethod
    def set_armor(self, armor: str) -> None: ...

    @abstractmethod
    def set_weapon(self, weapon: str) -> None: ...

    @abstractmethod
    def set_magic(self, magic: str) -> None: ...

    @abstractmethod
    def set_strength(self, strength: int) -> None: ...

    @abstractmethod
    def set_intelligence(self, intelligence: int) -> None: ...

    @abstractmethod
    def set_wisdom(self, wisdom: int) -> None: ...

    @abstractmethod
    def set_dexterity(self, dexterity: int) -> None: ...

    @abstractmethod
    def set_constitution(self, constitution: int) -> None: ...

    @abstractmethod
    def set_charisma(self, charisma: int) -> None: ...

    @abstractmethod
    def get_npc(self) -> NPC: ...


class HeroBuilder(NPCBuilder):
    """Builds a hero NPC one attribute at a time."""

    def __init__(self) -> None:
        self._npc = NPC()

    def reset(self) -> None:
        self._npc = NPC()

    def set_name(self, name: str) -> None:
        self._npc.name = name

    def set_health(self, health: int) -> None:
        self._npc.health = health

    def set_armor(self, armor: str) -> None:
        self._npc.armor = armor

    def set_weapon(self, weapon: str) -> None:
        self._npc.weapon = weapon

    def set_magic(self, magic: str) -> None:
        self._npc.magic = magic

    def set_strength(self, strength: int) -> None:
        self._npc.strength = strength

    def set_intelligence(self, intelligence: int) -> None:
        self._npc.intelligence = intelligence

    def set_wisdom(self, wisdom: int) -> None:
        self._npc.wisdom = wisdom

    def set_dexterity(self, dexterity: int) -> None:
        self._npc.dexterity = dexterity

    def set_constitution(self, constitution: int) -> None:
        self._npc.constitution = constitution

    def set_charisma(self, charisma: int) -> None:
        self._npc.charisma = charisma

    def get_npc(self) -> NPC:
        """Hand over the assembled NPC and start a new one."""
        npc = self._npc
        self.reset()
        return npc


class NPCDirector:
    """Runs the fixed assembly script for known NPCs."""

    def __init__(self, dice: Optional[Dice] = None):
        self.dice = dice if dice is not None else Dice()

    def create_hero(self, builder: NPCBuilder) -> None:
        roll = self.dice.roll

        builder.set_name("Link")
        builder.set_health(3)
        builder.set_armor("Green Tunic")
        builder.set_weapon("Fighter Sword")
        builder.set_magic("Lantern")
        builder.set_strength(roll(9, 2))
        builder.set_intelligence(roll(6, 3))
        builder.set_wisdom(roll(3, 6))
        builder.set_dexterity(roll(9, 2))
        builder.set_constitution(roll(9, 2))
        builder.set_charisma(roll(3, 6))
        logger.debug("Hero script applied to %s", type(builder).__name__)


def run_demo(seed: Optional[int] = None) -> NPC:
    """Direct a HeroBuilder and print the resulting NPC."""
    director = NPCDirector(Dice(seed))
    builder = HeroBuilder()

    director.create_hero(builder)
    hero = builder.get_npc()

    hero.info()
    return hero
