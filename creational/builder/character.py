"""
Builder — self-assembling character archetypes.

Each archetype builder knows its own name pool and stat table, expressed
as roll(count, sides) + modifier. assemble() fills every attribute in one
fixed order: name, health, then STR, INT, WIS, DEX, CON, CHA.

CharacterDirector only calls reset() and assemble(); it adds no logic of
its own. The builder keeps the assembled Character and returns the same
object from every get_character() call until the next reset(), so several
holders can share one character.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from .dice import Dice, StatRoll

logger = logging.getLogger(__name__)


class Archetype(Enum):
    """Character archetypes with their own builder."""
    HERO = "hero"
    ROGUE = "rogue"
    MAGE = "mage"


# Assembly order for ability scores
STAT_ORDER = (
    "strength",
    "intelligence",
    "wisdom",
    "dexterity",
    "constitution",
    "charisma",
)

STAT_LABELS = {
    "strength": "STR",
    "intelligence": "INT",
    "wisdom": "WIS",
    "dexterity": "DEX",
    "constitution": "CON",
    "charisma": "CHA",
}


class IncompleteCharacterError(RuntimeError):
    """Raised when a character is requested before it has been assembled."""


@dataclass
class Character:
    """An RPG character with health and six ability scores."""
    name: str = ""
    archetype: Optional[Archetype] = None
    health: int = 0
    strength: int = 0
    intelligence: int = 0
    wisdom: int = 0
    dexterity: int = 0
    constitution: int = 0
    charisma: int = 0

    def stats(self) -> dict[str, int]:
        return {stat: getattr(self, stat) for stat in STAT_ORDER}

    def info(self) -> str:
        """Print the formatted attribute dump and return it."""
        archetype = self.archetype.value.title() if self.archetype else "Unknown"
        lines = [
            f"{archetype} {self.name}:",
            f"Health: {self.health}",
        ]
        for stat, value in self.stats().items():
            lines.append(f"{STAT_LABELS[stat]}: {value:>2}")

        text = "\n".join(lines)
        print(text)
        return text


# =============================================================================
# BUILDERS
# =============================================================================

class CharacterBuilder:
    """
    Base builder for one archetype.

    Subclasses provide:
        archetype — the Archetype they build
        NAMES     — pool of names, one is rolled per character
        HEALTH    — StatRoll for hit points
        STATS     — StatRoll per ability in STAT_ORDER
    """

    archetype: Archetype
    NAMES: tuple[str, ...] = ()
    HEALTH: StatRoll
    STATS: dict[str, StatRoll] = {}

    def __init__(self, dice: Optional[Dice] = None):
        self.dice = dice if dice is not None else Dice()
        self._character = Character()
        self._assembled = False

    def reset(self) -> None:
        """Start over with a fresh, empty character."""
        self._character = Character()
        self._assembled = False

    def assemble(self) -> None:
        """Populate every attribute of the current character."""
        character = self._character
        character.archetype = self.archetype
        character.name = self._roll_name()
        character.health = self.HEALTH.roll(self.dice)
        for stat in STAT_ORDER:
            setattr(character, stat, self.STATS[stat].roll(self.dice))

        self._assembled = True
        logger.debug("Assembled %s %s", self.archetype.value, character.name)

    def get_character(self) -> Character:
        """Return the assembled character (shared until reset)."""
        if not self._assembled:
            raise IncompleteCharacterError(
                f"{type(self).__name__} has no assembled character; call assemble() first"
            )
        return self._character

    def _roll_name(self) -> str:
        index = self.dice.roll(1, len(self.NAMES)) - 1
        return self.NAMES[index]


class HeroBuilder(CharacterBuilder):
    archetype = Archetype.HERO
    NAMES = ("Aldric", "Brienne", "Cedric", "Elowen")
    HEALTH = StatRoll(4, 8, 10)
    STATS = {
        "strength": StatRoll(1, 6, 12),
        "intelligence": StatRoll(3, 4),
        "wisdom": StatRoll(2, 6, 2),
        "dexterity": StatRoll(2, 4, 8),
        "constitution": StatRoll(1, 6, 12),
        "charisma": StatRoll(3, 6),
    }


class RogueBuilder(CharacterBuilder):
    archetype = Archetype.ROGUE
    NAMES = ("Vex", "Nyx", "Sable", "Corvin")
    HEALTH = StatRoll(3, 6, 6)
    STATS = {
        "strength": StatRoll(3, 4, 2),
        "intelligence": StatRoll(2, 6, 4),
        "wisdom": StatRoll(2, 4, 4),
        "dexterity": StatRoll(1, 6, 12),
        "constitution": StatRoll(3, 4, 2),
        "charisma": StatRoll(2, 6, 6),
    }


class MageBuilder(CharacterBuilder):
    archetype = Archetype.MAGE
    NAMES = ("Morwen", "Thalion", "Isolde", "Quill")
    HEALTH = StatRoll(2, 6, 4)
    STATS = {
        "strength": StatRoll(3, 4),
        "intelligence": StatRoll(1, 6, 12),
        "wisdom": StatRoll(2, 4, 10),
        "dexterity": StatRoll(3, 4, 2),
        "constitution": StatRoll(2, 4, 4),
        "charisma": StatRoll(2, 6, 4),
    }


BUILDERS: dict[Archetype, type[CharacterBuilder]] = {
    Archetype.HERO: HeroBuilder,
    Archetype.ROGUE: RogueBuilder,
    Archetype.MAGE: MageBuilder,
}


def get_character_builder(
    archetype: Union[Archetype, str],
    dice: Optional[Dice] = None,
) -> CharacterBuilder:
    """
    Return a builder for an archetype.

    Raises:
        ValueError: If the archetype is not known
    """
    if isinstance(archetype, str):
        archetype = Archetype(archetype.strip().lower())
    if archetype not in BUILDERS:
        raise ValueError(f"No builder for archetype {archetype!r}")
    return BUILDERS[archetype](dice)


# =============================================================================
# DIRECTOR
# =============================================================================

class CharacterDirector:
    """Triggers assembly on any CharacterBuilder."""

    def construct(self, builder: CharacterBuilder) -> Character:
        builder.reset()
        builder.assemble()
        return builder.get_character()


def run_demo(
    archetype: Union[Archetype, str] = Archetype.HERO,
    seed: Optional[int] = None,
) -> Character:
    """Build one character of the given archetype and print it."""
    builder = get_character_builder(archetype, Dice(seed))
    character = CharacterDirector().construct(builder)
    character.info()
    return character
