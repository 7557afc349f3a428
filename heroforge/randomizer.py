"""
heroforge/randomizer.py  ·  random draft values from fixed vocab lists

Every picker takes the random source explicitly so tests can seed it.
"""
from __future__ import annotations

import random

from .models import CharacterDraft

RACES   = ["Human", "Elf", "Dwarf", "Orc", "Halfling", "Dragonborn", "Tiefling", "Gnome"]
CLASSES = ["Warrior", "Mage", "Rogue", "Cleric", "Paladin", "Ranger", "Warlock", "Bard", "Monk"]

FIRST_NAMES = [
    "Aelar", "Bryn", "Caelan", "Darian", "Elara", "Fendrel", "Gareth", "Hadrian",
    "Ithil", "Joric", "Lyra", "Maeve", "Nia", "Orin", "Perrin", "Quinn", "Roric",
    "Seraphina", "Talon", "Urien", "Vael", "Wren", "Xylia", "Yara", "Zephyr",
]
LAST_NAMES = [
    "Stormwind", "Ironhand", "Shadowglen", "Brightwood", "Stoneforged", "Nightbreeze",
    "Fireheart", "Winterfall", "Sunstrider", "Blackwood", "Silvermoon", "Dragonfyre",
]

ADJECTIVES = [
    "glowing", "ancient", "runic", "shadowy", "ethereal", "ornate",
    "battle-scarred", "gleaming", "dark", "crystal", "fiery", "frost-touched",
]
FEATURES = [
    "tattoos on their face", "a mechanical arm", "heterochromia eyes",
    "long, braided hair", "a prominent scar", "pointed ears", "small horns",
    "a faint aura", "unusual skin color", "a prosthetic leg",
]
ITEMS = [
    "carrying a mystical orb", "wielding a crystal-edged sword",
    "wearing a cloak of raven feathers", "adorned with bone jewelry",
    "with a spirit animal companion", "holding a gnarled staff",
    "with a hovering arcane grimoire", "wearing an enchanted amulet",
]


def pick_race(rng: random.Random) -> str:
    return rng.choice(RACES)


def pick_class(rng: random.Random) -> str:
    return rng.choice(CLASSES)


def pick_name(rng: random.Random) -> str:
    return f"{rng.choice(FIRST_NAMES)} {rng.choice(LAST_NAMES)}"


def pick_special_elements(rng: random.Random) -> str:
    adjective = rng.choice(ADJECTIVES)
    feature   = rng.choice(FEATURES)
    item      = rng.choice(ITEMS)
    return f"{adjective} {feature}, {item}"


def pick_include_traits(rng: random.Random) -> bool:
    return rng.random() > 0.5


def randomize_draft(rng: random.Random) -> CharacterDraft:
    """Roll a whole new draft, fields drawn in the same order as the form."""
    return CharacterDraft(
        race                  = pick_race(rng),
        character_class       = pick_class(rng),
        name                  = pick_name(rng),
        special_elements      = pick_special_elements(rng),
        include_random_traits = pick_include_traits(rng),
    )
