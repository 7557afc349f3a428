import random

from .models import AttributeBlock

ABILITIES = ("strength", "dexterity", "constitution", "intelligence", "wisdom", "charisma")


def roll_3d6(rng: random.Random) -> int:
    return sum(rng.randint(1, 6) for _ in range(3))


def roll_attributes(rng: random.Random) -> AttributeBlock:
    # rolled in ABILITIES order, one 3d6 each
    return AttributeBlock(**{name: roll_3d6(rng) for name in ABILITIES})
