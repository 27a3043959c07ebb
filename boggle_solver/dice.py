"""The sixteen Boggle dice and the tile faces they can show."""

import random

# Each die has six faces. "QU" is the only face with more than one letter.
DICE = [
    ["T", "W", "O", "O", "T", "A"],
    ["H", "N", "E", "E", "W", "G"],
    ["S", "A", "F", "P", "K", "F"],
    ["E", "R", "L", "I", "D", "X"],
    ["Y", "E", "D", "L", "E", "V"],
    ["Y", "T", "D", "T", "I", "S"],
    ["V", "E", "H", "W", "T", "R"],
    ["M", "U", "O", "C", "T", "I"],
    ["U", "I", "E", "N", "S", "E"],
    ["N", "L", "N", "H", "Z", "R"],
    ["I", "S", "S", "O", "E", "T"],
    ["T", "R", "E", "T", "L", "R"],
    ["E", "A", "N", "A", "G", "E"],
    ["U", "N", "H", "I", "QU", "M"],
    ["O", "S", "C", "A", "H", "P"],
    ["O", "A", "B", "B", "J", "O"],
]

POSSIBLE_LETTERS = frozenset(face for die in DICE for face in die)


def roll_dice(rng: random.Random | None = None) -> list[str]:
    """Shake the dice: shuffle them among the cells, then pick a face for each.

    Returns one face per die, in cell order.
    """
    rng = rng or random
    scrambled = DICE[:]
    rng.shuffle(scrambled)
    return [rng.choice(die) for die in scrambled]
