from dataclasses import dataclass

from .die import DIE_NUMBERS, Die, roll_die_number, sum_all
from .errors import InvalidDiceIndex

DICE_COUNT = 5
DICE_INDEXES = tuple(range(DICE_COUNT))


def is_dice_index(index):
    return type(index) is int and index in DICE_INDEXES


def parse_dice_index(raw):
    """
    Validates an untrusted dice index.
    :param raw: An int or a decimal string such as the one captured from a URL.
    :return: The index as an int between 0 and 4.
    """
    index = raw
    if isinstance(raw, str):
        stripped = raw.strip()
        if not (stripped.isascii() and stripped.isdecimal()):
            raise InvalidDiceIndex()
        index = int(stripped)
    if not is_dice_index(index):
        raise InvalidDiceIndex()
    return index


@dataclass(frozen=True)
class Dice:
    dice: tuple

    def __post_init__(self):
        dice = tuple(self.dice)
        if len(dice) != DICE_COUNT:
            raise ValueError(f"Expected {DICE_COUNT} dice, got {len(dice)}")
        if not all(isinstance(die, Die) for die in dice):
            raise ValueError("Dice can only hold Die values")
        object.__setattr__(self, "dice", dice)

    @classmethod
    def initialize(cls, rng=None):
        return cls(tuple(Die.initialize(rng) for _ in DICE_INDEXES))

    @classmethod
    def from_numbers(cls, numbers, selected=()):
        """Builds a known hand. ``selected`` lists the indices of the locked dice."""
        return cls(tuple(
            Die(number=number, selected=index in selected)
            for index, number in enumerate(numbers)
        ))

    def __iter__(self):
        return iter(self.dice)

    def __len__(self):
        return len(self.dice)

    def __getitem__(self, index):
        return self.dice[index]

    @property
    def numbers(self):
        return [die.number for die in self.dice]

    def throw(self, rng=None):
        """Re-rolls every die that is not selected. Selected dice are kept as they are."""
        return Dice(tuple(
            die if die.selected else Die(number=roll_die_number(rng), selected=False)
            for die in self.dice
        ))

    def toggle_die_selection(self, index):
        return Dice(tuple(
            die.toggle_selection() if i == index else die
            for i, die in enumerate(self.dice)
        ))

    def sum_same_number(self, number):
        return sum_all(die for die in self.dice if die.number == number)

    def sum_all(self):
        return sum_all(self.dice)

    def number_of_each_number(self):
        counts = [0] * len(DIE_NUMBERS)
        for die in self.dice:
            counts[die.number - 1] += 1
        return counts

    def to_list(self):
        return [die.to_dict() for die in self.dice]

    @classmethod
    def from_list(cls, data):
        if not isinstance(data, (list, tuple)):
            raise ValueError(f"Invalid dice: {data!r}")
        return cls(tuple(Die.from_dict(item) for item in data))
