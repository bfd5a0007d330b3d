import random
from dataclasses import dataclass, replace

DIE_NUMBERS = (1, 2, 3, 4, 5, 6)


def roll_die_number(rng=None):
    """
    Rolls a single die.
    :param rng: Object with a ``randint(a, b)`` method. Defaults to the random module.
    """
    return (rng or random).randint(DIE_NUMBERS[0], DIE_NUMBERS[-1])


@dataclass(frozen=True)
class Die:
    number: int
    selected: bool = False

    def __post_init__(self):
        if type(self.number) is not int or self.number not in DIE_NUMBERS:
            raise ValueError(f"Invalid die number: {self.number!r}")

    @classmethod
    def initialize(cls, rng=None):
        return cls(number=roll_die_number(rng), selected=False)

    def toggle_selection(self):
        return replace(self, selected=not self.selected)

    def to_dict(self):
        return {"number": self.number, "selected": self.selected}

    @classmethod
    def from_dict(cls, data):
        if not isinstance(data, dict):
            raise ValueError(f"Invalid die: {data!r}")
        selected = data.get("selected", False)
        if not isinstance(selected, bool):
            raise ValueError(f"Invalid die selection flag: {selected!r}")
        return cls(number=data.get("number"), selected=selected)


def sum_all(dice):
    return sum(die.number for die in dice)
