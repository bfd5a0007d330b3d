from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, NamedTuple

from .errors import CategoryAlreadySet, InvalidScoreType

BONUS = "bonus"
BONUS_THRESHOLD = 62
BONUS_POINTS = 35

NUMBER_SCORE_TYPES = ("ones", "twos", "threes", "fours", "fives", "sixes")

SCORE_TYPES = NUMBER_SCORE_TYPES + (
    BONUS,
    "threeOfAKind", "fourOfAKind", "fullHouse",
    "smallStraight", "largeStraight", "yams", "chance",
)

SCORABLE_SCORE_TYPES = tuple(t for t in SCORE_TYPES if t != BONUS)

SCORE_LABELS = {
    "ones": "Ones",
    "twos": "Twos",
    "threes": "Threes",
    "fours": "Fours",
    "fives": "Fives",
    "sixes": "Sixes",
    "threeOfAKind": "Three of a kind",
    "fourOfAKind": "Four of a kind",
    "fullHouse": "Full house",
    "smallStraight": "Small straight",
    "largeStraight": "Large straight",
    "yams": "Yams",
    "chance": "Chance",
    BONUS: f"Bonus (if more than {BONUS_THRESHOLD})",
}

FULL_HOUSE_POINTS = 25
SMALL_STRAIGHT_POINTS = 30
LARGE_STRAIGHT_POINTS = 40
YAMS_POINTS = 50


def is_score_type(name):
    return isinstance(name, str) and name in SCORE_TYPES


def is_scorable_score_type(name):
    return is_score_type(name) and name != BONUS


def parse_scorable_score_type(raw):
    if not is_scorable_score_type(raw):
        raise InvalidScoreType()
    return raw


def get_score_for_dice_and_score_type(dice, score_type):
    """
    Calculates what a category would score for the given dice.
    :param dice: A Dice hand.
    :param score_type: One of SCORABLE_SCORE_TYPES.
    """
    counts = dice.number_of_each_number()
    faces = set(dice.numbers)

    if score_type in NUMBER_SCORE_TYPES:
        return dice.sum_same_number(NUMBER_SCORE_TYPES.index(score_type) + 1)

    elif score_type == "threeOfAKind":
        return dice.sum_all() if any(count >= 3 for count in counts) else 0

    elif score_type == "fourOfAKind":
        return dice.sum_all() if any(count >= 4 for count in counts) else 0

    elif score_type == "fullHouse":
        if 3 in counts and 2 in counts:
            return FULL_HOUSE_POINTS
        return 0

    elif score_type == "smallStraight":
        # 1-2-3-4, 2-3-4-5 or 3-4-5-6
        if {3, 4} <= faces and ({1, 2} <= faces or {2, 5} <= faces or {5, 6} <= faces):
            return SMALL_STRAIGHT_POINTS
        return 0

    elif score_type == "largeStraight":
        if {2, 3, 4, 5} <= faces and (1 in faces or 6 in faces):
            return LARGE_STRAIGHT_POINTS
        return 0

    elif score_type == "yams":
        return YAMS_POINTS if 5 in counts else 0

    elif score_type == "chance":
        return dice.sum_all()

    raise InvalidScoreType(f"Invalid category: {score_type}")


class ScoreOption(NamedTuple):
    score_type: str
    score: int


@dataclass(frozen=True)
class Score:
    """
    The scorecard. Every category holds None until it is scored, after which
    its value never changes. The bonus is only ever set by add_score_for_score_type.
    """

    values: Mapping

    def __post_init__(self):
        values = dict(self.values)
        if set(values) != set(SCORE_TYPES):
            raise ValueError(f"Score must hold exactly the categories {', '.join(SCORE_TYPES)}")
        for score_type, value in values.items():
            if value is not None and type(value) is not int:
                raise ValueError(f"Invalid value for {score_type}: {value!r}")
        object.__setattr__(self, "values", MappingProxyType({t: values[t] for t in SCORE_TYPES}))

    def __hash__(self):
        return hash(tuple(self.values.items()))

    @classmethod
    def initialize(cls):
        return cls({score_type: None for score_type in SCORE_TYPES})

    def __getitem__(self, score_type):
        return self.values[score_type]

    def is_available(self, score_type):
        if not is_score_type(score_type):
            raise InvalidScoreType(f"Invalid category: {score_type}")
        return self.values[score_type] is None

    def numbers_sum(self):
        return sum(self.values[t] or 0 for t in NUMBER_SCORE_TYPES)

    def is_eligible_for_bonus(self):
        return self.numbers_sum() >= BONUS_THRESHOLD

    def add_score_for_score_type(self, dice, score_type):
        """
        Records the score of a category for the given dice.
        Raises CategoryAlreadySet if the category already holds a value.
        """
        parse_scorable_score_type(score_type)
        if not self.is_available(score_type):
            raise CategoryAlreadySet(f"score for {score_type} already set")

        values = dict(self.values)
        values[score_type] = get_score_for_dice_and_score_type(dice, score_type)
        new_score = Score(values)

        if new_score.is_available(BONUS) and new_score.is_eligible_for_bonus():
            values[BONUS] = BONUS_POINTS
            new_score = Score(values)
        return new_score

    def get_score_options_for_dice(self, dice):
        return [
            ScoreOption(score_type, get_score_for_dice_and_score_type(dice, score_type))
            for score_type in SCORABLE_SCORE_TYPES
            if self.is_available(score_type)
        ]

    def total(self):
        return sum(value for value in self.values.values() if value is not None)

    def is_completed(self):
        # The bonus is not required: it stays None when the threshold is never reached.
        return all(self.values[t] is not None for t in SCORABLE_SCORE_TYPES)

    def to_dict(self):
        return dict(self.values)

    @classmethod
    def from_dict(cls, data):
        if not isinstance(data, dict):
            raise ValueError(f"Invalid score: {data!r}")
        return cls(data)
