import re
import uuid
from dataclasses import dataclass, replace

from .dice import Dice
from .errors import DiceNotThrown, GameOver, InvalidGameId, RoundLimitExceeded
from .score import Score

GAME_ROUNDS = (0, 1, 2, 3)
MAX_ROUND = 3

UUID_PATTERN = re.compile(
    r"^(?:[0-9a-f]{8}-[0-9a-f]{4}-[1-5][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}"
    r"|00000000-0000-0000-0000-000000000000)$",
    re.IGNORECASE,
)


def generate_game_id():
    return str(uuid.uuid4())


def parse_game_id(raw):
    """Validates an untrusted game id and returns it in lower case."""
    if not isinstance(raw, str) or not UUID_PATTERN.match(raw):
        raise InvalidGameId()
    return raw.lower()


class Game:
    """
    A single-player Yams game.

    A game is either waiting for the first throw of a turn (GameWithoutDice,
    round 0) or holds the dice of the current turn (GameWithDice, rounds 1 to 3).
    Every operation returns a new game and leaves the current one untouched.
    """

    @staticmethod
    def create():
        return GameWithoutDice(id=generate_game_id(), score=Score.initialize())

    @property
    def has_dice(self):
        return self.dice is not None

    def is_over(self):
        return self.score.is_completed()

    def can_throw_dice(self):
        return self.round != MAX_ROUND and not self.is_over()

    def total_score(self):
        return self.score.total()

    def get_score_for_score_type(self, score_type):
        return self.score[score_type]

    def reset(self):
        return GameWithoutDice(id=self.id, score=Score.initialize())

    def throw_dice(self, rng=None):
        raise NotImplementedError

    def toggle_die_selection(self, index):
        raise DiceNotThrown()

    def get_score_options(self):
        raise DiceNotThrown()

    def add_score_for_score_type(self, score_type):
        raise DiceNotThrown()

    def to_dict(self):
        return {
            "id": self.id,
            "round": self.round,
            "dice": self.dice.to_list() if self.dice is not None else None,
            "score": self.score.to_dict(),
        }

    @staticmethod
    def from_dict(data):
        """
        Rebuilds a game from its serialized form.
        Round 0 requires ``dice`` to be null, rounds 1 to 3 require five dice.
        """
        if not isinstance(data, dict):
            raise ValueError(f"Invalid game: {data!r}")
        game_round = data.get("round")
        if type(game_round) is not int or game_round not in GAME_ROUNDS:
            raise ValueError(f"Invalid round: {game_round!r}")
        game_id = data.get("id")
        if not isinstance(game_id, str) or not UUID_PATTERN.match(game_id):
            raise ValueError(f"Invalid game id: {game_id!r}")
        score = Score.from_dict(data.get("score"))
        dice = data.get("dice")

        if game_round == 0:
            if dice is not None:
                raise ValueError("A game in round 0 cannot hold dice")
            return GameWithoutDice(id=game_id.lower(), score=score)
        if dice is None:
            raise ValueError(f"A game in round {game_round} must hold dice")
        return GameWithDice(id=game_id.lower(), score=score, round=game_round, dice=Dice.from_list(dice))


@dataclass(frozen=True)
class GameWithoutDice(Game):
    id: str
    score: Score

    round = 0
    dice = None

    def throw_dice(self, rng=None):
        """Starts a turn: the first throw rolls five fresh dice."""
        if self.is_over():
            raise GameOver()
        return GameWithDice(id=self.id, score=self.score, round=1, dice=Dice.initialize(rng))


@dataclass(frozen=True)
class GameWithDice(Game):
    id: str
    score: Score
    round: int
    dice: Dice

    def __post_init__(self):
        if type(self.round) is not int or self.round not in GAME_ROUNDS[1:]:
            raise ValueError(f"A game holding dice must be in round 1, 2 or 3, not {self.round!r}")

    def throw_dice(self, rng=None):
        if self.is_over():
            raise GameOver()
        if self.round >= MAX_ROUND:
            raise RoundLimitExceeded(f"Dice cannot be thrown in round {self.round}")
        return replace(self, dice=self.dice.throw(rng), round=self.round + 1)

    def toggle_die_selection(self, index):
        # Selection stays possible after the last throw; it has no effect until a throw.
        return replace(self, dice=self.dice.toggle_die_selection(index))

    def get_score_options(self):
        return self.score.get_score_options_for_dice(self.dice)

    def add_score_for_score_type(self, score_type):
        """Scores a category with the current dice and ends the turn."""
        updated_score = self.score.add_score_for_score_type(self.dice, score_type)
        return GameWithoutDice(id=self.id, score=updated_score)
