class YamsError(Exception):
    """Base class for every expected failure of a Yams game."""

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)

    default_message = "Yams error"


class InvalidInput(YamsError):
    default_message = "Invalid input"


class InvalidGameId(InvalidInput):
    default_message = "given uuid is not a valid uuid"


class InvalidDiceIndex(InvalidInput):
    default_message = "given diceIndex is not a valid one"


class InvalidScoreType(InvalidInput):
    default_message = "given scoreType is not a valid one"


class GameNotFound(YamsError):
    default_message = "game not found"


class StorageError(YamsError):
    default_message = "an issue occurred while storing or retrieving the game"


class RuleViolation(YamsError):
    default_message = "This move is not allowed"


class DiceNotThrown(RuleViolation):
    default_message = "Dice not thrown"


class GameOver(RuleViolation):
    default_message = "Game is over"


class RoundLimitExceeded(RuleViolation):
    default_message = "Dice cannot be thrown in round 3"


class CategoryAlreadySet(RuleViolation):
    default_message = "Category already scored"
