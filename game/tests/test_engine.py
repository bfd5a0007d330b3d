import uuid

from django.test import SimpleTestCase

from game.dice import Dice
from game.engine import Game, GameWithDice, GameWithoutDice, parse_game_id
from game.errors import (
    CategoryAlreadySet,
    DiceNotThrown,
    GameOver,
    InvalidGameId,
    InvalidScoreType,
    RoundLimitExceeded,
)
from game.score import SCORABLE_SCORE_TYPES, Score
from game.tests.utils import FixedRandom

GAME_ID = "4f5b7a8e-2c1d-4e3f-9a0b-1c2d3e4f5a6b"


def game_with_dice(numbers, round=1, selected=(), score=None):
    return GameWithDice(
        id=GAME_ID,
        score=score or Score.initialize(),
        round=round,
        dice=Dice.from_numbers(numbers, selected=selected),
    )


def completed_score():
    values = Score.initialize().to_dict()
    values.update({score_type: 1 for score_type in SCORABLE_SCORE_TYPES})
    return Score(values)


class GameIdTest(SimpleTestCase):
    def test_parse_game_id(self):
        self.assertEqual(parse_game_id(GAME_ID), GAME_ID)
        self.assertEqual(parse_game_id(GAME_ID.upper()), GAME_ID)
        nil = "00000000-0000-0000-0000-000000000000"
        self.assertEqual(parse_game_id(nil), nil)

    def test_parse_game_id_failures(self):
        for raw in ("", "not-a-uuid", GAME_ID[:-1], GAME_ID + "0", "4f5b7a8e-2c1d-7e3f-9a0b-1c2d3e4f5a6b", None, 12):
            with self.assertRaises(InvalidGameId) as ctx:
                parse_game_id(raw)
            self.assertEqual(ctx.exception.message, "given uuid is not a valid uuid")


class GameTest(SimpleTestCase):
    def test_create(self):
        game = Game.create()
        self.assertIsInstance(game, GameWithoutDice)
        self.assertEqual(game.round, 0)
        self.assertIsNone(game.dice)
        self.assertFalse(game.has_dice)
        self.assertEqual(game.score, Score.initialize())
        self.assertEqual(uuid.UUID(game.id).version, 4)
        self.assertEqual(parse_game_id(game.id), game.id)
        self.assertNotEqual(Game.create().id, game.id)

    def test_first_throw(self):
        game = Game.create()
        thrown = game.throw_dice(FixedRandom(1, 2, 3, 4, 5))

        self.assertIsInstance(thrown, GameWithDice)
        self.assertEqual(thrown.round, 1)
        self.assertEqual(len(thrown.dice), 5)
        self.assertEqual(thrown.dice.numbers, [1, 2, 3, 4, 5])
        self.assertTrue(all(not die.selected for die in thrown.dice))
        self.assertEqual(thrown.id, game.id)
        self.assertEqual(game.round, 0)

    def test_rounds_increase_then_fail(self):
        game = Game.create()
        rounds = []
        for _ in range(3):
            game = game.throw_dice()
            rounds.append(game.round)
            self.assertTrue(game.has_dice)
        self.assertEqual(rounds, [1, 2, 3])
        self.assertFalse(game.can_throw_dice())

        with self.assertRaises(RoundLimitExceeded) as ctx:
            game.throw_dice()
        self.assertEqual(ctx.exception.message, "Dice cannot be thrown in round 3")
        self.assertEqual(game.round, 3)

    def test_selected_die_is_kept_on_throw(self):
        game = game_with_dice([1, 2, 3, 4, 5])
        game = game.toggle_die_selection(2)

        self.assertEqual([die.selected for die in game.dice], [False, False, True, False, False])
        self.assertEqual(game.round, 1)

        thrown = game.throw_dice(FixedRandom(6, 6, 6, 6))
        self.assertEqual(thrown.dice.numbers, [6, 6, 3, 6, 6])
        self.assertTrue(thrown.dice[2].selected)
        self.assertEqual(thrown.round, 2)

    def test_toggle_without_dice(self):
        with self.assertRaises(DiceNotThrown):
            Game.create().toggle_die_selection(0)

    def test_toggle_allowed_in_round_3(self):
        game = game_with_dice([1, 2, 3, 4, 5], round=3)
        toggled = game.toggle_die_selection(4)
        self.assertTrue(toggled.dice[4].selected)
        self.assertEqual(toggled.round, 3)

    def test_add_score_for_score_type(self):
        game = game_with_dice([5, 5, 5, 5, 5], round=2)
        scored = game.add_score_for_score_type("yams")

        self.assertIsInstance(scored, GameWithoutDice)
        self.assertEqual(scored.round, 0)
        self.assertIsNone(scored.dice)
        self.assertEqual(scored.id, game.id)
        self.assertEqual(scored.get_score_for_score_type("yams"), 50)
        self.assertEqual(scored.total_score(), 50)

    def test_scoring_ends_the_turn_in_every_round(self):
        for game_round in (1, 2, 3):
            scored = game_with_dice([1, 2, 3, 4, 6], round=game_round).add_score_for_score_type("chance")
            self.assertEqual(scored.round, 0)
            self.assertFalse(scored.has_dice)

    def test_add_score_without_dice(self):
        with self.assertRaises(DiceNotThrown):
            Game.create().add_score_for_score_type("chance")

    def test_add_score_twice(self):
        score = Score.initialize().add_score_for_score_type(Dice.from_numbers([5, 5, 5, 5, 5]), "yams")
        game = game_with_dice([5, 5, 5, 5, 5], score=score)
        with self.assertRaises(CategoryAlreadySet):
            game.add_score_for_score_type("yams")
        self.assertEqual(game.score, score)
        self.assertEqual(game.round, 1)

    def test_add_score_for_unknown_category(self):
        game = game_with_dice([5, 5, 5, 5, 5])
        for score_type in ("yahtzee", "bonus", None):
            with self.assertRaises(InvalidScoreType):
                game.add_score_for_score_type(score_type)
        self.assertEqual(game.score, Score.initialize())
        self.assertEqual(game.round, 1)

    def test_get_score_options(self):
        game = game_with_dice([3, 3, 3, 5, 5])
        options = game.get_score_options()
        self.assertEqual(options, game.get_score_options())
        self.assertEqual(dict(options)["fullHouse"], 25)
        self.assertEqual(len(options), 13)
        self.assertEqual(game.score, Score.initialize())

    def test_get_score_options_without_dice(self):
        with self.assertRaises(DiceNotThrown):
            Game.create().get_score_options()

    def test_bonus_over_several_turns(self):
        game = Game.create()
        hands = {
            "ones": [1, 1, 1, 6, 6],
            "twos": [2, 2, 2, 6, 6],
            "threes": [3, 3, 3, 6, 6],
            "fours": [4, 4, 4, 6, 6],
            "fives": [5, 5, 5, 6, 6],
        }
        for score_type, numbers in hands.items():
            game = game.throw_dice(FixedRandom(*numbers)).add_score_for_score_type(score_type)
            self.assertIsNone(game.get_score_for_score_type("bonus"))

        game = game.throw_dice(FixedRandom(6, 6, 6, 6, 6)).add_score_for_score_type("sixes")
        self.assertEqual(game.get_score_for_score_type("sixes"), 30)
        self.assertEqual(game.get_score_for_score_type("bonus"), 35)

        game = game.throw_dice(FixedRandom(6, 6, 6, 6, 6)).add_score_for_score_type("yams")
        self.assertEqual(game.get_score_for_score_type("bonus"), 35)
        self.assertEqual(game.total_score(), 3 + 6 + 9 + 12 + 15 + 30 + 35 + 50)

    def test_full_game(self):
        game = Game.create()
        for score_type in SCORABLE_SCORE_TYPES:
            self.assertFalse(game.is_over())
            game = game.throw_dice().throw_dice()
            game = game.add_score_for_score_type(score_type)
        self.assertTrue(game.is_over())
        self.assertFalse(game.can_throw_dice())
        with self.assertRaises(GameOver):
            game.throw_dice()

    def test_game_over_with_dice(self):
        game = game_with_dice([1, 2, 3, 4, 5], score=completed_score())
        with self.assertRaises(GameOver):
            game.throw_dice()

    def test_reset(self):
        game = game_with_dice([5, 5, 5, 5, 5], round=2).add_score_for_score_type("yams")
        game = game.throw_dice().reset()
        self.assertIsInstance(game, GameWithoutDice)
        self.assertEqual(game.id, GAME_ID)
        self.assertEqual(game.score, Score.initialize())
        self.assertTrue(game.can_throw_dice())

    def test_invalid_state_cannot_be_built(self):
        for game_round in (0, 4, True, 2.0):
            with self.assertRaises(ValueError):
                game_with_dice([1, 2, 3, 4, 5], round=game_round)

    def test_games_are_hashable(self):
        game = game_with_dice([1, 2, 3, 4, 5])
        same = Game.from_dict(game.to_dict())
        self.assertEqual(hash(game), hash(same))
        self.assertEqual(len({game, same, Game.create()}), 2)


class GameSerializationTest(SimpleTestCase):
    def test_game_without_dice(self):
        game = Game.create()
        data = game.to_dict()
        self.assertEqual(data["round"], 0)
        self.assertIsNone(data["dice"])
        self.assertEqual(set(data["score"]), set(Score.initialize().to_dict()))
        self.assertEqual(Game.from_dict(data), game)

    def test_game_with_dice(self):
        game = game_with_dice([6, 1, 2, 2, 3], round=3, selected=(1,))
        data = game.to_dict()
        self.assertEqual(data["id"], GAME_ID)
        self.assertEqual(data["dice"][1], {"number": 1, "selected": True})
        self.assertEqual(Game.from_dict(data), game)

    def test_round_must_match_dice(self):
        with_dice = game_with_dice([1, 2, 3, 4, 5]).to_dict()
        without_dice = Game.create().to_dict()
        bad_payloads = [
            {**with_dice, "dice": None},
            {**without_dice, "dice": with_dice["dice"]},
            {**with_dice, "round": 4},
            {**with_dice, "round": "1"},
            {**with_dice, "dice": with_dice["dice"][:4]},
            {**with_dice, "id": "nope"},
            {**with_dice, "score": None},
            [],
        ]
        for data in bad_payloads:
            with self.assertRaises(ValueError):
                Game.from_dict(data)
