"""
Use cases of the game. Each one loads a game from the repository, applies one
engine operation and stores the resulting game. A failed operation stores nothing.
"""
import logging

from .engine import Game

logger = logging.getLogger(__name__)


def create_game(repository):
    game = repository.store(Game.create())
    logger.info(f"Created game {game.id}")
    return game


def get_game(repository, game_id):
    return repository.get_by_id(game_id)


def throw_dice(repository, game_id, rng=None):
    game = repository.get_by_id(game_id).throw_dice(rng)
    logger.debug(f"Game {game_id}: round {game.round}, dice {game.dice.numbers}")
    return repository.store(game)


def toggle_die_selection(repository, game_id, dice_index):
    game = repository.get_by_id(game_id).toggle_die_selection(dice_index)
    return repository.store(game)


def add_score_for_score_type(repository, game_id, score_type):
    game = repository.get_by_id(game_id).add_score_for_score_type(score_type)
    logger.info(f"Game {game_id}: scored {score_type} = {game.score[score_type]}, total {game.total_score()}")
    if game.is_over():
        logger.info(f"Game {game_id} is over with {game.total_score()} points")
    return repository.store(game)


def reset_game(repository, game_id):
    game = repository.get_by_id(game_id).reset()
    logger.info(f"Game {game_id} reset")
    return repository.store(game)
