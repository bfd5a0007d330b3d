import logging

from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import DatabaseError

from .engine import Game
from .errors import GameNotFound, StorageError
from .models import GameRecord

logger = logging.getLogger(__name__)


class GameRepository:
    """Loads and stores games by id. Concurrent writes to one id are last-write-wins."""

    def get_by_id(self, game_id):
        raise NotImplementedError

    def store(self, game):
        raise NotImplementedError


class InMemoryGameRepository(GameRepository):
    def __init__(self):
        self._games = {}

    def get_by_id(self, game_id):
        try:
            return self._games[game_id]
        except KeyError:
            raise GameNotFound() from None

    def store(self, game):
        self._games[game.id] = game
        return game


class DatabaseGameRepository(GameRepository):
    """Keeps each game as a JSON payload in the GameRecord table."""

    def get_by_id(self, game_id):
        try:
            record = GameRecord.objects.get(id=game_id)
        except GameRecord.DoesNotExist:
            raise GameNotFound() from None
        except (DatabaseError, ValidationError) as e:
            logger.error(f"Error getting game {game_id}: {e}")
            raise StorageError() from e

        try:
            return Game.from_dict({**record.data, "id": str(record.id)})
        except (ValueError, TypeError) as e:
            logger.error(f"Stored game {game_id} is corrupted: {e}")
            raise StorageError(f"an issue occurred while retrieving the game: {e}") from e

    def store(self, game):
        data = game.to_dict()
        game_id = data.pop("id")
        try:
            GameRecord.objects.update_or_create(id=game_id, defaults={"data": data})
        except DatabaseError as e:
            logger.error(f"Error storing game {game_id}: {e}")
            raise StorageError() from e
        return game


_in_memory_repository = InMemoryGameRepository()


def get_game_repository():
    """Returns the repository selected by the YAMS_GAME_REPOSITORY setting."""
    backend = getattr(settings, "YAMS_GAME_REPOSITORY", "database")
    if backend == "memory":
        return _in_memory_repository
    if backend == "database":
        return DatabaseGameRepository()
    raise ValueError(f"Unknown game repository backend: {backend}")
