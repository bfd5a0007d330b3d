import logging
from functools import wraps

from django.http import JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods

from . import services
from .dice import parse_dice_index
from .engine import parse_game_id
from .errors import GameNotFound, StorageError, YamsError
from .repositories import get_game_repository
from .score import SCORE_LABELS, parse_scorable_score_type

logger = logging.getLogger(__name__)

DIE_FACE_CLASSES = {1: "one", 2: "two", 3: "three", 4: "four", 5: "five", 6: "six"}

# Rows of the scorecard as it is displayed: numbers on the left, combinations on the right
SCORE_TABLE_ROWS = (
    ("ones", "threeOfAKind"),
    ("twos", "fourOfAKind"),
    ("threes", "fullHouse"),
    ("fours", "smallStraight"),
    ("fives", "largeStraight"),
    ("sixes", "yams"),
    ("bonus", "chance"),
)


def score_table(game):
    def cell(score_type):
        return {
            "score_type": score_type,
            "score": game.get_score_for_score_type(score_type),
            "label": SCORE_LABELS[score_type],
        }

    return [{"first": cell(first), "second": cell(second)} for first, second in SCORE_TABLE_ROWS]


def die_view(die, index):
    return {
        "index": index,
        "number": die.number,
        "selected": die.selected,
        "class": DIE_FACE_CLASSES[die.number],
    }


def throw_button_label(game):
    if not game.can_throw_dice():
        return None
    return "Throw not selected dice" if game.has_dice else "Throw dice"


def game_view(game):
    return {
        "id": game.id,
        "round": game.round,
        "dice": [die_view(die, index) for index, die in enumerate(game.dice)] if game.has_dice else None,
        "score_table": score_table(game),
        "total": game.total_score(),
        "is_over": game.is_over(),
        "can_throw_dice": game.can_throw_dice(),
        "throw_button_label": throw_button_label(game),
    }


def error_response(error):
    if isinstance(error, GameNotFound):
        status = 404
    elif isinstance(error, StorageError):
        status = 500
    else:
        status = 400
    return JsonResponse({"error": f"Bad request: {error.message}" if status == 400 else error.message}, status=status)


def game_endpoint(view):
    """Parses the game id from the URL and turns Yams errors into JSON error responses."""

    @wraps(view)
    def wrapper(request, game_id, **kwargs):
        try:
            return view(request, get_game_repository(), parse_game_id(game_id), **kwargs)
        except YamsError as e:
            logger.warning(f"{request.method} {request.path} rejected: {e.message}")
            return error_response(e)

    return wrapper


@csrf_exempt
@require_http_methods(["POST"])
def create_game(request):
    try:
        game = services.create_game(get_game_repository())
    except YamsError as e:
        logger.error(f"Could not create game: {e.message}")
        return error_response(e)
    return JsonResponse(game_view(game), status=201)


@require_http_methods(["GET"])
@game_endpoint
def game_detail(request, repository, game_id):
    return JsonResponse(game_view(services.get_game(repository, game_id)))


@csrf_exempt
@require_http_methods(["PUT"])
@game_endpoint
def throw_dice(request, repository, game_id):
    return JsonResponse(game_view(services.throw_dice(repository, game_id)))


@csrf_exempt
@require_http_methods(["PUT"])
@game_endpoint
def select_die(request, repository, game_id, dice_index):
    index = parse_dice_index(dice_index)
    game = services.toggle_die_selection(repository, game_id, index)
    return JsonResponse({"die": die_view(game.dice[index], index), "game": game_view(game)})


@require_http_methods(["GET"])
@game_endpoint
def score_options(request, repository, game_id):
    game = services.get_game(repository, game_id)
    if not game.has_dice:
        return JsonResponse({"score_options": []})
    return JsonResponse({
        "score_options": [
            {"score_type": option.score_type, "score": option.score, "label": SCORE_LABELS[option.score_type]}
            for option in game.get_score_options()
        ]
    })


@csrf_exempt
@require_http_methods(["PUT"])
@game_endpoint
def add_score(request, repository, game_id, score_type):
    score_type = parse_scorable_score_type(score_type)
    return JsonResponse(game_view(services.add_score_for_score_type(repository, game_id, score_type)))


@csrf_exempt
@require_http_methods(["POST"])
@game_endpoint
def reset_game(request, repository, game_id):
    return JsonResponse(game_view(services.reset_game(repository, game_id)))
