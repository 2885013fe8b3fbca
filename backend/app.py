import logging
import random
import traceback
from typing import Optional

from flask import Flask, jsonify, request
from flask_cors import CORS

from config import Settings
from domain.constants import API_VERSION
from domain.errors import RequestDecodeError
from domain.game_state import GameRequest
from players import Player, RandomPlayer

logger = logging.getLogger(__name__)

SERVER_HEADER = "battlesnake/python/random-safe-snake"


def create_app(settings: Optional[Settings] = None, player: Optional[Player] = None) -> Flask:
    """
    Build the Flask app serving the Battlesnake API.

    Args:
        settings: service configuration; read from the environment when omitted
        player: decides moves; a RandomPlayer built from `settings` when omitted
    """
    if settings is None:
        settings = Settings.from_env()
    if player is None:
        rng = random.Random(settings.seed) if settings.seed is not None else None
        player = RandomPlayer(rng=rng, strict_bounds=settings.strict_bounds)

    app = Flask(__name__)
    app.config["SETTINGS"] = settings
    app.config["PLAYER"] = player

    # The board viewer on play.battlesnake.com may query the service from the browser
    CORS(app, resources={r"/*": {"origins": settings.cors_origins}})

    def decode_game_request() -> GameRequest:
        return GameRequest.from_json(request.get_json(silent=True))

    @app.errorhandler(RequestDecodeError)
    def handle_decode_error(error):
        logger.warning(f"Rejected {request.method} {request.path}: {error}")
        return jsonify({"error": str(error)}), 400

    @app.route("/", methods=["GET"])
    def index():
        """
        Agent metadata, fetched when the snake is created or refreshed.
        """
        return jsonify({
            "apiversion": API_VERSION,
            "author": settings.author,
            "color": settings.color,
            "head": settings.head,
            "tail": settings.tail,
        })

    @app.route("/start", methods=["POST"])
    def start():
        game_request = decode_game_request()
        logger.info(
            f"START game {game_request.game.id} on {game_request.board.width}x"
            f"{game_request.board.height} with {len(game_request.board.snakes)} snakes"
        )
        return jsonify({"ok": True})

    @app.route("/move", methods=["POST"])
    def move():
        """
        Called once per turn. Responds with one of "up", "down", "left", "right".
        """
        game_request = decode_game_request()
        try:
            chosen = player.get_move(game_request)
        except Exception as error:
            logger.error(f"Error choosing move for game {game_request.game.id}: {error}")
            logger.error(traceback.format_exc())
            return jsonify({"error": "Failed to choose a move"}), 500

        logger.info(f"MOVE game {game_request.game.id} turn {game_request.turn}: {chosen}")
        response = {"move": chosen}
        if settings.shout:
            response["shout"] = settings.shout
        return jsonify(response)

    @app.route("/end", methods=["POST"])
    def end():
        game_request = decode_game_request()
        logger.info(f"END game {game_request.game.id} after {game_request.turn} turns")
        return jsonify({"ok": True})

    @app.after_request
    def identify_server(response):
        response.headers.set("Server", SERVER_HEADER)
        return response

    return app


def main():
    settings = Settings.from_env()
    logging.basicConfig(
        level=settings.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    logging.getLogger("werkzeug").setLevel(logging.WARNING)

    app = create_app(settings)
    logger.info(f"Starting Battlesnake server at http://{settings.host}:{settings.port}")
    app.run(host=settings.host, port=settings.port, debug=settings.debug)


if __name__ == "__main__":
    main()
