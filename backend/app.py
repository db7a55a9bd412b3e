import io
import logging
import threading
from typing import Any, Dict, Optional

from flask import Flask, jsonify, request, send_file, current_app
from flask_cors import CORS

from config import Settings, load_settings
from domain.constants import VALID_MOVES
from engine import GameEngine
from services.scheduler import ManualScheduler
from services.video_generator import SnakeVideoGenerator
from views.headless_view import HeadlessView


class GameSession:
    """
    One engine with its view and timer.

    The browser acts as the timer: it calls /api/game/tick every
    next_tick_ms and the pending one-shot callback fires then. The lock
    serialises requests so the engine only ever sees one turn of control.
    """

    def __init__(self, settings: Settings):
        self.view = HeadlessView(settings.board_width, settings.board_height, settings.speed)
        self.scheduler = ManualScheduler()
        self.engine = GameEngine(self.view, self.scheduler)
        self.renderer = SnakeVideoGenerator()
        self.lock = threading.Lock()

    def payload(self) -> Dict[str, Any]:
        state = self.engine.get_current_state().to_dict()
        state.update({
            "next_tick_ms": self.scheduler.pending_delay_ms,
            "has_saved_game": self.engine.has_saved_game,
            "controls_enabled": self.view.controls_enabled,
            "score_history": list(self.engine.score_history),
        })
        return state


def _session() -> GameSession:
    return current_app.extensions["snake_session"]


def _positive_int_arg(data: Dict[str, Any], name: str) -> Optional[int]:
    value = data.get(name)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValueError(f"'{name}' must be a positive integer")
    return value


def create_app(settings: Optional[Settings] = None) -> Flask:
    settings = settings or load_settings()

    app = Flask(__name__)
    app.extensions["snake_session"] = GameSession(settings)
    CORS(app, resources={r"/api/*": {"origins": settings.allowed_origins}})

    @app.route("/api/health", methods=["GET"])
    def health():
        return jsonify({"status": "ok"})

    @app.route("/api/game/state", methods=["GET"])
    def get_state():
        session = _session()
        with session.lock:
            return jsonify(session.payload())

    @app.route("/api/game/start", methods=["POST"])
    def start_game():
        """
        Start a new game.

        Optional JSON body:
        - width, height: board size in cells
        - speed: ticks per second
        """
        session = _session()
        data = request.get_json(silent=True) or {}
        try:
            width = _positive_int_arg(data, "width")
            height = _positive_int_arg(data, "height")
            speed = _positive_int_arg(data, "speed")
        except ValueError as error:
            return jsonify({"error": str(error)}), 400

        try:
            with session.lock:
                if session.engine.game_over:
                    if width or height:
                        session.view.resize(width or session.view.width,
                                            height or session.view.height)
                    if speed:
                        session.view.speed = speed
                session.engine.start_game()
                return jsonify(session.payload())
        except Exception as error:
            logging.error(f"Error starting game: {error}")
            return jsonify({"error": "Failed to start game"}), 500

    @app.route("/api/game/tick", methods=["POST"])
    def tick():
        session = _session()
        try:
            with session.lock:
                session.scheduler.run_pending()
                return jsonify(session.payload())
        except Exception as error:
            logging.error(f"Error advancing game: {error}")
            return jsonify({"error": "Failed to advance game"}), 500

    @app.route("/api/game/direction", methods=["POST"])
    def change_direction():
        session = _session()
        data = request.get_json(silent=True) or {}
        direction = str(data.get("direction", "")).upper()
        if direction not in VALID_MOVES:
            return jsonify({"error": f"'direction' must be one of {sorted(VALID_MOVES)}"}), 400

        with session.lock:
            session.engine.change_direction(direction)
            return jsonify(session.payload())

    @app.route("/api/game/pause", methods=["POST"])
    def pause_game():
        session = _session()
        with session.lock:
            session.engine.pause_game()
            return jsonify(session.payload())

    @app.route("/api/game/save", methods=["POST"])
    def save_game():
        session = _session()
        with session.lock:
            session.engine.save_game()
            return jsonify(session.payload())

    @app.route("/api/game/load", methods=["POST"])
    def load_game():
        session = _session()
        try:
            with session.lock:
                session.engine.load_game()
                return jsonify(session.payload())
        except Exception as error:
            logging.error(f"Error loading game: {error}")
            return jsonify({"error": "Failed to load game"}), 500

    @app.route("/api/game/scores", methods=["GET"])
    def get_scores():
        session = _session()
        with session.lock:
            return jsonify({"scores": list(session.engine.score_history)})

    @app.route("/api/game/frame.png", methods=["GET"])
    def get_frame():
        session = _session()
        with session.lock:
            if session.engine.map is None:
                return jsonify({"error": "No game has been started"}), 404
            state = session.engine.get_current_state()

        try:
            image = session.renderer.render_frame(state)
            buffer = io.BytesIO()
            image.save(buffer, format="PNG")
            buffer.seek(0)
            return send_file(buffer, mimetype="image/png")
        except Exception as error:
            logging.error(f"Error rendering frame: {error}")
            return jsonify({"error": "Failed to render frame"}), 500

    return app


if __name__ == "__main__":
    settings = load_settings()
    logging.basicConfig(level=settings.log_level)
    create_app(settings).run(host="0.0.0.0", port=5000)
