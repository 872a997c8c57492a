import logging
import os
import random

from flask import Flask, request, jsonify
from flask_socketio import SocketIO, emit
from flask_cors import CORS

from difficulty import DIFFICULTY_CLUE_RANGES, UnsupportedDifficultyError, parse_difficulty, valid_difficulties
from generator import SudokuGenerator

log = logging.getLogger(__name__)

app = Flask(__name__)
CORS(app)
socketio = SocketIO(app, cors_allowed_origins="*", async_mode="threading")


class InvalidPayloadError(ValueError):
    pass


def _generate_from_payload(data):
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise InvalidPayloadError("Request body must be a JSON object")

    difficulty = parse_difficulty(data.get('difficulty'))
    seed = data.get('seed')
    if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
        raise InvalidPayloadError("Seed must be an integer")

    rng = random.Random(seed)
    result = SudokuGenerator(rng=rng).generate(difficulty)
    log.info("Generated %s puzzle with %d clues", result.difficulty, result.clue_count)
    return result.to_dict()


def _difficulty_error(e):
    return {"error": str(e), "valid": valid_difficulties()}


@app.route("/")
def index():
    return "Sudoku generator backend is running!"


@app.route("/difficulties")
def difficulties():
    return jsonify({
        name: {"min_clues": clue_range.min_clues, "max_clues": clue_range.max_clues}
        for name, clue_range in DIFFICULTY_CLUE_RANGES.items()
    })


@app.route("/generate", methods=['POST'])
def generate():
    data = request.get_json(silent=True)
    try:
        payload = _generate_from_payload(data)
    except UnsupportedDifficultyError as e:
        return jsonify(_difficulty_error(e)), 400
    except InvalidPayloadError as e:
        return jsonify({"error": str(e)}), 400
    return jsonify(payload)


@socketio.on('generate')
def on_generate(data):
    try:
        payload = _generate_from_payload(data)
    except UnsupportedDifficultyError as e:
        body = _difficulty_error(e)
        emit('error', {"message": body["error"], "valid": body["valid"]})
        return
    except InvalidPayloadError as e:
        emit('error', {"message": str(e)})
        return
    emit('puzzle_generated', payload)


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)
    socketio.run(
        app,
        host=os.environ.get('SUDOKU_HOST', '127.0.0.1'),
        port=int(os.environ.get('SUDOKU_PORT', '5000')),
        debug=bool(os.environ.get('SUDOKU_DEBUG')),
        allow_unsafe_werkzeug=True,
    )
