from flask import Blueprint, jsonify, request, current_app
from sudoku_api import db
from sudoku_api.schemas import RoomCreate, GameStart, ProgressUpdate
from sudoku_api.services import rooms as svc

rooms = Blueprint('rooms', __name__)


def _internal_error(message):
    db.session.rollback()
    current_app.logger.exception(message)
    return jsonify({'error': 'Internal Server Error'}), 500


@rooms.route('/generate-room', methods=['POST'])
def generate_room():
    try:
        body = RoomCreate.from_json(request.get_json(silent=True))
        room = svc.create_room(body.room_code, body.game_code, body.user_name)
        payload = room.to_dict()
    except Exception as exc:
        db.session.rollback()
        current_app.logger.exception("Error creating room")
        # Clients show the store's message, so pass it through
        return jsonify({
            'success': False,
            'error': 'Internal Server Error',
            'details': str(exc),
        }), 500
    return jsonify({
        'success': True,
        'message': 'Room created successfully',
        'room': payload,
    }), 200


@rooms.route('/search-room/<string:room_code>', methods=['GET'])
def search_room(room_code):
    try:
        exists = svc.room_exists(room_code)
    except Exception:
        return _internal_error(f"Error checking room code {room_code}")
    return jsonify({'exists': exists})


@rooms.route('/game-code/<string:room_code>', methods=['GET'])
def get_game_code(room_code):
    try:
        row = svc.game_code_for(room_code)
    except Exception:
        return _internal_error(f"Error fetching game code for room {room_code}")
    if row is None:
        return jsonify({'error': 'Room code not found'}), 404
    return jsonify({'gameCode': row.game_code})


@rooms.route('/start-game', methods=['PUT'])
def start_game():
    try:
        body = GameStart.from_json(request.get_json(silent=True))
        row = svc.start_game(body.room_code, body.player_name)
        payload = row.to_dict() if row else None
    except Exception:
        return _internal_error("Error starting game")
    return jsonify(payload)


@rooms.route('/update-progress', methods=['PUT'])
def update_progress():
    try:
        body = ProgressUpdate.from_json(request.get_json(silent=True))
        row = svc.update_progress(body.room_code, body.player_name, body.completed)
        payload = row.to_dict() if row else None
    except Exception:
        return _internal_error("Error updating progress")
    # No matching row yields a null body, not an error
    return jsonify(payload)


@rooms.route('/scoreboard/<string:room_code>', methods=['GET'])
def get_scoreboard(room_code):
    try:
        rows = svc.scoreboard_for(room_code)
        payload = [r.to_dict() for r in rows]
    except Exception:
        return _internal_error(f"Error fetching scoreboard for room {room_code}")
    return jsonify(payload)
