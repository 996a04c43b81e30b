from flask import Blueprint, jsonify, request, current_app
from sudoku_api import db
from sudoku_api.schemas import LeaderboardSubmission
from sudoku_api.services.leaderboard import fastest_times, record_time

leaderboard = Blueprint('leaderboard', __name__)


@leaderboard.route('/leaderboard/<string:puzzle_id>', methods=['GET'])
def get_leaderboard(puzzle_id):
    try:
        entries = fastest_times(puzzle_id)
    except Exception:
        db.session.rollback()
        current_app.logger.exception(f"Error fetching leaderboard for puzzle {puzzle_id}")
        return jsonify({'error': 'Internal Server Error'}), 500
    return jsonify([e.to_dict(ranking_only=True) for e in entries])


@leaderboard.route('/leaderboard', methods=['POST'])
def add_leaderboard_entry():
    try:
        body = LeaderboardSubmission.from_json(request.get_json(silent=True))
        entry = record_time(body.puzzle_id, body.player_name, body.completion_time)
    except Exception:
        db.session.rollback()
        current_app.logger.exception("Error adding leaderboard entry")
        return jsonify({'error': 'Internal Server Error'}), 500
    return jsonify(entry.to_dict())
