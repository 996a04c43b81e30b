from flask import Blueprint, jsonify, current_app
from sudoku_api import db
from sudoku_api.services.puzzles import random_puzzle, puzzle_by_id

puzzles = Blueprint('puzzles', __name__)


@puzzles.route('/puzzle/<string:difficulty>', methods=['GET'])
def get_puzzle_by_difficulty(difficulty):
    try:
        puzzle = random_puzzle(difficulty)
    except Exception:
        db.session.rollback()
        current_app.logger.exception(f"Error fetching puzzle difficulty={difficulty}")
        return jsonify({'error': 'Internal Server Error'}), 500
    if puzzle is None:
        return jsonify({'error': 'Puzzle not found'}), 404
    return jsonify(puzzle.to_dict())


@puzzles.route('/puzzle/id/<string:puzzle_id>', methods=['GET'])
def get_puzzle_by_id(puzzle_id):
    # This route answers with its own {id, message} shape, even on errors
    try:
        puzzle = puzzle_by_id(puzzle_id)
    except Exception:
        db.session.rollback()
        current_app.logger.exception(f"Error fetching puzzle by ID {puzzle_id}")
        return jsonify({'id': '0000', 'message': 'Internal Server Error'}), 500
    if puzzle is None:
        return jsonify({'id': '0000', 'message': 'Game not found'}), 404
    return jsonify(puzzle.to_dict())
