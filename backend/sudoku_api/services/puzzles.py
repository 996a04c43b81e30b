from typing import Optional

from sqlalchemy import func

from sudoku_api.models import Puzzle


def random_puzzle(difficulty: str) -> Optional[Puzzle]:
    """Pick one puzzle of the given difficulty uniformly at random."""
    return (
        Puzzle.query.filter_by(difficulty=difficulty)
        .order_by(func.random())
        .first()
    )


def puzzle_by_id(puzzle_id) -> Optional[Puzzle]:
    return Puzzle.query.filter_by(id=puzzle_id).first()
