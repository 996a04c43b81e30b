from typing import List

from flask import current_app

from sudoku_api import db
from sudoku_api.models import LeaderboardEntry

LEADERBOARD_SIZE = 10


def fastest_times(puzzle_id) -> List[LeaderboardEntry]:
    return (
        LeaderboardEntry.query.filter_by(puzzle_id=puzzle_id)
        .order_by(LeaderboardEntry.completion_time.asc())
        .limit(LEADERBOARD_SIZE)
        .all()
    )


def record_time(puzzle_id, player_name, completion_time) -> LeaderboardEntry:
    entry = LeaderboardEntry(
        puzzle_id=puzzle_id,
        player_name=player_name,
        completion_time=completion_time,
    )
    db.session.add(entry)
    db.session.commit()
    current_app.logger.info(f"[leaderboard] puzzle={puzzle_id} player={player_name} time={completion_time}")
    return entry
