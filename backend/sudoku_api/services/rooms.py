from typing import List, Optional

from flask import current_app
from sqlalchemy import func, literal

from sudoku_api import db
from sudoku_api.models import Scoreboard


def _matching(**keys):
    """Equality criteria on Scoreboard columns with every value bound.

    ``filter_by(col=None)`` would render ``IS NULL``; a bound NULL never
    compares equal, so a missing key matches no row.
    """
    criteria = []
    for name, value in keys.items():
        column = getattr(Scoreboard, name)
        criteria.append(column == literal(value, column.type))
    return criteria


def create_room(room_code, game_code, user_name) -> Scoreboard:
    """Insert the first scoreboard row of a room, stamped by the store clock.

    Duplicate room codes are not checked here; whatever the store allows goes.
    """
    row = Scoreboard(
        room_code=room_code,
        game_code=game_code,
        player_name=user_name,
        time_stamp=func.now(),
    )
    db.session.add(row)
    db.session.commit()
    current_app.logger.info(f"[generate_room] room={room_code} game={game_code}")
    return row


def room_exists(room_code) -> bool:
    return db.session.query(Scoreboard.id).filter(*_matching(room_code=room_code)).first() is not None


def game_code_for(room_code):
    """Return the matching row's ``(game_code,)`` tuple, or None for an unknown room."""
    return db.session.query(Scoreboard.game_code).filter(*_matching(room_code=room_code)).first()


def _update_rows(criteria, **values) -> Optional[Scoreboard]:
    rows = Scoreboard.query.filter(*criteria).order_by(Scoreboard.id).all()
    for row in rows:
        for key, value in values.items():
            setattr(row, key, value)
    db.session.commit()
    return rows[0] if rows else None


def start_game(room_code, player_name) -> Optional[Scoreboard]:
    """Set the player name on every row of the room.

    Returns the first updated row, or None when the room has no rows.
    """
    return _update_rows(_matching(room_code=room_code), player_name=player_name)


def update_progress(room_code, player_name, completed) -> Optional[Scoreboard]:
    # A missing row is left missing; callers get None back
    return _update_rows(
        _matching(room_code=room_code, player_name=player_name),
        percentage_completed=completed,
    )


def scoreboard_for(room_code) -> List[Scoreboard]:
    # TODO: time_taken has no write path yet; add one to /update-progress once clients report a finish time
    # NULL placement differs by store (last on PostgreSQL, first on SQLite); id breaks ties
    return (
        Scoreboard.query.filter(*_matching(room_code=room_code))
        .order_by(Scoreboard.time_taken.asc(), Scoreboard.id.asc())
        .all()
    )
