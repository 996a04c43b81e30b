from sudoku_api import db


class Puzzle(db.Model):
    __tablename__ = 'puzzles'
    id = db.Column(db.Integer, primary_key=True)
    difficulty = db.Column(db.String(32), nullable=False, index=True)
    puzzle = db.Column(db.Text, nullable=False)

    def to_dict(self):
        return {
            'id': self.id,
            'difficulty': self.difficulty,
            'puzzle': self.puzzle,
        }


class LeaderboardEntry(db.Model):
    __tablename__ = 'leaderboard'
    entry_id = db.Column(db.Integer, primary_key=True)
    puzzle_id = db.Column(db.Integer, db.ForeignKey('puzzles.id'), nullable=False, index=True)
    player_name = db.Column(db.String(64), nullable=False)
    completion_time = db.Column(db.Float, nullable=False)

    def to_dict(self, ranking_only=False):
        if ranking_only:
            return {
                'player_name': self.player_name,
                'completion_time': self.completion_time,
            }
        return {
            'entry_id': self.entry_id,
            'puzzle_id': self.puzzle_id,
            'player_name': self.player_name,
            'completion_time': self.completion_time,
        }


class Scoreboard(db.Model):
    """Per-player state inside a multiplayer room."""
    __tablename__ = 'scoreboard'
    id = db.Column(db.Integer, primary_key=True)
    room_code = db.Column(db.String(16), nullable=False, index=True)
    game_code = db.Column(db.String(64))
    player_name = db.Column(db.String(64))
    time_stamp = db.Column(db.DateTime)
    percentage_completed = db.Column(db.Float)
    # Read for ordering only; nothing in this service writes it
    time_taken = db.Column(db.Float, nullable=True)

    def to_dict(self):
        return {
            'id': self.id,
            'room_code': self.room_code,
            'game_code': self.game_code,
            'player_name': self.player_name,
            'time_stamp': self.time_stamp.isoformat() if self.time_stamp else None,
            'percentage_completed': self.percentage_completed,
            'time_taken': self.time_taken,
        }
