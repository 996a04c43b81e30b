from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_cors import CORS
import click
from config import Config

db = SQLAlchemy()

SAMPLE_PUZZLES = [
    ('easy', '530070000600195000098000060800060003400803001700020006060000280000419005000080079'),
    ('easy', '003020600900305001001806400008102900700000008006708200002609500800203009005010300'),
    ('medium', '200080300060070084030500209000105408000000000402706000301007040720040060004010003'),
    ('hard', '000000907000420180000705026100904000050000040000507009920108000034059000507000000'),
]


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))

    db.init_app(flask_app)
    origins = flask_app.config.get('CORS_ORIGINS', '*')
    if origins != '*':
        origins = [o.strip() for o in origins.split(',') if o.strip()]
    CORS(flask_app, origins=origins)

    from sudoku_api.routes import main
    flask_app.register_blueprint(main)

    from sudoku_api.api.puzzles import puzzles
    from sudoku_api.api.leaderboard import leaderboard
    from sudoku_api.api.rooms import rooms
    flask_app.register_blueprint(puzzles)
    flask_app.register_blueprint(leaderboard)
    flask_app.register_blueprint(rooms)

    @click.command('db-reset')
    def db_reset_command():
        """Drops, recreates, and seeds the database."""
        from sudoku_api.models import Puzzle
        with flask_app.app_context():
            db.drop_all()
            db.create_all()

            for difficulty, content in SAMPLE_PUZZLES:
                db.session.add(Puzzle(difficulty=difficulty, puzzle=content))

            db.session.commit()
            print('Database has been reset and seeded!')

    flask_app.cli.add_command(db_reset_command)

    return flask_app
