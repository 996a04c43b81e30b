import importlib


def _reload_config(monkeypatch, **env):
    for key in ('DATABASE_URL', 'DB_USER', 'DB_PASSWORD', 'DB_HOST', 'DB_PORT', 'DB_NAME', 'HOST', 'PORT'):
        monkeypatch.delenv(key, raising=False)
    for key, value in env.items():
        monkeypatch.setenv(key, value)
    import config
    return importlib.reload(config).Config


def test_defaults(monkeypatch):
    cfg = _reload_config(monkeypatch)
    assert cfg.HOST == '0.0.0.0'
    assert cfg.PORT == 3000
    assert cfg.SQLALCHEMY_DATABASE_URI == 'postgresql://postgres@localhost:5432/sudoku'


def test_db_parts_from_environment(monkeypatch):
    cfg = _reload_config(
        monkeypatch,
        DB_USER='game', DB_PASSWORD='s3cret', DB_HOST='db', DB_PORT='6543', DB_NAME='puzzles', PORT='8080',
    )
    assert cfg.PORT == 8080
    assert cfg.SQLALCHEMY_DATABASE_URI == 'postgresql://game:s3cret@db:6543/puzzles'


def test_database_url_overrides_parts(monkeypatch):
    cfg = _reload_config(monkeypatch, DATABASE_URL='sqlite:///local.db', DB_HOST='ignored')
    assert cfg.SQLALCHEMY_DATABASE_URI == 'sqlite:///local.db'
