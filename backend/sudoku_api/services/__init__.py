"""Store access for the HTTP routes.

Each function issues a single parameterized query through the shared
Flask-SQLAlchemy session and returns ORM rows; serialization and error
mapping stay in the blueprints.
"""
