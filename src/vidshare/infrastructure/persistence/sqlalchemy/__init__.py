"""SQLAlchemy persistence layer (async)."""
