"""SQLAlchemy persistence for the notes domain."""
