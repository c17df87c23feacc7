"""SQLAlchemy persistence adapter (PostgreSQL in production)."""
