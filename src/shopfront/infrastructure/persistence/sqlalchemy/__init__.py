"""SQLAlchemy persistence for the shop domain."""
