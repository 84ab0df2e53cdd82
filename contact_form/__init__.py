"""Contact submission form backed by FastAPI and SQLAlchemy."""
