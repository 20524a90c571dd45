"""Record store lifecycle."""

from app.db.database import Database, engine_kwargs

__all__ = ["Database", "engine_kwargs"]
