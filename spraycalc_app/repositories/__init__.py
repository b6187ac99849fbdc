"""
Repository layer for persistence (SQLite via SQLAlchemy).
"""

from .database import Base, init_database
from .base import HistoryStore, FavoritesStore
from .history_repository import HistoryRepository
from .favorite_repository import FavoriteRepository

__all__ = [
    "Base",
    "init_database",
    "HistoryStore",
    "FavoritesStore",
    "HistoryRepository",
    "FavoriteRepository",
]
