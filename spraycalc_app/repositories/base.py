"""
Store interfaces the services depend on.

Services receive a store in their constructor instead of reaching for a
process-wide database, so any object with these methods can back them.
"""

from __future__ import annotations

import uuid
from typing import List, Optional, Protocol, runtime_checkable

from ..models import FavoriteConfiguration, SprayCalculation


@runtime_checkable
class HistoryStore(Protocol):
    """Ordered, bounded history of calculations (most recent first)."""

    def append(self, calculation: SprayCalculation) -> SprayCalculation: ...

    def list_recent(self) -> List[SprayCalculation]: ...

    def get(self, calculation_id: uuid.UUID) -> Optional[SprayCalculation]: ...

    def delete(self, calculation_id: uuid.UUID) -> None: ...

    def clear(self) -> None: ...


@runtime_checkable
class FavoritesStore(Protocol):
    """Saved favorite configurations (most recent first)."""

    def add(self, favorite: FavoriteConfiguration) -> FavoriteConfiguration: ...

    def list_all(self) -> List[FavoriteConfiguration]: ...

    def get(self, favorite_id: uuid.UUID) -> Optional[FavoriteConfiguration]: ...

    def delete(self, favorite_id: uuid.UUID) -> None: ...
