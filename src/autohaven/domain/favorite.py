from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, slots=True)
class NewFavorite:
    user_id: int
    car_id: int


@dataclass(frozen=True, slots=True)
class Favorite:
    id: int
    user_id: int
    car_id: int
    created_at: datetime
