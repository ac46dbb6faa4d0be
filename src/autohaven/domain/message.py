from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, slots=True)
class NewMessage:
    sender_id: int
    receiver_id: int
    car_id: int
    content: str


@dataclass(frozen=True, slots=True)
class Message:
    id: int
    sender_id: int
    receiver_id: int
    car_id: int
    content: str
    created_at: datetime
    read: bool = False
