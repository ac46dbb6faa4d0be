from datetime import datetime

from pydantic import Field

from autohaven.entrypoints.http.dtos.base import CamelModel


class MessageResponseDTO(CamelModel):
    id: int
    sender_id: int
    receiver_id: int
    car_id: int
    content: str
    read: bool
    created_at: datetime


class SendMessageDTO(CamelModel):
    receiver_id: int = Field(gt=0)
    car_id: int = Field(gt=0)
    content: str = Field(min_length=1, examples=["Is this car still available?"])
