from __future__ import annotations

from dataclasses import dataclass

from autohaven.domain.message import Message
from autohaven.ports.record_store import RecordStore


@dataclass(frozen=True, slots=True)
class GetConversationRequest:
    user_id: int
    other_user_id: int
    car_id: int


@dataclass(frozen=True, slots=True)
class GetConversationResponse:
    messages: list[Message]


class GetConversation:
    """Thread between the caller and another user about one listing, oldest-first."""

    def __init__(self, record_store: RecordStore) -> None:
        self._store = record_store

    def execute(self, request: GetConversationRequest) -> GetConversationResponse:
        messages = self._store.get_messages_between_users(
            request.user_id, request.other_user_id, request.car_id
        )
        return GetConversationResponse(messages=messages)
