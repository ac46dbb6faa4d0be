from __future__ import annotations

from dataclasses import dataclass

from autohaven.domain.message import Message
from autohaven.ports.record_store import RecordStore


@dataclass(frozen=True, slots=True)
class ListUserMessagesRequest:
    user_id: int


@dataclass(frozen=True, slots=True)
class ListUserMessagesResponse:
    messages: list[Message]


class ListUserMessages:
    """Inbox view: everything the user sent or received, newest-first."""

    def __init__(self, record_store: RecordStore) -> None:
        self._store = record_store

    def execute(self, request: ListUserMessagesRequest) -> ListUserMessagesResponse:
        return ListUserMessagesResponse(messages=self._store.get_user_messages(request.user_id))
