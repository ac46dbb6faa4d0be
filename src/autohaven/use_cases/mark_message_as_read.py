from __future__ import annotations

from dataclasses import dataclass

from autohaven.domain.errors import ForbiddenError, NotFoundError
from autohaven.domain.message import Message
from autohaven.ports.record_store import RecordStore


@dataclass(frozen=True, slots=True)
class MarkMessageAsReadRequest:
    message_id: int
    user_id: int


@dataclass(frozen=True, slots=True)
class MarkMessageAsReadResponse:
    message: Message


class MarkMessageAsRead:
    """Only the receiver may flip the read flag."""

    def __init__(self, record_store: RecordStore) -> None:
        self._store = record_store

    def execute(self, request: MarkMessageAsReadRequest) -> MarkMessageAsReadResponse:
        """
        Raises:
            NotFoundError: If the message does not exist
            ForbiddenError: If the caller is not the receiver
        """
        message = self._store.get_message(request.message_id)

        if message is None:
            raise NotFoundError(resource="Message", identifier=request.message_id)

        if message.receiver_id != request.user_id:
            raise ForbiddenError("Only the receiver can mark a message as read")

        updated = self._store.mark_message_as_read(request.message_id)

        if updated is None:
            raise NotFoundError(resource="Message", identifier=request.message_id)

        return MarkMessageAsReadResponse(message=updated)
