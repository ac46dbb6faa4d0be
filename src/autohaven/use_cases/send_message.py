from __future__ import annotations

import logging
from dataclasses import dataclass

from autohaven.domain.errors import NotFoundError
from autohaven.domain.message import Message, NewMessage
from autohaven.ports.record_store import RecordStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SendMessageRequest:
    new_message: NewMessage  # sender_id already set to the authenticated caller


@dataclass(frozen=True, slots=True)
class SendMessageResponse:
    message: Message


class SendMessage:
    def __init__(self, record_store: RecordStore) -> None:
        self._store = record_store

    def execute(self, request: SendMessageRequest) -> SendMessageResponse:
        """
        Raises:
            NotFoundError: If the listing or the receiver does not exist
        """
        new_message = request.new_message

        if self._store.get_car(new_message.car_id) is None:
            raise NotFoundError(resource="Car", identifier=new_message.car_id)

        if self._store.get_user(new_message.receiver_id) is None:
            raise NotFoundError(resource="User", identifier=new_message.receiver_id)

        message = self._store.create_message(new_message)

        logger.info(
            "Message sent",
            extra={
                "message_id": message.id,
                "car_id": message.car_id,
                "sender_id": message.sender_id,
            },
        )

        return SendMessageResponse(message=message)
