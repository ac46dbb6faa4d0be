from __future__ import annotations

from autohaven.domain.message import Message, NewMessage
from autohaven.entrypoints.http.dtos.message import MessageResponseDTO, SendMessageDTO
from autohaven.use_cases.send_message import SendMessageRequest


class MessageMapper:
    @staticmethod
    def to_send_request(dto: SendMessageDTO, sender_id: int) -> SendMessageRequest:
        return SendMessageRequest(
            new_message=NewMessage(
                sender_id=sender_id,
                receiver_id=dto.receiver_id,
                car_id=dto.car_id,
                content=dto.content,
            )
        )

    @staticmethod
    def to_message_response(message: Message) -> MessageResponseDTO:
        return MessageResponseDTO(
            id=message.id,
            sender_id=message.sender_id,
            receiver_id=message.receiver_id,
            car_id=message.car_id,
            content=message.content,
            read=message.read,
            created_at=message.created_at,
        )

    @staticmethod
    def to_message_list_response(messages: list[Message]) -> list[MessageResponseDTO]:
        return [MessageMapper.to_message_response(message) for message in messages]
